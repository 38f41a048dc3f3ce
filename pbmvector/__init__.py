"""Contour simplification into segments or Bezier curves, with EPS output."""

__version__ = "0.1.0"
__all__ = ["geometry", "bezier", "simplification", "postscript"]