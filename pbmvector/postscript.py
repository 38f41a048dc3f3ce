"""Encapsulated PostScript output of contours and Bezier curves."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from .bezier import Bezier2, Bezier3
from .geometry import Point


class FillMode(str, Enum):
    """How the drawn paths are rendered."""

    FILL = "fill"
    STROKE = "stroke"


def output_stem(path: str | os.PathLike[str]) -> str:
    """The file name of ``path`` without its directory and last extension."""
    name = os.fspath(path).rsplit("/", 1)[-1]
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def _header(width: int, height: int) -> Iterator[str]:
    yield "%!PS-Adobe-3.0 EPSF-3.0\n"
    yield f"%%BoundingBox: 0 0 {int(width)} {int(height)}\n\n"


def _footer(mode: FillMode | str) -> Iterator[str]:
    if FillMode(mode) is FillMode.FILL:
        yield "fill\n\n"
    else:
        yield "0 0 0 setrgbcolor 0 setlinewidth\n"
        yield "stroke\n\n"


def _coords(point: Point, height: float) -> str:
    return f"{point.x:f} {height - point.y:f}"


def _non_empty(items: Iterable, what: str) -> list:
    result = list(items)
    if not result:
        raise ValueError(f"cannot draw an empty {what}")
    return result


def _write(path: str | os.PathLike[str], parts: Iterable[str]) -> None:
    text = "".join(parts)
    with open(path, "w", encoding="ascii") as handle:
        handle.write(text)


def write_polygon(
    path: str | os.PathLike[str],
    points: Sequence[Point],
    width: int,
    height: int,
    mode: FillMode | str,
) -> None:
    """Write a single closed polygon through ``points`` to an EPS file."""
    pts = _non_empty(points, "polygon")
    mode = FillMode(mode)

    def parts() -> Iterator[str]:
        yield from _header(width, height)
        first, *rest = pts
        yield f"{_coords(first, height)} moveto\n"
        for p in rest:
            yield f"{_coords(p, height)} lineto\n"
        yield f"{_coords(first, height)} lineto\n"
        yield from _footer(mode)
        yield "showpage"

    _write(path, parts())


def write_contours(
    path: str | os.PathLike[str],
    contours: Iterable[Iterable[Point]],
    width: int,
    height: int,
    mode: FillMode | str,
) -> None:
    """Write every polygonal contour as one path to an EPS file."""
    shapes = [_non_empty(contour, "contour") for contour in contours]
    mode = FillMode(mode)

    def parts() -> Iterator[str]:
        yield from _header(width, height)
        for first, *rest in shapes:
            yield f"{_coords(first, height)} moveto\n"
            for p in rest:
                yield f"{_coords(p, height)} lineto\n"
        yield from _footer(mode)
        yield "showpage\n"

    _write(path, parts())


def _write_cubics(
    path: str | os.PathLike[str],
    contours: list[list[Bezier3]],
    width: int,
    height: int,
    mode: FillMode,
) -> None:
    def parts() -> Iterator[str]:
        yield from _header(width, height)
        for curves in contours:
            yield f"{_coords(curves[0].c0, height)} moveto\n"
            for c in curves:
                yield (
                    f"{_coords(c.c1, height)} {_coords(c.c2, height)} "
                    f"{_coords(c.c3, height)} curveto\n"
                )
        yield from _footer(mode)
        yield "showpage\n"

    _write(path, parts())


def write_bezier2_contours(
    path: str | os.PathLike[str],
    contours: Iterable[Iterable[Bezier2]],
    width: int,
    height: int,
    mode: FillMode | str,
) -> None:
    """Write contours made of quadratic Bezier curves to an EPS file."""
    cubics = [
        [curve.to_cubic() for curve in _non_empty(contour, "contour")]
        for contour in contours
    ]
    _write_cubics(path, cubics, width, height, FillMode(mode))


def write_bezier3_contours(
    path: str | os.PathLike[str],
    contours: Iterable[Iterable[Bezier3]],
    width: int,
    height: int,
    mode: FillMode | str,
) -> None:
    """Write contours made of cubic Bezier curves to an EPS file."""
    cubics = [_non_empty(contour, "contour") for contour in contours]
    _write_cubics(path, cubics, width, height, FillMode(mode))