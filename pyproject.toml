[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pbmvector"
version = "0.1.0"
description = "Simplify point contours into polygons or Bezier curves and export them as Encapsulated PostScript"
requires-python = ">=3.10"
dependencies = []
keywords = ["vectorization", "bezier", "douglas-peucker", "postscript", "eps", "contours"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pbmvector"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
