# pbmvector

Turn the pixel contours of a black-and-white image into compact vector
outlines and write them out as Encapsulated PostScript.

A contour is a sequence of `Point`s. Given a list of contours, `pbmvector`
can:

- simplify them into fewer straight segments with the Douglas–Peucker
  algorithm (`pbmvector.simplification`);
- fit them with quadratic or cubic Bézier curves, splitting wherever the fit
  strays further than a distance threshold (`pbmvector.bezier`);
- write polygons, contour lists and Bézier outlines to `.eps` files, filled
  or stroked (`pbmvector.postscript`).

## Modules

### `pbmvector.geometry`

- `Point(x, y)` — immutable; supports `p + q`, `p * a`, `a * p` and
  `p.distance(q)`.
- `Vector(x, y)` — `Vector.from_points(a, b)`, `+`, scalar `*`, `dot()` and
  `norm()`.
- `Segment(a, b)` — `projection_parameter(point)` and `distance_to(point)`,
  the shortest distance from a point to the segment (a degenerate segment
  falls back to the distance to its single point).

### `pbmvector.simplification`

- `douglas_peucker(points, j1, j2, threshold)` — simplifies
  `points[j1..j2]` and returns the start point of each kept segment.
- `simplify_contours(contours, threshold)` — simplifies every contour and
  repeats its first point at the end, so each result is a closed polyline.

### `pbmvector.bezier`

- `Bezier2(c0, c1, c2)` and `Bezier3(c0, c1, c2, c3)` with `point_at(t)`;
  `Bezier2.to_cubic()` gives the same curve as a `Bezier3`.
- `approx_bezier2(points, j1, j2)` and `approx_bezier3(points, j1, j2)` —
  least-squares fits of `points[j1..j2]` with fixed end points
  (`approx_bezier3` falls back to a quadratic fit for fewer than three
  segments). `cubic_weight(k, n)` is the weight used by the cubic fit.
- `simplify_bezier2` / `simplify_bezier3(points, j1, j2, threshold)` —
  split the polyline until every point lies within `threshold` of its curve.
- `simplify_contours_bezier2` / `simplify_contours_bezier3(contours,
  threshold)` — the same for every contour.

Index ranges with `j2 < j1` raise `ValueError`; ranges outside the point
sequence raise `IndexError`; an empty contour raises `ValueError`.

### `pbmvector.postscript`

- `FillMode.FILL` / `FillMode.STROKE` (the strings `"fill"` and `"stroke"`
  are accepted too; anything else raises `ValueError`).
- `write_polygon(path, points, width, height, mode)` — one closed polygon.
- `write_contours(path, contours, width, height, mode)` — all contours as one
  path.
- `write_bezier2_contours(...)` / `write_bezier3_contours(...)` — contours
  made of Bézier curves, drawn with `curveto` (quadratic curves are converted
  to cubic ones).
- `output_stem(path)` — the file name without its directory and last
  extension, handy for naming output files.

Coordinates follow image conventions (y grows downward); the writers flip
them against `height` so the output appears upright. `width` and `height`
also give the EPS bounding box.

## Example

```python
from pbmvector.geometry import Point
from pbmvector.simplification import simplify_contours
from pbmvector.bezier import simplify_contours_bezier3
from pbmvector.postscript import FillMode, write_contours, write_bezier3_contours

square = [Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1),
          Point(2, 2), Point(1, 2), Point(0, 2), Point(0, 1), Point(0, 0)]
contours = [square]

polygons = simplify_contours(contours, 0.5)
write_contours("square_simple.eps", polygons, 3, 3, FillMode.FILL)

curves = simplify_contours_bezier3(contours, 0.5)
write_bezier3_contours("square_bezier.eps", curves, 3, 3, FillMode.STROKE)
```

The threshold is the largest distance, in pixels, that a simplified outline
may lie from the original points. A threshold of `0` keeps every corner;
larger values give fewer segments or curves.

## What it does not do

`pbmvector` is a library only. It does not read image files (PBM or any
other format), does not trace contours from pixels — you supply the contours
as lists of points — and has no command-line program.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```