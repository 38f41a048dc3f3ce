"""Quadratic and cubic Bezier curves and contour simplification with them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from .geometry import Point

_Curve = TypeVar("_Curve")


@dataclass(frozen=True)
class Bezier2:
    """A quadratic Bezier curve given by its three control points."""

    c0: Point
    c1: Point
    c2: Point

    def point_at(self, t: float) -> Point:
        """The point C(t) of the curve, for 0 <= t <= 1."""
        a = self.c0 * ((1 - t) * (1 - t))
        b = self.c1 * (2 * (1 - t) * t)
        c = self.c2 * (t * t)
        return a + (b + c)

    def to_cubic(self) -> Bezier3:
        """The same curve expressed as a cubic Bezier curve."""
        third = 1.0 / 3
        return Bezier3(
            self.c0,
            (self.c0 + self.c1 * 2.0) * third,
            (self.c2 + self.c1 * 2.0) * third,
            self.c2,
        )


@dataclass(frozen=True)
class Bezier3:
    """A cubic Bezier curve given by its four control points."""

    c0: Point
    c1: Point
    c2: Point
    c3: Point

    def point_at(self, t: float) -> Point:
        """The point C(t) of the curve, for 0 <= t <= 1."""
        a = self.c0 * ((1 - t) * (1 - t) * (1 - t))
        b = self.c1 * (3 * (1 - t) * (1 - t) * t)
        c = self.c2 * (3 * (1 - t) * t * t)
        d = self.c3 * (t * t * t)
        return a + (b + (c + d))


def _check_range(points: Sequence[Point], j1: int, j2: int) -> None:
    if j2 < j1:
        raise ValueError(f"invalid index range: {j1}..{j2}")
    if j1 < 0 or j2 >= len(points):
        raise IndexError(f"index range {j1}..{j2} outside of {len(points)} points")


def approx_bezier2(points: Sequence[Point], j1: int, j2: int) -> Bezier2:
    """Least-squares quadratic Bezier fit of the polyline points[j1..j2]."""
    _check_range(points, j1, j2)
    n = float(j2 - j1)
    start, end = points[j1], points[j2]
    if n == 1:
        return Bezier2(start, (start + end) * 0.5, end)
    a = (3 * n) / (n * n - 1)
    b = (1 - 2 * n) / (2 * n + 2)
    total = Point(0.0, 0.0)
    for p in points[j1 + 1 : j2]:
        total = total + p
    return Bezier2(start, total * a + (start + end) * b, end)


def cubic_weight(k: float, n: float) -> float:
    """Weight of the k-th interior point in the cubic Bezier fit of n segments."""
    return 6 * k**4 - 8 * n * k**3 + 6 * k * k - 4 * n * k + n**4 - n * n


def approx_bezier3(points: Sequence[Point], j1: int, j2: int) -> Bezier3:
    """Least-squares cubic Bezier fit of the polyline points[j1..j2]."""
    _check_range(points, j1, j2)
    n = float(j2 - j1)
    if n < 3:
        return approx_bezier2(points, j1, j2).to_cubic()

    denominator = 3 * (n + 2) * (3 * n * n + 1)
    a = (-15 * n**3 + 5 * n * n + 2 * n + 4) / denominator
    b = (10 * n**3 - 15 * n * n + n + 2) / denominator
    lam = (70 * n) / (3 * (n * n - 1) * (n * n - 4) * (3 * n * n + 1))

    start, end = points[j1], points[j2]
    sum1 = Point(0.0, 0.0)
    sum2 = Point(0.0, 0.0)
    for i, p in enumerate(points[j1 + 1 : j2], start=1):
        sum1 = sum1 + p * cubic_weight(float(i), n)
        sum2 = sum2 + p * cubic_weight(n - i, n)

    c1 = start * a + (sum1 * lam + end * b)
    c2 = start * b + (sum2 * lam + end * a)
    return Bezier3(start, c1, c2, end)


def _simplify(
    points: Sequence[Point],
    j1: int,
    j2: int,
    threshold: float,
    fit: Callable[[Sequence[Point], int, int], _Curve],
) -> list[_Curve]:
    _check_range(points, j1, j2)
    curves: list[_Curve] = []
    pending = [(j1, j2)]
    while pending:
        lo, hi = pending.pop()
        curve = fit(points, lo, hi)
        n = float(hi - lo)
        dmax = 0.0
        k = lo
        for j in range(lo + 1, hi + 1):
            dj = points[j].distance(curve.point_at((j - lo) / n))  # type: ignore[attr-defined]
            if dmax < dj:
                dmax = dj
                k = j
        if dmax <= threshold:
            curves.append(curve)
        else:
            pending.append((k, hi))
            pending.append((lo, k))
    return curves


def simplify_bezier2(
    points: Sequence[Point], j1: int, j2: int, threshold: float
) -> list[Bezier2]:
    """Douglas-Peucker simplification of points[j1..j2] into quadratic curves."""
    return _simplify(points, j1, j2, threshold, approx_bezier2)


def simplify_bezier3(
    points: Sequence[Point], j1: int, j2: int, threshold: float
) -> list[Bezier3]:
    """Douglas-Peucker simplification of points[j1..j2] into cubic curves."""
    return _simplify(points, j1, j2, threshold, approx_bezier3)


def _as_contour(contour: Iterable[Point]) -> list[Point]:
    points = list(contour)
    if not points:
        raise ValueError("cannot simplify an empty contour")
    return points


def simplify_contours_bezier2(
    contours: Iterable[Iterable[Point]], threshold: float
) -> list[list[Bezier2]]:
    """Simplify every contour into a list of quadratic Bezier curves."""
    result = []
    for contour in contours:
        points = _as_contour(contour)
        result.append(simplify_bezier2(points, 0, len(points) - 1, threshold))
    return result


def simplify_contours_bezier3(
    contours: Iterable[Iterable[Point]], threshold: float
) -> list[list[Bezier3]]:
    """Simplify every contour into a list of cubic Bezier curves."""
    result = []
    for contour in contours:
        points = _as_contour(contour)
        result.append(simplify_bezier3(points, 0, len(points) - 1, threshold))
    return result