"""Douglas-Peucker simplification of polygonal contours."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .geometry import Point, Segment


def douglas_peucker(
    points: Sequence[Point], j1: int, j2: int, threshold: float
) -> list[Point]:
    """Simplify points[j1..j2] into segments; return each segment's start point."""
    if j2 < j1:
        raise ValueError(f"invalid index range: {j1}..{j2}")
    if j1 < 0 or j2 >= len(points):
        raise IndexError(f"index range {j1}..{j2} outside of {len(points)} points")

    result: list[Point] = []
    pending = [(j1, j2)]
    while pending:
        lo, hi = pending.pop()
        segment = Segment(points[lo], points[hi])
        dmax = 0.0
        k = lo
        for j in range(lo + 1, hi + 1):
            dj = segment.distance_to(points[j])
            if dmax < dj:
                dmax = dj
                k = j
        if dmax <= threshold:
            result.append(segment.a)
        else:
            pending.append((k, hi))
            pending.append((lo, k))
    return result


def simplify_contours(
    contours: Iterable[Iterable[Point]], threshold: float
) -> list[list[Point]]:
    """Simplify every closed contour, repeating its first point at the end."""
    result = []
    for contour in contours:
        points = list(contour)
        if not points:
            raise ValueError("cannot simplify an empty contour")
        simplified = douglas_peucker(points, 0, len(points) - 1, threshold)
        simplified.append(points[0])
        result.append(simplified)
    return result