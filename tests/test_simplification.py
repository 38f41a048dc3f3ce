import pytest

from pbmvector.geometry import Point, Segment
from pbmvector.simplification import douglas_peucker, simplify_contours

SQUARE = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)]
WAVY = [
    Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1), Point(3, 1),
    Point(3, 2), Point(4, 2), Point(4, 3), Point(5, 3), Point(5, 4),
    Point(4, 4), Point(3, 4), Point(2, 3), Point(1, 3), Point(0, 2),
    Point(0, 1), Point(0, 0),
]


def test_collinear_points_collapse_to_start():
    line = [Point(i, 0) for i in range(6)]
    assert douglas_peucker(line, 0, len(line) - 1, 0.0) == [line[0]]


def test_zero_threshold_keeps_square():
    assert simplify_contours([SQUARE], 0.0) == [SQUARE]


def test_large_threshold_keeps_only_start():
    assert simplify_contours([SQUARE], 10.0) == [[SQUARE[0], SQUARE[0]]]


@pytest.mark.parametrize("threshold", [0.0, 0.5, 1.0, 2.0])
def test_result_is_closed_subsequence(threshold):
    [simplified] = simplify_contours([WAVY], threshold)
    assert simplified[0] == WAVY[0]
    assert simplified[-1] == WAVY[0]
    positions = iter(WAVY)
    assert all(any(p == q for q in positions) for p in simplified[:-1])


@pytest.mark.parametrize("threshold", [0.5, 1.0, 2.0])
def test_every_point_stays_within_threshold(threshold):
    [simplified] = simplify_contours([WAVY], threshold)
    segments = [Segment(a, b) for a, b in zip(simplified, simplified[1:])]
    for p in WAVY:
        assert min(s.distance_to(p) for s in segments) <= threshold + 1e-9


def test_larger_threshold_never_adds_points():
    counts = [len(simplify_contours([WAVY], d)[0]) for d in (0.0, 0.5, 1.0, 3.0)]
    assert counts == sorted(counts, reverse=True)


def test_contour_count_is_preserved():
    result = simplify_contours([SQUARE, WAVY], 1.0)
    assert len(result) == 2


def test_empty_contour_is_rejected():
    with pytest.raises(ValueError):
        simplify_contours([[]], 1.0)


def test_reversed_range_is_rejected():
    with pytest.raises(ValueError):
        douglas_peucker(SQUARE, 3, 1, 1.0)


def test_out_of_range_is_rejected():
    with pytest.raises(IndexError):
        douglas_peucker(SQUARE, 0, len(SQUARE), 1.0)