import pytest

from puzzlekit.geometry import Point, Square, straddles


def test_center_of_square():
    assert Square(2, 3, 3).center() == Point(3.5, 4.5)


def test_bisecting_line_source_example():
    slope, intercept = Square(2, 3, 3).bisecting_line(Square(5, 6, 3))
    assert (slope, intercept) == pytest.approx((1.0, 1.0))


def test_bisecting_line_passes_through_both_centres():
    first = Square(0, 0, 4)
    second = Square(10, -3, 2)
    slope, intercept = first.bisecting_line(second)
    for square in (first, second):
        centre = square.center()
        assert centre.y == pytest.approx(slope * centre.x + intercept)


def test_bisecting_line_is_symmetric():
    first = Square(1, 1, 2)
    second = Square(7, 4, 6)
    assert first.bisecting_line(second) == pytest.approx(second.bisecting_line(first))


def test_bisecting_line_same_centre_raises():
    with pytest.raises(ValueError):
        Square(0, 0, 4).bisecting_line(Square(1, 1, 2))


def test_bisecting_line_vertical_raises():
    with pytest.raises(ValueError):
        Square(0, 0, 2).bisecting_line(Square(0, 5, 2))


def test_negative_edge_rejected():
    with pytest.raises(ValueError):
        Square(0, 0, -1)


def test_straddles_opposite_sides():
    a, b = Point(0, 0), Point(1, 0)
    assert straddles(a, b, Point(0, 1), Point(0, -1)) is True


def test_straddles_same_side():
    a, b = Point(0, 0), Point(1, 0)
    assert straddles(a, b, Point(0, 1), Point(2, 3)) is False
    assert straddles(a, b, Point(0, -1), Point(5, -2)) is False


def test_straddles_point_on_line():
    a, b = Point(0, 0), Point(1, 0)
    assert straddles(a, b, Point(3, 0), Point(2, 3)) is True


def test_straddles_source_points():
    a, b, c, d = Point(1, 2), Point(3, 4), Point(2, 6), Point(5, 4)
    assert straddles(a, b, c, d) is True
    assert straddles(c, d, a, b) is False


def test_straddles_independent_of_point_order():
    a, b = Point(0, 0), Point(2, 2)
    p, q = Point(0, 3), Point(3, 0)
    assert straddles(a, b, p, q) == straddles(a, b, q, p)
    assert straddles(a, b, p, q) == straddles(b, a, p, q)