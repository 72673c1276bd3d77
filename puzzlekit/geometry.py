"""Plane geometry: lines bisecting squares and segment orientation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Square:
    """An axis-aligned square with lower-left corner ``(x, y)``."""

    x: float
    y: float
    edge: float

    def __post_init__(self) -> None:
        if self.edge < 0:
            raise ValueError("edge must not be negative")

    def center(self) -> Point:
        """Return the centre of the square."""
        return Point(self.x + self.edge / 2, self.y + self.edge / 2)

    def bisecting_line(self, other: Square) -> tuple[float, float]:
        """Return ``(slope, intercept)`` of the line cutting both squares in half.

        The line passes through both centres. Raises ValueError when the
        centres coincide or the line would be vertical.
        """
        a = self.center()
        b = other.center()
        if a == b:
            raise ValueError("squares share a centre; any line through it bisects both")
        if a.x == b.x:
            raise ValueError("bisecting line is vertical")
        slope = (a.y - b.y) / (a.x - b.x)
        return slope, a.y - slope * a.x


def _orientation(p1: Point, p2: Point, p3: Point) -> float:
    return (p2.y - p1.y) * (p3.x - p2.x) - (p3.y - p2.y) * (p2.x - p1.x)


def straddles(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Return True unless ``p3`` and ``p4`` lie strictly on one side of line p1-p2."""
    first = _orientation(p1, p2, p3)
    second = _orientation(p1, p2, p4)
    return not ((first > 0 and second > 0) or (first < 0 and second < 0))