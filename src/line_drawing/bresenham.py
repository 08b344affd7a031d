"""Bresenham's line algorithm on a 2D integer grid."""
from typing import Iterator, List, Sequence, Tuple

from line_drawing.points import Point, as_int_point, sign
from line_drawing.steps import steps


class Bresenham:
    """Integer-only rasterization of the segment between two grid points.

    Both endpoints are included. Every emitted point is the round-half-up of
    the ideal line on the minor axis, so swapping ``start`` and ``end`` yields
    the same points in reverse order.

    Example::

        >>> list(Bresenham((0, 0), (5, 3)))
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)]

    Args:
        start: Integer start point ``(x, y)``.
        end: Integer end point ``(x, y)``.
    """

    def __init__(self, start: Sequence[int], end: Sequence[int]) -> None:
        self.start = as_int_point(start, 2, "start")
        self.end = as_int_point(end, 2, "end")

    def __iter__(self) -> Iterator[Point]:
        delta = [e - s for s, e in zip(self.start, self.end)]
        primary = 0 if abs(delta[0]) >= abs(delta[1]) else 1
        secondary = 1 - primary

        len_primary = abs(delta[primary])
        len_secondary = abs(delta[secondary])
        step_primary = sign(delta[primary])
        step_secondary = sign(delta[secondary])

        point = list(self.start)
        error = 0
        for _ in range(len_primary + 1):
            yield point[0], point[1]
            point[primary] += step_primary
            error += 2 * len_secondary
            # Half-way ties round toward +inf on the secondary axis.
            if error > len_primary or (error == len_primary and step_secondary > 0):
                point[secondary] += step_secondary
                error -= 2 * len_primary

    def steps(self) -> Iterator[Tuple[Point, Point]]:
        return steps(self)


def bresenham(start: Sequence[int], end: Sequence[int]) -> List[Point]:
    """Collect the points of :class:`Bresenham` into a list."""
    return list(Bresenham(start, end))
