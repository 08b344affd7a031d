"""Walk the cells of a 2D grid crossed by a segment.

Both walkers take real-valued endpoints and emit every cell whose interior the
segment crosses, from the start cell to the end cell. They only differ when
the segment runs exactly through a lattice corner:

* :class:`WalkGrid` steps through one of the two cells beside the corner,
  one axis at a time.
* :class:`Supercover` emits both cells beside the corner and then the
  diagonal cell.

The cell taken at a corner follows :func:`~line_drawing.points.tie_break_order`
(upward or rightward moves first), which depends only on the geometry of the
segment, so reversing a segment yields the same set of cells.
"""
from typing import Iterator, List, Sequence, Tuple

from line_drawing.points import (
    Coordinate,
    Point,
    as_real_point,
    round_half_up,
    sign,
    tie_break_order,
)
from line_drawing.steps import steps


def _walk(
    start: Sequence[Coordinate], end: Sequence[Coordinate], supercover: bool
) -> Iterator[Point]:
    cell = [round_half_up(v) for v in start]
    target = [round_half_up(v) for v in end]
    signs = [sign(t - c) for c, t in zip(cell, target)]
    remaining = [abs(t - c) for c, t in zip(cell, target)]
    lengths = [abs(e - s) for s, e in zip(start, end)]
    # Distance along each axis from the start point to the next cell boundary.
    gaps = [abs(c + 0.5 * s - p) for c, s, p in zip(cell, signs, start)]
    order = tie_break_order(signs)

    yield cell[0], cell[1]
    while remaining[0] or remaining[1]:
        if remaining[0] and remaining[1]:
            # Boundary crossing times gap / length, compared without division.
            time_x = gaps[0] * lengths[1]
            time_y = gaps[1] * lengths[0]
        else:
            time_x, time_y = (0, 1) if remaining[0] else (1, 0)

        if time_x == time_y:
            if supercover:
                for axis in order:
                    neighbor = list(cell)
                    neighbor[axis] += signs[axis]
                    yield neighbor[0], neighbor[1]
                for axis in order:
                    cell[axis] += signs[axis]
                    remaining[axis] -= 1
                    gaps[axis] += 1
                yield cell[0], cell[1]
            else:
                for axis in order:
                    cell[axis] += signs[axis]
                    remaining[axis] -= 1
                    gaps[axis] += 1
                    yield cell[0], cell[1]
            continue

        axis = 0 if time_x < time_y else 1
        cell[axis] += signs[axis]
        remaining[axis] -= 1
        gaps[axis] += 1
        yield cell[0], cell[1]


class WalkGrid:
    """Walk along a grid taking only orthogonal steps.

    Example::

        >>> list(WalkGrid((0, 0), (5, 3)))
        [(0, 0), (1, 0), (1, 1), (2, 1), (3, 1), (3, 2), (4, 2), (4, 3), (5, 3)]
    """

    def __init__(
        self, start: Sequence[Coordinate], end: Sequence[Coordinate]
    ) -> None:
        self.start = as_real_point(start, 2, "start")
        self.end = as_real_point(end, 2, "end")

    def __iter__(self) -> Iterator[Point]:
        return _walk(self.start, self.end, supercover=False)

    def steps(self) -> Iterator[Tuple[Point, Point]]:
        return steps(self)


class Supercover:
    """Like :class:`WalkGrid`, but emits every cell touched at a corner crossing.

    Use this for conservative collision or visibility queries.

    Example::

        >>> list(Supercover((0, 0), (2, 2)))
        [(0, 0), (1, 0), (0, 1), (1, 1), (2, 1), (1, 2), (2, 2)]
    """

    def __init__(
        self, start: Sequence[Coordinate], end: Sequence[Coordinate]
    ) -> None:
        self.start = as_real_point(start, 2, "start")
        self.end = as_real_point(end, 2, "end")

    def __iter__(self) -> Iterator[Point]:
        return _walk(self.start, self.end, supercover=True)

    def steps(self) -> Iterator[Tuple[Point, Point]]:
        return steps(self)


def walk_grid(start: Sequence[Coordinate], end: Sequence[Coordinate]) -> List[Point]:
    return list(WalkGrid(start, end))


def supercover(start: Sequence[Coordinate], end: Sequence[Coordinate]) -> List[Point]:
    return list(Supercover(start, end))
