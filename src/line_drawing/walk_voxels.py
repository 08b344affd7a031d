"""Orthogonal voxel traversal between two real-valued 3D points."""
from typing import Iterator, List, Sequence, Tuple

from line_drawing.points import (
    Coordinate,
    Voxel,
    as_real_point,
    round_half_up,
    sign,
    tie_break_order,
)
from line_drawing.steps import steps


class WalkVoxels:
    """Walk between two voxels, taking orthogonal steps and visiting every voxel in between.

    A DDA over the voxel grid: for each axis the distance to the next voxel
    boundary is kept as an accumulator, and the axis whose boundary comes
    first along the segment steps next. Accumulators are scaled by the product
    of the other two axis lengths so crossing times compare without division.
    Simultaneous crossings step one axis at a time, in
    :func:`~line_drawing.points.tie_break_order`.

    The walk takes exactly as many steps as the L1 distance between the start
    and end voxels, and an axis only steps while it has voxels left, so it
    always ends on the voxel containing ``end``.

    Example::

        >>> list(WalkVoxels((0.472, -1.100, 0.179), (1.114, -0.391, 0.927)))
        [(0, -1, 0), (1, -1, 0), (1, -1, 1), (1, 0, 1)]

    Args:
        start: Start point ``(x, y, z)``; NaN and infinity are rejected.
        end: End point ``(x, y, z)``.
    """

    def __init__(
        self, start: Sequence[Coordinate], end: Sequence[Coordinate]
    ) -> None:
        self.start = as_real_point(start, 3, "start")
        self.end = as_real_point(end, 3, "end")

    def __iter__(self) -> Iterator[Voxel]:
        start, end = self.start, self.end
        voxel = [round_half_up(v) for v in start]
        target = [round_half_up(v) for v in end]
        signs = [sign(t - v) for v, t in zip(voxel, target)]
        remaining = [abs(t - v) for v, t in zip(voxel, target)]

        # Stationary axes never step; a unit length keeps the scales non-zero.
        lengths = [abs(e - s) or 1 for s, e in zip(start, end)]
        scale = [
            lengths[1] * lengths[2],
            lengths[0] * lengths[2],
            lengths[0] * lengths[1],
        ]
        errors = [
            abs(v + 0.5 * s - p) * k for v, s, p, k in zip(voxel, signs, start, scale)
        ]
        order = tie_break_order(signs)

        yield voxel[0], voxel[1], voxel[2]
        for _ in range(sum(remaining)):
            axis = min((a for a in order if remaining[a]), key=lambda a: errors[a])
            voxel[axis] += signs[axis]
            remaining[axis] -= 1
            errors[axis] += scale[axis]
            yield voxel[0], voxel[1], voxel[2]

    def steps(self) -> Iterator[Tuple[Voxel, Voxel]]:
        return steps(self)


def walk_voxels(start: Sequence[Coordinate], end: Sequence[Coordinate]) -> List[Voxel]:
    """Collect the voxels of :class:`WalkVoxels` into a list."""
    return list(WalkVoxels(start, end))
