"""3D Bresenham line between two integer voxels."""
from typing import Iterator, List, Sequence, Tuple

from line_drawing.points import Voxel, as_int_point, sign
from line_drawing.steps import steps


class Bresenham3d:
    """Bresenham's algorithm generalized to three integer axes.

    The axis with the greatest absolute delta drives the walk (x, then y, then
    z on ties). Each of the other two axes keeps its own error accumulator
    scaled by twice its delta and steps once the accumulator passes the
    driving delta, so consecutive voxels differ by at most one on every axis.

    Example::

        >>> list(Bresenham3d((0, 0, 0), (5, 6, 7)))
        [(0, 0, 0), (1, 1, 1), (1, 2, 2), (2, 3, 3), (3, 3, 4), (4, 4, 5), (4, 5, 6), (5, 6, 7)]
    """

    def __init__(self, start: Sequence[int], end: Sequence[int]) -> None:
        self.start = as_int_point(start, 3, "start")
        self.end = as_int_point(end, 3, "end")

    def __iter__(self) -> Iterator[Voxel]:
        delta = [e - s for s, e in zip(self.start, self.end)]
        lengths = [abs(d) for d in delta]
        signs = [sign(d) for d in delta]
        longest = max(lengths)
        driving = lengths.index(longest)
        others = [axis for axis in range(3) if axis != driving]

        voxel = list(self.start)
        errors = [0, 0, 0]
        for _ in range(longest + 1):
            yield voxel[0], voxel[1], voxel[2]
            voxel[driving] += signs[driving]
            for axis in others:
                errors[axis] += 2 * lengths[axis]
                if errors[axis] > longest or (
                    errors[axis] == longest and signs[axis] > 0
                ):
                    voxel[axis] += signs[axis]
                    errors[axis] -= 2 * longest

    def steps(self) -> Iterator[Tuple[Voxel, Voxel]]:
        return steps(self)


def bresenham_3d(start: Sequence[int], end: Sequence[int]) -> List[Voxel]:
    """Collect the voxels of :class:`Bresenham3d` into a list."""
    return list(Bresenham3d(start, end))
