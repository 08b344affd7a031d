"""The mid-point line drawing algorithm."""
from typing import Iterator, List, Sequence, Tuple

from line_drawing.points import Coordinate, Point, as_real_point, round_half_up, sign
from line_drawing.steps import steps


class Midpoint:
    """Mid-point line rasterization.

    Unlike :class:`~line_drawing.bresenham.Bresenham` this works on the
    implicit line equation and accepts real-valued endpoints: the walk starts
    in the cell containing ``start`` and ends in the cell containing ``end``,
    while the decision variable tracks the ideal line through the real points.
    For integer endpoints the output is identical to Bresenham's.

    With real endpoints the line sampled at the last column center can round
    to a different cell than ``end`` itself. The secondary coordinate is then
    kept within reach of the end cell (and never past it), so the walk still
    finishes on ``round(end)`` using king moves. When the start and end cells
    are one row further apart than there are columns between them, the first
    column holds two cells.

    Example::

        >>> list(Midpoint((0.2, 0.02), (2.8, 7.7)))
        [(0, 0), (1, 1), (1, 2), (1, 3), (2, 4), (2, 5), (2, 6), (3, 7), (3, 8)]
    """

    def __init__(
        self, start: Sequence[Coordinate], end: Sequence[Coordinate]
    ) -> None:
        self.start = as_real_point(start, 2, "start")
        self.end = as_real_point(end, 2, "end")

    def __iter__(self) -> Iterator[Point]:
        start, end = self.start, self.end
        delta = [e - s for s, e in zip(start, end)]
        primary = 0 if abs(delta[0]) >= abs(delta[1]) else 1
        secondary = 1 - primary

        len_primary = abs(delta[primary])
        len_secondary = abs(delta[secondary])
        step_primary = 1 if delta[primary] >= 0 else -1
        step_secondary = sign(delta[secondary])

        cell = [round_half_up(v) for v in start]
        target = round_half_up(end[secondary])
        count = abs(round_half_up(end[primary]) - cell[primary])

        # Twice the signed distance, scaled by len_primary, from the midpoint
        # between the two candidate cells of the next column to the line.
        decision = (
            2 * step_secondary * len_primary * (start[secondary] - cell[secondary])
            + 2 * len_secondary * (1 + step_primary * (cell[primary] - start[primary]))
            - len_primary
        )

        for i in range(count + 1):
            # Cells still to go towards the target row, capped by the columns left.
            gap = max(min((target - cell[secondary]) * step_secondary, count - i), 0)
            point = [0, 0]
            point[primary] = cell[primary]
            point[secondary] = target - step_secondary * gap
            if i == 0 and point[secondary] != cell[secondary]:
                yield cell[0], cell[1]
            yield point[0], point[1]

            if decision > 0 or (decision == 0 and step_secondary > 0):
                cell[secondary] += step_secondary
                decision -= 2 * len_primary
            cell[primary] += step_primary
            decision += 2 * len_secondary

    def steps(self) -> Iterator[Tuple[Point, Point]]:
        return steps(self)


def midpoint(start: Sequence[Coordinate], end: Sequence[Coordinate]) -> List[Point]:
    return list(Midpoint(start, end))
