"""Xiaolin Wu's anti-aliased line algorithm."""
import math
from typing import Iterator, List, Sequence, Tuple

from line_drawing.points import Coordinate, Point, as_real_point, round_half_up, round_point
from line_drawing.steps import steps

CoverageSample = Tuple[Point, float]


def _column_pixels(y: float) -> List[Tuple[int, float]]:
    """Minor-axis pixels straddling ``y``, lower pixel first."""
    base = math.floor(y)
    frac = y - base
    if frac == 0:
        return [(base, 1.0)]
    return [(base, 1.0 - frac), (base + 1, frac)]


class XiaolinWu:
    """Anti-aliased line with per-pixel coverage.

    The line is walked along its main axis (the one with the larger absolute
    delta) from ``start`` to ``end``. Each column yields the two pixels
    straddling the line on the minor axis with intensities ``1 - frac`` and
    ``frac``, which always sum to 1. A column where the line passes exactly
    through a pixel center yields that pixel alone at full intensity.

    The two end columns are snapped to the rounded endpoints on the main axis
    and weighted by the fractional part of the endpoint's own minor
    coordinate, not by the line's value at the rounded column. Unlike the
    textbook algorithm, end columns are not scaled down by how much of the
    column the segment covers, so every column sums to 1. The pixel nearest
    the endpoint is emitted first in the start column and last in the end
    column, so the sequence starts at the rounded start and finishes at the
    rounded end.

    If both endpoints fall in the same column the line is sampled once at the
    midpoint of the segment, ordered from the start pixel to the end pixel.
    When both endpoints round to the same pixel this is that pixel at
    intensity 1.0.

    Example::

        >>> list(XiaolinWu((0, 0), (4, 2)))
        [((0, 0), 1.0), ((1, 0), 0.5), ((1, 1), 0.5), ((2, 1), 1.0), ((3, 1), 0.5), ((3, 2), 0.5), ((4, 2), 1.0)]
    """

    def __init__(
        self, start: Sequence[Coordinate], end: Sequence[Coordinate]
    ) -> None:
        self.start = as_real_point(start, 2, "start")
        self.end = as_real_point(end, 2, "end")

    def __iter__(self) -> Iterator[CoverageSample]:
        (x0, y0), (x1, y1) = self.start, self.end
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0, x1, y1 = y0, x0, y1, x1

        first = round_half_up(x0)
        last = round_half_up(x1)
        if first == last:
            if round_point(self.start) == round_point(self.end):
                yield round_point(self.start), 1.0
                return
            # The endpoints are in neighbouring pixels of a single column.
            pixels = _column_pixels((y0 + y1) / 2)
            if pixels[0][0] != round_half_up(y0):
                pixels.reverse()
            for minor, intensity in pixels:
                yield ((minor, first) if steep else (first, minor)), intensity
            return

        gradient = (y1 - y0) / (x1 - x0)
        direction = 1 if last > first else -1
        for x in range(first, last + direction, direction):
            if x == first:
                y = y0
            elif x == last:
                y = y1
            else:
                y = y0 + (x - x0) * gradient

            pixels = _column_pixels(y)
            if len(pixels) == 2:
                nearest_first = pixels[1][1] >= 0.5
                if (x == first and nearest_first) or (x == last and not nearest_first):
                    pixels.reverse()

            for minor, intensity in pixels:
                yield ((minor, x) if steep else (x, minor)), intensity

    def steps(self) -> Iterator[Tuple[CoverageSample, CoverageSample]]:
        return steps(self)


def xiaolin_wu(
    start: Sequence[Coordinate], end: Sequence[Coordinate]
) -> List[CoverageSample]:
    return list(XiaolinWu(start, end))
