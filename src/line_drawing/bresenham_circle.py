"""Bresenham (midpoint) circle rasterization."""
import operator
from typing import Iterator, List, Sequence

from line_drawing.points import Point, as_int_point


class BresenhamCircle:
    """Points of a circle of integer radius around an integer center.

    One octant is computed (x from 0 up to the diagonal, y from the radius
    down) and each of its points is mirrored into all eight octants before
    the next one is computed. Mirrors that coincide on the axes and on the
    diagonal are emitted once, so every point of the circle appears exactly
    once. A radius of 0 yields only the center.

    Example::

        >>> list(BresenhamCircle((0, 0), 1))
        [(0, 1), (1, 0), (0, -1), (-1, 0)]

    Args:
        center: Integer center ``(x, y)``.
        radius: Non-negative integer radius.

    Raises:
        ValueError: If the radius is negative.
        TypeError: If the center or the radius is not integral.
    """

    def __init__(self, center: Sequence[int], radius: int) -> None:
        self.center = as_int_point(center, 2, "center")
        if isinstance(radius, bool):
            raise TypeError(f"radius must be an integer, got {radius!r}")
        try:
            self.radius = operator.index(radius)
        except TypeError:
            raise TypeError(f"radius must be an integer, got {radius!r}") from None
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")

    def __iter__(self) -> Iterator[Point]:
        cx, cy = self.center
        x, y = 0, self.radius
        decision = 1 - self.radius
        while x <= y:
            octants = (
                (cx + x, cy + y),
                (cx + y, cy + x),
                (cx + y, cy - x),
                (cx + x, cy - y),
                (cx - x, cy - y),
                (cx - y, cy - x),
                (cx - y, cy + x),
                (cx - x, cy + y),
            )
            yield from dict.fromkeys(octants)

            if decision < 0:
                decision += 2 * x + 3
            else:
                decision += 2 * (x - y) + 5
                y -= 1
            x += 1


def bresenham_circle(center: Sequence[int], radius: int) -> List[Point]:
    return list(BresenhamCircle(center, radius))
