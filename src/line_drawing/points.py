"""Point types, input validation and rounding shared by the line drawing algorithms.

Grid convention: cell ``i`` covers ``[i - 0.5, i + 0.5)`` on every axis, so
integer coordinates are cell centers and a real coordinate ``v`` belongs to
cell ``floor(v + 0.5)``. Every tie in this package is broken toward positive
infinity, which keeps the output independent of traversal direction.
"""
import math
import operator
from numbers import Real
from typing import List, Sequence, Tuple, Union

Point = Tuple[int, int]
Voxel = Tuple[int, int, int]
Coordinate = Union[int, float]


def _check_dims(point: Sequence, dims: int, name: str) -> None:
    if len(point) != dims:
        raise ValueError(f"{name} must have {dims} dimensions, got {len(point)}")


def as_int_point(point: Sequence, dims: int, name: str = "point") -> Tuple[int, ...]:
    """Validate an integer grid point.

    Args:
        point: Any sequence of integral values (Python or numpy ints).
        dims: Expected number of coordinates.
        name: Argument name used in error messages.

    Returns:
        The point as a tuple of Python ints.

    Raises:
        ValueError: If the point has the wrong number of coordinates.
        TypeError: If a coordinate is not integral or is a bool.
    """
    _check_dims(point, dims, name)
    if any(isinstance(value, bool) for value in point):
        raise TypeError(f"{name} must contain integers, got {tuple(point)!r}")
    try:
        return tuple(operator.index(value) for value in point)
    except TypeError:
        raise TypeError(
            f"{name} must contain integers, got {tuple(point)!r}"
        ) from None


def as_real_point(
    point: Sequence, dims: int, name: str = "point"
) -> Tuple[Coordinate, ...]:
    """Validate a real-valued point.

    Integral values are kept as ints so integer input is computed exactly;
    everything else is converted to float and must be finite.

    Raises:
        ValueError: If the point has the wrong number of coordinates or a
            coordinate is NaN or infinite.
        TypeError: If a coordinate is not a real number or is a bool.
    """
    _check_dims(point, dims, name)
    coords: List[Coordinate] = []
    for value in point:
        if isinstance(value, bool):
            raise TypeError(f"{name} must contain real numbers, got {value!r}")
        try:
            coords.append(operator.index(value))
            continue
        except TypeError:
            pass
        if not isinstance(value, Real):
            raise TypeError(f"{name} must contain real numbers, got {value!r}")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {tuple(point)!r}")
        coords.append(value)
    return tuple(coords)


def round_half_up(value: Coordinate) -> int:
    """Index of the cell containing ``value``."""
    return math.floor(value + 0.5)


def round_point(point: Sequence[Coordinate]) -> Tuple[int, ...]:
    return tuple(round_half_up(value) for value in point)


def sign(value: Coordinate) -> int:
    return (value > 0) - (value < 0)


def tie_break_order(signs: Sequence[int]) -> List[int]:
    """Order in which axes step when a segment crosses several boundaries at once.

    Axes moving in the positive direction come first in x, y, z order, then
    the remaining axes in z, y, x order. Walking the same segment backwards
    flips every sign and therefore reverses this order, so both directions
    pass through the same intermediate cells.

    Args:
        signs: Step direction (-1, 0 or 1) of each axis.

    Returns:
        Axis indices, highest priority first.
    """
    dims = len(signs)
    return sorted(
        range(dims), key=lambda axis: axis if signs[axis] > 0 else 2 * dims - 1 - axis
    )
