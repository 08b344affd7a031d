"""Numba-accelerated line drawing kernels for batches of segments.

The kernels produce exactly the same cells, in the same order, as the lazy
iterators in this package (:class:`~line_drawing.bresenham.Bresenham`,
:class:`~line_drawing.bresenham_3d.Bresenham3d` and
:class:`~line_drawing.walk_voxels.WalkVoxels`), but write them into
preallocated numpy arrays. Use them when many segments must be rasterized at
once and laziness is not needed.

Limitations:
- Only works on CPU (Numba does not support GPU).
- All inputs must be numpy arrays (or convertible to them).
- Coordinates must fit in ``DEFAULT_NP_INT_DTYPE``; intermediate error terms
  are up to four times the largest coordinate delta.
"""

import math
import numpy as np
from typing import List
from numba import njit

# =======================
# NUMBA-ACCELERATED CORE
# =======================

DEFAULT_NP_INT_DTYPE = np.int64


@njit
def bresenham_numba_core(start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """
    Numba-accelerated Bresenham line for a single 2D or 3D integer segment.
    Returns an array of grid points (shape: [num_points, D]).

    Args:
        start: Integer start point [D]
        end: Integer end point [D]
    """
    dims = start.shape[0]
    lengths = np.empty(dims, dtype=DEFAULT_NP_INT_DTYPE)
    signs = np.empty(dims, dtype=DEFAULT_NP_INT_DTYPE)
    driving = 0
    for i in range(dims):
        delta = end[i] - start[i]
        lengths[i] = abs(delta)
        signs[i] = 1 if delta > 0 else (-1 if delta < 0 else 0)
        if lengths[i] > lengths[driving]:
            driving = i
    longest = lengths[driving]

    point = start.astype(DEFAULT_NP_INT_DTYPE)
    errors = np.zeros(dims, dtype=DEFAULT_NP_INT_DTYPE)
    traversed = np.empty((longest + 1, dims), dtype=DEFAULT_NP_INT_DTYPE)
    for step in range(longest + 1):
        traversed[step, :] = point
        point[driving] += signs[driving]
        for i in range(dims):
            if i == driving:
                continue
            errors[i] += 2 * lengths[i]
            # Half-way ties round toward +inf, as in the pure Python version
            if errors[i] > longest or (errors[i] == longest and signs[i] > 0):
                point[i] += signs[i]
                errors[i] -= 2 * longest
    return traversed


@njit
def walk_voxels_numba_core(start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """
    Numba-accelerated orthogonal voxel walk for a single 3D segment.
    Returns an array of traversed voxel indices (shape: [num_steps, 3]).

    Args:
        start: Start point in grid coordinates [3]
        end: End point in grid coordinates [3]
    """
    voxel = np.empty(3, dtype=DEFAULT_NP_INT_DTYPE)
    signs = np.empty(3, dtype=DEFAULT_NP_INT_DTYPE)
    remaining = np.empty(3, dtype=DEFAULT_NP_INT_DTYPE)
    lengths = np.empty(3, dtype=np.float64)
    for i in range(3):
        voxel[i] = math.floor(start[i] + 0.5)
        diff = math.floor(end[i] + 0.5) - voxel[i]
        signs[i] = 1 if diff > 0 else (-1 if diff < 0 else 0)
        remaining[i] = abs(diff)
        length = abs(end[i] - start[i])
        lengths[i] = length if length != 0.0 else 1.0

    scale = np.empty(3, dtype=np.float64)
    scale[0] = lengths[1] * lengths[2]
    scale[1] = lengths[0] * lengths[2]
    scale[2] = lengths[0] * lengths[1]
    errors = np.empty(3, dtype=np.float64)
    for i in range(3):
        errors[i] = abs(voxel[i] + 0.5 * signs[i] - start[i]) * scale[i]

    # Tie-break priority: positive axes in x, y, z order, then the rest in z, y, x
    order = np.empty(3, dtype=DEFAULT_NP_INT_DTYPE)
    n = 0
    for i in range(3):
        if signs[i] > 0:
            order[n] = i
            n += 1
    for i in range(2, -1, -1):
        if signs[i] <= 0:
            order[n] = i
            n += 1

    num_steps = remaining[0] + remaining[1] + remaining[2]
    traversed = np.empty((num_steps + 1, 3), dtype=DEFAULT_NP_INT_DTYPE)
    traversed[0, :] = voxel
    for step in range(1, num_steps + 1):
        axis = -1
        for k in range(3):
            i = order[k]
            if remaining[i] > 0 and (axis < 0 or errors[i] < errors[axis]):
                axis = i
        voxel[axis] += signs[axis]
        remaining[axis] -= 1
        errors[axis] += scale[axis]
        traversed[step, :] = voxel
    return traversed


# =======================
# WRAPPERS FOR BATCH INPUT
# =======================


def _prepare_batch(
    starts: np.ndarray, ends: np.ndarray, dims: tuple, dtype
) -> tuple:
    """Broadcast ``starts`` against ``ends`` and check shapes."""
    starts = np.asarray(starts)
    ends = np.asarray(ends)
    if starts.ndim == 1:
        starts = np.expand_dims(starts, 0)
    if ends.ndim == 1:
        ends = np.expand_dims(ends, 0)
    if starts.ndim != 2 or starts.shape[-1] not in dims:
        raise ValueError(
            f"starts must have shape [N, D] with D in {dims}, got {starts.shape}"
        )
    if ends.ndim != 2 or ends.shape[-1] != starts.shape[-1]:
        raise ValueError(
            f"ends must have shape [N, {starts.shape[-1]}], got {ends.shape}"
        )
    # A single start or end point fans out to every point on the other side
    if starts.shape[0] == 1 and ends.shape[0] > 1:
        starts = np.broadcast_to(starts, ends.shape)
    elif ends.shape[0] == 1 and starts.shape[0] > 1:
        ends = np.broadcast_to(ends, starts.shape)
    if starts.shape[0] != ends.shape[0]:
        raise ValueError(
            f"Number of segments must match, got {starts.shape[0]} starts "
            f"and {ends.shape[0]} ends"
        )
    if np.issubdtype(dtype, np.integer):
        if not (
            np.issubdtype(starts.dtype, np.integer)
            and np.issubdtype(ends.dtype, np.integer)
        ):
            raise ValueError("Bresenham endpoints must be integer arrays")
    elif not (np.all(np.isfinite(starts)) and np.all(np.isfinite(ends))):
        raise ValueError("Segment endpoints must be finite")
    return (
        np.ascontiguousarray(starts, dtype=dtype),
        np.ascontiguousarray(ends, dtype=dtype),
    )


def bresenham_numba(starts: np.ndarray, ends: np.ndarray) -> List[np.ndarray]:
    """
    Bresenham lines for a batch of 2D or 3D integer segments.

    Args:
        starts: Start points [N, D] or [D] (broadcast to every end), D=2 or 3
        ends: End points [N, D] or [D] (broadcast to every start)

    Returns:
        List of numpy arrays (each [num_points, D]) for each segment.
    """
    starts, ends = _prepare_batch(starts, ends, (2, 3), DEFAULT_NP_INT_DTYPE)
    results = []
    for i in range(starts.shape[0]):
        results.append(bresenham_numba_core(starts[i], ends[i]))
    return results


def walk_voxels_numba(starts: np.ndarray, ends: np.ndarray) -> List[np.ndarray]:
    """
    Orthogonal voxel walks for a batch of 3D segments.

    Args:
        starts: Start points in grid coordinates [N, 3] or [3] (broadcast to every end)
        ends: End points in grid coordinates [N, 3] or [3] (broadcast to every start)

    Returns:
        List of numpy arrays (each [num_steps, 3]) for each segment.
    """
    starts, ends = _prepare_batch(starts, ends, (3,), np.float64)
    results = []
    for i in range(starts.shape[0]):
        results.append(walk_voxels_numba_core(starts[i], ends[i]))
    return results
