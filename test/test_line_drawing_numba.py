"""Test script for the Numba-accelerated batch kernels."""

import numpy as np
import pytest

from line_drawing import bresenham, bresenham_3d, walk_voxels
from line_drawing.line_drawing_numba import (
    DEFAULT_NP_INT_DTYPE,
    bresenham_numba,
    bresenham_numba_core,
    walk_voxels_numba,
    walk_voxels_numba_core,
)


def test_bresenham_core_matches_python():
    """The kernel reproduces the lazy 2D and 3D Bresenham lines."""
    rng = np.random.default_rng(10)
    for _ in range(200):
        a = rng.integers(-30, 30, size=2)
        b = rng.integers(-30, 30, size=2)
        expected = bresenham(a, b)
        result = bresenham_numba_core(a.astype(np.int64), b.astype(np.int64))
        assert result.dtype == DEFAULT_NP_INT_DTYPE
        assert [tuple(p) for p in result.tolist()] == expected, (
            f"Kernel differs on {a} -> {b}"
        )

        a3 = rng.integers(-30, 30, size=3)
        b3 = rng.integers(-30, 30, size=3)
        result3 = bresenham_numba_core(a3.astype(np.int64), b3.astype(np.int64))
        assert [tuple(p) for p in result3.tolist()] == bresenham_3d(a3, b3)


def test_walk_voxels_core_matches_python():
    rng = np.random.default_rng(11)
    for _ in range(200):
        a = rng.uniform(-20.0, 20.0, size=3)
        b = rng.uniform(-20.0, 20.0, size=3)
        result = walk_voxels_numba_core(a, b)
        assert [tuple(v) for v in result.tolist()] == walk_voxels(a, b), (
            f"Kernel differs on {a} -> {b}"
        )

    # Exact ties must be broken the same way
    start = np.array([0.0, 0.0, 0.0])
    end = np.array([5.0, 6.0, 7.0])
    assert [tuple(v) for v in walk_voxels_numba_core(start, end).tolist()] == (
        walk_voxels((0, 0, 0), (5, 6, 7))
    )


def test_batch_wrappers():
    """Batches return one array per segment; a single start or end fans out."""
    starts = np.array([[0, 0], [3, 3]])
    ends = np.array([[5, 3], [3, -2]])
    results = bresenham_numba(starts, ends)
    assert len(results) == 2
    assert results[0].tolist() == [[0, 0], [1, 1], [2, 1], [3, 2], [4, 2], [5, 3]]
    assert results[1].shape == (6, 2)

    ends = np.array([[1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, -3.0]])
    results = walk_voxels_numba(np.zeros(3), ends)
    assert [r.shape[0] for r in results] == [2, 3, 4]
    assert results[2][-1].tolist() == [0, 0, -3]

    # A single end point fans in from every start
    results = walk_voxels_numba(ends, np.zeros(3))
    assert [r.shape[0] for r in results] == [2, 3, 4]
    assert all(r[-1].tolist() == [0, 0, 0] for r in results)
    results = bresenham_numba(np.array([[0, 0], [4, 4]]), np.array([2, 0]))
    assert results[0].tolist() == [[0, 0], [1, 0], [2, 0]]
    assert results[1][-1].tolist() == [2, 0]


def test_degenerate_segments():
    point = np.array([4, -2, 7])
    assert bresenham_numba(point, point)[0].tolist() == [[4, -2, 7]]
    assert walk_voxels_numba(point * 1.0, point * 1.0)[0].tolist() == [[4, -2, 7]]


def test_invalid_batches():
    with pytest.raises(ValueError):
        bresenham_numba(np.zeros((2, 4), dtype=int), np.zeros((2, 4), dtype=int))
    with pytest.raises(ValueError):
        bresenham_numba(np.zeros((2, 2), dtype=int), np.zeros((3, 2), dtype=int))
    with pytest.raises(ValueError):
        bresenham_numba(np.zeros(2), np.ones(2))
    with pytest.raises(ValueError):
        walk_voxels_numba(np.zeros(3), np.array([np.nan, 0.0, 0.0]))
    with pytest.raises(ValueError):
        walk_voxels_numba(np.zeros((1, 2)), np.ones((1, 2)))


if __name__ == "__main__":
    print("Numba Line Drawing Kernel Tests")
    print("=" * 50)
    test_bresenham_core_matches_python()
    test_walk_voxels_core_matches_python()
    test_batch_wrappers()
    test_degenerate_segments()
    test_invalid_batches()
    print("All tests completed successfully!")
