"""Tests for WalkGrid and Supercover."""

import math

import numpy as np
import pytest

from line_drawing import Supercover, WalkGrid, supercover, walk_grid


def test_walk_grid_pinned_paths():
    assert walk_grid((0, 0), (5, 3)) == [
        (0, 0), (1, 0), (1, 1), (2, 1), (3, 1), (3, 2), (4, 2), (4, 3), (5, 3)
    ]
    assert walk_grid((0.0, 0.0), (2.0, 2.0)) == [
        (0, 0), (1, 0), (1, 1), (2, 1), (2, 2)
    ]


def test_supercover_pinned_path():
    """Every cell touched at a corner crossing is included."""
    cells = supercover((0.0, 0.0), (2.0, 2.0))
    assert cells == [(0, 0), (1, 0), (0, 1), (1, 1), (2, 1), (1, 2), (2, 2)]

    thin = walk_grid((0.0, 0.0), (2.0, 2.0))
    assert ((0, 1) in thin) != ((1, 0) in thin), (
        "WalkGrid must take exactly one cell beside the corner"
    )


def test_corner_choice_is_direction_independent():
    """Downward walks through a corner take the same cell as upward ones."""
    assert walk_grid((2, 2), (0, 0)) == walk_grid((0, 0), (2, 2))[::-1]
    assert walk_grid((0, 2), (2, 0)) == walk_grid((2, 0), (0, 2))[::-1]


def test_axis_aligned():
    for walk in (walk_grid, supercover):
        assert walk((0, 0), (0, 5)) == [(0, i) for i in range(6)]
        assert walk((0, 0), (5, 0)) == [(i, 0) for i in range(6)]
        assert walk((0, 0), (-3, 0)) == [(-i, 0) for i in range(4)]


def test_real_endpoints():
    assert walk_grid((0.2, 0.3), (2.7, 1.1)) == [
        (0, 0), (1, 0), (1, 1), (2, 1), (3, 1)
    ]
    assert walk_grid((0.2, 0.3), (0.4, 0.1)) == [(0, 0)]


def test_supercover_matches_walk_grid_without_corners():
    # 4 and 5 are coprime, so the line never crosses a lattice corner
    assert supercover((0, 0), (4, 5)) == walk_grid((0, 0), (4, 5))


def test_random_segments():
    """Endpoint inclusion, orthogonal steps and reversal symmetry."""
    rng = np.random.default_rng(4)
    for _ in range(500):
        a = tuple(int(v) for v in rng.integers(-10, 10, size=2))
        b = tuple(int(v) for v in rng.integers(-10, 10, size=2))

        cells = walk_grid(a, b)
        assert cells[0] == a and cells[-1] == b
        assert len(cells) == abs(b[0] - a[0]) + abs(b[1] - a[1]) + 1
        for (x0, y0), (x1, y1) in zip(cells, cells[1:]):
            assert abs(x1 - x0) + abs(y1 - y0) == 1
        assert set(cells) == set(walk_grid(b, a)), f"Asymmetric walk {a} -> {b}"

        cover = supercover(a, b)
        assert cover[0] == a and cover[-1] == b
        assert set(cells) <= set(cover)
        assert all(p != q for p, q in zip(cover, cover[1:]))
        assert set(cover) == set(supercover(b, a)), f"Asymmetric cover {a} -> {b}"


def test_steps():
    assert list(WalkGrid((0, 0), (2, 1)).steps()) == [
        ((0, 0), (1, 0)), ((1, 0), (1, 1)), ((1, 1), (2, 1))
    ]


def test_invalid_input():
    with pytest.raises(ValueError):
        WalkGrid((math.nan, 0.0), (1.0, 1.0))
    with pytest.raises(ValueError):
        Supercover((0.0, 0.0), (1.0, -math.inf))
    with pytest.raises(ValueError):
        WalkGrid((0.0, 0.0, 0.0), (1.0, 1.0))
    with pytest.raises(TypeError):
        WalkGrid((0.0, True), (1.0, 1.0))


if __name__ == "__main__":
    print("Grid Walking Tests")
    print("=" * 50)
    test_walk_grid_pinned_paths()
    test_supercover_pinned_path()
    test_corner_choice_is_direction_independent()
    test_axis_aligned()
    test_real_endpoints()
    test_supercover_matches_walk_grid_without_corners()
    test_random_segments()
    test_steps()
    test_invalid_input()
    print("All tests completed successfully!")
