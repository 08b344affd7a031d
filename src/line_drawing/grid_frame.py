"""Convert between world coordinates and grid cells using PyTorch tensors.

The traversal algorithms work in the grid frame, where cell ``i`` is centered
on the integer ``i``. These helpers map world-space points into that frame,
map cell indices back to world-space centers, and pack traversal output into
tensors.
"""
import torch
from typing import Iterable, Optional, Sequence, Tuple, Union

from line_drawing.points import Point


def _as_cell_size(
    cell_size: Union[float, torch.Tensor],
    dims: int,
    device: torch.device,
    dtype: torch.dtype,
) -> torch.Tensor:
    if isinstance(cell_size, (int, float)):
        return torch.full((dims,), float(cell_size), device=device, dtype=dtype)
    cell_size = cell_size.to(device=device, dtype=dtype)
    if cell_size.dim() == 0:
        cell_size = cell_size.expand(dims)
    if cell_size.shape != (dims,):
        raise ValueError(
            f"cell_size tensor must have 1 or {dims} elements, got {cell_size.numel()}"
        )
    return cell_size


def world_to_grid(
    points: torch.Tensor,
    grid_min: torch.Tensor,
    cell_size: Union[float, torch.Tensor],
) -> torch.Tensor:
    """
    Convert world coordinates to the continuous grid frame.

    The result can be passed straight to the walkers: a world point inside
    cell ``i`` maps into ``[i - 0.5, i + 0.5)``.

    Args:
        points: World coordinates. Shape: [D] or [N, D]
        grid_min: Minimum corner of the grid. Shape: [D]
        cell_size: Size of each cell. Scalar or tensor of shape [D]

    Returns:
        Grid frame coordinates, same shape as ``points``.
    """
    if not torch.is_floating_point(points):
        points = points.float()
    device = points.device
    dtype = points.dtype
    dims = points.shape[-1]

    grid_min = grid_min.to(device=device, dtype=dtype)
    cell_size = _as_cell_size(cell_size, dims, device, dtype)

    return (points - grid_min) / cell_size - 0.5


def get_cell_centers(
    indices: torch.Tensor,
    grid_min: torch.Tensor,
    cell_size: Union[float, torch.Tensor],
) -> torch.Tensor:
    """
    Convert cell indices to world coordinates of cell centers.

    Args:
        indices: Cell indices. Shape: [N, D]
        grid_min: Minimum corner of the grid. Shape: [D]
        cell_size: Size of each cell. Scalar or tensor of shape [D]

    Returns:
        World coordinates of cell centers. Shape: [N, D]
    """
    device = indices.device
    dims = indices.shape[-1]

    grid_min = grid_min.to(device=device, dtype=torch.float32)
    cell_size = _as_cell_size(cell_size, dims, device, torch.float32)

    # Convert indices to world coordinates (center of cells)
    return grid_min + (indices.float() + 0.5) * cell_size


def points_to_tensor(
    points: Iterable[Sequence[int]],
    dims: int = 2,
    device: Optional[torch.device] = None,
) -> torch.Tensor:
    """Stack the cells of a traversal into a ``long`` tensor of shape [N, D].

    ``dims`` only matters for an empty traversal, which becomes ``[0, dims]``.
    """
    points = [tuple(point) for point in points]
    if not points:
        return torch.empty((0, dims), dtype=torch.long, device=device)
    return torch.tensor(points, dtype=torch.long, device=device)


def coverage_to_tensors(
    samples: Iterable[Tuple[Point, float]],
    device: Optional[torch.device] = None,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Split Xiaolin Wu samples into pixel indices [N, 2] and intensities [N]."""
    samples = list(samples)
    indices = points_to_tensor((point for point, _ in samples), 2, device)
    intensities = torch.tensor(
        [intensity for _, intensity in samples], dtype=torch.float32, device=device
    )
    return indices, intensities
