"""line_drawing - Line, circle and grid traversal algorithms for integer grids."""

from .bresenham import Bresenham, bresenham
from .bresenham_3d import Bresenham3d, bresenham_3d
from .bresenham_circle import BresenhamCircle, bresenham_circle
from .grid_walking import Supercover, WalkGrid, supercover, walk_grid
from .midpoint import Midpoint, midpoint
from .points import Point, Voxel
from .steps import steps
from .walk_voxels import WalkVoxels, walk_voxels
from .xiaolin_wu import CoverageSample, XiaolinWu, xiaolin_wu

__all__ = [
    "Bresenham",
    "Bresenham3d",
    "BresenhamCircle",
    "CoverageSample",
    "Midpoint",
    "Point",
    "Supercover",
    "Voxel",
    "WalkGrid",
    "WalkVoxels",
    "XiaolinWu",
    "bresenham",
    "bresenham_3d",
    "bresenham_circle",
    "midpoint",
    "steps",
    "supercover",
    "walk_grid",
    "walk_voxels",
    "xiaolin_wu",
]
