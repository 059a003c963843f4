# coherent_noise/terrain.py

"""
================================================================================
TERRAIN SAMPLING HELPERS
================================================================================
Caller-side helpers that turn noise into terrain data. The kernels return one
float per coordinate; this module is where a world generator samples them
over a chunk and decides on integer block heights.

Data Contract:
---------------
- Inputs:
    - A kernel (NoiseKernel) or any callable f(x, z) -> float.
    - Chunk/grid origin and extents in world block units.
- Outputs:
    - NumPy arrays indexed [z, x] (rows along z, columns along x).
- Side Effects: None.
- Invariants: Heights are rounded here, by the caller, never by the kernels.
================================================================================
"""

from typing import Callable, Tuple

import numpy as np

from . import config as DEFAULTS
from .fractal import octaves
from .kernels.base import NoiseKernel


def get_coordinate_grid(origin_x: float, origin_z: float, width: float, depth: float,
                        resolution_w: int, resolution_d: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generates a coordinate grid for an arbitrary rectangle, one sample per
    cell starting at the origin (the far edge is not included).
    """
    step_x = width / resolution_w
    step_z = depth / resolution_d

    x_coords = origin_x + np.arange(resolution_w, dtype=np.float64) * step_x
    z_coords = origin_z + np.arange(resolution_d, dtype=np.float64) * step_z
    return np.meshgrid(x_coords, z_coords)


def sample_grid(func: Callable[[float, float], float], x_coords: np.ndarray, z_coords: np.ndarray) -> np.ndarray:
    """Evaluates func at every (x, z) pair of two equally shaped arrays."""
    if x_coords.shape != z_coords.shape:
        raise ValueError(f"Coordinate shapes differ: {x_coords.shape} vs {z_coords.shape}")

    values = np.empty(x_coords.shape, dtype=np.float64)
    for index in np.ndindex(x_coords.shape):
        values[index] = func(float(x_coords[index]), float(z_coords[index]))
    return values


def column_heights(kernel: NoiseKernel, chunk_origin: Tuple[float, float],
                   dimension: int = DEFAULTS.CHUNK_DIMENSION,
                   octave_count: int = DEFAULTS.TERRAIN_OCTAVES,
                   persistence: float = DEFAULTS.TERRAIN_PERSISTENCE,
                   amplitude: float = DEFAULTS.TERRAIN_AMPLITUDE,
                   height_scale: float = DEFAULTS.TERRAIN_HEIGHT_SCALE) -> np.ndarray:
    """
    Integer surface height for every (x, z) column of a square chunk.

    Each column samples multi-octave noise at its world position, scales it
    by `height_scale` and rounds to the nearest block.

    Returns:
        np.ndarray: int64 array of shape (dimension, dimension), indexed [z, x].
    """
    origin_x, origin_z = chunk_origin
    x_grid, z_grid = get_coordinate_grid(origin_x, origin_z, dimension, dimension, dimension, dimension)

    raw = sample_grid(
        lambda x, z: octaves(kernel, (x, z), octave_count, persistence, amplitude),
        x_grid, z_grid
    )
    return np.round(raw * height_scale).astype(np.int64)


def block_count(heights: np.ndarray, bottom: int = DEFAULTS.CHUNK_BOTTOM) -> int:
    """Number of solid blocks a chunk stacks between `bottom` and each column height."""
    return int(np.clip(heights - bottom, 0, None).sum())
