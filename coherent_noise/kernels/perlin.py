# coherent_noise/kernels/perlin.py

"""
================================================================================
PERLIN GRADIENT NOISE
================================================================================
This module provides the two lattice gradient noise kernels:

- PerlinImproved: Ken Perlin's 2002 "improved" noise. Fixed axis (2D) and
  cube-edge (3D) gradients, quintic fade curve.
- PerlinClassic: the original 1985 noise. Seeded random unit gradients,
  cubic smoothstep curve.

Both kernels share the same corner/hash/dot-product structure, implemented
once in the JIT-compiled functions below.

Data Contract:
---------------
- Inputs:
    - perm: A shuffled permutation table of 0..255 (int array).
    - grads: A gradient table, shape (N, 2) or (N, 3).
    - x, y(, z): Scalar coordinates.
- Outputs:
    - A scalar noise value (approximately [-1, 1]).
- Side Effects: None.
================================================================================
"""

import math

import numpy as np
from numba import njit

from .. import config as DEFAULTS
from ..interpolation import dot2, dot3, fade, lerp, smoothstep
from .base import BaseKernel

# Improved noise gradients (Perlin 2002). The 3D set pads the 12 cube edges
# with 4 duplicates so the table size is a power of two.
_IMPROVED_GRADIENTS_2D = np.array([[1, 0], [-1, 0], [0, 1], [0, -1]], dtype=np.float64)
_IMPROVED_GRADIENTS_3D = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
    [1, 1, 0], [-1, 1, 0], [0, -1, 1], [0, -1, -1],
], dtype=np.float64)


@njit
def _hash2(perm, x, y):
    n = perm.shape[0]
    return perm[(x + perm[y % n]) % n]


@njit
def _hash3(perm, x, y, z):
    n = perm.shape[0]
    return perm[(x + perm[(y + perm[z % n]) % n]) % n]


@njit
def _curve(t, quintic):
    if quintic:
        return fade(t)
    return smoothstep(t)


@njit
def perlin_2d(perm, grads, x, y, offset, quintic):
    """
    2D gradient noise at a single point.
    `quintic` selects the 2002 fade curve, otherwise the 1985 smoothstep.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return np.nan

    px = x + offset
    py = y + offset

    fx = np.floor(px)
    fy = np.floor(py)
    x0 = int(fx)
    y0 = int(fy)
    x1 = x0 + 1
    y1 = y0 + 1

    xf = px - fx
    yf = py - fy

    g = grads.shape[0]
    h00 = _hash2(perm, x0, y0) % g
    h10 = _hash2(perm, x1, y0) % g
    h01 = _hash2(perm, x0, y1) % g
    h11 = _hash2(perm, x1, y1) % g

    d00 = dot2(grads[h00, 0], grads[h00, 1], xf, yf)
    d10 = dot2(grads[h10, 0], grads[h10, 1], xf - 1.0, yf)
    d01 = dot2(grads[h01, 0], grads[h01, 1], xf, yf - 1.0)
    d11 = dot2(grads[h11, 0], grads[h11, 1], xf - 1.0, yf - 1.0)

    u = _curve(xf, quintic)
    v = _curve(yf, quintic)

    return lerp(lerp(d00, d10, u), lerp(d01, d11, u), v)


@njit
def _corner3(perm, grads, cx, cy, cz, rx, ry, rz):
    h = _hash3(perm, cx, cy, cz) % grads.shape[0]
    return dot3(grads[h, 0], grads[h, 1], grads[h, 2], rx, ry, rz)


@njit
def perlin_3d(perm, grads, x, y, z, offset, quintic):
    """3D gradient noise at a single point, trilinear over the 8 cube corners."""
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return np.nan

    px = x + offset
    py = y + offset
    pz = z + offset

    fx = np.floor(px)
    fy = np.floor(py)
    fz = np.floor(pz)
    x0 = int(fx)
    y0 = int(fy)
    z0 = int(fz)

    xf = px - fx
    yf = py - fy
    zf = pz - fz

    d000 = _corner3(perm, grads, x0, y0, z0, xf, yf, zf)
    d100 = _corner3(perm, grads, x0 + 1, y0, z0, xf - 1.0, yf, zf)
    d010 = _corner3(perm, grads, x0, y0 + 1, z0, xf, yf - 1.0, zf)
    d110 = _corner3(perm, grads, x0 + 1, y0 + 1, z0, xf - 1.0, yf - 1.0, zf)
    d001 = _corner3(perm, grads, x0, y0, z0 + 1, xf, yf, zf - 1.0)
    d101 = _corner3(perm, grads, x0 + 1, y0, z0 + 1, xf - 1.0, yf, zf - 1.0)
    d011 = _corner3(perm, grads, x0, y0 + 1, z0 + 1, xf, yf - 1.0, zf - 1.0)
    d111 = _corner3(perm, grads, x0 + 1, y0 + 1, z0 + 1, xf - 1.0, yf - 1.0, zf - 1.0)

    u = _curve(xf, quintic)
    v = _curve(yf, quintic)
    w = _curve(zf, quintic)

    near = lerp(lerp(d000, d100, u), lerp(d010, d110, u), v)
    far = lerp(lerp(d001, d101, u), lerp(d011, d111, u), v)
    return lerp(near, far, w)


def _normalized(vectors: np.ndarray) -> np.ndarray:
    return vectors / np.linalg.norm(vectors, axis=1, keepdims=True)


class _PerlinKernel(BaseKernel):
    """Shared construction and evaluation for both Perlin variants."""

    quintic = True

    def _consolidate_settings(self, config: dict) -> dict:
        return {
            'table_size': config.get('table_size', DEFAULTS.TABLE_SIZE),
            'input_offset': config.get('input_offset', DEFAULTS.PERLIN_INPUT_OFFSET),
            'shared_permutation': config.get('shared_permutation', DEFAULTS.PERLIN_SHARED_PERMUTATION),
        }

    def _build_tables(self, rng: np.random.Generator):
        self._grads2, self._grads3 = self._build_gradients(rng)

        size = self.settings['table_size']
        perm = np.arange(size, dtype=np.int64)
        rng.shuffle(perm)
        self._perm2 = self._freeze(perm)

        if self.settings['shared_permutation']:
            self.logger.debug("3D lookups share the 2D permutation table.")
            self._perm3 = self._perm2
        else:
            perm3 = np.arange(size, dtype=np.int64)
            rng.shuffle(perm3)
            self._perm3 = self._freeze(perm3)
            self.logger.debug("3D lookups use an independently shuffled permutation table.")

    def _build_gradients(self, rng: np.random.Generator):
        raise NotImplementedError

    def value2d(self, x: float, y: float) -> float:
        return perlin_2d(self._perm2, self._grads2, float(x), float(y),
                         self.settings['input_offset'], self.quintic)

    def value3d(self, x: float, y: float, z: float) -> float:
        return perlin_3d(self._perm3, self._grads3, float(x), float(y), float(z),
                         self.settings['input_offset'], self.quintic)


class PerlinImproved(_PerlinKernel):
    """Improved Perlin noise (2002): fixed gradient sets and the quintic fade."""

    name = "perlin_improved"
    quintic = True

    def _build_gradients(self, rng: np.random.Generator):
        return self._freeze(_IMPROVED_GRADIENTS_2D.copy()), self._freeze(_IMPROVED_GRADIENTS_3D.copy())


class PerlinClassic(_PerlinKernel):
    """
    Classic Perlin noise (1985): random unit gradients drawn from the seed,
    interpolated with the cubic smoothstep.
    """

    name = "perlin_classic"
    quintic = False

    def _build_gradients(self, rng: np.random.Generator):
        size = self.settings['table_size']
        # One draw per entry, normalized once per dimensionality.
        draws = rng.uniform(-1.0, 1.0, (size, 3))
        self.logger.debug(f"Drew {size} random gradient vectors.")
        return self._freeze(_normalized(draws[:, :2])), self._freeze(_normalized(draws))
