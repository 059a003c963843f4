# coherent_noise/kernels/simplex_patent.py

"""
================================================================================
SIMPLEX NOISE, PATENT FORM
================================================================================
Simplex noise as described in Ken Perlin's hardware-oriented reference: no
permutation table, gradients are picked by summing lookups into eight literal
bit patterns, indexed by individual bits of the lattice coordinates.

The kernel ignores its seed for gradient generation. Two instances always
produce the same field.

Data Contract:
---------------
- Inputs:
    - x, y(, z): Scalar coordinates.
- Outputs:
    - A scalar noise value. 2D is scaled by SIMPLEX_PATENT_SCALE_2D, 3D by the
      per-vertex factor 8, both land roughly within [-1, 1].
- Side Effects: None.
- Invariants: Gradients are small-integer lattice vectors (components in
  {-1, 0, 1}), not unit length.
================================================================================
"""

import math

import numpy as np
from numba import njit

from .. import config as DEFAULTS
from ..interpolation import dot2
from .base import BaseKernel

_BIT_PATTERNS = np.array(DEFAULTS.SIMPLEX_BIT_PATTERNS, dtype=np.int64)
_MASK32 = 0xFFFFFFFF

F2 = DEFAULTS.SIMPLEX_SKEW_2D
G2 = DEFAULTS.SIMPLEX_UNSKEW_2D
F3 = DEFAULTS.SIMPLEX_SKEW_3D
G3 = DEFAULTS.SIMPLEX_UNSKEW_3D


@njit
def _bit(n, position):
    return ((n & _MASK32) >> position) & 1


@njit
def _pattern2(a, b, position):
    # Bit-position parity picks the lower or upper half of the pattern table.
    return _BIT_PATTERNS[(_bit(a, position) << 2) | (_bit(b, position) << 1) | (position & 1)]


@njit
def _pattern3(a, b, c, position):
    return _BIT_PATTERNS[(_bit(a, position) << 2) | (_bit(b, position) << 1) | _bit(c, position)]


@njit
def _hash2(i, j):
    return (_pattern2(i, j, 0) + _pattern2(j, i, 1) +
            _pattern2(i, j, 2) + _pattern2(j, i, 3))


@njit
def _hash3(i, j, k):
    return (_pattern3(i, j, k, 0) + _pattern3(j, k, i, 1) + _pattern3(k, i, j, 2) +
            _pattern3(i, j, k, 3) + _pattern3(j, k, i, 4) + _pattern3(k, i, j, 5) +
            _pattern3(i, j, k, 6) + _pattern3(j, k, i, 7))


@njit
def _vertex2(i, j, rx, ry, radius_sq):
    t = radius_sq - rx * rx - ry * ry
    if t <= 0.0:
        return 0.0

    h = _hash2(i, j)
    gx = 1.0
    gy = 1.0
    if (h >> 2) & 1:
        if (h & 1) == ((h >> 1) & 1):
            gx = 0.0
        else:
            gy = 0.0
    b5 = (h >> 5) & 1
    if b5 == ((h >> 3) & 1):
        gx = -gx
    if b5 == ((h >> 4) & 1):
        gy = -gy

    t *= t
    return t * t * dot2(gx, gy, rx, ry)


@njit
def simplex_patent_2d(x, y, radius, scale):
    if not (math.isfinite(x) and math.isfinite(y)):
        return np.nan

    s = (x + y) * F2
    i = int(np.floor(x + s))
    j = int(np.floor(y + s))
    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    radius_sq = radius * radius
    n = _vertex2(i, j, x0, y0, radius_sq)
    n += _vertex2(i + i1, j + j1, x1, y1, radius_sq)
    n += _vertex2(i + 1, j + 1, x2, y2, radius_sq)
    return scale * n


@njit
def _vertex3(i, j, k, a0, a1, a2, u, v, w, falloff):
    s = (a0 + a1 + a2) * G3
    x = u - a0 + s
    y = v - a1 + s
    z = w - a2 + s
    t = falloff - x * x - y * y - z * z
    if t <= 0.0:
        return 0.0

    h = _hash3(i + a0, j + a1, k + a2)
    b5 = (h >> 5) & 1
    b4 = (h >> 4) & 1
    b3 = (h >> 3) & 1
    b2 = (h >> 2) & 1
    b = h & 3

    if b == 1:
        p, q, r = x, y, z
    elif b == 2:
        p, q, r = y, z, x
    else:
        p, q, r = z, x, y

    if b5 == b3:
        p = -p
    if b5 == b4:
        q = -q
    if b5 != (b4 ^ b3):
        r = -r

    if b == 0:
        extra = q + r
    elif b2 == 0:
        extra = q
    else:
        extra = r

    t *= t
    return 8.0 * t * t * (p + extra)


@njit
def simplex_patent_3d(x, y, z, falloff):
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return np.nan

    s = (x + y + z) * F3
    i = int(np.floor(x + s))
    j = int(np.floor(y + s))
    k = int(np.floor(z + s))
    s = (i + j + k) * G3
    u = x - i + s
    v = y - j + s
    w = z - k + s

    # Largest and smallest offset component pick the traversal order.
    if u >= w:
        hi = 0 if u >= v else 1
    else:
        hi = 1 if v >= w else 2
    if u < w:
        lo = 0 if u < v else 1
    else:
        lo = 1 if v < w else 2
    mid = 3 - hi - lo

    a0 = 0
    a1 = 0
    a2 = 0
    n = _vertex3(i, j, k, a0, a1, a2, u, v, w, falloff)
    for axis in (hi, mid, lo):
        if axis == 0:
            a0 += 1
        elif axis == 1:
            a1 += 1
        else:
            a2 += 1
        n += _vertex3(i, j, k, a0, a1, a2, u, v, w, falloff)
    return n


class SimplexPatent(BaseKernel):
    """Simplex noise with bit-pattern gradient selection."""

    name = "simplex_patent"

    def _consolidate_settings(self, config: dict) -> dict:
        return {
            'radius_2d': config.get('radius_2d', DEFAULTS.SIMPLEX_PATENT_RADIUS_2D),
            'scale_2d': config.get('scale_2d', DEFAULTS.SIMPLEX_PATENT_SCALE_2D),
            'falloff_3d': config.get('falloff_3d', DEFAULTS.SIMPLEX_PATENT_FALLOFF_3D),
        }

    def _build_tables(self, rng: np.random.Generator):
        self.logger.debug("Patent simplex uses literal bit patterns, seed does not affect gradients.")

    def value2d(self, x: float, y: float) -> float:
        return simplex_patent_2d(float(x), float(y),
                                 self.settings['radius_2d'], self.settings['scale_2d'])

    def value3d(self, x: float, y: float, z: float) -> float:
        return simplex_patent_3d(float(x), float(y), float(z), self.settings['falloff_3d'])
