# coherent_noise/kernels/simplex_tables.py

"""
================================================================================
SIMPLEX NOISE, TABLE FORM
================================================================================
2D simplex noise driven by seeded tables: a 256-entry random gradient table and
a shuffled 256-entry permutation table. Gradients are found by double hashing
the lattice coordinates through the permutation table.

Only 2D is implemented. `value3d` raises UnsupportedDimensionError.

Data Contract:
---------------
- Inputs:
    - perm: Shuffled permutation table (int array).
    - grads: Unit gradient table, shape (N, 2).
    - modulus: Wraparound used by the hash (256, or 255 for the legacy hash).
- Outputs:
    - A scalar noise value, roughly within [-0.5, 0.5].
- Side Effects: None.
================================================================================
"""

import math

import numpy as np
from numba import njit

from .. import config as DEFAULTS
from ..errors import UnsupportedDimensionError
from ..interpolation import dot2
from .base import BaseKernel

F2 = DEFAULTS.SIMPLEX_SKEW_2D
G2 = DEFAULTS.SIMPLEX_UNSKEW_2D


@njit
def _gradient_index(perm, i, j, modulus):
    return perm[(i + perm[j % modulus]) % modulus]


@njit
def _contribution(grads, g, rx, ry, falloff, scale):
    t = falloff - rx * rx - ry * ry
    if t <= 0.0:
        return 0.0
    t *= t
    return scale * t * t * dot2(grads[g, 0], grads[g, 1], rx, ry)


@njit
def simplex_tables_2d(perm, grads, x, y, modulus, falloff, scale):
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

    gi0 = _gradient_index(perm, i, j, modulus)
    gi1 = _gradient_index(perm, i + i1, j + j1, modulus)
    gi2 = _gradient_index(perm, i + 1, j + 1, modulus)

    n = _contribution(grads, gi0, x0, y0, falloff, scale)
    n += _contribution(grads, gi1, x1, y1, falloff, scale)
    n += _contribution(grads, gi2, x2, y2, falloff, scale)
    return n


class SimplexTables(BaseKernel):
    """Seeded, table-driven 2D simplex noise."""

    name = "simplex_tables"
    supports_3d = False

    def _consolidate_settings(self, config: dict) -> dict:
        settings = {
            'table_size': config.get('table_size', DEFAULTS.TABLE_SIZE),
            'hash_modulus': config.get('hash_modulus', DEFAULTS.SIMPLEX_TABLES_HASH_MODULUS),
            'falloff': config.get('falloff', DEFAULTS.SIMPLEX_TABLES_FALLOFF),
            'scale': config.get('scale', DEFAULTS.SIMPLEX_TABLES_SCALE),
        }
        if not 0 < settings['hash_modulus'] <= settings['table_size']:
            raise ValueError(
                f"hash_modulus must be in (0, {settings['table_size']}], got {settings['hash_modulus']}"
            )
        if settings['hash_modulus'] < settings['table_size']:
            self.logger.warning(
                f"hash_modulus {settings['hash_modulus']} leaves "
                f"{settings['table_size'] - settings['hash_modulus']} table entries unreachable."
            )
        return settings

    def _build_tables(self, rng: np.random.Generator):
        size = self.settings['table_size']
        draws = rng.uniform(-1.0, 1.0, (size, 3))
        self._grads2 = self._freeze(draws[:, :2] / np.linalg.norm(draws[:, :2], axis=1, keepdims=True))
        # 3D gradients from the same draw.
        self._grads3 = self._freeze(draws / np.linalg.norm(draws, axis=1, keepdims=True))

        perm = np.arange(size, dtype=np.int64)
        rng.shuffle(perm)
        self._perm = self._freeze(perm)
        self.logger.debug(f"Built {size}-entry gradient and permutation tables.")

    def value2d(self, x: float, y: float) -> float:
        return simplex_tables_2d(self._perm, self._grads2, float(x), float(y),
                                 self.settings['hash_modulus'],
                                 self.settings['falloff'], self.settings['scale'])

    def value3d(self, x: float, y: float, z: float) -> float:
        raise UnsupportedDimensionError(type(self).__name__, 3)
