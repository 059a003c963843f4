# coherent_noise/kernels/base.py

"""
================================================================================
NOISE KERNEL CONTRACT
================================================================================
Defines the capability every noise kernel offers and the shared plumbing the
concrete kernels build on (settings consolidation, logging, table freezing).

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int): 64-bit seed. The only source of randomness.
    - config (dict, optional): Overrides for the defaults in `config.py`.
    - logger (logging.Logger, optional): Receives initialization messages.
- Outputs (from methods):
    - value2d(x, y) / value3d(x, y, z): one raw noise sample (float).
- Side Effects: Logs messages on initialization only.
- Invariants: A kernel is a pure function of (seed, settings, query point).
  Tables are frozen after construction, so instances can be shared by any
  number of readers once built.
================================================================================
"""

import logging
from typing import Protocol

import numpy as np

from .. import config as DEFAULTS
from ..errors import UnsupportedDimensionError


class NoiseKernel(Protocol):
    """
    The capability the fractal operators depend on. Any object providing these
    members can be passed to `coherent_noise.fractal`.
    """
    supports_3d: bool

    def value2d(self, x: float, y: float) -> float: ...
    def value3d(self, x: float, y: float, z: float) -> float: ...


class BaseKernel:
    """Common state for the built-in kernels."""

    name = "kernel"
    supports_3d = True

    def __init__(self, seed: int = DEFAULTS.DEFAULT_SEED, config: dict = None, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)
        # Seeds are unsigned 64-bit, negative values wrap.
        self.seed = int(seed) & 0xFFFFFFFFFFFFFFFF
        self.user_config = config or {}
        self.settings = self._consolidate_settings(self.user_config)

        self._build_tables(np.random.default_rng(self.seed))
        self.logger.info(f"{type(self).__name__} initialized with seed: {self.seed}")

    def _consolidate_settings(self, config: dict) -> dict:
        return {}

    def _build_tables(self, rng: np.random.Generator):
        pass

    @staticmethod
    def _freeze(table: np.ndarray) -> np.ndarray:
        table = np.ascontiguousarray(table)
        table.flags.writeable = False
        return table

    def value2d(self, x: float, y: float) -> float:
        raise UnsupportedDimensionError(type(self).__name__, 2)

    def value3d(self, x: float, y: float, z: float) -> float:
        raise UnsupportedDimensionError(type(self).__name__, 3)

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed})"
