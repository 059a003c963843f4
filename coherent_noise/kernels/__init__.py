# coherent_noise/kernels/__init__.py

# The public API of the kernel layer, plus a name-based factory used by the
# preview renderer and by configuration-driven callers.

import logging

from .. import config as DEFAULTS
from ..errors import UnknownKernelError
from .base import BaseKernel, NoiseKernel
from .perlin import PerlinClassic, PerlinImproved
from .simplex_patent import SimplexPatent
from .simplex_tables import SimplexTables

KERNELS = {
    PerlinClassic.name: PerlinClassic,
    PerlinImproved.name: PerlinImproved,
    SimplexPatent.name: SimplexPatent,
    SimplexTables.name: SimplexTables,
}


def create_kernel(name: str, seed: int = DEFAULTS.DEFAULT_SEED, config: dict = None,
                  logger: logging.Logger = None) -> BaseKernel:
    """Builds a registered kernel by name, e.g. 'perlin_classic'."""
    try:
        kernel_cls = KERNELS[name]
    except KeyError:
        raise UnknownKernelError(name, KERNELS) from None
    return kernel_cls(seed, config=config, logger=logger)


__all__ = [
    "BaseKernel",
    "NoiseKernel",
    "PerlinClassic",
    "PerlinImproved",
    "SimplexPatent",
    "SimplexTables",
    "KERNELS",
    "create_kernel",
]
