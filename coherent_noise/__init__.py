# coherent_noise/__init__.py

# This file makes 'coherent_noise' a Python package and defines its public API:
# the four kernels, the fractal operators and the error types.

from .errors import NoiseError, UnknownKernelError, UnsupportedDimensionError
from .fractal import (
    domain_wrapping,
    fbm,
    octaves,
    octaves_with_amplitudes,
    turbulence,
    turbulence_billowy,
    turbulence_ridged,
)
from .kernels import (
    KERNELS,
    NoiseKernel,
    PerlinClassic,
    PerlinImproved,
    SimplexPatent,
    SimplexTables,
    create_kernel,
)

__all__ = [
    "NoiseKernel",
    "PerlinClassic",
    "PerlinImproved",
    "SimplexPatent",
    "SimplexTables",
    "KERNELS",
    "create_kernel",
    "octaves",
    "octaves_with_amplitudes",
    "turbulence",
    "turbulence_billowy",
    "turbulence_ridged",
    "fbm",
    "domain_wrapping",
    "NoiseError",
    "UnknownKernelError",
    "UnsupportedDimensionError",
]
