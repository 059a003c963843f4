# coherent_noise/fractal.py

"""
================================================================================
FRACTAL COMPOSITION OPERATORS
================================================================================
Octave summation, turbulence, fractional Brownian motion and domain warping,
written once against the NoiseKernel protocol. Every operator works with any
kernel: it only ever calls `kernel.value2d` or `kernel.value3d`.

Data Contract:
---------------
- Inputs:
    - kernel: Any object implementing the NoiseKernel protocol.
    - point: A 2-tuple (x, y) or a 3-tuple (x, y, z).
    - Operator parameters (octave count, persistence, amplitude, zoom, scale).
- Outputs:
    - A single float.
- Side Effects: None.
- Invariants: Pure functions of (kernel, point, parameters). Non-finite input
  propagates to a non-finite output instead of raising.
================================================================================
"""

import math
from typing import Sequence

from . import config as DEFAULTS
from .kernels.base import NoiseKernel


def _sample(kernel: NoiseKernel, point: Sequence[float], divisor: float) -> float:
    """Evaluates the kernel at point / divisor, dispatching on dimensionality."""
    if len(point) == 2:
        return kernel.value2d(point[0] / divisor, point[1] / divisor)
    if len(point) == 3:
        return kernel.value3d(point[0] / divisor, point[1] / divisor, point[2] / divisor)
    raise ValueError(f"Expected a 2D or 3D point, got {len(point)} components")


def octaves_with_amplitudes(kernel: NoiseKernel, point: Sequence[float], amplitudes: Sequence[float]) -> float:
    """
    Sums one kernel sample per entry of `amplitudes`, each octave at twice the
    frequency divisor of the previous one, weighted by its amplitude and
    normalized by the total amplitude.

    Weights are normalized before they are applied, so a single octave returns
    the raw kernel value bit for bit.
    """
    amplitudes = list(amplitudes)
    max_value = sum(amplitudes)
    if max_value == 0:
        return 0.0

    total = 0.0
    frequency = 1.0
    for amplitude in amplitudes:
        total += _sample(kernel, point, frequency) * (amplitude / max_value)
        frequency *= DEFAULTS.OCTAVE_LACUNARITY
    return total


def octaves(kernel: NoiseKernel, point: Sequence[float], n: int,
            persistence: float = 0.5, amplitude: float = 1.0) -> float:
    """
    Multi-octave noise. The first octave is weighted by `amplitude`, each
    following one by the previous weight times `persistence`.
    Returns 0.0 when `n` is not positive.
    """
    amplitudes = []
    for _ in range(n):
        amplitudes.append(amplitude)
        amplitude *= persistence
    return octaves_with_amplitudes(kernel, point, amplitudes)


def _usable_zoom(zoom: float) -> bool:
    # Infinite zoom never halves below 1, non-positive zoom cannot normalize.
    return math.isfinite(zoom) and zoom > 0.0


def _halving_zooms(zoom: float):
    while zoom >= 1.0:
        yield zoom
        zoom /= DEFAULTS.TURBULENCE_ZOOM_DIVISOR


def turbulence(kernel: NoiseKernel, point: Sequence[float], zoom: float) -> float:
    """
    Classic turbulence: sums kernel(point / zoom) * zoom while halving the zoom
    down to 1, divided by the initial zoom. The result is signed.
    """
    if not _usable_zoom(zoom):
        return math.nan
    value = 0.0
    for z in _halving_zooms(zoom):
        value += _sample(kernel, point, z) * z
    return value / zoom


def turbulence_billowy(kernel: NoiseKernel, point: Sequence[float], zoom: float) -> float:
    """Turbulence over absolute values. Never negative, gives rounded, puffy features."""
    if not _usable_zoom(zoom):
        return math.nan
    value = 0.0
    for z in _halving_zooms(zoom):
        value += abs(_sample(kernel, point, z) * z)
    return value / zoom


def turbulence_ridged(kernel: NoiseKernel, point: Sequence[float], zoom: float) -> float:
    """Turbulence over 1 - |noise|, turning zero crossings into sharp ridges."""
    if not _usable_zoom(zoom):
        return math.nan
    value = 0.0
    for z in _halving_zooms(zoom):
        value += 1.0 - abs(_sample(kernel, point, z) * z)
    return value / zoom


def fbm(kernel: NoiseKernel, point: Sequence[float], zoom: float) -> float:
    """
    Fractional Brownian motion: the turbulence loop without the absolute
    value, divided by the initial zoom.
    """
    if not _usable_zoom(zoom):
        return math.nan
    value = 0.0
    for z in _halving_zooms(zoom):
        value += _sample(kernel, point, z) * z
    return value / zoom


def domain_wrapping(kernel: NoiseKernel, point: Sequence[float], scale: float) -> float:
    """
    Domain warping in the q/r style: two layers of fbm displace the lookup
    position of a final fbm, producing swirled, non axis-aligned features.

    Args:
        kernel: Kernel with 2D support.
        point: (x, y) to evaluate.
        scale: Zoom passed to every fbm evaluation.
    """
    x, y = point
    o0, o1, o2, o3 = DEFAULTS.DOMAIN_WARP_OFFSETS
    factor = DEFAULTS.DOMAIN_WARP_FACTOR

    qx = fbm(kernel, (x + o0[0], y + o0[1]), scale)
    qy = fbm(kernel, (x + o1[0], y + o1[1]), scale)

    rx = fbm(kernel, (x + factor * qx + o2[0], y + factor * qy + o2[1]), scale)
    ry = fbm(kernel, (x + factor * qx + o3[0], y + factor * qy + o3[1]), scale)

    return fbm(kernel, (x + factor * rx, y + factor * ry), scale)


__all__ = [
    "octaves",
    "octaves_with_amplitudes",
    "turbulence",
    "turbulence_billowy",
    "turbulence_ridged",
    "fbm",
    "domain_wrapping",
]
