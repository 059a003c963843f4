# coherent_noise/preview.py

"""
================================================================================
NOISE PREVIEW RENDERING
================================================================================
Samples a kernel (optionally through one of the fractal operators) over a pixel
grid and writes the result as a grayscale PNG. Used by `render_noise.py` to
eyeball kernels and operator parameters.

Data Contract:
---------------
- Inputs:
    - kernel: Any NoiseKernel.
    - operator: One of OPERATORS.
    - width, height: Image size in pixels. One pixel is one world unit.
- Outputs:
    - render_field: float64 array of shape (height, width).
    - to_grayscale: uint8 array of the same shape.
- Side Effects: save_png writes a file. Progress is reported with tqdm.
================================================================================
"""

import logging
import math
import os

import numpy as np
from PIL import Image
from tqdm import tqdm

from . import config as DEFAULTS
from . import fractal
from .kernels.base import NoiseKernel

OPERATORS = ("raw", "octaves", "turbulence", "billowy", "ridged", "fbm", "domain_warp")


def _pixel_sampler(kernel: NoiseKernel, operator: str, zoom: float, octave_count: int, persistence: float):
    """Returns f(px, py) -> float for the requested operator."""
    if operator == "raw":
        return lambda px, py: kernel.value2d(px / zoom, py / zoom)
    if operator == "octaves":
        return lambda px, py: fractal.octaves(kernel, (px / zoom, py / zoom), octave_count, persistence)
    if operator == "turbulence":
        return lambda px, py: fractal.turbulence(kernel, (px, py), zoom)
    if operator == "billowy":
        return lambda px, py: fractal.turbulence_billowy(kernel, (px, py), zoom)
    if operator == "ridged":
        return lambda px, py: fractal.turbulence_ridged(kernel, (px, py), zoom)
    if operator == "fbm":
        return lambda px, py: fractal.fbm(kernel, (px, py), zoom)
    if operator == "domain_warp":
        return lambda px, py: fractal.domain_wrapping(kernel, (px, py), zoom)
    raise ValueError(f"Unknown operator '{operator}'. Available: {', '.join(OPERATORS)}")


def render_field(kernel: NoiseKernel, operator: str = "raw",
                 width: int = DEFAULTS.PREVIEW_WIDTH, height: int = DEFAULTS.PREVIEW_HEIGHT,
                 zoom: float = DEFAULTS.PREVIEW_ZOOM, octave_count: int = DEFAULTS.PREVIEW_OCTAVES,
                 persistence: float = DEFAULTS.PREVIEW_PERSISTENCE,
                 origin=(0.0, 0.0), show_progress: bool = False) -> np.ndarray:
    """Samples the operator over a (height, width) pixel grid."""
    if not (math.isfinite(zoom) and zoom > 0):
        raise ValueError(f"Preview zoom must be a positive finite number, got {zoom}")
    sampler = _pixel_sampler(kernel, operator, zoom, octave_count, persistence)
    ox, oy = origin

    values = np.empty((height, width), dtype=np.float64)
    rows = tqdm(range(height), desc=f"Rendering {operator}", disable=not show_progress)
    for py in rows:
        for px in range(width):
            values[py, px] = sampler(ox + px, oy + py)
    return values


def to_grayscale(values: np.ndarray) -> np.ndarray:
    """
    Min-max normalizes a field to 0..255. Constant fields become mid-gray and
    non-finite samples become black.
    """
    finite = np.isfinite(values)
    image = np.zeros(values.shape, dtype=np.uint8)
    if not finite.any():
        return image

    low = values[finite].min()
    high = values[finite].max()
    if high == low:
        image[finite] = 128
        return image

    scaled = (values[finite] - low) / (high - low)
    image[finite] = np.round(scaled * 255.0).astype(np.uint8)
    return image


def save_png(values: np.ndarray, path: str, logger: logging.Logger = None) -> str:
    """Writes a field as an 8-bit grayscale PNG and returns the path."""
    logger = logger or logging.getLogger(__name__)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    img = Image.fromarray(to_grayscale(values), 'L')
    img.save(path, 'PNG')
    logger.info(f"Saved {values.shape[1]}x{values.shape[0]} preview to: {path}")
    return path
