# render_noise.py

"""
================================================================================
NOISE PREVIEW RENDERER SCRIPT
================================================================================
This script is a command-line tool for rendering a noise kernel, optionally
passed through one of the fractal operators, to a grayscale PNG. It is the
quickest way to inspect a kernel/seed/operator combination visually.

Usage:
    python render_noise.py --kernel perlin_improved --operator octaves --out out.png
    python render_noise.py --kernel simplex_tables --config kernel.json --operator domain_warp
================================================================================
"""
import argparse
import json
import logging
import sys
import time

from coherent_noise import config as DEFAULTS
from coherent_noise.errors import NoiseError
from coherent_noise.kernels import KERNELS, create_kernel
from coherent_noise.preview import OPERATORS, render_field, save_png


def load_kernel_config(config_path: str, logger: logging.Logger):
    """Loads the optional JSON dictionary of kernel setting overrides."""
    if config_path is None:
        return {}
    logger.info(f"Loading kernel configuration from: {config_path}")
    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.critical(f"Failed to load or parse config file: {e}")
        return None


def render(args) -> int:
    """Builds the kernel, renders the field and saves it. Returns an exit code."""
    # 1. --- Setup Logging ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("NoiseRenderer")

    # 2. --- Load Configuration ---
    kernel_config = load_kernel_config(args.config, logger)
    if kernel_config is None:
        return 1

    # 3. --- Build Kernel and Render ---
    start_time = time.perf_counter()
    try:
        kernel = create_kernel(args.kernel, seed=args.seed, config=kernel_config, logger=logger)
        values = render_field(
            kernel, args.operator,
            width=args.width, height=args.height,
            zoom=args.zoom, octave_count=args.octaves, persistence=args.persistence,
            show_progress=True
        )
    except (NoiseError, ValueError) as e:
        logger.error(f"Rendering failed: {e}")
        return 1

    save_png(values, args.out, logger=logger)
    end_time = time.perf_counter()
    logger.info(
        f"Rendering complete in {end_time - start_time:.2f} seconds "
        f"(min={values.min():.4f}, max={values.max():.4f})."
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a coherent noise kernel to a grayscale PNG.")
    parser.add_argument("--kernel", choices=sorted(KERNELS), default="perlin_improved",
                        help="Noise kernel to sample.")
    parser.add_argument("--seed", type=int, default=DEFAULTS.DEFAULT_SEED, help="Kernel seed.")
    parser.add_argument("--operator", choices=OPERATORS, default="raw",
                        help="Fractal operator applied on top of the kernel.")
    parser.add_argument("--width", type=int, default=DEFAULTS.PREVIEW_WIDTH, help="Image width in pixels.")
    parser.add_argument("--height", type=int, default=DEFAULTS.PREVIEW_HEIGHT, help="Image height in pixels.")
    parser.add_argument("--zoom", type=float, default=DEFAULTS.PREVIEW_ZOOM,
                        help="Feature size in pixels (zoom/scale of the operator).")
    parser.add_argument("--octaves", type=int, default=DEFAULTS.PREVIEW_OCTAVES,
                        help="Octave count for the 'octaves' operator.")
    parser.add_argument("--persistence", type=float, default=DEFAULTS.PREVIEW_PERSISTENCE,
                        help="Amplitude falloff for the 'octaves' operator.")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a JSON file of kernel setting overrides.")
    parser.add_argument("--out", type=str, default="noise.png", help="Output PNG path.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(render(build_parser().parse_args()))
