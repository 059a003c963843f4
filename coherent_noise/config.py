# coherent_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
kernels and the fractal operators. These values are used if they are not
explicitly provided by the user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC TERRAIN.
Instead, pass a configuration dictionary to the kernel instance.
================================================================================
"""

import math

# --- Seeding ---
DEFAULT_SEED = 1337

# --- Tables ---
# Size of every seeded permutation table and of the random gradient tables.
TABLE_SIZE = 256

# --- Perlin Kernels ---
# Nudges exact-integer inputs away from the lattice so the corner gradients
# never all collapse onto the query point.
PERLIN_INPUT_OFFSET = 0.1

# When True, 3D lookups hash through the 2D permutation table (reference
# behaviour). When False, 3D gets its own independently shuffled table.
PERLIN_SHARED_PERMUTATION = False

# --- Simplex Geometry ---
SIMPLEX_SKEW_2D = 0.5 * (math.sqrt(3.0) - 1.0)
SIMPLEX_UNSKEW_2D = (3.0 - math.sqrt(3.0)) / 6.0
SIMPLEX_SKEW_3D = (math.sqrt(4.0) - 1.0) / 3.0
SIMPLEX_UNSKEW_3D = (1.0 - 1.0 / math.sqrt(4.0)) / 3.0

# --- Simplex (patent form) ---
# The eight bit patterns of the hardware simplex algorithm.
SIMPLEX_BIT_PATTERNS = (0x15, 0x38, 0x32, 0x2C, 0x0D, 0x13, 0x07, 0x2A)
SIMPLEX_PATENT_RADIUS_2D = 0.6
# Empirical normalization constant of the 2D patent variant.
SIMPLEX_PATENT_SCALE_2D = 220.0
SIMPLEX_PATENT_FALLOFF_3D = 0.6

# --- Simplex (table form) ---
SIMPLEX_TABLES_FALLOFF = 0.6
SIMPLEX_TABLES_SCALE = 8.0
# 255 reproduces the reference hash, which never reaches the last table entry.
SIMPLEX_TABLES_HASH_MODULUS = TABLE_SIZE

# --- Fractal Operators ---
OCTAVE_LACUNARITY = 2.0
TURBULENCE_ZOOM_DIVISOR = 2.0
# Literal offsets of the q/r domain warp layers. Changing them changes every
# warped terrain, keep them bit-for-bit.
DOMAIN_WARP_OFFSETS = (
    (0.0, 0.0),
    (5.2, 1.3),
    (1.7, 9.2),
    (8.3, 2.8),
)
DOMAIN_WARP_FACTOR = 100.0

# --- Terrain Helpers ---
CHUNK_DIMENSION = 32
CHUNK_BOTTOM = -32
TERRAIN_OCTAVES = 4
TERRAIN_PERSISTENCE = 0.5
TERRAIN_AMPLITUDE = 1.0
TERRAIN_HEIGHT_SCALE = 16.0

# --- Preview Rendering ---
PREVIEW_WIDTH = 256
PREVIEW_HEIGHT = 256
PREVIEW_ZOOM = 64.0
PREVIEW_OCTAVES = 4
PREVIEW_PERSISTENCE = 0.5
