# coherent_noise/interpolation.py

"""
Shared scalar math for the kernels: interpolation curves and small vector
dot products. Everything here is JIT-compiled so the kernels can inline it.
"""

from numba import njit


@njit
def lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)


@njit
def smoothstep(t):
    "3t^2 - 2t^3"
    return t * t * (3.0 - 2.0 * t)


@njit
def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit
def dot2(gx, gy, x, y):
    return gx * x + gy * y


@njit
def dot3(gx, gy, gz, x, y, z):
    return gx * x + gy * y + gz * z
