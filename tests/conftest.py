import numpy as np
import pytest


class ConstantKernel:
    """Returns the same value everywhere. Records every query it receives."""

    supports_3d = True

    def __init__(self, value):
        self.value = value
        self.calls = []

    def value2d(self, x, y):
        self.calls.append((x, y))
        return self.value

    def value3d(self, x, y, z):
        self.calls.append((x, y, z))
        return self.value


class AxisKernel:
    """value = x, which makes octave weights easy to check by hand."""

    supports_3d = True

    def value2d(self, x, y):
        return x

    def value3d(self, x, y, z):
        return x


@pytest.fixture
def constant_kernel():
    return ConstantKernel


@pytest.fixture
def axis_kernel():
    return AxisKernel()


@pytest.fixture
def random_points():
    rng = np.random.default_rng(2024)
    return rng.uniform(-8.0, 8.0, (200, 3))
