import numpy as np
import pytest

from coherent_noise import PerlinImproved
from coherent_noise.terrain import block_count, column_heights, get_coordinate_grid, sample_grid


def test_coordinate_grid_layout():
    x_grid, z_grid = get_coordinate_grid(10.0, -4.0, 4.0, 2.0, 4, 2)
    assert x_grid.shape == (2, 4)
    np.testing.assert_array_equal(x_grid[0], [10.0, 11.0, 12.0, 13.0])
    np.testing.assert_array_equal(z_grid[:, 0], [-4.0, -3.0])


def test_sample_grid_evaluates_every_cell():
    x_grid, z_grid = get_coordinate_grid(0.0, 0.0, 3.0, 2.0, 3, 2)
    values = sample_grid(lambda x, z: x * 10 + z, x_grid, z_grid)
    np.testing.assert_array_equal(values, [[0.0, 10.0, 20.0], [1.0, 11.0, 21.0]])


def test_sample_grid_shape_mismatch():
    with pytest.raises(ValueError):
        sample_grid(lambda x, z: 0.0, np.zeros((2, 2)), np.zeros((2, 3)))


def test_column_heights_round_scaled_noise(constant_kernel):
    heights = column_heights(constant_kernel(0.5), (0, 0), dimension=4, height_scale=16.0)
    assert heights.dtype == np.int64
    assert heights.shape == (4, 4)
    assert (heights == 8).all()


def test_column_heights_are_deterministic_per_chunk():
    a = column_heights(PerlinImproved(1337), (32, -64))
    b = column_heights(PerlinImproved(1337), (32, -64))
    np.testing.assert_array_equal(a, b)
    assert a.shape == (32, 32)
    assert np.abs(a).max() <= 16


def test_neighbouring_chunks_share_world_coordinates():
    kernel = PerlinImproved(3)
    wide = column_heights(kernel, (0, 0), dimension=8)
    right = column_heights(kernel, (4, 0), dimension=4)
    np.testing.assert_array_equal(wide[:4, 4:], right)


def test_block_count_stacks_from_bottom():
    heights = np.array([[0, -40], [2, 1]])
    assert block_count(heights, bottom=-32) == 32 + 0 + 34 + 33
