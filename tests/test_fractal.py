import math

import numpy as np
import pytest

from coherent_noise import (
    PerlinClassic,
    PerlinImproved,
    SimplexPatent,
    SimplexTables,
    UnsupportedDimensionError,
    domain_wrapping,
    fbm,
    octaves,
    octaves_with_amplitudes,
    turbulence,
    turbulence_billowy,
    turbulence_ridged,
)
from coherent_noise import config as DEFAULTS

KERNELS_2D = [PerlinClassic, PerlinImproved, SimplexPatent, SimplexTables]


@pytest.mark.parametrize("kernel_cls", KERNELS_2D)
@pytest.mark.parametrize("amplitude", [0.3, 1.0, 7.25])
def test_single_octave_is_the_raw_kernel(kernel_cls, amplitude, random_points):
    kernel = kernel_cls(1337)
    for x, y, _ in random_points[:50]:
        assert octaves(kernel, (x, y), 1, 0.5, amplitude) == kernel.value2d(x, y)


def test_single_octave_3d_is_the_raw_kernel(random_points):
    kernel = PerlinImproved(1337)
    for p in random_points[:50]:
        assert octaves(kernel, tuple(p), 1, 0.5, 2.0) == kernel.value3d(*p)


def test_octaves_weights_and_frequency(axis_kernel):
    # Octave samples at x/1 and x/2, weighted 1 and 0.5, normalized by 1.5.
    assert octaves(axis_kernel, (8.0, 0.0), 2, 0.5, 1.0) == pytest.approx((8.0 + 0.5 * 4.0) / 1.5)


def test_octaves_with_explicit_amplitudes(axis_kernel):
    value = octaves_with_amplitudes(axis_kernel, (16.0, 3.0), [1.0, 2.0, 1.0])
    assert value == pytest.approx((16.0 + 2.0 * 8.0 + 4.0) / 4.0)


def test_octaves_matches_equivalent_amplitude_list():
    kernel = PerlinImproved(8)
    point = (3.7, -1.2)
    assert octaves(kernel, point, 3, 0.5, 2.0) == pytest.approx(
        octaves_with_amplitudes(kernel, point, [2.0, 1.0, 0.5]))


def test_octaves_without_octaves_is_zero(constant_kernel):
    kernel = constant_kernel(0.7)
    assert octaves(kernel, (1.0, 1.0), 0) == 0.0
    assert octaves_with_amplitudes(kernel, (1.0, 1.0), []) == 0.0
    assert kernel.calls == []


def test_octaves_deterministic_across_instances():
    a = PerlinClassic(1337)
    b = PerlinClassic(1337)
    assert octaves(a, (10.3, -4.7), 4, 0.5, 1.0) == octaves(b, (10.3, -4.7), 4, 0.5, 1.0)


def test_octaves_stay_in_kernel_range(random_points):
    kernel = PerlinImproved(2)
    values = [octaves(kernel, (x * 10, y * 10), 5, 0.5, 1.0) for x, y, _ in random_points]
    assert max(abs(v) for v in values) <= 1.0


def test_turbulence_halves_zoom(constant_kernel):
    kernel = constant_kernel(0.5)
    # zooms 8, 4, 2, 1
    assert turbulence(kernel, (3.0, 5.0), 8.0) == pytest.approx(0.5 * 15.0 / 8.0)
    assert kernel.calls == [(3.0 / 8, 5.0 / 8), (3.0 / 4, 5.0 / 4), (3.0 / 2, 5.0 / 2), (3.0, 5.0)]


def test_turbulence_is_signed(constant_kernel):
    assert turbulence(constant_kernel(-0.5), (1.0, 1.0), 4.0) == pytest.approx(-0.5 * 7.0 / 4.0)


def test_billowy_takes_absolute_values(constant_kernel):
    assert turbulence_billowy(constant_kernel(-0.5), (1.0, 1.0), 8.0) == pytest.approx(0.5 * 15.0 / 8.0)


def test_ridged_formula(constant_kernel):
    # zooms 2 and 1: (1 - 0.2) + (1 - 0.1), over 2
    assert turbulence_ridged(constant_kernel(0.1), (0.0, 0.0), 2.0) == pytest.approx(0.85)


@pytest.mark.parametrize("kernel_cls", KERNELS_2D)
@pytest.mark.parametrize("zoom", [1.0, 3.0, 16.0, 100.0])
def test_billowy_turbulence_is_non_negative(kernel_cls, zoom, random_points):
    kernel = kernel_cls(19)
    for x, y, _ in random_points[:40]:
        assert turbulence_billowy(kernel, (x * 20, y * 20), zoom) >= 0.0


def test_fbm_divides_by_initial_zoom(constant_kernel):
    # zooms 8, 4, 2, 1
    assert fbm(constant_kernel(0.25), (1.0, 2.0), 8.0) == pytest.approx(0.25 * 15.0 / 8.0)


@pytest.mark.parametrize("zoom", [1.0, 3.0, 8.0, 37.5])
def test_fbm_shares_the_signed_turbulence_loop(zoom, random_points):
    kernel = PerlinImproved(11)
    for x, y, _ in random_points[:20]:
        assert fbm(kernel, (x * 5, y * 5), zoom) == turbulence(kernel, (x * 5, y * 5), zoom)


def test_fbm_3d():
    kernel = PerlinImproved(4)
    value = fbm(kernel, (1.5, 2.5, 3.5), 8.0)
    assert math.isfinite(value)
    assert abs(value) <= 1.5 * 15.0 / 8.0


def test_zoom_below_one_runs_no_octaves(constant_kernel):
    kernel = constant_kernel(0.9)
    assert turbulence(kernel, (1.0, 1.0), 0.5) == 0.0
    assert fbm(kernel, (1.0, 1.0), 0.5) == 0.0
    assert kernel.calls == []


@pytest.mark.parametrize("operator", [turbulence, turbulence_billowy, turbulence_ridged, fbm])
@pytest.mark.parametrize("zoom", [math.inf, math.nan, 0.0, -4.0])
def test_unusable_zoom_yields_nan(constant_kernel, operator, zoom):
    assert math.isnan(operator(constant_kernel(0.5), (1.0, 1.0), zoom))


def test_non_finite_point_propagates():
    kernel = PerlinImproved(1)
    assert math.isnan(octaves(kernel, (math.nan, 1.0), 3))
    assert math.isnan(fbm(kernel, (1.0, math.inf), 4.0))


def test_domain_wrapping_of_constant_field(constant_kernel):
    kernel = constant_kernel(0.3)
    assert domain_wrapping(kernel, (4.0, 9.0), 4.0) == pytest.approx(0.3 * 7.0 / 4.0)
    # 5 fbm layers, 3 zoom octaves each (4, 2, 1)
    assert len(kernel.calls) == 15


def test_domain_wrapping_uses_literal_offsets_and_factor(constant_kernel):
    kernel = constant_kernel(0.01)
    domain_wrapping(kernel, (0.0, 0.0), 1.0)
    lookups = kernel.calls
    offsets = DEFAULTS.DOMAIN_WARP_OFFSETS
    warp = DEFAULTS.DOMAIN_WARP_FACTOR * 0.01
    assert lookups[0] == pytest.approx(offsets[0])
    assert lookups[1] == pytest.approx(offsets[1])
    assert lookups[2] == pytest.approx((warp + offsets[2][0], warp + offsets[2][1]))
    assert lookups[3] == pytest.approx((warp + offsets[3][0], warp + offsets[3][1]))
    assert lookups[4] == pytest.approx((warp, warp))


def test_domain_wrapping_shift_follows_fbm_magnitude(constant_kernel):
    kernel = constant_kernel(0.01)
    domain_wrapping(kernel, (0.0, 0.0), 4.0)
    # each fbm layer is 0.01 * (4 + 2 + 1) / 4
    warp = DEFAULTS.DOMAIN_WARP_FACTOR * 0.01 * 7.0 / 4.0
    o2 = DEFAULTS.DOMAIN_WARP_OFFSETS[2]
    assert kernel.calls[6] == pytest.approx(((warp + o2[0]) / 4.0, (warp + o2[1]) / 4.0))
    assert kernel.calls[12] == pytest.approx((warp / 4.0, warp / 4.0))


@pytest.mark.parametrize("kernel_cls", KERNELS_2D)
def test_domain_wrapping_is_deterministic(kernel_cls):
    a = kernel_cls(1337)
    b = kernel_cls(1337)
    points = [(0.0, 0.0), (12.5, -3.25), (100.0, 40.0)]
    first = [domain_wrapping(a, p, 32.0) for p in points]
    assert first == [domain_wrapping(b, p, 32.0) for p in points]
    assert all(math.isfinite(v) for v in first)


def test_3d_operator_on_2d_only_kernel():
    kernel = SimplexTables(1)
    with pytest.raises(UnsupportedDimensionError):
        octaves(kernel, (1.0, 2.0, 3.0), 2)


@pytest.mark.parametrize("point", [(1.0,), (1.0, 2.0, 3.0, 4.0)])
def test_point_dimension_is_checked(constant_kernel, point):
    with pytest.raises(ValueError):
        octaves(constant_kernel(0.0), point, 1)


def test_operators_accept_numpy_points():
    kernel = PerlinClassic(5)
    point = np.array([2.5, 7.5])
    assert octaves(kernel, point, 3) == octaves(kernel, (2.5, 7.5), 3)
