"""Fixed-point FIR filter engine."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from fpga_dsp.chain import StageConfig, StageKind, process_full_chain
from fpga_dsp.config import EXAMPLE_FIR_COEFFS
from fpga_dsp.errors import InvalidBitWidth
from fpga_dsp.fixedpoint import apply_fixed_point_filter, fixed_multiply

HALF_LSB_16 = 1.0 / (2 * 32767)


def test_fixed_multiply():
    # 16384 * 16384 / 32767 = 8192.25
    assert fixed_multiply(16384, 16384, 16) == 8192
    assert fixed_multiply(-16384, 16384, 16) == -8192
    assert fixed_multiply(32767, 1000, 16) == 1000


def test_empty_coefficients_bypass(rng):
    x = rng.standard_normal(50)
    out = apply_fixed_point_filter(x, [], 1, 0)
    np.testing.assert_array_equal(out, x)
    out[0] = 99.0
    assert x[0] != 99.0


def test_output_length_matches_input(rng):
    x = rng.uniform(-1, 1, 37)
    out = apply_fixed_point_filter(x, [0.5, 0.25, 0.125], 12, 10)
    assert out.shape == (37,)


def test_ramp_up_partial_sums():
    x = np.full(20, 0.5)
    out = apply_fixed_point_filter(x, [0.25] * 4, 16, 16)
    np.testing.assert_allclose(out[:4], [0.125, 0.25, 0.375, 0.5], atol=1e-4)
    np.testing.assert_allclose(out[4:], 0.5, atol=1e-4)


def test_moving_average_impulse_response(unit_impulse):
    out = process_full_chain(unit_impulse, [StageConfig(kind=StageKind.FILTER)])

    expected = np.convolve(unit_impulse, np.full(11, 1 / 11))[: unit_impulse.size]
    np.testing.assert_allclose(out, expected, rtol=0, atol=HALF_LSB_16)
    np.testing.assert_allclose(out[:11], 1 / 11, atol=HALF_LSB_16)
    assert np.all(out[:11] == out[0])
    np.testing.assert_array_equal(out[11:], 0.0)


def test_example_filter_tracks_float_convolution(ecg_pair):
    _, noisy = ecg_pair
    fixed = apply_fixed_point_filter(noisy, EXAMPLE_FIR_COEFFS, 16, 16)
    floating = np.convolve(noisy, EXAMPLE_FIR_COEFFS)[: noisy.size]
    np.testing.assert_allclose(fixed, floating, atol=1e-3)


def test_coarse_coefficients_zero_out_small_taps():
    # at 4 bits (scale 7) taps below 1/14 quantize to zero
    x = np.zeros(5)
    x[0] = 1.0
    out = apply_fixed_point_filter(x, [0.05, 1.0], 16, 4)
    assert out[0] == 0.0
    assert out[1] == pytest.approx(1.0)


def test_out_of_range_samples_logged_not_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="fpga_dsp.fixedpoint.filter"):
        out = apply_fixed_point_filter([2.0, 0.0], [1.0], 8, 8)
    assert out[0] == 2.0
    assert "exceed" in caplog.text


def test_invalid_bit_widths_rejected():
    with pytest.raises(InvalidBitWidth):
        apply_fixed_point_filter([0.1, 0.2], [1.0], 1, 16)
    with pytest.raises(InvalidBitWidth):
        apply_fixed_point_filter([0.1, 0.2], [1.0], 16, 0)


def test_input_not_mutated(rng):
    x = rng.uniform(-1, 1, 16)
    before = x.copy()
    apply_fixed_point_filter(x, [0.5, 0.5], 16, 16)
    np.testing.assert_array_equal(x, before)


@pytest.mark.parametrize("bad", [np.nan, np.inf])
def test_non_finite_sample_rejected(bad):
    with pytest.raises(ValueError):
        apply_fixed_point_filter([0.1, bad, 0.2], [0.5, 0.5], 16, 16)
