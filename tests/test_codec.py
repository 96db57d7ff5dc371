"""Fixed-point codec."""

from __future__ import annotations

import math

import numpy as np
import pytest

from fpga_dsp.errors import ConfigurationError, InvalidBitWidth
from fpga_dsp.fixedpoint import (
    dequantize,
    dequantize_sequence,
    is_representable,
    quantization_scale,
    quantize,
    quantize_sequence,
)


@pytest.mark.parametrize("bits, scale", [(2, 1), (8, 127), (16, 32767), (32, 2**31 - 1)])
def test_scale(bits, scale):
    assert quantization_scale(bits) == scale


def test_quantize_rounds_half_up():
    assert quantize(0.5, 16) == 16384
    # -16383.5 rounds towards +inf
    assert quantize(-0.5, 16) == -16383
    assert quantize(0.0, 8) == 0
    assert isinstance(quantize(0.3, 12), int)


def test_dequantize():
    assert dequantize(32767, 16) == 1.0
    assert dequantize(-127, 8) == -1.0


@pytest.mark.parametrize("bits", range(4, 33))
def test_round_trip_error_bounded(bits):
    bound = 1.0 / (2 * quantization_scale(bits))
    for x in np.linspace(-1.0, 1.0, 401):
        err = abs(dequantize(quantize(x, bits), bits) - x)
        assert err <= bound + 1e-12


def test_no_saturation():
    assert quantize(2.0, 8) == 254
    assert dequantize(quantize(2.0, 8), 8) == 2.0
    assert not is_representable(2.0, 8)
    assert is_representable(1.0, 8)
    assert is_representable(-1.0, 8)


@pytest.mark.parametrize("bits", [1, 0, -3])
def test_bit_width_below_two_rejected(bits):
    with pytest.raises(InvalidBitWidth):
        quantize(0.1, bits)
    with pytest.raises(InvalidBitWidth):
        dequantize(1, bits)


def test_bit_width_must_be_integer():
    with pytest.raises(InvalidBitWidth):
        quantization_scale(16.0)
    with pytest.raises(InvalidBitWidth):
        quantization_scale(True)


def test_invalid_bit_width_is_configuration_error():
    assert issubclass(InvalidBitWidth, ConfigurationError)
    assert issubclass(ConfigurationError, ValueError)


def test_non_finite_value_rejected():
    with pytest.raises(ValueError):
        quantize(math.nan, 16)
    with pytest.raises(ValueError):
        quantize(math.inf, 16)


def test_sequences():
    assert quantize_sequence([0.25, -0.25, 1.0], 8) == [32, -32, 127]
    out = dequantize_sequence([127, 0, -127], 8)
    assert out.dtype == np.float64
    np.testing.assert_array_equal(out, [1.0, 0.0, -1.0])
