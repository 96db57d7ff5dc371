"""
fpga_dsp.fixedpoint.filter
~~~~~~~~~~~~~~~~~~~~~~~~~~

Causal FIR filtering with fixed-point multiply-accumulate semantics.

Every product is rescaled by the *coefficient* scale, emulating the
``(a * b) >> (coeff_bits - 1)`` shift of a MAC unit, and summed into an
accumulator with unbounded precision.  Accumulator growth and
saturation are not modelled; samples that already exceed the data word
range are reported through the module logger.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from fpga_dsp.fixedpoint.codec import quantization_scale, quantize_sequence

logger = logging.getLogger(__name__)


def fixed_multiply(a: int, b: int, bit_width: int) -> int:
    """Multiply two quantized values and shift back by *bit_width*'s scale.

    Computes ``round(a * b / scale)`` exactly (round-half-up) using
    integer arithmetic.
    """
    scale = quantization_scale(bit_width)
    return (2 * a * b + scale) // (2 * scale)


def apply_fixed_point_filter(
    input: Sequence[float],
    coefficients: Sequence[float],
    data_bit_width: int,
    coeff_bit_width: int,
) -> np.ndarray:
    """Run *input* through an FIR filter in simulated fixed-point.

    Parameters
    ----------
    input : sequence of float
        Time-domain samples.
    coefficients : sequence of float
        Filter taps, ``coefficients[0]`` applied to the newest sample.
        An empty sequence bypasses the filter.
    data_bit_width : int
        Word size for samples and for the dequantized output.
    coeff_bit_width : int
        Word size for coefficients and for product rescaling.

    Returns
    -------
    np.ndarray
        Dequantized output, same length as *input*.  The first
        ``len(coefficients) - 1`` samples are partial (ramp-up) sums.

    Raises
    ------
    InvalidBitWidth
        If either word size is below 2.
    ValueError
        If a sample or coefficient is NaN or infinite.
    """
    if len(coefficients) == 0:
        return np.array(input, dtype=np.float64)

    coeff_scale = quantization_scale(coeff_bit_width)
    data_scale = quantization_scale(data_bit_width)

    q_coeffs = quantize_sequence(coefficients, coeff_bit_width)
    q_input = quantize_sequence(input, data_bit_width)

    overflowed = sum(1 for q in q_input if abs(q) > data_scale)
    if overflowed:
        logger.warning(
            "%d of %d samples exceed the %d-bit data range; no saturation applied",
            overflowed, len(q_input), data_bit_width,
        )

    # round(a*b/scale) == floor((2ab + scale) / 2scale)
    denom = 2 * coeff_scale
    taps = len(q_coeffs)
    output = np.empty(len(q_input), dtype=np.float64)
    for i in range(len(q_input)):
        acc = 0
        for j in range(min(taps, i + 1)):
            acc += (2 * q_input[i - j] * q_coeffs[j] + coeff_scale) // denom
        output[i] = acc / data_scale
    return output
