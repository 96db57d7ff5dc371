"""
fpga_dsp.fixedpoint.codec
~~~~~~~~~~~~~~~~~~~~~~~~~

Conversion between floating-point samples and signed fixed-point
integers.

A ``b``-bit word uses the symmetric scale ``2**(b-1) - 1`` (32767 for
16 bits), so ``+1.0`` and ``-1.0`` are both exactly representable.
Rounding is half-up (``floor(x + 0.5)``), matching the reference
hardware model.  Nothing is clamped: values outside ``[-1, 1]``
quantize to integers beyond the nominal word range.  Use
:func:`is_representable` to detect that case.
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from fpga_dsp.config import MIN_BIT_WIDTH
from fpga_dsp.errors import InvalidBitWidth


def quantization_scale(bit_width: int) -> int:
    """Return the integer full-scale value for a signed *bit_width* word.

    Parameters
    ----------
    bit_width : int
        Total number of bits including sign.

    Returns
    -------
    int
        ``2**(bit_width - 1) - 1``.

    Raises
    ------
    InvalidBitWidth
        If *bit_width* is not an integer or is below 2.
    """
    if isinstance(bit_width, bool) or not isinstance(bit_width, (int, np.integer)):
        raise InvalidBitWidth(f"bit_width must be an integer, got {bit_width!r}")
    if bit_width < MIN_BIT_WIDTH:
        raise InvalidBitWidth(
            f"bit_width must be >= {MIN_BIT_WIDTH}, got {bit_width}"
        )
    return 2 ** (int(bit_width) - 1) - 1


def _round_half_up(x: float) -> int:
    if not math.isfinite(x):
        raise ValueError(f"cannot quantize non-finite value {x!r}")
    return math.floor(x + 0.5)


def quantize(value: float, bit_width: int) -> int:
    """Quantize a real *value* to a signed fixed-point integer.

    Examples
    --------
    >>> quantize(0.5, 16)
    16384
    >>> quantize(-1.0, 8)
    -127
    """
    scale = quantization_scale(bit_width)
    return _round_half_up(float(value) * scale)


def dequantize(int_value: int, bit_width: int) -> float:
    """Map a fixed-point integer back to a real value."""
    return int_value / quantization_scale(bit_width)


def quantize_sequence(values: Sequence[float], bit_width: int) -> List[int]:
    """Element-wise :func:`quantize`.

    Returns plain Python integers so that downstream accumulation has
    unbounded precision.

    Raises
    ------
    ValueError
        If any value is NaN or infinite.
    """
    scale = quantization_scale(bit_width)
    scaled = np.asarray(values, dtype=np.float64) * scale
    return [_round_half_up(float(x)) for x in scaled]


def dequantize_sequence(int_values: Sequence[int], bit_width: int) -> np.ndarray:
    """Element-wise :func:`dequantize` into a ``float64`` array."""
    scale = quantization_scale(bit_width)
    return np.array([v / scale for v in int_values], dtype=np.float64)


def is_representable(value: float, bit_width: int) -> bool:
    """Return *True* if *value* quantizes inside the nominal word range."""
    return abs(quantize(value, bit_width)) <= quantization_scale(bit_width)
