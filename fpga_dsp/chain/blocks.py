"""
fpga_dsp.chain.blocks
~~~~~~~~~~~~~~~~~~~~~

Simulated processing blocks built on the fixed-point filter engine.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from fpga_dsp.config import DUC_CARRIER_CYCLES, DUC_LOWPASS_COEFFS, MIXER_TIME_BASE
from fpga_dsp.errors import ConfigurationError
from fpga_dsp.fixedpoint.filter import apply_fixed_point_filter


def moving_average_coefficients(order: int) -> Tuple[float, ...]:
    """*order* equal taps summing to one."""
    if order <= 0:
        raise ConfigurationError(f"moving-average order must be positive, got {order}")
    return (1.0 / order,) * order


def apply_mixing(
    input: Sequence[float],
    carrier_frequency: float,
    time_base: int = MIXER_TIME_BASE,
) -> np.ndarray:
    """Multiply *input* by ``cos(2π · carrier_frequency · i / time_base)``."""
    x = np.asarray(input, dtype=np.float64)
    t = np.arange(x.size) / time_base
    return x * np.cos(2.0 * np.pi * carrier_frequency * t)


def apply_duc_ddc(
    input: Sequence[float],
    coefficients: Sequence[float],
    bit_width: int,
) -> np.ndarray:
    """Digital up/down conversion: mix with the carrier, then low-pass.

    Both data and coefficients use *bit_width*.  An empty coefficient set
    selects the default 5-tap low-pass.
    """
    mixed = apply_mixing(input, DUC_CARRIER_CYCLES)
    taps = coefficients if len(coefficients) > 0 else DUC_LOWPASS_COEFFS
    return apply_fixed_point_filter(mixed, taps, bit_width, bit_width)
