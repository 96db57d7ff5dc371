"""
fpga_dsp.chain.processor
~~~~~~~~~~~~~~~~~~~~~~~~

Sequential application of a DSP chain to a sample sequence.

Each stage consumes the previous stage's output; there is no fan-out
or fan-in.  Optimised stages run their designed coefficients,
un-optimised stages run a baseline stand-in (an ``order``-tap moving
average for filters, identity for everything else).
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from fpga_dsp.chain.blocks import apply_duc_ddc, moving_average_coefficients
from fpga_dsp.chain.stages import StageConfig, StageKind, resolve_stage
from fpga_dsp.config import BASELINE_COEFF_BIT_WIDTH, BASELINE_DATA_BIT_WIDTH
from fpga_dsp.fixedpoint.filter import apply_fixed_point_filter

logger = logging.getLogger(__name__)


def apply_baseline_block(input: Sequence[float], stage: StageConfig) -> np.ndarray:
    """Run the un-optimised stand-in for *stage*."""
    resolved = resolve_stage(stage)
    if resolved.kind is StageKind.FILTER:
        return apply_fixed_point_filter(
            input,
            moving_average_coefficients(resolved.order),
            BASELINE_DATA_BIT_WIDTH,
            BASELINE_COEFF_BIT_WIDTH,
        )
    return np.array(input, dtype=np.float64)


def apply_block(input: Sequence[float], stage: StageConfig) -> np.ndarray:
    """Apply one chain stage to *input*.

    Parameters
    ----------
    input : sequence of float
        Stage input.
    stage : StageConfig
        Stage description; defaults are resolved here.

    Returns
    -------
    np.ndarray
        Stage output, same length as *input*.
    """
    resolved = resolve_stage(stage)
    config = resolved.filter
    if config is not None:
        if resolved.kind is StageKind.FILTER:
            return apply_fixed_point_filter(
                input, config.coefficients, config.data_bit_width, config.coeff_bit_width
            )
        if resolved.kind is StageKind.DUC_DDC:
            return apply_duc_ddc(input, config.coefficients, config.data_bit_width)
    return apply_baseline_block(input, stage)


def process_full_chain(input: Sequence[float], chain: Sequence[StageConfig]) -> np.ndarray:
    """Fold :func:`apply_block` over *chain* in order.

    An empty chain returns a copy of *input*.
    """
    signal = np.array(input, dtype=np.float64)
    for index, stage in enumerate(chain):
        logger.debug(
            "stage %d: %s (%s)",
            index, stage.block_type or stage.kind.value,
            "optimized" if stage.is_optimized else "baseline",
        )
        signal = apply_block(signal, stage)
    return signal


def baseline_chain(chain: Sequence[StageConfig]) -> List[StageConfig]:
    """Return *chain* with every stage's designed coefficients removed."""
    return [stage.without_configuration() for stage in chain]
