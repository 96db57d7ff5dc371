"""
fpga_dsp.analysis.metrics
~~~~~~~~~~~~~~~~~~~~~~~~~

Fidelity metrics comparing a filtered signal against its clean reference.

Degenerate inputs return sentinels rather than raising: callers compare
many traces at once and an absent trace must not abort the whole
analysis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class FidelityMetrics:
    """SNR (dB) and MSE of one test trace against the clean reference."""

    snr: float
    mse: float


def _as_pair(clean: Sequence[float], test: Sequence[float]):
    c = np.asarray(clean, dtype=np.float64)
    t = np.asarray(test, dtype=np.float64)
    if c.shape != t.shape or c.size == 0:
        return None
    return c, t


def calculate_mse(clean: Sequence[float], test: Sequence[float]) -> float:
    """Mean squared error between *clean* and *test*.

    Returns ``0.0`` when the sequences are empty or differ in length.
    """
    pair = _as_pair(clean, test)
    if pair is None:
        return 0.0
    c, t = pair
    error = c - t
    return float(np.mean(error * error))


def calculate_snr(clean: Sequence[float], test: Sequence[float]) -> float:
    """Signal-to-noise ratio of *test* against *clean*, in dB.

    ``10 * log10(Σ clean² / Σ (clean - test)²)``.

    Returns
    -------
    float
        ``inf`` for a perfect match (checked first), ``0.0`` for an
        all-zero reference, ``0.0`` for empty or mismatched input.
    """
    pair = _as_pair(clean, test)
    if pair is None:
        return 0.0
    c, t = pair
    error = c - t
    signal_power = float(np.sum(c * c))
    error_power = float(np.sum(error * error))

    if error_power == 0.0:
        return math.inf
    if signal_power == 0.0:
        return 0.0
    return 10.0 * math.log10(signal_power / error_power)


def fidelity_metrics(clean: Sequence[float], test: Sequence[float]) -> FidelityMetrics:
    """Bundle :func:`calculate_snr` and :func:`calculate_mse`."""
    return FidelityMetrics(snr=calculate_snr(clean, test), mse=calculate_mse(clean, test))
