"""
fpga_dsp.analysis.bands
~~~~~~~~~~~~~~~~~~~~~~~

Band-power summaries integrated from a one-sided power spectrum.

Sums skip the DC bin and are doubled to fold the negative-frequency
half of the spectrum back in.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from fpga_dsp.config import EEG_BANDS, HRV_HF_BAND, HRV_LF_BAND
from fpga_dsp.errors import ConfigurationError
from fpga_dsp.spectral.psd import calculate_psd
from fpga_dsp.spectral.window import WindowKind


@dataclass(frozen=True)
class EegBands:
    """Doubled band power per classic EEG rhythm."""

    delta: float
    theta: float
    alpha: float
    beta: float


@dataclass(frozen=True)
class HrvAnalysis:
    """Heart-rate-variability LF/HF powers and their ratio."""

    lf_power: float
    hf_power: float
    lf_hf_ratio: float


def _check_sampling_rate(sampling_rate: float) -> float:
    if not sampling_rate > 0:
        raise ConfigurationError(f"sampling_rate must be positive, got {sampling_rate!r}")
    return float(sampling_rate)


def _bin_frequencies(n_bins: int, sampling_rate: float) -> np.ndarray:
    # one-sided spectrum of an N-point transform has N/2 bins
    if n_bins == 0:
        return np.zeros(0)
    return np.arange(n_bins) * (sampling_rate / (2 * n_bins))


def calculate_eeg_bands(psd: Sequence[float], sampling_rate: float) -> EegBands:
    """Integrate *psd* over the delta, theta, alpha and beta bands.

    Parameters
    ----------
    psd : sequence of float
        Output of :func:`~fpga_dsp.spectral.calculate_psd`; bin ``k``
        sits at ``k * sampling_rate / (2 * len(psd))`` Hz.
    sampling_rate : float
        Sampling rate in Hz.

    Returns
    -------
    EegBands
        Band edges are half-open ``[low, high)``; the DC bin is
        excluded.  An empty *psd* gives all-zero bands.
    """
    fs = _check_sampling_rate(sampling_rate)
    power = np.asarray(psd, dtype=np.float64)
    freqs = _bin_frequencies(power.size, fs)

    totals = {}
    for name, (low, high) in EEG_BANDS.items():
        mask = (freqs >= low) & (freqs < high)
        mask[:1] = False
        totals[name] = 2.0 * float(np.sum(power[mask]))
    return EegBands(**totals)


def calculate_hrv_power_bands(
    signal: Sequence[float],
    sampling_rate: float,
    fft_size: int,
    window_type: WindowKind | str = WindowKind.NONE,
) -> HrvAnalysis:
    """LF and HF power of an evenly resampled RR-interval series.

    LF integrates ``[0.04, 0.15]`` Hz and HF ``(0.15, 0.4]`` Hz, so a bin
    at exactly 0.15 Hz counts towards LF only.

    Returns
    -------
    HrvAnalysis
        ``lf_hf_ratio`` is ``inf`` when the HF power is zero.
    """
    fs = _check_sampling_rate(sampling_rate)
    power = calculate_psd(signal, fft_size, window_type)
    freqs = _bin_frequencies(power.size, fs)
    not_dc = np.arange(power.size) >= 1

    lf_low, lf_high = HRV_LF_BAND
    hf_low, hf_high = HRV_HF_BAND
    lf_mask = not_dc & (freqs >= lf_low) & (freqs <= lf_high)
    hf_mask = not_dc & (freqs > hf_low) & (freqs <= hf_high)

    lf_power = 2.0 * float(np.sum(power[lf_mask]))
    hf_power = 2.0 * float(np.sum(power[hf_mask]))
    ratio = lf_power / hf_power if hf_power > 0 else math.inf
    return HrvAnalysis(lf_power=lf_power, hf_power=hf_power, lf_hf_ratio=ratio)
