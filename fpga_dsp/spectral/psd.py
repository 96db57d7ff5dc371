"""
fpga_dsp.spectral.psd
~~~~~~~~~~~~~~~~~~~~~

Power spectral density and filter magnitude response.

Both transforms are evaluated directly from their defining sums
(O(N²)) rather than through an FFT.  The supported transform sizes
(64–1024, see :data:`~fpga_dsp.config.FFT_SIZES`) keep this
interactive, and the direct form pins down bin indexing and the ``1/N``
power normalisation exactly.  A faster implementation must reproduce
both.
"""

from __future__ import annotations

import logging
from typing import Sequence

import librosa
import numpy as np

from fpga_dsp.config import (
    FFT_SIZES,
    FREQ_RESPONSE_POINTS,
    MAGNITUDE_FLOOR,
    POWER_FLOOR,
)
from fpga_dsp.errors import InvalidFftSize
from fpga_dsp.spectral.window import WindowKind, apply_window

logger = logging.getLogger(__name__)


def _check_fft_size(fft_size: int) -> int:
    if isinstance(fft_size, bool) or not isinstance(fft_size, (int, np.integer)):
        raise InvalidFftSize(f"fft_size must be an integer, got {fft_size!r}")
    if fft_size <= 0 or fft_size % 2:
        raise InvalidFftSize(f"fft_size must be a positive even integer, got {fft_size}")
    if fft_size not in FFT_SIZES:
        logger.warning(
            "fft_size=%d is outside the supported sizes %s; direct DFT cost grows as N²",
            fft_size, FFT_SIZES,
        )
    return int(fft_size)


def calculate_psd(
    signal: Sequence[float],
    fft_size: int,
    window_type: WindowKind | str = WindowKind.NONE,
) -> np.ndarray:
    """Compute the one-sided power spectrum of the first *fft_size* samples.

    The signal is truncated or zero-padded to *fft_size*, tapered by
    *window_type*, and transformed with a direct DFT.

    Parameters
    ----------
    signal : sequence of float
        Time-domain samples.
    fft_size : int
        Transform length ``N`` (positive, even).
    window_type : WindowKind | str
        Taper applied after padding.

    Returns
    -------
    np.ndarray, shape ``(fft_size // 2,)``
        ``|X[k]|² / N`` for ``k`` in ``[0, N/2)``.  Bin ``k`` lies at
        ``k * sampling_rate / N`` Hz.

    Raises
    ------
    InvalidFftSize
        If *fft_size* is not a positive even integer.
    """
    n_fft = _check_fft_size(fft_size)

    segment = np.asarray(signal, dtype=np.float64)[:n_fft]
    segment = librosa.util.fix_length(segment, size=n_fft)
    windowed = apply_window(segment, window_type)

    # angle[n, k] = 2πkn/N
    n = np.arange(n_fft)
    k = np.arange(n_fft // 2)
    angle = 2.0 * np.pi * np.outer(n, k) / n_fft
    real = windowed @ np.cos(angle)
    imag = -(windowed @ np.sin(angle))
    return (real * real + imag * imag) / n_fft


def calculate_frequency_response(coefficients: Sequence[float]) -> np.ndarray:
    """Magnitude response of an FIR filter in dB.

    The DTFT is evaluated at ``ω_k = πk / 256`` for ``k`` in
    ``[0, 256)``, i.e. normalised frequency ``k / 512`` cycles/sample.
    Magnitudes are floored at ``1e-9`` (−180 dB) before conversion.

    Returns
    -------
    np.ndarray
        256 dB values, or an empty array when *coefficients* is empty.
    """
    h = np.asarray(coefficients, dtype=np.float64)
    if h.size == 0:
        return np.empty(0, dtype=np.float64)

    omega = np.pi * np.arange(FREQ_RESPONSE_POINTS) / FREQ_RESPONSE_POINTS
    phase = np.outer(omega, np.arange(h.size))
    real = np.cos(phase) @ h
    imag = -(np.sin(phase) @ h)
    magnitude = np.sqrt(real * real + imag * imag)
    return librosa.amplitude_to_db(magnitude, ref=1.0, amin=MAGNITUDE_FLOOR, top_db=None)


def power_to_db(psd: Sequence[float]) -> np.ndarray:
    """Convert spectrum power to dB with a ``1e-12`` floor, for display."""
    return librosa.power_to_db(
        np.asarray(psd, dtype=np.float64), ref=1.0, amin=POWER_FLOOR, top_db=None
    )


def psd_frequencies(fft_size: int, sampling_rate: float) -> np.ndarray:
    """Centre frequency in Hz of every bin returned by :func:`calculate_psd`."""
    n_fft = _check_fft_size(fft_size)
    return np.arange(n_fft // 2) * (sampling_rate / n_fft)


def response_frequencies(points: int = FREQ_RESPONSE_POINTS) -> np.ndarray:
    """Normalised frequency (cycles/sample) of each frequency-response point."""
    return np.arange(points) / (2.0 * points)
