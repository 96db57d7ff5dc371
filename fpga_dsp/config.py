"""
fpga_dsp.config
~~~~~~~~~~~~~~~

Global constants for fixed-point simulation and spectral analysis.
Centralises all magic numbers so they can be imported once and
shared across every submodule.
"""

from typing import Final

# ── Fixed-point ──────────────────────────────────────────────────────
MIN_BIT_WIDTH: Final[int] = 2
"""Smallest bit-width with a non-zero quantization scale."""

BASELINE_DATA_BIT_WIDTH: Final[int] = 16
"""Data bit-width used by un-optimised (baseline) filter stages."""

BASELINE_COEFF_BIT_WIDTH: Final[int] = 16
"""Coefficient bit-width used by un-optimised (baseline) filter stages."""

# ── Chain ────────────────────────────────────────────────────────────
DEFAULT_FILTER_ORDER: Final[int] = 11
"""Moving-average length for filter stages without an explicit order."""

MIXER_TIME_BASE: Final[int] = 200
"""Samples per carrier time unit in the digital mixer."""

DUC_CARRIER_CYCLES: Final[float] = 20.0
"""Carrier frequency of the DUC/DDC mixer, in cycles per time unit."""

DUC_LOWPASS_COEFFS: Final[tuple[float, ...]] = (0.1, 0.2, 0.4, 0.2, 0.1)
"""Low-pass taps used by DUC/DDC stages configured without coefficients."""

EXAMPLE_FIR_COEFFS: Final[tuple[float, ...]] = (
    -0.003, 0.005, 0.031, 0.107, 0.222, 0.276,
    0.222, 0.107, 0.031, 0.005, -0.003,
)
"""Symmetric 11-tap ECG low-pass shipped as the pre-loaded example design."""

# ── Spectral ─────────────────────────────────────────────────────────
FFT_SIZES: Final[tuple[int, ...]] = (64, 128, 256, 512, 1024)
"""Transform sizes that keep the direct O(N²) DFT interactive."""

DEFAULT_FFT_SIZE: Final[int] = 256
"""Transform size used when no FFT stage overrides it."""

FREQ_RESPONSE_POINTS: Final[int] = 256
"""Number of DTFT evaluation points between 0 and π."""

MAGNITUDE_FLOOR: Final[float] = 1e-9
"""Magnitude floor before dB conversion (−180 dB)."""

POWER_FLOOR: Final[float] = 1e-12
"""Power floor before dB conversion of spectra (−120 dB)."""

# ── Band power ───────────────────────────────────────────────────────
EEG_BANDS: Final[dict[str, tuple[float, float]]] = {
    "delta": (0.5, 4.0),
    "theta": (4.0, 8.0),
    "alpha": (8.0, 13.0),
    "beta": (13.0, 30.0),
}
"""EEG band edges in Hz, half-open ``[low, high)``."""

HRV_LF_BAND: Final[tuple[float, float]] = (0.04, 0.15)
"""HRV low-frequency band in Hz, closed ``[low, high]``."""

HRV_HF_BAND: Final[tuple[float, float]] = (0.15, 0.4)
"""HRV high-frequency band in Hz, ``(low, high]``."""

# ── Signals ──────────────────────────────────────────────────────────
SIGNAL_POINTS: Final[int] = 1024
"""Default length of generated source signals."""

NOISE_AMPLITUDE: Final[float] = 0.2
"""Peak-to-peak amplitude of the additive uniform noise."""

DEFAULT_SAMPLING_RATE: Final[float] = 1000.0
"""Sampling rate in Hz for signal types without a specific rate."""

SAMPLING_RATES: Final[dict[str, float]] = {
    "ECG": 250.0,
    "EEG": 250.0,
    "HRV": 4.0,
    "Audio": 8000.0,
    "Speech": 8000.0,
    "Music": 8000.0,
}
"""Nominal sampling rates in Hz per signal type."""
