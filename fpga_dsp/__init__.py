"""
fpga_dsp
~~~~~~~~

Fixed-point DSP simulation core for FPGA filter prototyping.

Quick-start::

    import fpga_dsp as dsp

    # Source signal
    clean, noisy = dsp.generate_signal("ECG", seed=0)

    # Fixed-point filtering
    y = dsp.apply_fixed_point_filter(noisy, dsp.EXAMPLE_FIR_COEFFS, 16, 16)

    # Spectra and response
    psd = dsp.calculate_psd(y, 256, dsp.WindowKind.HANN)
    response_db = dsp.calculate_frequency_response(dsp.EXAMPLE_FIR_COEFFS)

    # Metrics
    snr = dsp.calculate_snr(clean, y)

    # Whole chain, all variants, one call
    result = dsp.derive_analysis(clean, noisy, dsp.example_chain())

Subpackages
-----------
fixedpoint  Quantization codec and MAC filter engine.
spectral    Windowing, direct-DFT power spectra, frequency response.
analysis    SNR/MSE and EEG/HRV band power.
chain       Stage configuration and sequential chain processing.
signals     Synthetic source signals.
"""

from __future__ import annotations

__version__: str = "0.1.0"

# ── Core pipeline ────────────────────────────────────────────────────
from fpga_dsp.core import (
    AnalysisConfig,
    AnalysisResult,
    bit_width_analysis,
    bit_width_sweep,
    derive_analysis,
)

# ── Fixed-point ──────────────────────────────────────────────────────
from fpga_dsp.fixedpoint import (
    apply_fixed_point_filter,
    dequantize,
    fixed_multiply,
    quantization_scale,
    quantize,
)

# ── Spectral ─────────────────────────────────────────────────────────
from fpga_dsp.spectral import (
    WindowKind,
    apply_window,
    calculate_frequency_response,
    calculate_psd,
)

# ── Analysis ─────────────────────────────────────────────────────────
from fpga_dsp.analysis import (
    EegBands,
    FidelityMetrics,
    HrvAnalysis,
    calculate_eeg_bands,
    calculate_hrv_power_bands,
    calculate_mse,
    calculate_snr,
)

# ── Chain ────────────────────────────────────────────────────────────
from fpga_dsp.chain import (
    FilterConfiguration,
    StageConfig,
    StageKind,
    apply_block,
    example_chain,
    parse_coefficients,
    process_full_chain,
    resolve_stage,
    stage_from_dict,
)

# ── Signals ──────────────────────────────────────────────────────────
from fpga_dsp.signals import SIGNAL_TYPES, generate_signal, sampling_rate_for

# ── Errors ───────────────────────────────────────────────────────────
from fpga_dsp.errors import (
    ConfigurationError,
    InvalidBitWidth,
    InvalidCoefficients,
    InvalidFftSize,
    InvalidSegmentLength,
)

# ── Config (re-export constants for convenience) ─────────────────────
from fpga_dsp.config import DEFAULT_FFT_SIZE, DEFAULT_FILTER_ORDER, EXAMPLE_FIR_COEFFS, FFT_SIZES

__all__: list[str] = [
    # pipeline
    "AnalysisConfig",
    "AnalysisResult",
    "derive_analysis",
    "bit_width_analysis",
    "bit_width_sweep",
    # fixed-point
    "quantization_scale",
    "quantize",
    "dequantize",
    "fixed_multiply",
    "apply_fixed_point_filter",
    # spectral
    "WindowKind",
    "apply_window",
    "calculate_psd",
    "calculate_frequency_response",
    # analysis
    "FidelityMetrics",
    "EegBands",
    "HrvAnalysis",
    "calculate_mse",
    "calculate_snr",
    "calculate_eeg_bands",
    "calculate_hrv_power_bands",
    # chain
    "StageKind",
    "StageConfig",
    "FilterConfiguration",
    "resolve_stage",
    "stage_from_dict",
    "parse_coefficients",
    "example_chain",
    "apply_block",
    "process_full_chain",
    # signals
    "SIGNAL_TYPES",
    "generate_signal",
    "sampling_rate_for",
    # errors
    "ConfigurationError",
    "InvalidBitWidth",
    "InvalidSegmentLength",
    "InvalidFftSize",
    "InvalidCoefficients",
    # config
    "DEFAULT_FFT_SIZE",
    "DEFAULT_FILTER_ORDER",
    "EXAMPLE_FIR_COEFFS",
    "FFT_SIZES",
]
