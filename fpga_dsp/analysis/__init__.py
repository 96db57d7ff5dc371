"""fpga_dsp.analysis — Fidelity metrics and band-power summaries."""

from fpga_dsp.analysis.bands import (
    EegBands,
    HrvAnalysis,
    calculate_eeg_bands,
    calculate_hrv_power_bands,
)
from fpga_dsp.analysis.metrics import (
    FidelityMetrics,
    calculate_mse,
    calculate_snr,
    fidelity_metrics,
)

__all__: list[str] = [
    "FidelityMetrics",
    "calculate_mse",
    "calculate_snr",
    "fidelity_metrics",
    "EegBands",
    "HrvAnalysis",
    "calculate_eeg_bands",
    "calculate_hrv_power_bands",
]
