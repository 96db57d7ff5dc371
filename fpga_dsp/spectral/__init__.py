"""fpga_dsp.spectral — Windowing, power spectra and frequency response."""

from fpga_dsp.spectral.psd import (
    calculate_frequency_response,
    calculate_psd,
    power_to_db,
    psd_frequencies,
    response_frequencies,
)
from fpga_dsp.spectral.window import WindowKind, apply_window, window_coefficients

__all__: list[str] = [
    "WindowKind",
    "apply_window",
    "window_coefficients",
    "calculate_psd",
    "calculate_frequency_response",
    "power_to_db",
    "psd_frequencies",
    "response_frequencies",
]
