"""fpga_dsp.signals — Synthetic source signals."""

from fpga_dsp.signals.generators import (
    SIGNAL_TYPES,
    SignalPair,
    ecg_beat,
    generate_signal,
    sampling_rate_for,
)

__all__: list[str] = [
    "SIGNAL_TYPES",
    "SignalPair",
    "ecg_beat",
    "generate_signal",
    "sampling_rate_for",
]
