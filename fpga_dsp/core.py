"""
fpga_dsp.core
~~~~~~~~~~~~~

High-level analysis pipeline — the "glue" that runs a DSP chain in its
baseline, optimised and custom variants and turns the outputs into
time series, spectra, frequency responses and metrics in one call.

Everything here is recomputed from scratch on each call; the caller
decides when inputs have changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from fpga_dsp.analysis.bands import (
    EegBands,
    HrvAnalysis,
    calculate_eeg_bands,
    calculate_hrv_power_bands,
)
from fpga_dsp.analysis.metrics import FidelityMetrics, fidelity_metrics
from fpga_dsp.chain.blocks import moving_average_coefficients
from fpga_dsp.chain.processor import baseline_chain, process_full_chain
from fpga_dsp.chain.stages import StageConfig, StageKind, resolve_stage
from fpga_dsp.config import DEFAULT_FFT_SIZE
from fpga_dsp.fixedpoint.filter import apply_fixed_point_filter
from fpga_dsp.signals.generators import sampling_rate_for
from fpga_dsp.spectral.psd import (
    calculate_frequency_response,
    calculate_psd,
    power_to_db,
    psd_frequencies,
    response_frequencies,
)
from fpga_dsp.spectral.window import WindowKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisConfig:
    """Scalars steering :func:`derive_analysis`.

    Parameters
    ----------
    signal_type : str
        Source signal name; ``'EEG'`` adds EEG band powers and
        ``'HRV'`` adds LF/HF analysis.
    sampling_rate : float, optional
        Hz.  Defaults to the nominal rate of *signal_type*.
    fft_size : int
        Transform size for all spectra.
    window : WindowKind | str
        Taper applied before each transform.
    active_index : int
        Chain stage whose frequency response is reported and whose
        coefficients *custom_coefficients* replace.
    custom_coefficients : tuple of float, optional
        User-supplied taps evaluated alongside the chain's own.
    """

    signal_type: str = "ECG"
    sampling_rate: Optional[float] = None
    fft_size: int = DEFAULT_FFT_SIZE
    window: WindowKind | str = WindowKind.NONE
    active_index: int = 0
    custom_coefficients: Optional[Tuple[float, ...]] = None

    @property
    def resolved_sampling_rate(self) -> float:
        if self.sampling_rate is not None:
            return float(self.sampling_rate)
        return sampling_rate_for(self.signal_type)


@dataclass
class AnalysisResult:
    """Everything derived from one (signal, chain, config) triple."""

    time_series: pd.DataFrame
    spectrum: pd.DataFrame
    frequency_response: pd.DataFrame
    metrics: Dict[str, FidelityMetrics] = field(default_factory=dict)
    eeg_bands: Dict[str, EegBands] = field(default_factory=dict)
    hrv: Dict[str, HrvAnalysis] = field(default_factory=dict)


def _custom_chain(
    chain: Sequence[StageConfig], index: int, coefficients: Sequence[float]
) -> List[StageConfig]:
    custom = list(chain)
    custom[index] = custom[index].with_coefficients(coefficients)
    return custom


def _frequency_response_frame(
    active: Optional[StageConfig], custom_coefficients: Optional[Sequence[float]]
) -> pd.DataFrame:
    if active is None:
        return pd.DataFrame()
    resolved = resolve_stage(active)
    if resolved.kind is not StageKind.FILTER:
        return pd.DataFrame()

    baseline_db = calculate_frequency_response(moving_average_coefficients(resolved.order))
    frame = pd.DataFrame({
        "frequency": response_frequencies(baseline_db.size),
        "baseline_db": baseline_db,
    })
    if resolved.filter is not None:
        optimized_db = calculate_frequency_response(resolved.filter.coefficients)
        if optimized_db.size:
            frame["optimized_db"] = optimized_db
    if custom_coefficients is not None:
        custom_db = calculate_frequency_response(custom_coefficients)
        if custom_db.size:
            frame["custom_db"] = custom_db
    return frame


def derive_analysis(
    clean: Sequence[float],
    noisy: Sequence[float],
    chain: Sequence[StageConfig],
    config: AnalysisConfig = AnalysisConfig(),
) -> AnalysisResult:
    """Run *chain* over *noisy* and compare every variant against *clean*.

    Three variants are produced: the **baseline** (every stage stripped
    of its coefficients), the **optimized** chain as given, and, when
    ``config.custom_coefficients`` is set, a **custom** chain where the
    active stage uses those coefficients instead.

    Parameters
    ----------
    clean : sequence of float
        Noise-free reference.
    noisy : sequence of float
        Chain input; same length as *clean*.
    chain : sequence of StageConfig
        Stages applied in order.
    config : AnalysisConfig
        Spectral and band-analysis settings.

    Returns
    -------
    AnalysisResult
        ``time_series`` has one row per sample; ``spectrum`` has
        ``fft_size // 2`` rows of dB power; ``frequency_response`` has
        256 rows when the active stage is a filter and is empty
        otherwise.
    """
    clean = np.asarray(clean, dtype=np.float64)
    noisy = np.asarray(noisy, dtype=np.float64)
    fs = config.resolved_sampling_rate

    active = chain[config.active_index] if 0 <= config.active_index < len(chain) else None

    outputs: Dict[str, np.ndarray] = {
        "baseline": process_full_chain(noisy, baseline_chain(chain)),
        "optimized": process_full_chain(noisy, chain),
    }
    if config.custom_coefficients is not None and active is not None:
        outputs["custom"] = process_full_chain(
            noisy, _custom_chain(chain, config.active_index, config.custom_coefficients)
        )

    time_series = pd.DataFrame({
        "time": np.arange(clean.size),
        "clean": clean,
        "input": noisy,
    })
    for name, output in outputs.items():
        time_series[f"{name}_output"] = output

    metrics = {name: fidelity_metrics(clean, output) for name, output in outputs.items()}

    spectra = {"input": calculate_psd(noisy, config.fft_size, config.window)}
    for name, output in outputs.items():
        spectra[name] = calculate_psd(output, config.fft_size, config.window)
    spectrum = pd.DataFrame({"frequency": psd_frequencies(config.fft_size, fs)})
    for name, psd in spectra.items():
        spectrum[f"{name}_power_db"] = power_to_db(psd)

    eeg_bands: Dict[str, EegBands] = {}
    if config.signal_type == "EEG":
        eeg_bands = {name: calculate_eeg_bands(spectra[name], fs) for name in outputs}

    hrv: Dict[str, HrvAnalysis] = {}
    if config.signal_type == "HRV":
        hrv = {
            name: calculate_hrv_power_bands(output, fs, config.fft_size, config.window)
            for name, output in outputs.items()
            if name != "baseline"
        }

    logger.debug(
        "analysis derived: %d samples, %d stages, variants=%s",
        clean.size, len(chain), list(outputs),
    )
    return AnalysisResult(
        time_series=time_series,
        spectrum=spectrum,
        frequency_response=_frequency_response_frame(active, config.custom_coefficients),
        metrics=metrics,
        eeg_bands=eeg_bands,
        hrv=hrv,
    )


def bit_width_analysis(
    clean: Sequence[float],
    noisy: Sequence[float],
    coefficients: Sequence[float],
    data_bit_width: int,
    coeff_bit_width: int,
) -> FidelityMetrics:
    """Filter *noisy* at the given word sizes and score it against *clean*."""
    output = apply_fixed_point_filter(noisy, coefficients, data_bit_width, coeff_bit_width)
    return fidelity_metrics(clean, output)


def bit_width_sweep(
    clean: Sequence[float],
    noisy: Sequence[float],
    coefficients: Sequence[float],
    data_bit_widths: Iterable[int],
    coeff_bit_widths: Iterable[int],
) -> pd.DataFrame:
    """Evaluate :func:`bit_width_analysis` over a grid of word sizes.

    Returns
    -------
    pd.DataFrame
        Columns ``data_bit_width``, ``coeff_bit_width``, ``snr``,
        ``mse``; one row per combination, data width varying slowest.
    """
    coeff_bit_widths = list(coeff_bit_widths)
    rows = []
    for data_bits in data_bit_widths:
        for coeff_bits in coeff_bit_widths:
            result = bit_width_analysis(clean, noisy, coefficients, data_bits, coeff_bits)
            rows.append({
                "data_bit_width": data_bits,
                "coeff_bit_width": coeff_bits,
                "snr": result.snr,
                "mse": result.mse,
            })
    return pd.DataFrame(rows, columns=["data_bit_width", "coeff_bit_width", "snr", "mse"])
