"""
fpga_dsp.signals.generators
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Synthetic source signals for exercising a DSP chain.

Every generator produces a *clean* trace over ``points`` samples with
normalised time ``t = i / points``.  The *noisy* trace adds uniform
noise in ``[-0.1, 0.1)``.  Passing a ``seed`` makes both traces
reproducible.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Final, NamedTuple, Optional

import numpy as np

from fpga_dsp.config import (
    DEFAULT_SAMPLING_RATE,
    NOISE_AMPLITUDE,
    SAMPLING_RATES,
    SIGNAL_POINTS,
)

logger = logging.getLogger(__name__)

TWO_PI: Final[float] = 2.0 * np.pi


class SignalPair(NamedTuple):
    """Reference trace and the noisy trace fed into the chain."""

    clean: np.ndarray
    noisy: np.ndarray


def ecg_beat(i: np.ndarray, period: np.ndarray | float) -> np.ndarray:
    """Piecewise-sinusoidal ECG beat (P, Q, R, S, T lobes) repeating every *period*.

    Parameters
    ----------
    i : np.ndarray
        Sample indices (may be fractional).
    period : np.ndarray | float
        Beat length in samples, scalar or per-sample.
    """
    i = np.asarray(i, dtype=np.float64)
    p = np.broadcast_to(np.asarray(period, dtype=np.float64), i.shape)
    ip = np.mod(i, p)

    conditions = [
        ip < p * 0.08,
        (ip > p * 0.12) & (ip < p * 0.16),
        (ip >= p * 0.16) & (ip < p * 0.20),
        (ip >= p * 0.20) & (ip < p * 0.24),
        (ip > p * 0.3) & (ip < p * 0.5),
    ]
    lobes = [
        0.1 * np.sin(np.pi * ip / (p * 0.08)),                    # P
        -0.2 * np.sin(np.pi * (ip - p * 0.12) / (p * 0.04)),      # Q
        1.0 * np.sin(np.pi * (ip - p * 0.16) / (p * 0.04)),       # R
        -0.5 * np.sin(np.pi * (ip - p * 0.20) / (p * 0.04)),      # S
        0.2 * np.sin(np.pi * (ip - p * 0.3) / (p * 0.2)),         # T
    ]
    return np.select(conditions, lobes, default=0.0)


# ── Stateful generators ──────────────────────────────────────────────
def _pink_noise(n: int, rng: np.random.Generator) -> np.ndarray:
    # Paul Kellet's refined pink-noise filter
    b = np.zeros(6)
    out = np.empty(n)
    for k, w in enumerate(rng.random(n) * 2.0 - 1.0):
        b[0] = 0.99886 * b[0] + w * 0.0555179
        b[1] = 0.99332 * b[1] + w * 0.0750759
        b[2] = 0.96900 * b[2] + w * 0.1538520
        b[3] = 0.86650 * b[3] + w * 0.3104856
        b[4] = 0.55000 * b[4] + w * 0.5329522
        b[5] = -0.7616 * b[5] - w * 0.0168980
        out[k] = (b.sum() + w * 0.5362) / 7.0
    return out


def _lorenz(n: int, dt: float = 0.01) -> np.ndarray:
    x, y, z = 0.1, 0.0, 0.0
    out = np.empty(n)
    for k in range(n):
        dx = 10.0 * (y - x) * dt
        dy = (x * (28.0 - z) - y) * dt
        dz = (x * y - (8.0 / 3.0) * z) * dt
        x, y, z = x + dx, y + dy, z + dz
        out[k] = x / 30.0
    return out


# ── Registry ─────────────────────────────────────────────────────────
_Generator = Callable[[np.ndarray, np.ndarray, int, np.random.Generator], np.ndarray]


def _sin(freq: float, t: np.ndarray) -> np.ndarray:
    return np.sin(TWO_PI * freq * t)


def _bits(t: np.ndarray) -> np.ndarray:
    return np.floor(t * 10) % 2 == 0


_GENERATORS: Final[Dict[str, _Generator]] = {
    # biomedical
    "ECG": lambda i, t, n, rng: ecg_beat(i, n / 10),
    "ECG (Arrhythmia)": lambda i, t, n, rng: ecg_beat(i, np.where(i < n / 2, n / 10, n / 15)),
    "ECG (Arrhythmia Simulation)": lambda i, t, n, rng: ecg_beat(
        i, np.where((i > n / 4) & (i < 3 * n / 4), n / 20, n / 10)
    ),
    "ECG (Noise Artifacts)": lambda i, t, n, rng: ecg_beat(i, n / 10),
    "ECG (PAC/PVC beats)": lambda i, t, n, rng: np.select(
        [(i > 400) & (i < 450), (i > 700) & (i < 750)],
        [np.where(i == 420, 1.2, np.where(i == 421, -0.8, 0.0)), ecg_beat(i + 20, n / 10)],
        default=ecg_beat(i, n / 10),
    ),
    "Fetal ECG": lambda i, t, n, rng: ecg_beat(i, n / 10) + 0.2 * ecg_beat(i * 2.5, n / 15),
    "EEG": lambda i, t, n, rng: 0.5 * _sin(10, t) + 0.3 * _sin(25, t),
    "EMG (Muscle)": lambda i, t, n, rng: np.where(
        i % 100 < 50, (rng.random(i.size) - 0.5) * (0.2 + 0.8 * np.sin(np.pi * (i % 50) / 50)), 0.0
    ),
    "EOG (Eye Movement)": lambda i, t, n, rng: np.select(
        [(i > 300) & (i < 350), (i > 700) & (i < 750)], [0.8, -0.8], default=0.0
    ),
    "Plethysmogram (PPG)": lambda i, t, n, rng: 0.5 * np.exp(-2 * (i % 100) / n) * _sin(1.2, (i % 100) / n),
    "Blood Pressure (ABP)": lambda i, t, n, rng: (
        0.6 + 0.3 * _sin(1.2, (i % 100) / n) + 0.1 * _sin(2.4, (i % 100) / n)
    ),
    "Galvanic Skin Response (GSR)": lambda i, t, n, rng: np.maximum(
        0.0, 0.1 * _sin(0.1, t) + np.where((i > 300) & (i < 310), 0.5, 0.0)
    ),
    "Respiratory (RIP)": lambda i, t, n, rng: 0.5 * _sin(0.25, t),
    "HRV": lambda i, t, n, rng: 1.0 + 0.1 * _sin(0.1, t) + 0.05 * _sin(0.25, t),
    # audio
    "Speech": lambda i, t, n, rng: _sin(2, t) * np.exp(-3 * t) * _sin(150, t),
    "Speech (Female)": lambda i, t, n, rng: _sin(2.5, t) * np.exp(-3.5 * t) * _sin(220, t),
    "Audio": lambda i, t, n, rng: _sin(440, t),
    "Music": lambda i, t, n, rng: 0.5 * _sin(261.63, t) + 0.3 * _sin(329.63, t) + 0.2 * _sin(392.0, t),
    "White Noise": lambda i, t, n, rng: rng.random(i.size) * 2 - 1,
    "Pink Noise": lambda i, t, n, rng: _pink_noise(i.size, rng),
    "Brownian Noise": lambda i, t, n, rng: np.cumsum((rng.random(i.size) - 0.5) * 0.1),
    # test signals
    "Sine Wave": lambda i, t, n, rng: _sin(440, t),
    "Cosine Wave": lambda i, t, n, rng: np.cos(TWO_PI * 5 * t),
    "Square Wave": lambda i, t, n, rng: np.where(_sin(5, t) > 0, 1.0, -1.0),
    "Sawtooth Wave": lambda i, t, n, rng: 2 * (t * 5 - np.floor(0.5 + t * 5)),
    "Triangle Wave": lambda i, t, n, rng: 2 * np.abs(2 * (t * 5 - np.floor(0.5 + t * 5))) - 1,
    "Step Function": lambda i, t, n, rng: np.where(i > n / 2, 1.0, 0.0),
    "Impulse Function": lambda i, t, n, rng: np.where(i == n // 2, 1.0, 0.0),
    "Chirp Signal": lambda i, t, n, rng: np.sin(TWO_PI * (1 + 100 * t) * t),
    "Damped Sine Wave": lambda i, t, n, rng: np.exp(-5 * t) * _sin(20, t),
    "Gaussian Pulse": lambda i, t, n, rng: np.exp(-((t - 0.5) ** 2) / (2 * 0.1 * 0.1)),
    "Sinc Function": lambda i, t, n, rng: np.sinc(20 * (t - 0.5)),
    "Multitone Signal": lambda i, t, n, rng: 0.3 * (_sin(50, t) + _sin(120, t) + _sin(200, t)),
    "Rectangular Pulse Train": lambda i, t, n, rng: np.where(i % 100 < 20, 1.0, 0.0),
    "Random Binary Sequence": lambda i, t, n, rng: np.where((i // 32) % 2 == 0, 1.0, -1.0),
    # communications
    "BPSK Signal": lambda i, t, n, rng: np.sin(TWO_PI * 20 * t + np.where(_bits(t), 0.0, np.pi)),
    "AM Signal": lambda i, t, n, rng: (1 + 0.5 * _sin(2, t)) * _sin(30, t),
    "FM Signal": lambda i, t, n, rng: np.cos(TWO_PI * 30 * t + 5 * np.cos(TWO_PI * 3 * t)),
    "ASK Signal": lambda i, t, n, rng: np.where(_bits(t), 1.0, 0.2) * _sin(30, t),
    "FSK Signal": lambda i, t, n, rng: np.sin(TWO_PI * np.where(_bits(t), 20, 30) * t),
    # radar & sonar
    "Pulsed Radar Return": lambda i, t, n, rng: np.where(
        (i % 200 > 100) & (i % 200 < 110), _sin(50, t), 0.0
    ),
    "Doppler Radar": lambda i, t, n, rng: _sin(50, t) + np.where(i > n / 2, _sin(51, t), 0.0),
    "Sonar Ping": lambda i, t, n, rng: np.where(i < 50, np.exp(-0.1 * i) * _sin(40, t), 0.0),
    # mechanical, power & other
    "Vibration Sensor": lambda i, t, n, rng: (
        0.5 * _sin(30, t)
        + (rng.random(i.size) - 0.5) * 0.1
        + np.where(i % 256 == 0, rng.random(i.size) - 0.5, 0.0)
    ),
    "Bearing Fault Signal": lambda i, t, n, rng: np.where(i % 100 == 0, _sin(80, t), 0.0),
    "Three-Phase Power": lambda i, t, n, rng: np.sin(
        TWO_PI * 5 * t - np.floor(i / n * 3) * TWO_PI / 3
    ),
    "Seismic Data": lambda i, t, n, rng: np.exp(-2 * t) * _sin(3, t) + (rng.random(i.size) - 0.5) * 0.05,
    "Chaotic Signal (Lorenz)": lambda i, t, n, rng: _lorenz(i.size),
    "Weather Sensor Data": lambda i, t, n, rng: (
        0.5 * _sin(0.1, t) + 0.2 * _sin(0.5, t) + rng.random(i.size) * 0.02
    ),
}

SIGNAL_TYPES: Final[tuple[str, ...]] = tuple(_GENERATORS)
"""Names accepted by :func:`generate_signal`."""


def generate_signal(
    signal_type: str = "ECG",
    points: int = SIGNAL_POINTS,
    seed: Optional[int] = None,
) -> SignalPair:
    """Generate a clean/noisy pair for *signal_type*.

    Unknown names fall back to a 5-cycle sine (logged as a warning).

    Parameters
    ----------
    signal_type : str
        One of :data:`SIGNAL_TYPES`.
    points : int
        Number of samples.
    seed : int, optional
        Seed for :func:`numpy.random.default_rng`.

    Returns
    -------
    SignalPair
    """
    rng = np.random.default_rng(seed)
    i = np.arange(points)
    t = i / points
    noise = (rng.random(points) - 0.5) * NOISE_AMPLITUDE

    generator = _GENERATORS.get(signal_type)
    if generator is None:
        logger.warning("unknown signal type %r; generating a 5-cycle sine", signal_type)
        clean = _sin(5, t)
    else:
        clean = np.asarray(generator(i, t, points, rng), dtype=np.float64)

    if signal_type == "ECG (Noise Artifacts)":
        wander = 0.15 * _sin(0.5, t)
        muscle = np.where((i > 400) & (i < 420), (rng.random(points) - 0.5) * 0.8, 0.0)
        pop = np.where(i == 600, 1.5, np.where(i == 601, -1.5, 0.0))
        noise = noise + wander + muscle + pop
    elif signal_type == "Bearing Fault Signal":
        noise = noise * 0.1

    return SignalPair(clean=clean, noisy=clean + noise)


def sampling_rate_for(signal_type: str) -> float:
    """Nominal sampling rate in Hz used to label spectra for *signal_type*."""
    return SAMPLING_RATES.get(signal_type, DEFAULT_SAMPLING_RATE)
