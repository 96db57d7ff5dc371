"""Shared fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from fpga_dsp.signals import SignalPair, generate_signal


@pytest.fixture
def ecg_pair() -> SignalPair:
    return generate_signal("ECG", seed=1234)


@pytest.fixture
def unit_impulse() -> np.ndarray:
    x = np.zeros(200)
    x[0] = 1.0
    return x


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
