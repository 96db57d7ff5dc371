"""Synthetic signal generators."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from fpga_dsp.signals import SIGNAL_TYPES, ecg_beat, generate_signal, sampling_rate_for


@pytest.mark.parametrize("signal_type", SIGNAL_TYPES)
def test_every_generator_is_finite(signal_type):
    clean, noisy = generate_signal(signal_type, seed=0)
    assert clean.shape == noisy.shape == (1024,)
    assert np.all(np.isfinite(clean))
    assert np.all(np.isfinite(noisy))


def test_noise_is_bounded(ecg_pair):
    clean, noisy = ecg_pair
    noise = noisy - clean
    assert noise.min() >= -0.1 - 1e-12
    assert noise.max() < 0.1 + 1e-12


def test_seed_reproducible():
    a = generate_signal("EEG", seed=3)
    b = generate_signal("EEG", seed=3)
    c = generate_signal("EEG", seed=4)
    np.testing.assert_array_equal(a.noisy, b.noisy)
    np.testing.assert_array_equal(a.clean, c.clean)
    assert not np.array_equal(a.noisy, c.noisy)


def test_points():
    clean, _ = generate_signal("Sine Wave", points=256, seed=0)
    assert clean.size == 256


def test_unknown_type_falls_back_to_sine(caplog):
    with caplog.at_level(logging.WARNING, logger="fpga_dsp.signals.generators"):
        clean, _ = generate_signal("Theremin", points=100, seed=0)
    np.testing.assert_allclose(clean, np.sin(2 * np.pi * 5 * np.arange(100) / 100), atol=1e-12)
    assert "Theremin" in caplog.text


def test_noise_artifacts_include_electrode_pop():
    clean, noisy = generate_signal("ECG (Noise Artifacts)", seed=0)
    assert noisy[600] - clean[600] > 1.0
    assert noisy[601] - clean[601] < -1.0


def test_ecg_beat_lobes():
    beat = ecg_beat(np.array([0.0, 18.0, 40.0, 60.0]), 100.0)
    np.testing.assert_allclose(beat, [0.0, 1.0, 0.2, 0.0], atol=1e-12)
    # periodic in the beat length
    np.testing.assert_allclose(ecg_beat(np.array([118.0]), 100.0), [1.0])


def test_sampling_rates():
    assert sampling_rate_for("ECG") == 250.0
    assert sampling_rate_for("HRV") == 4.0
    assert sampling_rate_for("Chirp Signal") == 1000.0
