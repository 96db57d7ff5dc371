"""Tapering windows."""

from __future__ import annotations

import numpy as np
import pytest

from fpga_dsp.errors import ConfigurationError, InvalidSegmentLength
from fpga_dsp.spectral import WindowKind, apply_window, window_coefficients


def test_hamming_two_points():
    np.testing.assert_allclose(apply_window([1.0, 1.0], "Hamming"), [0.08, 0.08])


def test_hann_five_points():
    np.testing.assert_allclose(
        window_coefficients(WindowKind.HANN, 5), [0.0, 0.5, 1.0, 0.5, 0.0], atol=1e-12
    )


def test_blackman_end_points_vanish():
    w = window_coefficients(WindowKind.BLACKMAN, 16)
    assert w[0] == pytest.approx(0.0, abs=1e-12)
    assert w[-1] == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("kind", list(WindowKind))
def test_windows_symmetric(kind):
    w = window_coefficients(kind, 33)
    np.testing.assert_allclose(w, w[::-1], atol=1e-12)


def test_none_returns_copy():
    x = np.array([0.3, -0.7, 1.5])
    out = apply_window(x, WindowKind.NONE)
    np.testing.assert_array_equal(out, x)
    out[0] = 0.0
    assert x[0] == 0.3


def test_single_sample():
    np.testing.assert_array_equal(apply_window([0.4], None), [0.4])
    with pytest.raises(InvalidSegmentLength):
        apply_window([0.4], "Hann")


def test_empty_signal():
    assert apply_window([], "Blackman").size == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, WindowKind.NONE),
        ("none", WindowKind.NONE),
        ("HAMMING", WindowKind.HAMMING),
        ("hanning", WindowKind.HANN),
        (" hann ", WindowKind.HANN),
        (WindowKind.BLACKMAN, WindowKind.BLACKMAN),
    ],
)
def test_parse(value, expected):
    assert WindowKind.parse(value) is expected


def test_parse_unknown():
    with pytest.raises(ConfigurationError):
        WindowKind.parse("kaiser")
