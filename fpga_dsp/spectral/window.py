"""
fpga_dsp.spectral.window
~~~~~~~~~~~~~~~~~~~~~~~~

Symmetric tapering windows applied to a finite block before the DFT.

All tapers use the ``N - 1`` denominator, so both end points of the
block receive the same weight.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np

from fpga_dsp.errors import ConfigurationError, InvalidSegmentLength


class WindowKind(str, Enum):
    """Closed set of supported tapers."""

    NONE = "None"
    HAMMING = "Hamming"
    BLACKMAN = "Blackman"
    HANN = "Hann"

    @classmethod
    def parse(cls, value: "WindowKind | str | None") -> "WindowKind":
        """Accept an enum member, a case-insensitive name, or *None*.

        ``"hanning"`` is accepted as an alias of :attr:`HANN`.

        Raises
        ------
        ConfigurationError
            If *value* names no known window.
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "hanning":
            key = "hann"
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ConfigurationError(
            f"unknown window {value!r}; expected one of {[m.value for m in cls]}"
        )


def window_coefficients(window_type: WindowKind | str, length: int) -> np.ndarray:
    """Return the *length*-point taper for *window_type*.

    Raises
    ------
    InvalidSegmentLength
        If a tapered window is requested for a single sample.
    """
    kind = WindowKind.parse(window_type)
    if length == 0:
        return np.empty(0, dtype=np.float64)
    if kind is WindowKind.NONE:
        return np.ones(length, dtype=np.float64)
    if length < 2:
        raise InvalidSegmentLength(
            f"{kind.value} window needs at least 2 samples, got {length}"
        )

    phase = 2.0 * np.pi * np.arange(length) / (length - 1)
    if kind is WindowKind.HAMMING:
        return 0.54 - 0.46 * np.cos(phase)
    if kind is WindowKind.BLACKMAN:
        return 0.42 - 0.5 * np.cos(phase) + 0.08 * np.cos(2.0 * phase)
    return 0.5 * (1.0 - np.cos(phase))


def apply_window(signal: Sequence[float], window_type: WindowKind | str) -> np.ndarray:
    """Multiply *signal* sample-by-sample with the selected taper.

    ``WindowKind.NONE`` returns an unmodified copy.
    """
    x = np.array(signal, dtype=np.float64)
    if WindowKind.parse(window_type) is WindowKind.NONE:
        return x
    return x * window_coefficients(window_type, len(x))
