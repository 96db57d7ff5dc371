"""
fpga_dsp.errors
~~~~~~~~~~~~~~~

Exception types raised for invalid configuration.

Degenerate *data* (empty or mismatched sequences, all-zero references)
is never an error: those cases return documented sentinel values.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A configuration scalar is outside the range the core can simulate."""


class InvalidBitWidth(ConfigurationError):
    """Bit-width below 2 (zero quantization scale) or not an integer."""


class InvalidSegmentLength(ConfigurationError):
    """A tapered window was requested over fewer than two samples."""


class InvalidFftSize(ConfigurationError):
    """Transform size is not a positive even integer."""


class InvalidCoefficients(ConfigurationError):
    """A coefficient list could not be parsed or is empty."""
