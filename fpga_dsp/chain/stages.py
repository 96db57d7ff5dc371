"""
fpga_dsp.chain.stages
~~~~~~~~~~~~~~~~~~~~~

Stage configuration for a DSP chain: block vocabulary, the closed
:class:`StageConfig` variant, and the single place where defaults are
filled in (:func:`resolve_stage`).

Loose, UI-shaped block dictionaries are decoded once here, so the
processor only ever sees fully-populated, immutable
:class:`ResolvedStageConfig` values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Final, Mapping, Optional, Sequence, Tuple

from fpga_dsp.config import (
    BASELINE_COEFF_BIT_WIDTH,
    BASELINE_DATA_BIT_WIDTH,
    DEFAULT_FILTER_ORDER,
    EXAMPLE_FIR_COEFFS,
)
from fpga_dsp.errors import ConfigurationError, InvalidCoefficients
from fpga_dsp.fixedpoint.codec import quantization_scale


class StageKind(str, Enum):
    """How a chain stage transforms its input."""

    FILTER = "filter"
    DUC_DDC = "duc_ddc"
    PASS_THROUGH = "pass_through"


# ── Block vocabulary ─────────────────────────────────────────────────
FILTER_BLOCK_TYPES: Final[frozenset[str]] = frozenset({
    "FIR", "IIR", "CIC Filter", "Half-band Filter", "Matched Filter",
    "Wiener Filter", "Kalman Filter", "Convolution", "Correlation",
})
"""Block types simulated as FIR convolutions."""

DUC_DDC_BLOCK_TYPES: Final[frozenset[str]] = frozenset({"DUC/DDC"})
"""Block types simulated as mixer + low-pass."""

_KIND_BY_VALUE: Final[dict[str, StageKind]] = {k.value: k for k in StageKind}


def kind_for_block(block_type: str) -> StageKind:
    """Map a block label (e.g. ``'FIR'``, ``'DUC/DDC'``, ``'FFT'``) to its kind.

    Unrecognised labels are pass-through stages.
    """
    if block_type in FILTER_BLOCK_TYPES:
        return StageKind.FILTER
    if block_type in DUC_DDC_BLOCK_TYPES:
        return StageKind.DUC_DDC
    return StageKind.PASS_THROUGH


# ── Configuration values ─────────────────────────────────────────────
@dataclass(frozen=True)
class FilterConfiguration:
    """Coefficient set plus the word sizes it was designed for."""

    coefficients: Tuple[float, ...]
    data_bit_width: int = BASELINE_DATA_BIT_WIDTH
    coeff_bit_width: int = BASELINE_COEFF_BIT_WIDTH

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "coefficients", tuple(float(c) for c in self.coefficients)
        )
        quantization_scale(self.data_bit_width)
        quantization_scale(self.coeff_bit_width)


@dataclass(frozen=True)
class StageConfig:
    """One stage of a DSP chain.

    Parameters
    ----------
    kind : StageKind | str
        Transform family; a string is converted to its :class:`StageKind`.
    order : int, optional
        Baseline moving-average length for filter stages.
    coefficients : tuple of float, optional
        Designed taps.  *None* means the stage has not been optimised
        and runs its baseline transform.
    data_bit_width, coeff_bit_width : int, optional
        Word sizes for *coefficients*; default to 16 bits.
    block_type : str, optional
        Dashboard block label, kept for display.
    """

    kind: StageKind = StageKind.FILTER
    order: Optional[int] = None
    coefficients: Optional[Tuple[float, ...]] = None
    data_bit_width: Optional[int] = None
    coeff_bit_width: Optional[int] = None
    block_type: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        try:
            kind = StageKind(self.kind)
        except ValueError:
            raise ConfigurationError(f"unknown stage kind {self.kind!r}") from None
        object.__setattr__(self, "kind", kind)
        if self.coefficients is not None:
            object.__setattr__(
                self, "coefficients", tuple(float(c) for c in self.coefficients)
            )

    @property
    def is_optimized(self) -> bool:
        return self.coefficients is not None

    def without_configuration(self) -> "StageConfig":
        """Return this stage in its baseline (un-optimised) form."""
        return replace(self, coefficients=None, data_bit_width=None, coeff_bit_width=None)

    def with_coefficients(self, coefficients: Sequence[float]) -> "StageConfig":
        """Return this stage with *coefficients* swapped in, keeping word sizes."""
        return replace(self, coefficients=tuple(coefficients))


@dataclass(frozen=True)
class ResolvedStageConfig:
    """A :class:`StageConfig` with every default applied."""

    kind: StageKind
    order: int
    filter: Optional[FilterConfiguration]


def _default(value: Optional[int], fallback: int) -> int:
    # only a missing word size falls back; an explicit 0 is validated
    return fallback if value is None else value


def resolve_stage(stage: StageConfig) -> ResolvedStageConfig:
    """Fill in defaults for *stage*.

    A missing or zero order becomes :data:`~fpga_dsp.config.DEFAULT_FILTER_ORDER`;
    missing word sizes become 16 bits.

    Raises
    ------
    ConfigurationError
        If the order is negative.
    InvalidBitWidth
        If an explicit word size is below 2.
    """
    order = stage.order or DEFAULT_FILTER_ORDER
    if order < 0:
        raise ConfigurationError(f"filter order must not be negative, got {stage.order}")

    config = None
    if stage.coefficients is not None:
        config = FilterConfiguration(
            coefficients=stage.coefficients,
            data_bit_width=_default(stage.data_bit_width, BASELINE_DATA_BIT_WIDTH),
            coeff_bit_width=_default(stage.coeff_bit_width, BASELINE_COEFF_BIT_WIDTH),
        )
    return ResolvedStageConfig(kind=stage.kind, order=int(order), filter=config)


# ── Boundary decoding ────────────────────────────────────────────────
def _first(mapping: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if mapping.get(key) is not None:
            return mapping[key]
    return None


def _as_int(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
    if not number.is_integer():
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return int(number)


def stage_from_dict(block: Mapping[str, Any]) -> StageConfig:
    """Decode a loosely-typed block description into a :class:`StageConfig`.

    Accepts the dashboard's block shape::

        {"type": "FIR",
         "config": {"coefficients": [...], "dataBitWidth": 16,
                    "coefficientBitWidth": 16},
         "settings": {"filterOrder": 11}}

    as well as flat snake_case keys (``kind``, ``order``,
    ``coefficients``, ``data_bit_width``, ``coeff_bit_width``).

    Raises
    ------
    ConfigurationError
        If the kind is unknown or the order or a word size is not an
        integer.
    """
    config = block.get("config") or {}
    settings = block.get("settings") or {}

    block_type = block.get("type")
    kind_value = block.get("kind")
    if isinstance(kind_value, StageKind):
        kind = kind_value
    elif kind_value is not None:
        try:
            kind = _KIND_BY_VALUE[str(kind_value)]
        except KeyError:
            raise ConfigurationError(f"unknown stage kind {kind_value!r}") from None
    elif block_type is not None:
        kind = kind_for_block(str(block_type))
    else:
        kind = StageKind.PASS_THROUGH

    coefficients = _first(config, "coefficients")
    if coefficients is None:
        coefficients = block.get("coefficients")

    order = _first(settings, "filterOrder", "order")
    data_bits = _first(config, "dataBitWidth", "data_bit_width")
    coeff_bits = _first(config, "coefficientBitWidth", "coeff_bit_width")

    return StageConfig(
        kind=kind,
        order=_as_int(order if order is not None else block.get("order"), "order"),
        coefficients=coefficients,
        data_bit_width=_as_int(
            data_bits if data_bits is not None else block.get("data_bit_width"),
            "data_bit_width",
        ),
        coeff_bit_width=_as_int(
            coeff_bits if coeff_bits is not None else block.get("coeff_bit_width"),
            "coeff_bit_width",
        ),
        block_type=block_type,
    )


def parse_coefficients(text: str) -> Tuple[float, ...]:
    """Parse a comma-separated list of coefficients.

    Examples
    --------
    >>> parse_coefficients("0.1, 0.2, 0.4, 0.2, 0.1")
    (0.1, 0.2, 0.4, 0.2, 0.1)

    Raises
    ------
    InvalidCoefficients
        If any token is not a finite number or no coefficient is given.
    """
    tokens = [tok.strip() for tok in text.split(",")]
    tokens = [tok for tok in tokens if tok]
    if not tokens:
        raise InvalidCoefficients("enter at least one coefficient")

    values = []
    for tok in tokens:
        try:
            value = float(tok)
        except ValueError:
            raise InvalidCoefficients(f"not a number: {tok!r}") from None
        if not math.isfinite(value):
            raise InvalidCoefficients(f"not a finite number: {tok!r}")
        values.append(value)
    return tuple(values)


def example_chain() -> list[StageConfig]:
    """The pre-loaded single-stage chain: the example 11-tap ECG FIR at 16/16 bits."""
    return [
        StageConfig(
            kind=StageKind.FILTER,
            order=DEFAULT_FILTER_ORDER,
            coefficients=EXAMPLE_FIR_COEFFS,
            data_bit_width=16,
            coeff_bit_width=16,
            block_type="FIR",
        )
    ]
