"""Stage configuration and decoding."""

from __future__ import annotations

import dataclasses

import pytest

from fpga_dsp.chain import (
    FilterConfiguration,
    StageConfig,
    StageKind,
    example_chain,
    kind_for_block,
    parse_coefficients,
    resolve_stage,
    stage_from_dict,
)
from fpga_dsp.config import EXAMPLE_FIR_COEFFS
from fpga_dsp.errors import ConfigurationError, InvalidBitWidth, InvalidCoefficients


def test_resolve_defaults():
    resolved = resolve_stage(StageConfig(kind=StageKind.FILTER))
    assert resolved.order == 11
    assert resolved.filter is None

    resolved = resolve_stage(StageConfig(coefficients=[0.5, 0.5]))
    assert resolved.filter == FilterConfiguration((0.5, 0.5), 16, 16)


def test_zero_order_uses_default():
    assert resolve_stage(StageConfig(order=0)).order == 11
    assert resolve_stage(StageConfig(order=5)).order == 5


def test_negative_order_rejected():
    with pytest.raises(ConfigurationError):
        resolve_stage(StageConfig(order=-3))


def test_explicit_bit_width_validated():
    with pytest.raises(InvalidBitWidth):
        resolve_stage(StageConfig(coefficients=[1.0], data_bit_width=1))
    with pytest.raises(InvalidBitWidth):
        FilterConfiguration((1.0,), 16, 1)


def test_filter_configuration_is_immutable():
    config = FilterConfiguration([0.25, 0.75], 12, 10)
    assert config.coefficients == (0.25, 0.75)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.data_bit_width = 8


@pytest.mark.parametrize(
    "label, kind",
    [
        ("FIR", StageKind.FILTER),
        ("Correlation", StageKind.FILTER),
        ("Kalman Filter", StageKind.FILTER),
        ("DUC/DDC", StageKind.DUC_DDC),
        ("FFT", StageKind.PASS_THROUGH),
        ("Decimator", StageKind.PASS_THROUGH),
    ],
)
def test_kind_for_block(label, kind):
    assert kind_for_block(label) is kind


def test_stage_variants():
    stage = StageConfig(coefficients=[0.1, 0.9], data_bit_width=12, coeff_bit_width=10)
    assert stage.is_optimized

    bare = stage.without_configuration()
    assert not bare.is_optimized
    assert bare.data_bit_width is None

    swapped = stage.with_coefficients([0.2] * 5)
    assert swapped.coefficients == (0.2,) * 5
    assert (swapped.data_bit_width, swapped.coeff_bit_width) == (12, 10)


def test_stage_from_dashboard_block():
    stage = stage_from_dict({
        "type": "FIR",
        "config": {"coefficients": [0.5, 0.5], "dataBitWidth": 12, "coefficientBitWidth": 10},
        "settings": {"filterOrder": 7},
    })
    assert stage == StageConfig(
        kind=StageKind.FILTER, order=7, coefficients=(0.5, 0.5),
        data_bit_width=12, coeff_bit_width=10,
    )
    assert stage.block_type == "FIR"


def test_stage_from_unconfigured_block():
    stage = stage_from_dict({"type": "DUC/DDC"})
    assert stage.kind is StageKind.DUC_DDC
    assert not stage.is_optimized

    assert stage_from_dict({"type": "FFT"}).kind is StageKind.PASS_THROUGH


def test_stage_from_flat_dict():
    stage = stage_from_dict({"kind": "filter", "order": 5, "coefficients": [1.0]})
    assert stage.kind is StageKind.FILTER
    assert stage.order == 5
    assert stage.coefficients == (1.0,)


def test_stage_from_dict_unknown_kind():
    with pytest.raises(ConfigurationError):
        stage_from_dict({"kind": "resampler"})


def test_parse_coefficients():
    assert parse_coefficients(" -0.5,1e-3 ,, 2 ") == (-0.5, 0.001, 2.0)


@pytest.mark.parametrize("text", ["", " , ,", "0.1, abc", "0.1, inf", "nan"])
def test_parse_coefficients_rejects(text):
    with pytest.raises(InvalidCoefficients):
        parse_coefficients(text)


def test_example_chain():
    (stage,) = example_chain()
    assert stage.kind is StageKind.FILTER
    assert stage.coefficients == EXAMPLE_FIR_COEFFS
    assert (stage.data_bit_width, stage.coeff_bit_width) == (16, 16)
    assert sum(stage.coefficients) == pytest.approx(1.0)


def test_string_kind_converted():
    stage = StageConfig(kind="duc_ddc")
    assert stage.kind is StageKind.DUC_DDC
    assert resolve_stage(StageConfig(kind="filter", order=4)).kind is StageKind.FILTER


def test_unknown_kind_rejected():
    with pytest.raises(ConfigurationError):
        StageConfig(kind="resampler")


@pytest.mark.parametrize("field", ["data_bit_width", "coeff_bit_width"])
def test_explicit_zero_bit_width_rejected(field):
    with pytest.raises(InvalidBitWidth):
        resolve_stage(StageConfig(coefficients=[1.0], **{field: 0}))


def test_stage_from_dict_numeric_strings():
    stage = stage_from_dict({
        "type": "FIR",
        "config": {"coefficients": [1.0], "dataBitWidth": "12", "coefficientBitWidth": 10.0},
        "settings": {"filterOrder": "7"},
    })
    assert stage.order == 7
    assert (stage.data_bit_width, stage.coeff_bit_width) == (12, 10)


def test_stage_from_dict_explicit_zero_bit_width_kept():
    stage = stage_from_dict({"type": "FIR", "config": {"coefficients": [1.0], "dataBitWidth": 0}})
    assert stage.data_bit_width == 0
    with pytest.raises(InvalidBitWidth):
        resolve_stage(stage)


@pytest.mark.parametrize(
    "block",
    [
        {"type": "FIR", "settings": {"filterOrder": "seven"}},
        {"type": "FIR", "settings": {"filterOrder": 7.5}},
        {"kind": "filter", "data_bit_width": [16]},
        {"kind": "filter", "coeff_bit_width": True},
    ],
)
def test_stage_from_dict_rejects_non_integers(block):
    with pytest.raises(ConfigurationError):
        stage_from_dict(block)
