"""fpga_dsp.chain — Stage configuration and sequential chain processing."""

from fpga_dsp.chain.blocks import apply_duc_ddc, apply_mixing, moving_average_coefficients
from fpga_dsp.chain.processor import (
    apply_baseline_block,
    apply_block,
    baseline_chain,
    process_full_chain,
)
from fpga_dsp.chain.stages import (
    DUC_DDC_BLOCK_TYPES,
    FILTER_BLOCK_TYPES,
    FilterConfiguration,
    ResolvedStageConfig,
    StageConfig,
    StageKind,
    example_chain,
    kind_for_block,
    parse_coefficients,
    resolve_stage,
    stage_from_dict,
)

__all__: list[str] = [
    "StageKind",
    "StageConfig",
    "FilterConfiguration",
    "ResolvedStageConfig",
    "FILTER_BLOCK_TYPES",
    "DUC_DDC_BLOCK_TYPES",
    "kind_for_block",
    "resolve_stage",
    "stage_from_dict",
    "parse_coefficients",
    "example_chain",
    "moving_average_coefficients",
    "apply_mixing",
    "apply_duc_ddc",
    "apply_baseline_block",
    "apply_block",
    "process_full_chain",
    "baseline_chain",
]
