"""fpga_dsp.fixedpoint — Fixed-point codec and MAC filter engine."""

from fpga_dsp.fixedpoint.codec import (
    dequantize,
    dequantize_sequence,
    is_representable,
    quantization_scale,
    quantize,
    quantize_sequence,
)
from fpga_dsp.fixedpoint.filter import apply_fixed_point_filter, fixed_multiply

__all__: list[str] = [
    "quantization_scale",
    "quantize",
    "dequantize",
    "quantize_sequence",
    "dequantize_sequence",
    "is_representable",
    "fixed_multiply",
    "apply_fixed_point_filter",
]
