"""
Core math modules для poui

Целочисленные примитивы fixed-point арифметики и float-конверсия.
"""

# Widths
from poui.core.math.widths import (
    MAX_WIDTH,
    SUPPORTED_WIDTHS,
    IntKind,
    shorten,
    widen,
    wrap,
)

# Arithmetic
from poui.core.math.arithmetic import (
    truncating_mul,
    wrapping_add,
)

# Float Conversion
from poui.core.math.float_conversion import (
    DEFAULT_CONVERSION_CONFIG,
    ConversionConfig,
    FloatTarget,
    conversion_is_exact,
    denominator,
    raw_to_float,
    significant_bits,
)

__all__ = [
    # Widths — Constants
    "MAX_WIDTH",
    "SUPPORTED_WIDTHS",
    # Widths — Types
    "IntKind",
    # Widths — Functions
    "shorten",
    "widen",
    "wrap",
    # Arithmetic — Functions
    "truncating_mul",
    "wrapping_add",
    # Float Conversion — Constants
    "DEFAULT_CONVERSION_CONFIG",
    # Float Conversion — Types
    "ConversionConfig",
    "FloatTarget",
    # Float Conversion — Functions
    "conversion_is_exact",
    "denominator",
    "raw_to_float",
    "significant_bits",
]
