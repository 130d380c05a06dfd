"""
poui — Point on Unit Interval

Fixed-point значения на [0, 1) (unsigned) и [-1, 1) (signed) с целочисленной
арифметикой: wrapping сложение, truncating умножение, конверсия в float.
"""

import logging

from poui.core.domain.unit_interval import (
    BackingMismatchError,
    Poui,
    PouiI8,
    PouiI16,
    PouiI32,
    PouiI64,
    PouiI128,
    PouiU8,
    PouiU16,
    PouiU32,
    PouiU64,
    PouiU128,
    add,
    mul,
    to_float,
)
from poui.core.math.float_conversion import ConversionConfig, FloatTarget
from poui.core.math.widths import IntKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Value types
    "Poui",
    "PouiU8",
    "PouiU16",
    "PouiU32",
    "PouiU64",
    "PouiU128",
    "PouiI8",
    "PouiI16",
    "PouiI32",
    "PouiI64",
    "PouiI128",
    # Operations
    "add",
    "mul",
    "to_float",
    # Supporting types
    "BackingMismatchError",
    "ConversionConfig",
    "FloatTarget",
    "IntKind",
]
