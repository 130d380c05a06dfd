"""
Domain models and value objects.

Contains the unit-interval value type and its per-kind classes.
"""

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

__all__ = [
    "BackingMismatchError",
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
    "add",
    "mul",
    "to_float",
]
