"""
Float Conversion — Односторонняя конверсия fixed-point → float

Формула:
    f = raw / (max_value + 1)

    unsigned W: max_value + 1 = 2^W      → f ∈ [0, 1)
    signed W:   max_value + 1 = 2^(W-1)  → f ∈ [-1, 1)

Делитель — степень двойки, поэтому потеря точности возникает только когда
значащих бит raw больше, чем бит мантиссы целевого float (u64/u128 → f32,
u128 → f64). Такая потеря — допустимое lossy поведение, не ошибка.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда finite (делитель > 0, делимое конечно)
2. Результат не выходит из [0, 1) / [-1, 1): если округление в целевой тип
   даёт ровно 1.0, возвращается наибольшее значение целевого типа меньше 1.0
3. Обратная конверсия (float → raw) не предоставляется
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

import numpy as np

from poui.core.math.widths import IntKind, wrap

logger = logging.getLogger(__name__)


# =============================================================================
# TARGETS
# =============================================================================


class FloatTarget(str, Enum):
    """Целевой тип float."""

    F32 = "f32"
    F64 = "f64"

    @property
    def dtype(self) -> type[np.floating]:
        if self is FloatTarget.F32:
            return np.float32
        return np.float64

    @property
    def mantissa_bits(self) -> int:
        """Точность мантиссы с учётом неявного бита (24 для f32, 53 для f64)."""
        return int(np.finfo(self.dtype).nmant) + 1


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация float-конверсии.

    default_target используется, когда target не передан явно.
    warn_on_precision_loss включает WARNING-лог для неточных конверсий.
    """

    default_target: FloatTarget = FloatTarget.F64
    warn_on_precision_loss: bool = False


DEFAULT_CONVERSION_CONFIG: Final[ConversionConfig] = ConversionConfig()


# =============================================================================
# CONVERSION
# =============================================================================


def denominator(kind: IntKind) -> int:
    """max_value + 1: 2^W для unsigned, 2^(W-1) для signed."""
    return kind.max_value + kind.one


def significant_bits(raw: int) -> int:
    """
    Количество бит между старшим и младшим единичным битом |raw| включительно.

    Examples:
        >>> significant_bits(0)
        0
        >>> significant_bits(0b10100)
        3
    """
    magnitude = abs(raw)
    if magnitude == 0:
        return 0
    lowest = (magnitude & -magnitude).bit_length()
    return magnitude.bit_length() - lowest + 1


def conversion_is_exact(raw: int, kind: IntKind, target: FloatTarget) -> bool:
    """
    Представим ли raw / (max_value + 1) в target без округления.

    Деление на степень двойки меняет только экспоненту, поэтому точность
    определяется числом значащих бит raw.
    """
    return significant_bits(wrap(raw, kind)) <= target.mantissa_bits


def raw_to_float(
    raw: int,
    kind: IntKind,
    target: FloatTarget | str | None = None,
    config: ConversionConfig = DEFAULT_CONVERSION_CONFIG,
) -> float | np.floating:
    """
    Конверсия raw backing-значения в float.

    Args:
        raw: Raw значение (приводится к диапазону kind)
        kind: Backing-тип
        target: FloatTarget или его имя ('f32'/'f64'); None → config.default_target
        config: Конфигурация конверсии

    Returns:
        float для F64, numpy.float32 для F32

    Raises:
        ValueError: Если target не является поддерживаемым FloatTarget

    Examples:
        >>> raw_to_float(128, IntKind.U8)
        0.5
        >>> raw_to_float(64, IntKind.I8)
        0.5
        >>> raw_to_float(-128, IntKind.I8)
        -1.0
    """
    target = config.default_target if target is None else FloatTarget(target)
    raw = wrap(raw, kind)

    if config.warn_on_precision_loss and not conversion_is_exact(raw, kind, target):
        logger.warning(
            "Lossy conversion of %s raw=%d to %s (%d significant bits > %d)",
            kind.value,
            raw,
            target.value,
            significant_bits(raw),
            target.mantissa_bits,
        )

    # int / int в Python округляется корректно до f64
    value = target.dtype(raw / denominator(kind))

    one = target.dtype(1.0)
    if value >= one:
        ceiling = np.nextafter(one, target.dtype(0.0))
        logger.debug(
            "%s raw=%d rounded to 1.0 in %s, pulled back to %r",
            kind.value,
            raw,
            target.value,
            ceiling,
        )
        value = ceiling

    if target is FloatTarget.F64:
        return float(value)
    return value
