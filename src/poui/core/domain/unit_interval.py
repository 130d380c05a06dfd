"""
Poui — Point on Unit Interval

Immutable Pydantic модель fixed-point значения на единичном интервале.
Единственное поле — raw (backing-целое фиксированной ширины):

    unsigned W: raw / 2^W      ∈ [0, 1)
    signed W:   raw / 2^(W-1)  ∈ [-1, 1)   (полный оборот, как и unsigned)

Любой bit pattern валиден, поэтому конструктор тотален: int вне диапазона
backing-типа усекается (wrap), а не отвергается.

Каждому backing-типу соответствует свой класс (PouiU8 ... PouiI128).
Арифметика определена только между значениями одного класса.

Операции:
- a + b: сложение на окружности (wraparound)
- a * b: fixed-point умножение (widen → multiply → shorten, truncation)
- float(a), a.to_f32(), a.to_f64(): односторонняя конверсия в float
"""

import numbers
import operator
from collections.abc import Mapping
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, Field, field_validator

from poui.core.math.arithmetic import truncating_mul, wrapping_add
from poui.core.math.float_conversion import (
    DEFAULT_CONVERSION_CONFIG,
    ConversionConfig,
    FloatTarget,
    denominator,
    raw_to_float,
)
from poui.core.math.widths import IntKind, wrap

# =============================================================================
# EXCEPTIONS
# =============================================================================


class BackingMismatchError(TypeError):
    """
    Операнды add/mul имеют разные backing-типы.

    Это ошибка вызывающего кода, а не арифметики: значения разной ширины
    или знаковости не смешиваются неявно.
    """

    pass


# Реестр конкретных классов по backing-типу (заполняется при объявлении)
_POUI_TYPES: dict[IntKind, type["Poui"]] = {}


# =============================================================================
# BASE MODEL
# =============================================================================


class Poui(BaseModel):
    """
    Базовый класс значения на единичном интервале.

    Напрямую не инстанцируется: используйте PouiU8, PouiI32, ...
    или Poui.for_kind(kind).
    """

    kind: ClassVar[IntKind | None] = None

    raw: int = Field(..., strict=True, description="Backing-целое (bit pattern)")

    model_config = {"frozen": True}

    def __init__(self, raw: int) -> None:
        if type(self).kind is None:
            raise TypeError(
                f"{type(self).__name__} has no backing kind; "
                f"use a concrete class such as PouiU8 or Poui.for_kind()"
            )
        super().__init__(raw=raw)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if cls.kind is not None:
            _POUI_TYPES[cls.kind] = cls

    @field_validator("raw", mode="before")
    @classmethod
    def coerce_integral(cls, v: Any) -> Any:
        # numpy и другие Integral (кроме bool) → int; остальное отвергает strict int
        if isinstance(v, numbers.Integral) and not isinstance(v, bool):
            return operator.index(v)
        return v

    @field_validator("raw")
    @classmethod
    def wrap_raw(cls, v: int) -> int:
        return wrap(v, cls.kind)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "Poui":
        """Копия значения; raw из update проходит ту же валидацию, что и конструктор."""
        if update is not None and "raw" in update:
            return type(self)(update["raw"])
        return super().model_copy(update=update, deep=deep)

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def for_kind(cls, kind: IntKind | str) -> type["Poui"]:
        """
        Конкретный класс для backing-типа.

        Args:
            kind: IntKind или его имя ('u8', 'i64', ...)

        Raises:
            ValueError: Если kind не поддерживается
        """
        return _POUI_TYPES[IntKind(kind)]

    @classmethod
    def _wrapped(cls, raw: int) -> "Poui":
        # raw уже в диапазоне kind: повторная валидация не нужна
        return cls.model_construct(raw=raw)

    @classmethod
    def zero(cls) -> "Poui":
        return cls(cls.kind.zero)

    @classmethod
    def one_ulp(cls) -> "Poui":
        """Наименьшее положительное значение (raw = 1)."""
        return cls(cls.kind.one)

    @classmethod
    def half(cls) -> "Poui":
        """Ровно 0.5: 2^(W-1) для unsigned, 2^(W-2) для signed."""
        return cls(denominator(cls.kind) // 2)

    @classmethod
    def max_value(cls) -> "Poui":
        """Наибольшее значение (ближайшее к 1.0 снизу)."""
        return cls(cls.kind.max_value)

    @classmethod
    def min_value(cls) -> "Poui":
        """Наименьшее значение (0.0 для unsigned, -1.0 для signed)."""
        return cls(cls.kind.min_value)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Poui":
        if type(other) is not type(self):
            return NotImplemented
        return add(self, other)

    def __mul__(self, other: object) -> "Poui":
        if type(other) is not type(self):
            return NotImplemented
        return mul(self, other)

    def __float__(self) -> float:
        return self.to_f64()

    # -------------------------------------------------------------------------
    # Float конверсия
    # -------------------------------------------------------------------------

    def to_float(
        self,
        target: FloatTarget | str | None = None,
        config: ConversionConfig = DEFAULT_CONVERSION_CONFIG,
    ) -> float | np.floating:
        return to_float(self, target, config)

    def to_f32(self) -> np.float32:
        return to_float(self, FloatTarget.F32)

    def to_f64(self) -> float:
        return to_float(self, FloatTarget.F64)


# =============================================================================
# CONCRETE KINDS
# =============================================================================


class PouiU8(Poui):
    kind: ClassVar[IntKind] = IntKind.U8


class PouiU16(Poui):
    kind: ClassVar[IntKind] = IntKind.U16


class PouiU32(Poui):
    kind: ClassVar[IntKind] = IntKind.U32


class PouiU64(Poui):
    kind: ClassVar[IntKind] = IntKind.U64


class PouiU128(Poui):
    kind: ClassVar[IntKind] = IntKind.U128


class PouiI8(Poui):
    kind: ClassVar[IntKind] = IntKind.I8


class PouiI16(Poui):
    kind: ClassVar[IntKind] = IntKind.I16


class PouiI32(Poui):
    kind: ClassVar[IntKind] = IntKind.I32


class PouiI64(Poui):
    kind: ClassVar[IntKind] = IntKind.I64


class PouiI128(Poui):
    kind: ClassVar[IntKind] = IntKind.I128


# =============================================================================
# FUNCTIONAL API
# =============================================================================


def _require_same_kind(a: Poui, b: Poui, op: str) -> None:
    if not isinstance(a, Poui) or type(a) is not type(b):
        raise BackingMismatchError(
            f"Cannot {op} {type(a).__name__} and {type(b).__name__}: "
            f"operands must share one backing kind"
        )


def add(a: Poui, b: Poui) -> Poui:
    """
    Сложение на окружности: raw = (a.raw + b.raw) mod 2^W.

    Перенос за полный оборот отбрасывается. Ошибкой не является.

    Raises:
        BackingMismatchError: Если a и b разных backing-типов

    Examples:
        >>> add(PouiU8(255), PouiU8(1))
        PouiU8(raw=0)
        >>> add(PouiI8(64), PouiI8(64))  # 0.5 + 0.5 = -1.0 (wrap)
        PouiI8(raw=-128)
    """
    _require_same_kind(a, b, "add")
    return type(a)._wrapped(wrapping_add(a.raw, b.raw, a.kind))


def mul(a: Poui, b: Poui) -> Poui:
    """
    Fixed-point умножение: старшие W бит 2W-битного произведения raw.

    Усечение, не округление: PouiU8(1) * PouiU8(1) == PouiU8(0).

    Raises:
        BackingMismatchError: Если a и b разных backing-типов

    Examples:
        >>> mul(PouiU8(128), PouiU8(128))  # 0.5 * 0.5 = 0.25
        PouiU8(raw=64)
    """
    _require_same_kind(a, b, "multiply")
    return type(a)._wrapped(truncating_mul(a.raw, b.raw, a.kind))


def to_float(
    a: Poui,
    target: FloatTarget | str | None = None,
    config: ConversionConfig = DEFAULT_CONVERSION_CONFIG,
) -> float | np.floating:
    """
    Конверсия значения в float: raw / (max_value + 1).

    Args:
        a: Значение
        target: FloatTarget ('f32'/'f64'); None → config.default_target
        config: Конфигурация конверсии

    Returns:
        float для F64, numpy.float32 для F32
    """
    return raw_to_float(a.raw, a.kind, target, config)
