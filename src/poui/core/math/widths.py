"""
Widths — Closed таблица backing-типов и конверсии ширины

Модуль описывает все поддерживаемые backing-целые (8/16/32/64/128 бит,
signed и unsigned) и две операции над ними:
- widen: значение в типе двойной ширины (без потери точности)
- shorten: старшие N бит значения двойной ширины (с потерей младших бит)

Python int не ограничен по ширине, поэтому ширина задаётся явно через
IntKind, а усечение до ширины выполняет wrap().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица закрыта: 8↔16, 16↔32, 32↔64, 64↔128, знаковость сохраняется
2. 128 бит — потолок: widen(U128) = U128
3. wrap() тотален: любой int отображается в диапазон kind
4. widen() сохраняет значение точно
"""

from enum import Enum
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Поддерживаемые ширины backing-целых (бит)
SUPPORTED_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)

# Потолок таблицы: для этой ширины нет типа двойной ширины
MAX_WIDTH: Final[int] = 128


# =============================================================================
# BACKING KINDS
# =============================================================================


class IntKind(str, Enum):
    """
    Backing-целое фиксированной ширины.

    Значение enum — имя типа (u8, i64, ...), удобно для repr и диагностики.
    """

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value[0] == "i"

    @property
    def modulus(self) -> int:
        """2^W — количество различных bit pattern."""
        return 1 << self.bits

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def widened(self) -> "IntKind":
        """Тип двойной ширины той же знаковости (U128/I128 → сами себя)."""
        return _WIDEN_TABLE[self]

    @property
    def narrowed(self) -> "IntKind":
        """
        Тип половинной ширины той же знаковости.

        Raises:
            ValueError: Если kind не является widened-типом ни для какого kind (8 бит)
        """
        try:
            return _SHORTEN_TABLE[self]
        except KeyError:
            raise ValueError(f"{self.value} has no narrower counterpart") from None

    @classmethod
    def of(cls, bits: int, signed: bool) -> "IntKind":
        """
        Поиск kind по (ширина, знаковость).

        Raises:
            ValueError: Если ширина не поддерживается
        """
        if bits not in SUPPORTED_WIDTHS:
            raise ValueError(
                f"Unsupported width {bits}, expected one of {SUPPORTED_WIDTHS}"
            )
        return cls(f"{'i' if signed else 'u'}{bits}")


# Закрытая таблица widen: (W, sign) → (2W, sign); потолок отображается в себя
_WIDEN_TABLE: Final[dict[IntKind, IntKind]] = {
    IntKind.U8: IntKind.U16,
    IntKind.U16: IntKind.U32,
    IntKind.U32: IntKind.U64,
    IntKind.U64: IntKind.U128,
    IntKind.U128: IntKind.U128,
    IntKind.I8: IntKind.I16,
    IntKind.I16: IntKind.I32,
    IntKind.I32: IntKind.I64,
    IntKind.I64: IntKind.I128,
    IntKind.I128: IntKind.I128,
}

# Обратная таблица shorten, ключ — широкий тип
_SHORTEN_TABLE: Final[dict[IntKind, IntKind]] = {
    IntKind.U16: IntKind.U8,
    IntKind.U32: IntKind.U16,
    IntKind.U64: IntKind.U32,
    IntKind.U128: IntKind.U64,
    IntKind.I16: IntKind.I8,
    IntKind.I32: IntKind.I16,
    IntKind.I64: IntKind.I32,
    IntKind.I128: IntKind.I64,
}


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def wrap(value: int, kind: IntKind) -> int:
    """
    Усечение int до ширины kind (two's complement wraparound).

    Эквивалент truncating cast: сохраняются младшие W бит, для signed
    старший бит интерпретируется как знак.

    Args:
        value: Произвольный Python int
        kind: Целевой backing-тип

    Returns:
        Значение в [kind.min_value, kind.max_value]

    Examples:
        >>> wrap(256, IntKind.U8)
        0
        >>> wrap(128, IntKind.I8)
        -128
        >>> wrap(-1, IntKind.U16)
        65535
    """
    pattern = value & (kind.modulus - 1)
    if kind.signed and pattern > kind.max_value:
        return pattern - kind.modulus
    return pattern


def widen(x: int, kind: IntKind) -> int:
    """
    Расширение значения kind до kind.widened.

    Sign-extension для signed, zero-extension для unsigned. Python int уже
    хранит значение без ширины, поэтому численно результат равен x
    (после приведения x к диапазону kind).

    Args:
        x: Значение типа kind
        kind: Исходный backing-тип

    Returns:
        То же значение в диапазоне kind.widened
    """
    return wrap(wrap(x, kind), kind.widened)


def shorten(x: int, wide: IntKind) -> int:
    """
    Старшие N бит значения широкого типа, N = wide.narrowed.bits.

    Сдвиг вправо на N бит (для signed — арифметический, Python >> уже
    арифметический для отрицательных int), затем truncating cast до N бит.
    Младшие N бит отбрасываются.

    Args:
        x: Значение типа wide
        wide: Широкий backing-тип (16..128 бит)

    Returns:
        Значение в диапазоне wide.narrowed

    Raises:
        ValueError: Если у wide нет узкого типа (8 бит)

    Examples:
        >>> shorten(0x1234, IntKind.U16)
        18
        >>> shorten(-256, IntKind.I16)
        -1
    """
    narrow = wide.narrowed
    return wrap(wrap(x, wide) >> narrow.bits, narrow)
