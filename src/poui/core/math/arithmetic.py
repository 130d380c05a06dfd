"""
Arithmetic — Wrapping addition и truncating multiplication на raw-уровне

Операции над backing-целыми, интерпретируемыми как fixed-point дробь
(raw / 2^W для unsigned, raw / 2^(W-1) для signed).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции тотальны: wraparound и усечение — штатный результат, не ошибка
2. Сложение — сложение на окружности: перенос за полный оборот отбрасывается
3. Умножение — widen → multiply → shorten, округление отсутствует (truncation)
4. Результат всегда в диапазоне исходного kind
"""

from poui.core.math.widths import IntKind, shorten, widen, wrap


def wrapping_add(a: int, b: int, kind: IntKind) -> int:
    """
    Сложение с wraparound: (a + b) mod 2^W.

    Examples:
        >>> wrapping_add(255, 1, IntKind.U8)
        0
        >>> wrapping_add(127, 1, IntKind.I8)
        -128
    """
    return wrap(a + b, kind)


def truncating_mul(a: int, b: int, kind: IntKind) -> int:
    """
    Fixed-point умножение через widen-multiply-shorten.

    Алгоритм:
        1. widen(a), widen(b) до kind.widened
        2. Точное произведение в широком типе (переполнение невозможно:
           |a * b| < 2^(2W) для любых W-битных операндов)
        3. shorten: старшие W бит произведения

    Для 128 бит widened-тип совпадает с исходным, поэтому произведение
    считается в неограниченном Python int и сдвигается на W бит явно.
    Результат тот же: старшие W бит 2W-битного произведения.

    Для signed сдвиг тоже на W бит (не W-1), поэтому в шкале [-1, 1)
    результат равен половине произведения: 0.5 * 0.5 → 0.125,
    -1.0 * -1.0 → 0.5.

    Args:
        a: Raw первого операнда
        b: Raw второго операнда
        kind: Backing-тип обоих операндов

    Returns:
        Raw произведения в диапазоне kind

    Examples:
        >>> truncating_mul(128, 128, IntKind.U8)  # 0.5 * 0.5
        64
        >>> truncating_mul(1, 1, IntKind.U8)  # 1/65536 → 0/256
        0
    """
    wide = kind.widened
    if wide is kind:
        # Потолок таблицы
        product = wrap(a, kind) * wrap(b, kind)
        return wrap(product >> kind.bits, kind)

    product = widen(a, kind) * widen(b, kind)
    return shorten(product, wide)
