"""
Тесты для модуля Arithmetic

Проверяет:
1. wrapping_add: (a + b) mod 2^W, включая переход через знак
2. truncating_mul: старшие W бит произведения, truncation вместо округления
3. Потолок 128 бит в умножении
4. Тотальность: случайные операнды по всему диапазону каждого kind
"""

import random

import pytest

from poui.core.math.arithmetic import truncating_mul, wrapping_add
from poui.core.math.widths import IntKind, wrap

SEED = 20240611
SAMPLES_PER_KIND = 300


def sample_raws(kind: IntKind, count: int, seed: int = SEED) -> list[int]:
    """Граничные значения + равномерные случайные raw для kind."""
    rng = random.Random(f"{seed}-{kind.value}")
    edges = [kind.min_value, kind.max_value, 0, 1, wrap(-1, kind)]
    return edges + [rng.randint(kind.min_value, kind.max_value) for _ in range(count)]


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ
# =============================================================================


class TestWrappingAdd:
    """Тесты для wrapping_add"""

    def test_simple_sum(self) -> None:
        """Без переполнения — обычная сумма"""
        assert wrapping_add(1, 2, IntKind.U8) == 3
        assert wrapping_add(-3, 5, IntKind.I32) == 2

    def test_unsigned_max_plus_one_is_zero(self) -> None:
        """max + 1 → 0 (полный оборот)"""
        for kind in (IntKind.U8, IntKind.U16, IntKind.U32, IntKind.U64, IntKind.U128):
            assert wrapping_add(kind.max_value, 1, kind) == 0

    def test_signed_max_plus_one_is_min(self) -> None:
        """i8: 127 + 1 → -128"""
        assert wrapping_add(127, 1, IntKind.I8) == -128
        assert wrapping_add(IntKind.I64.max_value, 1, IntKind.I64) == IntKind.I64.min_value

    def test_signed_min_minus_one_is_max(self) -> None:
        """i8: -128 + (-1) → 127"""
        assert wrapping_add(-128, -1, IntKind.I8) == 127

    @pytest.mark.parametrize("kind", list(IntKind), ids=lambda k: k.value)
    def test_matches_modular_sum(self, kind: IntKind) -> None:
        """Для любых a, b: результат ≡ a + b (mod 2^W) и в диапазоне kind"""
        left = sample_raws(kind, SAMPLES_PER_KIND)
        right = sample_raws(kind, SAMPLES_PER_KIND, seed=SEED + 1)
        for a, b in zip(left, right):
            result = wrapping_add(a, b, kind)
            assert kind.min_value <= result <= kind.max_value
            assert (a + b - result) % kind.modulus == 0


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestTruncatingMul:
    """Тесты для truncating_mul"""

    def test_half_times_half_u8(self) -> None:
        """0.5 * 0.5 = 0.25: 128 * 128 → 64"""
        assert truncating_mul(128, 128, IntKind.U8) == 64

    def test_smallest_positive_squared_truncates_to_zero(self) -> None:
        """1/256 * 1/256 = 1/65536 → 0/256"""
        assert truncating_mul(1, 1, IntKind.U8) == 0

    def test_max_squared_u8(self) -> None:
        """255 * 255 = 65025 → 65025 >> 8 = 254"""
        assert truncating_mul(255, 255, IntKind.U8) == 254

    def test_signed_products(self) -> None:
        """Signed: старшие 8 бит i16-произведения"""
        assert truncating_mul(-128, -128, IntKind.I8) == 64
        assert truncating_mul(-128, 127, IntKind.I8) == -64
        assert truncating_mul(127, 127, IntKind.I8) == 63

    def test_truncation_goes_toward_negative_infinity(self) -> None:
        """Отброшенные младшие биты: -1 * 1 → -1 (floor), не 0"""
        assert truncating_mul(-1, 1, IntKind.I8) == -1

    def test_ceiling_unsigned(self) -> None:
        """u128: 0.5 * 0.5 = 0.25 через неограниченный intermediate"""
        assert truncating_mul(2**127, 2**127, IntKind.U128) == 2**126

    def test_ceiling_signed(self) -> None:
        """i128: -2^127 * -2^127 = 2^254 → 2^126"""
        assert truncating_mul(-(2**127), -(2**127), IntKind.I128) == 2**126
        assert truncating_mul(2**126, 2**126, IntKind.I128) == 2**124

    def test_ceiling_max_squared(self) -> None:
        """u128 max^2 не переполняется и даёт max - 1"""
        top = IntKind.U128.max_value
        assert truncating_mul(top, top, IntKind.U128) == top - 1

    @pytest.mark.parametrize("kind", list(IntKind), ids=lambda k: k.value)
    def test_zero_is_absorbing(self, kind: IntKind) -> None:
        """x * 0 == 0"""
        for a in sample_raws(kind, 50):
            assert truncating_mul(a, 0, kind) == 0
            assert truncating_mul(0, a, kind) == 0

    @pytest.mark.parametrize("kind", list(IntKind), ids=lambda k: k.value)
    def test_matches_top_bits_of_exact_product(self, kind: IntKind) -> None:
        """Для любых a, b: результат = floor(a * b / 2^W) в диапазоне kind"""
        left = sample_raws(kind, SAMPLES_PER_KIND)
        right = sample_raws(kind, SAMPLES_PER_KIND, seed=SEED + 2)
        for a, b in zip(left, right):
            result = truncating_mul(a, b, kind)
            assert kind.min_value <= result <= kind.max_value
            assert result == wrap((a * b) >> kind.bits, kind)

    @pytest.mark.parametrize(
        "kind",
        [IntKind.U8, IntKind.U16, IntKind.U32, IntKind.U64, IntKind.U128],
        ids=lambda k: k.value,
    )
    def test_unsigned_product_never_exceeds_operands(self, kind: IntKind) -> None:
        """Произведение дробей из [0, 1) не больше каждого множителя"""
        left = sample_raws(kind, SAMPLES_PER_KIND)
        right = sample_raws(kind, SAMPLES_PER_KIND, seed=SEED + 3)
        for a, b in zip(left, right):
            result = truncating_mul(a, b, kind)
            assert result <= min(a, b)
