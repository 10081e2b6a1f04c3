"""
Тесты для Arithmetic Engine (операции над модулями)

Проверяет:
1. Сложение с переносом через несколько лимбов
2. Вычитание с заёмом
3. Школьное умножение
4. Деление столбиком и бинарный поиск цифры частного
5. Деление на ноль
"""

import pytest

from src.core.bigint import (
    BASE,
    BigIntegerDivisionByZero,
    add_magnitudes,
    divmod_magnitudes,
    limbs_from_int,
    multiply_magnitudes,
    scale_magnitude,
    subtract_magnitudes,
)

# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ / ВЫЧИТАНИЯ
# =============================================================================


class TestAddMagnitudes:
    """Тесты add_magnitudes"""

    def test_simple(self) -> None:
        assert add_magnitudes([123], [877]) == [1000]

    def test_carry_into_new_limb(self) -> None:
        assert add_magnitudes([9999], [1]) == [0, 1]

    def test_carry_chain(self) -> None:
        """Перенос проходит через все лимбы"""
        assert add_magnitudes([9999, 9999, 9999], [1]) == [0, 0, 0, 1]

    def test_shorter_target(self) -> None:
        assert add_magnitudes([1], [0, 0, 5]) == [1, 0, 5]

    def test_zero_operands(self) -> None:
        assert add_magnitudes([], []) == []
        assert add_magnitudes([7], []) == [7]

    def test_in_place(self) -> None:
        target = [5000]
        assert add_magnitudes(target, [5000]) is target
        assert target == [0, 1]


class TestSubtractMagnitudes:
    """Тесты subtract_magnitudes"""

    def test_simple(self) -> None:
        assert subtract_magnitudes([1000], [1]) == [999]

    def test_borrow_from_next_limb(self) -> None:
        assert subtract_magnitudes([0, 1], [1]) == [9999]

    def test_borrow_chain(self) -> None:
        """Заём проходит через нулевые лимбы"""
        assert subtract_magnitudes([0, 0, 0, 1], [1]) == [9999, 9999, 9999]

    def test_equal_operands_give_zero(self) -> None:
        assert subtract_magnitudes([5, 3], [5, 3]) == []


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMultiplyMagnitudes:
    """Тесты multiply_magnitudes"""

    def test_single_limbs(self) -> None:
        assert multiply_magnitudes([12], [12]) == [144]

    def test_max_limb_square(self) -> None:
        """9999 * 9999 = 99980001"""
        assert multiply_magnitudes([9999], [9999]) == [1, 9998]

    def test_by_zero(self) -> None:
        assert multiply_magnitudes([], [5, 5]) == []
        assert multiply_magnitudes([5, 5], []) == []

    def test_shifted(self) -> None:
        assert multiply_magnitudes([2], [0, 1]) == [0, 2]

    def test_matches_native(self) -> None:
        """Сверка с native int на многолимбовых операндах"""
        a = 123456789012345678901234567890
        b = 987654321098765432109876543210
        assert multiply_magnitudes(limbs_from_int(a), limbs_from_int(b)) == limbs_from_int(a * b)

    def test_zero_limbs_in_operand(self) -> None:
        a = 10 ** 20 + 7
        b = 10 ** 12 + 3
        assert multiply_magnitudes(limbs_from_int(a), limbs_from_int(b)) == limbs_from_int(a * b)


class TestScaleMagnitude:
    """Тесты scale_magnitude"""

    def test_factor_bounds(self) -> None:
        """Коэффициенты 0 и BASE"""
        assert scale_magnitude([7], 0) == []
        assert scale_magnitude([7], BASE) == [0, 7]

    def test_carry(self) -> None:
        assert scale_magnitude([5000, 5000], 2) == [0, 1, 1]


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivmodMagnitudes:
    """Тесты divmod_magnitudes"""

    def test_small(self) -> None:
        assert divmod_magnitudes([1000], [7]) == ([142], [6])

    def test_dividend_smaller_than_divisor(self) -> None:
        assert divmod_magnitudes([5], [7]) == ([], [5])

    def test_zero_dividend(self) -> None:
        assert divmod_magnitudes([], [7]) == ([], [])

    def test_exact(self) -> None:
        assert divmod_magnitudes([0, 0, 1], [1]) == ([0, 0, 1], [])
        assert divmod_magnitudes([0, 0, 1], [0, 1]) == ([0, 1], [])

    def test_max_quotient_limb(self) -> None:
        """Цифра частного 9999 находится бинарным поиском"""
        assert divmod_magnitudes([1, 9998], [9999]) == ([9999], [])

    @pytest.mark.parametrize(
        "dividend, divisor",
        [
            (123456789012, 1000),
            (10 ** 40 + 12345, 99999999),
            (98765432109876543210987654321, 123456789),
            (10 ** 30, 10 ** 30 - 1),
            (2 ** 200, 3 ** 50),
        ],
    )
    def test_matches_native(self, dividend: int, divisor: int) -> None:
        """Сверка частного и остатка с native int"""
        quotient, remainder = divmod_magnitudes(limbs_from_int(dividend), limbs_from_int(divisor))
        assert quotient == limbs_from_int(dividend // divisor)
        assert remainder == limbs_from_int(dividend % divisor)

    def test_division_by_zero(self) -> None:
        with pytest.raises(BigIntegerDivisionByZero, match="Division by zero"):
            divmod_magnitudes([1], [])

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod_magnitudes([], [])
