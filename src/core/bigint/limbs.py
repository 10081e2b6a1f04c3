"""
Limbs — Хранилище цифр BigInteger

Модуль определяет позиционное представление модуля числа:
- Список лимбов (int), младший лимб первым (индекс 0)
- Каждый лимб хранит 4 десятичные цифры: 0 ≤ limb < BASE
- Старшие нулевые лимбы никогда не хранятся
- Пустой список — единственное представление нуля

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой лимб вне [0, BASE) → BigIntegerOverflow (никакого маскирования)
2. После каждой мутации вызывается strip_leading_zeros
3. Сравнение модулей: сначала по длине, затем от старшего лимба к младшему
"""

from typing import Final, Sequence

from src.core.bigint.errors import BigIntegerOverflow

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления для лимбов
BASE: Final[int] = 10000

# Количество десятичных цифр в одном лимбе (10 ** BASE_DIGITS == BASE)
BASE_DIGITS: Final[int] = 4

# Потолок длины результата умножения (в десятичных цифрах)
# Превышение → BigIntegerOverflow
MAX_PRODUCT_DIGITS: Final[int] = 30009


# =============================================================================
# ПРОВЕРКИ И НОРМАЛИЗАЦИЯ
# =============================================================================


def check_limb(value: int) -> None:
    """
    Проверка, что значение лимба лежит в [0, BASE).

    Args:
        value: Значение лимба

    Raises:
        BigIntegerOverflow: Если value < 0 или value >= BASE
    """
    if value < 0 or value >= BASE:
        raise BigIntegerOverflow()


def strip_leading_zeros(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых лимбов (in-place).

    Args:
        limbs: Список лимбов, младший первым

    Returns:
        Тот же список (для удобства цепочек)

    Examples:
        >>> strip_leading_zeros([1, 0, 0])
        [1]
        >>> strip_leading_zeros([0, 0])
        []
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def limbs_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного native int на лимбы.

    Args:
        value: Модуль числа (>= 0)

    Returns:
        Лимбы, младший первым; [] для нуля
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    limbs: list[int] = []
    while value > 0:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
    return limbs


# =============================================================================
# СРАВНЕНИЕ И ИНТРОСПЕКЦИЯ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхпозиционное сравнение модулей.

    Оба аргумента должны быть нормализованы (без старших нулей).

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def decimal_digit_count(limbs: Sequence[int]) -> int:
    """
    Количество десятичных цифр модуля.

    Для нуля (пустой список) возвращается 1.

    Examples:
        >>> decimal_digit_count([])
        1
        >>> decimal_digit_count([0, 1])  # 10000
        5
    """
    if not limbs:
        return 1

    count = (len(limbs) - 1) * BASE_DIGITS
    top = limbs[-1]
    while top > 0:
        top //= 10
        count += 1
    return count
