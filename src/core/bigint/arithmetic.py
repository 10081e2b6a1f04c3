"""
Arithmetic Engine — Операции над модулями в системе BASE

Все функции работают только с модулями (списки лимбов, младший первым).
Знаки обрабатывает BigInteger: смешанные знаки сводятся к сложению или
вычитанию модулей.

Алгоритмы:
- Сложение с переносом (wrap на BASE, перенос 1)
- Вычитание с заёмом (|a| >= |b| обязательно)
- Школьное умножение O(n*m)
- Деление столбиком с бинарным поиском цифры частного

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый записанный лимб проверяется check_limb (защита от переполнения)
2. Результат каждой операции нормализован (strip_leading_zeros)
3. Деление на пустой модуль → BigIntegerDivisionByZero до начала работы
"""

from typing import Sequence

from src.core.bigint.errors import BigIntegerDivisionByZero
from src.core.bigint.limbs import (
    BASE,
    check_limb,
    compare_magnitudes,
    limbs_from_int,
    strip_leading_zeros,
)

# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(target: list[int], other: Sequence[int]) -> list[int]:
    """
    target += other (in-place, по модулю).

    Args:
        target: Изменяемый список лимбов
        other: Прибавляемый модуль (не должен быть тем же списком)

    Returns:
        target после нормализации

    Raises:
        BigIntegerOverflow: Если лимб после коррекции вне [0, BASE)
    """
    required = max(len(target), len(other)) + 1
    target.extend([0] * (required - len(target)))

    carry = 0
    i = 0
    while i < len(target) or carry:
        if i == len(target):
            target.append(0)

        target[i] += carry + (other[i] if i < len(other) else 0)
        carry = 1 if target[i] >= BASE else 0
        if carry:
            target[i] -= BASE
        check_limb(target[i])
        i += 1

    return strip_leading_zeros(target)


def subtract_magnitudes(target: list[int], other: Sequence[int]) -> list[int]:
    """
    target -= other (in-place, по модулю).

    Требование: |target| >= |other|. Вызывающий код обязан проверить
    это через compare_magnitudes и иначе считать -(other - target).

    Raises:
        BigIntegerOverflow: Если лимб после заёма вне [0, BASE)
    """
    borrow = 0
    i = 0
    while i < len(other) or borrow:
        if i == len(target):
            target.append(0)

        target[i] -= borrow + (other[i] if i < len(other) else 0)
        borrow = 1 if target[i] < 0 else 0
        if borrow:
            target[i] += BASE
        check_limb(target[i])
        i += 1

    return strip_leading_zeros(target)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Школьное умножение модулей.

    Результат имеет len(a) + len(b) позиций; для каждой пары (i, j)
    накапливается a[i] * b[j] + carry + result[i + j], в позицию пишется
    остаток по BASE, частное переносится дальше во внутреннем цикле.

    Потолок MAX_PRODUCT_DIGITS здесь не проверяется: это контракт
    оператора умножения BigInteger, а не внутреннего масштабирования.

    Returns:
        Новый нормализованный список лимбов
    """
    result = [0] * (len(a) + len(b))

    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue

        carry = 0
        j = 0
        while j < len(b) or carry:
            product = a_limb * (b[j] if j < len(b) else 0) + carry
            if i + j < len(result):
                product += result[i + j]
                result[i + j] = product % BASE
            carry = product // BASE
            j += 1

    return strip_leading_zeros(result)


def scale_magnitude(a: Sequence[int], factor: int) -> list[int]:
    """Умножение модуля на одиночный коэффициент 0 <= factor <= BASE."""
    return multiply_magnitudes(a, limbs_from_int(factor))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _find_quotient_limb(divisor: Sequence[int], remainder: Sequence[int]) -> int:
    """
    Бинарный поиск наибольшего d ∈ [0, BASE], такого что divisor * d <= remainder.

    Заменяет линейный перебор до BASE кандидатов на ~14 умножений.
    """
    left = 0
    right = BASE
    digit = 0

    while left <= right:
        mid = (left + right) // 2
        if compare_magnitudes(scale_magnitude(divisor, mid), remainder) <= 0:
            digit = mid
            left = mid + 1
        else:
            right = mid - 1

    return digit


def divmod_magnitudes(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[list[int], list[int]]:
    """
    Деление столбиком: (|dividend| // |divisor|, |dividend| % |divisor|).

    Алгоритм:
    1. Лимбы делимого обходятся от старшего к младшему
    2. remainder = remainder * BASE + limb (вставка в начало списка)
    3. Цифра частного d — бинарный поиск (_find_quotient_limb)
    4. remainder -= divisor * d, d записывается в позицию частного

    Args:
        dividend: Модуль делимого
        divisor: Модуль делителя

    Returns:
        (quotient, remainder) — оба нормализованы

    Raises:
        BigIntegerDivisionByZero: Если divisor пустой (ноль)

    Examples:
        >>> divmod_magnitudes([1000], [7])
        ([142], [6])
    """
    if not divisor:
        raise BigIntegerDivisionByZero()

    quotient = [0] * len(dividend)
    remainder: list[int] = []

    for i in range(len(dividend) - 1, -1, -1):
        remainder.insert(0, dividend[i])
        strip_leading_zeros(remainder)

        digit = _find_quotient_limb(divisor, remainder)
        quotient[i] = digit
        subtract_magnitudes(remainder, scale_magnitude(divisor, digit))

    return strip_leading_zeros(quotient), remainder
