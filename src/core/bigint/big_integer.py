"""
BigInteger — Знаковое целое произвольной точности

Значение хранится как (is_negative, digits):
- digits: лимбы в системе BASE = 10000, младший первым (см. limbs.py)
- is_negative: флаг знака; всегда False для нуля (нет "отрицательного нуля")

Операторы:
- In-place формы (+=, -=, *=, /=, //=, %=) мутируют левый операнд
- Чистые формы (+, -, *, /, //, %) строят новое значение из копии
- / и // — деление с усечением к нулю; остаток % имеет знак делимого
- divmod(a, b) выполняет одно деление столбиком для частного и остатка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая мутация завершается _normalize()
2. Все шесть сравнений выводятся из одного примитива compare()
3. Умножение с результатом длиннее MAX_PRODUCT_DIGITS → BigIntegerOverflow
4. Деление на ноль → BigIntegerDivisionByZero до начала вычислений
5. Экземпляры не разделяют списки лимбов (copy() создаёт независимый список)
"""

import logging
from typing import Any, Optional, TextIO, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.bigint.arithmetic import (
    add_magnitudes,
    divmod_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)
from src.core.bigint.codec import format_decimal, parse_decimal, read_token
from src.core.bigint.errors import BigIntegerDivisionByZero, BigIntegerOverflow
from src.core.bigint.limbs import (
    MAX_PRODUCT_DIGITS,
    compare_magnitudes,
    decimal_digit_count,
    limbs_from_int,
    strip_leading_zeros,
)

logger = logging.getLogger(__name__)

# Шаблон десятичной записи для JSON Schema
DECIMAL_PATTERN = r"^[+-]?[0-9]+$"

Operand = Union["BigInteger", int]


class BigInteger:
    """
    Целое произвольной точности со знаком.

    Конструирование:
        BigInteger()          → 0
        BigInteger(-42)       → из native int
        BigInteger("+00123")  → из десятичной строки
        BigInteger(other)     → независимая копия

    Тип изменяемый (in-place операторы), поэтому не хэшируемый.
    """

    def __init__(self, value: Union["BigInteger", int, str] = 0):
        if isinstance(value, BigInteger):
            self._is_negative = value._is_negative
            self._digits = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("BigInteger cannot be constructed from bool")
        elif isinstance(value, int):
            self._is_negative = value < 0
            self._digits = limbs_from_int(abs(value))
        elif isinstance(value, str):
            self._is_negative, self._digits = parse_decimal(value)
        else:
            raise TypeError(
                f"BigInteger cannot be constructed from {type(value).__name__}"
            )
        self._normalize()

    @classmethod
    def _from_parts(cls, is_negative: bool, digits: list[int]) -> "BigInteger":
        result = cls.__new__(cls)
        result._is_negative = is_negative
        result._digits = digits
        result._normalize()
        return result

    @staticmethod
    def _coerce(value: Any) -> Optional["BigInteger"]:
        """BigInteger как есть, int → BigInteger, прочее → None."""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInteger(value)
        return None

    def _normalize(self) -> None:
        """Удаление старших нулевых лимбов; ноль всегда неотрицателен."""
        strip_leading_zeros(self._digits)
        if not self._digits:
            self._is_negative = False

    def _assign(self, other: "BigInteger") -> None:
        self._is_negative = other._is_negative
        self._digits = other._digits

    # =========================================================================
    # ИНТРОСПЕКЦИЯ
    # =========================================================================

    @property
    def is_negative(self) -> bool:
        """True для строго отрицательных значений."""
        return self._is_negative

    @property
    def digits(self) -> tuple[int, ...]:
        """Лимбы модуля (младший первым), копия только для чтения."""
        return tuple(self._digits)

    def digit_count(self) -> int:
        """Количество десятичных цифр модуля; 1 для нуля."""
        return decimal_digit_count(self._digits)

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    # =========================================================================
    # УНАРНЫЕ ОПЕРАТОРЫ
    # =========================================================================

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        result = self.copy()
        result._is_negative = not result._is_negative
        result._normalize()
        return result

    def __abs__(self) -> "BigInteger":
        result = self.copy()
        result._is_negative = False
        return result

    def __bool__(self) -> bool:
        return bool(self._digits)

    def __int__(self) -> int:
        return int(str(self))

    # =========================================================================
    # СЛОЖЕНИЕ / ВЫЧИТАНИЕ
    # =========================================================================

    def _add_same_sign(self, digits: list[int]) -> None:
        """self += модуль digits со знаком self."""
        add_magnitudes(self._digits, digits)

    def _subtract_same_sign(self, digits: list[int]) -> None:
        """self -= модуль digits со знаком self."""
        if compare_magnitudes(self._digits, digits) >= 0:
            subtract_magnitudes(self._digits, digits)
        else:
            # |a| < |b|: a - b = -(b - a)
            result = list(digits)
            subtract_magnitudes(result, self._digits)
            self._digits = result
            self._is_negative = not self._is_negative

    def __iadd__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        digits = list(value._digits) if value is self else value._digits

        if self._is_negative == value._is_negative:
            self._add_same_sign(digits)
        else:
            # a + b при разных знаках: a - (-b), где -b одного знака с a
            self._subtract_same_sign(digits)

        self._normalize()
        return self

    def __isub__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        digits = list(value._digits) if value is self else value._digits

        if self._is_negative == value._is_negative:
            self._subtract_same_sign(digits)
        else:
            # a - b при разных знаках: a + (-b), где -b одного знака с a
            self._add_same_sign(digits)

        self._normalize()
        return self

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def __imul__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented

        digits = multiply_magnitudes(self._digits, value._digits)
        if decimal_digit_count(digits) > MAX_PRODUCT_DIGITS:
            logger.debug(
                "Product of %d and %d digit operands exceeds %d digits",
                self.digit_count(),
                value.digit_count(),
                MAX_PRODUCT_DIGITS,
            )
            raise BigIntegerOverflow()

        self._is_negative = self._is_negative != value._is_negative
        self._digits = digits
        self._normalize()
        return self

    # =========================================================================
    # ДЕЛЕНИЕ
    # =========================================================================

    def _divmod(self, other: "BigInteger") -> tuple["BigInteger", "BigInteger"]:
        """
        Деление с усечением к нулю.

        Частное: знак = XOR знаков операндов.
        Остаток: знак делимого (a == q * b + r, |r| < |b|).

        Raises:
            BigIntegerDivisionByZero: Если модуль делителя равен нулю
        """
        if not other._digits:
            logger.debug("Division of %d-digit value by zero", self.digit_count())
            raise BigIntegerDivisionByZero()

        q_digits, r_digits = divmod_magnitudes(self._digits, other._digits)
        quotient = BigInteger._from_parts(
            self._is_negative != other._is_negative, q_digits
        )
        remainder = BigInteger._from_parts(self._is_negative, r_digits)
        return quotient, remainder

    def __itruediv__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        quotient, _ = self._divmod(value)
        self._assign(quotient)
        return self

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        _, remainder = self._divmod(value)
        self._assign(remainder)
        return self

    # =========================================================================
    # БИНАРНЫЕ ФОРМЫ
    # =========================================================================

    def __add__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        result = self.copy()
        result += value
        return result

    def __radd__(self, other: int) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value + self

    def __sub__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        result = self.copy()
        result -= value
        return result

    def __rsub__(self, other: int) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value - self

    def __mul__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        result = self.copy()
        result *= value
        return result

    def __rmul__(self, other: int) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value * self

    def __truediv__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        result = self.copy()
        result /= value
        return result

    def __rtruediv__(self, other: int) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value / self

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: Operand) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        result = self.copy()
        result %= value
        return result

    def __rmod__(self, other: int) -> "BigInteger":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value % self

    def __divmod__(self, other: Operand) -> tuple["BigInteger", "BigInteger"]:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._divmod(value)

    def __rdivmod__(self, other: int) -> tuple["BigInteger", "BigInteger"]:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value._divmod(self)

    # =========================================================================
    # ИНКРЕМЕНТ / ДЕКРЕМЕНТ
    # =========================================================================

    def increment(self) -> "BigInteger":
        """Префиксный ++: увеличивает на 1 и возвращает self."""
        self += 1
        return self

    def decrement(self) -> "BigInteger":
        """Префиксный --: уменьшает на 1 и возвращает self."""
        self -= 1
        return self

    def post_increment(self) -> "BigInteger":
        """Постфиксный ++: увеличивает на 1, возвращает копию прежнего значения."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный --: уменьшает на 1, возвращает копию прежнего значения."""
        previous = self.copy()
        self.decrement()
        return previous

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: Operand) -> int:
        """
        Трёхпозиционное сравнение со знаком.

        Порядок проверок:
        1. Знак: отрицательное < неотрицательного
        2. Длина модуля (с инверсией для отрицательных)
        3. Лимбы от старшего к младшему

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        value = self._coerce(other)
        if value is None:
            raise TypeError(f"Cannot compare BigInteger with {type(other).__name__}")
        return self._compare(value)

    def _compare(self, other: "BigInteger") -> int:
        if self._is_negative != other._is_negative:
            return -1 if self._is_negative else 1

        result = compare_magnitudes(self._digits, other._digits)
        return -result if self._is_negative else result

    def __eq__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) == 0

    def __ne__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) != 0

    def __lt__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) < 0

    def __le__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) <= 0

    def __gt__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) > 0

    def __ge__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) >= 0

    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # ТЕКСТОВЫЙ ВВОД / ВЫВОД
    # =========================================================================

    def __str__(self) -> str:
        return format_decimal(self._is_negative, self._digits)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def write(self, stream: TextIO) -> None:
        """Запись канонической десятичной формы в текстовый поток."""
        stream.write(str(self))

    @classmethod
    def read(cls, stream: TextIO) -> "BigInteger":
        """
        Чтение одного токена из текстового потока и его разбор.

        Raises:
            BigIntegerParseError: Поток пуст или токен некорректен
        """
        return cls(read_token(stream))

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def _validate(cls, value: Any) -> "BigInteger":
        if isinstance(value, BigInteger):
            return value.copy()
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"BigInteger expects int or decimal str, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(when_used="always"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """
        Validation: десятичная строка или JSON integer (оба принимаются _validate).
        Serialization: всегда десятичная строка.
        """
        decimal_string = {"type": "string", "pattern": DECIMAL_PATTERN}
        if handler.mode == "validation":
            return {"anyOf": [decimal_string, {"type": "integer"}]}
        return decimal_string
