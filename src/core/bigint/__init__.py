"""
BigInteger — длинная арифметика без встроенного big-int

Знаковое целое произвольной точности в системе BASE = 10000:
сложение, вычитание, школьное умножение, деление столбиком,
сравнения, десятичный разбор и форматирование.
"""

# Errors
from src.core.bigint.errors import (
    BigIntegerDivisionByZero,
    BigIntegerException,
    BigIntegerOverflow,
    BigIntegerParseError,
)

# Digit Store
from src.core.bigint.limbs import (
    BASE,
    BASE_DIGITS,
    MAX_PRODUCT_DIGITS,
    check_limb,
    compare_magnitudes,
    decimal_digit_count,
    limbs_from_int,
    strip_leading_zeros,
)

# Arithmetic Engine
from src.core.bigint.arithmetic import (
    add_magnitudes,
    divmod_magnitudes,
    multiply_magnitudes,
    scale_magnitude,
    subtract_magnitudes,
)

# Textual Codec
from src.core.bigint.codec import format_decimal, parse_decimal, read_token

# Value type
from src.core.bigint.big_integer import DECIMAL_PATTERN, BigInteger

__all__ = [
    # Errors
    "BigIntegerException",
    "BigIntegerOverflow",
    "BigIntegerDivisionByZero",
    "BigIntegerParseError",
    # Digit Store — Constants
    "BASE",
    "BASE_DIGITS",
    "MAX_PRODUCT_DIGITS",
    # Digit Store — Functions
    "check_limb",
    "compare_magnitudes",
    "decimal_digit_count",
    "limbs_from_int",
    "strip_leading_zeros",
    # Arithmetic Engine
    "add_magnitudes",
    "divmod_magnitudes",
    "multiply_magnitudes",
    "scale_magnitude",
    "subtract_magnitudes",
    # Textual Codec
    "format_decimal",
    "parse_decimal",
    "read_token",
    # Value type
    "DECIMAL_PATTERN",
    "BigInteger",
]
