"""
Textual Codec — Десятичная запись <-> лимбы

Формат ввода: необязательный одиночный знак '+' / '-', затем одна или
более ASCII-цифр. Цифры группируются по BASE_DIGITS от младшего конца.
Ведущие нули допустимы и отбрасываются при нормализации.

Формат вывода: '-' для отрицательных, старший лимб без дополнения,
остальные лимбы дополнены нулями до BASE_DIGITS. Ноль → "0" без знака.
"""

from typing import Sequence, TextIO

from src.core.bigint.errors import BigIntegerParseError
from src.core.bigint.limbs import BASE_DIGITS, check_limb, strip_leading_zeros

_DIGITS = frozenset("0123456789")


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки в (is_negative, limbs).

    Знак нуля сбрасывается: "-0" и "-0000" дают (False, []).

    Args:
        text: Десятичная запись

    Returns:
        (is_negative, limbs) — limbs нормализованы, младший первым

    Raises:
        BigIntegerParseError: Если запись не соответствует формату
        BigIntegerOverflow: Если накопленный лимб вышел из [0, BASE)

    Examples:
        >>> parse_decimal("-123456")
        (True, [3456, 12])
        >>> parse_decimal("+0")
        (False, [])
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    is_negative = False
    start = 0
    if text[:1] == "-":
        is_negative = True
        start = 1
    elif text[:1] == "+":
        start = 1

    body = text[start:]
    if not body:
        raise BigIntegerParseError(f"Invalid decimal literal: {text!r}")
    bad = next((ch for ch in body if ch not in _DIGITS), None)
    if bad is not None:
        raise BigIntegerParseError(
            f"Invalid character {bad!r} in decimal literal: {text!r}"
        )

    limbs: list[int] = []
    for end in range(len(body), 0, -BASE_DIGITS):
        limb = 0
        for ch in body[max(0, end - BASE_DIGITS):end]:
            limb = limb * 10 + (ord(ch) - ord("0"))
            check_limb(limb)
        limbs.append(limb)

    strip_leading_zeros(limbs)
    return is_negative and bool(limbs), limbs


def read_token(stream: TextIO) -> str:
    """
    Чтение одного токена, разделённого пробельными символами.

    Ведущие пробельные символы пропускаются, чтение останавливается на
    первом пробельном символе после токена (он поглощается) или на EOF.

    Raises:
        BigIntegerParseError: Если поток закончился до начала токена
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    chars: list[str] = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)

    if not chars:
        raise BigIntegerParseError("Unexpected end of stream while reading BigInteger")
    return "".join(chars)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_decimal(is_negative: bool, limbs: Sequence[int]) -> str:
    """
    Каноническая десятичная запись.

    Examples:
        >>> format_decimal(True, [3456, 12])
        '-123456'
        >>> format_decimal(False, [7, 0, 1])
        '100000007'
        >>> format_decimal(False, [])
        '0'
    """
    if not limbs:
        return "0"

    parts = ["-" if is_negative else "", str(limbs[-1])]
    parts.extend(f"{limb:0{BASE_DIGITS}d}" for limb in reversed(limbs[:-1]))
    return "".join(parts)
