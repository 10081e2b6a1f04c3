"""
BigInteger Errors — Иерархия исключений длинной арифметики

Все ошибки наследуются от BigIntegerException и дополнительно от
соответствующей встроенной категории Python, чтобы вызывающий код мог
перехватывать их как OverflowError / ZeroDivisionError / ValueError.

Ошибки фатальны для текущего вычисления: повторов внутри модуля нет,
усечения и насыщения нет.
"""


class BigIntegerException(Exception):
    """Базовое исключение для всех ошибок BigInteger."""

    pass


class BigIntegerOverflow(BigIntegerException, OverflowError):
    """
    Переполнение представления.

    Возникает, когда:
    1. Значение лимба выходит из [0, BASE) при разборе или переносе/заёме
    2. Результат умножения длиннее MAX_PRODUCT_DIGITS десятичных цифр
    """

    def __init__(self, message: str = "BigInteger overflow"):
        super().__init__(message)


class BigIntegerDivisionByZero(BigIntegerException, ZeroDivisionError):
    """Деление или взятие остатка при нулевом делителе."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class BigIntegerParseError(BigIntegerException, ValueError):
    """
    Некорректная десятичная запись.

    Допустимый формат: необязательный одиночный знак '+' или '-',
    затем одна или более ASCII-цифр. Всё остальное отклоняется.
    """

    pass
