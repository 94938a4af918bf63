"""
Иерархия исключений доменной модели.

Исключения используются только для ошибок программирования
(нарушение инвариантов). Ожидаемые нарушения бизнес-правил
возвращаются как ``Result.failure(Error)``.
"""


class BookifyError(Exception):
    """Базовое исключение для всех ошибок Bookify."""

    pass


class ResultStateError(BookifyError):
    """Результат построен противоречиво или значение запрошено у неуспешного результата."""

    pass


class CurrencyMismatchError(BookifyError, ValueError):
    """Операция над деньгами в разных валютах."""

    pass


class UnknownCurrencyError(BookifyError, ValueError):
    """Неизвестный код валюты."""

    pass
