"""
Переиспользуемые абстракции домена: тип результата и база сущностей.
"""

from .entity import DomainEvent, DomainEventBuffer, Entity
from .error import Error
from .exceptions import (
    BookifyError,
    CurrencyMismatchError,
    ResultStateError,
    UnknownCurrencyError,
)
from .result import Result, ValueResult

__all__ = [
    # Результат операции
    "Error",
    "Result",
    "ValueResult",
    # Сущности и события
    "DomainEvent",
    "DomainEventBuffer",
    "Entity",
    # Исключения
    "BookifyError",
    "CurrencyMismatchError",
    "ResultStateError",
    "UnknownCurrencyError",
]
