"""
Тип результата операции (Result).

Явная обертка "успех/неудача" вместо исключений для ожидаемых
нарушений бизнес-правил. Это пассивное значение: никаких цепочек,
повторов или асинхронности, вызывающий код ветвится сам.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from .error import Error
from .exceptions import ResultStateError

TValue = TypeVar("TValue")


class Result:
    """Результат операции без полезной нагрузки."""

    __slots__ = ("_is_success", "_error")

    def __init__(self, is_success: bool, error: Error) -> None:
        if not isinstance(error, Error):
            raise ResultStateError(
                f"Ошибка результата должна быть Error, получено {type(error).__name__}."
            )
        if is_success and error != Error.NONE:
            raise ResultStateError("Успешный результат не может содержать ошибку.")
        if not is_success and error == Error.NONE:
            raise ResultStateError("Неуспешный результат должен содержать ошибку.")

        self._is_success = is_success
        self._error = error

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def error(self) -> Error:
        return self._error

    @classmethod
    def success(cls) -> Result:
        return Result(True, Error.NONE)

    @classmethod
    def failure(cls, error: Error) -> Result:
        return Result(False, error)

    @staticmethod
    def create(value: Optional[TValue]) -> ValueResult[TValue]:
        """
        Единственная точка преобразования "значение или None" в результат.
        ``None`` превращается в ``failure(Error.NULL_VALUE)``.
        """
        return ValueResult.create(value)

    def __repr__(self) -> str:
        if self._is_success:
            return f"<{self.__class__.__name__}(success)>"
        return f"<{self.__class__.__name__}(failure, error={self._error.code!r})>"


class ValueResult(Result, Generic[TValue]):
    """Результат операции с полезной нагрузкой, доступной только при успехе."""

    __slots__ = ("_value",)

    def __init__(
        self, value: Optional[TValue], is_success: bool, error: Error
    ) -> None:
        super().__init__(is_success, error)
        self._value = value

    @property
    def value(self) -> TValue:
        """
        Возвращает полезную нагрузку.

        Raises:
            ResultStateError: если результат неуспешный. Сначала проверяйте
                ``is_success`` или используйте ``value_or``.
        """
        if self.is_failure:
            raise ResultStateError("Cannot get value of failed result.")
        return self._value  # type: ignore[return-value]

    def value_or(self, default: TValue) -> TValue:
        """Возвращает полезную нагрузку или ``default`` для неуспешного результата."""
        if self.is_failure:
            return default
        return self._value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: TValue) -> ValueResult[TValue]:  # type: ignore[override]
        return ValueResult(value, True, Error.NONE)

    @classmethod
    def failure(cls, error: Error) -> ValueResult[TValue]:  # type: ignore[override]
        return ValueResult(None, False, error)

    @staticmethod
    def create(value: Optional[TValue]) -> ValueResult[TValue]:
        if value is None:
            return ValueResult.failure(Error.NULL_VALUE)
        return ValueResult.success(value)
