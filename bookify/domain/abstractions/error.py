from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Error:
    """
    Ошибка доменной операции: стабильный код и сообщение.
    Неизменяемый объект, сравнивается по значению.
    """

    code: str
    message: str

    NONE: ClassVar[Error]
    NULL_VALUE: ClassVar[Error]

    def __bool__(self) -> bool:
        return self != Error.NONE

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


# Маркер успешного результата
Error.NONE = Error("", "")
# Результат построен из отсутствующего значения
Error.NULL_VALUE = Error("Error.NullValue", "Value cannot be null.")
