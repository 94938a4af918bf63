"""
Общие объекты-значения: валюта, деньги и диапазон дат.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..abstractions.exceptions import CurrencyMismatchError, UnknownCurrencyError


class Currency(str, Enum):
    """Поддерживаемые валюты (ISO 4217)."""

    NONE = ""  # Внутренний маркер "валюта не задана"
    USD = "USD"
    EUR = "EUR"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def all(cls) -> List[Currency]:
        """Возвращает публичные валюты без внутреннего маркера."""
        return [cls.USD, cls.EUR]

    @classmethod
    def from_code(cls, code: str) -> Currency:
        for currency in cls.all():
            if currency.code == code:
                return currency
        raise UnknownCurrencyError(f"Currency with code {code} not found")


class Money(BaseModel):
    """
    Денежная сумма с валютой.
    Неизменяемый объект, сравнивается по значению.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0, description="Сумма денег")
    currency: Currency = Currency.NONE

    @classmethod
    def zero(cls, currency: Currency = Currency.NONE) -> Money:
        return cls(amount=Decimal("0"), currency=currency)

    def is_zero(self) -> bool:
        return self == Money.zero(self.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        if self.currency != other.currency:
            raise CurrencyMismatchError("Нельзя складывать деньги в разных валютах.")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, multiplier: Union[int, Decimal]) -> Money:
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, Decimal)):
            return NotImplemented
        return Money(amount=self.amount * multiplier, currency=self.currency)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.code}".rstrip()


class DateRange(BaseModel):
    """
    Диапазон дат бронирования.
    Начальная дата не должна быть позже конечной.
    """

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def _end_not_before_start(self) -> DateRange:
        if self.start > self.end:
            raise ValueError("Конечная дата должна быть не раньше начальной.")
        return self

    @classmethod
    def create(cls, start: date, end: date) -> DateRange:
        return cls(start=start, end=end)

    @property
    def length_in_days(self) -> int:
        """Количество ночей в диапазоне."""
        return (self.end - self.start).days

    # Дата выезда (end) не входит в диапазон: это не ночь проживания.
    def overlaps_with(self, other: DateRange) -> bool:
        return self.start < other.end and other.start < self.end

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, date):
            return False
        return self.start <= item < self.end
