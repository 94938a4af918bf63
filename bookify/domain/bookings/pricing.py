"""
Контракт сервиса ценообразования.

Бронирование получает расчет стоимости от внешнего сервиса;
сам алгоритм расчета находится за пределами доменной модели.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from ..apartments import Apartment
from ..shared import DateRange, Money


class PricingDetails(BaseModel):
    """Разбивка стоимости бронирования."""

    model_config = ConfigDict(frozen=True)

    price_for_period: Money
    cleaning_fee: Money
    amenities_up_charge: Money
    total_price: Money


class PricingService(ABC):
    """Доменный сервис расчета стоимости проживания."""

    @abstractmethod
    def calculate_price(self, apartment: Apartment, period: DateRange) -> PricingDetails:
        """Рассчитывает стоимость проживания в апартаментах за период."""
        raise NotImplementedError
