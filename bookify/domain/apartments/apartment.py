from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from ..abstractions import Entity
from ..shared import Money
from .value_objects import Address, Amenity, Description, Name


class Apartment(Entity):
    """Апартаменты, сдаваемые в краткосрочную аренду."""

    def __init__(
        self,
        apartment_id: UUID,
        name: Name,
        description: Description,
        address: Address,
        price: Money,
        cleaning_fee: Money,
        amenities: Optional[Iterable[Amenity]] = None,
    ) -> None:
        super().__init__(apartment_id)
        self._name = name
        self._description = description
        self._address = address
        self._price = price
        self._cleaning_fee = cleaning_fee
        self._amenities: List[Amenity] = list(amenities or [])
        self._last_booked_on_utc: Optional[datetime] = None

    @property
    def name(self) -> Name:
        return self._name

    @property
    def description(self) -> Description:
        return self._description

    @property
    def address(self) -> Address:
        return self._address

    @property
    def price(self) -> Money:
        """Цена за ночь."""
        return self._price

    @property
    def cleaning_fee(self) -> Money:
        return self._cleaning_fee

    @property
    def amenities(self) -> List[Amenity]:
        return list(self._amenities)

    @property
    def last_booked_on_utc(self) -> Optional[datetime]:
        return self._last_booked_on_utc

    def mark_booked(self, utc_now: datetime) -> None:
        """Фиксирует время последнего бронирования. Вызывается только Booking.reserve."""
        self._last_booked_on_utc = utc_now
