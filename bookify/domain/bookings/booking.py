"""
Агрегат "Бронирование" и его машина состояний.

    Reserved -> Confirmed | Rejected
    Confirmed -> Completed | Cancelled

Rejected, Completed и Cancelled - конечные состояния.
Нарушение правил перехода возвращается как Result.failure,
при этом состояние и буфер событий не меняются.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

import structlog

from ..abstractions import Entity, Error, Result
from ..apartments import Apartment
from ..shared import DateRange, Money
from .errors import BookingErrors
from .events import (
    BookingCancelled,
    BookingCompleted,
    BookingConfirmed,
    BookingRejected,
    BookingReserved,
)
from .pricing import PricingService

logger = structlog.get_logger(__name__)


class BookingStatus(str, Enum):
    """Статусы бронирования."""

    RESERVED = "reserved"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Booking(Entity):
    """Бронирование апартаментов пользователем."""

    def __init__(
        self,
        booking_id: UUID,
        apartment_id: UUID,
        user_id: UUID,
        duration: DateRange,
        price_for_period: Money,
        cleaning_fee: Money,
        amenities_up_charge: Money,
        total_price: Money,
        status: BookingStatus,
        created_on_utc: datetime,
    ) -> None:
        super().__init__(booking_id)
        self._apartment_id = apartment_id
        self._user_id = user_id
        self._duration = duration
        self._price_for_period = price_for_period
        self._cleaning_fee = cleaning_fee
        self._amenities_up_charge = amenities_up_charge
        self._total_price = total_price
        self._status = status
        self._created_on_utc = created_on_utc
        self._confirmed_on_utc: Optional[datetime] = None
        self._rejected_on_utc: Optional[datetime] = None
        self._completed_on_utc: Optional[datetime] = None
        self._cancelled_on_utc: Optional[datetime] = None

    @property
    def apartment_id(self) -> UUID:
        return self._apartment_id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def duration(self) -> DateRange:
        return self._duration

    @property
    def price_for_period(self) -> Money:
        return self._price_for_period

    @property
    def cleaning_fee(self) -> Money:
        return self._cleaning_fee

    @property
    def amenities_up_charge(self) -> Money:
        return self._amenities_up_charge

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def created_on_utc(self) -> datetime:
        return self._created_on_utc

    @property
    def confirmed_on_utc(self) -> Optional[datetime]:
        return self._confirmed_on_utc

    @property
    def rejected_on_utc(self) -> Optional[datetime]:
        return self._rejected_on_utc

    @property
    def completed_on_utc(self) -> Optional[datetime]:
        return self._completed_on_utc

    @property
    def cancelled_on_utc(self) -> Optional[datetime]:
        return self._cancelled_on_utc

    @classmethod
    def reserve(
        cls,
        apartment: Apartment,
        user_id: UUID,
        duration: DateRange,
        utc_now: datetime,
        pricing_service: PricingService,
    ) -> Booking:
        """
        Резервирует апартаменты для пользователя на указанный период.

        Стоимость рассчитывается сервисом ценообразования, у апартаментов
        фиксируется время последнего бронирования.
        """
        pricing = pricing_service.calculate_price(apartment, duration)

        booking = cls(
            booking_id=uuid4(),
            apartment_id=apartment.id,
            user_id=user_id,
            duration=duration,
            price_for_period=pricing.price_for_period,
            cleaning_fee=pricing.cleaning_fee,
            amenities_up_charge=pricing.amenities_up_charge,
            total_price=pricing.total_price,
            status=BookingStatus.RESERVED,
            created_on_utc=utc_now,
        )
        booking._raise_domain_event(
            BookingReserved(booking_id=booking.id, occurred_on_utc=utc_now)
        )

        apartment.mark_booked(utc_now)

        logger.debug(
            "booking_reserved",
            booking_id=str(booking.id),
            apartment_id=str(apartment.id),
            total_price=str(booking.total_price),
        )
        return booking

    def confirm(self, utc_now: datetime) -> Result:
        if self._status != BookingStatus.RESERVED:
            return self._reject_transition("confirm", BookingErrors.NOT_RESERVED)

        self._status = BookingStatus.CONFIRMED
        self._confirmed_on_utc = utc_now
        self._raise_domain_event(
            BookingConfirmed(booking_id=self.id, occurred_on_utc=utc_now)
        )
        return Result.success()

    def reject(self, utc_now: datetime) -> Result:
        if self._status != BookingStatus.RESERVED:
            return self._reject_transition("reject", BookingErrors.NOT_RESERVED)

        self._status = BookingStatus.REJECTED
        self._rejected_on_utc = utc_now
        self._raise_domain_event(
            BookingRejected(booking_id=self.id, occurred_on_utc=utc_now)
        )
        return Result.success()

    def complete(self, utc_now: datetime) -> Result:
        if self._status != BookingStatus.CONFIRMED:
            return self._reject_transition("complete", BookingErrors.NOT_CONFIRMED)

        self._status = BookingStatus.COMPLETED
        self._completed_on_utc = utc_now
        self._raise_domain_event(
            BookingCompleted(booking_id=self.id, occurred_on_utc=utc_now)
        )
        return Result.success()

    def cancel(self, utc_now: datetime) -> Result:
        """Отменяет подтвержденное бронирование, если проживание еще не началось."""
        if self._status != BookingStatus.CONFIRMED:
            return self._reject_transition("cancel", BookingErrors.NOT_CONFIRMED)

        if utc_now.date() > self._duration.start:
            return self._reject_transition("cancel", BookingErrors.ALREADY_STARTED)

        self._status = BookingStatus.CANCELLED
        self._cancelled_on_utc = utc_now
        self._raise_domain_event(
            BookingCancelled(booking_id=self.id, occurred_on_utc=utc_now)
        )
        return Result.success()

    def _reject_transition(self, transition: str, error: Error) -> Result:
        logger.info(
            "booking_transition_rejected",
            booking_id=str(self.id),
            transition=transition,
            status=self._status.value,
            error_code=error.code,
        )
        return Result.failure(error)
