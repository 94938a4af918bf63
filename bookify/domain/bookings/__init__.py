"""
Бронирования: агрегат, ошибки, доменные события и контракт ценообразования.
"""

from .booking import Booking, BookingStatus
from .errors import BookingErrors
from .events import (
    BookingCancelled,
    BookingCompleted,
    BookingConfirmed,
    BookingRejected,
    BookingReserved,
)
from .pricing import PricingDetails, PricingService

__all__ = [
    # Агрегат
    "Booking",
    "BookingStatus",
    "BookingErrors",
    # События
    "BookingCancelled",
    "BookingCompleted",
    "BookingConfirmed",
    "BookingRejected",
    "BookingReserved",
    # Ценообразование
    "PricingDetails",
    "PricingService",
]
