from uuid import UUID

from ..abstractions import DomainEvent


class BookingReserved(DomainEvent):
    """Событие: бронирование создано (зарезервировано)."""

    booking_id: UUID


class BookingConfirmed(DomainEvent):
    """Событие: бронирование подтверждено."""

    booking_id: UUID


class BookingRejected(DomainEvent):
    """Событие: бронирование отклонено."""

    booking_id: UUID


class BookingCompleted(DomainEvent):
    """Событие: бронирование завершено."""

    booking_id: UUID


class BookingCancelled(DomainEvent):
    """Событие: бронирование отменено."""

    booking_id: UUID
