from ..abstractions import Error


class BookingErrors:
    """Предопределенные ошибки операций с бронированием."""

    NOT_FOUND = Error("Booking.NotFound", "The booking with the given id was not found.")
    OVERLAP = Error("Booking.Overlap", "The booking overlaps with an existing booking.")
    NOT_RESERVED = Error("Booking.NotReserved", "The booking is not reserved.")
    NOT_CONFIRMED = Error("Booking.NotConfirmed", "The booking is not confirmed.")
    ALREADY_STARTED = Error("Booking.AlreadyStarted", "The booking has already started.")
