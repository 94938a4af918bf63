"""
Тесты агрегата Booking: резервирование и машина состояний.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from bookify.domain.bookings import (
    Booking,
    BookingCancelled,
    BookingCompleted,
    BookingConfirmed,
    BookingErrors,
    BookingRejected,
    BookingReserved,
    BookingStatus,
)
from bookify.domain.shared import Currency, Money


class TestReserve:
    def test_reserve_creates_reserved_booking(
        self, apartment, user_id, duration, utc_now, pricing_service
    ):
        booking = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)

        assert booking.status == BookingStatus.RESERVED
        assert booking.apartment_id == apartment.id
        assert booking.user_id == user_id
        assert booking.duration == duration
        assert booking.created_on_utc == utc_now
        assert booking.confirmed_on_utc is None

    def test_reserve_raises_single_reserved_event(
        self, apartment, user_id, duration, utc_now, pricing_service
    ):
        booking = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)

        events = booking.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], BookingReserved)
        assert events[0].booking_id == booking.id

    def test_reserve_stamps_apartment_last_booked(
        self, apartment, user_id, duration, utc_now, pricing_service
    ):
        assert apartment.last_booked_on_utc is None

        Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)

        assert apartment.last_booked_on_utc == utc_now

    def test_reserve_uses_pricing_service(
        self, apartment, user_id, duration, utc_now, pricing_service
    ):
        booking = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)

        assert pricing_service.calls == [(apartment.id, duration)]
        assert booking.price_for_period == Money(
            amount=Decimal("500.00"), currency=Currency.USD
        )
        assert booking.cleaning_fee == apartment.cleaning_fee
        assert booking.amenities_up_charge.is_zero()
        assert booking.total_price == Money(amount=Decimal("525.00"), currency=Currency.USD)

    def test_each_reservation_gets_new_id(
        self, apartment, user_id, duration, utc_now, pricing_service
    ):
        first = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)
        second = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)
        assert first.id != second.id


class TestConfirm:
    def test_confirm_reserved_booking(self, reserved_booking, utc_now):
        result = reserved_booking.confirm(utc_now)

        assert result.is_success
        assert reserved_booking.status == BookingStatus.CONFIRMED
        assert reserved_booking.confirmed_on_utc == utc_now
        events = reserved_booking.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], BookingConfirmed)

    def test_confirm_twice_fails_with_not_reserved(self, confirmed_booking, utc_now):
        result = confirmed_booking.confirm(utc_now)

        assert result.is_failure
        assert result.error == BookingErrors.NOT_RESERVED
        assert confirmed_booking.status == BookingStatus.CONFIRMED
        assert confirmed_booking.get_domain_events() == []


class TestReject:
    def test_reject_reserved_booking(self, reserved_booking, utc_now):
        result = reserved_booking.reject(utc_now)

        assert result.is_success
        assert reserved_booking.status == BookingStatus.REJECTED
        assert reserved_booking.rejected_on_utc == utc_now
        assert isinstance(reserved_booking.get_domain_events()[0], BookingRejected)

    def test_reject_confirmed_booking_fails(self, confirmed_booking, utc_now):
        result = confirmed_booking.reject(utc_now)

        assert result.error == BookingErrors.NOT_RESERVED
        assert confirmed_booking.rejected_on_utc is None


class TestComplete:
    def test_complete_confirmed_booking(self, confirmed_booking, utc_now):
        completed_at = utc_now + timedelta(days=20)

        result = confirmed_booking.complete(completed_at)

        assert result.is_success
        assert confirmed_booking.status == BookingStatus.COMPLETED
        assert confirmed_booking.completed_on_utc == completed_at
        assert confirmed_booking.rejected_on_utc is None
        assert isinstance(confirmed_booking.get_domain_events()[0], BookingCompleted)

    def test_complete_reserved_booking_fails(self, reserved_booking, utc_now):
        result = reserved_booking.complete(utc_now)

        assert result.error == BookingErrors.NOT_CONFIRMED
        assert reserved_booking.status == BookingStatus.RESERVED
        assert reserved_booking.completed_on_utc is None


class TestCancel:
    def test_cancel_before_start(self, confirmed_booking, utc_now):
        result = confirmed_booking.cancel(utc_now)

        assert result.is_success
        assert confirmed_booking.status == BookingStatus.CANCELLED
        assert confirmed_booking.cancelled_on_utc == utc_now
        assert isinstance(confirmed_booking.get_domain_events()[0], BookingCancelled)

    def test_cancel_on_start_day_is_allowed(self, confirmed_booking, utc_now):
        start_day = utc_now.replace(
            year=confirmed_booking.duration.start.year,
            month=confirmed_booking.duration.start.month,
            day=confirmed_booking.duration.start.day,
        )

        assert confirmed_booking.cancel(start_day).is_success

    def test_cancel_after_start_fails(self, confirmed_booking, utc_now):
        after_start = utc_now.replace(day=confirmed_booking.duration.start.day + 1)

        result = confirmed_booking.cancel(after_start)

        assert result.is_failure
        assert result.error == BookingErrors.ALREADY_STARTED
        assert confirmed_booking.status == BookingStatus.CONFIRMED
        assert confirmed_booking.cancelled_on_utc is None
        assert confirmed_booking.get_domain_events() == []

    def test_cancel_reserved_booking_fails(self, reserved_booking, utc_now):
        result = reserved_booking.cancel(utc_now)

        assert result.error == BookingErrors.NOT_CONFIRMED


@pytest.mark.parametrize(
    "terminal_transition",
    ["reject", "complete", "cancel"],
)
def test_terminal_states_reject_every_transition(
    reserved_booking, utc_now, terminal_transition
):
    """Тест: из конечных состояний никакие переходы невозможны."""
    if terminal_transition != "reject":
        reserved_booking.confirm(utc_now)
    getattr(reserved_booking, terminal_transition)(utc_now)
    reserved_booking.clear_domain_events()
    final_status = reserved_booking.status

    for transition in ("confirm", "reject", "complete", "cancel"):
        result = getattr(reserved_booking, transition)(utc_now)
        assert result.is_failure

    assert reserved_booking.status == final_status
    assert reserved_booking.get_domain_events() == []


def test_booking_error_codes_are_stable():
    assert BookingErrors.NOT_FOUND.code == "Booking.NotFound"
    assert BookingErrors.OVERLAP.code == "Booking.Overlap"
    assert BookingErrors.NOT_RESERVED.message == "The booking is not reserved."
    assert BookingErrors.NOT_CONFIRMED.message == "The booking is not confirmed."
    assert BookingErrors.ALREADY_STARTED.message == "The booking has already started."


def test_events_use_transition_time(
    apartment, user_id, duration, utc_now, pricing_service
):
    """Тест: время события совпадает с переданным временем перехода."""
    booking = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)
    completed_at = utc_now + timedelta(days=20)
    booking.confirm(utc_now)
    booking.complete(completed_at)

    reserved, confirmed, completed = booking.get_domain_events()

    assert reserved.occurred_on_utc == utc_now
    assert confirmed.occurred_on_utc == utc_now
    assert completed.occurred_on_utc == booking.completed_on_utc == completed_at
