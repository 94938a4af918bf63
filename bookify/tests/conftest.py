"""
Общие фикстуры для тестов доменной модели.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from bookify.domain.apartments import Address, Amenity, Apartment, Description, Name
from bookify.domain.bookings import Booking, PricingDetails, PricingService
from bookify.domain.shared import Currency, DateRange, Money


class FlatPricingService(PricingService):
    """Заглушка ценообразования: цена за ночь * число ночей + уборка."""

    def __init__(self) -> None:
        self.calls = []

    def calculate_price(self, apartment: Apartment, period: DateRange) -> PricingDetails:
        self.calls.append((apartment.id, period))
        price_for_period = apartment.price * period.length_in_days
        up_charge = Money.zero(apartment.price.currency)
        return PricingDetails(
            price_for_period=price_for_period,
            cleaning_fee=apartment.cleaning_fee,
            amenities_up_charge=up_charge,
            total_price=price_for_period + apartment.cleaning_fee + up_charge,
        )


@pytest.fixture
def utc_now() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def duration() -> DateRange:
    return DateRange.create(date(2024, 1, 10), date(2024, 1, 15))


@pytest.fixture
def apartment() -> Apartment:
    return Apartment(
        uuid4(),
        name=Name(value="Лофт у реки"),
        description=Description(value="Светлые апартаменты с видом на реку."),
        address=Address(
            street="Main St 1",
            state="CA",
            zip_code="94105",
            city="San Francisco",
            country="USA",
        ),
        price=Money(amount=Decimal("100.00"), currency=Currency.USD),
        cleaning_fee=Money(amount=Decimal("25.00"), currency=Currency.USD),
        amenities=[Amenity.WIFI, Amenity.PARKING],
    )


@pytest.fixture
def pricing_service() -> FlatPricingService:
    return FlatPricingService()


@pytest.fixture
def reserved_booking(apartment, user_id, duration, utc_now, pricing_service) -> Booking:
    booking = Booking.reserve(apartment, user_id, duration, utc_now, pricing_service)
    booking.clear_domain_events()
    return booking


@pytest.fixture
def confirmed_booking(reserved_booking, utc_now) -> Booking:
    reserved_booking.confirm(utc_now)
    reserved_booking.clear_domain_events()
    return reserved_booking
