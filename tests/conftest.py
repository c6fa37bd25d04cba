"""Shared test fixtures and helpers."""

import json
from datetime import date
from typing import Optional

import pytest

from consignment_booking.form.controller import BookingFormController
from consignment_booking.schemas.booking_schema import Booking, BookingForm
from consignment_booking.storage.booking_store import BookingStore
from consignment_booking.storage.local_storage import InMemoryStorage

# A Monday; the six-day window from here runs Mon 10 .. Sat 15 June 2024.
MONDAY = date(2024, 6, 10)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    return BookingStore(storage)


@pytest.fixture
def controller(store):
    return BookingFormController(store, today=lambda: MONDAY)


def make_booking(
    booking_id: str = "b-1",
    date_str: str = "2024-06-10",
    items: int = 10,
    account: Optional[str] = None,
) -> Booking:
    """Helper to create a Booking with sensible defaults."""
    return Booking(
        id=booking_id,
        name="Jane Doe",
        email="jane@example.com",
        phone="0412345678",
        account=account,
        date=date_str,
        items=items,
    )


def make_form(date_str: str = "2024-06-10", items: int = 10, **overrides) -> BookingForm:
    """Helper to create a fully valid BookingForm."""
    values = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "0412 345 678",
        "account": "",
        "date": date_str,
        "items": items,
    }
    values.update(overrides)
    return BookingForm(**values)


def fill_controller(controller: BookingFormController, date_str: str = "2024-06-10", items: int = 10) -> None:
    """Set every field of the controller's form to valid values."""
    for name, value in make_form(date_str, items).model_dump().items():
        controller.set_field(name, value)


def seed_storage(storage: InMemoryStorage, bookings: list[Booking], key: str = "bookings") -> None:
    storage.set_item(key, json.dumps([b.model_dump(mode="json") for b in bookings]))
