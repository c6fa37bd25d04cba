"""Tests for booking data models."""

import pytest
from pydantic import ValidationError

from consignment_booking.schemas.booking_schema import canonical_date
from tests.conftest import make_booking


class TestCanonicalDate:
    def test_padded_date_unchanged(self):
        assert canonical_date("2024-06-10") == "2024-06-10"

    def test_unpadded_date_padded(self):
        assert canonical_date("2024-6-1") == "2024-06-01"

    def test_whitespace_stripped(self):
        assert canonical_date("  2024-06-10\n") == "2024-06-10"

    @pytest.mark.parametrize("value", ["", "next Tuesday", "10/06/2024", "2024-02-30"])
    def test_unparseable(self, value):
        assert canonical_date(value) is None


class TestBookingDate:
    def test_canonical_date_accepted(self):
        assert make_booking(date_str="2024-06-10").date == "2024-06-10"

    @pytest.mark.parametrize("value", ["2024-6-10", " 2024-06-10", "2024-06-10 ", "June 10"])
    def test_non_canonical_date_rejected(self, value):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            make_booking(date_str=value)


class TestBookingItems:
    def test_zero_items_rejected(self):
        with pytest.raises(ValidationError):
            make_booking(items=0)

    def test_upper_bound_left_to_store(self):
        assert make_booking(items=100).items == 100

    def test_frozen(self):
        booking = make_booking()
        with pytest.raises(ValidationError):
            booking.items = 5
