"""
Booking store: the ordered booking list plus its persisted copy.

Every mutation serializes the full list under one storage key before
the in-memory list is replaced, so storage and memory never diverge
within a session.
"""

import json
import logging
import uuid
from enum import Enum
from typing import Optional, TypedDict

from pydantic import TypeAdapter, ValidationError

from consignment_booking.config import settings
from consignment_booking.ledger.capacity import can_accept, compute_totals, current_total
from consignment_booking.schemas.booking_schema import Booking, BookingForm, canonical_date
from consignment_booking.storage.local_storage import KeyValueStorage

logger = logging.getLogger(__name__)

_booking_list = TypeAdapter(list[Booking])

CAPACITY_EXCEEDED_MESSAGE = "Cannot book: daily item limit reached or exceeded."


class BookingErrorCode(str, Enum):
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_BOOKING = "invalid_booking"


class BookingResult(TypedDict, total=False):
    """Result from BookingStore.create."""

    success: bool
    message: str
    booking: Booking
    error_code: BookingErrorCode


class BookingStore:
    """
    Ordered list of bookings persisted to a key-value storage.

    The list is loaded once on construction. Per-date totals are derived
    from it on every read.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = settings.storage.key,
        max_items_per_day: int = settings.capacity.max_items_per_day,
    ) -> None:
        self._storage = storage
        self._key = key
        self.max_items_per_day = max_items_per_day
        self._bookings: list[Booking] = self.load()

    @property
    def bookings(self) -> list[Booking]:
        return list(self._bookings)

    @property
    def totals(self) -> dict[str, int]:
        return compute_totals(self._bookings)

    def get(self, booking_id: str) -> Optional[Booking]:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def load(self) -> list[Booking]:
        """Read the persisted list. Missing or malformed data reads as empty."""
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            bookings = _booking_list.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Discarding malformed bookings under '%s' (%d errors)",
                self._key, exc.error_count(),
            )
            return []
        logger.debug("Loaded %d bookings from '%s'", len(bookings), self._key)
        return bookings

    def save(self, bookings: list[Booking]) -> None:
        """Overwrite the persisted list with ``bookings``."""
        payload = json.dumps([b.model_dump(mode="json") for b in bookings])
        self._storage.set_item(self._key, payload)

    def _new_id(self) -> str:
        existing = {b.id for b in self._bookings}
        booking_id = str(uuid.uuid4())
        while booking_id in existing:
            booking_id = str(uuid.uuid4())
        return booking_id

    def create(self, form: BookingForm) -> BookingResult:
        """
        Validate capacity for the form's date and append a new booking.

        The date is normalized to its zero-padded key first, so every
        spelling of a day is counted against the same total. The capacity
        check runs before record validation, so any request above the
        daily cap reports capacity exceeded.
        """
        date_key = canonical_date(form.date)
        if date_key is None:
            return {
                "success": False,
                "error_code": BookingErrorCode.INVALID_BOOKING,
                "message": f"Cannot book: date must be YYYY-MM-DD, got {form.date!r}.",
            }

        totals = self.totals
        if not can_accept(totals, date_key, form.items, self.max_items_per_day):
            logger.info(
                "Rejected %d items on %s: %d already booked (max %d)",
                form.items, date_key,
                current_total(totals, date_key), self.max_items_per_day,
            )
            return {
                "success": False,
                "error_code": BookingErrorCode.CAPACITY_EXCEEDED,
                "message": CAPACITY_EXCEEDED_MESSAGE,
            }

        try:
            booking = Booking(
                id=self._new_id(),
                name=form.name,
                email=form.email,
                phone=form.phone,
                account=form.account or None,
                date=date_key,
                items=form.items,
            )
        except ValidationError as exc:
            return {
                "success": False,
                "error_code": BookingErrorCode.INVALID_BOOKING,
                "message": f"Cannot book: {exc.error_count()} invalid field(s).",
            }

        updated = [*self._bookings, booking]
        self.save(updated)
        self._bookings = updated
        logger.info("Booking created: %s, %d items on %s", booking.id, booking.items, booking.date)

        return {
            "success": True,
            "booking": booking,
            "message": f"Booking successful! Save this cancellation ID: {booking.id}",
        }

    def cancel_by_id(self, booking_id: str) -> list[Booking]:
        """Remove a booking by id. Unknown ids leave the list unchanged."""
        filtered = [b for b in self._bookings if b.id != booking_id]
        self.save(filtered)
        if len(filtered) == len(self._bookings):
            logger.info("Cancel requested for unknown booking %s", booking_id)
        else:
            logger.info("Booking cancelled: %s", booking_id)
        self._bookings = filtered
        return list(filtered)
