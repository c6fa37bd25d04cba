"""
Booking form controller: field values, submit, and cancel.

The store is injected, so the controller holds only transient form
state (field values, the last error, and the cancellation id of the
booking just made).

Usage:
    controller = BookingFormController(BookingStore(InMemoryStorage()))
    controller.set_field("date", "2024-06-10")
    result = controller.submit()
    if result["success"]:
        controller.cancel()
"""

import logging
from datetime import date
from typing import Any, Callable, Optional

from pydantic import ValidationError

from consignment_booking.config import settings
from consignment_booking.form.fields import (
    DISPLAY_NAMES,
    FIELD_NAMES,
    normalize_phone,
    validate_form,
)
from consignment_booking.form.state_machine import FormState, FormStateMachine, FormTrigger
from consignment_booking.ledger.capacity import DateOption, next_available_days
from consignment_booking.logging_context import new_session_id
from consignment_booking.schemas.booking_schema import Booking, BookingForm, canonical_date
from consignment_booking.storage.booking_store import BookingErrorCode, BookingResult, BookingStore

logger = logging.getLogger(__name__)


class BookingFormController:
    """Drives one booking form session against a BookingStore."""

    def __init__(
        self,
        store: BookingStore,
        today: Callable[[], date] = date.today,
        window_days: int = settings.capacity.booking_window_days,
    ) -> None:
        self.store = store
        self._today = today
        self.window_days = window_days
        self.sm = FormStateMachine()
        self.form = BookingForm()
        self.error: str = ""
        self.cancel_id: str = ""
        self.session_id = new_session_id()

    @property
    def state(self) -> FormState:
        return self.sm.current_state

    @property
    def submitted(self) -> bool:
        return self.sm.current_state == FormState.SUBMITTED

    def set_field(self, name: str, value: Any) -> bool:
        """
        Assign one field. ``items`` is coerced to an integer.

        A value that cannot be coerced leaves the field unchanged, sets
        ``error``, and returns False. Unknown field names raise ValueError.
        """
        self.sm.require(FormState.EDITING, "edit fields")
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown field '{name}'. Valid: {sorted(FIELD_NAMES)}")
        try:
            setattr(self.form, name, value)
        except ValidationError:
            expected = "a whole number" if name == "items" else "text"
            self.error = f"{DISPLAY_NAMES[name]} must be {expected}."
            return False
        return True

    def date_options(self) -> list[DateOption]:
        """Selectable dates for today's window, recomputed on every call."""
        return next_available_days(
            self._today(), self.window_days, self.store.max_items_per_day, self.store.totals
        )

    def submit(self) -> BookingResult:
        """
        Validate the form and create a booking.

        On rejection the form keeps its values and ``error`` holds the
        message. On success the form resets and the new id is held for
        cancellation.
        """
        self.sm.require(FormState.EDITING, "submit")

        problems = validate_form(self.form)
        if problems:
            self.error = "; ".join(problems) + "."
            logger.info("Submission rejected: %s", self.error)
            return {
                "success": False,
                "error_code": BookingErrorCode.INVALID_BOOKING,
                "message": self.error,
            }

        date_key = canonical_date(self.form.date)
        offered = {option["value"] for option in self.date_options()}
        if date_key not in offered:
            self.error = "Select Date must be one of the offered dates."
            logger.info("Submission rejected: %s is not offered", self.form.date)
            return {
                "success": False,
                "error_code": BookingErrorCode.INVALID_BOOKING,
                "message": self.error,
            }

        submission = self.form.model_copy(
            update={"phone": normalize_phone(self.form.phone), "date": date_key}
        )
        result = self.store.create(submission)
        if not result["success"]:
            self.error = result["message"]
            return result

        booking: Booking = result["booking"]
        self.error = ""
        self.form = BookingForm()
        self.cancel_id = booking.id
        self.sm.transition(FormTrigger.SUBMIT_ACCEPTED)
        return result

    def cancel(self) -> list[Booking]:
        """Cancel the booking just made and return to a blank form."""
        self.sm.require(FormState.SUBMITTED, "cancel")
        remaining = self.store.cancel_by_id(self.cancel_id)
        logger.debug("Form returned to editing after cancelling %s", self.cancel_id)
        self.cancel_id = ""
        self.form = BookingForm()
        self.sm.transition(FormTrigger.CANCELLED)
        return remaining

    def start_new_booking(self) -> None:
        """Keep the booking just made and return to a blank form."""
        self.sm.require(FormState.SUBMITTED, "start a new booking")
        self.cancel_id = ""
        self.sm.transition(FormTrigger.NEW_BOOKING)

    def held_booking(self) -> Optional[Booking]:
        return self.store.get(self.cancel_id) if self.cancel_id else None
