from consignment_booking.form.controller import BookingFormController
from consignment_booking.form.fields import FIELD_DEFINITIONS, validate_form
from consignment_booking.form.state_machine import (
    FormState,
    FormStateMachine,
    FormTrigger,
    InvalidTransitionError,
)

__all__ = [
    "BookingFormController",
    "FIELD_DEFINITIONS",
    "validate_form",
    "FormState",
    "FormStateMachine",
    "FormTrigger",
    "InvalidTransitionError",
]
