"""
Field definitions and validators for the booking form.

The upper item bound is left to the capacity check: a request above
the daily cap is reported as capacity exceeded, not as a field error.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from consignment_booking.schemas.booking_schema import BookingForm, canonical_date

# Validation thresholds
MIN_NAME_LENGTH = 2
MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15
MIN_ITEMS = 1

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_phone(value: str) -> str:
    """Strip everything except digits and a leading +.

    Examples:
        >>> normalize_phone("0412 345 678")
        '0412345678'
        >>> normalize_phone("+1 (555) 010-9999")
        '+15550109999'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def _validate_name(value: str) -> bool:
    return len(value.strip()) >= MIN_NAME_LENGTH


def _validate_email(value: str) -> bool:
    return bool(_EMAIL_PATTERN.match(value.strip()))


def _validate_phone(value: str) -> bool:
    digits = re.sub(r"[^\d]", "", value)
    return MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS


def _validate_date(value: str) -> bool:
    """Validate date parses as YYYY-MM-DD (padding is normalized later)."""
    return canonical_date(value) is not None


@dataclass(frozen=True)
class FieldDefinition:
    """Schema for a single form field."""

    name: str
    display_name: str
    required: bool = True
    validator: Optional[Callable[[str], bool]] = None


FIELD_DEFINITIONS: list[FieldDefinition] = [
    FieldDefinition("name", "Name", validator=_validate_name),
    FieldDefinition("email", "Email", validator=_validate_email),
    FieldDefinition("phone", "Phone Number", validator=_validate_phone),
    FieldDefinition("account", "Account Number (optional)", required=False),
    FieldDefinition("date", "Select Date", validator=_validate_date),
    FieldDefinition("items", "Number of Clothing Items"),
]

FIELD_NAMES = frozenset(f.name for f in FIELD_DEFINITIONS)
DISPLAY_NAMES = {f.name: f.display_name for f in FIELD_DEFINITIONS}


def validate_form(form: BookingForm) -> list[str]:
    """Return human-readable problems with the form. Empty means valid."""
    problems: list[str] = []
    for definition in FIELD_DEFINITIONS:
        if definition.name == "items":
            continue
        value: str = getattr(form, definition.name)
        if not value.strip():
            if definition.required:
                problems.append(f"{definition.display_name} is required")
            continue
        if definition.validator is not None and not definition.validator(value):
            problems.append(f"{definition.display_name} doesn't look right")
    if form.items < MIN_ITEMS:
        problems.append(f"Number of Clothing Items must be at least {MIN_ITEMS}")
    return problems
