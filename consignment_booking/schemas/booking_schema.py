"""Booking record and form data models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_VALUE_FORMAT = "%Y-%m-%d"


def canonical_date(value: str) -> Optional[str]:
    """Return the zero-padded ``YYYY-MM-DD`` key for a date string, or None.

    Examples:
        >>> canonical_date(" 2024-6-10 ")
        '2024-06-10'
        >>> canonical_date("next Tuesday") is None
        True
    """
    try:
        parsed = datetime.strptime(value.strip(), DATE_VALUE_FORMAT)
    except ValueError:
        return None
    return parsed.strftime(DATE_VALUE_FORMAT)


class Booking(BaseModel):
    """A persisted reservation. Never mutated after creation.

    The per-day upper bound on ``items`` is enforced by the store's
    capacity check, against the store's own maximum.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    phone: str
    account: Optional[str] = None
    date: str
    items: int = Field(ge=1)

    @field_validator("date")
    @classmethod
    def _date_is_canonical(cls, value: str) -> str:
        # Ledger totals are keyed by this string; one day must have one key.
        if canonical_date(value) != value:
            raise ValueError(f"date must be YYYY-MM-DD, got {value!r}")
        return value


class BookingForm(BaseModel):
    """Transient form field values, validated on every assignment."""
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    account: str = ""
    date: str = ""
    items: int = 1
