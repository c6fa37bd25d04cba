from consignment_booking.ledger.capacity import (
    DateOption,
    can_accept,
    compute_totals,
    current_total,
    is_date_full,
    next_available_days,
)

__all__ = [
    "DateOption",
    "can_accept",
    "compute_totals",
    "current_total",
    "is_date_full",
    "next_available_days",
]
