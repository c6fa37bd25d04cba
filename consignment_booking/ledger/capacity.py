"""
Capacity ledger: per-date item totals derived from the booking list.

Totals are never stored. Every caller recomputes them from the current
list, so the ledger cannot drift from the bookings it summarizes.

Usage:
    totals = compute_totals(store.bookings)
    if not can_accept(totals, "2024-06-10", 5, 80):
        ...
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, TypedDict

from consignment_booking.schemas.booking_schema import DATE_VALUE_FORMAT, Booking

CLOSED_WEEKDAY = 6  # Sunday


class DateOption(TypedDict):
    """One entry of the date selector."""

    label: str
    value: str
    disabled: bool


def compute_totals(bookings: Iterable[Booking]) -> dict[str, int]:
    """Sum booked items per date."""
    totals: dict[str, int] = defaultdict(int)
    for booking in bookings:
        totals[booking.date] += booking.items
    return dict(totals)


def current_total(totals: dict[str, int], date_str: str) -> int:
    return totals.get(date_str, 0)


def is_date_full(totals: dict[str, int], date_str: str, max_items: int) -> bool:
    """True once a date has reached (or already exceeds) the daily cap."""
    return current_total(totals, date_str) >= max_items


def can_accept(totals: dict[str, int], date_str: str, items: int, max_items: int) -> bool:
    """Check whether ``items`` more can be booked on a date without passing the cap."""
    return current_total(totals, date_str) + items <= max_items


def format_label(day: date) -> str:
    """Render a day as e.g. ``Monday, Jun 10``."""
    return f"{day:%A, %b} {day.day}"


def next_available_days(
    today: date, count: int, max_items: int, totals: dict[str, int]
) -> list[DateOption]:
    """
    List selectable dates for the next ``count`` calendar days.

    The window starts at ``today`` and includes it. Sundays fall inside
    the window but are skipped, so fewer than ``count`` options can come
    back. Full dates are kept and flagged ``disabled``.
    """
    options: list[DateOption] = []
    for offset in range(count):
        day = today + timedelta(days=offset)
        if day.weekday() == CLOSED_WEEKDAY:
            continue
        value = day.strftime(DATE_VALUE_FORMAT)
        options.append(
            {
                "label": format_label(day),
                "value": value,
                "disabled": is_date_full(totals, value, max_items),
            }
        )
    return options
