"""Domain-level validation rules for booking date ranges."""

from __future__ import annotations

from datetime import date, datetime


BOOKING_PERIOD_MESSAGE = (
    "Start and end date cannot be set to before current date, "
    "and the start date later than the end date."
)
RANGE_ORDER_MESSAGE = "The start date cannot be later than the end date."


class InvalidDateRangeError(ValueError):
    """Raised when a caller supplies an unusable date range."""


class InvalidRangeError(InvalidDateRangeError):
    """Raised when a range query has its start after its end."""


class NoBookingsExistError(LookupError):
    """Raised when booking bounds are requested from an empty store."""


def normalize_date(value: date | datetime) -> date:
    """Drop any time-of-day component so comparisons are per calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"expected a date or datetime, got {type(value).__name__}")


def validate_booking_period(
    start_date: date | datetime,
    end_date: date | datetime,
    today: date,
) -> tuple[date, date]:
    start = normalize_date(start_date)
    end = normalize_date(end_date)
    if start < today or end < today or start > end:
        raise InvalidDateRangeError(BOOKING_PERIOD_MESSAGE)
    return start, end


def validate_range_order(
    start_date: date | datetime,
    end_date: date | datetime,
) -> tuple[date, date]:
    start = normalize_date(start_date)
    end = normalize_date(end_date)
    if start > end:
        raise InvalidRangeError(RANGE_ORDER_MESSAGE)
    return start, end
