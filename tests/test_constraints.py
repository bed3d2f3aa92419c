"""Tests for booking date range validation and date normalization."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from hotelbooking.domain.constraints import (
    BOOKING_PERIOD_MESSAGE,
    RANGE_ORDER_MESSAGE,
    InvalidDateRangeError,
    InvalidRangeError,
    normalize_date,
    validate_booking_period,
    validate_range_order,
)


TODAY = date(2026, 3, 15)


# --- normalize_date ---

def test_normalize_date_strips_time_of_day() -> None:
    assert normalize_date(datetime(2026, 3, 15, 23, 59, 59)) == date(2026, 3, 15)


def test_normalize_date_keeps_plain_dates() -> None:
    assert normalize_date(date(2026, 3, 15)) == date(2026, 3, 15)


def test_normalize_date_rejects_strings() -> None:
    with pytest.raises(TypeError):
        normalize_date("2026-03-15")  # type: ignore[arg-type]


# --- validate_booking_period ---

def test_single_day_stay_today_passes() -> None:
    assert validate_booking_period(TODAY, TODAY, today=TODAY) == (TODAY, TODAY)


def test_later_same_day_timestamp_today_passes() -> None:
    """Time of day must not push today's date into the past."""
    start, end = validate_booking_period(
        datetime(2026, 3, 15, 0, 0),
        datetime(2026, 3, 16, 8, 30),
        today=TODAY,
    )
    assert (start, end) == (TODAY, date(2026, 3, 16))


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (date(2026, 3, 14), date(2026, 3, 16)),
        (date(2026, 3, 10), date(2026, 3, 14)),
        (date(2026, 3, 17), date(2026, 3, 16)),
    ],
)
def test_invalid_booking_period_raises(start, end) -> None:
    with pytest.raises(InvalidDateRangeError) as exc_info:
        validate_booking_period(start, end, today=TODAY)
    assert str(exc_info.value) == BOOKING_PERIOD_MESSAGE


# --- validate_range_order ---

def test_range_order_allows_past_dates() -> None:
    assert validate_range_order(date(2001, 1, 1), date(2001, 1, 2)) == (
        date(2001, 1, 1),
        date(2001, 1, 2),
    )


def test_range_order_start_after_end_raises() -> None:
    with pytest.raises(InvalidRangeError) as exc_info:
        validate_range_order(date(2026, 3, 16), date(2026, 3, 15))
    assert str(exc_info.value) == RANGE_ORDER_MESSAGE


def test_invalid_range_is_a_date_range_error() -> None:
    """Callers catching the general error also see range-order failures."""
    assert issubclass(InvalidRangeError, InvalidDateRangeError)
    assert issubclass(InvalidDateRangeError, ValueError)
