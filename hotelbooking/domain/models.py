"""Domain models for room bookings and availability."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from hotelbooking.domain.constraints import normalize_date


@dataclass(frozen=True)
class Room:
    room_id: Optional[int] = None
    description: str = ""


@dataclass(frozen=True)
class Booking:
    """A stay occupying ``room_id`` for every date in [start_date, end_date]."""

    start_date: date
    end_date: date
    customer_id: int
    room_id: Optional[int] = None
    is_active: bool = False
    booking_id: Optional[int] = None

    def __post_init__(self) -> None:
        # Stores may hand back timestamps; only the calendar day counts.
        object.__setattr__(self, "start_date", normalize_date(self.start_date))
        object.__setattr__(self, "end_date", normalize_date(self.end_date))

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def overlaps(self, start_date: date, end_date: date) -> bool:
        # Inclusive on both ends: sharing a single date is a conflict.
        return self.start_date <= end_date and self.end_date >= start_date


@dataclass(frozen=True)
class OccupancyCalendar:
    year: int
    min_year: int
    max_year: int
    fully_occupied_dates: list[date] = field(default_factory=list)
