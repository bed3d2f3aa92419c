"""Booking availability engine: room assignment and occupancy queries."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from hotelbooking.domain.constraints import (
    NoBookingsExistError,
    normalize_date,
    validate_booking_period,
    validate_range_order,
)
from hotelbooking.domain.models import Booking, OccupancyCalendar, Room
from hotelbooking.repository.store import Store
from hotelbooking.utils.logger import get_logger


logger = get_logger(__name__)

NO_AVAILABLE_ROOM = -1


def _active_bookings(bookings: list[Booking]) -> list[Booking]:
    return [booking for booking in bookings if booking.is_active]


def _iter_days(start_date: date, end_date: date):
    current = start_date
    while current <= end_date:
        yield current
        current += timedelta(days=1)


class BookingAvailabilityService:
    """Decides room assignment and occupancy over the booking and room stores.

    Nothing is cached between calls: every query reads both stores again, so
    the service can be shared freely across requests.
    """

    def __init__(
        self,
        booking_store: Store[Booking],
        room_store: Store[Room],
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        self._booking_store = booking_store
        self._room_store = room_store
        self._clock = clock or date.today

    def today(self) -> date:
        """The calendar day booking periods are validated against."""
        return normalize_date(self._clock())

    def create_booking(self, booking: Booking) -> Optional[Booking]:
        """Assign a free room and persist the booking.

        Returns ``None`` when no room is free for the whole stay; that is a
        normal outcome, not an error.
        """
        start_date, end_date = validate_booking_period(
            booking.start_date,
            booking.end_date,
            today=self.today(),
        )
        room_id = self.find_available_room(start_date, end_date)
        if room_id == NO_AVAILABLE_ROOM:
            logger.info(
                "Booking not created, no room available | start=%s | end=%s | customer_id=%s",
                start_date,
                end_date,
                booking.customer_id,
            )
            return None

        created = self._booking_store.add(
            replace(
                booking,
                start_date=start_date,
                end_date=end_date,
                room_id=room_id,
                is_active=True,
            )
        )
        logger.info(
            "Booking created | booking_id=%s | room_id=%s | start=%s | end=%s",
            created.booking_id,
            created.room_id,
            created.start_date,
            created.end_date,
        )
        return created

    def find_available_room(
        self,
        start_date: date | datetime,
        end_date: date | datetime,
    ) -> int:
        """Return the first room with no active booking overlapping the range."""
        start, end = validate_booking_period(start_date, end_date, today=self.today())
        active = _active_bookings(list(self._booking_store.get_all()))

        for room in self._room_store.get_all():
            conflict = any(
                booking.room_id == room.room_id and booking.overlaps(start, end)
                for booking in active
            )
            if not conflict:
                logger.debug("Room available | room_id=%s | start=%s | end=%s", room.room_id, start, end)
                return room.room_id

        logger.debug("No room available | start=%s | end=%s", start, end)
        return NO_AVAILABLE_ROOM

    def get_fully_occupied_dates(
        self,
        start_date: date | datetime,
        end_date: date | datetime,
    ) -> list[date]:
        start, end = validate_range_order(start_date, end_date)
        room_ids = {room.room_id for room in self._room_store.get_all()}
        active = _active_bookings(list(self._booking_store.get_all()))
        if not active:
            return []

        fully_occupied: list[date] = []
        for day in _iter_days(start, end):
            occupied_rooms = {
                booking.room_id
                for booking in active
                if booking.room_id in room_ids and booking.covers(day)
            }
            if len(occupied_rooms) == len(room_ids):
                fully_occupied.append(day)
        return fully_occupied

    def min_booking_date(self) -> date:
        bookings = list(self._booking_store.get_all())
        if not bookings:
            raise NoBookingsExistError("No bookings exist; the earliest booking date is undefined.")
        return min(booking.start_date for booking in bookings)

    def max_booking_date(self) -> date:
        bookings = list(self._booking_store.get_all())
        if not bookings:
            raise NoBookingsExistError("No bookings exist; the latest booking date is undefined.")
        return max(booking.end_date for booking in bookings)

    def year_to_display(self, requested_year: int) -> int:
        """Clamp ``requested_year`` to the years that have bookings."""
        try:
            min_year = self.min_booking_date().year
            max_year = self.max_booking_date().year
        except NoBookingsExistError:
            return requested_year

        if requested_year < min_year:
            return min_year
        if requested_year > max_year:
            return max_year
        return requested_year

    def occupancy_calendar(self, requested_year: int) -> OccupancyCalendar:
        """Fully occupied dates for the displayable year nearest ``requested_year``."""
        year = self.year_to_display(requested_year)
        try:
            min_year = self.min_booking_date().year
            max_year = self.max_booking_date().year
        except NoBookingsExistError:
            min_year = max_year = year

        return OccupancyCalendar(
            year=year,
            min_year=min_year,
            max_year=max_year,
            fully_occupied_dates=self.get_fully_occupied_dates(
                date(year, 1, 1),
                date(year, 12, 31),
            ),
        )
