"""In-memory store variants used by tests and local demos."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from hotelbooking.domain.models import Booking, Room


class InMemoryBookingStore:
    """Keeps bookings in insertion order and assigns sequential ids."""

    def __init__(self, bookings: Optional[Iterable[Booking]] = None) -> None:
        self._bookings: list[Booking] = list(bookings or [])
        self.added: list[Booking] = []

    def get_all(self) -> list[Booking]:
        return list(self._bookings)

    def add(self, record: Booking) -> Booking:
        if record.booking_id is None:
            record = replace(record, booking_id=self._next_id())
        self._bookings.append(record)
        self.added.append(record)
        return record

    def _next_id(self) -> int:
        existing = [b.booking_id for b in self._bookings if b.booking_id is not None]
        return max(existing, default=0) + 1


class InMemoryRoomStore:
    def __init__(self, rooms: Optional[Iterable[Room]] = None) -> None:
        self._rooms: list[Room] = list(rooms or [])

    def get_all(self) -> list[Room]:
        return list(self._rooms)

    def add(self, record: Room) -> Room:
        if record.room_id is None:
            existing = [room.room_id for room in self._rooms if room.room_id is not None]
            record = replace(record, room_id=max(existing, default=0) + 1)
        self._rooms.append(record)
        return record
