"""Repository layer responsible for all database access."""

from __future__ import annotations

import sqlite3
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

from hotelbooking.domain.models import Booking, Room
from hotelbooking.utils.config import Settings, get_settings
from hotelbooking.utils.logger import get_logger


logger = get_logger(__name__)


def _row_to_booking(row: sqlite3.Row) -> Booking:
    return Booking(
        booking_id=int(row["id"]),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(row["end_date"])),
        customer_id=int(row["customer_id"]),
        room_id=int(row["room_id"]),
        is_active=bool(row["is_active"]),
    )


class DataRepository:
    """Encapsulates SQLite access so the booking engine stays storage-agnostic."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._db_path = Path(self._settings.database_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._db_path)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON;")
        return connection

    def initialize_database(self) -> None:
        """Create all persistence artifacts before API startup."""
        try:
            with self._connect() as conn:
                cursor = conn.cursor()

                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS Rooms (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        description TEXT NOT NULL DEFAULT '',
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                    );
                    """
                )

                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS Bookings (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        start_date TEXT NOT NULL,
                        end_date TEXT NOT NULL,
                        customer_id INTEGER NOT NULL,
                        room_id INTEGER NOT NULL,
                        is_active INTEGER NOT NULL CHECK (is_active IN (0,1)),
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                        CHECK (start_date <= end_date),
                        FOREIGN KEY (room_id) REFERENCES Rooms(id)
                    );
                    """
                )

                cursor.execute(
                    """
                    CREATE INDEX IF NOT EXISTS idx_bookings_room_dates
                    ON Bookings(room_id, start_date, end_date);
                    """
                )
                conn.commit()
            logger.info("Database initialized at %s", self._db_path)
        except sqlite3.Error as exc:
            raise RuntimeError(f"Database initialization failed: {exc}") from exc

    def seed_demo_data(self, today: Optional[date] = None) -> None:
        """Seed rooms, and optionally demo bookings, only when tables are empty."""
        today = today or date.today()
        try:
            with self._connect() as conn:
                cursor = conn.cursor()

                cursor.execute("SELECT COUNT(*) AS count FROM Rooms;")
                if int(cursor.fetchone()["count"]) > 0:
                    logger.info("Rooms already present; skipping seed")
                    return

                cursor.executemany(
                    "INSERT INTO Rooms (description) VALUES (?);",
                    [
                        (f"Room {number}",)
                        for number in range(1, self._settings.seed_room_count + 1)
                    ],
                )
                cursor.execute("SELECT id FROM Rooms ORDER BY id ASC;")
                room_ids = [int(row["id"]) for row in cursor.fetchall()]

                booking_entries = []
                if self._settings.seed_demo_bookings:
                    # Every room is taken from day 10 to day 20 so the calendar
                    # has a visible fully occupied stretch.
                    start = (today + timedelta(days=10)).isoformat()
                    end = (today + timedelta(days=20)).isoformat()
                    booking_entries = [
                        (start, end, customer_id, room_id, 1)
                        for customer_id, room_id in enumerate(room_ids, start=1)
                    ]
                    cursor.executemany(
                        """
                        INSERT INTO Bookings (start_date, end_date, customer_id, room_id, is_active)
                        VALUES (?, ?, ?, ?, ?);
                        """,
                        booking_entries,
                    )
                conn.commit()
            logger.info(
                "Demo seed completed | rooms=%s | bookings=%s",
                len(room_ids),
                len(booking_entries),
            )
        except sqlite3.Error as exc:
            raise RuntimeError(f"Demo data seeding failed: {exc}") from exc

    def list_rooms(self) -> list[Room]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT id, description FROM Rooms ORDER BY id ASC;")
            return [
                Room(room_id=int(row["id"]), description=str(row["description"]))
                for row in cursor.fetchall()
            ]

    def create_room(self, description: str = "") -> Room:
        """Insert room row and return it with the assigned id."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO Rooms (description) VALUES (?);",
                (description,),
            )
            conn.commit()
            return Room(room_id=int(cursor.lastrowid), description=description)

    def list_bookings(self) -> list[Booking]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, start_date, end_date, customer_id, room_id, is_active
                FROM Bookings
                ORDER BY id ASC;
                """
            )
            return [_row_to_booking(row) for row in cursor.fetchall()]

    def create_booking(self, booking: Booking) -> Booking:
        """Insert booking row and return the stored form read back by id."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO Bookings (start_date, end_date, customer_id, room_id, is_active)
                VALUES (?, ?, ?, ?, ?);
                """,
                (
                    booking.start_date.isoformat(),
                    booking.end_date.isoformat(),
                    booking.customer_id,
                    booking.room_id,
                    int(booking.is_active),
                ),
            )
            booking_id = int(cursor.lastrowid)
            cursor.execute(
                """
                SELECT id, start_date, end_date, customer_id, room_id, is_active
                FROM Bookings
                WHERE id = ?;
                """,
                (booking_id,),
            )
            row = cursor.fetchone()
            conn.commit()
        logger.debug("Booking persisted | booking_id=%s | room_id=%s", booking_id, booking.room_id)
        return _row_to_booking(row)

    def count_bookings(self) -> int:
        """Return persisted booking count for diagnostics and tests."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS count FROM Bookings;")
            return int(cursor.fetchone()["count"])


class SQLiteBookingStore:
    """Booking store backed by the ``Bookings`` table."""

    def __init__(self, repository: DataRepository) -> None:
        self._repository = repository

    def get_all(self) -> list[Booking]:
        return self._repository.list_bookings()

    def add(self, record: Booking) -> Booking:
        return self._repository.create_booking(record)


class SQLiteRoomStore:
    """Room store backed by the ``Rooms`` table."""

    def __init__(self, repository: DataRepository) -> None:
        self._repository = repository

    def get_all(self) -> list[Room]:
        return self._repository.list_rooms()

    def add(self, record: Room) -> Room:
        return self._repository.create_room(record.description)
