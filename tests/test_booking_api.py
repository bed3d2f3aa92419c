from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

from fastapi.testclient import TestClient

from hotelbooking.domain.constraints import BOOKING_PERIOD_MESSAGE, RANGE_ORDER_MESSAGE
from hotelbooking.main import create_app
from hotelbooking.repository.data_repository import SQLiteBookingStore, SQLiteRoomStore
from hotelbooking.services.booking_service import BookingAvailabilityService
from hotelbooking.utils.config import get_settings


def _build_test_settings(tmp_path, filename: str, seed_demo_bookings: bool = True):
    get_settings.cache_clear()
    base = get_settings()
    return replace(
        base,
        database_path=tmp_path / filename,
        seed_room_count=2,
        seed_demo_bookings=seed_demo_bookings,
    )


def _day(offset: int) -> str:
    return (date.today() + timedelta(days=offset)).isoformat()


def test_booking_end_to_end_flow(tmp_path):
    app = create_app(_build_test_settings(tmp_path, "api_flow.db"))

    with TestClient(app) as client:
        blocked_room = client.get(
            "/rooms/available",
            params={"start_date": _day(9), "end_date": _day(21)},
        )
        assert blocked_room.status_code == 200
        assert blocked_room.json() == {"room_id": -1}

        blocked_booking = client.post(
            "/bookings",
            json={"start_date": _day(9), "end_date": _day(21), "customer_id": 3},
        )
        assert blocked_booking.status_code == 409

        created = client.post(
            "/bookings",
            json={"start_date": _day(5), "end_date": _day(5), "customer_id": 3},
        )
        assert created.status_code == 201
        payload = created.json()
        assert payload["room_id"] in {1, 2}
        assert payload["is_active"] is True
        assert payload["booking_id"] == 3

        occupied = client.get(
            "/occupied_dates",
            params={"start_date": _day(0), "end_date": _day(30)},
        )
        assert occupied.status_code == 200
        assert occupied.json()["dates"] == [_day(offset) for offset in range(10, 21)]

        bounds = client.get("/booking_bounds")
        assert bounds.status_code == 200
        assert bounds.json() == {"min_booking_date": _day(5), "max_booking_date": _day(20)}

        calendar = client.get("/calendar", params={"year": 1990})
        assert calendar.status_code == 200
        calendar_payload = calendar.json()
        assert calendar_payload["year"] == calendar_payload["min_year"]
        assert calendar_payload["min_year"] == date.fromisoformat(_day(5)).year


def test_invalid_ranges_return_bad_request(tmp_path):
    app = create_app(_build_test_settings(tmp_path, "api_invalid.db"))

    with TestClient(app) as client:
        past_booking = client.post(
            "/bookings",
            json={"start_date": _day(-1), "end_date": _day(1), "customer_id": 1},
        )
        assert past_booking.status_code == 400
        assert past_booking.json()["detail"] == BOOKING_PERIOD_MESSAGE

        reversed_search = client.get(
            "/rooms/available",
            params={"start_date": _day(3), "end_date": _day(2)},
        )
        assert reversed_search.status_code == 400

        reversed_dates = client.get(
            "/occupied_dates",
            params={"start_date": _day(3), "end_date": _day(2)},
        )
        assert reversed_dates.status_code == 400
        assert reversed_dates.json()["detail"] == RANGE_ORDER_MESSAGE

        bad_customer = client.post(
            "/bookings",
            json={"start_date": _day(1), "end_date": _day(2), "customer_id": 0},
        )
        assert bad_customer.status_code == 422


def test_booking_bounds_without_bookings_returns_not_found(tmp_path):
    app = create_app(_build_test_settings(tmp_path, "api_empty.db", seed_demo_bookings=False))

    with TestClient(app) as client:
        assert client.get("/booking_bounds").status_code == 404

        calendar = client.get("/calendar", params={"year": 2031})
        assert calendar.status_code == 200
        assert calendar.json() == {
            "year": 2031,
            "min_year": 2031,
            "max_year": 2031,
            "fully_occupied_dates": [],
        }


def test_calendar_default_year_follows_service_clock(tmp_path):
    app = create_app(_build_test_settings(tmp_path, "api_clock.db", seed_demo_bookings=False))

    with TestClient(app) as client:
        repository = app.state.repository
        app.state.booking_service = BookingAvailabilityService(
            booking_store=SQLiteBookingStore(repository),
            room_store=SQLiteRoomStore(repository),
            clock=lambda: date(2044, 6, 1),
        )

        calendar = client.get("/calendar")

        assert calendar.status_code == 200
        assert calendar.json()["year"] == 2044
