"""
Pytest Configuration and Fixtures

Every store-backed fixture runs once per storage backend.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from campus_bus.buses.service import BusRouteService
from campus_bus.buses.schemas import BusRouteCreate
from campus_bus.config import Settings
from campus_bus.database import create_db_engine
from campus_bus.main import create_app
from campus_bus.storage import MemoryStorage, SqlStorage
from campus_bus.students.service import StudentService
from campus_bus.bookings.booking_service import BookingService

ADMIN_USERNAME = "admin@test.edu"
ADMIN_PASSWORD = "s3cret"
TRAVEL_DATE = date(2025, 1, 10)


@pytest.fixture
def settings():
    """Provide isolated settings without sample data."""
    return Settings(
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        SEED_SAMPLE_DATA=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Provide an empty store of each backend."""
    if request.param == "memory":
        backend = MemoryStorage()
    else:
        backend = SqlStorage(create_db_engine("sqlite://"))
    yield backend
    backend.close()


@pytest.fixture
def memory_store():
    return MemoryStorage()


@pytest.fixture
def route_service(store):
    return BusRouteService(store)


@pytest.fixture
def student_service(store, settings):
    return StudentService(store, settings)


@pytest.fixture
def booking_service(store):
    return BookingService(store)


@pytest.fixture
def create_route(route_service):
    """Factory creating bus routes with sensible defaults."""
    counter = {"n": 0}

    def _create_route(**overrides):
        counter["n"] += 1
        data = {
            "bus_number": f"BUS-{counter['n']:03d}",
            "origin": "Tambaram",
            "destination": "SJCET Campus",
            "total_seats": 40,
            "departure_time": "07:30",
            "return_time": "17:00",
            "available_dates": [TRAVEL_DATE],
        }
        data.update(overrides)
        return route_service.create_route(BusRouteCreate(**data))

    return _create_route


@pytest.fixture
def create_student(student_service):
    """Factory registering students by college ID."""
    def _create_student(college_id="SJCET2024001"):
        return student_service.authenticate(college_id)

    return _create_student


@pytest.fixture
def client(settings, store):
    """Provide an API client bound to a fresh app and store."""
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_route_data():
    """Provide sample bus route creation data."""
    return {
        "bus_number": "BUS-099",
        "origin": "Chrompet",
        "destination": "SJCET Campus",
        "total_seats": 35,
        "departure_time": "08:00",
        "return_time": "17:30",
        "available_dates": ["2025-01-10", "2025-01-11"],
    }
