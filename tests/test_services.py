"""
Unit Tests for Student, Bus Route, System Status and Admin Services
"""

from datetime import date

import pytest

from campus_bus.admin.admin_service import AdminManagementService
from campus_bus.admin.schemas import AdminLogin
from campus_bus.buses.schemas import BusRouteCreate, BusRouteUpdate
from campus_bus.bookings.schemas import BookingCreate
from campus_bus.exceptions import (
    BusRouteNotFoundError, DuplicateBusNumberError, InvalidCredentialsError,
    InvalidInputError, SystemOfflineError
)
from campus_bus.seed import seed_sample_routes
from campus_bus.system.schemas import SystemStatus
from campus_bus.system.service import SystemStatusService

from .conftest import ADMIN_PASSWORD, ADMIN_USERNAME


class TestStudentService:

    def test_authenticate_is_idempotent(self, student_service):
        first = student_service.authenticate("SJCET2024001")
        second = student_service.authenticate("SJCET2024001")

        assert first.id == second.id
        assert first.college_id == "SJCET2024001"

    @pytest.mark.parametrize("college_id", [
        "SJCET202400",
        "SJCET20240011",
        "sjcet2024001",
        "ABCDE2024001",
        "SJCET2024001\n",
        "",
    ])
    def test_rejects_malformed_college_id(self, student_service, store, college_id):
        with pytest.raises(InvalidInputError) as exc_info:
            student_service.authenticate(college_id)

        assert "SJCET followed by 7 digits" in exc_info.value.message
        assert store.get_student_by_college_id(college_id) is None


class TestBusRouteService:

    def test_available_defaults_to_total(self, create_route):
        route = create_route(total_seats=35)

        assert route.available_seats == 35
        assert route.is_active is True

    def test_duplicate_bus_number(self, route_service, create_route):
        create_route(bus_number="BUS-099")

        with pytest.raises(DuplicateBusNumberError):
            create_route(bus_number="BUS-099")

        assert [r.bus_number for r in route_service.list_routes()].count("BUS-099") == 1

    def test_create_rejects_available_above_total(self, create_route):
        with pytest.raises(InvalidInputError):
            create_route(total_seats=10, available_seats=11)

    def test_partial_update(self, route_service, create_route):
        route = create_route(total_seats=40, available_seats=20)

        updated = route_service.update_route(route.id, BusRouteUpdate(is_active=False, departure_time="08:15"))

        assert updated.is_active is False
        assert updated.departure_time == "08:15"
        assert updated.available_seats == 20
        assert updated.bus_number == route.bus_number

    def test_update_keeps_seat_invariant(self, route_service, create_route):
        route = create_route(total_seats=40, available_seats=20)

        with pytest.raises(InvalidInputError):
            route_service.update_route(route.id, BusRouteUpdate(total_seats=10))

        with pytest.raises(InvalidInputError):
            route_service.update_route(route.id, BusRouteUpdate(available_seats=41))

        assert route_service.get_route(route.id).total_seats == 40

    def test_update_to_taken_bus_number(self, route_service, create_route):
        create_route(bus_number="BUS-010")
        other = create_route(bus_number="BUS-011")

        with pytest.raises(DuplicateBusNumberError):
            route_service.update_route(other.id, BusRouteUpdate(bus_number="BUS-010"))

    def test_update_to_own_bus_number(self, route_service, create_route):
        route = create_route(bus_number="BUS-010")

        updated = route_service.update_route(route.id, BusRouteUpdate(bus_number="BUS-010", origin="Guindy"))

        assert updated.origin == "Guindy"

    def test_update_and_delete_missing(self, route_service):
        with pytest.raises(BusRouteNotFoundError):
            route_service.update_route("missing", BusRouteUpdate(origin="Guindy"))

        with pytest.raises(BusRouteNotFoundError):
            route_service.delete_route("missing")

    def test_active_listing(self, route_service, create_route):
        create_route(bus_number="BUS-001")
        create_route(bus_number="BUS-002", is_active=False)

        assert [r.bus_number for r in route_service.list_routes(active_only=True)] == ["BUS-001"]
        assert [r.bus_number for r in route_service.list_routes()] == ["BUS-001", "BUS-002"]


class TestSystemStatusService:

    def test_defaults_to_online(self, store):
        service = SystemStatusService(store)

        assert service.get_status() == SystemStatus.ONLINE
        service.ensure_online()

    def test_toggle(self, store):
        service = SystemStatusService(store)

        service.set_status("offline")
        assert service.get_status() == SystemStatus.OFFLINE
        with pytest.raises(SystemOfflineError):
            service.ensure_online()

        service.set_status(SystemStatus.ONLINE)
        assert service.is_online()

    def test_rejects_unknown_value(self, store):
        service = SystemStatusService(store)

        with pytest.raises(InvalidInputError):
            service.set_status("maintenance")

        assert store.get_setting("system_status") is None

    def test_initialize_keeps_existing_value(self, store):
        service = SystemStatusService(store)
        service.set_status("offline")

        service.initialize()

        assert service.get_status() == SystemStatus.OFFLINE


class TestAdminManagementService:

    def test_login(self, store, settings):
        service = AdminManagementService(store, settings)

        service.authenticate(AdminLogin(username=ADMIN_USERNAME, password=ADMIN_PASSWORD))

        with pytest.raises(InvalidCredentialsError):
            service.authenticate(AdminLogin(username=ADMIN_USERNAME, password="wrong"))

        with pytest.raises(InvalidCredentialsError):
            service.authenticate(AdminLogin(username="someone@test.edu", password=ADMIN_PASSWORD))

    def test_dashboard_stats(self, store, settings, create_route):
        route = create_route(total_seats=40, available_seats=23)
        create_route(total_seats=35, available_seats=8, is_active=False)
        today = date(2025, 1, 10)
        store.create_booking(BookingCreate(student_id="s1", bus_route_id=route.id, travel_date=today))
        store.create_booking(BookingCreate(student_id="s2", bus_route_id=route.id, travel_date=date(2025, 1, 11)))

        stats = AdminManagementService(store, settings).get_dashboard_stats(today=today)

        assert stats.total_buses == 2
        assert stats.active_routes == 1
        assert stats.available_seats == 31
        assert stats.total_seats == 75
        assert stats.today_bookings == 1


class TestSampleData:

    def test_seeds_three_routes_once(self, store):
        routes = seed_sample_routes(store, window_days=30, start=date(2025, 1, 1))

        assert [r.bus_number for r in routes] == ["BUS-001", "BUS-002", "BUS-003"]
        assert [len(r.available_dates) for r in routes] == [30, 20, 15]
        assert routes[0].available_dates[0] == date(2025, 1, 1)
        assert routes[2].available_seats == 0
        assert seed_sample_routes(store) == []
        assert len(store.list_bus_routes()) == 3
