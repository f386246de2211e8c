"""
Unit Tests for Storage Backends

Each test runs against the memory and the SQL store.
"""

from datetime import date

from campus_bus.bookings.schemas import BookingCreate, BookingStatus
from campus_bus.students.schemas import StudentCreate

ROUTE_FIELDS = {
    "bus_number": "BUS-001",
    "origin": "Tambaram",
    "destination": "SJCET Campus",
    "total_seats": 2,
    "available_seats": 2,
    "departure_time": "07:30",
    "return_time": "17:00",
    "is_active": True,
    "available_dates": [date(2025, 1, 10)],
}


class TestStudents:

    def test_create_and_lookup(self, store):
        student = store.create_student(StudentCreate(college_id="SJCET2024001", name="Asha"))

        assert student.id
        assert store.get_student(student.id).college_id == "SJCET2024001"
        assert store.get_student_by_college_id("SJCET2024001").id == student.id

    def test_missing_student_is_none(self, store):
        assert store.get_student("nope") is None
        assert store.get_student_by_college_id("SJCET0000000") is None

    def test_generated_ids_are_unique(self, store):
        ids = {store.create_student(StudentCreate(college_id=f"SJCET{i:07d}")).id for i in range(20)}
        assert len(ids) == 20


class TestBusRoutes:

    def test_create_and_get(self, store):
        route = store.create_bus_route(dict(ROUTE_FIELDS))

        fetched = store.get_bus_route(route.id)
        assert fetched.bus_number == "BUS-001"
        assert fetched.available_dates == [date(2025, 1, 10)]
        assert store.get_bus_route_by_number("BUS-001").id == route.id

    def test_active_filter(self, store):
        store.create_bus_route(dict(ROUTE_FIELDS))
        store.create_bus_route({**ROUTE_FIELDS, "bus_number": "BUS-002", "is_active": False})

        assert len(store.list_bus_routes()) == 2
        assert [r.bus_number for r in store.list_bus_routes(active_only=True)] == ["BUS-001"]

    def test_update_merges_fields(self, store):
        route = store.create_bus_route(dict(ROUTE_FIELDS))

        updated = store.update_bus_route(route.id, {"origin": "Guindy"})

        assert updated.origin == "Guindy"
        assert updated.destination == "SJCET Campus"
        assert store.get_bus_route(route.id).origin == "Guindy"

    def test_update_missing_route(self, store):
        assert store.update_bus_route("missing", {"origin": "Guindy"}) is None

    def test_delete_reports_existence(self, store):
        route = store.create_bus_route(dict(ROUTE_FIELDS))

        assert store.delete_bus_route(route.id) is True
        assert store.delete_bus_route(route.id) is False
        assert store.get_bus_route(route.id) is None

    def test_decrement_stops_at_zero(self, store):
        route = store.create_bus_route(dict(ROUTE_FIELDS))

        assert store.decrement_available_seats(route.id) is True
        assert store.decrement_available_seats(route.id) is True
        assert store.decrement_available_seats(route.id) is False
        assert store.get_bus_route(route.id).available_seats == 0

    def test_decrement_missing_route(self, store):
        assert store.decrement_available_seats("missing") is False

    def test_increment_stops_at_total(self, store):
        route = store.create_bus_route({**ROUTE_FIELDS, "available_seats": 1})

        assert store.increment_available_seats(route.id) is True
        assert store.increment_available_seats(route.id) is False
        assert store.get_bus_route(route.id).available_seats == 2
        assert store.increment_available_seats("missing") is False


class TestBookings:

    def test_create_leaves_seats_alone(self, store):
        route = store.create_bus_route(dict(ROUTE_FIELDS))
        booking = store.create_booking(BookingCreate(
            student_id="s1", bus_route_id=route.id, travel_date=date(2025, 1, 10)
        ))

        assert booking.status == BookingStatus.CONFIRMED
        assert booking.booking_time is not None
        assert store.get_bus_route(route.id).available_seats == 2

    def test_list_filters(self, store):
        store.create_booking(BookingCreate(student_id="s1", bus_route_id="r1", travel_date=date(2025, 1, 10)))
        store.create_booking(BookingCreate(student_id="s1", bus_route_id="r2", travel_date=date(2025, 1, 11)))
        store.create_booking(BookingCreate(student_id="s2", bus_route_id="r1", travel_date=date(2025, 1, 10)))

        assert len(store.list_bookings()) == 3
        assert len(store.list_bookings(student_id="s1")) == 2
        assert len(store.list_bookings(bus_route_id="r1")) == 2
        assert len(store.list_bookings(travel_date=date(2025, 1, 10))) == 2
        assert len(store.list_bookings(student_id="s1", bus_route_id="r1", travel_date=date(2025, 1, 10))) == 1

    def test_update_status(self, store):
        booking = store.create_booking(BookingCreate(
            student_id="s1", bus_route_id="r1", travel_date=date(2025, 1, 10)
        ))

        updated = store.update_booking(booking.id, {"status": BookingStatus.CANCELLED})

        assert updated.status == BookingStatus.CANCELLED
        assert store.get_booking(booking.id).status == BookingStatus.CANCELLED
        assert store.update_booking("missing", {"status": BookingStatus.CANCELLED}) is None


class TestSettings:

    def test_set_overwrites_by_key(self, store):
        assert store.get_setting("system_status") is None

        first = store.set_setting("system_status", "online")
        second = store.set_setting("system_status", "offline")

        assert store.get_setting("system_status").value == "offline"
        assert first.id == second.id
