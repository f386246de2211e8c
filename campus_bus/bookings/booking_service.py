import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import List, Optional

from campus_bus.bookings.schemas import (
    Booking, BookingCreate, BookingDetail, BookingStatus, BOOKING_TRANSITIONS
)
from campus_bus.exceptions import (
    BookingNotFoundError, BookingStateError, BusRouteNotFoundError,
    DuplicateBookingError, NoSeatsAvailableError, StudentNotFoundError
)
from campus_bus.storage import Storage

logger = logging.getLogger(__name__)

ROUTE_LOCK_STRIPES = 64

class BookingService:
    """Service for seat bookings and the route seat inventory they consume.

    One instance is shared by all requests of an application so that the
    route locks serialize concurrent bookings of the same route. Routes
    share a fixed pool of locks picked by hashing the route id.
    """

    def __init__(self, store: Storage):
        self.store = store
        self._route_locks = [threading.Lock() for _ in range(ROUTE_LOCK_STRIPES)]

    @contextmanager
    def _route_lock(self, route_id: str):
        with self._route_locks[hash(route_id) % ROUTE_LOCK_STRIPES]:
            yield

    def create_booking(self, student_id: str, bus_route_id: str, travel_date: date) -> Booking:
        """Book one seat on a route for a travel date.

        The system status gate is checked by the caller before this runs.
        Availability, duplicate check and seat decrement happen under the
        route's lock; the decrement itself is the store's atomic
        decrement-if-positive, so the counter can never go below zero. A
        failed insert gives the seat back before the error propagates.
        """
        student = self.store.get_student(student_id)
        if not student:
            raise StudentNotFoundError()

        with self._route_lock(bus_route_id):
            route = self.store.get_bus_route(bus_route_id)
            if not route:
                raise BusRouteNotFoundError()

            if route.available_seats <= 0:
                logger.warning("Booking rejected: no seats left on %s", route.bus_number)
                raise NoSeatsAvailableError()

            if self.find_active_booking(student_id, bus_route_id, travel_date):
                logger.warning(
                    "Booking rejected: %s already holds %s on %s",
                    student.college_id, route.bus_number, travel_date
                )
                raise DuplicateBookingError()

            if not self.store.decrement_available_seats(bus_route_id):
                raise NoSeatsAvailableError()

            try:
                booking = self.store.create_booking(BookingCreate(
                    student_id=student_id,
                    bus_route_id=bus_route_id,
                    travel_date=travel_date,
                    status=BookingStatus.CONFIRMED
                ))
            except Exception:
                logger.exception("Storing booking on %s failed, returning the seat", route.bus_number)
                self.store.increment_available_seats(bus_route_id)
                raise

        logger.info(
            "Created booking %s: %s on %s for %s",
            booking.id, student.college_id, route.bus_number, travel_date
        )
        return booking

    def find_active_booking(self, student_id: str, bus_route_id: str, travel_date: date) -> Optional[Booking]:
        """Non-cancelled booking for the (student, route, date) triple, if any"""
        for booking in self.store.list_bookings(
            student_id=student_id, bus_route_id=bus_route_id, travel_date=travel_date
        ):
            if booking.status != BookingStatus.CANCELLED:
                return booking
        return None

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.store.get_booking(booking_id)
        if not booking:
            raise BookingNotFoundError()
        return booking

    def update_status(self, booking_id: str, new_status: BookingStatus) -> Booking:
        """Move a booking along pending -> confirmed -> cancelled.

        Re-applying the current status is a no-op; cancelled is terminal.
        Cancelling does not hand the seat back to the route.
        """
        new_status = BookingStatus(new_status)
        booking = self.get_booking(booking_id)

        if booking.status == new_status:
            return booking

        if new_status not in BOOKING_TRANSITIONS[booking.status]:
            raise BookingStateError(
                f"Booking cannot change from {booking.status.value} to {new_status.value}"
            )

        updated = self.store.update_booking(booking_id, {"status": new_status})
        if not updated:
            raise BookingNotFoundError()

        logger.info("Booking %s: %s -> %s", booking_id, booking.status.value, new_status.value)
        return updated

    def cancel_booking(self, booking_id: str) -> Booking:
        booking = self.get_booking(booking_id)
        if booking.status == BookingStatus.CANCELLED:
            raise BookingStateError("Booking is already cancelled")
        return self.update_status(booking_id, BookingStatus.CANCELLED)

    def get_booking_detail(self, booking: Booking) -> BookingDetail:
        return BookingDetail(
            booking=booking,
            student=self.store.get_student(booking.student_id),
            bus_route=self.store.get_bus_route(booking.bus_route_id)
        )

    def list_booking_details(self) -> List[BookingDetail]:
        """All bookings with student and route resolved, newest first"""
        bookings = sorted(self.store.list_bookings(), key=lambda b: b.booking_time, reverse=True)
        return [self.get_booking_detail(b) for b in bookings]

    def student_history(self, college_id: str) -> List[BookingDetail]:
        """Booking history for a college ID; empty for unknown students"""
        student = self.store.get_student_by_college_id(college_id)
        if not student:
            return []

        bookings = self.store.list_bookings(student_id=student.id)
        bookings.sort(key=lambda b: b.booking_time, reverse=True)
        return [
            BookingDetail(
                booking=booking,
                student=student,
                bus_route=self.store.get_bus_route(booking.bus_route_id)
            )
            for booking in bookings
        ]
