import logging
import threading
import uuid
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from campus_bus.students.schemas import Student, StudentCreate
from campus_bus.buses.schemas import BusRoute
from campus_bus.bookings.schemas import Booking, BookingCreate
from campus_bus.system.schemas import SystemSetting
from campus_bus.storage.base import Storage

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """Dict-backed store living for the lifetime of the process"""

    def __init__(self):
        self._students: Dict[str, Student] = {}
        self._bus_routes: Dict[str, BusRoute] = {}
        self._bookings: Dict[str, Booking] = {}
        self._settings: Dict[str, SystemSetting] = {}  # keyed by setting key
        self._lock = threading.RLock()

    @staticmethod
    def _new_id(collection: Dict[str, Any]) -> str:
        record_id = str(uuid.uuid4())
        while record_id in collection:
            record_id = str(uuid.uuid4())
        return record_id

    # Students
    def get_student(self, student_id: str) -> Optional[Student]:
        with self._lock:
            student = self._students.get(student_id)
            return student.model_copy() if student else None

    def get_student_by_college_id(self, college_id: str) -> Optional[Student]:
        with self._lock:
            for student in self._students.values():
                if student.college_id == college_id:
                    return student.model_copy()
        return None

    def create_student(self, student: StudentCreate) -> Student:
        with self._lock:
            record = Student(id=self._new_id(self._students), **student.model_dump())
            self._students[record.id] = record
            return record.model_copy()

    # Bus routes
    def list_bus_routes(self, active_only: bool = False) -> List[BusRoute]:
        with self._lock:
            routes = list(self._bus_routes.values())
        if active_only:
            routes = [r for r in routes if r.is_active]
        return [r.model_copy(deep=True) for r in routes]

    def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        with self._lock:
            route = self._bus_routes.get(route_id)
            return route.model_copy(deep=True) if route else None

    def get_bus_route_by_number(self, bus_number: str) -> Optional[BusRoute]:
        with self._lock:
            for route in self._bus_routes.values():
                if route.bus_number == bus_number:
                    return route.model_copy(deep=True)
        return None

    def create_bus_route(self, fields: Dict[str, Any]) -> BusRoute:
        with self._lock:
            record = BusRoute(id=self._new_id(self._bus_routes), **fields)
            self._bus_routes[record.id] = record
            return record.model_copy(deep=True)

    def update_bus_route(self, route_id: str, fields: Dict[str, Any]) -> Optional[BusRoute]:
        with self._lock:
            existing = self._bus_routes.get(route_id)
            if not existing:
                return None

            fields = {k: v for k, v in fields.items() if k != "id"}
            updated = BusRoute(**{**existing.model_dump(), **fields})
            self._bus_routes[route_id] = updated
            return updated.model_copy(deep=True)

    def delete_bus_route(self, route_id: str) -> bool:
        with self._lock:
            return self._bus_routes.pop(route_id, None) is not None

    def decrement_available_seats(self, route_id: str) -> bool:
        with self._lock:
            route = self._bus_routes.get(route_id)
            if not route or route.available_seats <= 0:
                return False
            route.available_seats -= 1
            return True

    def increment_available_seats(self, route_id: str) -> bool:
        with self._lock:
            route = self._bus_routes.get(route_id)
            if not route or route.available_seats >= route.total_seats:
                return False
            route.available_seats += 1
            return True

    # Bookings
    def list_bookings(
        self,
        student_id: Optional[str] = None,
        bus_route_id: Optional[str] = None,
        travel_date: Optional[date] = None
    ) -> List[Booking]:
        with self._lock:
            bookings = list(self._bookings.values())

        if student_id is not None:
            bookings = [b for b in bookings if b.student_id == student_id]
        if bus_route_id is not None:
            bookings = [b for b in bookings if b.bus_route_id == bus_route_id]
        if travel_date is not None:
            bookings = [b for b in bookings if b.travel_date == travel_date]

        return [b.model_copy() for b in bookings]

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return booking.model_copy() if booking else None

    def create_booking(self, booking: BookingCreate) -> Booking:
        with self._lock:
            record = Booking(
                id=self._new_id(self._bookings),
                booking_time=datetime.now(),
                **booking.model_dump()
            )
            self._bookings[record.id] = record
            return record.model_copy()

    def update_booking(self, booking_id: str, fields: Dict[str, Any]) -> Optional[Booking]:
        with self._lock:
            existing = self._bookings.get(booking_id)
            if not existing:
                return None

            fields = {k: v for k, v in fields.items() if k != "id"}
            updated = Booking(**{**existing.model_dump(), **fields})
            self._bookings[booking_id] = updated
            return updated.model_copy()

    # System settings
    def get_setting(self, key: str) -> Optional[SystemSetting]:
        with self._lock:
            setting = self._settings.get(key)
            return setting.model_copy() if setting else None

    def set_setting(self, key: str, value: str) -> SystemSetting:
        with self._lock:
            existing = self._settings.get(key)
            setting_id = existing.id if existing else str(uuid.uuid4())
            setting = SystemSetting(id=setting_id, key=key, value=value)
            self._settings[key] = setting
            return setting.model_copy()

    def close(self) -> None:
        with self._lock:
            counts = (len(self._students), len(self._bus_routes), len(self._bookings))
            self._students.clear()
            self._bus_routes.clear()
            self._bookings.clear()
            self._settings.clear()
        logger.info("Memory storage released (%d students, %d routes, %d bookings)", *counts)
