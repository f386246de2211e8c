from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from campus_bus.students.schemas import Student, StudentCreate
from campus_bus.buses.schemas import BusRoute
from campus_bus.bookings.schemas import Booking, BookingCreate
from campus_bus.system.schemas import SystemSetting


class Storage(ABC):
    """Entity store for students, bus routes, bookings and system settings.

    Records are returned as pydantic models detached from the store; mutate
    them through ``update_*`` only. Each individual operation is atomic.
    """

    # Students
    @abstractmethod
    def get_student(self, student_id: str) -> Optional[Student]:
        ...

    @abstractmethod
    def get_student_by_college_id(self, college_id: str) -> Optional[Student]:
        ...

    @abstractmethod
    def create_student(self, student: StudentCreate) -> Student:
        ...

    # Bus routes
    @abstractmethod
    def list_bus_routes(self, active_only: bool = False) -> List[BusRoute]:
        ...

    @abstractmethod
    def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        ...

    @abstractmethod
    def get_bus_route_by_number(self, bus_number: str) -> Optional[BusRoute]:
        ...

    @abstractmethod
    def create_bus_route(self, fields: Dict[str, Any]) -> BusRoute:
        """Insert a route from a complete field mapping (minus ``id``)."""

    @abstractmethod
    def update_bus_route(self, route_id: str, fields: Dict[str, Any]) -> Optional[BusRoute]:
        """Merge ``fields`` into the route; ``None`` when it does not exist."""

    @abstractmethod
    def delete_bus_route(self, route_id: str) -> bool:
        ...

    @abstractmethod
    def decrement_available_seats(self, route_id: str) -> bool:
        """Take one seat if any is left. Returns whether a seat was taken."""

    @abstractmethod
    def increment_available_seats(self, route_id: str) -> bool:
        """Give one seat back, never above ``total_seats``. Returns whether a seat was added."""

    # Bookings
    @abstractmethod
    def list_bookings(
        self,
        student_id: Optional[str] = None,
        bus_route_id: Optional[str] = None,
        travel_date: Optional[date] = None
    ) -> List[Booking]:
        ...

    @abstractmethod
    def get_booking(self, booking_id: str) -> Optional[Booking]:
        ...

    @abstractmethod
    def create_booking(self, booking: BookingCreate) -> Booking:
        """Store a booking record. Seat counters are left untouched."""

    @abstractmethod
    def update_booking(self, booking_id: str, fields: Dict[str, Any]) -> Optional[Booking]:
        ...

    # System settings
    @abstractmethod
    def get_setting(self, key: str) -> Optional[SystemSetting]:
        ...

    @abstractmethod
    def set_setting(self, key: str, value: str) -> SystemSetting:
        """Create or overwrite the setting stored under ``key``."""

    def close(self) -> None:
        """Release backend resources."""
