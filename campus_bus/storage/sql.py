import logging
import uuid
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from campus_bus import models
from campus_bus.database import Base, create_session_factory
from campus_bus.students.schemas import Student, StudentCreate
from campus_bus.buses.schemas import BusRoute
from campus_bus.bookings.schemas import Booking, BookingCreate
from campus_bus.system.schemas import SystemSetting
from campus_bus.storage.base import Storage

logger = logging.getLogger(__name__)


def _route_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert route fields to column values (dates are stored as ISO strings)"""
    columns = {k: v for k, v in fields.items() if k != "id"}
    if "available_dates" in columns and columns["available_dates"] is not None:
        columns["available_dates"] = [
            d.isoformat() if isinstance(d, date) else str(d)
            for d in columns["available_dates"]
        ]
    return columns


class SqlStorage(Storage):
    """Store backed by the relational schema in ``campus_bus.models``"""

    def __init__(self, engine: Engine, create_tables: bool = True):
        self.engine = engine
        self.SessionLocal = create_session_factory(engine)
        if create_tables:
            Base.metadata.create_all(bind=engine)

    # Students
    def get_student(self, student_id: str) -> Optional[Student]:
        with self.SessionLocal() as db:
            row = db.get(models.Student, student_id)
            return Student.model_validate(row) if row else None

    def get_student_by_college_id(self, college_id: str) -> Optional[Student]:
        with self.SessionLocal() as db:
            row = db.query(models.Student).filter(models.Student.college_id == college_id).first()
            return Student.model_validate(row) if row else None

    def create_student(self, student: StudentCreate) -> Student:
        row = models.Student(id=str(uuid.uuid4()), **student.model_dump())
        with self.SessionLocal() as db:
            try:
                db.add(row)
                db.commit()
            except IntegrityError:
                db.rollback()
                raise ValueError("College ID already registered")
            return Student.model_validate(row)

    # Bus routes
    def list_bus_routes(self, active_only: bool = False) -> List[BusRoute]:
        with self.SessionLocal() as db:
            query = db.query(models.BusRoute)
            if active_only:
                query = query.filter(models.BusRoute.is_active == True)
            return [BusRoute.model_validate(row) for row in query.all()]

    def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        with self.SessionLocal() as db:
            row = db.get(models.BusRoute, route_id)
            return BusRoute.model_validate(row) if row else None

    def get_bus_route_by_number(self, bus_number: str) -> Optional[BusRoute]:
        with self.SessionLocal() as db:
            row = db.query(models.BusRoute).filter(models.BusRoute.bus_number == bus_number).first()
            return BusRoute.model_validate(row) if row else None

    def create_bus_route(self, fields: Dict[str, Any]) -> BusRoute:
        row = models.BusRoute(id=str(uuid.uuid4()), **_route_columns(fields))
        with self.SessionLocal() as db:
            try:
                db.add(row)
                db.commit()
            except IntegrityError:
                db.rollback()
                raise ValueError("Bus number already exists")
            return BusRoute.model_validate(row)

    def update_bus_route(self, route_id: str, fields: Dict[str, Any]) -> Optional[BusRoute]:
        with self.SessionLocal() as db:
            row = db.get(models.BusRoute, route_id)
            if not row:
                return None

            for field, value in _route_columns(fields).items():
                setattr(row, field, value)

            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise ValueError("Bus number already exists")
            db.refresh(row)
            return BusRoute.model_validate(row)

    def delete_bus_route(self, route_id: str) -> bool:
        with self.SessionLocal() as db:
            deleted = db.query(models.BusRoute).filter(models.BusRoute.id == route_id).delete()
            db.commit()
            return deleted > 0

    def decrement_available_seats(self, route_id: str) -> bool:
        # Single conditional UPDATE: the check and the decrement cannot interleave
        stmt = (
            update(models.BusRoute)
            .where(models.BusRoute.id == route_id, models.BusRoute.available_seats > 0)
            .values(available_seats=models.BusRoute.available_seats - 1)
        )
        with self.SessionLocal() as db:
            result = db.execute(stmt)
            db.commit()
            return result.rowcount == 1

    def increment_available_seats(self, route_id: str) -> bool:
        stmt = (
            update(models.BusRoute)
            .where(
                models.BusRoute.id == route_id,
                models.BusRoute.available_seats < models.BusRoute.total_seats
            )
            .values(available_seats=models.BusRoute.available_seats + 1)
        )
        with self.SessionLocal() as db:
            result = db.execute(stmt)
            db.commit()
            return result.rowcount == 1

    # Bookings
    def list_bookings(
        self,
        student_id: Optional[str] = None,
        bus_route_id: Optional[str] = None,
        travel_date: Optional[date] = None
    ) -> List[Booking]:
        with self.SessionLocal() as db:
            query = db.query(models.Booking)
            if student_id is not None:
                query = query.filter(models.Booking.student_id == student_id)
            if bus_route_id is not None:
                query = query.filter(models.Booking.bus_route_id == bus_route_id)
            if travel_date is not None:
                query = query.filter(models.Booking.travel_date == travel_date)
            return [Booking.model_validate(row) for row in query.all()]

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        with self.SessionLocal() as db:
            row = db.get(models.Booking, booking_id)
            return Booking.model_validate(row) if row else None

    def create_booking(self, booking: BookingCreate) -> Booking:
        data = booking.model_dump()
        data["status"] = booking.status.value
        row = models.Booking(id=str(uuid.uuid4()), booking_time=datetime.now(), **data)
        with self.SessionLocal() as db:
            db.add(row)
            db.commit()
            return Booking.model_validate(row)

    def update_booking(self, booking_id: str, fields: Dict[str, Any]) -> Optional[Booking]:
        with self.SessionLocal() as db:
            row = db.get(models.Booking, booking_id)
            if not row:
                return None

            for field, value in fields.items():
                if field == "id":
                    continue
                setattr(row, field, getattr(value, "value", value))

            db.commit()
            db.refresh(row)
            return Booking.model_validate(row)

    # System settings
    def get_setting(self, key: str) -> Optional[SystemSetting]:
        with self.SessionLocal() as db:
            row = db.query(models.SystemSetting).filter(models.SystemSetting.key == key).first()
            return SystemSetting.model_validate(row) if row else None

    def set_setting(self, key: str, value: str) -> SystemSetting:
        with self.SessionLocal() as db:
            row = db.query(models.SystemSetting).filter(models.SystemSetting.key == key).first()
            if row:
                row.value = value
            else:
                row = models.SystemSetting(id=str(uuid.uuid4()), key=key, value=value)
                db.add(row)
            db.commit()
            return SystemSetting.model_validate(row)

    def close(self) -> None:
        self.engine.dispose()
        logger.info("SQL storage engine disposed")
