from sqlalchemy import Column, Integer, String, Boolean, DateTime, Date, Text, JSON, UniqueConstraint, Index
from sqlalchemy.sql import func
from campus_bus.database import Base

# ================================
# Students
# ================================
class Student(Base):
    __tablename__ = "students"
    
    id = Column(String(36), primary_key=True)
    college_id = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(255))
    email = Column(String(255))
    phone = Column(String(50))

# ================================
# Bus Routes
# ================================
class BusRoute(Base):
    __tablename__ = "bus_routes"
    
    id = Column(String(36), primary_key=True)
    bus_number = Column(String(50), unique=True, nullable=False, index=True)
    origin = Column(String(255), nullable=False)
    destination = Column(String(255), nullable=False)
    total_seats = Column(Integer, nullable=False)
    available_seats = Column(Integer, nullable=False)
    departure_time = Column(String(5), nullable=False)
    return_time = Column(String(5), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    # ISO dates ("YYYY-MM-DD") the route runs on
    available_dates = Column(JSON, nullable=False, default=list)

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"
    
    # Relations are by identifier only; routes may be deleted under bookings
    id = Column(String(36), primary_key=True)
    student_id = Column(String(36), nullable=False, index=True)
    bus_route_id = Column(String(36), nullable=False, index=True)
    travel_date = Column(Date, nullable=False, index=True)
    booking_time = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    status = Column(String(20), nullable=False, default="confirmed")
    
    __table_args__ = (
        Index("ix_bookings_student_route_date", "student_id", "bus_route_id", "travel_date"),
    )

# ================================
# System Settings
# ================================
class SystemSetting(Base):
    __tablename__ = "system_settings"
    
    id = Column(String(36), primary_key=True)
    key = Column(String(100), nullable=False)
    value = Column(Text, nullable=False)
    
    __table_args__ = (
        UniqueConstraint("key", name="uq_system_settings_key"),
    )
