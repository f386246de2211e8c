from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime, date
from enum import Enum

from campus_bus.students.schemas import Student
from campus_bus.buses.schemas import BusRoute

class BookingStatus(str, Enum):
    """Booking status enumeration"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

# Allowed status transitions; cancelled is terminal
BOOKING_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.CANCELLED},
    BookingStatus.CANCELLED: set(),
}

class BookingRequest(BaseModel):
    """Request to book a seat on a route for a travel date"""
    student_id: str = Field(..., min_length=1)
    bus_route_id: str = Field(..., min_length=1)
    travel_date: date

class BookingCreate(BaseModel):
    """Booking record as handed to the store"""
    student_id: str
    bus_route_id: str
    travel_date: date
    status: BookingStatus = BookingStatus.CONFIRMED

class Booking(BookingCreate):
    id: str
    booking_time: datetime

    class Config:
        from_attributes = True

class BookingStatusUpdate(BaseModel):
    status: BookingStatus

class BookingDetail(BaseModel):
    """Booking with its student and route resolved; either may since be gone"""
    booking: Booking
    student: Optional[Student] = None
    bus_route: Optional[BusRoute] = None

class BookingResponse(BaseModel):
    success: bool = True
    booking: Booking

class BookingDetailListResponse(BaseModel):
    success: bool = True
    bookings: List[BookingDetail]
