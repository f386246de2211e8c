from fastapi import APIRouter, Depends

from campus_bus.bookings.booking_service import BookingService
from campus_bus.bookings.schemas import BookingDetailListResponse
from campus_bus.dependencies import get_booking_service, get_student_service
from campus_bus.exceptions import InvalidInputError
from campus_bus.students.schemas import StudentAuthRequest, StudentAuthResponse
from campus_bus.students.service import StudentService

router = APIRouter()

@router.post("/auth", response_model=StudentAuthResponse)
def authenticate_student(
    auth: StudentAuthRequest,
    student_service: StudentService = Depends(get_student_service)
):
    """Authenticate by college ID, registering the student on first visit"""
    student = student_service.authenticate(auth.college_id)
    return StudentAuthResponse(student=student)

@router.get("/{college_id}/bookings", response_model=BookingDetailListResponse)
def get_student_bookings(
    college_id: str,
    student_service: StudentService = Depends(get_student_service),
    booking_service: BookingService = Depends(get_booking_service)
):
    """Booking history of a student, newest first"""
    try:
        student_service.validate_college_id(college_id)
    except InvalidInputError:
        raise InvalidInputError("Invalid college ID format")
    
    return BookingDetailListResponse(bookings=booking_service.student_history(college_id))
