from fastapi import APIRouter, Depends

from campus_bus.bookings.booking_service import BookingService
from campus_bus.bookings.schemas import BookingRequest, BookingResponse
from campus_bus.dependencies import get_booking_service, require_online

router = APIRouter()

# The offline gate runs before the body reaches the booking service
@router.post("", response_model=BookingResponse, dependencies=[Depends(require_online)])
def create_booking(
    request: BookingRequest,
    booking_service: BookingService = Depends(get_booking_service)
):
    """Book a seat on a bus route for a travel date"""
    booking = booking_service.create_booking(
        student_id=request.student_id,
        bus_route_id=request.bus_route_id,
        travel_date=request.travel_date
    )
    return BookingResponse(booking=booking)

@router.post("/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: str,
    booking_service: BookingService = Depends(get_booking_service)
):
    """Cancel a booking; the seat is not returned to the route"""
    return BookingResponse(booking=booking_service.cancel_booking(booking_id))
