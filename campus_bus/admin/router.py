from fastapi import APIRouter, Depends

from campus_bus.admin.admin_service import AdminManagementService
from campus_bus.admin.schemas import AdminLogin, DashboardStatsResponse, MessageResponse
from campus_bus.bookings.booking_service import BookingService
from campus_bus.bookings.schemas import BookingDetailListResponse, BookingResponse, BookingStatusUpdate
from campus_bus.buses.schemas import BusRouteCreate, BusRouteListResponse, BusRouteResponse, BusRouteUpdate
from campus_bus.buses.service import BusRouteService
from campus_bus.dependencies import (
    get_admin_service, get_booking_service, get_bus_route_service, get_status_service
)
from campus_bus.system.schemas import SystemStatusResponse, SystemStatusUpdate
from campus_bus.system.service import SystemStatusService

# Admin endpoints stay available while the system is offline
router = APIRouter()

@router.post("/login", response_model=MessageResponse)
def admin_login(
    login: AdminLogin,
    admin_service: AdminManagementService = Depends(get_admin_service)
):
    """Check admin credentials"""
    admin_service.authenticate(login)
    return MessageResponse(message="Login successful")

# Bus Route Management
@router.get("/bus-routes", response_model=BusRouteListResponse)
def get_all_bus_routes(route_service: BusRouteService = Depends(get_bus_route_service)):
    """All bus routes, active or not"""
    return BusRouteListResponse(routes=route_service.list_routes())

@router.post("/bus-routes", response_model=BusRouteResponse)
def create_bus_route(
    route: BusRouteCreate,
    route_service: BusRouteService = Depends(get_bus_route_service)
):
    return BusRouteResponse(route=route_service.create_route(route))

@router.put("/bus-routes/{route_id}", response_model=BusRouteResponse)
def update_bus_route(
    route_id: str,
    route_update: BusRouteUpdate,
    route_service: BusRouteService = Depends(get_bus_route_service)
):
    """Partially update a bus route"""
    return BusRouteResponse(route=route_service.update_route(route_id, route_update))

@router.delete("/bus-routes/{route_id}", response_model=MessageResponse)
def delete_bus_route(
    route_id: str,
    route_service: BusRouteService = Depends(get_bus_route_service)
):
    route_service.delete_route(route_id)
    return MessageResponse(message="Bus route deleted")

# Booking Management
@router.get("/bookings", response_model=BookingDetailListResponse)
def get_all_bookings(booking_service: BookingService = Depends(get_booking_service)):
    """Every booking with its student and bus route"""
    return BookingDetailListResponse(bookings=booking_service.list_booking_details())

@router.put("/bookings/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    booking_id: str,
    status_update: BookingStatusUpdate,
    booking_service: BookingService = Depends(get_booking_service)
):
    booking = booking_service.update_status(booking_id, status_update.status)
    return BookingResponse(booking=booking)

# System
@router.post("/system/status", response_model=SystemStatusResponse)
def set_system_status(
    status_update: SystemStatusUpdate,
    status_service: SystemStatusService = Depends(get_status_service)
):
    """Switch new bookings on or off"""
    return SystemStatusResponse(status=status_service.set_status(status_update.status))

@router.get("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(admin_service: AdminManagementService = Depends(get_admin_service)):
    return DashboardStatsResponse(stats=admin_service.get_dashboard_stats())
