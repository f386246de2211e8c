from fastapi import Depends, Request

from campus_bus.config import Settings
from campus_bus.storage import Storage
from campus_bus.bookings.booking_service import BookingService
from campus_bus.buses.service import BusRouteService
from campus_bus.students.service import StudentService
from campus_bus.system.service import SystemStatusService
from campus_bus.admin.admin_service import AdminManagementService

# Application-scoped objects are created in the lifespan handler of main.create_app

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_store(request: Request) -> Storage:
    return request.app.state.store

def get_booking_service(request: Request) -> BookingService:
    """Shared instance; its per-route locks must outlive a single request"""
    return request.app.state.booking_service

def get_status_service(store: Storage = Depends(get_store)) -> SystemStatusService:
    return SystemStatusService(store)

def get_student_service(
    store: Storage = Depends(get_store),
    settings: Settings = Depends(get_settings)
) -> StudentService:
    return StudentService(store, settings)

def get_bus_route_service(store: Storage = Depends(get_store)) -> BusRouteService:
    return BusRouteService(store)

def get_admin_service(
    store: Storage = Depends(get_store),
    settings: Settings = Depends(get_settings)
) -> AdminManagementService:
    return AdminManagementService(store, settings)

def require_online(status_service: SystemStatusService = Depends(get_status_service)) -> None:
    """Reject the request with 503 while the system is switched offline"""
    status_service.ensure_online()
