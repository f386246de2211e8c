from fastapi import APIRouter, Depends

from campus_bus.buses.schemas import BusRouteListResponse
from campus_bus.buses.service import BusRouteService
from campus_bus.dependencies import get_bus_route_service

router = APIRouter()

@router.get("", response_model=BusRouteListResponse)
def get_active_bus_routes(route_service: BusRouteService = Depends(get_bus_route_service)):
    """Bus routes currently open to students"""
    return BusRouteListResponse(routes=route_service.list_routes(active_only=True))
