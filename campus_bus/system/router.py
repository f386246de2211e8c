from fastapi import APIRouter, Depends

from campus_bus.dependencies import get_status_service
from campus_bus.system.schemas import SystemStatusResponse
from campus_bus.system.service import SystemStatusService

router = APIRouter()

@router.get("/status", response_model=SystemStatusResponse)
def get_system_status(status_service: SystemStatusService = Depends(get_status_service)):
    """Current online/offline position of the booking gate"""
    return SystemStatusResponse(status=status_service.get_status())
