from pydantic import BaseModel
from enum import Enum

SYSTEM_STATUS_KEY = "system_status"

class SystemStatus(str, Enum):
    """System status gate positions"""
    ONLINE = "online"
    OFFLINE = "offline"

class SystemSetting(BaseModel):
    id: str
    key: str
    value: str
    
    class Config:
        from_attributes = True

class SystemStatusUpdate(BaseModel):
    status: SystemStatus

class SystemStatusResponse(BaseModel):
    success: bool = True
    status: SystemStatus
