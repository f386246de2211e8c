from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

class BusRouteBase(BaseModel):
    bus_number: str = Field(..., min_length=1, max_length=50)
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    total_seats: int = Field(..., ge=1, description="Seating capacity")
    departure_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM")
    return_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM")
    is_active: bool = True
    available_dates: List[date] = []

class BusRouteCreate(BusRouteBase):
    # Defaults to total_seats when omitted
    available_seats: Optional[int] = Field(None, ge=0)

class BusRouteUpdate(BaseModel):
    bus_number: Optional[str] = Field(None, min_length=1, max_length=50)
    origin: Optional[str] = Field(None, min_length=1)
    destination: Optional[str] = Field(None, min_length=1)
    total_seats: Optional[int] = Field(None, ge=1)
    available_seats: Optional[int] = Field(None, ge=0)
    departure_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    return_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    is_active: Optional[bool] = None
    available_dates: Optional[List[date]] = None

class BusRoute(BusRouteBase):
    id: str
    available_seats: int
    
    class Config:
        from_attributes = True

class BusRouteResponse(BaseModel):
    success: bool = True
    route: BusRoute

class BusRouteListResponse(BaseModel):
    success: bool = True
    routes: List[BusRoute]
