from pydantic import BaseModel, Field

class AdminLogin(BaseModel):
    """Admin login request"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class MessageResponse(BaseModel):
    success: bool = True
    message: str

class DashboardStats(BaseModel):
    """Aggregate figures for the admin dashboard"""
    total_buses: int
    today_bookings: int
    available_seats: int
    active_routes: int
    total_seats: int

class DashboardStatsResponse(BaseModel):
    success: bool = True
    stats: DashboardStats
