import logging
from datetime import date
from typing import Optional

from campus_bus.admin.schemas import AdminLogin, DashboardStats
from campus_bus.config import Settings
from campus_bus.exceptions import InvalidCredentialsError
from campus_bus.storage import Storage

logger = logging.getLogger(__name__)

class AdminManagementService:
    """Admin credential check and dashboard figures"""
    
    def __init__(self, store: Storage, settings: Settings):
        self.store = store
        self.settings = settings
    
    def authenticate(self, login: AdminLogin) -> None:
        """Compare against the configured plaintext credentials"""
        if login.username != self.settings.ADMIN_USERNAME or login.password != self.settings.ADMIN_PASSWORD:
            logger.warning("Failed admin login for %r", login.username)
            raise InvalidCredentialsError()
        logger.info("Admin %s logged in", login.username)
    
    def get_dashboard_stats(self, today: Optional[date] = None) -> DashboardStats:
        today = today or date.today()
        routes = self.store.list_bus_routes()
        
        return DashboardStats(
            total_buses=len(routes),
            today_bookings=len(self.store.list_bookings(travel_date=today)),
            available_seats=sum(r.available_seats for r in routes),
            active_routes=len([r for r in routes if r.is_active]),
            total_seats=sum(r.total_seats for r in routes)
        )
