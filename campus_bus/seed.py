import logging
from datetime import date, timedelta
from typing import List, Optional

from campus_bus.buses.schemas import BusRoute, BusRouteCreate
from campus_bus.buses.service import BusRouteService
from campus_bus.storage import Storage

logger = logging.getLogger(__name__)

SAMPLE_ROUTES = [
    # bus number, origin, total, available, departure, return, days running
    ("BUS-001", "Tambaram", 40, 23, "07:30", "17:00", 30),
    ("BUS-002", "Chrompet", 35, 8, "08:00", "17:30", 20),
    ("BUS-003", "Velachery", 40, 0, "07:45", "17:15", 15),
]

def upcoming_dates(days: int, start: Optional[date] = None) -> List[date]:
    start = start or date.today()
    return [start + timedelta(days=offset) for offset in range(days)]

def seed_sample_routes(store: Storage, window_days: int = 30, start: Optional[date] = None) -> List[BusRoute]:
    """Create the sample routes when the store has none yet"""
    if store.list_bus_routes():
        return []
    
    route_service = BusRouteService(store)
    dates = upcoming_dates(window_days, start)
    created = []
    for bus_number, origin, total, available, departure, return_time, days in SAMPLE_ROUTES:
        created.append(route_service.create_route(BusRouteCreate(
            bus_number=bus_number,
            origin=origin,
            destination="SJCET Campus",
            total_seats=total,
            available_seats=available,
            departure_time=departure,
            return_time=return_time,
            available_dates=dates[:days],
            is_active=True
        )))
    
    logger.info("Seeded %d sample bus routes", len(created))
    return created
