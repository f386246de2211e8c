#!/usr/bin/env python3

from campus_bus.config import settings
from campus_bus.database import engine
from campus_bus.seed import seed_sample_routes
from campus_bus.storage import SqlStorage
from campus_bus.system.service import SystemStatusService

def create_seed_data():
    store = SqlStorage(engine)
    
    try:
        print(f"Creating seed data in {settings.DATABASE_URL}...")
        
        SystemStatusService(store).initialize()
        routes = seed_sample_routes(store, window_days=settings.SAMPLE_DATE_WINDOW_DAYS)
        
        if routes:
            print(f"Created {len(routes)} bus routes:")
            for route in routes:
                print(f"  - {route.bus_number} {route.origin} -> {route.destination} "
                      f"({route.available_seats}/{route.total_seats} seats)")
        else:
            print("Bus routes already present, nothing to do")
        
    except Exception as e:
        print(f"Error creating seed data: {e}")
        raise
    finally:
        store.close()

if __name__ == "__main__":
    create_seed_data()
