import logging
from typing import List

from campus_bus.buses.schemas import BusRoute, BusRouteCreate, BusRouteUpdate
from campus_bus.exceptions import BusRouteNotFoundError, DuplicateBusNumberError, InvalidInputError
from campus_bus.storage import Storage

logger = logging.getLogger(__name__)

class BusRouteService:
    """Admin management of bus routes and their seat capacity"""

    def __init__(self, store: Storage):
        self.store = store

    def list_routes(self, active_only: bool = False) -> List[BusRoute]:
        routes = self.store.list_bus_routes(active_only=active_only)
        return sorted(routes, key=lambda r: r.bus_number)

    def get_route(self, route_id: str) -> BusRoute:
        route = self.store.get_bus_route(route_id)
        if not route:
            raise BusRouteNotFoundError()
        return route

    def create_route(self, route: BusRouteCreate) -> BusRoute:
        """Create a route; the bus number must be unused"""
        if self.store.get_bus_route_by_number(route.bus_number):
            raise DuplicateBusNumberError()

        fields = route.model_dump()
        if fields["available_seats"] is None:
            fields["available_seats"] = fields["total_seats"]
        self._check_seat_invariant(fields["total_seats"], fields["available_seats"])

        try:
            created = self.store.create_bus_route(fields)
        except ValueError:
            raise DuplicateBusNumberError()

        logger.info("Created bus route %s (%s -> %s)", created.bus_number, created.origin, created.destination)
        return created

    def update_route(self, route_id: str, route_update: BusRouteUpdate) -> BusRoute:
        """Apply a partial update, keeping bus numbers unique and seats in range"""
        existing = self.get_route(route_id)
        changes = route_update.model_dump(exclude_unset=True, exclude_none=True)

        new_number = changes.get("bus_number")
        if new_number and new_number != existing.bus_number:
            other = self.store.get_bus_route_by_number(new_number)
            if other and other.id != route_id:
                raise DuplicateBusNumberError()

        self._check_seat_invariant(
            changes.get("total_seats", existing.total_seats),
            changes.get("available_seats", existing.available_seats),
        )

        try:
            updated = self.store.update_bus_route(route_id, changes)
        except ValueError:
            raise DuplicateBusNumberError()
        if not updated:
            raise BusRouteNotFoundError()

        logger.info("Updated bus route %s: %s", updated.bus_number, sorted(changes))
        return updated

    def delete_route(self, route_id: str) -> None:
        if not self.store.delete_bus_route(route_id):
            raise BusRouteNotFoundError()
        logger.info("Deleted bus route %s", route_id)

    @staticmethod
    def _check_seat_invariant(total_seats: int, available_seats: int) -> None:
        if available_seats < 0 or available_seats > total_seats:
            raise InvalidInputError(
                f"Available seats must be between 0 and total seats ({total_seats})"
            )
