"""
Per-screen navigation state.

Holds what the UI is currently showing: map center, active category, the
current place list, the selected place and its route. Place lists and routes
are only ever replaced whole. Requests are ticketed so a slow response cannot
overwrite the result of a request issued after it.
"""

import logging
from typing import Optional

from services.geo import Category, Coordinate, Place, Route
from services.places import PlaceLocator
from services.routing import RoutePlanner

logger = logging.getLogger(__name__)


class NavigationContext:
    """State for one user's map/navigation screen."""

    def __init__(self, center: Coordinate, user_location: Optional[Coordinate] = None):
        self.center = center
        self.user_location = user_location
        self.category: Optional[Category] = None
        self.places: list[Place] = []
        self.selected_place: Optional[Place] = None
        self.route: Optional[Route] = None

        self._places_issued = 0
        self._places_committed = 0
        self._route_issued = 0
        self._route_committed = 0

    # -- state changes driven by the UI --

    def set_center(self, center: Coordinate):
        """Recenter the map; the old selection and route no longer apply."""
        self.center = center
        self._invalidate_places()
        self._clear_selection()

    def set_category(self, category: Category):
        self.category = category
        self._invalidate_places()
        self._clear_selection()

    def select(self, place: Optional[Place]):
        if place is None or place != self.selected_place:
            self._clear_selection()
        self.selected_place = place

    def _clear_selection(self):
        self.selected_place = None
        self.route = None
        # Routes still in flight were for the old selection
        self._route_issued += 1
        self._route_committed = self._route_issued

    def _invalidate_places(self):
        self._places_issued += 1
        self._places_committed = self._places_issued

    # -- ticketed commits --

    def begin_places_request(self) -> int:
        self._places_issued += 1
        return self._places_issued

    def commit_places(self, ticket: int, places: list[Place]) -> bool:
        """
        Replace the place list with the result of request `ticket`.

        Returns False (and keeps the current list) when a newer request has
        already committed.
        """
        if ticket < self._places_committed:
            logger.debug(f"Discarding stale places result {ticket} (have {self._places_committed})")
            return False
        self._places_committed = ticket
        self.places = list(places)
        if self.selected_place is not None and self.selected_place not in self.places:
            self._clear_selection()
        return True

    def begin_route_request(self) -> int:
        self._route_issued += 1
        return self._route_issued

    def commit_route(self, ticket: int, route: Route) -> bool:
        """Replace the active route; stale results are discarded like commit_places."""
        if ticket < self._route_committed:
            logger.debug(f"Discarding stale route result {ticket} (have {self._route_committed})")
            return False
        self._route_committed = ticket
        self.route = route
        return True

    # -- full request cycles --

    async def refresh_places(self, locator: PlaceLocator, radius_km: Optional[float] = None) -> list[Place]:
        """
        Fetch places for the current center and category and commit them.

        Raises:
            ValueError: if no category has been chosen yet
        """
        if self.category is None:
            raise ValueError("Choose a category before searching for places")

        ticket = self.begin_places_request()
        if radius_km is None:
            places = await locator.find_nearby(self.center, self.category)
        else:
            places = await locator.find_nearby(self.center, self.category, radius_km)
        self.commit_places(ticket, places)
        return self.places

    async def plan_to(self, planner: RoutePlanner, place: Place) -> Optional[Route]:
        """
        Select place and route the user to it.

        Returns:
            The active route afterwards; None if the selection changed while
            the route was being planned

        Raises:
            ValueError: if the user's location is unknown
        """
        if self.user_location is None:
            raise ValueError("User location is required to plan a route")

        self.select(place)
        ticket = self.begin_route_request()
        route = await planner.plan_route(self.user_location, place.coordinate)
        if self.commit_route(ticket, route):
            return route
        return self.route
