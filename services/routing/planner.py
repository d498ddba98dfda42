"""
Turn-by-turn routing through an OSRM server.

OSRM takes coordinates as lon,lat and reports metres and seconds; routes are
normalized to kilometres and minutes. When OSRM is unreachable or answers with
anything unusable, a straight-line estimate is returned instead.
"""

import logging
from typing import Optional

import httpx

from core.config import settings
from services.errors import ProviderError
from services.fallback import round_half_up, synthesize_route
from services.geo import Coordinate, Route, RouteStep

logger = logging.getLogger(__name__)

MAX_STEPS = 8
DEFAULT_INSTRUCTION = "Continue straight"


def format_coordinates(coords: list[Coordinate]) -> str:
    """Convert coordinates to OSRM format 'lon,lat;lon,lat;...'"""
    return ";".join(f"{c.longitude},{c.latitude}" for c in coords)


def format_distance(distance_km: float) -> str:
    return f"{distance_km:.1f} km"


def format_duration(duration_min: float) -> str:
    return f"{round_half_up(duration_min)} min"


def parse_osrm_route(data: dict) -> Route:
    """
    Normalize an OSRM /route response into a Route.

    Raises:
        ProviderError: if OSRM reported an error or the route has no steps
    """
    if not isinstance(data, dict) or data.get("code") != "Ok":
        message = data.get("message", "Unknown error") if isinstance(data, dict) else "Invalid payload"
        raise ProviderError(f"OSRM error: {message}")

    routes = data.get("routes") or []
    if not routes:
        raise ProviderError("OSRM returned no routes")

    route = routes[0]  # OSRM may return alternatives, first is the best
    legs = route.get("legs") or []
    raw_steps = (legs[0].get("steps") or []) if legs else []

    steps = []
    for step in raw_steps[:MAX_STEPS]:
        maneuver = step.get("maneuver") or {}
        steps.append(RouteStep(
            instruction=maneuver.get("instruction") or DEFAULT_INSTRUCTION,
            distance_km=float(step["distance"]) / 1000,
            duration_min=float(step["duration"]) / 60,
        ))

    if not steps:
        raise ProviderError("OSRM route has no steps")

    return Route(
        total_distance_km=float(route["distance"]) / 1000,
        total_duration_min=float(route["duration"]) / 60,
        steps=tuple(steps),
    )


class RoutePlanner:
    """Plans driving routes between two coordinates"""

    def __init__(
        self,
        base_url: str = settings.OSRM_URL,
        profile: str = settings.OSRM_PROFILE,
        timeout: float = settings.ROUTING_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Args:
            base_url: OSRM server root, e.g. http://router.project-osrm.org
            profile: Mode of transportation (driving, walking, cycling)
            timeout: Request timeout in seconds
            client: Shared HTTP client (one is created when omitted)
        """
        self.base_url = base_url.rstrip('/')
        self.profile = profile
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def plan_route(self, origin: Coordinate, destination: Coordinate) -> Route:
        """
        Route from origin to destination.

        Returns:
            The OSRM route (at most 8 steps), or a synthesized 4-step estimate
        """
        try:
            route = await self._query_osrm(origin, destination)
        except (httpx.HTTPError, ProviderError, KeyError, AttributeError, IndexError, ValueError, TypeError) as e:
            logger.warning(f"OSRM routing failed, using estimated route: {e}")
            return synthesize_route(origin, destination)

        logger.info(
            f"Route planned: {format_distance(route.total_distance_km)}, "
            f"{format_duration(route.total_duration_min)}, {len(route.steps)} steps"
        )
        return route

    async def _query_osrm(self, origin: Coordinate, destination: Coordinate) -> Route:
        url = f"{self.base_url}/route/v1/{self.profile}/{format_coordinates([origin, destination])}"

        response = await self.client.get(
            url,
            params={
                "overview": "full",
                "steps": "true",
            },
        )
        if response.status_code != 200:
            raise ProviderError(f"OSRM returned status {response.status_code}")

        return parse_osrm_route(response.json())


# Global planner instance
_route_planner: Optional[RoutePlanner] = None


def get_route_planner() -> RoutePlanner:
    """Get or create the global route planner instance."""
    global _route_planner

    if _route_planner is None:
        _route_planner = RoutePlanner()

    return _route_planner


async def close_route_planner():
    """Close the global route planner."""
    global _route_planner

    if _route_planner is not None:
        await _route_planner.close()
        _route_planner = None
