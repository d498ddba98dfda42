"""
Nearby place search against the Overpass API (OpenStreetMap).

Results are normalized into Place models. Whenever Overpass cannot give a
usable answer (network error, timeout, bad status, malformed or empty payload)
the locator returns synthesized places instead of raising.
"""

import logging
import math
from typing import Optional

import httpx

from core.config import settings
from services.errors import ProviderError
from services.fallback import synthesize_places
from services.geo import Category, Coordinate, Place

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 5
MAX_RESULTS = 10
MISSING_ADDRESS = "Address not available"

# Category → OSM (key, value) tag
CATEGORY_TAGS = {
    Category.LODGING: ("tourism", "hotel"),
    Category.SCHOOL: ("amenity", "school"),
}


def build_overpass_query(center: Coordinate, category: Category, radius_m: int, timeout: int = 25) -> str:
    """Overpass QL matching nodes, ways and relations carrying the category tag"""
    key, value = CATEGORY_TAGS[category]
    around = f"(around:{radius_m},{center.latitude},{center.longitude})"
    selectors = "".join(
        f'{kind}["{key}"="{value}"]{around};' for kind in ("node", "way", "relation")
    )
    return f"[out:json][timeout:{timeout}];({selectors});out center meta;"


def _parse_rating(raw) -> Optional[float]:
    """OSM `stars` tag as a float, None when absent or not numeric"""
    if raw is None:
        return None
    try:
        rating = float(raw)
    except (TypeError, ValueError):
        return None
    return rating if math.isfinite(rating) else None


def _element_coordinate(element: dict, center: Coordinate) -> Coordinate:
    # Nodes carry lat/lon; ways and relations only a computed center
    lat, lon = element.get("lat"), element.get("lon")
    if lat is None or lon is None:
        element_center = element.get("center")
        if not isinstance(element_center, dict):
            element_center = {}
        lat, lon = element_center.get("lat"), element_center.get("lon")
    if lat is None or lon is None:
        return center
    return Coordinate(latitude=lat, longitude=lon)


def _element_id(element: dict, index: int, category: Category) -> str:
    # Node, way and relation ids are separate namespaces in OSM
    element_id = element.get("id")
    if element_id is None:
        return f"{category.value}-{index}"
    return f"{element.get('type') or 'node'}/{element_id}"


def normalize_element(element: dict, index: int, center: Coordinate, category: Category) -> Place:
    """Convert one Overpass element into a Place, filling gaps with defaults"""
    if not isinstance(element, dict):
        raise ProviderError(f"Overpass element {index} is not an object")

    tags = element.get("tags")
    if not isinstance(tags, dict):
        tags = {}

    return Place(
        id=_element_id(element, index, category),
        name=tags.get("name") or f"{category.label} {index + 1}",
        coordinate=_element_coordinate(element, center),
        address=tags.get("addr:full") or tags.get("addr:street") or MISSING_ADDRESS,
        category=category,
        rating=_parse_rating(tags.get("stars")),
    )


class PlaceLocator:
    """Finds points of interest near a coordinate"""

    def __init__(
        self,
        base_url: str = settings.OVERPASS_URL,
        timeout: float = settings.PLACES_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Args:
            base_url: Overpass interpreter endpoint
            timeout: Request timeout in seconds, also sent as the Overpass query budget
            client: Shared HTTP client (one is created when omitted)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def find_nearby(
        self,
        center: Coordinate,
        category: Category,
        radius_km: float = DEFAULT_RADIUS_KM,
    ) -> list[Place]:
        """
        Search for places of a category within radius_km of center.

        Returns:
            Up to 10 live places, or 5 synthesized ones if Overpass fails
        """
        try:
            places = await self._query_overpass(center, category, radius_km)
        except (httpx.HTTPError, ProviderError, ValueError, TypeError) as e:
            logger.warning(f"Overpass search failed, using fallback places: {e}")
            return synthesize_places(center, category)

        if not places:
            logger.info(f"No {category.value} found near {center.latitude},{center.longitude}, using fallback places")
            return synthesize_places(center, category)

        logger.info(f"Found {len(places)} {category.value} places near {center.latitude},{center.longitude}")
        return places

    async def _query_overpass(self, center: Coordinate, category: Category, radius_km: float) -> list[Place]:
        query = build_overpass_query(center, category, int(radius_km * 1000), int(self.timeout))

        response = await self.client.post(self.base_url, data={"data": query})
        if response.status_code != 200:
            raise ProviderError(f"Overpass returned status {response.status_code}")

        data = response.json()
        elements = data.get("elements") if isinstance(data, dict) else None
        if not isinstance(elements, list):
            raise ProviderError("Overpass response has no element list")

        return [
            normalize_element(element, index, center, category)
            for index, element in enumerate(elements[:MAX_RESULTS])
        ]


# Global locator instance
_place_locator: Optional[PlaceLocator] = None


def get_place_locator() -> PlaceLocator:
    """Get or create the global place locator instance."""
    global _place_locator

    if _place_locator is None:
        _place_locator = PlaceLocator()

    return _place_locator


async def close_place_locator():
    """Close the global place locator."""
    global _place_locator

    if _place_locator is not None:
        await _place_locator.close()
        _place_locator = None
