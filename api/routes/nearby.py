import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.dependencies import get_locator
from services.geo import Category, Coordinate, Place
from services.places import PlaceLocator
from services.places.locator import DEFAULT_RADIUS_KM

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nearby", tags=["nearby"])


# --- Models ---

class NearbyResponse(BaseModel):
    places: List[Place]
    category: Category
    center: Coordinate
    from_fallback: bool


# --- Endpoint ---

@router.get("", response_model=NearbyResponse)
async def get_nearby_places(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    category: Category = Query(...),
    radius_km: float = Query(DEFAULT_RADIUS_KM, gt=0, le=50),
    locator: PlaceLocator = Depends(get_locator),
):
    """
    Points of interest of one category around a position.

    Always answers with places: when the places provider is down the list is
    synthesized and `from_fallback` is true.

    Example: /nearby?lat=28.6139&lng=77.2090&category=school
    """
    center = Coordinate(latitude=lat, longitude=lng)
    places = await locator.find_nearby(center, category, radius_km)

    return NearbyResponse(
        places=places,
        category=category,
        center=center,
        from_fallback=any(p.is_fallback for p in places),
    )
