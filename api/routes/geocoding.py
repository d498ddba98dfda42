"""Geocoding endpoints used by the map search box"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_geocoder
from services.geocoding import GeocodingService, LocationResult, ReverseGeocodeResult

router = APIRouter(prefix="/geocoding", tags=["geocoding"])


@router.get("/forward", response_model=LocationResult)
async def geocode_query(
    query: str = Query(..., description="Place or address to search for", min_length=1),
    service: GeocodingService = Depends(get_geocoder),
):
    """
    Forward geocoding: best-matching coordinate for a free-text search

    Use the returned coordinate as the new map center.

    Example: /geocoding/forward?query=India%20Gate%2C%20New%20Delhi
    """
    if not query.strip():
        raise HTTPException(status_code=422, detail="Search query is blank")

    result = service.geocode(query.strip())

    if not result:
        raise HTTPException(status_code=404, detail="Location not found")

    return result


@router.get("/reverse", response_model=ReverseGeocodeResult)
async def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90, description="Latitude in decimal degrees"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude in decimal degrees"),
    service: GeocodingService = Depends(get_geocoder),
):
    """
    Reverse geocoding: Convert coordinates to address

    Example: /geocoding/reverse?lat=28.6139&lng=77.2090
    """
    result = service.reverse_geocode(lat, lng)

    if not result:
        raise HTTPException(status_code=404, detail="Location not found")

    return result
