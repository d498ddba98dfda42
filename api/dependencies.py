from services.geocoding import GeocodingService, get_geocoding_service
from services.places import PlaceLocator, get_place_locator
from services.routing import RoutePlanner, get_route_planner


def get_locator() -> PlaceLocator:
    """Place locator used by request handlers"""
    return get_place_locator()


def get_planner() -> RoutePlanner:
    """Route planner used by request handlers"""
    return get_route_planner()


def get_geocoder() -> GeocodingService:
    """Geocoding service used by request handlers"""
    return get_geocoding_service()
