"""Geocoding service package"""

from .models import Address, LocationResult, ReverseGeocodeResult
from .service import GeocodingService, get_geocoding_service

__all__ = [
    "Address",
    "LocationResult",
    "ReverseGeocodeResult",
    "GeocodingService",
    "get_geocoding_service",
]
