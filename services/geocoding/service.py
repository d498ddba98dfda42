"""Geocoding service using OpenStreetMap Nominatim"""

import logging
import math

from geopy.exc import GeocoderServiceError, GeocoderTimedOut
from geopy.geocoders import Nominatim

from core.config import settings
from services.geo import Coordinate

from .models import Address, LocationResult, ReverseGeocodeResult

logger = logging.getLogger(__name__)


class GeocodingService:
    """
    Turns free-text searches into map centers (and back).

    A search that finds nothing, times out or hits a provider error yields
    None; the caller decides how to tell the user.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: int = settings.GEOCODING_TIMEOUT_SECONDS,
        geocoder=None,
    ):
        """
        Initialize geocoding service

        Args:
            user_agent: User-Agent sent to Nominatim (or set NOMINATIM_USER_AGENT env var)
            timeout: Request timeout in seconds
            geocoder: geopy geocoder to use instead of Nominatim
        """
        self.timeout = timeout
        self.geocoder = geocoder or Nominatim(
            user_agent=user_agent or settings.NOMINATIM_USER_AGENT,
            timeout=timeout,
        )
        self.provider = "nominatim"

    def geocode(self, query: str) -> LocationResult | None:
        """
        Convert a search string to coordinates (forward geocoding)

        Args:
            query: Free-text place or address

        Returns:
            LocationResult for the best match, None when nothing matched
        """
        try:
            location = self.geocoder.geocode(query, exactly_one=True, addressdetails=True, timeout=self.timeout)

            if not location:
                return None

            return LocationResult(
                coordinate=Coordinate(
                    latitude=location.latitude,
                    longitude=location.longitude,
                ),
                address=self._parse_address(location),
                place_id=self._get_place_id(location),
                location_type=location.raw.get("type"),
                confidence=self._get_confidence(location),
                provider=self.provider,
            )

        except (GeocoderTimedOut, GeocoderServiceError) as e:
            logger.error(f"Geocoding error for '{query}': {e}")
            return None

    def reverse_geocode(self, latitude: float, longitude: float) -> ReverseGeocodeResult | None:
        """
        Convert coordinates to address (reverse geocoding)

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            ReverseGeocodeResult with address information
        """
        try:
            coordinate = Coordinate(latitude=latitude, longitude=longitude)
            location = self.geocoder.reverse(
                f"{coordinate.latitude}, {coordinate.longitude}",
                exactly_one=True,
                timeout=self.timeout,
            )

            if not location:
                return None

            return ReverseGeocodeResult(
                address=self._parse_address(location),
                coordinate=coordinate,
                provider=self.provider,
            )

        except (GeocoderTimedOut, GeocoderServiceError) as e:
            logger.error(f"Reverse geocoding error: {e}")
            return None

    def _parse_address(self, location) -> Address:
        """Parse the Nominatim `address` block into an Address model"""
        raw = location.raw
        details = raw.get("address", {})

        return Address(
            formatted_address=raw.get("display_name", location.address),
            road=details.get("road"),
            suburb=details.get("suburb"),
            city=details.get("city") or details.get("town") or details.get("village"),
            state=details.get("state"),
            postal_code=details.get("postcode"),
            country=details.get("country"),
            country_code=details.get("country_code"),
        )

    def _get_place_id(self, location) -> str | None:
        place_id = location.raw.get("place_id")
        return str(place_id) if place_id is not None else None

    def _get_confidence(self, location) -> float | None:
        """Nominatim `importance` as a 0-1 confidence, when present"""
        importance = location.raw.get("importance")
        if importance is None:
            return None
        try:
            confidence = float(importance)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(confidence):
            return None
        return max(0.0, min(1.0, confidence))


# Global geocoding service
_geocoding_service: GeocodingService | None = None


def get_geocoding_service() -> GeocodingService:
    """Get or create the global geocoding service instance."""
    global _geocoding_service
    if _geocoding_service is None:
        _geocoding_service = GeocodingService()
    return _geocoding_service
