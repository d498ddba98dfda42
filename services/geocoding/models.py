"""Pydantic models for geocoding"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

from services.geo import Coordinate


class Address(BaseModel):
    """Structured address components"""

    formatted_address: str
    road: str | None = None
    suburb: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    country_code: str | None = None


class LocationResult(BaseModel):
    """Best match for a free-text search"""

    coordinate: Coordinate
    address: Address
    place_id: str | None = None
    location_type: str | None = None
    provider: Literal["nominatim"] = "nominatim"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    confidence: float | None = Field(None, ge=0, le=1)


class ReverseGeocodeResult(BaseModel):
    """Reverse geocoding result (coordinates → address)"""

    address: Address
    coordinate: Coordinate
    provider: Literal["nominatim"] = "nominatim"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
