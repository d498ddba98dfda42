"""Pydantic models for places, routes and the map viewport"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SPAN_DEGREES = 0.02  # ~2km across at mid latitudes


class Category(str, Enum):
    """Kinds of points of interest the locator can search for"""

    LODGING = "lodging"
    SCHOOL = "school"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Coordinate(BaseModel):
    """Geographic coordinates"""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class Place(BaseModel):
    """A point of interest returned by a nearby search"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinate: Coordinate
    address: str
    category: Category
    # Raw provider value, not clamped to a 0-5 scale
    rating: float | None = None
    is_fallback: bool = False


class RouteStep(BaseModel):
    """One turn-by-turn instruction"""

    model_config = ConfigDict(frozen=True)

    instruction: str
    distance_km: float = Field(..., ge=0)
    duration_min: float = Field(..., ge=0)


class Route(BaseModel):
    """Route between two coordinates, steps in traversal order"""

    model_config = ConfigDict(frozen=True)

    total_distance_km: float = Field(..., ge=0)
    total_duration_min: float = Field(..., ge=0)
    steps: tuple[RouteStep, ...] = Field(..., min_length=1)
    is_fallback: bool = False


class Viewport(BaseModel):
    """Geographic window mapped onto a pixel canvas"""

    model_config = ConfigDict(frozen=True)

    center: Coordinate
    span_degrees: float = Field(DEFAULT_SPAN_DEGREES, gt=0)
    pixel_width: int = Field(400, gt=0)
    pixel_height: int = Field(300, gt=0)
