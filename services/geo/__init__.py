"""Geo data model and math package"""

from .geomath import distance_km, is_visible, project, unproject
from .models import Category, Coordinate, Place, Route, RouteStep, Viewport

__all__ = [
    "Category",
    "Coordinate",
    "Place",
    "Route",
    "RouteStep",
    "Viewport",
    "distance_km",
    "is_visible",
    "project",
    "unproject",
]
