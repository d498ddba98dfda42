"""Nearby places package"""

from .locator import PlaceLocator, close_place_locator, get_place_locator

__all__ = [
    "PlaceLocator",
    "close_place_locator",
    "get_place_locator",
]
