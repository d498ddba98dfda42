"""Routing package"""

from .planner import (
    RoutePlanner,
    close_route_planner,
    format_distance,
    format_duration,
    get_route_planner,
)

__all__ = [
    "RoutePlanner",
    "close_route_planner",
    "format_distance",
    "format_duration",
    "get_route_planner",
]
