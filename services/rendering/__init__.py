"""Map rendering package"""

from .renderer import (
    NAVIGATION_SIZE,
    OVERVIEW_SIZE,
    new_surface,
    render,
    render_png,
    render_route_view,
    route_viewport,
)

__all__ = [
    "NAVIGATION_SIZE",
    "OVERVIEW_SIZE",
    "new_surface",
    "render",
    "render_png",
    "render_route_view",
    "route_viewport",
]
