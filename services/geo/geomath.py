"""
Distance and projection helpers.

The projection is a plain linear (equirectangular) mapping of the viewport's
lat/lng box onto its pixel canvas. North is up, so screen y grows as latitude
falls. Nothing is clamped: points outside the box land outside the canvas.
"""

import math

from .models import Coordinate, Viewport

EARTH_RADIUS_KM = 6371


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two points in kilometres (Haversine)"""
    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    delta_phi = math.radians(b.latitude - a.latitude)
    delta_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(delta_phi/2)**2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda/2)**2
    # Rounding can push h just past 1 for antipodal points
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1-h))

    return EARTH_RADIUS_KM * c


def project(coordinate: Coordinate, viewport: Viewport) -> tuple[float, float]:
    """Map a coordinate to (x, y) pixels on the viewport canvas"""
    span = viewport.span_degrees
    west = viewport.center.longitude - span / 2
    south = viewport.center.latitude - span / 2

    x = (coordinate.longitude - west) / span * viewport.pixel_width
    y = viewport.pixel_height - (coordinate.latitude - south) / span * viewport.pixel_height
    return x, y


def unproject(x: float, y: float, viewport: Viewport) -> Coordinate:
    """
    Map a pixel back to a coordinate (inverse of project).

    Raises:
        ValueError: if the pixel falls outside valid latitude/longitude ranges
    """
    span = viewport.span_degrees
    west = viewport.center.longitude - span / 2
    south = viewport.center.latitude - span / 2

    longitude = west + x / viewport.pixel_width * span
    latitude = south + (viewport.pixel_height - y) / viewport.pixel_height * span

    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise ValueError(f"Pixel ({x}, {y}) maps outside valid coordinates: {latitude}, {longitude}")

    return Coordinate(latitude=latitude, longitude=longitude)


def is_visible(coordinate: Coordinate, viewport: Viewport, margin_px: float = 0) -> bool:
    """Whether a coordinate projects inside the canvas, optionally padded by margin_px"""
    x, y = project(coordinate, viewport)
    return (
        -margin_px <= x <= viewport.pixel_width + margin_px
        and -margin_px <= y <= viewport.pixel_height + margin_px
    )
