"""
Schematic map renderer using Pillow.

Draws the viewport as a dark canvas with a reference grid, the user's position
and one marker per place. There are no map tiles: the grid pitch is cosmetic and
says nothing about geographic scale.
"""

import logging
from io import BytesIO
from typing import Iterable, Optional

from PIL import Image, ImageDraw, ImageFont

from services.geo import Category, Coordinate, Place, Viewport, is_visible, project

logger = logging.getLogger(__name__)

OVERVIEW_SIZE = (400, 300)
NAVIGATION_SIZE = (400, 180)

BACKGROUND_COLOR = "#1f2937"
GRID_COLOR = "#374151"
GRID_PITCH_PX = 50

USER_OUTER_COLOR = "#10b981"
USER_INNER_COLOR = "#ffffff"
USER_OUTER_RADIUS = 8
USER_INNER_RADIUS = 3

PLACE_COLORS = {
    Category.LODGING: "#f59e0b",
    Category.SCHOOL: "#8b5cf6",
}
PLACE_RADIUS = 6

LABEL_COLOR = "#ffffff"
LABEL_FONT_SIZE = 10
LABEL_MAX_CHARS = 15
LABEL_OFFSET = (10, 3)

# Markers further off-canvas than this cannot touch a visible pixel
CULL_MARGIN_PX = 200

_font: Optional[ImageFont.ImageFont] = None


def _get_font() -> ImageFont.ImageFont:
    """Get the cached label font."""
    global _font

    if _font is not None:
        return _font

    for font_name in ["DejaVuSans.ttf", "Arial.ttf", "Helvetica.ttf"]:
        try:
            _font = ImageFont.truetype(font_name, LABEL_FONT_SIZE)
            break
        except OSError:
            continue
    else:
        logger.debug("No TrueType font found, using Pillow default font")
        _font = ImageFont.load_default()

    return _font


def new_surface(viewport: Viewport) -> Image.Image:
    """Blank RGB canvas sized to the viewport"""
    return Image.new("RGB", (viewport.pixel_width, viewport.pixel_height), BACKGROUND_COLOR)


def _disc(draw: ImageDraw.ImageDraw, x: float, y: float, radius: float, color: str):
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)


def _label(draw: ImageDraw.ImageDraw, x: float, y: float, text: str):
    font = _get_font()
    lx, ly = x + LABEL_OFFSET[0], y + LABEL_OFFSET[1]
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text((lx, ly), text, fill=LABEL_COLOR, font=font, anchor="ls")
    else:
        # Bitmap fonts cannot anchor on the baseline
        draw.text((lx, ly - LABEL_FONT_SIZE), text, fill=LABEL_COLOR, font=font)


def _draw_grid(draw: ImageDraw.ImageDraw, width: int, height: int):
    for x in range(0, width, GRID_PITCH_PX):
        draw.line((x, 0, x, height), fill=GRID_COLOR, width=1)
    for y in range(0, height, GRID_PITCH_PX):
        draw.line((0, y, width, y), fill=GRID_COLOR, width=1)


def render(
    surface: Image.Image,
    viewport: Viewport,
    places: Iterable[Place],
    user_coordinate: Optional[Coordinate] = None,
) -> None:
    """
    Draw the viewport onto surface in place.

    Args:
        surface: Pillow image to draw on (fully repainted)
        viewport: Projection basis for every marker
        places: Places to mark, drawn in order
        user_coordinate: User position, drawn as a two-tone marker when given
    """
    width, height = surface.size
    draw = ImageDraw.Draw(surface)

    draw.rectangle((0, 0, width, height), fill=BACKGROUND_COLOR)
    _draw_grid(draw, width, height)

    if user_coordinate is not None:
        x, y = project(user_coordinate, viewport)
        _disc(draw, x, y, USER_OUTER_RADIUS, USER_OUTER_COLOR)
        _disc(draw, x, y, USER_INNER_RADIUS, USER_INNER_COLOR)

    for place in places:
        if not is_visible(place.coordinate, viewport, margin_px=CULL_MARGIN_PX):
            continue
        x, y = project(place.coordinate, viewport)
        _disc(draw, x, y, PLACE_RADIUS, PLACE_COLORS[place.category])
        _label(draw, x, y, place.name[:LABEL_MAX_CHARS])


def route_viewport(origin: Coordinate, width: int = NAVIGATION_SIZE[0], height: int = NAVIGATION_SIZE[1]) -> Viewport:
    """Navigation view: the user's position is the center"""
    return Viewport(center=origin, pixel_width=width, pixel_height=height)


def render_route_view(surface: Image.Image, origin: Coordinate, destination: Place) -> Viewport:
    """Draw the navigation view (user plus the selected place) and return its viewport"""
    width, height = surface.size
    viewport = route_viewport(origin, width, height)
    render(surface, viewport, [destination], origin)
    return viewport


def render_png(
    viewport: Viewport,
    places: Iterable[Place],
    user_coordinate: Optional[Coordinate] = None,
) -> bytes:
    """Render onto a fresh canvas and encode it as PNG"""
    surface = new_surface(viewport)
    render(surface, viewport, places, user_coordinate)

    buffer = BytesIO()
    surface.save(buffer, format="PNG")
    return buffer.getvalue()
