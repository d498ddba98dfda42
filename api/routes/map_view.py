"""Map rendering and click selection endpoints"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from services.geo import Coordinate, Place, Viewport
from services.rendering import render_png
from services.selection import resolve_click

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/map", tags=["map"])


class RenderRequest(BaseModel):
    """What to draw"""
    viewport: Viewport
    places: List[Place] = Field(default_factory=list)
    user_location: Optional[Coordinate] = None


class SelectRequest(BaseModel):
    """A click on a rendered map"""
    viewport: Viewport
    places: List[Place]
    x: float
    y: float


@router.post(
    "/render",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def render_map(request: RenderRequest):
    """
    Render the viewport with its markers as a PNG.

    The image is request.viewport.pixel_width x pixel_height
    (400x300 for the overview map, 400x180 for navigation).
    """
    png = render_png(request.viewport, request.places, request.user_location)
    return Response(content=png, media_type="image/png")


@router.post("/select", response_model=Place)
async def select_place(request: SelectRequest):
    """
    Resolve a click on the rendered map to the place under it.

    Returns 404 when the click is not on any marker.
    """
    place = resolve_click((request.x, request.y), request.viewport, request.places)

    if place is None:
        raise HTTPException(status_code=404, detail="No place at this position")

    logger.debug(f"Click ({request.x}, {request.y}) selected {place.id}")
    return place
