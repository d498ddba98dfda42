"""Route planning endpoint"""

from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.dependencies import get_planner
from services.geo import Coordinate, Route
from services.routing import RoutePlanner, format_distance, format_duration

router = APIRouter(prefix="/route", tags=["routing"])


class StepSummary(BaseModel):
    """Display strings for one step"""
    instruction: str
    distance: str
    duration: str


class RouteResponse(BaseModel):
    route: Route
    distance: str  # e.g. "3.2 km"
    duration: str  # e.g. "6 min"
    steps: List[StepSummary]


@router.get("", response_model=RouteResponse)
async def plan_route(
    from_lat: float = Query(..., ge=-90, le=90),
    from_lng: float = Query(..., ge=-180, le=180),
    to_lat: float = Query(..., ge=-90, le=90),
    to_lng: float = Query(..., ge=-180, le=180),
    planner: RoutePlanner = Depends(get_planner),
):
    """
    Driving directions between two points.

    Falls back to a straight-line estimate (route.is_fallback) when the
    routing provider is unavailable.

    Example: /route?from_lat=28.6139&from_lng=77.2090&to_lat=28.62&to_lng=77.21
    """
    route = await planner.plan_route(
        Coordinate(latitude=from_lat, longitude=from_lng),
        Coordinate(latitude=to_lat, longitude=to_lng),
    )

    return RouteResponse(
        route=route,
        distance=format_distance(route.total_distance_km),
        duration=format_duration(route.total_duration_min),
        steps=[
            StepSummary(
                instruction=step.instruction,
                distance=format_distance(step.distance_km),
                duration=format_duration(step.duration_min),
            )
            for step in route.steps
        ],
    )
