"""
Synthetic places and routes used when the live providers are unreachable.

Output always has the same shape (5 places, 4 route steps) so callers never
have to handle an empty result; coordinates and ratings are randomized per call.
"""

import math
import random

from core.config import settings
from services.geo import Category, Coordinate, Place, Route, RouteStep, distance_km

FALLBACK_JITTER_DEGREES = 0.01
FALLBACK_RATING_RANGE = (3.0, 5.0)

# Rough estimate: 2 minutes per km
MINUTES_PER_KM = 2

PLACE_TEMPLATES = {
    Category.LODGING: ["Grand Hotel", "Royal Inn", "City Lodge", "Palace Hotel", "Crown Plaza"],
    Category.SCHOOL: [
        "Delhi Public School",
        "Kendriya Vidyalaya",
        "Army School",
        "St. Mary's School",
        "Modern School",
    ],
}

# (instruction, share of total distance and duration)
ROUTE_LEGS = [
    ("Head toward destination", 0.3),
    ("Continue on main road", 0.4),
    ("Turn toward destination", 0.2),
    ("Arrive at destination", 0.1),
]


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _jitter(value: float, limit: float, rng: random.Random) -> float:
    jittered = value + rng.uniform(-FALLBACK_JITTER_DEGREES, FALLBACK_JITTER_DEGREES)
    return max(-limit, min(limit, jittered))


def synthesize_places(
    center: Coordinate,
    category: Category,
    rng: random.Random | None = None,
) -> list[Place]:
    """
    Build a fixed list of plausible places scattered around center.

    Args:
        center: Point to scatter places around
        category: Category every place is tagged with
        rng: Random source (a fresh random.Random when omitted)

    Returns:
        Five places within ±0.01° of center, rated 3.0-5.0
    """
    rng = rng or random.Random()
    places = []
    for index, name in enumerate(PLACE_TEMPLATES[category]):
        places.append(Place(
            id=f"fallback-{category.value}-{index}",
            name=name,
            coordinate=Coordinate(
                latitude=_jitter(center.latitude, 90, rng),
                longitude=_jitter(center.longitude, 180, rng),
            ),
            address=f"{name} Address, {settings.FALLBACK_CITY}",
            category=category,
            rating=rng.uniform(*FALLBACK_RATING_RANGE),
            is_fallback=True,
        ))
    return places


def synthesize_route(origin: Coordinate, destination: Coordinate) -> Route:
    """Straight-line route estimate split into four fixed steps"""
    distance = distance_km(origin, destination)
    duration = round_half_up(distance * MINUTES_PER_KM)

    steps = tuple(
        RouteStep(
            instruction=instruction,
            distance_km=distance * share,
            duration_min=duration * share,
        )
        for instruction, share in ROUTE_LEGS
    )

    return Route(
        total_distance_km=distance,
        total_duration_min=duration,
        steps=steps,
        is_fallback=True,
    )
