"""Map click hit-testing"""

from typing import Iterable, Optional

from services.geo import Place, Viewport, project

# Half-width of the square hit box around each marker
HIT_TOLERANCE_PX = 15


def resolve_click(
    click: tuple[float, float],
    viewport: Viewport,
    places: Iterable[Place],
) -> Optional[Place]:
    """
    Return the first place whose marker lies within the hit box of the click.

    The hit box is square: x and y offsets are checked independently.
    Places are scanned in order and the first hit wins, even if a later
    marker is closer.
    """
    click_x, click_y = click
    for place in places:
        x, y = project(place.coordinate, viewport)
        if abs(click_x - x) < HIT_TOLERANCE_PX and abs(click_y - y) < HIT_TOLERANCE_PX:
            return place
    return None
