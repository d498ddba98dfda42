"""
Tests for the Pillow map renderer
"""

from io import BytesIO

import pytest
from PIL import Image

from services.geo import Category, Coordinate, Place, Viewport
from services.rendering import (
    NAVIGATION_SIZE,
    OVERVIEW_SIZE,
    new_surface,
    render,
    render_png,
    render_route_view,
)

DELHI = Coordinate(latitude=28.6139, longitude=77.2090)

BACKGROUND = (31, 41, 55)    # #1f2937
GRID = (55, 65, 81)          # #374151
USER_OUTER = (16, 185, 129)  # #10b981
WHITE = (255, 255, 255)
LODGING = (245, 158, 11)     # #f59e0b
SCHOOL = (139, 92, 246)      # #8b5cf6


def make_place(name: str = "Grand Hotel", category: Category = Category.LODGING,
               coordinate: Coordinate = DELHI) -> Place:
    return Place(id="p1", name=name, coordinate=coordinate, address="Janpath", category=category)


@pytest.fixture
def viewport():
    return Viewport(center=DELHI, pixel_width=OVERVIEW_SIZE[0], pixel_height=OVERVIEW_SIZE[1])


def test_new_surface_matches_viewport(viewport):
    surface = new_surface(viewport)
    assert surface.size == (400, 300)
    assert surface.mode == "RGB"


def test_background_and_grid(viewport):
    surface = new_surface(viewport)
    render(surface, viewport, [])

    assert surface.getpixel((25, 25)) == BACKGROUND
    assert surface.getpixel((50, 25)) == GRID
    assert surface.getpixel((25, 100)) == GRID


def test_user_marker_is_two_tone(viewport):
    surface = new_surface(viewport)
    render(surface, viewport, [], user_coordinate=DELHI)

    assert surface.getpixel((200, 150)) == WHITE
    assert surface.getpixel((206, 150)) == USER_OUTER


@pytest.mark.parametrize("category, color", [
    (Category.LODGING, LODGING),
    (Category.SCHOOL, SCHOOL),
])
def test_place_marker_color_by_category(viewport, category, color):
    surface = new_surface(viewport)
    render(surface, viewport, [make_place(category=category)])

    assert surface.getpixel((200, 150)) == color


def test_place_label_is_drawn(viewport):
    labelled = new_surface(viewport)
    blank = new_surface(viewport)
    render(labelled, viewport, [make_place("Grand Hotel")])
    render(blank, viewport, [make_place("")])

    label_box = (208, 135, 320, 160)
    assert labelled.crop(label_box).tobytes() != blank.crop(label_box).tobytes()


def test_label_truncated_to_fifteen_characters(viewport):
    long_name = new_surface(viewport)
    short_name = new_surface(viewport)
    render(long_name, viewport, [make_place("Kendriya Vidyalaya No. 1 Delhi Cantt")])
    render(short_name, viewport, [make_place("Kendriya Vidyal")])

    assert long_name.tobytes() == short_name.tobytes()


def test_render_is_idempotent(viewport):
    places = [
        make_place("Grand Hotel"),
        make_place("Army School", Category.SCHOOL, Coordinate(latitude=28.6170, longitude=77.2050)),
    ]
    surface = new_surface(viewport)

    render(surface, viewport, places, DELHI)
    first = surface.tobytes()
    render(surface, viewport, places, DELHI)

    assert surface.tobytes() == first


def test_repaint_clears_previous_markers(viewport):
    surface = new_surface(viewport)
    render(surface, viewport, [make_place()])
    render(surface, viewport, [])

    assert surface.getpixel((200, 150)) != LODGING


def test_far_away_places_are_harmless(viewport):
    mumbai = Coordinate(latitude=19.0760, longitude=72.8777)
    surface = new_surface(viewport)
    render(surface, viewport, [make_place(coordinate=mumbai)])

    reference = new_surface(viewport)
    render(reference, viewport, [])
    assert surface.tobytes() == reference.tobytes()


def test_render_png(viewport):
    png = render_png(viewport, [make_place()], DELHI)

    assert png.startswith(b"\x89PNG")
    image = Image.open(BytesIO(png))
    assert image.size == (400, 300)


def test_route_view_is_centred_on_user():
    surface = Image.new("RGB", NAVIGATION_SIZE)
    destination = make_place(coordinate=Coordinate(latitude=28.6180, longitude=77.2120))

    viewport = render_route_view(surface, DELHI, destination)

    assert viewport.center == DELHI
    assert (viewport.pixel_width, viewport.pixel_height) == (400, 180)
    assert surface.getpixel((200, 90)) == WHITE
