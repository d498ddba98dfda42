"""
Tests for the Overpass-backed place locator

Overpass is replaced by httpx.MockTransport handlers, so no network is used.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from services.fallback import PLACE_TEMPLATES
from services.geo import Category, Coordinate
from services.places.locator import MISSING_ADDRESS, build_overpass_query

DELHI = Coordinate(latitude=28.6139, longitude=77.2090)

OVERPASS_PAYLOAD = {
    "version": 0.6,
    "elements": [
        {
            "type": "node",
            "id": 1234,
            "lat": 28.6172,
            "lon": 77.2080,
            "tags": {"name": "The Imperial", "stars": "5", "addr:street": "Janpath", "tourism": "hotel"},
        },
        {
            "type": "way",
            "id": 5678,
            "center": {"lat": 28.6101, "lon": 77.2150},
            "tags": {"name": "Hotel Ashok", "addr:full": "50-B Chanakyapuri, New Delhi", "stars": "4S"},
        },
        {
            "type": "relation",
            "tags": {"tourism": "hotel"},
        },
    ],
}


def _query_of(request: httpx.Request) -> str:
    return parse_qs(request.content.decode())["data"][0]


@pytest.mark.asyncio
async def test_normalizes_overpass_elements(make_locator, json_handler):
    """Live results keep provider data and fill gaps with defaults"""
    locator = make_locator(json_handler(OVERPASS_PAYLOAD))

    places = await locator.find_nearby(DELHI, Category.LODGING)

    assert len(places) == 3
    imperial, ashok, unnamed = places

    assert imperial.id == "node/1234"
    assert imperial.name == "The Imperial"
    assert imperial.coordinate == Coordinate(latitude=28.6172, longitude=77.2080)
    assert imperial.address == "Janpath"
    assert imperial.rating == 5.0
    assert not imperial.is_fallback

    # Ways only have a computed center; "4S" is not a numeric rating
    assert ashok.coordinate == Coordinate(latitude=28.6101, longitude=77.2150)
    assert ashok.address == "50-B Chanakyapuri, New Delhi"
    assert ashok.rating is None

    assert unnamed.id == "lodging-2"
    assert unnamed.name == "Lodging 3"
    assert unnamed.coordinate == DELHI
    assert unnamed.address == MISSING_ADDRESS
    assert unnamed.rating is None

    for place in places:
        assert place.category == Category.LODGING


@pytest.mark.asyncio
async def test_sends_category_query(make_locator, json_handler):
    requests = []
    locator = make_locator(json_handler(OVERPASS_PAYLOAD, requests=requests))

    await locator.find_nearby(DELHI, Category.SCHOOL, radius_km=2)

    assert len(requests) == 1
    assert requests[0].method == "POST"
    query = _query_of(requests[0])
    assert query.startswith("[out:json][timeout:25];")
    assert 'node["amenity"="school"](around:2000,28.6139,77.209);' in query
    assert 'way["amenity"="school"]' in query
    assert 'relation["amenity"="school"]' in query
    assert query.endswith("out center meta;")


def test_lodging_query_uses_tourism_tag():
    query = build_overpass_query(DELHI, Category.LODGING, 5000)
    assert 'node["tourism"="hotel"](around:5000,28.6139,77.209);' in query


@pytest.mark.asyncio
async def test_caps_results_at_ten(make_locator, json_handler):
    elements = [
        {"type": "node", "id": i, "lat": 28.61, "lon": 77.20, "tags": {"name": f"School {i}"}}
        for i in range(25)
    ]
    locator = make_locator(json_handler({"elements": elements}))

    places = await locator.find_nearby(DELHI, Category.SCHOOL)

    assert [p.id for p in places] == [f"node/{i}" for i in range(10)]


@pytest.mark.asyncio
async def test_ids_unique_across_element_types(make_locator, json_handler):
    """A node and a way may share a numeric OSM id"""
    elements = [
        {"type": "node", "id": 42, "lat": 28.61, "lon": 77.20, "tags": {"name": "Hotel Node"}},
        {"type": "way", "id": 42, "center": {"lat": 28.62, "lon": 77.21}, "tags": {"name": "Hotel Way"}},
        {"type": "relation", "id": 42, "center": {"lat": 28.60, "lon": 77.19}},
    ]
    locator = make_locator(json_handler({"elements": elements}))

    places = await locator.find_nearby(DELHI, Category.LODGING)

    assert [p.id for p in places] == ["node/42", "way/42", "relation/42"]


@pytest.mark.asyncio
async def test_empty_result_uses_fallback_schools(make_locator, json_handler):
    """Delhi, School, nothing found: the five synthesized schools around the center"""
    locator = make_locator(json_handler({"elements": []}))

    places = await locator.find_nearby(DELHI, Category.SCHOOL)

    assert [p.name for p in places] == PLACE_TEMPLATES[Category.SCHOOL]
    for place in places:
        assert place.is_fallback
        assert abs(place.coordinate.latitude - DELHI.latitude) <= 0.01 + 1e-9
        assert abs(place.coordinate.longitude - DELHI.longitude) <= 0.01 + 1e-9


@pytest.mark.asyncio
async def test_unreachable_provider_uses_fallback(make_locator, failing_handler):
    locator = make_locator(failing_handler)

    places = await locator.find_nearby(DELHI, Category.LODGING)

    assert len(places) == 5
    assert all(p.is_fallback and p.category == Category.LODGING for p in places)


@pytest.mark.asyncio
async def test_timeout_uses_fallback(make_locator):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    places = await make_locator(handler).find_nearby(DELHI, Category.SCHOOL)

    assert len(places) == 5
    assert all(p.is_fallback for p in places)


@pytest.mark.asyncio
async def test_error_status_uses_fallback(make_locator, json_handler):
    locator = make_locator(json_handler({"remark": "runtime error"}, status_code=504))

    places = await locator.find_nearby(DELHI, Category.SCHOOL)

    assert len(places) == 5
    assert all(p.is_fallback for p in places)


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    b"<html>Too Many Requests</html>",
    b'{"elements": "none"}',
    b'[1, 2, 3]',
    b'{"elements": [42]}',
    b'{"elements": [{"id": 1, "lat": 123.0, "lon": 77.2}]}',
])
async def test_malformed_payload_uses_fallback(make_locator, body):
    locator = make_locator(lambda request: httpx.Response(200, content=body))

    places = await locator.find_nearby(DELHI, Category.LODGING)

    assert len(places) == 5
    assert all(p.is_fallback for p in places)
