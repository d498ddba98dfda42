"""Shared fixtures: provider clients backed by httpx.MockTransport"""

import httpx
import pytest

from services.places import PlaceLocator
from services.routing import RoutePlanner


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def json_handler():
    """Build a handler answering every request with a JSON payload, recording requests when asked"""
    def factory(payload, status_code: int = 200, requests: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, json=payload)
        return handler

    return factory


@pytest.fixture
def failing_handler():
    """Handler simulating an unreachable provider"""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("provider unreachable", request=request)

    return handler


@pytest.fixture
def make_locator():
    """Build a PlaceLocator around a request handler"""
    def factory(handler) -> PlaceLocator:
        return PlaceLocator(base_url="https://overpass.test/api/interpreter", client=_mock_client(handler))

    return factory


@pytest.fixture
def make_planner():
    """Build a RoutePlanner around a request handler"""
    def factory(handler) -> RoutePlanner:
        return RoutePlanner(base_url="https://osrm.test/", client=_mock_client(handler))

    return factory
