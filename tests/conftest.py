from __future__ import annotations

from typing import Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_gateway.main import app
from weather_gateway.routes.weather_route import get_http_client

WEATHER_HOST = "api.open-meteo.com"
GEOCODING_HOST = "geocoding-api.open-meteo.com"


def weather_payload(code: int = 1, temperature: float = 72.0, timezone: str = "America/Los_Angeles") -> dict:
    return {
        "latitude": 37.78,
        "longitude": -122.42,
        "timezone": timezone,
        "current": {
            "time": "2024-05-01T12:00",
            "temperature_2m": temperature,
            "relative_humidity_2m": 65,
            "apparent_temperature": 70.0,
            "precipitation": 0.0,
            "weather_code": code,
            "wind_speed_10m": 5.0,
        },
    }


class UpstreamStub:
    """Answers outbound httpx calls per host and records every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {
            WEATHER_HOST: lambda request: httpx.Response(200, json=weather_payload()),
            GEOCODING_HOST: lambda request: httpx.Response(200, json={"generationtime_ms": 0.5}),
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes[request.url.host](request)

    def respond(self, host: str, status_code: int = 200, json=None) -> None:
        self.routes[host] = lambda request: httpx.Response(status_code, json=json)

    def fail(self, host: str, message: str = "Connection refused") -> None:
        def raise_error(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self.routes[host] = raise_error

    def calls_to(self, host: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.host == host]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def client(upstream: UpstreamStub):
    async def stub_http_client():
        async with httpx.AsyncClient(transport=upstream.transport()) as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = stub_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
