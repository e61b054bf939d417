from typing import Any, Dict, Optional
from urllib.parse import quote

import requests


class GatewayRequestError(Exception):
    """Raised for connection problems, timeouts and non-2xx gateway responses."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}


class GatewayClient:
    """Thin wrapper around the Weather Gateway HTTP API."""

    def __init__(self, base_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[dict] = None) -> Dict[str, Any]:
        try:
            response = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except requests.exceptions.ConnectionError:
            raise GatewayRequestError(f"Cannot connect to backend at {self.base_url}")
        except requests.exceptions.Timeout:
            raise GatewayRequestError("Request to backend timed out")
        except requests.exceptions.RequestException as e:
            raise GatewayRequestError(f"An error occurred: {str(e)}")

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            error = payload.get("error", response.reason) if isinstance(payload, dict) else response.reason
            raise GatewayRequestError(
                f"{response.status_code}: {error}",
                status_code=response.status_code,
                payload=payload if isinstance(payload, dict) else None,
            )
        if not isinstance(payload, dict):
            raise GatewayRequestError("Backend returned a non-JSON response", status_code=response.status_code)
        return payload

    def health(self) -> bool:
        """Check if backend is running."""
        try:
            self._get("/health")
        except GatewayRequestError:
            return False
        return True

    def weather_by_coords(self, latitude: float, longitude: float) -> Dict[str, Any]:
        return self._get("/weather", params={"latitude": latitude, "longitude": longitude})

    def weather_by_city(self, city: str) -> Dict[str, Any]:
        return self._get(f"/weather/city/{quote(city, safe='')}")
