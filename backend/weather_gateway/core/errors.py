from typing import Optional


class GatewayError(Exception):
    """Base error carrying the HTTP status and the error envelope fields."""
    status_code: int = 500

    def __init__(self, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class MissingParameterError(GatewayError):
    status_code = 400

    def __init__(self):
        super().__init__("Missing latitude or longitude parameters")


class InvalidParameterError(GatewayError):
    status_code = 400

    def __init__(self):
        super().__init__("Invalid latitude or longitude parameters")


class CityNotFoundError(GatewayError):
    status_code = 404

    def __init__(self, city: str):
        super().__init__("City not found")
        self.city = city


class UpstreamError(GatewayError):
    """Any failure talking to geocoding or the weather provider."""
    status_code = 500

    def __init__(self, details: str):
        super().__init__("Failed to fetch weather data", details=details)
