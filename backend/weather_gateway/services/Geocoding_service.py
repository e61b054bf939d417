import httpx
import logging

from weather_gateway.core.config import settings
from weather_gateway.core.errors import CityNotFoundError, UpstreamError
from weather_gateway.core.logger import logs
from weather_gateway.models.location_model import GeocodedPlace

class GeocodingService:
    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.base_url = settings.GEOCODING_API_URL

    async def resolve(self, city: str) -> GeocodedPlace:
        """
        Calls the Open-Meteo geocoding API and returns the single best match.
        Raises CityNotFoundError when the search comes back empty.
        """
        logs.log(logging.INFO, f"Geocoding city: {city}")
        try:
            resp = await self.client.get(
                self.base_url,
                params={
                    "name": city,
                    "count": 1,
                    "language": settings.GEOCODING_LANGUAGE,
                    "format": "json",
                },
                timeout=settings.REQUEST_TIMEOUT,
            )
            resp.raise_for_status()
            results = resp.json().get("results") or []
            place = GeocodedPlace(**results[0]) if results else None

        except (httpx.HTTPError, AttributeError, KeyError, TypeError, ValueError) as e:
            logs.log(logging.ERROR, f"Geocoding API error: {str(e)}")
            raise UpstreamError(str(e)) from e

        if place is None:
            logs.log(logging.WARNING, f"No geocoding match for: {city}")
            raise CityNotFoundError(city)

        logs.log(logging.INFO, f"Resolved '{city}' to {place.display_name} ({place.latitude}, {place.longitude})")
        return place
