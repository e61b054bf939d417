import httpx
import logging
from typing import Optional

from weather_gateway.core.config import settings
from weather_gateway.core.errors import UpstreamError
from weather_gateway.core.logger import logs
from weather_gateway.core.weather_codes import classify
from weather_gateway.models.weather_model import CurrentWeather, Location, WeatherResponse

CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "precipitation,weather_code,wind_speed_10m"
)

class WeatherService:
    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.base_url = settings.WEATHER_API_URL

    async def get_weather(
        self, lat: float, lon: float, location_name: Optional[str] = None
    ) -> WeatherResponse:
        """
        Fetches current conditions from Open-Meteo and shapes the response envelope.
        The coordinates echoed back are the ones we asked for, not the provider's.
        """
        logs.log(logging.INFO, f"Calling Open-Meteo for current weather at {lat}, {lon}")
        try:
            params = {
                "latitude": lat,
                "longitude": lon,
                "current": CURRENT_FIELDS,
                "temperature_unit": "fahrenheit",
                "wind_speed_unit": "mph",
                "timezone": "auto",
            }
            resp = await self.client.get(self.base_url, params=params, timeout=settings.REQUEST_TIMEOUT)
            resp.raise_for_status()
            raw_data = resp.json()

            current = raw_data["current"]
            code = current["weather_code"]
            current_weather = CurrentWeather(
                temperature=current["temperature_2m"],
                apparent_temperature=current["apparent_temperature"],
                humidity=current["relative_humidity_2m"],
                precipitation=current["precipitation"],
                weather_code=code,
                wind_speed=current["wind_speed_10m"],
                description=classify(code),
            )
            timezone = raw_data.get("timezone")

        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logs.log(logging.ERROR, f"Weather API failed: {str(e)}")
            raise UpstreamError(str(e)) from e

        logs.log(
            logging.INFO,
            f"Weather for {lat}, {lon}: {current_weather.description}",
            extra={"code": code, "timezone": timezone},
        )
        return WeatherResponse(
            location=Location(
                name=location_name,
                latitude=lat,
                longitude=lon,
                timezone=timezone,
            ),
            current_weather=current_weather,
        )
