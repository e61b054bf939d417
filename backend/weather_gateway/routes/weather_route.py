import math
import logging
from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Depends

from weather_gateway.core.errors import InvalidParameterError, MissingParameterError
from weather_gateway.core.logger import logs
from weather_gateway.models.weather_model import ErrorResponse, WeatherResponse
from weather_gateway.services.Geocoding_service import GeocodingService
from weather_gateway.services.Weather_service import WeatherService

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# --- Dependency Injection ---
async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client

def get_weather_service(client: httpx.AsyncClient = Depends(get_http_client)) -> WeatherService:
    return WeatherService(client)

def get_geocoding_service(client: httpx.AsyncClient = Depends(get_http_client)) -> GeocodingService:
    return GeocodingService(client)

def parse_coordinates(latitude: Optional[str], longitude: Optional[str]) -> tuple[float, float]:
    """
    Presence is required; range is not checked. Unparseable or non-finite
    values get their own 400 instead of being forwarded upstream.
    """
    if not latitude or not longitude:
        raise MissingParameterError()
    try:
        lat, lon = float(latitude), float(longitude)
    except ValueError:
        raise InvalidParameterError() from None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidParameterError()
    return lat, lon

@router.get(
    "/weather",
    response_model=WeatherResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_weather_endpoint(
    latitude: Optional[str] = None,
    longitude: Optional[str] = None,
    service: WeatherService = Depends(get_weather_service),
):
    logs.log(logging.INFO, "Weather by coordinates requested", extra={"latitude": latitude, "longitude": longitude})
    lat, lon = parse_coordinates(latitude, longitude)
    return await service.get_weather(lat, lon)

@router.get(
    "/weather/city/{city_name:path}",
    response_model=WeatherResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_weather_by_city_endpoint(
    city_name: str,
    geocoder: GeocodingService = Depends(get_geocoding_service),
    service: WeatherService = Depends(get_weather_service),
):
    logs.log(logging.INFO, f"Weather by city requested: {city_name}")
    place = await geocoder.resolve(city_name)
    return await service.get_weather(place.latitude, place.longitude, location_name=place.display_name)
