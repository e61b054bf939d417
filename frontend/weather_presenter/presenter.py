"""
Display logic for the weather page, kept free of Streamlit so it can be tested.

The page state is an immutable ViewState. Every fetch goes through
begin_request(), which bumps the request generation; a result is applied
only if it carries the current generation, so a slow response can never
overwrite a newer one.
"""
import logging
import math
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from weather_presenter.api_client import GatewayClient, GatewayRequestError

logger = logging.getLogger(__name__)

DEFAULT_LATITUDE = 37.7749
DEFAULT_LONGITUDE = -122.4194

FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Please try again."
CITY_NOT_FOUND_MESSAGE = "City not found. Please try another search."
LOCATION_DENIED_NOTICE = "Could not get your location. Using default location."
LOCATION_UNSUPPORTED_NOTICE = "Geolocation is not supported by your browser."


class TemperatureUnit(str, Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"


class WeatherIcon(str, Enum):
    CLEAR = "☀️"
    PARTLY_CLOUDY = "⛅"
    OVERCAST = "☁️"
    FOG = "🌫️"
    RAIN = "🌧️"
    SNOW = "❄️"
    STORM = "⛈️"
    DEFAULT = "🌤️"


# Inclusive ranges, checked in order. Independent of the gateway's exact
# description table: 67 gets the rain icon here but "Unknown" from the gateway.
ICON_RANGES: Tuple[Tuple[int, int, WeatherIcon], ...] = (
    (0, 1, WeatherIcon.CLEAR),
    (2, 2, WeatherIcon.PARTLY_CLOUDY),
    (3, 3, WeatherIcon.OVERCAST),
    (45, 45, WeatherIcon.FOG),
    (48, 48, WeatherIcon.FOG),
    (51, 67, WeatherIcon.RAIN),
    (71, 86, WeatherIcon.SNOW),
    (95, 99, WeatherIcon.STORM),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def convert_temp(fahrenheit: float, unit: TemperatureUnit) -> int:
    """Converts a Fahrenheit reading for display, rounded to the nearest integer."""
    if TemperatureUnit(unit) is TemperatureUnit.CELSIUS:
        return round_half_up((fahrenheit - 32) * 5 / 9)
    return round_half_up(fahrenheit)


def weather_icon(code: int) -> WeatherIcon:
    for low, high, icon in ICON_RANGES:
        if low <= code <= high:
            return icon
    return WeatherIcon.DEFAULT


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: RequestStatus = RequestStatus.IDLE
    weather: Optional[Dict[str, Any]] = None  # Last successful envelope
    error: Optional[str] = None
    notice: Optional[str] = None
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    generation: int = 0


def begin_request(state: ViewState) -> ViewState:
    return state.model_copy(update={
        "status": RequestStatus.LOADING,
        "error": None,
        "generation": state.generation + 1,
    })


def resolve_success(state: ViewState, generation: int, weather: Dict[str, Any]) -> ViewState:
    if generation != state.generation:
        return state
    return state.model_copy(update={"status": RequestStatus.SUCCESS, "weather": weather})


def resolve_failure(state: ViewState, generation: int, message: str) -> ViewState:
    # The previous weather stays on screen under the error banner
    if generation != state.generation:
        return state
    return state.model_copy(update={"status": RequestStatus.ERROR, "error": message})


def toggle_unit(state: ViewState) -> ViewState:
    unit = (
        TemperatureUnit.CELSIUS
        if state.unit is TemperatureUnit.FAHRENHEIT
        else TemperatureUnit.FAHRENHEIT
    )
    return state.model_copy(update={"unit": unit})


def with_notice(state: ViewState, notice: Optional[str]) -> ViewState:
    return state.model_copy(update={"notice": notice})


def start_location(state: ViewState, position: Dict[str, Any]) -> Tuple[ViewState, float, float]:
    """
    Picks the coordinates for the first fetch from the browser's answer.
    Denied or unsupported geolocation falls back to the default location
    with a notice; it is not treated as an error.
    """
    if "error" not in position:
        return state, position["latitude"], position["longitude"]
    if position["error"] == "unsupported":
        notice = LOCATION_UNSUPPORTED_NOTICE
    else:
        notice = LOCATION_DENIED_NOTICE
    return with_notice(state, notice), DEFAULT_LATITUDE, DEFAULT_LONGITUDE


def fetch_weather_by_coords(
    state: ViewState, client: GatewayClient, latitude: float, longitude: float
) -> ViewState:
    loading = begin_request(state)
    try:
        weather = client.weather_by_coords(latitude, longitude)
    except GatewayRequestError as e:
        logger.error("Weather by coordinates failed: %s", e)
        return resolve_failure(loading, loading.generation, FETCH_FAILED_MESSAGE)
    return resolve_success(loading, loading.generation, weather)


def fetch_weather_by_city(state: ViewState, client: GatewayClient, city: str) -> ViewState:
    """Blank searches are ignored; the raw term is sent otherwise."""
    if not city.strip():
        return state
    loading = begin_request(state)
    try:
        weather = client.weather_by_city(city)
    except GatewayRequestError as e:
        logger.error("Weather by city failed for %r: %s", city, e)
        return resolve_failure(loading, loading.generation, CITY_NOT_FOUND_MESSAGE)
    return resolve_success(loading, loading.generation, weather)


def location_title(location: Dict[str, Any]) -> str:
    if location.get("name"):
        return location["name"]
    return f"{location['latitude']:.2f}°, {location['longitude']:.2f}°"


def timezone_label(location: Dict[str, Any]) -> Optional[str]:
    timezone = location.get("timezone")
    return f"Timezone: {timezone}" if timezone else None


def weather_details(current: Dict[str, Any], unit: TemperatureUnit) -> List[Tuple[str, str]]:
    """Label/value pairs for the details grid."""
    unit = TemperatureUnit(unit)
    return [
        ("Feels Like", f"{convert_temp(current['apparent_temperature'], unit)}°{unit.value}"),
        ("Humidity", f"{current['humidity']}%"),
        ("Wind Speed", f"{round_half_up(current['wind_speed'])} mph"),
        ("Precipitation", f"{current['precipitation']} mm"),
    ]
