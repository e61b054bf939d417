from __future__ import annotations

import pytest

from weather_presenter.api_client import GatewayClient
from weather_presenter.presenter import (
    CITY_NOT_FOUND_MESSAGE,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    FETCH_FAILED_MESSAGE,
    LOCATION_DENIED_NOTICE,
    LOCATION_UNSUPPORTED_NOTICE,
    RequestStatus,
    TemperatureUnit,
    ViewState,
    WeatherIcon,
    begin_request,
    convert_temp,
    fetch_weather_by_city,
    fetch_weather_by_coords,
    location_title,
    resolve_failure,
    resolve_success,
    start_location,
    timezone_label,
    toggle_unit,
    weather_details,
    weather_icon,
)

BASE_URL = "http://gateway.test"

ENVELOPE = {
    "success": True,
    "location": {"latitude": 37.7749, "longitude": -122.4194, "timezone": "America/Los_Angeles"},
    "current_weather": {
        "temperature": 72.0,
        "apparent_temperature": 70.4,
        "humidity": 65,
        "precipitation": 0.2,
        "weather_code": 1,
        "wind_speed": 5.6,
        "description": "Mainly clear",
    },
}


@pytest.mark.parametrize(
    "fahrenheit,expected",
    [(32, 0), (72, 22), (-4, -20), (212, 100), (98.6, 37), (0, -18)],
)
def test_convert_to_celsius(fahrenheit, expected) -> None:
    assert convert_temp(fahrenheit, TemperatureUnit.CELSIUS) == expected


@pytest.mark.parametrize("fahrenheit", [72.0, 71.6, -3.7, 0.2, 100])
def test_convert_to_fahrenheit_only_rounds(fahrenheit) -> None:
    assert convert_temp(fahrenheit, "F") == round(fahrenheit)


def test_convert_accepts_plain_unit_strings() -> None:
    assert convert_temp(50, "C") == 10


def test_halves_round_up_like_the_browser() -> None:
    assert convert_temp(72.5, "F") == 73
    assert convert_temp(-0.5, "F") == 0


@pytest.mark.parametrize(
    "code,icon",
    [
        (0, WeatherIcon.CLEAR),
        (1, WeatherIcon.CLEAR),
        (2, WeatherIcon.PARTLY_CLOUDY),
        (3, WeatherIcon.OVERCAST),
        (45, WeatherIcon.FOG),
        (48, WeatherIcon.FOG),
        (51, WeatherIcon.RAIN),
        (67, WeatherIcon.RAIN),
        (71, WeatherIcon.SNOW),
        (80, WeatherIcon.SNOW),
        (86, WeatherIcon.SNOW),
        (95, WeatherIcon.STORM),
        (99, WeatherIcon.STORM),
    ],
)
def test_icon_ranges(code, icon) -> None:
    assert weather_icon(code) is icon


@pytest.mark.parametrize("code", [-1, 4, 46, 47, 50, 68, 70, 87, 94, 100])
def test_codes_outside_ranges_get_default_icon(code) -> None:
    assert weather_icon(code) is WeatherIcon.DEFAULT


def test_begin_request_enters_loading_and_clears_error() -> None:
    state = ViewState(status=RequestStatus.ERROR, error="boom", generation=3)

    loading = begin_request(state)

    assert loading.status is RequestStatus.LOADING
    assert loading.error is None
    assert loading.generation == 4
    assert state.status is RequestStatus.ERROR


def test_view_state_is_immutable() -> None:
    with pytest.raises(Exception):
        ViewState().status = RequestStatus.LOADING


def test_success_is_applied_for_current_generation() -> None:
    loading = begin_request(ViewState())

    done = resolve_success(loading, loading.generation, ENVELOPE)

    assert done.status is RequestStatus.SUCCESS
    assert done.weather == ENVELOPE


def test_late_response_does_not_overwrite_newer_request() -> None:
    first = begin_request(ViewState())
    second = begin_request(first)

    after_late_success = resolve_success(second, first.generation, ENVELOPE)
    after_late_failure = resolve_failure(second, first.generation, FETCH_FAILED_MESSAGE)

    assert after_late_success == second
    assert after_late_failure == second


def test_failure_keeps_previous_weather() -> None:
    shown = resolve_success(begin_request(ViewState()), 1, ENVELOPE)
    loading = begin_request(shown)

    failed = resolve_failure(loading, loading.generation, CITY_NOT_FOUND_MESSAGE)

    assert failed.status is RequestStatus.ERROR
    assert failed.error == CITY_NOT_FOUND_MESSAGE
    assert failed.weather == ENVELOPE


def test_toggle_unit_is_orthogonal_to_request_state() -> None:
    loading = begin_request(ViewState())

    toggled = toggle_unit(loading)

    assert toggled.unit is TemperatureUnit.CELSIUS
    assert toggled.status is RequestStatus.LOADING
    assert toggle_unit(toggled).unit is TemperatureUnit.FAHRENHEIT


def test_location_title_prefers_name() -> None:
    assert location_title({"name": "Paris, France", "latitude": 48.85, "longitude": 2.35}) == "Paris, France"
    assert location_title(ENVELOPE["location"]) == "37.77°, -122.42°"


def test_weather_details_follow_unit() -> None:
    current = ENVELOPE["current_weather"]

    assert weather_details(current, TemperatureUnit.FAHRENHEIT) == [
        ("Feels Like", "70°F"),
        ("Humidity", "65%"),
        ("Wind Speed", "6 mph"),
        ("Precipitation", "0.2 mm"),
    ]
    assert weather_details(current, "C")[0] == ("Feels Like", "21°C")


def test_fetch_by_coords_success(requests_mock) -> None:
    requests_mock.get(f"{BASE_URL}/weather", json=ENVELOPE)

    state = fetch_weather_by_coords(ViewState(), GatewayClient(BASE_URL), 37.7749, -122.4194)

    assert state.status is RequestStatus.SUCCESS
    assert state.weather == ENVELOPE
    assert state.generation == 1
    assert requests_mock.last_request.qs == {"latitude": ["37.7749"], "longitude": ["-122.4194"]}


def test_fetch_by_coords_failure_shows_fixed_message(requests_mock, caplog) -> None:
    requests_mock.get(
        f"{BASE_URL}/weather",
        status_code=500,
        json={"error": "Failed to fetch weather data", "details": "Connection refused"},
    )

    state = fetch_weather_by_coords(ViewState(), GatewayClient(BASE_URL), 1.0, 2.0)

    assert state.status is RequestStatus.ERROR
    assert state.error == FETCH_FAILED_MESSAGE
    assert "Failed to fetch weather data" in caplog.text


def test_fetch_by_city_failure_shows_city_message(requests_mock) -> None:
    requests_mock.get(f"{BASE_URL}/weather/city/Nowhereville", status_code=404, json={"error": "City not found"})

    state = fetch_weather_by_city(ViewState(), GatewayClient(BASE_URL), "Nowhereville")

    assert state.error == CITY_NOT_FOUND_MESSAGE


def test_fetch_by_city_ignores_blank_input(requests_mock) -> None:
    state = ViewState()

    assert fetch_weather_by_city(state, GatewayClient(BASE_URL), "   ") is state
    assert requests_mock.call_count == 0


def test_start_location_uses_device_coordinates() -> None:
    state = ViewState()

    started, latitude, longitude = start_location(state, {"latitude": 48.85, "longitude": 2.35})

    assert (latitude, longitude) == (48.85, 2.35)
    assert started.notice is None


def test_start_location_falls_back_when_denied() -> None:
    started, latitude, longitude = start_location(ViewState(), {"error": "User denied Geolocation", "code": 1})

    assert (latitude, longitude) == (DEFAULT_LATITUDE, DEFAULT_LONGITUDE) == (37.7749, -122.4194)
    assert started.notice == LOCATION_DENIED_NOTICE
    assert started.error is None


def test_start_location_falls_back_when_unsupported() -> None:
    started, latitude, longitude = start_location(ViewState(), {"error": "unsupported"})

    assert (latitude, longitude) == (37.7749, -122.4194)
    assert started.notice == LOCATION_UNSUPPORTED_NOTICE


def test_fallback_location_is_fetched_with_notice_kept(requests_mock) -> None:
    requests_mock.get(f"{BASE_URL}/weather", json=ENVELOPE)

    state, latitude, longitude = start_location(ViewState(), {"error": "denied"})
    state = fetch_weather_by_coords(state, GatewayClient(BASE_URL), latitude, longitude)

    assert state.status is RequestStatus.SUCCESS
    assert state.notice == LOCATION_DENIED_NOTICE
    assert requests_mock.last_request.qs == {"latitude": ["37.7749"], "longitude": ["-122.4194"]}


def test_timezone_label_skips_missing_timezone() -> None:
    assert timezone_label(ENVELOPE["location"]) == "Timezone: America/Los_Angeles"
    assert timezone_label({"latitude": 1.0, "longitude": 2.0}) is None
