"""
WMO weather interpretation codes as reported by Open-Meteo.

Exact lookup only: codes missing from the table (e.g. 56, 57, 66, 67, 77)
classify as "Unknown". The presenter picks icons with its own range table,
so the two can disagree on those codes.
"""
from types import MappingProxyType

UNKNOWN_DESCRIPTION = "Unknown"

WEATHER_CODES = MappingProxyType({
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy with rime",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
})


def classify(code: int) -> str:
    """Maps a WMO code to its human readable description."""
    return WEATHER_CODES.get(code, UNKNOWN_DESCRIPTION)
