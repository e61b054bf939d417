from pydantic import BaseModel
from typing import Optional

class Location(BaseModel):
    latitude: float
    longitude: float
    timezone: Optional[str] = None
    name: Optional[str] = None  # Only set on the city-name path

class CurrentWeather(BaseModel):
    temperature: float           # °F
    apparent_temperature: float  # °F
    humidity: int                # %
    precipitation: float         # mm
    weather_code: int
    wind_speed: float            # mph
    description: str

class WeatherResponse(BaseModel):
    success: bool = True
    location: Location
    current_weather: CurrentWeather

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    message: str
