from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    LOGGER: int = 20

    # Open-Meteo endpoints (free, no API key required)
    WEATHER_API_URL: str = "https://api.open-meteo.com/v1/forecast"
    GEOCODING_API_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    GEOCODING_LANGUAGE: str = "en"

    # Same value httpx uses when no timeout is given
    REQUEST_TIMEOUT: float = 5.0

    CORS_ORIGINS: List[str] = ["*"]

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"), 
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
