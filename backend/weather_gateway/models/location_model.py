from pydantic import BaseModel
from typing import Optional

class GeocodedPlace(BaseModel):
    """One candidate from the geocoding search results."""
    name: str
    latitude: float
    longitude: float
    admin1: Optional[str] = None  # State / region
    country: Optional[str] = None
    timezone: Optional[str] = None

    @property
    def display_name(self) -> str:
        """City, region and country joined with ", ", skipping absent parts."""
        parts = [self.name, self.admin1, self.country]
        return ", ".join(part for part in parts if part)
