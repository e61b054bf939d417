"""Custom component asking the browser for the device position."""
from pathlib import Path
from typing import Any, Dict, Optional

import streamlit.components.v1 as components

_COMPONENT_PATH = Path(__file__).resolve().parent / "geolocation_frontend"
_browser_geolocation = components.declare_component(
    "browser_geolocation",
    path=str(_COMPONENT_PATH),
)


def get_browser_geolocation(*, timeout_ms: int = 10000) -> Optional[Dict[str, Any]]:
    """
    Returns {"latitude", "longitude"} once the browser answers, {"error": ...}
    when permission is denied or the API is missing, and None while pending.
    """
    value = _browser_geolocation(
        timeout_ms=int(timeout_ms),
        key="browser_geolocation",
        default=None,
    )
    return value if isinstance(value, dict) else None
