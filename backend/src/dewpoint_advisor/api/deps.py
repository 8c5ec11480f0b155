"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from dewpoint_advisor.config import OPENWEATHER_API_KEY_ENV, openweather_api_key


def get_openweather_key() -> str:
    """Provide the OpenWeather API key, or fail the request with 500."""
    key = openweather_api_key()
    if not key:
        raise HTTPException(status_code=500, detail=f"Missing {OPENWEATHER_API_KEY_ENV}")
    return key
