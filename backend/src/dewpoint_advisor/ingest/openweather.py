"""OpenWeather current conditions and 5 day / 3 hour forecast."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from typing import Any

import requests

from dewpoint_advisor.compute.forecast import parse_forecast_list, pick_forecasts
from dewpoint_advisor.config import HTTP_TIMEOUT_SECONDS, OPENWEATHER_BASE_URL
from dewpoint_advisor.errors import OpenWeatherError
from dewpoint_advisor.models import ForecastSample

logger = logging.getLogger(__name__)


@dataclass
class WeatherBundle:
    weather: dict[str, Any]
    forecast_samples: list[ForecastSample] = field(default_factory=list)
    picked: dict[int, ForecastSample | None] = field(default_factory=dict)


def fetch_current_weather(
    api_key: str,
    city: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> dict[str, Any]:
    """Current conditions by city name or coordinates (metric units)."""
    if city:
        params: dict[str, Any] = {"q": city}
    elif lat is not None and lon is not None:
        params = {"lat": lat, "lon": lon}
    else:
        raise ValueError("Provide either city or lat/lon")

    return _get_json("weather", params, api_key)


def fetch_forecast(api_key: str, lat: float, lon: float) -> list[dict[str, Any]]:
    """Raw forecast entries (``list`` field of the forecast response)."""
    data = _get_json("forecast", {"lat": lat, "lon": lon}, api_key)
    entries = data.get("list")
    return entries if isinstance(entries, list) else []


def fetch_weather_with_forecast(
    api_key: str,
    city: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
    now: datetime | None = None,
) -> WeatherBundle:
    """Current weather plus the forecast samples nearest each configured horizon.

    The forecast is looked up at the coordinates OpenWeather resolved for the
    current weather. A forecast failure leaves the forecast empty; a current
    weather failure raises.
    """
    weather = fetch_current_weather(api_key, city=city, lat=lat, lon=lon)
    bundle = WeatherBundle(weather=weather)

    coord = weather.get("coord") or {}
    coord_lat, coord_lon = coord.get("lat"), coord.get("lon")
    if coord_lat is None or coord_lon is None:
        logger.warning("Current weather has no coordinates; skipping forecast")
        return bundle

    try:
        raw = fetch_forecast(api_key, coord_lat, coord_lon)
    except OpenWeatherError as e:
        logger.warning("Forecast unavailable (%s): %s", e.status_code, e.detail)
        return bundle

    bundle.forecast_samples = parse_forecast_list(raw)
    bundle.picked = pick_forecasts(bundle.forecast_samples, now=now)
    return bundle


def _get_json(endpoint: str, params: dict[str, Any], api_key: str) -> dict[str, Any]:
    url = f"{OPENWEATHER_BASE_URL}/{endpoint}"
    query = {**params, "units": "metric", "appid": api_key}
    logger.info("Fetching OpenWeather %s: %s", endpoint, params)

    try:
        resp = requests.get(url, params=query, timeout=HTTP_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logger.exception("Failed to reach OpenWeather %s", endpoint)
        raise OpenWeatherError(f"{endpoint} fetch failed", status_code=502, detail=str(e)) from e

    if not resp.ok:
        logger.warning("OpenWeather %s returned %d", endpoint, resp.status_code)
        raise OpenWeatherError(
            f"{endpoint} fetch failed",
            status_code=resp.status_code,
            detail=resp.text,
        )

    try:
        return resp.json()
    except ValueError as e:
        raise OpenWeatherError(f"{endpoint} returned invalid JSON", status_code=502, detail=str(e)) from e
