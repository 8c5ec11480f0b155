"""OpenWeather pass-through with forecast horizon picks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from dewpoint_advisor.api.deps import get_openweather_key
from dewpoint_advisor.api.schemas import PickedForecast, WeatherResponse, forecast_point
from dewpoint_advisor.errors import OpenWeatherError
from dewpoint_advisor.ingest.openweather import fetch_weather_with_forecast

router = APIRouter()


@router.get("", response_model=WeatherResponse)
def get_weather(
    city: str | None = Query(None, description="City name, e.g. Tallinn,EE"),
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    api_key: str = Depends(get_openweather_key),
) -> WeatherResponse:
    """Current weather plus the forecast samples nearest to +6h and +12h."""
    if not city and (lat is None or lon is None):
        raise HTTPException(status_code=400, detail="Provide either city or lat/lon")

    try:
        bundle = fetch_weather_with_forecast(api_key, city=city, lat=lat, lon=lon)
    except OpenWeatherError as e:
        raise HTTPException(
            status_code=e.status_code or 502,
            detail={"error": "Weather fetch failed", "detail": e.detail},
        ) from e

    return WeatherResponse(
        weather=bundle.weather,
        picked=PickedForecast(
            six_hour=forecast_point(bundle.picked.get(6)),
            twelve_hour=forecast_point(bundle.picked.get(12)),
        ),
    )
