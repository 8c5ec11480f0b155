"""Pydantic response models for the API."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel

from dewpoint_advisor.compute.forecast import forecast_dew_point
from dewpoint_advisor.compute.geo import deg_to_compass
from dewpoint_advisor.ingest.stations import parse_decimal
from dewpoint_advisor.models import DewPointGrid, ForecastSample, RankedStation, StationReading


class BeachStationResponse(BaseModel):
    name: str
    lat: float
    lon: float
    temp: float
    ta1ha: str | None = None
    ws1hx: str | None = None
    wd10ma: str | None = None
    wind_compass: str | None = None
    time: str | None = None
    distance_km: float | None = None


class BeachResponse(BaseModel):
    nearest: BeachStationResponse | None = None
    all: list[BeachStationResponse]


class HumidityStationResponse(BaseModel):
    name: str
    lat: float
    lon: float
    humidity: float
    timestamp: str | None = None
    distance_km: float | None = None


class HumidityResponse(BaseModel):
    nearest: HumidityStationResponse
    date_str: str
    hour_str: str
    stations_count: int


class ForecastPoint(BaseModel):
    dt: int
    dt_txt: str | None = None
    temp: float | None = None
    humidity: float | None = None
    dew_point_c: float | None = None


class PickedForecast(BaseModel):
    six_hour: ForecastPoint | None = None
    twelve_hour: ForecastPoint | None = None


class WeatherResponse(BaseModel):
    weather: dict[str, Any]
    picked: PickedForecast


class DewPointResponse(BaseModel):
    indoor_dew_point_c: float
    outdoor_dew_point_c: float
    diff: float
    recommendation: str
    message: str


class GridResponse(BaseModel):
    temperatures: list[float]
    humidities: list[float]
    grid: list[list[float]]


def beach_station(reading: StationReading, distance_km: float | None = None) -> BeachStationResponse:
    wind_dir = parse_decimal(reading.extras.get("wd10ma"))
    return BeachStationResponse(
        name=reading.name,
        lat=reading.lat,
        lon=reading.lon,
        temp=reading.value,
        ta1ha=reading.extras.get("ta1ha"),
        ws1hx=reading.extras.get("ws1hx"),
        wd10ma=reading.extras.get("wd10ma"),
        wind_compass=deg_to_compass(wind_dir) if wind_dir is not None else None,
        time=reading.measured_at,
        distance_km=distance_km,
    )


def humidity_station(ranked: RankedStation) -> HumidityStationResponse:
    reading = ranked.reading
    return HumidityStationResponse(
        name=reading.name,
        lat=reading.lat,
        lon=reading.lon,
        humidity=reading.value,
        timestamp=reading.measured_at,
        distance_km=ranked.distance_km,
    )


def forecast_point(sample: ForecastSample | None) -> ForecastPoint | None:
    if sample is None:
        return None
    dew = forecast_dew_point(sample)
    return ForecastPoint(
        dt=sample.epoch_seconds,
        dt_txt=sample.label,
        temp=sample.temperature,
        humidity=sample.humidity,
        dew_point_c=round(dew, 1) if dew is not None and math.isfinite(dew) else None,
    )


def grid_response(grid: DewPointGrid) -> GridResponse:
    return GridResponse(
        temperatures=list(grid.temperatures),
        humidities=list(grid.humidities),
        grid=[list(row) for row in grid.grid],
    )
