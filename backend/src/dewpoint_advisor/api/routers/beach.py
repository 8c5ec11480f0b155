"""Coastal sea station endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from dewpoint_advisor.api.schemas import BeachResponse, beach_station
from dewpoint_advisor.compute.geo import nearest_station
from dewpoint_advisor.errors import EnvirError
from dewpoint_advisor.ingest.envir import fetch_beach_stations
from dewpoint_advisor.models import GeoPoint

router = APIRouter()


@router.get("", response_model=BeachResponse)
def get_beach(
    lat: float | None = Query(None, ge=-90, le=90, description="Latitude"),
    lon: float | None = Query(None, ge=-180, le=180, description="Longitude"),
) -> BeachResponse:
    """All coastal stations, plus the nearest one when a location is given."""
    try:
        stations = fetch_beach_stations()
    except EnvirError:
        stations = []

    if not stations:
        raise HTTPException(status_code=404, detail="No beach data available")

    nearest = None
    if lat is not None and lon is not None:
        ranked = nearest_station(GeoPoint(lat, lon), stations)
        if ranked is not None:
            nearest = beach_station(ranked.reading, ranked.distance_km)

    return BeachResponse(nearest=nearest, all=[beach_station(s) for s in stations])
