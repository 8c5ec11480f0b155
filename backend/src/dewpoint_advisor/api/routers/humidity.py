"""Air humidity station endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from dewpoint_advisor.api.schemas import HumidityResponse, humidity_station
from dewpoint_advisor.compute.geo import nearest_station
from dewpoint_advisor.ingest.envir import fetch_latest_humidity
from dewpoint_advisor.models import GeoPoint

router = APIRouter()


@router.get("", response_model=HumidityResponse)
def get_humidity(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
) -> HumidityResponse:
    """Nearest humidity station from the most recent published hour."""
    snapshot = fetch_latest_humidity()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No recent humidity data available")

    ranked = nearest_station(GeoPoint(lat, lon), snapshot.stations)
    if ranked is None:
        raise HTTPException(status_code=404, detail="No recent humidity data available")

    return HumidityResponse(
        nearest=humidity_station(ranked),
        date_str=snapshot.date_str,
        hour_str=snapshot.hour_str,
        stations_count=len(snapshot.stations),
    )
