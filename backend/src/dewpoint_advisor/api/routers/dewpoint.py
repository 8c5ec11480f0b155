"""Dew point comparison and chart grid endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from dewpoint_advisor.api.schemas import DewPointResponse, GridResponse, grid_response
from dewpoint_advisor.compute.dewpoint import (
    dew_point_c,
    dew_point_grid,
    recommendation_text,
    ventilation_recommendation,
)
from dewpoint_advisor.config import (
    DEFAULT_INDOOR_RH_PCT,
    DEFAULT_INDOOR_TEMP_C,
    DEFAULT_OUTDOOR_RH_PCT,
    DEFAULT_OUTDOOR_TEMP_C,
    MAX_TEMP_C,
    MIN_TEMP_C,
)

router = APIRouter()


@router.get("", response_model=DewPointResponse)
def get_dewpoint(
    indoor_temp: float = Query(DEFAULT_INDOOR_TEMP_C, ge=MIN_TEMP_C, le=MAX_TEMP_C),
    indoor_rh: float = Query(DEFAULT_INDOOR_RH_PCT, gt=0, le=100),
    outdoor_temp: float = Query(DEFAULT_OUTDOOR_TEMP_C, ge=MIN_TEMP_C, le=MAX_TEMP_C),
    outdoor_rh: float = Query(DEFAULT_OUTDOOR_RH_PCT, gt=0, le=100),
) -> DewPointResponse:
    """Compare indoor and outdoor dew points and recommend a ventilation setting."""
    indoor = dew_point_c(indoor_temp, indoor_rh)
    outdoor = dew_point_c(outdoor_temp, outdoor_rh)
    rec = ventilation_recommendation(indoor, outdoor)
    return DewPointResponse(
        indoor_dew_point_c=round(indoor, 2),
        outdoor_dew_point_c=round(outdoor, 2),
        diff=round(indoor - outdoor, 2),
        recommendation=rec.value,
        message=recommendation_text(rec),
    )


@router.get("/grid", response_model=GridResponse)
def get_grid() -> GridResponse:
    return grid_response(dew_point_grid())
