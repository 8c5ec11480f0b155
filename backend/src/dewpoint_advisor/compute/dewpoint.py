"""Dew point calculation and the ventilation rule built on it.

Dew point uses the Magnus approximation (a=17.625, b=243.04), valid for
roughly -45 to 60 °C:

    alpha    = ln(RH/100) + a*T / (b+T)
    dewpoint = b*alpha / (a - alpha)

The recommendation compares indoor and outdoor dew points against a fixed
deadband. The deadband is a policy choice, not a physical threshold.
"""

from __future__ import annotations

from enum import Enum
import math
from typing import Sequence

from dewpoint_advisor.config import (
    DEADBAND_C,
    GRID_HUMIDITIES_PCT,
    GRID_TEMPERATURES_C,
    MAGNUS_A,
    MAGNUS_B,
)
from dewpoint_advisor.models import DewPointGrid


class Recommendation(str, Enum):
    VENTILATE = "ventilate"
    HOLD = "hold"
    NEUTRAL = "neutral"


_MESSAGES = {
    Recommendation.VENTILATE: "Outdoor dew point is lower. Ventilate / run HRV.",
    Recommendation.HOLD: "Outdoor dew point is higher. Keep HRV low to avoid moisture.",
    Recommendation.NEUTRAL: "Dew points are close. Ventilation change has minor impact.",
}


def dew_point_c(temp_c: float, rh_pct: float) -> float:
    """Dew point in °C from air temperature (°C) and relative humidity (%).

    RH <= 0 has no logarithm and T = -b has no Magnus term; both give NaN
    and callers decide what to show.
    """
    if rh_pct <= 0 or MAGNUS_B + temp_c == 0:
        return float("nan")
    alpha = math.log(rh_pct / 100.0) + (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c)
    if MAGNUS_A - alpha == 0:
        return float("nan")
    return (MAGNUS_B * alpha) / (MAGNUS_A - alpha)


def ventilation_recommendation(
    indoor_dew_c: float,
    outdoor_dew_c: float,
    deadband_c: float = DEADBAND_C,
) -> Recommendation:
    diff = indoor_dew_c - outdoor_dew_c
    if diff > deadband_c:
        return Recommendation.VENTILATE
    if diff < -deadband_c:
        return Recommendation.HOLD
    return Recommendation.NEUTRAL


def recommendation_text(recommendation: Recommendation) -> str:
    return _MESSAGES[recommendation]


def dew_point_grid(
    temperatures: Sequence[float] | None = None,
    humidities: Sequence[float] | None = None,
) -> DewPointGrid:
    """Dew points over temperature x humidity, rounded to one decimal.

    ``grid[i][j]`` is the dew point at ``humidities[i]`` and ``temperatures[j]``.
    """
    temps = tuple(GRID_TEMPERATURES_C if temperatures is None else temperatures)
    rhs = tuple(GRID_HUMIDITIES_PCT if humidities is None else humidities)

    grid = tuple(
        tuple(round(dew_point_c(t, rh), 1) for t in temps)
        for rh in rhs
    )
    return DewPointGrid(temperatures=temps, humidities=rhs, grid=grid)
