"""Coordinate conversion and great-circle station matching."""

from __future__ import annotations

from math import asin, cos, floor, radians, sin, sqrt
from typing import Sequence

from dewpoint_advisor.config import EARTH_RADIUS_KM
from dewpoint_advisor.models import GeoPoint, RankedStation, StationReading

COMPASS_SECTORS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def to_decimal_degrees(deg: float, minutes: float, sec: float) -> float:
    """Convert degrees/minutes/seconds to decimal degrees.

    The sign lives on the degree field only; minutes and seconds are
    always added.
    """
    return deg + minutes / 60.0 + sec / 3600.0


def great_circle_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance between two points in kilometres."""
    lat1, lon1 = radians(a.lat), radians(a.lon)
    lat2, lon2 = radians(b.lat), radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points
    c = 2 * asin(sqrt(min(1.0, h)))
    return EARTH_RADIUS_KM * c


def nearest_station(
    observer: GeoPoint,
    candidates: Sequence[StationReading],
) -> RankedStation | None:
    """Return the candidate closest to ``observer``, or None if there are none.

    Ties keep the first candidate seen.
    """
    nearest: RankedStation | None = None
    for station in candidates:
        dist = great_circle_distance_km(observer, station.location)
        if nearest is None or dist < nearest.distance_km:
            nearest = RankedStation(reading=station, distance_km=dist)
    return nearest


def rank_stations(
    observer: GeoPoint,
    candidates: Sequence[StationReading],
) -> list[RankedStation]:
    """All candidates ordered by distance (stable for equal distances)."""
    ranked = [
        RankedStation(reading=s, distance_km=great_circle_distance_km(observer, s.location))
        for s in candidates
    ]
    ranked.sort(key=lambda r: r.distance_km)
    return ranked


def deg_to_compass(deg: float) -> str:
    """Map a bearing in degrees to one of eight compass sectors."""
    # Halves round up, so 22.5 is NE
    ix = int(floor(deg / 45.0 + 0.5)) % 8
    return COMPASS_SECTORS[ix]
