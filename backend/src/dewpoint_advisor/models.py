"""Value types shared by the compute, ingest, and API layers."""

from __future__ import annotations

from dataclasses import dataclass, field
import math

import pandas as pd


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def is_valid(self) -> bool:
        """Finite and within [-90, 90] x [-180, 180]."""
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            return False
        return -90.0 <= self.lat <= 90.0 and -180.0 <= self.lon <= 180.0


@dataclass(frozen=True)
class StationReading:
    """One normalized station record from an upstream network.

    ``value`` is the network's primary metric: water temperature (°C) for
    the beach network, relative humidity (%) for the humidity network.
    """

    network: str
    name: str
    location: GeoPoint
    value: float
    measured_at: str | None = None
    extras: dict[str, str | None] = field(default_factory=dict)

    @property
    def lat(self) -> float:
        return self.location.lat

    @property
    def lon(self) -> float:
        return self.location.lon


@dataclass(frozen=True)
class RankedStation:
    reading: StationReading
    distance_km: float


@dataclass(frozen=True)
class ForecastSample:
    epoch_seconds: int
    temperature: float | None = None
    humidity: float | None = None
    label: str | None = None


@dataclass(frozen=True)
class DewPointGrid:
    temperatures: tuple[float, ...]
    humidities: tuple[float, ...]
    grid: tuple[tuple[float, ...], ...]

    def to_frame(self) -> pd.DataFrame:
        """Rows indexed by humidity, columns by temperature."""
        return pd.DataFrame(
            [list(row) for row in self.grid],
            index=pd.Index(list(self.humidities), name="rh_pct"),
            columns=pd.Index(list(self.temperatures), name="temp_c"),
        )
