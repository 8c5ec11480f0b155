"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from dewpoint_advisor.models import ForecastSample, GeoPoint, StationReading


@pytest.fixture
def viimsi() -> GeoPoint:
    """Observer location near Viimsi, north-east of Tallinn."""
    return GeoPoint(59.50, 24.83)


@pytest.fixture
def beach_entry() -> dict:
    """A well-formed coastal station entry as decoded from XML (single-element lists)."""
    return {
        "Jaam": ["Pirita"],
        "ametliknimi": ["Pirita rand"],
        "LaiusKraad": ["59"],
        "LaiusMinut": ["28"],
        "LaiusSekund": ["12"],
        "PikkusKraad": ["24"],
        "PikkusMinut": ["49"],
        "PikkusSekund": ["30"],
        "wt1ha": ["15,3"],
        "ta1ha": ["17,1"],
        "ws1hx": ["4,2"],
        "wd10ma": ["225"],
        "Time": ["2024-07-15 12:00"],
    }


@pytest.fixture
def humidity_entry() -> dict:
    return {
        "Jaam": "Tallinn-Harku",
        "LaiusKraad": "59",
        "LaiusMinut": "23",
        "LaiusSekund": "53",
        "PikkusKraad": "24",
        "PikkusMinut": "36",
        "PikkusSekund": "10",
        "rhins": "78",
    }


@pytest.fixture
def stations() -> list[StationReading]:
    """Three stations along the north Estonian coast."""
    return [
        StationReading("beach", "Pärnu", GeoPoint(58.38, 24.50), 18.0),
        StationReading("beach", "Pirita", GeoPoint(59.47, 24.83), 15.3),
        StationReading("beach", "Narva-Jõesuu", GeoPoint(59.46, 28.04), 16.1),
    ]


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 7, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def forecast_samples(now) -> list[ForecastSample]:
    """Irregular forecast at +13h, +3h, +7h (deliberately unsorted)."""
    base = int(now.timestamp())
    return [
        ForecastSample(base + 13 * 3600, 14.0, 88.0, "2024-07-16 01:00:00"),
        ForecastSample(base + 3 * 3600, 21.0, 55.0, "2024-07-15 15:00:00"),
        ForecastSample(base + 7 * 3600, 18.0, 70.0, "2024-07-15 19:00:00"),
    ]
