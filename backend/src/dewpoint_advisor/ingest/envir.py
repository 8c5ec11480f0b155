"""Estonian Environment Agency fetcher: coastal sea stations and air humidity map.

Both endpoints return XML of the form ``<entries><entry><Field>text</Field>...``.
Entries are flattened to ``{field: text}`` here so the normalizer only sees
plain strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging
import xml.etree.ElementTree as ET

import requests

from dewpoint_advisor.config import (
    BEACH_URL,
    HTTP_TIMEOUT_SECONDS,
    HUMIDITY_LOOKBACK_HOURS,
    HUMIDITY_URL,
    USER_AGENT,
)
from dewpoint_advisor.errors import EnvirError
from dewpoint_advisor.ingest.stations import BEACH, HUMIDITY, normalize_records
from dewpoint_advisor.models import StationReading

logger = logging.getLogger(__name__)


@dataclass
class HumiditySnapshot:
    stations: list[StationReading]
    date_str: str
    hour_str: str


def parse_entries(xml_text: str) -> list[dict[str, str | None]]:
    """Flatten every ``<entry>`` element into a field -> text mapping."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise EnvirError(f"Malformed XML: {e}") from e

    entries = []
    for entry in root.iter("entry"):
        record: dict[str, str | None] = {}
        for child in entry:
            text = child.text.strip() if child.text is not None else None
            record[child.tag] = text or None
        entries.append(record)
    return entries


def fetch_beach_stations() -> list[StationReading]:
    """Today's coastal sea station readings (water temperature as primary value)."""
    entries = _fetch_entries(BEACH_URL)
    return normalize_records(entries, BEACH)


def fetch_humidity_stations(obs_time: datetime) -> list[StationReading]:
    """Relative humidity observations for the UTC hour containing ``obs_time``."""
    date_str, hour_str = _date_hour(obs_time)
    entries = _fetch_entries(HUMIDITY_URL, params={"date": date_str, "hour": hour_str})
    return normalize_records(entries, HUMIDITY, measured_at=f"{date_str} {hour_str}:00")


def fetch_latest_humidity(
    now: datetime | None = None,
    lookback_hours: int = HUMIDITY_LOOKBACK_HOURS,
) -> HumiditySnapshot | None:
    """Most recent published humidity hour, walking back from ``now``.

    The map for the current hour is often not published yet, so each earlier
    hour is tried in turn. Returns None if none of them has stations.
    """
    now = now or datetime.now(timezone.utc)
    for offset in range(lookback_hours):
        obs_time = now - timedelta(hours=offset)
        date_str, hour_str = _date_hour(obs_time)
        try:
            stations = fetch_humidity_stations(obs_time)
        except EnvirError as e:
            logger.warning("Humidity map %s %s:00 unavailable: %s", date_str, hour_str, e)
            continue
        if stations:
            logger.info("Using humidity map %s %s:00 (%d stations)", date_str, hour_str, len(stations))
            return HumiditySnapshot(stations=stations, date_str=date_str, hour_str=hour_str)

    logger.warning("No humidity data in the last %d hours", lookback_hours)
    return None


def _fetch_entries(url: str, params: dict[str, str] | None = None) -> list[dict[str, str | None]]:
    logger.info("Fetching %s %s", url, params or "")
    try:
        resp = requests.get(
            url,
            params=params,
            headers={"User-Agent": USER_AGENT},
            timeout=HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        logger.exception("Environment Agency API returned %s for %s", status, url)
        raise EnvirError(f"API returned {status}", status_code=status) from e
    except requests.RequestException as e:
        logger.exception("Failed to fetch %s", url)
        raise EnvirError(str(e)) from e

    return parse_entries(resp.text)


def _date_hour(obs_time: datetime) -> tuple[str, str]:
    if obs_time.tzinfo is not None:
        obs_time = obs_time.astimezone(timezone.utc)
    return obs_time.strftime("%Y-%m-%d"), f"{obs_time.hour:02d}"
