"""Station record normalization for the Environment Agency networks.

Each network publishes the same DMS coordinate fields but a different
primary metric. A ``NetworkFields`` table maps upstream field names to
their role; ``normalize_records`` turns raw entries into ``StationReading``
values and silently drops anything that does not parse.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Iterable, Mapping

from dewpoint_advisor.compute.geo import to_decimal_degrees
from dewpoint_advisor.models import GeoPoint, StationReading

logger = logging.getLogger(__name__)

UNKNOWN_STATION = "Unknown"


@dataclass(frozen=True)
class NetworkFields:
    network: str
    value_field: str
    name_fields: tuple[str, ...]
    lat_fields: tuple[str, str, str] = ("LaiusKraad", "LaiusMinut", "LaiusSekund")
    lon_fields: tuple[str, str, str] = ("PikkusKraad", "PikkusMinut", "PikkusSekund")
    time_field: str | None = None
    extra_fields: tuple[str, ...] = ()


BEACH = NetworkFields(
    network="beach",
    value_field="wt1ha",
    name_fields=("ametliknimi", "Jaam"),
    time_field="Time",
    extra_fields=("ta1ha", "ws1hx", "wd10ma"),
)

HUMIDITY = NetworkFields(
    network="humidity",
    value_field="rhins",
    name_fields=("Jaam",),
)


@dataclass(frozen=True)
class SkippedRecord:
    index: int
    reason: str


class _InvalidRecord(ValueError):
    pass


def flatten_record(raw: Mapping[str, Any]) -> dict[str, str | None]:
    """Unwrap single-element field lists into plain strings.

    Scalars pass through; empty lists become None.
    """
    flat: dict[str, str | None] = {}
    for key, value in raw.items():
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        flat[key] = None if value is None else str(value)
    return flat


def parse_decimal(raw: Any) -> float | None:
    """Parse a locale-formatted number ("15,3", " 7.0 ", "null").

    Returns None for missing, "null", non-numeric, or non-finite values.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text or text.lower() == "null":
        return None
    try:
        value = float(text.replace(",", "."))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_dms(record: Mapping[str, str | None], fields: tuple[str, str, str]) -> float:
    """Decimal degrees from a DMS triplet; missing parts count as 0.

    A part that is present but unparseable raises ``_InvalidRecord``.
    """
    parts = []
    for name in fields:
        raw = record.get(name)
        if raw is None or not str(raw).strip():
            parts.append(0.0)
            continue
        value = parse_decimal(raw)
        if value is None:
            raise _InvalidRecord(f"bad coordinate {name}={raw!r}")
        parts.append(value)
    return to_decimal_degrees(*parts)


def normalize_record(
    raw: Mapping[str, Any],
    network: NetworkFields,
    measured_at: str | None = None,
) -> StationReading | None:
    """Build a ``StationReading`` from one raw entry, or None if it is unusable."""
    if not isinstance(raw, Mapping):
        return None
    try:
        return _normalize(flatten_record(raw), network, measured_at)
    except _InvalidRecord:
        return None


def normalize_records(
    raw_records: Iterable[Mapping[str, Any]] | None,
    network: NetworkFields,
    measured_at: str | None = None,
    skipped: list[SkippedRecord] | None = None,
) -> list[StationReading]:
    """Normalize a batch of raw entries, dropping malformed ones.

    Pass a list as ``skipped`` to collect why each dropped entry was rejected.
    """
    stations: list[StationReading] = []
    n_skipped = 0
    for index, raw in enumerate(raw_records or []):
        try:
            if not isinstance(raw, Mapping):
                raise _InvalidRecord("entry is not a mapping")
            stations.append(_normalize(flatten_record(raw), network, measured_at))
        except _InvalidRecord as e:
            n_skipped += 1
            logger.debug("Skipping %s entry %d: %s", network.network, index, e)
            if skipped is not None:
                skipped.append(SkippedRecord(index=index, reason=str(e)))

    logger.info(
        "Normalized %d %s stations (%d skipped)",
        len(stations), network.network, n_skipped,
    )
    return stations


def _normalize(
    record: Mapping[str, str | None],
    network: NetworkFields,
    measured_at: str | None,
) -> StationReading:
    value = parse_decimal(record.get(network.value_field))
    if value is None:
        raise _InvalidRecord(f"missing {network.value_field}")

    location = GeoPoint(
        lat=parse_dms(record, network.lat_fields),
        lon=parse_dms(record, network.lon_fields),
    )
    if not location.is_valid():
        raise _InvalidRecord(f"location out of range ({location.lat}, {location.lon})")

    if network.time_field is not None:
        measured_at = record.get(network.time_field) or measured_at

    return StationReading(
        network=network.network,
        name=_station_name(record, network.name_fields),
        location=location,
        value=value,
        measured_at=measured_at,
        extras={f: record.get(f) for f in network.extra_fields},
    )


def _station_name(record: Mapping[str, str | None], fields: tuple[str, ...]) -> str:
    for name in fields:
        value = record.get(name)
        if value and value.strip():
            return value.strip()
    return UNKNOWN_STATION
