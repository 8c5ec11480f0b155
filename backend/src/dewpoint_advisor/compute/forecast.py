"""Pick forecast samples nearest to fixed horizons from an irregular series."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import logging
from typing import Any, Iterable, Sequence

from dewpoint_advisor.compute.dewpoint import dew_point_c
from dewpoint_advisor.config import FORECAST_HORIZONS_HOURS
from dewpoint_advisor.models import ForecastSample

logger = logging.getLogger(__name__)


def parse_forecast_list(raw_list: Iterable[dict[str, Any]] | None) -> list[ForecastSample]:
    """Convert provider entries ``{dt, main: {temp, humidity}, dt_txt}`` to samples.

    Entries without a usable ``dt`` are skipped.
    """
    samples: list[ForecastSample] = []
    for entry in raw_list or []:
        if not isinstance(entry, dict):
            continue
        try:
            epoch = int(entry["dt"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Skipping forecast entry without dt: %r", entry)
            continue

        main = entry.get("main") or {}
        samples.append(ForecastSample(
            epoch_seconds=epoch,
            temperature=_optional_float(main.get("temp")),
            humidity=_optional_float(main.get("humidity")),
            label=entry.get("dt_txt"),
        ))
    return samples


def closest_forecast(
    samples: Sequence[ForecastSample] | None,
    target_hours_ahead: float,
    now: datetime | None = None,
) -> ForecastSample | None:
    """Sample whose timestamp is closest to ``now + target_hours_ahead``.

    Input order does not need to be sorted; on ties the earlier entry wins.
    """
    if not samples:
        return None

    now = now or datetime.now(timezone.utc)
    target_ms = (now + timedelta(hours=target_hours_ahead)).timestamp() * 1000

    best: ForecastSample | None = None
    best_diff = float("inf")
    for sample in samples:
        diff = abs(sample.epoch_seconds * 1000 - target_ms)
        if diff < best_diff:
            best, best_diff = sample, diff
    return best


def pick_forecasts(
    samples: Sequence[ForecastSample] | None,
    horizons: Sequence[int] = FORECAST_HORIZONS_HOURS,
    now: datetime | None = None,
) -> dict[int, ForecastSample | None]:
    now = now or datetime.now(timezone.utc)
    return {h: closest_forecast(samples, h, now) for h in horizons}


def forecast_dew_point(sample: ForecastSample) -> float | None:
    """Dew point of a sample, or None when temperature or humidity is missing."""
    if sample.temperature is None or sample.humidity is None:
        return None
    return dew_point_c(sample.temperature, sample.humidity)


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
