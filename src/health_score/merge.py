"""
Assembly of a day's metrics from the live wellness API and the local store.

Precedence, per field: the live value wins when present, otherwise the
stored daily value, otherwise the field is absent. A sleep duration of 0
counts as absent, the same way the engine treats it as "no sleep data".
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional

from .models import DailyHealthMetrics

logger = logging.getLogger(__name__)

METRIC_FIELDS = ("steps", "sleep_seconds", "hrv_status", "body_battery", "avg_stress_level")
INT_FIELDS = {"steps", "sleep_seconds"}
FLOAT_FIELDS = {"body_battery", "avg_stress_level"}


def _to_number(value, as_int: bool):
    """Convert stored values such as '8500.0' or 8500 to numbers; blanks become None."""
    if value is None or value == "":
        return None
    number = float(value)
    return int(number) if as_int else number


def coerce_metric(name: str, raw):
    """
    Convert a raw source value to the canonical type for a metric.

    Raises:
        ValueError: If a numeric metric holds something that is not a number
    """
    if name in INT_FIELDS:
        return _to_number(raw, as_int=True)
    if name in FLOAT_FIELDS:
        return _to_number(raw, as_int=False)
    return raw or None


def _is_present(name: str, value) -> bool:
    if value is None:
        return False
    if name == "sleep_seconds" and not value:
        return False
    return True


def metrics_from_row(row: Mapping[str, Any]) -> dict:
    """
    Convert a daily_metrics row into canonical metric values.

    Rows may carry numeric strings (SQLite TEXT affinity) or be missing
    columns; both are normalized. The row's date is kept under "date".
    """
    keys = row.keys()
    values = {}
    for name in METRIC_FIELDS:
        values[name] = coerce_metric(name, row[name] if name in keys else None)
    if "date" in keys and row["date"]:
        values["date"] = str(row["date"])
    return values


def _check_same_day(day: date, source: Optional[Mapping[str, Any]], source_name: str) -> None:
    if not source or source.get("date") is None:
        return
    source_day = source["date"]
    if not isinstance(source_day, date):
        source_day = date.fromisoformat(str(source_day)[:10])
    if source_day != day:
        raise ValueError(
            f"{source_name} metrics are for {source_day}, cannot combine with {day}"
        )


def merge_daily_metrics(
    day: date,
    live: Optional[Mapping[str, Any]] = None,
    stored: Optional[Mapping[str, Any]] = None,
) -> DailyHealthMetrics:
    """
    Build the DailyHealthMetrics for a day.

    Args:
        day: The calendar day being assembled
        live: Reading from the live wellness API (canonical keys)
        stored: Values from the local daily_metrics store (canonical keys)

    Returns:
        DailyHealthMetrics with live values taking precedence over stored ones.
        Steps fall back to 0 when neither source has them.

    Raises:
        ValueError: If either source is dated for a different day
    """
    _check_same_day(day, live, "Live")
    _check_same_day(day, stored, "Stored")

    live = live or {}
    stored = stored or {}
    merged = {}
    for name in METRIC_FIELDS:
        value = live.get(name)
        if not _is_present(name, value):
            value = stored.get(name)
        merged[name] = value if _is_present(name, value) else None

    if merged["steps"] is None:
        logger.info(f"[MERGE] No step count for {day}, treating as 0 steps")
        merged["steps"] = 0

    return DailyHealthMetrics(day=day, **merged)
