"""
Client for the live wellness provider.

Reads the current day's wellness summary over HTTP and normalizes it to
the canonical metric keys used by health_score.merge. Any failure is
logged and reported as "no live data" so callers fall back to the
locally stored daily metrics.
"""
import logging
from datetime import date
from typing import Any, Dict, Optional

import httpx

from health_score import coerce_metric

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

# Payload key -> canonical metric name. First match wins.
LIVE_KEY_ALIASES = {
    "steps": ("steps", "totalSteps"),
    "sleep_seconds": ("sleep_seconds", "sleepSeconds", "sleepingSeconds"),
    "hrv_status": ("hrv_status", "hrvStatus"),
    "body_battery": ("body_battery", "bodyBattery"),
    "avg_stress_level": ("avg_stress_level", "avgStressLevel", "averageStressLevel"),
}


def normalize_wellness_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a wellness summary to canonical metric keys.

    Sleep may also arrive nested as {"sleep": {"duration": seconds}}.
    Values are coerced to numbers ("9000" -> 9000). Keys that are missing
    or null are left out, and so are readings the provider uses to mean
    "no data": a sleep duration of 0 and negative stress levels (-1/-2
    mark stress that could not be measured). Unparseable values are
    dropped with a warning.
    """
    raw: Dict[str, Any] = {}
    for name, aliases in LIVE_KEY_ALIASES.items():
        for key in aliases:
            if payload.get(key) is not None:
                raw[name] = payload[key]
                break

    sleep = payload.get("sleep")
    if "sleep_seconds" not in raw and isinstance(sleep, dict) and sleep.get("duration") is not None:
        raw["sleep_seconds"] = sleep["duration"]

    values: Dict[str, Any] = {}
    for name, value in raw.items():
        try:
            value = coerce_metric(name, value)
        except (TypeError, ValueError):
            logger.warning(f"[WELLNESS] Ignoring unparseable {name}={value!r}")
            continue
        if value is None:
            continue
        if name == "sleep_seconds" and value == 0:
            continue
        if name == "avg_stress_level" and value < 0:
            logger.debug(f"[WELLNESS] Stress sentinel {value} treated as no reading")
            continue
        values[name] = value

    for key in ("date", "calendarDate"):
        if payload.get(key):
            values["date"] = str(payload[key])[:10]
            break

    return values


async def fetch_live_wellness(
    day: date,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Dict[str, Any]]:
    """
    Fetch the live wellness reading for a day.

    Args:
        day: Calendar day to read
        settings: Settings providing wellness_url and wellness_timeout
        client: Optional pre-built client (tests pass one with a mock transport)

    Returns:
        Canonical metric values, or None if no live reading is available
    """
    settings = settings or get_settings()
    if not settings.wellness_url:
        return None

    url = f"{settings.wellness_url.rstrip('/')}/wellness/{day.isoformat()}"
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=httpx.Timeout(settings.wellness_timeout)) as owned:
                response = await owned.get(url)
        else:
            response = await client.get(url, timeout=settings.wellness_timeout)
    except httpx.TimeoutException:
        logger.warning(f"[WELLNESS] Timed out after {settings.wellness_timeout}s reading {url}")
        return None
    except httpx.ConnectError:
        logger.warning(f"[WELLNESS] Provider not available at {settings.wellness_url}")
        return None
    except httpx.HTTPError as e:
        logger.error(f"[WELLNESS] Request to {url} failed: {e}")
        return None

    if response.status_code != 200:
        logger.warning(f"[WELLNESS] Status {response.status_code} for {day}: {response.text}")
        return None

    try:
        payload = response.json()
    except ValueError:
        logger.warning(f"[WELLNESS] Non-JSON response for {day}")
        return None

    if not isinstance(payload, dict):
        logger.warning(f"[WELLNESS] Unexpected payload type {type(payload).__name__} for {day}")
        return None

    values = normalize_wellness_payload(payload)
    logger.debug(f"[WELLNESS] {day}: {values}")
    return values
