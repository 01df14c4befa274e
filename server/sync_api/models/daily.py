"""Daily metrics data models."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class DailyMetricsRecord(BaseModel):
    """One synced day from the daily_metrics table."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    date: str
    steps: Optional[int] = None
    resting_heart_rate: Optional[float] = None
    body_battery: Optional[int] = None
    sleep_seconds: Optional[int] = None
    hrv_status: Optional[str] = None
    avg_stress_level: Optional[float] = None
    created_at: Optional[str] = None


class DailyMetricsList(BaseModel):
    """Recent daily metrics, newest first."""

    items: list[DailyMetricsRecord]
