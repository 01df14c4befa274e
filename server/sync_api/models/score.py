"""Health score request and response models."""
from datetime import date as Date
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

from health_score import DailyHealthMetrics, HealthScoreResult


class DailyMetricsInput(BaseModel):
    """One day of metrics supplied by the caller.

    Accepts the mobile client's camelCase keys or snake_case names.
    Out-of-domain values are rejected here, before scoring.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: Optional[Date] = None
    steps: int = Field(ge=0)
    sleep_seconds: Optional[int] = Field(default=None, ge=0, alias="sleepSeconds")
    hrv_status: Optional[str] = Field(default=None, alias="hrvStatus")
    body_battery: Optional[float] = Field(default=None, ge=0, le=100, alias="bodyBattery")
    avg_stress_level: Optional[float] = Field(default=None, ge=0, le=100, alias="avgStressLevel")

    def to_metrics(self) -> DailyHealthMetrics:
        return DailyHealthMetrics(
            steps=self.steps,
            sleep_seconds=self.sleep_seconds,
            hrv_status=self.hrv_status,
            body_battery=self.body_battery,
            avg_stress_level=self.avg_stress_level,
            day=self.date,
        )


class ComponentBreakdown(BaseModel):
    """A component score as shown in the breakdown list."""

    value: float
    percent: int
    color: str


class HealthScoreResponse(BaseModel):
    """Health score for one day."""

    date: Optional[str] = None
    score: int = Field(ge=0, le=100)
    label: str
    color: str
    breakdown: dict[str, ComponentBreakdown]
    sources: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls, result: HealthScoreResult, day: Optional[Date] = None, sources: Optional[list[str]] = None
    ) -> "HealthScoreResponse":
        payload = result.to_dict()
        return cls(
            date=day.isoformat() if day else None,
            score=payload["score"],
            label=payload["label"],
            color=payload["color"],
            breakdown=payload["breakdown"],
            sources=sources or [],
        )
