"""
Value types for the health score engine.

This module defines the data structures passed into and out of scoring:
- HrvStatus: Closed set of HRV recovery states with an explicit unknown arm
- DailyHealthMetrics: One calendar day of biometric signals
- ComponentScore / ScoreBreakdown: Per-metric normalized scores
- HealthScoreResult: Final score, label, color and breakdown
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union


class HrvStatus(str, Enum):
    """Heart-rate-variability recovery status."""

    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw) -> "HrvStatus":
        """
        Map a raw vendor value to a status.

        Only the exact strings "good", "fair" and "poor" are recognized.
        Anything else, including None, maps to UNKNOWN.
        """
        if isinstance(raw, cls):
            return raw
        if raw == cls.GOOD.value:
            return cls.GOOD
        if raw == cls.FAIR.value:
            return cls.FAIR
        if raw == cls.POOR.value:
            return cls.POOR
        return cls.UNKNOWN


class ScoreLabel(str, Enum):
    """Qualitative band label for a health score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_IMPROVEMENT = "Needs Improvement"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (86.5 -> 87)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class DailyHealthMetrics:
    """Biometric signals for exactly one calendar day."""

    steps: int
    sleep_seconds: Optional[int] = None
    hrv_status: Union[HrvStatus, str, None] = None
    body_battery: Optional[float] = None
    avg_stress_level: Optional[float] = None
    day: Optional[date] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        hrv = self.hrv_status.value if isinstance(self.hrv_status, HrvStatus) else self.hrv_status
        return {
            "date": self.day.isoformat() if self.day else None,
            "steps": self.steps,
            "sleep_seconds": self.sleep_seconds,
            "hrv_status": hrv,
            "body_battery": self.body_battery,
            "avg_stress_level": self.avg_stress_level,
        }


@dataclass(frozen=True)
class ComponentScore:
    """A single normalized sub-score (0-100 for valid input)."""

    name: str
    value: float
    color: str

    @property
    def percent(self) -> int:
        """Display value, rounded the same way as the final score."""
        return round_half_up(self.value)

    def to_dict(self) -> dict:
        return {"value": self.value, "percent": self.percent, "color": self.color}


@dataclass(frozen=True)
class ScoreBreakdown:
    """The five component scores behind a health score."""

    steps: ComponentScore
    sleep: ComponentScore
    hrv: ComponentScore
    body_battery: ComponentScore
    stress: ComponentScore

    def __iter__(self):
        return iter((self.steps, self.sleep, self.hrv, self.body_battery, self.stress))

    def to_dict(self) -> dict:
        return {component.name: component.to_dict() for component in self}


@dataclass(frozen=True)
class HealthScoreResult:
    """Outcome of scoring one day of metrics."""

    score: int
    label: ScoreLabel
    color: str
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary of primitives."""
        return {
            "score": self.score,
            "label": self.label.value,
            "color": self.color,
            "breakdown": self.breakdown.to_dict(),
        }
