"""
Scoring policy for the health score engine.

Every tunable number the engine uses lives here: goals and targets, the
defaults substituted for missing signals, the weight vector and the score
bands. A policy is validated when it is constructed so that scoring itself
never has to fail.
"""

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .models import HrvStatus, ScoreLabel


@dataclass(frozen=True)
class ScoreWeights:
    """Contribution of each component to the composite score."""

    steps: float = 0.25
    sleep: float = 0.25
    hrv: float = 0.15
    body_battery: float = 0.15
    stress: float = 0.20

    @property
    def total(self) -> float:
        return self.steps + self.sleep + self.hrv + self.body_battery + self.stress


@dataclass(frozen=True)
class HrvScores:
    """Score assigned to each HRV status."""

    good: float = 100.0
    fair: float = 70.0
    poor: float = 40.0
    unknown: float = 40.0  # unrecognized or missing status scores like "poor"


@dataclass(frozen=True)
class ScoreBand:
    """Maps scores at or above min_score to a label and color.

    A band with min_score None matches every score.
    """

    min_score: Optional[int]
    label: ScoreLabel
    color: str

    def matches(self, score: int) -> bool:
        return self.min_score is None or score >= self.min_score


DEFAULT_BANDS = (
    ScoreBand(80, ScoreLabel.EXCELLENT, "#34C759"),  # green
    ScoreBand(60, ScoreLabel.GOOD, "#007AFF"),  # blue
    ScoreBand(40, ScoreLabel.FAIR, "#FF9500"),  # orange
    ScoreBand(None, ScoreLabel.NEEDS_IMPROVEMENT, "#FF3B30"),  # red
)


@dataclass(frozen=True)
class ComponentColors:
    """Display color for each breakdown entry."""

    steps: str = "#007AFF"
    sleep: str = "#5856D6"
    hrv: str = "#FF3B30"
    body_battery: str = "#34C759"
    stress: str = "#FF9500"


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Complete configuration of the health score model.

    Args:
        step_goal: Daily step count that earns a full step score
        sleep_target_seconds: Sleep duration that earns a full sleep score
        sleep_floor_seconds: Any recorded sleep scores at least as well as this duration
        hrv_scores: Score per HRV status
        default_sleep_score: Used when no sleep was recorded
        default_body_battery_score: Used when body battery is missing
        default_stress_score: Used when average stress is missing
        weights: Composite weights, must sum to 1.0
        bands: Score bands ordered from highest min_score down, ending with a catch-all
        component_colors: Breakdown display colors
    """

    step_goal: float = 10000
    sleep_target_seconds: float = 8 * 3600
    sleep_floor_seconds: float = 6 * 3600
    hrv_scores: HrvScores = field(default_factory=HrvScores)
    default_sleep_score: float = 50.0
    default_body_battery_score: float = 50.0
    default_stress_score: float = 50.0
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    bands: Tuple[ScoreBand, ...] = DEFAULT_BANDS
    component_colors: ComponentColors = field(default_factory=ComponentColors)

    def __post_init__(self):
        if self.step_goal <= 0:
            raise ValueError(f"step_goal must be positive, got {self.step_goal}")
        if self.sleep_target_seconds <= 0:
            raise ValueError(
                f"sleep_target_seconds must be positive, got {self.sleep_target_seconds}"
            )
        if not 0 <= self.sleep_floor_seconds <= self.sleep_target_seconds:
            raise ValueError(
                f"sleep_floor_seconds must be between 0 and sleep_target_seconds "
                f"({self.sleep_target_seconds}), got {self.sleep_floor_seconds}"
            )
        if not math.isclose(self.weights.total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Score weights must sum to 1.0, got {self.weights.total}")
        self._validate_bands()

    def _validate_bands(self) -> None:
        if not self.bands:
            raise ValueError("At least one score band is required")
        if self.bands[-1].min_score is not None:
            raise ValueError("The last score band must be a catch-all (min_score=None)")
        thresholds = [b.min_score for b in self.bands[:-1]]
        if None in thresholds:
            raise ValueError("Only the last score band may be a catch-all")
        if thresholds != sorted(thresholds, reverse=True) or len(set(thresholds)) != len(thresholds):
            raise ValueError(f"Score band thresholds must be strictly descending, got {thresholds}")

    @property
    def sleep_floor_score(self) -> float:
        """Minimum sleep score for any recorded sleep (75 with the defaults)."""
        return self.sleep_floor_seconds / self.sleep_target_seconds * 100

    def hrv_score_for(self, status: HrvStatus) -> float:
        if status is HrvStatus.GOOD:
            return self.hrv_scores.good
        if status is HrvStatus.FAIR:
            return self.hrv_scores.fair
        if status is HrvStatus.POOR:
            return self.hrv_scores.poor
        # HrvStatus.UNKNOWN: anything the vendor sent that we don't recognize
        return self.hrv_scores.unknown

    def band_for(self, score: int) -> ScoreBand:
        for band in self.bands:
            if band.matches(score):
                return band
        # unreachable: the last band is validated to be a catch-all
        return self.bands[-1]

    def replace(self, **changes) -> "ScoringPolicy":
        """Return a validated copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_POLICY = ScoringPolicy()
