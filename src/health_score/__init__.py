"""
Health Score Engine.

Computes a single 0-100 daily health score from steps, sleep, HRV status,
body battery and stress.
"""

from .engine import compute_health_score, score_components, weighted_score
from .merge import coerce_metric, merge_daily_metrics, metrics_from_row
from .models import (
    ComponentScore,
    DailyHealthMetrics,
    HealthScoreResult,
    HrvStatus,
    ScoreBreakdown,
    ScoreLabel,
    round_half_up,
)
from .policy import DEFAULT_POLICY, ScoreBand, ScoreWeights, ScoringPolicy

__all__ = [
    "compute_health_score",
    "score_components",
    "weighted_score",
    "coerce_metric",
    "merge_daily_metrics",
    "metrics_from_row",
    "ComponentScore",
    "DailyHealthMetrics",
    "HealthScoreResult",
    "HrvStatus",
    "ScoreBreakdown",
    "ScoreLabel",
    "round_half_up",
    "DEFAULT_POLICY",
    "ScoreBand",
    "ScoreWeights",
    "ScoringPolicy",
]
