"""
Health score engine.

Turns one day of biometric signals into a single 0-100 health score:

    weighted = steps*0.25 + sleep*0.25 + hrv*0.15 + body_battery*0.15 + stress*0.20
    score = round_half_up(weighted)

Each component is normalized to 0-100 first, missing signals are replaced
with the policy defaults, and the label/color band is chosen from the
rounded score. All functions are pure and safe to call from any thread.
"""

import logging
from typing import Optional

from .models import (
    ComponentScore,
    DailyHealthMetrics,
    HealthScoreResult,
    HrvStatus,
    ScoreBreakdown,
    round_half_up,
)
from .policy import DEFAULT_POLICY, ScoringPolicy

logger = logging.getLogger(__name__)


def step_score(steps: float, policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """Linear ramp to the step goal, capped at 100."""
    return min(steps / policy.step_goal * 100, 100)


def sleep_score(sleep_seconds: Optional[float], policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """
    Linear ramp toward the sleep target, floored for any recorded sleep.

    No sleep data (None or 0) scores the default, which is lower than the floor.
    """
    if not sleep_seconds:
        return policy.default_sleep_score
    return max(sleep_seconds / policy.sleep_target_seconds * 100, policy.sleep_floor_score)


def hrv_score(hrv_status, policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    return policy.hrv_score_for(HrvStatus.parse(hrv_status))


def body_battery_score(body_battery: Optional[float], policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """Body battery passes through unchanged; 0 is a real reading."""
    if body_battery is None:
        return policy.default_body_battery_score
    return body_battery


def stress_score(avg_stress_level: Optional[float], policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """Inverted stress level, floored at 0; 0 stress is a real reading."""
    if avg_stress_level is None:
        return policy.default_stress_score
    return max(100 - avg_stress_level, 0)


def score_components(
    metrics: DailyHealthMetrics, policy: ScoringPolicy = DEFAULT_POLICY
) -> ScoreBreakdown:
    """Normalize every signal of a day into its component score."""
    colors = policy.component_colors
    return ScoreBreakdown(
        steps=ComponentScore("steps", step_score(metrics.steps, policy), colors.steps),
        sleep=ComponentScore("sleep", sleep_score(metrics.sleep_seconds, policy), colors.sleep),
        hrv=ComponentScore("hrv", hrv_score(metrics.hrv_status, policy), colors.hrv),
        body_battery=ComponentScore(
            "body_battery", body_battery_score(metrics.body_battery, policy), colors.body_battery
        ),
        stress=ComponentScore("stress", stress_score(metrics.avg_stress_level, policy), colors.stress),
    )


def weighted_score(breakdown: ScoreBreakdown, policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """Unrounded weighted sum of the component scores."""
    weights = policy.weights
    return (
        breakdown.steps.value * weights.steps
        + breakdown.sleep.value * weights.sleep
        + breakdown.hrv.value * weights.hrv
        + breakdown.body_battery.value * weights.body_battery
        + breakdown.stress.value * weights.stress
    )


def compute_health_score(
    metrics: DailyHealthMetrics, policy: ScoringPolicy = DEFAULT_POLICY
) -> HealthScoreResult:
    """
    Score one day of metrics.

    Args:
        metrics: The day's signals; only steps is required
        policy: Scoring configuration (defaults to DEFAULT_POLICY)

    Returns:
        HealthScoreResult with the rounded score, its band label and color,
        and the component breakdown
    """
    breakdown = score_components(metrics, policy)
    weighted = weighted_score(breakdown, policy)
    score = round_half_up(weighted)
    band = policy.band_for(score)

    components = ", ".join(f"{c.name}={c.value:.1f}" for c in breakdown)
    logger.debug(
        f"[SCORE] day={metrics.day} weighted={weighted:.2f} score={score} "
        f"label={band.label.value} ({components})"
    )

    return HealthScoreResult(
        score=score,
        label=band.label,
        color=band.color,
        breakdown=breakdown,
    )
