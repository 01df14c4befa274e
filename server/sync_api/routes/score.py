"""Health score API routes."""
import logging
from datetime import date

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from health_score import compute_health_score, merge_daily_metrics, metrics_from_row

from ..config import get_scoring_policy, get_settings
from ..models.score import DailyMetricsInput, HealthScoreResponse
from ..database import db_manager
from ..services.wellness_client import fetch_live_wellness

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Health Score"])


def _load_stored_metrics(day: date):
    """Return the stored daily_metrics values for a day, or None."""
    with db_manager.get_conn() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM daily_metrics WHERE date = ?", (day.isoformat(),))
        row = cursor.fetchone()

    return metrics_from_row(row) if row is not None else None


@router.post("/score", response_model=HealthScoreResponse)
async def score_metrics(metrics: DailyMetricsInput):
    """Compute the health score for caller-supplied metrics."""
    result = compute_health_score(metrics.to_metrics(), get_scoring_policy())
    return HealthScoreResponse.from_result(result, day=metrics.date, sources=["request"])


@router.get("/score/{day}", response_model=HealthScoreResponse)
async def get_daily_score(day: str):
    """
    Compute the health score for a day.

    Live wellness values take precedence over the locally stored daily
    metrics, field by field. The merged day is validated like a POSTed
    body; bad upstream data answers 502 rather than being scored.
    """
    try:
        target_day = date.fromisoformat(day)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid date '{day}'. Expected YYYY-MM-DD."
        )

    live = await fetch_live_wellness(target_day, get_settings())
    stored = _load_stored_metrics(target_day)

    if not live and not stored:
        raise HTTPException(status_code=404, detail=f"No metrics recorded for {day}")

    try:
        merged = merge_daily_metrics(target_day, live=live, stored=stored)
        metrics = DailyMetricsInput.model_validate(merged.to_dict()).to_metrics()
    except ValidationError as e:
        logger.error(f"[SCORE] Out-of-domain metrics for {day}: {e.errors()}")
        raise HTTPException(status_code=502, detail=f"Invalid upstream metrics for {day}")
    except ValueError as e:
        logger.error(f"[SCORE] Cannot assemble metrics for {day}: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    sources = [name for name, values in (("live", live), ("stored", stored)) if values]
    result = compute_health_score(metrics, get_scoring_policy())
    logger.info(f"[SCORE] {day}: {result.score} ({result.label.value}) from {'+'.join(sources)}")

    return HealthScoreResponse.from_result(result, day=target_day, sources=sources)
