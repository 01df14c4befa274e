"""Daily metrics API routes."""
from fastapi import APIRouter, Query

from ..models.daily import DailyMetricsRecord, DailyMetricsList
from ..database import db_manager

router = APIRouter(tags=["Daily Metrics"])


def _row_to_daily(row) -> DailyMetricsRecord:
    """Convert SQLite row to DailyMetricsRecord model."""
    keys = row.keys()

    # Helper to safely convert numbers (handles float strings like '8500.0' and blanks)
    def to_int(val):
        return int(float(val)) if val not in (None, "") else None

    def to_float(val):
        return float(val) if val not in (None, "") else None

    return DailyMetricsRecord(
        date=str(row["date"]),
        steps=to_int(row["steps"]),
        resting_heart_rate=to_float(row["resting_heart_rate"]),
        body_battery=to_int(row["body_battery"]),
        sleep_seconds=to_int(row["sleep_seconds"]),
        hrv_status=row["hrv_status"] or None,
        avg_stress_level=to_float(row["avg_stress_level"]) if "avg_stress_level" in keys else None,
        created_at=row["created_at"] if "created_at" in keys else None,
    )


@router.get("/daily", response_model=DailyMetricsList)
async def get_daily_metrics(
    days: int = Query(default=7, ge=1, le=90, description="Number of most recent days"),
):
    """Get the most recently synced daily metrics, newest first."""
    with db_manager.get_conn() as conn:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT * FROM daily_metrics
            ORDER BY date DESC
            LIMIT ?
            """,
            (days,),
        )
        rows = cursor.fetchall()

    return DailyMetricsList(items=[_row_to_daily(row) for row in rows])
