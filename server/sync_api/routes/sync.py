"""Sync job status API routes."""
from fastapi import APIRouter

from ..models.sync import SyncLogEntry, SyncStatusResponse, ServiceHealth
from ..database import db_manager

router = APIRouter(tags=["Sync"])


@router.get("/sync/status", response_model=SyncStatusResponse)
async def get_sync_status():
    """Get the ten most recent sync runs."""
    with db_manager.get_conn() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM sync_logs ORDER BY id DESC LIMIT 10")
        rows = cursor.fetchall()

    return SyncStatusResponse(recent=[SyncLogEntry.model_validate(dict(row)) for row in rows])


def get_service_health() -> ServiceHealth:
    """Read the vendor connection flags from the latest sync_status row."""
    with db_manager.get_conn() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM sync_status ORDER BY id DESC LIMIT 1")
        row = cursor.fetchone()

    if row is None:
        return ServiceHealth()

    return ServiceHealth(
        garmin_configured=bool(row["garmin_configured"]),
        garmin_authenticated=bool(row["garmin_authenticated"]),
    )
