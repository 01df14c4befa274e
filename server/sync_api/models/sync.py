"""Sync job status models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class SyncLogEntry(BaseModel):
    """A single run of the sync job."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    started_at: Optional[str] = None
    ended_at: Optional[str] = None
    status: Optional[str] = None
    activities_count: Optional[int] = None
    synced_days: Optional[int] = None


class SyncStatusResponse(BaseModel):
    """Most recent sync runs, newest first."""

    recent: list[SyncLogEntry]


class ServiceHealth(BaseModel):
    """Service liveness plus the vendor connection flags."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    garmin_configured: bool = Field(default=False, serialization_alias="garminConfigured")
    garmin_authenticated: bool = Field(default=False, serialization_alias="garminAuthenticated")
