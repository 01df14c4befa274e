"""Pydantic models for sync API responses."""
from .daily import DailyMetricsRecord, DailyMetricsList
from .sync import SyncLogEntry, SyncStatusResponse, ServiceHealth
from .score import DailyMetricsInput, ComponentBreakdown, HealthScoreResponse

__all__ = [
    "DailyMetricsRecord",
    "DailyMetricsList",
    "SyncLogEntry",
    "SyncStatusResponse",
    "ServiceHealth",
    "DailyMetricsInput",
    "ComponentBreakdown",
    "HealthScoreResponse",
]
