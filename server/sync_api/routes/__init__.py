"""API route modules."""
from .daily import router as daily_router
from .sync import router as sync_router
from .score import router as score_router

__all__ = [
    "daily_router",
    "sync_router",
    "score_router",
]
