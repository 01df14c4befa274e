"""Garmin Sync API - FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_scoring_policy, get_settings
from .routes import daily, sync, score

settings = get_settings()

# Invalid scoring overrides raise here, while the app is imported
get_scoring_policy()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Garmin Sync API",
    description="Read-only API over locally synced Garmin data, with daily health scores",
    version="1.0.0",
)

# Configure CORS for the mobile client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(daily.router)
app.include_router(sync.router)
app.include_router(score.router)


@app.get("/health")
async def health_check():
    """Health check endpoint, including the Garmin connection flags."""
    return sync.get_service_health().model_dump(by_alias=True)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.sync_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
