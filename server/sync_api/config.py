"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from health_score import ScoringPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Local store written by the sync job
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    db_filename: str = "garmin.sqlite"

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_path, self.db_filename)

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 17890
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:8081", "http://127.0.0.1:8081"]

    # Live wellness provider (unset disables live reads)
    wellness_url: Optional[str] = None
    wellness_timeout: float = 8.0

    # Scoring overrides
    step_goal: int = 10000
    sleep_target_hours: float = 8.0
    sleep_floor_hours: float = 6.0

    def scoring_policy(self) -> ScoringPolicy:
        return ScoringPolicy(
            step_goal=self.step_goal,
            sleep_target_seconds=self.sleep_target_hours * 3600,
            sleep_floor_seconds=self.sleep_floor_hours * 3600,
        )

    class Config:
        env_prefix = "SYNC_API_"


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_scoring_policy() -> ScoringPolicy:
    """Build the scoring policy once; invalid overrides raise ValueError here."""
    return get_settings().scoring_policy()
