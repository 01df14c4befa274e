"""
Pytest fixtures for health score and sync API tests.
"""
import sys
import sqlite3
import pytest
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ and the repo root are on sys.path so tests can import
# health_score and server.sync_api without an install.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from health_score import DailyHealthMetrics  # noqa: E402


# ============================================================================
# Engine Fixtures
# ============================================================================

BASELINE_METRICS = {
    "steps": 10000,
    "sleep_seconds": 8 * 3600,
    "hrv_status": "good",
    "body_battery": 50,
    "avg_stress_level": 30,
}


@pytest.fixture
def make_metrics():
    """
    Factory fixture building DailyHealthMetrics from the baseline day.

    Keyword arguments override individual baseline fields.
    """

    def _make(**overrides) -> DailyHealthMetrics:
        values = dict(BASELINE_METRICS)
        values.update(overrides)
        return DailyHealthMetrics(**values)

    return _make


# ============================================================================
# Sync Store Fixtures
# ============================================================================

SCHEMA = """
CREATE TABLE sync_status (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
  garmin_configured INTEGER DEFAULT 0,
  garmin_authenticated INTEGER DEFAULT 0
);

CREATE TABLE daily_metrics (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  date DATE NOT NULL UNIQUE,
  steps INTEGER,
  resting_heart_rate REAL,
  body_battery INTEGER,
  sleep_seconds INTEGER,
  hrv_status TEXT,
  avg_stress_level REAL,
  created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE sync_logs (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  started_at DATETIME DEFAULT CURRENT_TIMESTAMP,
  ended_at DATETIME,
  status TEXT,
  activities_count INTEGER,
  synced_days INTEGER
);
"""

DAILY_ROWS = [
    # date, steps, resting_hr, body_battery, sleep_seconds, hrv_status, avg_stress_level
    ("2024-12-06", 3000, 61.0, 20, 4 * 3600, "poor", 70),
    ("2024-12-07", 8000, 58.0, 60, 7 * 3600, "fair", 40),
    ("2024-12-08", 10000, 55.0, 50, 8 * 3600, "good", 30),
    ("2024-12-09", 6500, 57.0, None, None, None, None),
]


@pytest.fixture
def sync_db(tmp_path):
    """Create a populated garmin.sqlite in a temporary directory and return its path."""
    db_path = tmp_path / "garmin.sqlite"
    conn = sqlite3.connect(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.executemany(
            """
            INSERT INTO daily_metrics
              (date, steps, resting_heart_rate, body_battery, sleep_seconds, hrv_status, avg_stress_level)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            DAILY_ROWS,
        )
        conn.execute(
            "INSERT INTO sync_status (garmin_configured, garmin_authenticated) VALUES (1, 0)"
        )
        conn.executemany(
            "INSERT INTO sync_logs (ended_at, status, activities_count, synced_days) VALUES (?, ?, ?, ?)",
            [
                ("2024-12-08T06:00:00Z", "success", 15, 1),
                ("2024-12-09T06:00:00Z", "success", 3, 1),
                (None, "running", None, None),
            ],
        )
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture
def api_client(sync_db, monkeypatch):
    """
    TestClient for the sync API reading from the temporary store.

    Live wellness reads are disabled; tests that need them patch
    server.sync_api.routes.score.fetch_live_wellness themselves.
    """
    from fastapi.testclient import TestClient
    from server.sync_api.config import Settings
    from server.sync_api.database import db_manager
    from server.sync_api.main import app
    from server.sync_api.routes import score

    monkeypatch.setattr(db_manager, "settings", Settings(data_path=str(sync_db.parent)))

    async def no_live_data(day, settings=None, client=None):
        return None

    monkeypatch.setattr(score, "fetch_live_wellness", no_live_data)

    with TestClient(app) as client:
        yield client
