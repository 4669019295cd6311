"""
Pytest Configuration and Fixtures - Tracker Stats

Provides shared snapshots, a frozen clock and a recording chart sink.
"""

import time

import pandas as pd
import pytest

from tracker_stats.data_loader import to_raw_log
from tracker_stats.schema import StatsSnapshot


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (no infrastructure)")
    config.addinivalue_line("markers", "api: snapshot API tests")


class RecordingChart:
    """Chart sink that keeps every update it receives."""

    def __init__(self):
        self.updates = []
        self.messages = []

    def update(self, labels, series):
        self.updates.append((labels, series))

    def show_unavailable(self, message):
        self.messages.append(message)

    @property
    def last(self):
        return self.updates[-1]


@pytest.fixture
def tokyo_system_zone(monkeypatch):
    """Run with the process zone set to UTC+9 (POSIX rule, no zone database needed)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")
    monkeypatch.setenv("TZ", "JST-9")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def frozen_now() -> pd.Timestamp:
    """Grid end used across resampling tests."""
    return pd.Timestamp("2024-01-01T12:00:00Z")


@pytest.fixture
def sample_payload() -> dict:
    """Snapshot with entries before and inside the last five hours."""
    return {
        "torrents": 3,
        "times": [
            "2024-01-01 05:10:00",
            "2024-01-01 08:15:00",
            "2024-01-01 10:59:59",
            "2024-01-01 11:00:00",
            "2024-01-01 11:30:30",
        ],
        "connections": [1, 2, 3, 4, 5],
        "completed": [0, 0, 1, 1, 2],
    }


@pytest.fixture
def sample_snapshot(sample_payload) -> StatsSnapshot:
    return StatsSnapshot.model_validate(sample_payload)


@pytest.fixture
def sample_raw_log(sample_snapshot) -> pd.DataFrame:
    return to_raw_log(sample_snapshot, timezone="UTC")


@pytest.fixture
def chart() -> RecordingChart:
    return RecordingChart()
