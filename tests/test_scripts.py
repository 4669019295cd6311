"""
Script Tests - Tracker Stats

Tests for the synthetic snapshot generator and the resampler benchmark.
"""

from datetime import datetime

from generate_snapshot import generate_snapshot
from run_benchmark import run_benchmark


class TestGenerateSnapshot:
    """Tests for synthetic stats logs."""

    def test_running_counts(self):
        snapshot = generate_snapshot(days=1, announces=50, torrents=2, seed=1)

        assert len(snapshot) == 50
        assert snapshot.connections == list(range(1, 51))
        assert snapshot.completed == sorted(snapshot.completed)
        assert snapshot.torrents == 2

    def test_times_are_ordered_and_inside_window(self):
        end = datetime(2024, 1, 4, 0, 0, 0)
        snapshot = generate_snapshot(days=3, announces=100, torrents=1, seed=7, end=end)

        assert snapshot.times == sorted(snapshot.times)
        assert snapshot.times[0] >= "2024-01-01 00:00:00"
        assert snapshot.times[-1] <= "2024-01-04 00:00:00"

    def test_seed_is_reproducible(self):
        end = datetime(2024, 1, 4)
        first = generate_snapshot(days=1, announces=20, torrents=1, seed=3, end=end)
        second = generate_snapshot(days=1, announces=20, torrents=1, seed=3, end=end)
        assert first == second


class TestBenchmark:
    """Tests for the benchmark table."""

    def test_every_selection_is_timed(self):
        results = run_benchmark([30], repeats=1)

        assert len(results) == 8
        hourly = results[results["granularity"] == "hour"]
        assert hourly.set_index("lookback_hours")["grid_points"].to_dict() == {1: 1, 5: 5, 24: 24, 72: 72}
        assert (results["best_ms"] >= 0).all()
