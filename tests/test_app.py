"""
Dashboard Adapter Tests - Tracker Stats

Tests for the HTTP client, snapshot fetching and the plotly chart sink.
"""

import json

import pytest
import requests

from app.api_client import TrackerStatsClient
from app.data_loader import fetch_snapshot
from app.visualization import PlotlyChartSink, create_stats_chart


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response=None, error=None):
        def _get(url, timeout=None):
            calls.append((url, timeout))
            if error is not None:
                raise error
            return response
        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install


class TestTrackerStatsClient:
    """Tests for the snapshot HTTP client."""

    def test_success(self, fake_get, sample_payload):
        calls = fake_get(FakeResponse(200, sample_payload))
        client = TrackerStatsClient("http://tracker/database.json", timeout=3)

        assert client.get_snapshot() == sample_payload
        assert calls == [("http://tracker/database.json", 3)]

    def test_http_error(self, fake_get):
        fake_get(FakeResponse(404))
        assert TrackerStatsClient("http://tracker/database.json").get_snapshot() is None

    def test_connection_error(self, fake_get):
        fake_get(error=requests.ConnectionError("refused"))
        assert TrackerStatsClient("http://tracker/database.json").get_snapshot() is None

    def test_invalid_json(self, fake_get):
        fake_get(FakeResponse(200, None, text="<html>"))
        assert TrackerStatsClient("http://tracker/database.json").get_snapshot() is None


class TestFetchSnapshot:
    """Tests for URL-then-file fetching."""

    def test_url_first(self, fake_get, tmp_path, sample_payload):
        fake_get(FakeResponse(200, sample_payload))
        assert fetch_snapshot("http://tracker/database.json", str(tmp_path / "x.json")) == sample_payload

    def test_falls_back_to_file(self, fake_get, tmp_path, sample_payload):
        fake_get(error=requests.ConnectionError("refused"))
        path = tmp_path / "database.json"
        path.write_text(json.dumps(sample_payload))

        assert fetch_snapshot("http://tracker/database.json", str(path)) == sample_payload

    def test_nothing_available(self, fake_get, tmp_path):
        fake_get(error=requests.ConnectionError("refused"))
        assert fetch_snapshot("http://tracker/database.json", str(tmp_path / "missing.json")) is None

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "database.json"
        path.write_text("{broken")
        assert fetch_snapshot(None, str(path)) is None


class TestChart:
    """Tests for the plotly chart sink."""

    def test_one_trace_per_series(self):
        fig = create_stats_chart(
            [1, 2, 3],
            {"Active connections": [1, 2, 3], "Completed connections": [0, 1, 1]},
        )

        assert [trace.name for trace in fig.data] == ["Active connections", "Completed connections"]
        assert list(fig.data[0].y) == [1, 2, 3]
        assert fig.data[0].line.color == "rgba(0,0,255,1)"

    def test_sink_update_and_unavailable(self):
        sink = PlotlyChartSink()
        sink.update([1], {"Torrent count": [3]})

        assert sink.figure is not None
        assert sink.figure.data[0].fillcolor == "rgba(0,255,0,0.3)"

        sink.show_unavailable("Stats data unavailable: timeout")

        assert sink.figure is None
        assert sink.message == "Stats data unavailable: timeout"
