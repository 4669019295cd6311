"""
Event wiring for the stats dashboard.

Every event (snapshot fetched, fetch failed, granularity or lookback
changed) updates the SnapshotStore and then recomputes the whole grid
from the full stored raw log before handing it to the chart sink.
"""
import logging

import pandas as pd

from config.settings import DEFAULT_TIMEZONE, SERIES_STYLES
from tracker_stats.data_loader import load_raw_log
from tracker_stats.resampler import (
    granularity_from_label, lookback_from_label, resample, to_frame
)
from tracker_stats.schema import SnapshotError
from tracker_stats.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


def utc_now():
    return pd.Timestamp.now(tz="UTC")


class StatsDashboard:
    def __init__(self, chart, store=None, clock=utc_now, timezone=DEFAULT_TIMEZONE):
        """
        Args:
            chart: sink with update(labels, series) and show_unavailable(message)
            store: SnapshotStore to drive (a fresh one by default)
            clock: callable returning the grid end time
            timezone: zone for snapshot timestamps without an offset
        """
        self.chart = chart
        self.store = store or SnapshotStore()
        self.clock = clock
        self.timezone = timezone
        self.frame = None

    def on_snapshot(self, payload):
        """Handle a fetched `database.json` payload."""
        try:
            raw_log = load_raw_log(payload, self.timezone)
        except SnapshotError as e:
            self.on_fetch_failed(e)
            return None
        self.store.load(raw_log)
        return self.recompute()

    def on_fetch_failed(self, reason):
        self.store.mark_unavailable(reason)
        self.frame = None
        self.chart.show_unavailable(f"Stats data unavailable: {self.store.error}")

    def on_granularity_changed(self, label):
        self.store.set_granularity(granularity_from_label(label))
        return self.recompute()

    def on_lookback_changed(self, label):
        self.store.set_lookback(lookback_from_label(label))
        return self.recompute()

    def recompute(self):
        """
        Resample the stored raw log with the current selection and push it
        to the chart. Returns the resampled frame, or None while no
        snapshot is loaded.
        """
        if not self.store.is_ready:
            return None

        points = resample(
            self.store.raw_log,
            self.store.granularity,
            self.store.lookback_hours,
            now=self.clock(),
        )
        counters = [c for c in self.store.raw_log.columns if c != 'timestamp']
        self.frame = to_frame(points, counters)

        labels = list(self.frame.index)
        series = {
            SERIES_STYLES.get(name, {}).get('label', name): self.frame[name].tolist()
            for name in counters
        }
        self.chart.update(labels, series)
        return self.frame
