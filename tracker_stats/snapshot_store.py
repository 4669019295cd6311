import logging
from enum import Enum

from tracker_stats.data_loader import empty_raw_log
from tracker_stats.resampler import LOOKBACK_OPTIONS, Granularity

logger = logging.getLogger(__name__)


class DataStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    UNAVAILABLE = "unavailable"


class SnapshotStore:
    """Holds the last fetched raw log and the current grid selection."""

    def __init__(self, granularity=Granularity.HOUR, lookback_hours=1):
        self.raw_log = empty_raw_log()
        self.granularity = Granularity(granularity)
        self.lookback_hours = self._checked_lookback(lookback_hours)
        self.status = DataStatus.PENDING
        self.error = None

    @staticmethod
    def _checked_lookback(hours):
        if hours not in LOOKBACK_OPTIONS:
            raise ValueError(f"Lookback must be one of {LOOKBACK_OPTIONS} hours, got {hours!r}")
        return hours

    @property
    def is_ready(self):
        return self.status is DataStatus.READY

    def load(self, raw_log):
        """Replace the stored raw log wholesale."""
        self.raw_log = raw_log
        self.status = DataStatus.READY
        self.error = None
        logger.info(f"📥 Snapshot loaded ({len(raw_log)} raw entries)")

    def mark_unavailable(self, reason):
        self.status = DataStatus.UNAVAILABLE
        self.error = str(reason)
        logger.warning(f"⚠️ Snapshot unavailable: {self.error}")

    def set_granularity(self, granularity):
        self.granularity = Granularity(granularity)

    def set_lookback(self, hours):
        self.lookback_hours = self._checked_lookback(hours)
