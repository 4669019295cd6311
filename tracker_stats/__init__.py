# Snapshot schema and loading
from tracker_stats.schema import (
    StatsSnapshot,
    SnapshotError,
    SnapshotFileError,
    SnapshotFormatError,
)
from tracker_stats.data_loader import (
    parse_timestamps,
    to_raw_log,
    load_raw_log,
    load_raw_log_file,
)

# Resampling
from tracker_stats.resampler import (
    Granularity,
    GridPoint,
    LOOKBACK_OPTIONS,
    granularity_from_label,
    lookback_from_label,
    is_in_time,
    resample,
    to_frame,
)

# State and event wiring
from tracker_stats.snapshot_store import SnapshotStore, DataStatus
from tracker_stats.pipeline import StatsDashboard

__all__ = [
    # Snapshot
    'StatsSnapshot',
    'SnapshotError',
    'SnapshotFileError',
    'SnapshotFormatError',
    'parse_timestamps',
    'to_raw_log',
    'load_raw_log',
    'load_raw_log_file',
    # Resampling
    'Granularity',
    'GridPoint',
    'LOOKBACK_OPTIONS',
    'granularity_from_label',
    'lookback_from_label',
    'is_in_time',
    'resample',
    'to_frame',
    # State
    'SnapshotStore',
    'DataStatus',
    'StatsDashboard',
]
