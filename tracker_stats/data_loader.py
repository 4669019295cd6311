import logging

import pandas as pd

from config.settings import (
    COMPLETED, CONNECTIONS, DEFAULT_TIMEZONE, LOCAL_TIMEZONE, TORRENTS
)
from tracker_stats.schema import SnapshotFormatError, StatsSnapshot

logger = logging.getLogger(__name__)


def _localize(ts, timezone):
    if timezone in (None, LOCAL_TIMEZONE):
        # System zone, the one the tracker writes its wall clock in
        return pd.Timestamp(ts.to_pydatetime().astimezone())
    # Repeated autumn hour reads as the first (summer) pass, skipped spring hour moves forward
    return ts.tz_localize(timezone, ambiguous=True, nonexistent='shift_forward')


def parse_timestamps(times, timezone=DEFAULT_TIMEZONE):
    """
    Parse timestamp strings into tz-aware UTC timestamps.

    Strings without an offset are read as wall-clock time in `timezone`
    ('local' means the system zone).
    """
    parsed = []
    for raw in times:
        try:
            ts = pd.Timestamp(raw)
            if pd.isna(ts):
                raise ValueError("not a time")
            if ts.tzinfo is None:
                ts = _localize(ts, timezone)
        except (ValueError, TypeError, OverflowError) as e:
            raise SnapshotFormatError(f"Unparseable timestamp: {raw!r} ({e})") from e
        parsed.append(ts.tz_convert("UTC"))
    return parsed


def empty_raw_log(counters=(CONNECTIONS, COMPLETED)):
    return pd.DataFrame({
        'timestamp': pd.Series([], dtype='datetime64[ns, UTC]'),
        **{name: pd.Series([], dtype='int64') for name in counters},
    })


def to_raw_log(snapshot, timezone=DEFAULT_TIMEZONE):
    """
    Convert a StatsSnapshot into the columnar raw log.

    Returns:
        DataFrame with a UTC 'timestamp' column and one int column per
        tracked counter, ordered by timestamp
    """
    columns = {
        CONNECTIONS: snapshot.connections,
        COMPLETED: snapshot.completed,
    }
    torrents = snapshot.torrent_series()
    if torrents is not None:
        columns[TORRENTS] = torrents

    if len(snapshot) == 0:
        return empty_raw_log(list(columns))

    df = pd.DataFrame({
        'timestamp': parse_timestamps(snapshot.times, timezone),
        **{name: pd.Series(values, dtype='int64') for name, values in columns.items()},
    })

    if not df['timestamp'].is_monotonic_increasing:
        logger.warning("⚠️ Snapshot timestamps are out of order, sorting before resampling")
        df = df.sort_values('timestamp', kind='stable').reset_index(drop=True)

    return df


def load_raw_log(payload, timezone=DEFAULT_TIMEZONE):
    """Validate a decoded `database.json` payload and return its raw log."""
    snapshot = StatsSnapshot.from_payload(payload)
    logger.info(f"Loaded snapshot with {len(snapshot)} entries")
    return to_raw_log(snapshot, timezone)


def load_raw_log_file(file_path, timezone=DEFAULT_TIMEZONE):
    snapshot = StatsSnapshot.from_file(file_path)
    logger.info(f"Loaded {len(snapshot)} entries from {file_path}")
    return to_raw_log(snapshot, timezone)
