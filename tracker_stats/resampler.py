"""
Step resampling of the tracker stats log.

The raw log is sparse: one row per announce, at irregular times. The
chart wants one value per hour or per minute over the selected window,
so each grid point carries forward the last counter values seen up to
the end of its interval (last observation carried forward).

The cursor into the raw log only moves forward, so a full pass costs
O(len(raw_log) + len(grid)).
"""
import logging
from dataclasses import dataclass
from enum import Enum

import pandas as pd

from config.settings import (
    FALLBACK_GRANULARITY, FALLBACK_LOOKBACK_HOURS,
    GRANULARITY_LABELS, LOOKBACK_LABELS
)

logger = logging.getLogger(__name__)

LOOKBACK_OPTIONS = tuple(sorted(set(LOOKBACK_LABELS.values())))


class Granularity(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"

    @property
    def step(self):
        if self is Granularity.HOUR:
            return pd.Timedelta(hours=1)
        return pd.Timedelta(minutes=1)


def granularity_from_label(text):
    """Map the selector text to a Granularity; unknown text means minutes."""
    return Granularity(GRANULARITY_LABELS.get(text, FALLBACK_GRANULARITY))


def lookback_from_label(text):
    """Map the selector text to hours; unknown text means three days."""
    return LOOKBACK_LABELS.get(text, FALLBACK_LOOKBACK_HOURS)


def is_in_time(timestamp, grid_time, granularity):
    """True if `timestamp` falls in [grid_time, grid_time + one unit)."""
    return grid_time <= timestamp < grid_time + granularity.step


@dataclass(frozen=True)
class GridPoint:
    timestamp: pd.Timestamp
    values: dict
    # Raw-log cursor after this point's interval was consumed
    raw_index: int


def _as_utc(ts):
    ts = pd.Timestamp(ts)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def resample(raw_log, granularity, lookback_hours, now=None, counters=None):
    """
    Resample the raw log onto a regular grid.

    The grid runs from `now - lookback_hours` (inclusive) to `now`
    (exclusive), one point per granularity unit. Every counter defaults
    to 0 until a raw entry has been seen.

    Args:
        raw_log: DataFrame with a 'timestamp' column and counter columns
        granularity: Granularity of the grid
        lookback_hours: span of history covered by the grid
        now: end of the grid (defaults to the current UTC time)
        counters: counter columns to carry (defaults to every non-timestamp column)

    Returns:
        list of GridPoint in timestamp order
    """
    granularity = Granularity(granularity)
    now = _as_utc(now) if now is not None else pd.Timestamp.now(tz="UTC")
    start = now - pd.Timedelta(hours=lookback_hours)
    step = granularity.step

    if counters is None:
        counters = [c for c in raw_log.columns if c != 'timestamp']
    times = raw_log['timestamp'].tolist()
    columns = {name: raw_log[name].tolist() for name in counters}
    size = len(times)

    last_known = {name: 0 for name in counters}

    def adopt(index):
        for name in counters:
            last_known[name] = int(columns[name][index])

    # Seek: consume every entry older than the grid start
    pos = 0
    while pos < size and times[pos] < start:
        adopt(pos)
        pos += 1

    points = []
    current = start
    while current < now:
        while pos < size and is_in_time(times[pos], current, granularity):
            adopt(pos)
            pos += 1
        points.append(GridPoint(current, dict(last_known), pos))
        current = current + step

    logger.debug(
        f"Resampled {size} raw entries into {len(points)} {granularity.value} points "
        f"(lookback {lookback_hours}h, cursor stopped at {pos})"
    )
    return points


def to_frame(points, counters=None):
    """
    Build the chart input: a DataFrame indexed by grid timestamp with one
    column per counter.
    """
    if counters is None:
        counters = list(points[0].values) if points else []
    index = pd.DatetimeIndex([p.timestamp for p in points], name='timestamp')
    data = {name: [p.values[name] for p in points] for name in counters}
    return pd.DataFrame(data, index=index)
