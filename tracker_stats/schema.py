"""
Snapshot schema for the tracker's stats log (`database.json`).

The tracker appends one entry per announce: the wall-clock time, the
running connection count and the running completed count. The torrent
count is either a single current value or a per-entry series.
"""
import logging
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ValidationError, model_validator

from config.settings import TIME_FORMAT

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """Base error for snapshots that cannot be used."""


class SnapshotFileError(SnapshotError):
    """The snapshot file could not be opened or read."""


class SnapshotFormatError(SnapshotError):
    """The snapshot payload has the wrong shape or unparseable values."""


class StatsSnapshot(BaseModel):
    times: list[str] = []
    connections: list[int] = []
    completed: list[int] = []
    torrents: Optional[Union[int, list[int]]] = None

    @model_validator(mode="after")
    def check_parallel_lengths(self):
        lengths = {
            "times": len(self.times),
            "connections": len(self.connections),
            "completed": len(self.completed),
        }
        if isinstance(self.torrents, list):
            lengths["torrents"] = len(self.torrents)
        if len(set(lengths.values())) > 1:
            raise ValueError(f"parallel sequences differ in length: {lengths}")
        return self

    def __len__(self):
        return len(self.times)

    def torrent_series(self):
        """Torrent count per entry, or None when the counter is not tracked."""
        if self.torrents is None:
            return None
        if isinstance(self.torrents, list):
            return list(self.torrents)
        return [self.torrents] * len(self.times)

    def add_new_connection(self, is_completed, at=None):
        """
        Append one announce to the log.

        Args:
            is_completed: whether the announcing peer finished its download
            at: datetime of the announce (defaults to local now); aware
                datetimes are written as local wall clock
        """
        at = at or datetime.now()
        if at.tzinfo is not None:
            at = at.astimezone()
        self.times.append(at.strftime(TIME_FORMAT))

        last_connections = self.connections[-1] if self.connections else 0
        self.connections.append(last_connections + 1)

        last_completed = self.completed[-1] if self.completed else 0
        self.completed.append(last_completed + 1 if is_completed else last_completed)

        if isinstance(self.torrents, list):
            self.torrents.append(self.torrents[-1] if self.torrents else 0)

    def to_json_string(self):
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def from_payload(cls, payload):
        """Validate an already-decoded JSON object."""
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise SnapshotFormatError(f"Invalid snapshot: {e}") from e

    @classmethod
    def from_file(cls, file_path):
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = f.read()
        except OSError as e:
            logger.debug(f"Snapshot file {file_path} unreadable: {e}")
            raise SnapshotFileError(f"Cannot open snapshot file {file_path}: {e}") from e

        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            logger.warning(f"Snapshot file {file_path} failed validation ({e.error_count()} errors)")
            raise SnapshotFormatError(f"Invalid snapshot in {file_path}: {e}") from e
