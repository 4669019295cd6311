"""
Snapshot Client Module
Fetches the tracker's `database.json` stats snapshot over HTTP
"""
import logging

import requests

logger = logging.getLogger(__name__)


class TrackerStatsClient:
    """Client for the tracker stats snapshot endpoint"""

    def __init__(self, snapshot_url, timeout=5):
        """
        Initialize the client

        Args:
            snapshot_url: Full URL of the snapshot (e.g., http://localhost:8080/database.json)
            timeout: Request timeout in seconds
        """
        self.snapshot_url = snapshot_url
        self.timeout = timeout

    def get_snapshot(self):
        """
        GET the snapshot

        Returns:
            dict with the decoded payload or None if error
        """
        try:
            resp = requests.get(self.snapshot_url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Connection Error: Is the tracker running? {e}")
            return None

        if resp.status_code != 200:
            logger.warning(f"Snapshot API Error: {resp.status_code}")
            return None

        try:
            return resp.json()
        except ValueError as e:
            logger.warning(f"Snapshot is not valid JSON: {e}")
            return None
