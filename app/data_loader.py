"""
Snapshot Loading Module
Fetches the snapshot from the tracker, falling back to a local file
"""
import json
import logging
import os

import streamlit as st

from app.api_client import TrackerStatsClient

logger = logging.getLogger(__name__)


def fetch_snapshot(source_url=None, source_file=None, timeout=5):
    """
    Fetch the raw snapshot payload.

    Args:
        source_url: URL of `database.json` (tried first)
        source_file: Local path of a `database.json` copy
        timeout: HTTP timeout in seconds

    Returns:
        dict payload, or None if no source could be read
    """
    if source_url:
        payload = TrackerStatsClient(source_url, timeout=timeout).get_snapshot()
        if payload is not None:
            return payload
        logger.warning(f"Could not fetch {source_url}, trying local file")

    if source_file and os.path.exists(source_file):
        try:
            with open(source_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot read snapshot file {source_file}: {e}")
            return None

    return None


@st.cache_data(ttl=60)
def load_snapshot(source_url=None, source_file=None, timeout=5):
    """Cached wrapper around fetch_snapshot for the Streamlit page."""
    with st.spinner('Fetching tracker stats...'):
        return fetch_snapshot(source_url, source_file, timeout)
