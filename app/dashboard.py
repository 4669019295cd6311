import logging
import os
import sys

import streamlit as st

# Fix path to allow importing project packages when run via `streamlit run`
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from tracker_stats.utils import load_config, get_option
from tracker_stats.pipeline import StatsDashboard
from tracker_stats.snapshot_store import DataStatus
from config.settings import DEFAULT_TIMEZONE

from app.constants import (
    PAGE_TITLE, CHART_TITLE, GRANULARITY_OPTIONS, LOOKBACK_OPTIONS,
    DEFAULT_GRANULARITY_INDEX, DEFAULT_LOOKBACK_INDEX,
    DASHBOARD_KEY, CHART_KEY, GRANULARITY_KEY, LOOKBACK_KEY
)
from app.data_loader import load_snapshot
from app.visualization import PlotlyChartSink

# --- CONFIGURATION ---
CONFIG = load_config() or {}
SOURCE_URL = get_option(CONFIG, 'source', 'url')
SOURCE_FILE = get_option(CONFIG, 'source', 'file')
TIMEOUT = get_option(CONFIG, 'source', 'timeout_seconds', 5)
TIMEZONE = get_option(CONFIG, 'time', 'timezone', DEFAULT_TIMEZONE)

# --- LOGGING ---
logging.basicConfig(
    level=get_option(CONFIG, 'logging', 'level', 'INFO'),
    format="%(asctime)s [DASHBOARD] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=PAGE_TITLE, layout="wide")


def fetch_into(dashboard):
    payload = load_snapshot(SOURCE_URL, SOURCE_FILE, TIMEOUT)
    if payload is None:
        dashboard.on_fetch_failed(f"no snapshot at {SOURCE_URL} or {SOURCE_FILE}")
    else:
        dashboard.on_snapshot(payload)


def get_dashboard():
    if DASHBOARD_KEY not in st.session_state:
        chart = PlotlyChartSink(CHART_TITLE)
        dashboard = StatsDashboard(chart, timezone=TIMEZONE)
        st.session_state[CHART_KEY] = chart
        st.session_state[DASHBOARD_KEY] = dashboard
        logger.info("🚀 Initial snapshot fetch")
        fetch_into(dashboard)
    return st.session_state[DASHBOARD_KEY]


def on_granularity_change():
    st.session_state[DASHBOARD_KEY].on_granularity_changed(st.session_state[GRANULARITY_KEY])


def on_lookback_change():
    st.session_state[DASHBOARD_KEY].on_lookback_changed(st.session_state[LOOKBACK_KEY])


def on_refresh():
    load_snapshot.clear()
    fetch_into(st.session_state[DASHBOARD_KEY])


dashboard = get_dashboard()
chart = st.session_state[CHART_KEY]

# --- MAIN UI ---
st.title("📈 Tracker Stats")
st.markdown("### Connections and completed downloads over time")

# Sidebar
st.sidebar.header("🕹️ View")
st.sidebar.selectbox(
    "Granularity", GRANULARITY_OPTIONS,
    index=DEFAULT_GRANULARITY_INDEX, key=GRANULARITY_KEY,
    on_change=on_granularity_change
)
st.sidebar.selectbox(
    "Time window", LOOKBACK_OPTIONS,
    index=DEFAULT_LOOKBACK_INDEX, key=LOOKBACK_KEY,
    on_change=on_lookback_change
)
st.sidebar.button("🔄 Refresh snapshot", on_click=on_refresh)

if dashboard.store.status is DataStatus.UNAVAILABLE:
    st.error(chart.message or "Stats data unavailable")
elif chart.figure is None:
    st.info("Waiting for tracker stats...")
else:
    st.plotly_chart(chart.figure, use_container_width=True)

    with st.expander("📂 Resampled values"):
        st.dataframe(dashboard.frame, use_container_width=True)
