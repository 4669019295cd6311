from pathlib import Path

# ===========================
# Project Paths
# ===========================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CONFIG_PATH = "config/dashboard_config.yaml"
DEFAULT_DATABASE_PATH = DATA_DIR / "database.json"

# ===========================
# Snapshot Format
# ===========================
# Format the tracker uses when it appends a connection to the stats log
TIME_FORMAT = '%Y-%m-%d %H:%M:%S'
# Naive times are wall clock in this zone; 'local' is the system zone
LOCAL_TIMEZONE = 'local'
DEFAULT_TIMEZONE = LOCAL_TIMEZONE

CONNECTIONS = 'connections'
COMPLETED = 'completed'
TORRENTS = 'torrents'

# ===========================
# Selection Labels
# ===========================
GRANULARITY_LABELS = {
    'In hours': 'hour',
    'In minutes': 'minute',
}

LOOKBACK_LABELS = {
    'Last hour': 1,
    'Last five hours': 5,
    'Last day': 24,
    'Last three days': 72,
}

# Fallbacks for unrecognized selection text
FALLBACK_GRANULARITY = 'minute'
FALLBACK_LOOKBACK_HOURS = 72

# ===========================
# Chart Series
# ===========================
SERIES_STYLES = {
    CONNECTIONS: {
        'label': 'Active connections',
        'line': 'rgba(0,0,255,1)',
        'fill': 'rgba(0,0,255,0.3)',
    },
    COMPLETED: {
        'label': 'Completed connections',
        'line': 'rgba(255,0,0,1)',
        'fill': 'rgba(255,0,0,0.3)',
    },
    TORRENTS: {
        'label': 'Torrent count',
        'line': 'rgba(0,255,0,1)',
        'fill': 'rgba(0,255,0,0.3)',
    },
}

# ===========================
# Visualization Parameters
# ===========================
PLOT_CONFIG = {
    'height': 450,
    'date_format': '%a %H:%M',
}
