"""
Dashboard UI Constants
"""

PAGE_TITLE = "Tracker Stats"
CHART_TITLE = "Tracker activity"

# Sidebar selectors (keys into config.settings label maps)
GRANULARITY_OPTIONS = ['In hours', 'In minutes']
LOOKBACK_OPTIONS = ['Last hour', 'Last five hours', 'Last day', 'Last three days']
DEFAULT_GRANULARITY_INDEX = 0
DEFAULT_LOOKBACK_INDEX = 0

# Session state keys
DASHBOARD_KEY = 'stats_dashboard'
CHART_KEY = 'stats_chart'
GRANULARITY_KEY = 'granularity_label'
LOOKBACK_KEY = 'lookback_label'
