"""
Visualization Module
Chart creation for the resampled tracker counters
"""
import plotly.graph_objects as go

from config.settings import PLOT_CONFIG, SERIES_STYLES

_STYLES_BY_LABEL = {style['label']: style for style in SERIES_STYLES.values()}


def create_stats_chart(labels, series, title="Tracker activity"):
    """
    Create the counters line chart

    Args:
        labels: Grid timestamps (shared x-axis)
        series: dict mapping a display label to values aligned with labels
        title: Chart title

    Returns:
        Plotly Figure object
    """
    fig = go.Figure()

    for name, values in series.items():
        style = _STYLES_BY_LABEL.get(name, {})
        fig.add_trace(go.Scatter(
            x=labels, y=values,
            mode='lines', name=name,
            line=dict(color=style.get('line'), width=2, shape='linear'),
            fill='tozeroy',
            fillcolor=style.get('fill'),
        ))

    fig.update_layout(
        title=title,
        xaxis_title="Time",
        yaxis_title="Count",
        height=PLOT_CONFIG['height'],
        margin=dict(l=20, r=20, t=40, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    fig.update_xaxes(type='date', tickformat=PLOT_CONFIG['date_format'])
    fig.update_yaxes(rangemode='tozero')

    return fig


class PlotlyChartSink:
    """Keeps the latest figure; the page renders whatever it holds."""

    def __init__(self, title="Tracker activity"):
        self.title = title
        self.figure = None
        self.message = None

    def update(self, labels, series):
        self.figure = create_stats_chart(labels, series, self.title)
        self.message = None

    def show_unavailable(self, message):
        self.figure = None
        self.message = message
