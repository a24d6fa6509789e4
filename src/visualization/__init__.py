"""Module de visualisation (graphiques Plotly)."""

from src.visualization.theme import apply_dashboard_plot_style
from src.visualization.bars import plot_bar_chart
from src.visualization.registry import ChartRegistry

__all__ = [
    "apply_dashboard_plot_style",
    "plot_bar_chart",
    "ChartRegistry",
]
