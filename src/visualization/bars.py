"""Graphiques en barres (histogramme d'étages, classements, paires)."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from src.config import DASHBOARD_COLORS, PLOT_CONFIG
from src.visualization.theme import apply_dashboard_plot_style, get_default_layout_kwargs


def plot_bar_chart(
    title: str,
    series_name: str,
    labels: Sequence[str],
    values: Sequence[float],
    color: str = DASHBOARD_COLORS.steel,
) -> go.Figure:
    """Graphique en barres verticales, une série.

    Args:
        title: Titre affiché au-dessus du graphique.
        series_name: Nom de la série (repris dans le survol).
        labels: Libellés de l'axe X, dans l'ordre d'affichage.
        values: Valeurs alignées sur labels.
        color: Couleur des barres.

    Returns:
        Figure Plotly stylisée (vide mais titrée si aucune donnée).
    """
    fig = go.Figure()
    if labels:
        fig.add_trace(
            go.Bar(
                x=list(labels),
                y=list(values),
                name=series_name,
                marker_color=color,
                opacity=PLOT_CONFIG.bar_opacity,
                hovertemplate=f"%{{x}}<br>{series_name}: %{{y}}<extra></extra>",
            )
        )
    fig.update_layout(**get_default_layout_kwargs())
    fig.update_xaxes(type="category")
    return apply_dashboard_plot_style(fig, title=title, height=PLOT_CONFIG.default_height)
