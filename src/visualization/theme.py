"""Thème et style des graphiques Plotly."""

from __future__ import annotations

import plotly.graph_objects as go

from src.config import DASHBOARD_COLORS, PLOT_CONFIG


def apply_dashboard_plot_style(
    fig: go.Figure,
    *,
    title: str | None = None,
    height: int | None = None,
) -> go.Figure:
    """Applique le thème sombre du dashboard aux graphiques Plotly.

    Args:
        fig: Figure Plotly à styliser.
        title: Titre optionnel (blanc, taille PLOT_CONFIG.title_font_size).
        height: Hauteur optionnelle en pixels.

    Returns:
        La figure stylisée (modifiée in-place).
    """
    colors = DASHBOARD_COLORS

    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor=colors.bg_plot,
        plot_bgcolor=colors.bg_plot,
        font=dict(color=colors.text_primary, size=13),
        showlegend=False,
        hoverlabel=dict(bordercolor=colors.border),
    )

    if title is not None:
        fig.update_layout(
            title=dict(
                text=title,
                font=dict(color=colors.text_primary, size=PLOT_CONFIG.title_font_size),
            )
        )
    if height is not None:
        fig.update_layout(height=height)

    fig.update_xaxes(
        showgrid=False,
        showline=True,
        linecolor=colors.border,
    )
    fig.update_yaxes(
        showgrid=True,
        gridcolor="rgba(255,255,255,0.07)",
        zeroline=False,
        rangemode="tozero",
    )

    return fig


def get_default_layout_kwargs(height: int | None = None) -> dict:
    """Retourne les kwargs de layout par défaut.

    Args:
        height: Hauteur en pixels (default: PLOT_CONFIG.default_height).

    Returns:
        Dictionnaire de kwargs pour fig.update_layout().
    """
    cfg = PLOT_CONFIG
    return {
        "height": height or cfg.default_height,
        "margin": dict(
            l=cfg.margin_left,
            r=cfg.margin_right,
            t=cfg.margin_top,
            b=cfg.margin_bottom,
        ),
    }
