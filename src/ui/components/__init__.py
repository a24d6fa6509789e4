"""Composants UI réutilisables pour le dashboard."""

from src.ui.components.kpi import render_kpi_cards
from src.ui.components.stat_cards import (
    stat_circle_html,
    render_stat_circles,
    render_enemy_cards,
)

__all__ = [
    "render_kpi_cards",
    "stat_circle_html",
    "render_stat_circles",
    "render_enemy_cards",
]
