"""Registre des graphiques affichés, un par emplacement.

Redessiner un emplacement remplace entièrement la figure précédente :
les séries ne s'empilent jamais. Le registre est possédé par le code de
rendu et passé explicitement (pas d'état global).
"""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from src.config import DASHBOARD_COLORS
from src.visualization.bars import plot_bar_chart


class ChartRegistry:
    """Associe un identifiant d'emplacement à la figure courante."""

    def __init__(self) -> None:
        self._figures: dict[str, go.Figure] = {}

    def draw_bar_chart(
        self,
        slot_id: str,
        title: str,
        series_name: str,
        labels: Sequence[str],
        values: Sequence[float],
        color: str = DASHBOARD_COLORS.steel,
    ) -> go.Figure:
        """Construit un graphique en barres et remplace celui de l'emplacement."""
        fig = plot_bar_chart(title, series_name, labels, values, color)
        self._figures[slot_id] = fig
        return fig

    def get(self, slot_id: str) -> go.Figure | None:
        return self._figures.get(slot_id)

    def slots(self) -> list[str]:
        return list(self._figures)

    def clear(self) -> None:
        self._figures.clear()

    def __contains__(self, slot_id: object) -> bool:
        return slot_id in self._figures

    def __len__(self) -> int:
        return len(self._figures)
