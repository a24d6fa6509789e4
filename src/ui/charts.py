"""Rendu Streamlit des graphiques du registre."""

from __future__ import annotations

import streamlit as st

from src.visualization.registry import ChartRegistry


def render_chart(registry: ChartRegistry, slot_id: str) -> None:
    """Affiche la figure courante d'un emplacement (rien si absente)."""
    fig = registry.get(slot_id)
    if fig is None:
        return
    st.plotly_chart(fig, width="stretch", key=f"chart_{slot_id}")
