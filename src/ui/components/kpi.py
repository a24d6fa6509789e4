"""Cartes KPI du bandeau supérieur."""

from __future__ import annotations

from typing import Sequence

import streamlit as st


def render_kpi_cards(cards: Sequence[tuple[str, str]], *, dense: bool = True) -> None:
    """Affiche une rangée de cartes (libellé, valeur).

    Args:
        cards: Liste de tuples (libellé, valeur déjà formatée).
        dense: Si False, au plus 4 cartes par ligne.
    """
    if not cards:
        return
    per_row = len(cards) if dense else min(4, len(cards))
    for start in range(0, len(cards), per_row):
        row = cards[start:start + per_row]
        cols = st.columns(len(row))
        for col, (label, value) in zip(cols, row):
            col.metric(label, value)
