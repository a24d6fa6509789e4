"""Cercles de statistiques (trinkets, cartes) et cartes adversaires."""

from __future__ import annotations

import html
from typing import Sequence

import streamlit as st

from src.models import EnemyWinRate, RankedItem
from src.ui.assets import resolve_enemy_image


def stat_circle_html(item: RankedItem) -> str:
    """HTML d'un cercle (nom + statistique), textes échappés."""
    return (
        "<div class='circle'>"
        + "<div class='circle-title'>" + html.escape(item.name) + "</div>"
        + "<div class='circle-subtitle'>" + html.escape(item.stat) + "</div>"
        + "</div>"
    )


def render_stat_circles(items: Sequence[RankedItem], *, empty_label: str = "Aucune donnée.") -> None:
    """Affiche une rangée de cercles (remplace le contenu précédent au rerun)."""
    if not items:
        st.info(empty_label)
        return
    st.markdown(
        "<div class='circles'>" + "".join(stat_circle_html(i) for i in items) + "</div>",
        unsafe_allow_html=True,
    )


def render_enemy_cards(
    enemies: Sequence[EnemyWinRate],
    *,
    assets_dir: str | None = None,
) -> None:
    """Affiche les adversaires : nom, image (ou placeholder), part des victoires."""
    if not enemies:
        st.info("Aucune victoire enregistrée.")
        return

    cols = st.columns(max(1, len(enemies)))
    for col, enemy in zip(cols, enemies):
        col.markdown(
            "<div class='enemy-name'>" + html.escape(enemy.name) + "</div>",
            unsafe_allow_html=True,
        )
        image = resolve_enemy_image(enemy.name, assets_dir)
        if image:
            col.image(image, width=96)
        col.markdown(
            f"<div class='win-rate'>Win Rate: {int(enemy.win_rate)}%</div>",
            unsafe_allow_html=True,
        )
