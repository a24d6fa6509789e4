"""Orchestration du dashboard : agrégats -> registre de graphiques -> rendu.

build_dashboard() est pur (aucun appel Streamlit) : il calcule tous les
agrégats de la classe sélectionnée et (re)dessine les graphiques dans le
registre. render_dashboard() se charge de l'affichage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import streamlit as st

from src.analysis import (
    compute_best_card_pairs,
    compute_best_trinket_pairs,
    compute_floor_histogram,
    compute_top_cards,
    compute_top_combos,
    compute_top_enemies,
    compute_top_trinkets,
)
from src.app.presentation import (
    SLOT_CARD_PAIRS,
    SLOT_COMBOS,
    SLOT_FLOORS,
    SLOT_TRINKET_PAIRS,
    default_pinned_items,
    floor_histogram_series,
    mapping_series,
    pinned_chart_title,
    pinned_display_name,
)
from src.app.state import AppState
from src.config import CARD_PREFIX, DASHBOARD_COLORS, DEFAULT_TOP_N, TRINKET_PREFIX
from src.models import EnemyWinRate, RankedItem, TelemetryRecord
from src.ui.charts import render_chart
from src.ui.components import render_enemy_cards, render_stat_circles
from src.visualization.registry import ChartRegistry


@dataclass
class DashboardView:
    """Résultats calculés pour un rendu du dashboard."""
    trinkets: list[RankedItem] = field(default_factory=list)
    cards: list[RankedItem] = field(default_factory=list)
    enemies: list[EnemyWinRate] = field(default_factory=list)
    pinned_trinket: str | None = None
    pinned_card: str | None = None


def build_dashboard(
    registry: ChartRegistry,
    records: Sequence[TelemetryRecord],
    state: AppState,
    *,
    top_n: int = DEFAULT_TOP_N,
) -> DashboardView:
    """Calcule les agrégats et remplit le registre.

    Sans saisie utilisateur, les graphiques de paires épinglent le trinket
    et la carte en tête de classement.
    """
    selected = state.selected_class
    colors = DASHBOARD_COLORS

    floors = floor_histogram_series(compute_floor_histogram(records, selected))
    registry.draw_bar_chart(SLOT_FLOORS, "Highest Floor Reached", "Times", floors.labels, floors.values, colors.blurple)

    combos = mapping_series(compute_top_combos(records, selected, top_n))
    registry.draw_bar_chart(SLOT_COMBOS, "Top Card Combos", "Uses", combos.labels, combos.values, colors.orange)

    trinkets = compute_top_trinkets(records, selected, top_n)
    cards = compute_top_cards(records, selected, top_n)
    enemies = compute_top_enemies(records, selected, top_n)

    default_trinket, default_card = default_pinned_items(trinkets, cards)
    pinned_trinket = state.pinned_trinket or default_trinket
    pinned_card = state.pinned_card or default_card

    # Titres : "trinket X" / "card X" pour l'épinglage par défaut, nom seul pour une saisie.
    trinket_kind = None if state.pinned_trinket else "trinket"
    card_kind = None if state.pinned_card else "card"

    trinket_pairs = (
        compute_best_trinket_pairs(records, selected, pinned_trinket, top_n) if pinned_trinket else {}
    )
    series = mapping_series(trinket_pairs)
    registry.draw_bar_chart(
        SLOT_TRINKET_PAIRS,
        pinned_chart_title(pinned_display_name(pinned_trinket, TRINKET_PREFIX), trinket_kind),
        "Avg Dmg",
        series.labels,
        series.values,
        colors.teal,
    )

    card_pairs = compute_best_card_pairs(records, selected, pinned_card, top_n) if pinned_card else {}
    series = mapping_series(card_pairs)
    registry.draw_bar_chart(
        SLOT_CARD_PAIRS,
        pinned_chart_title(pinned_display_name(pinned_card, CARD_PREFIX), card_kind),
        "Avg Dmg",
        series.labels,
        series.values,
        colors.teal,
    )

    return DashboardView(
        trinkets=trinkets,
        cards=cards,
        enemies=enemies,
        pinned_trinket=pinned_trinket,
        pinned_card=pinned_card,
    )


def render_dashboard(registry: ChartRegistry, view: DashboardView, state: AppState) -> None:
    """Affiche les graphiques et les composants d'un DashboardView."""
    c1, c2 = st.columns(2)
    with c1:
        render_chart(registry, SLOT_FLOORS)
    with c2:
        render_chart(registry, SLOT_COMBOS)

    st.subheader("Top trinkets")
    render_stat_circles(view.trinkets)

    st.subheader("Top cards")
    render_stat_circles(view.cards)

    st.subheader("Top enemies")
    render_enemy_cards(view.enemies)

    st.subheader("Paires")
    c3, c4 = st.columns(2)
    with c3:
        with st.form("trinket_pair_form", clear_on_submit=False):
            text = st.text_input("Trinket", placeholder="ex: lucky coin", key="pin_trinket_text")
            if st.form_submit_button("Épingler le trinket") and state.pin_trinket(text):
                state.save_pins_to_session()
                st.rerun()
        render_chart(registry, SLOT_TRINKET_PAIRS)
    with c4:
        with st.form("card_pair_form", clear_on_submit=False):
            text = st.text_input("Carte", placeholder="ex: iron wave", key="pin_card_text")
            if st.form_submit_button("Épingler la carte") and state.pin_card(text):
                state.save_pins_to_session()
                st.rerun()
        render_chart(registry, SLOT_CARD_PAIRS)
