"""Calcul et affichage des KPIs du bandeau supérieur.

Ce module gère :
- Le calcul des compteurs de base (enregistrements, sessions, victoires)
- Le taux de sélection de la classe
- Le rendu des cartes KPI
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import streamlit as st

from src.analysis import compute_pick_rate, count_sessions, filter_by_class
from src.models import TelemetryRecord
from src.ui.components import render_kpi_cards


class KPIStats(NamedTuple):
    """Statistiques KPI calculées pour la classe sélectionnée."""
    records: int
    sessions: int
    wins: int
    pick_rate: float | None


def compute_kpi_stats(records: Sequence[TelemetryRecord], selected_class: str) -> KPIStats:
    """Calcule les KPIs du bandeau.

    Args:
        records: Dataset complet (le taux de sélection porte sur tout le dataset).
        selected_class: Classe sélectionnée ou "all".

    Returns:
        KPIStats.
    """
    dff = filter_by_class(records, selected_class)
    return KPIStats(
        records=len(dff),
        sessions=count_sessions(dff),
        wins=sum(1 for r in dff if r.is_win),
        pick_rate=compute_pick_rate(records, selected_class),
    )


def render_kpis(kpis: KPIStats) -> None:
    """Rend les cartes KPI."""
    render_kpi_cards(
        [
            ("Enregistrements", str(kpis.records)),
            ("Sessions", str(kpis.sessions)),
            ("Victoires", str(kpis.wins)),
            ("Pick rate", f"{kpis.pick_rate:.1f}%" if kpis.pick_rate is not None else "—"),
        ]
    )


def render_all_kpis(records: Sequence[TelemetryRecord], selected_class: str) -> KPIStats:
    """Calcule, rend et retourne les KPIs."""
    kpis = compute_kpi_stats(records, selected_class)
    render_kpis(kpis)
    return kpis
