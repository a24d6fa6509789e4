"""Module application - Orchestration du dashboard.

Ce module contient la logique d'orchestration appelée par streamlit_app.py :
- state.py : Gestion centralisée du session_state
- data_loader.py : Chargement du dataset avec cache
- presentation.py : Adaptation des agrégats en séries affichables
- dashboard.py : Calcul des agrégats et rendu des sections
- kpis.py : Calcul et affichage des KPIs
"""

from __future__ import annotations

from src.app.state import AppState, init_source_state
from src.app.data_loader import load_dataset
from src.app.presentation import (
    ChartSeries,
    floor_histogram_series,
    mapping_series,
    pinned_chart_title,
    default_pinned_items,
)
from src.app.dashboard import DashboardView, build_dashboard, render_dashboard
from src.app.kpis import KPIStats, compute_kpi_stats, render_all_kpis

__all__ = [
    "AppState",
    "init_source_state",
    "load_dataset",
    "ChartSeries",
    "floor_histogram_series",
    "mapping_series",
    "pinned_chart_title",
    "default_pinned_items",
    "DashboardView",
    "build_dashboard",
    "render_dashboard",
    "KPIStats",
    "compute_kpi_stats",
    "render_all_kpis",
]
