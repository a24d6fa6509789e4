"""Module d'analyse des données de télémétrie."""

from src.analysis.filters import (
    filter_by_class,
    compute_pick_rate,
    format_pick_rate,
    list_player_classes,
)
from src.analysis.sessions import latest_per_session, count_sessions
from src.analysis.stats import (
    rank_counts,
    compute_floor_histogram,
    compute_top_combos,
    compute_top_trinkets,
    compute_top_cards,
    compute_top_enemies,
)
from src.analysis.pairs import (
    compute_best_trinket_pairs,
    compute_best_card_pairs,
)
from src.analysis.naming import (
    display_name,
    normalize_free_text,
    normalize_card_identifier,
    normalize_trinket_identifier,
)

__all__ = [
    "filter_by_class",
    "compute_pick_rate",
    "format_pick_rate",
    "list_player_classes",
    "latest_per_session",
    "count_sessions",
    "rank_counts",
    "compute_floor_histogram",
    "compute_top_combos",
    "compute_top_trinkets",
    "compute_top_cards",
    "compute_top_enemies",
    "compute_best_trinket_pairs",
    "compute_best_card_pairs",
    "display_name",
    "normalize_free_text",
    "normalize_card_identifier",
    "normalize_trinket_identifier",
]
