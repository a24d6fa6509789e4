"""Adaptation des agrégats en séries prêtes à afficher.

Ce module fait la jonction entre src.analysis (résultats bruts) et
le rendu (registre de graphiques, cercles, cartes adversaires).
"""

from __future__ import annotations

from typing import Mapping, NamedTuple, Sequence

from src.analysis.naming import display_name
from src.config import FLOOR_LABELS, TRINKET_PREFIX
from src.models import RankedItem


class ChartSeries(NamedTuple):
    """Libellés et valeurs alignés pour un graphique en barres."""
    labels: list[str]
    values: list[float]


# Emplacements de graphiques (identifiants stables du registre)
SLOT_FLOORS = "floors"
SLOT_COMBOS = "combos"
SLOT_TRINKET_PAIRS = "trinket_pairs"
SLOT_CARD_PAIRS = "card_pairs"


def floor_histogram_series(counts: Sequence[int]) -> ChartSeries:
    """Aligne l'histogramme d'étages sur les libellés "1".."5+"."""
    return ChartSeries(labels=list(FLOOR_LABELS), values=[int(c) for c in counts])


def mapping_series(mapping: Mapping[str, float]) -> ChartSeries:
    """Convertit un classement {libellé: valeur} en série (ordre conservé)."""
    return ChartSeries(labels=list(mapping.keys()), values=list(mapping.values()))


def pinned_chart_title(name: str | None, kind: str | None = None) -> str:
    """Titre des graphiques de paires.

    Exemples:
        ("lucky_coin", "trinket") -> "best combos with trinket lucky_coin"
        ("iron wave", None) -> "best combos with iron wave"
    """
    label = name or "—"
    if kind:
        return f"best combos with {kind} {label}"
    return f"best combos with {label}"


def default_pinned_items(
    trinkets: Sequence[RankedItem],
    cards: Sequence[RankedItem],
) -> tuple[str | None, str | None]:
    """Identifiants bruts du trinket et de la carte en tête de classement."""
    trinket = trinkets[0].key if trinkets else None
    card = cards[0].key if cards else None
    return trinket, card


def pinned_display_name(identifier: str | None, prefix: str = TRINKET_PREFIX) -> str | None:
    """Nom court d'un objet épinglé pour les titres (préfixe retiré)."""
    if not identifier:
        return None
    return display_name(identifier, prefix, despace=False)
