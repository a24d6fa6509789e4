"""Agrégats du dashboard : histogramme d'étages et classements top-N.

Chaque fonction est pure : elle applique d'abord le filtre de classe, puis
soit la réduction par session (état courant), soit un cumul sur tous les
enregistrements (compteurs d'utilisation, victoires).
"""

from collections import Counter
from typing import Dict, Iterable, List, TypeVar

import pandas as pd

from src.analysis.filters import filter_by_class
from src.analysis.naming import (
    card_display_name,
    enemy_display_name,
    trinket_display_name,
)
from src.analysis.sessions import latest_per_session
from src.config import DEFAULT_TOP_N, FLOOR_LABELS
from src.data.parsers import parse_int, safe_percent
from src.models import EnemyWinRate, RankedItem, TelemetryRecord

K = TypeVar("K")

UNKNOWN_ENEMY = "unknown"


def rank_counts(counts: Dict[K, float], top_n: int) -> List[tuple[K, float]]:
    """Trie (clé, valeur) par valeur décroissante et tronque à top_n.

    Tri stable : à valeur égale, l'ordre de première apparition est conservé.
    """
    if top_n <= 0:
        return []
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:top_n]


def compute_floor_histogram(records: Iterable[TelemetryRecord], selected_class: str) -> List[int]:
    """Histogramme de l'étage le plus haut atteint par session.

    Seul le dernier snapshot de chaque session compte. Étages 1-4 -> bins 0-3,
    étage >= 5 -> bin "5+", étage 0 (ou absent) -> non compté.

    Args:
        records: Enregistrements.
        selected_class: Classe sélectionnée ou "all".

    Returns:
        Liste de 5 comptes alignée sur FLOOR_LABELS ("1", "2", "3", "4", "5+").
    """
    latest = latest_per_session(filter_by_class(records, selected_class))
    # Étages bornés à [0, 5] avant la conversion int64.
    top = len(FLOOR_LABELS)
    floors = pd.Series([min(max(r.floor, 0), top) for r in latest], dtype="int64")
    floors = floors[floors >= 1]
    counts = floors.value_counts()
    return [int(counts.get(i, 0)) for i in range(1, top + 1)]


def compute_top_combos(
    records: Iterable[TelemetryRecord],
    selected_class: str,
    top_n: int = DEFAULT_TOP_N,
) -> Dict[str, int]:
    """Combos les plus utilisés (cumul sur tous les enregistrements).

    Les valeurs illisibles comptent pour 0.

    Returns:
        Dict {combo: total} dont l'ordre d'insertion est l'ordre du classement.
    """
    totals: Dict[str, int] = {}
    for r in filter_by_class(records, selected_class):
        if r.combo_use_counts is None:
            continue
        for combo, raw in r.combo_use_counts.pairs():
            totals[combo] = totals.get(combo, 0) + (parse_int(raw) or 0)
    return dict(rank_counts(totals, top_n))


def compute_top_trinkets(
    records: Iterable[TelemetryRecord],
    selected_class: str,
    top_n: int = DEFAULT_TOP_N,
) -> List[RankedItem]:
    """Trinkets les plus possédés, en % des sessions.

    On regarde les trinkets équipés dans le dernier snapshot de chaque session.
    Un trinket listé deux fois dans le même snapshot compte deux fois.

    Returns:
        Liste de RankedItem (stat: "NN% owned").
    """
    latest = latest_per_session(filter_by_class(records, selected_class))
    total_sessions = len(latest)

    counts: Counter[str] = Counter()
    for r in latest:
        for trinket in r.trinkets or ():
            counts[trinket] += 1

    out: List[RankedItem] = []
    for trinket, count in rank_counts(dict(counts), top_n):
        pct = safe_percent(count, total_sessions)
        out.append(
            RankedItem(
                key=trinket,
                name=trinket_display_name(trinket, despace=False),
                value=pct,
                stat=f"{pct}% owned",
            )
        )
    return out


def compute_top_cards(
    records: Iterable[TelemetryRecord],
    selected_class: str,
    top_n: int = DEFAULT_TOP_N,
) -> List[RankedItem]:
    """Cartes les plus jouées (cumul sur tous les enregistrements).

    Les compteurs non entiers sont ignorés (pas de contribution, même nulle).

    Returns:
        Liste de RankedItem (stat: "N uses").
    """
    totals: Dict[str, int] = {}
    for r in filter_by_class(records, selected_class):
        uses = r.card_use_counts
        if uses is None or not uses.has_keys or not uses.has_values:
            continue
        for card, raw in uses.pairs():
            count = parse_int(raw)
            if count is None:
                continue
            totals[card] = totals.get(card, 0) + count

    return [
        RankedItem(key=card, name=card_display_name(card), value=count, stat=f"{count} uses")
        for card, count in rank_counts(totals, top_n)
    ]


def compute_top_enemies(
    records: Iterable[TelemetryRecord],
    selected_class: str,
    top_n: int = DEFAULT_TOP_N,
) -> List[EnemyWinRate]:
    """Adversaires contre lesquels le joueur gagne le plus.

    Attention : win_rate est la part des victoires totales obtenues contre
    l'adversaire (aucune défaite n'est comptée), pas un ratio V/D.

    Returns:
        Liste d'EnemyWinRate triée par win_rate décroissant.
    """
    wins: Dict[str, int] = {}
    total_wins = 0
    for r in filter_by_class(records, selected_class):
        if not r.is_win:
            continue
        enemy = r.enemy_class or UNKNOWN_ENEMY
        wins[enemy] = wins.get(enemy, 0) + 1
        total_wins += 1

    rates = {
        enemy: EnemyWinRate(
            key=enemy,
            name=enemy_display_name(enemy),
            wins=count,
            win_rate=safe_percent(count, total_wins),
        )
        for enemy, count in wins.items()
    }
    ranked = rank_counts({k: v.win_rate for k, v in rates.items()}, top_n)
    return [rates[enemy] for enemy, _ in ranked]


__all__ = [
    "rank_counts",
    "compute_floor_histogram",
    "compute_top_combos",
    "compute_top_trinkets",
    "compute_top_cards",
    "compute_top_enemies",
    "UNKNOWN_ENEMY",
]
