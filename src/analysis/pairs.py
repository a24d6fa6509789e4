"""Analyse de co-occurrence : meilleurs partenaires d'un trinket ou d'une carte.

Pour un objet "épinglé", on moyenne les dégâts moyens des enregistrements
où il apparaît, par objet co-présent. Les enregistrements sans dégâts
lisibles sont exclus du calcul (pas pondérés à zéro).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from src.analysis.filters import filter_by_class
from src.analysis.naming import card_display_name, normalize_card_identifier, trinket_display_name
from src.analysis.stats import rank_counts
from src.config import DEFAULT_TOP_N
from src.data.parsers import round_half_up
from src.models import TelemetryRecord


@dataclass
class DamageAccumulator:
    """Somme et nombre d'observations de dégâts pour un objet co-présent."""
    total_damage: float = 0.0
    count: int = 0

    def add(self, damage: float) -> None:
        self.total_damage += damage
        self.count += 1

    @property
    def mean(self) -> float | None:
        if self.count <= 0:
            return None
        return self.total_damage / self.count


def _accumulate(
    accumulators: dict[str, DamageAccumulator],
    items: Iterable[str],
    pinned: str,
    damage: float,
) -> None:
    for other in items:
        if other == pinned:
            continue
        accumulators.setdefault(other, DamageAccumulator()).add(damage)


def compute_best_trinket_pairs(
    records: Iterable[TelemetryRecord],
    selected_class: str,
    trinket: str,
    top_n: int = DEFAULT_TOP_N,
) -> dict[str, float]:
    """Trinkets associés au trinket épinglé, par dégâts moyens décroissants.

    Un enregistrement est retenu s'il liste le trinket épinglé et si ses
    dégâts moyens sont lisibles (zéro et négatifs acceptés).

    Args:
        records: Enregistrements.
        selected_class: Classe sélectionnée ou "all".
        trinket: Identifiant brut du trinket épinglé (ex: trinket_lucky_coin).
        top_n: Taille du classement.

    Returns:
        Dict {nom affiché: dégâts moyens arrondis à 0.1}, dans l'ordre du classement.
    """
    accumulators: dict[str, DamageAccumulator] = {}
    for r in filter_by_class(records, selected_class):
        if r.trinkets is None or trinket not in r.trinkets:
            continue
        damage = r.damage
        if damage is None:
            continue
        _accumulate(accumulators, r.trinkets, trinket, damage)

    means = {k: acc.mean for k, acc in accumulators.items() if acc.mean is not None}
    return {
        trinket_display_name(other): round_half_up(avg, 1)
        for other, avg in rank_counts(means, top_n)
    }


def compute_best_card_pairs(
    records: Iterable[TelemetryRecord],
    selected_class: str,
    card: str,
    top_n: int = DEFAULT_TOP_N,
) -> dict[str, int]:
    """Cartes jouées avec la carte épinglée, par dégâts moyens décroissants.

    Contrairement aux trinkets, seuls les dégâts strictement positifs sont
    retenus. Le nom de carte peut être saisi librement ("Iron Wave").

    Returns:
        Dict {nom affiché: dégâts moyens arrondis à l'entier}, dans l'ordre du classement.
    """
    target = normalize_card_identifier(card)
    accumulators: dict[str, DamageAccumulator] = {}
    for r in filter_by_class(records, selected_class):
        if r.card_use_counts is None or not r.card_use_counts.has_keys:
            continue
        damage = r.damage
        if damage is None or damage <= 0:
            continue
        cards = r.card_use_counts.keys
        if target not in cards:
            continue
        _accumulate(accumulators, cards, target, damage)

    means = {k: acc.mean for k, acc in accumulators.items() if acc.mean is not None}
    return {
        card_display_name(other): int(round_half_up(avg))
        for other, avg in rank_counts(means, top_n)
    }
