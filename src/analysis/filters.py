"""Filtrage par classe de personnage et helpers pour le sélecteur."""

from typing import Iterable, List, Optional, Sequence

import pandas as pd

from src.config import ALL_CLASSES
from src.data.parsers import round_half_up
from src.models import TelemetryRecord


def filter_by_class(
    records: Iterable[TelemetryRecord],
    selected_class: str,
) -> List[TelemetryRecord]:
    """Restreint les enregistrements à une classe de personnage.

    "all" ne filtre rien. Une classe absente ne correspond à aucune classe
    concrète ; une classe inconnue donne simplement une liste vide.

    Args:
        records: Enregistrements (non modifiés).
        selected_class: Classe sélectionnée ou "all".

    Returns:
        Nouvelle liste, dans l'ordre d'origine.
    """
    if selected_class == ALL_CLASSES:
        return list(records)
    return [r for r in records if r.player_class is not None and r.player_class == selected_class]


def compute_pick_rate(records: Sequence[TelemetryRecord], selected_class: str) -> Optional[float]:
    """Taux de sélection d'une classe (en %), à une décimale.

    Le dénominateur ne compte que les enregistrements qui ont une classe.

    Returns:
        None pour "all", 0.0 si aucun enregistrement n'a de classe.
    """
    if selected_class == ALL_CLASSES:
        return None
    classes = pd.Series([r.player_class for r in records], dtype="object")
    total = int(classes.notna().sum())
    if total <= 0:
        return 0.0
    selected = int((classes == selected_class).sum())
    return float(round_half_up(selected / total * 100, 1))


def format_pick_rate(rate: Optional[float]) -> str:
    """Libellé du taux de sélection pour l'en-tête."""
    if rate is None:
        return "Pick rate : —"
    return f"Pick rate : {rate:.1f}%"


def list_player_classes(
    records: Iterable[TelemetryRecord],
    known: Iterable[str] = (),
) -> List[str]:
    """Liste triée des classes pour le sélecteur.

    Args:
        records: Enregistrements chargés.
        known: Classes connues à toujours proposer, même sans données.

    Returns:
        Classes distinctes (sans "all"), triées alphabétiquement.
    """
    out = {c for c in known if c}
    out.update(r.player_class for r in records if r.player_class)
    out.discard(ALL_CLASSES)
    return sorted(out, key=str.lower)
