"""Réduction des enregistrements par session.

Une session regroupe tous les snapshots d'une même run. Les requêtes
"état courant" (étage atteint, trinkets équipés) ne regardent que le
snapshot le plus récent de chaque session ; les compteurs cumulés
(utilisations, victoires) parcourent au contraire tous les enregistrements.
"""

from __future__ import annotations

from typing import Iterable

from src.models import TelemetryRecord


def _is_later_or_equal(candidate: TelemetryRecord, current: TelemetryRecord) -> bool:
    # Un timestamp absent est antérieur à tout timestamp numérique.
    if candidate.timestamp is None:
        return current.timestamp is None
    if current.timestamp is None:
        return True
    return candidate.timestamp >= current.timestamp


def latest_per_session(records: Iterable[TelemetryRecord]) -> list[TelemetryRecord]:
    """Sélectionne le snapshot le plus récent de chaque session.

    À timestamp égal, le dernier enregistrement rencontré l'emporte.

    Args:
        records: Enregistrements (déjà filtrés par classe).

    Returns:
        Un enregistrement par session, dans l'ordre de première apparition.
    """
    latest: dict[str, TelemetryRecord] = {}
    for r in records:
        current = latest.get(r.session_id)
        if current is None or _is_later_or_equal(r, current):
            latest[r.session_id] = r
    return list(latest.values())


def count_sessions(records: Iterable[TelemetryRecord]) -> int:
    """Nombre de sessions distinctes."""
    return len({r.session_id for r in records})
