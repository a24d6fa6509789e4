"""Chargement du dataset de télémétrie (fichier JSON).

Le dataset est un tableau JSON d'enregistrements, chargé une seule fois et
traité en lecture seule. Un échec de chargement (fichier absent, JSON
invalide, racine qui n'est pas un tableau) est journalisé et produit un
dataset vide : le dashboard reste simplement non peuplé.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Iterable

import pandas as pd

from src.models import TelemetryRecord

logger = logging.getLogger(__name__)


def records_from_json_array(items: Iterable[Any]) -> tuple[TelemetryRecord, ...]:
    """Convertit une liste d'objets JSON en enregistrements.

    Les entrées qui ne sont pas des objets sont ignorées.
    """
    out: list[TelemetryRecord] = []
    skipped = 0
    for item in items:
        if not isinstance(item, dict):
            skipped += 1
            continue
        out.append(TelemetryRecord.from_dict(item))
    if skipped:
        logger.warning(f"{skipped} entrée(s) ignorée(s) : objet JSON attendu")
    return tuple(out)


def load_records(path: str) -> tuple[TelemetryRecord, ...]:
    """Charge le dataset depuis un fichier JSON.

    Args:
        path: Chemin du fichier (tableau JSON d'enregistrements).

    Returns:
        Tuple immuable d'enregistrements, vide en cas d'échec.
    """
    if not path or not os.path.isfile(path):
        logger.error(f"Échec du chargement des données: fichier introuvable ({path!r})")
        return ()
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Échec du chargement des données ({path}): {e}")
        return ()

    if not isinstance(payload, list):
        logger.error(f"Échec du chargement des données ({path}): tableau JSON attendu")
        return ()

    records = records_from_json_array(payload)
    logger.info(f"{len(records)} enregistrements chargés depuis {path}")
    return records


def dataset_cache_key(path: str) -> tuple[int, int] | None:
    """Retourne une signature stable du fichier pour invalider les caches.

    On utilise (mtime_ns, size) : rapide et suffisamment fiable pour détecter
    un nouveau combined.json.
    """
    try:
        st_ = os.stat(path)
    except OSError:
        return None
    return int(st_.st_mtime_ns), int(st_.st_size)


def records_to_frame(records: Iterable[TelemetryRecord]) -> pd.DataFrame:
    """DataFrame "plat" des enregistrements, pour les tableaux de l'UI."""
    rows = [
        {
            "session_id": r.session_id,
            "timestamp": r.timestamp,
            "player_class": r.player_class,
            "floor": r.floor,
            "trinkets": len(r.trinkets or ()),
            "cards": len(r.card_use_counts.keys) if r.card_use_counts else 0,
            "average_outgoing_damage": r.damage,
            "is_win": r.is_win,
            "enemy_class": r.enemy_class,
        }
        for r in records
    ]
    if not rows:
        return pd.DataFrame(
            columns=[
                "session_id",
                "timestamp",
                "player_class",
                "floor",
                "trinkets",
                "cards",
                "average_outgoing_damage",
                "is_win",
                "enemy_class",
            ]
        )
    return pd.DataFrame(rows)
