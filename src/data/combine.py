"""Fusion de plusieurs exports de télémétrie en un seul tableau JSON.

Chaque fichier source contient soit un tableau d'enregistrements, soit un
enregistrement isolé (un objet). Les sources illisibles sont ignorées et
comptées dans les statistiques de fusion.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Iterable

from tqdm import tqdm

logger = logging.getLogger(__name__)


@dataclass
class CombineStats:
    """Bilan d'une fusion."""
    files_read: int = 0
    files_failed: list[str] = field(default_factory=list)
    records: int = 0
    skipped_entries: int = 0


def iter_json_files(paths: Iterable[str]) -> list[str]:
    """Développe les dossiers en fichiers *.json (triés), garde les fichiers tels quels."""
    out: list[str] = []
    for p in paths:
        if os.path.isdir(p):
            out.extend(
                os.path.join(p, name)
                for name in sorted(os.listdir(p))
                if name.lower().endswith(".json")
            )
        else:
            out.append(p)
    return out


def combine_files(paths: Iterable[str], *, progress: bool = False) -> tuple[list[dict[str, Any]], CombineStats]:
    """Concatène les enregistrements de plusieurs fichiers, dans l'ordre.

    Args:
        paths: Fichiers ou dossiers sources.
        progress: Affiche une barre de progression (tqdm).

    Returns:
        Tuple (enregistrements, statistiques).
    """
    stats = CombineStats()
    combined: list[dict[str, Any]] = []
    files = iter_json_files(paths)
    for path in tqdm(files, desc="Fusion", unit="fichier", disable=not progress):
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Source ignorée ({path}): {e}")
            stats.files_failed.append(path)
            continue

        if isinstance(payload, dict):
            items = [payload]
        elif isinstance(payload, list):
            items = [item for item in payload if isinstance(item, dict)]
            stats.skipped_entries += len(payload) - len(items)
        else:
            logger.warning(f"Source ignorée ({path}): tableau ou objet JSON attendu")
            stats.files_failed.append(path)
            continue

        stats.files_read += 1
        combined.extend(items)

    stats.records = len(combined)
    return combined, stats


def write_combined(records: list[dict[str, Any]], output: str) -> None:
    """Écrit le tableau fusionné (écriture atomique via fichier temporaire)."""
    os.makedirs(os.path.dirname(os.path.abspath(output)) or ".", exist_ok=True)
    tmp = f"{output}.tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False)
    os.replace(tmp, output)
