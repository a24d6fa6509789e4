"""Gestion des paramètres utilisateur (persistés).

Le chemin est configurable via TELEMETRY_SETTINGS_PATH.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Any

from src.config import DEFAULT_PLAYER_CLASS, DEFAULT_TOP_N


def get_settings_path() -> str:
    override = os.environ.get("TELEMETRY_SETTINGS_PATH")
    if override and str(override).strip():
        return str(override).strip()
    repo_root = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    return os.path.join(repo_root, "app_settings.json")


@dataclass
class AppSettings:
    # Source
    dataset_path: str = ""

    # Affichage
    default_class: str = DEFAULT_PLAYER_CLASS
    top_n: int = DEFAULT_TOP_N


def _coerce_int(v: Any, default: int) -> int:
    if v is None or isinstance(v, bool):
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def load_settings() -> AppSettings:
    path = get_settings_path()
    if not os.path.exists(path):
        return AppSettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f) or {}
    except (OSError, ValueError):
        return AppSettings()

    if not isinstance(obj, dict):
        return AppSettings()

    s = AppSettings()
    s.dataset_path = str(obj.get("dataset_path") or "").strip()
    s.default_class = str(obj.get("default_class") or s.default_class).strip()
    s.top_n = min(20, max(1, _coerce_int(obj.get("top_n"), s.top_n)))
    return s


def save_settings(settings: AppSettings) -> tuple[bool, str]:
    path = get_settings_path()
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(settings), f, ensure_ascii=False, indent=2)
        return True, ""
    except OSError as e:
        return False, f"Impossible d'écrire {path}: {e}"
