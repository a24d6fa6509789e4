"""Gestion des styles CSS."""

from __future__ import annotations

import os
from functools import lru_cache

# CSS minimal si static/styles.css n'existe pas
FALLBACK_CSS = """
.circles { display: flex; flex-wrap: wrap; gap: 18px; margin: 8px 0 18px 0; }
.circle {
    width: 130px; height: 130px; border-radius: 50%;
    background: rgba(88,101,242,0.18); border: 2px solid #5865f2;
    display: flex; flex-direction: column; align-items: center; justify-content: center;
    text-align: center; padding: 8px;
}
.circle-title { font-weight: 700; font-size: 14px; }
.circle-subtitle { color: #A8B2D1; font-size: 12px; }
.enemy-name { font-weight: 700; text-align: center; text-transform: capitalize; }
.win-rate { color: #2dd4bf; text-align: center; font-size: 13px; }
"""


def get_css_path() -> str:
    """Retourne le chemin du fichier CSS."""
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    return os.path.join(repo_root, "static", "styles.css")


def load_css() -> str:
    """Charge le contenu du fichier CSS.

    Returns:
        Contenu CSS avec balises <style>.
    """
    css_path = get_css_path()

    mtime: float | None
    try:
        mtime = os.path.getmtime(css_path)
    except OSError:
        mtime = None

    return _load_css_cached(css_path, mtime)


@lru_cache(maxsize=8)
def _load_css_cached(css_path: str, mtime: float | None) -> str:
    try:
        with open(css_path, "r", encoding="utf-8") as f:
            css_content = f.read()
    except FileNotFoundError:
        css_content = FALLBACK_CSS
    return f"<style>\n{css_content}\n</style>"
