"""Résolution des images (adversaires, personnages) avec image de repli.

Les images sont cherchées dans le dossier d'assets local :
- Enemies/<nom>.png   (nom d'affichage normalisé de l'adversaire)
- Characters/<classe>.png
- Enemies/placeholder.png en repli
"""

from __future__ import annotations

import os

from src.config import ALL_CLASSES, get_assets_dir

PLACEHOLDER_FILENAME = "placeholder.png"
ENEMIES_DIRNAME = "Enemies"
CHARACTERS_DIRNAME = "Characters"


def placeholder_image_path(assets_dir: str | None = None) -> str | None:
    """Chemin de l'image de repli, ou None si elle n'existe pas."""
    base = assets_dir or get_assets_dir()
    p = os.path.join(base, ENEMIES_DIRNAME, PLACEHOLDER_FILENAME)
    return p if os.path.isfile(p) else None


def _existing_or_placeholder(path: str, assets_dir: str) -> str | None:
    if os.path.isfile(path):
        return path
    return placeholder_image_path(assets_dir)


def resolve_enemy_image(name: str, assets_dir: str | None = None) -> str | None:
    """Image d'un adversaire à partir de son nom d'affichage.

    Args:
        name: Nom normalisé (ex: "bone knight").
        assets_dir: Dossier d'assets (défaut: config).

    Returns:
        Chemin de l'image, du placeholder, ou None.
    """
    base = assets_dir or get_assets_dir()
    fname = f"{str(name or '').strip()}.png"
    return _existing_or_placeholder(os.path.join(base, ENEMIES_DIRNAME, fname), base)


def resolve_character_image(player_class: str, assets_dir: str | None = None) -> str | None:
    """Image du personnage de la classe sélectionnée ("all" -> placeholder)."""
    base = assets_dir or get_assets_dir()
    cls = str(player_class or "").strip()
    if not cls or cls == ALL_CLASSES:
        return placeholder_image_path(base)
    return _existing_or_placeholder(os.path.join(base, CHARACTERS_DIRNAME, f"{cls}.png"), base)
