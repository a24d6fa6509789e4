"""Conventions de nommage des identifiants du jeu.

Les identifiants exportés suivent le schéma <préfixe>_<nom_en_snake_case>
(trinket_lucky_coin, card_iron_wave, enemy_Bone_Knight). Toutes les
conversions identifiant <-> nom d'affichage passent par ce module.
"""

from __future__ import annotations

from src.config import CARD_PREFIX, ENEMY_PREFIX, NAME_SEPARATOR, TRINKET_PREFIX


def strip_prefix(identifier: str, prefix: str) -> str:
    """Retire le préfixe s'il est présent en tête (une seule fois)."""
    s = str(identifier or "")
    if prefix and s.startswith(prefix):
        return s[len(prefix):]
    return s


def display_name(
    identifier: str,
    prefix: str,
    *,
    despace: bool = True,
    lower: bool = False,
) -> str:
    """Nom d'affichage d'un identifiant.

    Args:
        identifier: Identifiant brut (ex: card_iron_wave).
        prefix: Préfixe à retirer (ex: card_).
        despace: Remplace les séparateurs "_" par des espaces.
        lower: Passe le résultat en minuscules.

    Returns:
        Le nom lisible (ex: "iron wave").
    """
    s = strip_prefix(identifier, prefix)
    if despace:
        s = s.replace(NAME_SEPARATOR, " ")
    if lower:
        s = s.lower()
    return s


def trinket_display_name(identifier: str, *, despace: bool = True) -> str:
    return display_name(identifier, TRINKET_PREFIX, despace=despace)


def card_display_name(identifier: str) -> str:
    return display_name(identifier, CARD_PREFIX)


def enemy_display_name(identifier: str) -> str:
    return display_name(identifier, ENEMY_PREFIX, lower=True)


def normalize_free_text(text: str | None) -> str:
    """Nettoie une saisie libre (trim + minuscules)."""
    return str(text or "").strip().lower()


def normalize_identifier(name: str, prefix: str) -> str:
    """Construit l'identifiant brut à partir d'un nom saisi.

    Si le nom porte déjà le préfixe, il est utilisé tel quel. Sinon il est
    passé en minuscules, les espaces deviennent "_" et le préfixe est ajouté.

    Exemples:
        ("Iron Wave", "card_") -> "card_iron_wave"
        ("card_Iron_Wave", "card_") -> "card_Iron_Wave"
    """
    s = str(name or "")
    if s.startswith(prefix):
        return s
    return prefix + s.lower().replace(" ", NAME_SEPARATOR)


def normalize_card_identifier(name: str) -> str:
    return normalize_identifier(name, CARD_PREFIX)


def normalize_trinket_identifier(name: str) -> str:
    return normalize_identifier(name, TRINKET_PREFIX)
