"""Gestion centralisée du state de l'application.

Ce module centralise :
- L'initialisation du session_state Streamlit
- La classe sélectionnée et les objets épinglés (paires)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import streamlit as st

from src.analysis.naming import normalize_card_identifier, normalize_free_text, normalize_trinket_identifier
from src.config import DEFAULT_PLAYER_CLASS

if TYPE_CHECKING:
    from src.ui.settings import AppSettings


@dataclass
class AppState:
    """État de l'application.

    Centralise l'accès au session_state Streamlit avec typage.
    Les objets épinglés sont None tant que l'utilisateur n'a rien saisi :
    le dashboard épingle alors le premier du classement.
    """

    dataset_path: str = ""
    selected_class: str = DEFAULT_PLAYER_CLASS
    pinned_trinket: str | None = None
    pinned_card: str | None = None

    @classmethod
    def from_session(cls) -> "AppState":
        """Charge l'état depuis session_state."""
        return cls(
            dataset_path=str(st.session_state.get("dataset_path", "") or ""),
            selected_class=str(st.session_state.get("selected_class", DEFAULT_PLAYER_CLASS) or DEFAULT_PLAYER_CLASS),
            pinned_trinket=st.session_state.get("pinned_trinket"),
            pinned_card=st.session_state.get("pinned_card"),
        )

    def save_pins_to_session(self) -> None:
        """Sauvegarde les objets épinglés dans session_state.

        La classe n'est pas écrite : la clé "selected_class" appartient au
        sélecteur de la barre latérale.
        """
        st.session_state["pinned_trinket"] = self.pinned_trinket
        st.session_state["pinned_card"] = self.pinned_card

    def pin_trinket(self, text: str | None) -> bool:
        """Épingle un trinket depuis une saisie libre. Retourne False si vide."""
        s = normalize_free_text(text)
        if not s:
            return False
        self.pinned_trinket = normalize_trinket_identifier(s)
        return True

    def pin_card(self, text: str | None) -> bool:
        """Épingle une carte depuis une saisie libre. Retourne False si vide."""
        s = normalize_free_text(text)
        if not s:
            return False
        self.pinned_card = normalize_card_identifier(s)
        return True

    def clear_pins(self) -> None:
        """Revient aux objets épinglés par défaut (tête de classement)."""
        self.pinned_trinket = None
        self.pinned_card = None


def init_source_state(default_dataset: str, settings: "AppSettings") -> None:
    """Initialise le session_state avec les valeurs par défaut.

    Args:
        default_dataset: Chemin par défaut du dataset.
        settings: Paramètres de l'application.
    """
    if "dataset_path" not in st.session_state:
        chosen = str(getattr(settings, "dataset_path", "") or "").strip() or str(default_dataset or "")
        st.session_state["dataset_path"] = chosen

    if "selected_class" not in st.session_state:
        st.session_state["selected_class"] = (
            str(getattr(settings, "default_class", "") or "").strip() or DEFAULT_PLAYER_CLASS
        )

    st.session_state.setdefault("pinned_trinket", None)
    st.session_state.setdefault("pinned_card", None)
