"""Chargement des données pour l'application Streamlit.

Le dataset est chargé une fois par signature de fichier (mtime, taille)
grâce à st.cache_data, puis traité en lecture seule à chaque rerun.
"""

from __future__ import annotations

import streamlit as st

from src.data.loaders import dataset_cache_key, load_records
from src.models import TelemetryRecord


@st.cache_data(show_spinner=False)
def cached_load_records(path: str, file_key: tuple[int, int] | None) -> tuple[TelemetryRecord, ...]:
    """Charge le dataset (cache Streamlit, invalidé par file_key)."""
    return load_records(path)


def load_dataset(path: str) -> tuple[TelemetryRecord, ...]:
    """Charge le dataset courant via le cache.

    Args:
        path: Chemin du fichier JSON.

    Returns:
        Enregistrements, tuple vide si le chargement a échoué.
    """
    return cached_load_records(path, dataset_cache_key(path))
