"""Module UI - Composants, assets, styles et paramètres d'interface."""

from src.ui.styles import load_css
from src.ui.assets import resolve_enemy_image, resolve_character_image
from src.ui.charts import render_chart
from src.ui.settings import AppSettings, load_settings, save_settings

__all__ = [
    # styles
    "load_css",
    # assets
    "resolve_enemy_image",
    "resolve_character_image",
    # charts
    "render_chart",
    # settings
    "AppSettings",
    "load_settings",
    "save_settings",
]
