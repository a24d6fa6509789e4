"""Configuration centralisée et constantes du projet."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


def get_repo_root(start_path: str | None = None) -> str:
    """Retourne le répertoire racine du repo.

    Objectif: éviter les chemins faux quand le CWD Streamlit n'est pas le repo,
    ou quand le script est lancé depuis un autre dossier.
    """

    def _as_dir(p: Path) -> Path:
        p = p.resolve()
        return p.parent if p.is_file() else p

    def _looks_like_repo_root(p: Path) -> bool:
        return (p / "pyproject.toml").exists() and (p / "src").is_dir()

    starts: list[Path] = []
    if start_path:
        starts.append(_as_dir(Path(start_path)))
    starts.append(_as_dir(Path(__file__)))
    starts.append(Path.cwd().resolve())

    for s in starts:
        for p in [s] + list(s.parents)[:8]:
            if _looks_like_repo_root(p):
                return str(p)

    return str(starts[0])


# =============================================================================
# Chemins par défaut
# =============================================================================

def get_default_dataset_path() -> str:
    """Retourne le chemin par défaut du fichier JSON de télémétrie.

    Ordre de priorité :
    1. Variable d'environnement TELEMETRY_DATASET_PATH
    2. <repo>/data/combined.json
    """
    override = (os.environ.get("TELEMETRY_DATASET_PATH") or "").strip()
    if override:
        return override
    return os.path.join(get_repo_root(), "data", "combined.json")


def get_assets_dir() -> str:
    """Retourne le dossier des images (Enemies/, Characters/)."""
    override = (os.environ.get("TELEMETRY_ASSETS_DIR") or "").strip()
    if override:
        return override
    return os.path.join(get_repo_root(), "assets")


# =============================================================================
# Classes de personnage
# =============================================================================

# Valeur sentinelle du sélecteur : pas de filtrage.
ALL_CLASSES = "all"

DEFAULT_PLAYER_CLASS = (os.environ.get("TELEMETRY_DEFAULT_CLASS") or "kitsunagi").strip()

KNOWN_PLAYER_CLASSES: tuple[str, ...] = tuple(
    c.strip()
    for c in (os.environ.get("TELEMETRY_KNOWN_CLASSES") or DEFAULT_PLAYER_CLASS).split(",")
    if c.strip()
)


# =============================================================================
# Conventions des données
# =============================================================================

# winnerIndex == "2" : le joueur propriétaire de l'enregistrement a gagné.
WIN_CODE = "2"

DEFAULT_TOP_N = 5

FLOOR_LABELS: tuple[str, ...] = ("1", "2", "3", "4", "5+")

TRINKET_PREFIX = "trinket_"
CARD_PREFIX = "card_"
ENEMY_PREFIX = "enemy_"
NAME_SEPARATOR = "_"


# =============================================================================
# Palette de couleurs
# =============================================================================

@dataclass(frozen=True)
class DashboardColors:
    """Palette de couleurs du dashboard."""
    blurple: str = "#5865f2"
    orange: str = "#f28e2b"
    teal: str = "#2dd4bf"
    steel: str = "#4e79a7"
    red: str = "#FF4D6D"
    slate: str = "#A8B2D1"

    # Fond des graphiques et textes
    bg_plot: str = "rgb(29,35,40)"
    text_primary: str = "#ffffff"
    border: str = "rgba(255,255,255,0.18)"

    def as_dict(self) -> Dict[str, str]:
        """Retourne les couleurs sous forme de dictionnaire."""
        return {
            "blurple": self.blurple,
            "orange": self.orange,
            "teal": self.teal,
            "steel": self.steel,
            "red": self.red,
            "slate": self.slate,
        }


DASHBOARD_COLORS = DashboardColors()


# =============================================================================
# Configuration des graphiques
# =============================================================================

@dataclass
class PlotConfig:
    """Configuration par défaut des graphiques."""
    default_height: int = 360
    tall_height: int = 520

    bar_opacity: float = 0.85
    title_font_size: int = 20

    margin_left: int = 40
    margin_right: int = 20
    margin_top: int = 60
    margin_bottom: int = 40


PLOT_CONFIG = PlotConfig()
