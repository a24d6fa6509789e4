"""Fonctions de parsing tolérantes pour les champs de télémétrie.

Les exports du jeu encodent la plupart des nombres en chaînes ("3", "12.5"),
parfois suivies de caractères parasites. Le parsing suit donc la logique
"préfixe numérique" : on lit le plus long préfixe valide, sinon None.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(v: Any) -> Optional[int]:
    """Convertit une valeur en entier (préfixe numérique, base 10).

    Exemples:
        "3" -> 3, " 42x" -> 42, "3.7" -> 3, "x" -> None, None -> None

    Args:
        v: Valeur brute (str, int, float).

    Returns:
        L'entier lu, ou None si aucun préfixe entier n'est lisible.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        if not math.isfinite(v):
            return None
        return int(v)
    if isinstance(v, str):
        m = _INT_PREFIX_RE.match(v)
        if not m:
            return None
        return int(m.group(1))
    return None


def parse_float(v: Any) -> Optional[float]:
    """Convertit une valeur en float fini (préfixe numérique).

    Exemples:
        "12.5" -> 12.5, "7dmg" -> 7.0, "abc" -> None, "" -> None

    Args:
        v: Valeur brute (str, int, float).

    Returns:
        Le float lu, ou None si illisible ou non fini.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        x = float(v)
        return x if math.isfinite(x) else None
    if isinstance(v, str):
        m = _FLOAT_PREFIX_RE.match(v)
        if not m:
            return None
        x = float(m.group(1))
        return x if math.isfinite(x) else None
    return None


def coerce_str(v: Any) -> Optional[str]:
    """Convertit en chaîne non vide, ou None."""
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def round_half_up(x: float, ndigits: int = 0) -> float | int:
    """Arrondi "au demi supérieur" (0.5 -> 1, 2.5 -> 3).

    L'arrondi bancaire de round() donnerait 2 pour 2.5, ce qui décale
    les pourcentages affichés.

    Args:
        x: Valeur à arrondir.
        ndigits: Nombre de décimales conservées.

    Returns:
        Un int si ndigits == 0, sinon un float.
    """
    if ndigits <= 0:
        return int(math.floor(x + 0.5))
    factor = 10 ** ndigits
    return math.floor(x * factor + 0.5) / factor


def safe_percent(part: float, total: float) -> int:
    """Pourcentage arrondi de part/total, 0 si total est nul."""
    if not total:
        return 0
    return int(round_half_up(part / total * 100))
