"""Modèles de données (dataclasses) du projet."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional

from src.config import WIN_CODE
from src.data.parsers import coerce_str, parse_float, parse_int


def _raw_code(v: Any) -> Optional[str]:
    # Comparaison stricte : " 2 " n'est pas "2", le nombre 2 l'est.
    if v is None or isinstance(v, bool):
        return None
    return str(v)


@dataclass(frozen=True)
class UseCounts:
    """Compteurs d'utilisation encodés en tableaux parallèles.

    Les deux séquences sont alignées par position : keys[i] est associé à
    values[i]. Les valeurs restent des chaînes, parsées par les agrégateurs.

    Attributes:
        keys: Identifiants (combo ou carte), dans l'ordre de l'export.
        values: Compteurs encodés en chaînes, même longueur que keys.
    """
    keys: tuple[str, ...] = ()
    values: tuple[Any, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["UseCounts"]:
        """Construit un UseCounts depuis {"keys": [...], "values": [...]}.

        Returns:
            None si le champ est absent ou n'est pas un objet.
        """
        if not isinstance(raw, Mapping):
            return None
        keys = raw.get("keys")
        values = raw.get("values")
        return cls(
            keys=tuple(str(k) for k in keys) if isinstance(keys, list) else (),
            values=tuple(values) if isinstance(values, list) else (),
        )

    @property
    def has_keys(self) -> bool:
        return bool(self.keys)

    @property
    def has_values(self) -> bool:
        return bool(self.values)

    def pairs(self) -> Iterator[tuple[str, Any]]:
        """Itère (clé, valeur brute) par index ; valeur None si absente."""
        for i, key in enumerate(self.keys):
            yield key, (self.values[i] if i < len(self.values) else None)


@dataclass(frozen=True)
class TelemetryRecord:
    """Représente un enregistrement de télémétrie (un snapshot de partie).

    Attributes:
        session_id: Identifiant de session (regroupe les enregistrements d'une run).
        timestamp: Horodatage numérique, None si absent.
        player_class: Classe du personnage, None si absente.
        floor: Étage le plus haut atteint (0 si absent).
        combo_use_counts: Utilisations des combos (tableaux parallèles).
        card_use_counts: Utilisations des cartes (tableaux parallèles).
        trinkets: Trinkets équipés (doublons conservés), None si absent.
        average_outgoing_damage: Dégâts moyens, valeur brute (str ou nombre).
        winner_index: Code du vainqueur ("2" = victoire du joueur).
        enemy_class: Identifiant de l'adversaire.
    """
    session_id: str
    timestamp: Optional[float] = None
    player_class: Optional[str] = None
    floor: int = 0
    combo_use_counts: Optional[UseCounts] = None
    card_use_counts: Optional[UseCounts] = None
    trinkets: Optional[tuple[str, ...]] = None
    average_outgoing_damage: Any = None
    winner_index: Optional[str] = None
    enemy_class: Optional[str] = None

    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "TelemetryRecord":
        """Construit un enregistrement depuis un objet JSON (clés camelCase)."""
        trinkets = obj.get("trinkets")
        return cls(
            session_id=str(obj.get("sessionId") if obj.get("sessionId") is not None else ""),
            timestamp=parse_float(obj.get("timestamp")),
            player_class=coerce_str(obj.get("playerClass")),
            floor=parse_int(obj.get("floor")) or 0,
            combo_use_counts=UseCounts.from_raw(obj.get("comboUseCounts")),
            card_use_counts=UseCounts.from_raw(obj.get("cardUseCounts")),
            trinkets=tuple(str(t) for t in trinkets) if isinstance(trinkets, list) else None,
            average_outgoing_damage=obj.get("averageOutgoingDamage"),
            winner_index=_raw_code(obj.get("winnerIndex")),
            enemy_class=coerce_str(obj.get("enemyClass")),
            raw=dict(obj),
        )

    @property
    def is_win(self) -> bool:
        """Retourne True si le joueur a gagné la rencontre."""
        return self.winner_index == WIN_CODE

    @property
    def damage(self) -> Optional[float]:
        """Dégâts moyens parsés, None si illisibles."""
        return parse_float(self.average_outgoing_damage)


@dataclass(frozen=True)
class RankedItem:
    """Entrée d'un classement top-N affichée en "cercle".

    Attributes:
        key: Identifiant brut (ex: trinket_lucky_coin).
        name: Nom d'affichage.
        value: Métrique de tri (pourcentage ou nombre d'utilisations).
        stat: Libellé formaté de la métrique.
    """
    key: str
    name: str
    value: float
    stat: str


@dataclass(frozen=True)
class EnemyWinRate:
    """Part des victoires obtenues contre un adversaire.

    Attributes:
        key: Identifiant brut de l'adversaire.
        name: Nom d'affichage normalisé (sert aussi de clé d'image).
        wins: Victoires contre cet adversaire.
        win_rate: Part des victoires totales, en pourcentage arrondi.
    """
    key: str
    name: str
    wins: int
    win_rate: int
