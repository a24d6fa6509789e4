#!/usr/bin/env python
"""Résumé texte des agrégats du dashboard, sans lancer Streamlit.

Usage:
    python scripts/summarize_telemetry.py --class kitsunagi
    python scripts/summarize_telemetry.py data/combined.json --class all --top-n 10
    python scripts/summarize_telemetry.py --trinket "lucky coin" --card "iron wave"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.analysis import (
    compute_best_card_pairs,
    compute_best_trinket_pairs,
    compute_floor_histogram,
    compute_pick_rate,
    compute_top_cards,
    compute_top_combos,
    compute_top_enemies,
    compute_top_trinkets,
    format_pick_rate,
    normalize_free_text,
    normalize_trinket_identifier,
)
from src.app.presentation import default_pinned_items
from src.config import DEFAULT_PLAYER_CLASS, DEFAULT_TOP_N, FLOOR_LABELS, get_default_dataset_path
from src.data.loaders import load_records

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def _print_table(title: str, df: pd.DataFrame) -> None:
    print()
    print(f"== {title}")
    if df.empty:
        print("   (aucune donnée)")
        return
    print(df.to_string(index=False))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Résumé des agrégats de télémétrie.")
    parser.add_argument("dataset", nargs="?", default=None, help="Fichier JSON (défaut: config)")
    parser.add_argument("--class", dest="player_class", default=DEFAULT_PLAYER_CLASS, help="Classe ou 'all'")
    parser.add_argument("--top-n", type=int, default=DEFAULT_TOP_N, help="Taille des classements")
    parser.add_argument("--trinket", default=None, help="Trinket épinglé (défaut: premier du classement)")
    parser.add_argument("--card", default=None, help="Carte épinglée (défaut: première du classement)")
    args = parser.parse_args(argv)

    path = args.dataset or get_default_dataset_path()
    records = load_records(path)
    if not records:
        return 1

    cls = args.player_class
    top_n = max(1, int(args.top_n))

    print(f"class: {cls} | {format_pick_rate(compute_pick_rate(records, cls))}")

    floors = compute_floor_histogram(records, cls)
    _print_table("Highest Floor Reached", pd.DataFrame({"floor": list(FLOOR_LABELS), "sessions": floors}))

    combos = compute_top_combos(records, cls, top_n)
    _print_table("Top Card Combos", pd.DataFrame({"combo": list(combos), "uses": list(combos.values())}))

    trinkets = compute_top_trinkets(records, cls, top_n)
    _print_table("Top trinkets", pd.DataFrame([{"trinket": t.name, "owned": t.stat} for t in trinkets]))

    cards = compute_top_cards(records, cls, top_n)
    _print_table("Top cards", pd.DataFrame([{"card": c.name, "uses": c.value} for c in cards]))

    enemies = compute_top_enemies(records, cls, top_n)
    _print_table(
        "Top enemies",
        pd.DataFrame([{"enemy": e.name, "wins": e.wins, "win_rate_%": e.win_rate} for e in enemies]),
    )

    default_trinket, default_card = default_pinned_items(trinkets, cards)
    trinket = normalize_trinket_identifier(normalize_free_text(args.trinket)) if args.trinket else default_trinket
    card = normalize_free_text(args.card) if args.card else default_card

    if trinket:
        pairs = compute_best_trinket_pairs(records, cls, trinket, top_n)
        _print_table(
            f"Best combos with {trinket}",
            pd.DataFrame({"trinket": list(pairs), "avg_dmg": list(pairs.values())}),
        )
    if card:
        pairs = compute_best_card_pairs(records, cls, card, top_n)
        _print_table(
            f"Best combos with {card}",
            pd.DataFrame({"card": list(pairs), "avg_dmg": list(pairs.values())}),
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
