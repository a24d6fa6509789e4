#!/usr/bin/env python
"""Script de fusion de plusieurs exports de télémétrie en un combined.json.

Usage:
    python scripts/combine_telemetry.py <output_json> <input1> [input2] [...]
    python scripts/combine_telemetry.py data/combined.json exports/

Options:
    --dry-run        Simuler sans écrire de fichier
    --verbose        Afficher la progression

Les entrées peuvent être des fichiers (tableau ou objet JSON) ou des
dossiers (tous les *.json du dossier, triés par nom).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.data.combine import combine_files, write_combined

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fusionne plusieurs exports de télémétrie en un tableau JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("output_json", help="Fichier JSON de sortie")
    parser.add_argument("inputs", nargs="+", help="Fichiers ou dossiers sources")
    parser.add_argument("--dry-run", action="store_true", help="Mode simulation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Mode verbeux")
    args = parser.parse_args(argv)

    records, stats = combine_files(args.inputs, progress=args.verbose)

    logger.info(f"Sources lues: {stats.files_read}")
    if stats.files_failed:
        logger.warning(f"Sources ignorées: {len(stats.files_failed)}")
    if stats.skipped_entries:
        logger.warning(f"Entrées non-objet ignorées: {stats.skipped_entries}")
    logger.info(f"Enregistrements: {stats.records}")

    if stats.files_read == 0:
        logger.error("Aucune source lisible, rien à écrire.")
        return 1

    if args.dry_run:
        logger.info("Mode simulation: aucun fichier écrit.")
        return 0

    write_combined(records, args.output_json)
    logger.info(f"Écrit: {args.output_json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
