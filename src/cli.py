"""Command-line entrypoint for the address checker."""
import argparse
import logging
import os
import sys
from dotenv import load_dotenv

from src.addrcheck.config import VERSION, load_settings
from src.addrcheck.errors import AddressCheckError
from src.addrcheck.pipeline import check_file


logger = logging.getLogger("addrcheck.cli")


def _row_count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addrcheck",
        description="Vérifie les adresses d'un fichier tabulé via l'API adresse.",
    )
    parser.add_argument("input_file", help="Nom du fichier d'entrée (UTF-8, tabulation)")
    parser.add_argument("lines_to_check", type=_row_count, help="Nombre de lignes à traiter (hors en-tête)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    env_path = os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)

    args = build_parser().parse_args(argv)

    level = (os.getenv("ADDRCHECK_LOG_LEVEL") or "WARNING").strip().upper()
    # getLevelName returns a number only for a registered level name
    if not isinstance(logging.getLevelName(level), int):
        print(f"Erreur : ADDRCHECK_LOG_LEVEL inconnu : {level!r}", file=sys.stderr)
        return 1
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        settings = load_settings()
        output_path, _ = check_file(
            args.input_file,
            args.lines_to_check,
            settings=settings,
            show_progress=sys.stderr.isatty(),
        )
    except (OSError, AddressCheckError) as e:
        logger.debug("run aborted", exc_info=True)
        print(f"Erreur : {e}", file=sys.stderr)
        return 1

    print(f"✅ Fichier généré : {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
