"""CLI entry point for atomex."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="atomex",
        description=(
            "Extract an ontology from an AtomicServer to a JSON file that can be "
            "imported into another AtomicServer"
        ),
        epilog=(
            "If you need an agent to fetch the ontology, set the ATOMIC_AGENT "
            "environment variable or put it in a .env file in the working directory."
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--in", dest="input_url", metavar="URL", help="Ontology to export")
    parser.add_argument("--out", dest="output", metavar="PATH", help="Output JSON file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every request and mapping"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr at INFO, or DEBUG when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format="{message}")


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.input_url:
        print("Error: please provide an input URL with --in", file=sys.stderr)
        sys.exit(1)
    if not args.output:
        print("Error: please provide an output file with --out", file=sys.stderr)
        sys.exit(1)

    configure_logging(args.verbose)

    try:
        config = Config.from_env()
        commands.handle_export(args, config)
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
