"""CLI entry point for mdmeta."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from ..core.config import MetadataConfig
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mdmeta",
        description="Markdown metadata - resolve PDF document metadata from markdown",
    )
    parser.add_argument("-v", "--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument("--verbose", action="store_true", help="Log extraction progress")

    subparsers = parser.add_subparsers(dest="command", required=False)

    extract_parser = subparsers.add_parser(
        "extract", help="Extract metadata from a markdown file"
    )
    commands.add_extract_arguments(extract_parser)

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log output to stderr at the requested verbosity."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = MetadataConfig.from_env()

        if args.command == "extract":
            exit_code = commands.handle_extract(args, config)
        else:
            parser.print_help()
            exit_code = 0

        sys.exit(exit_code)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
