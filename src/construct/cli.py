"""Command line interface for the construct scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .errors import InvalidNameError, ScaffoldError
from .naming import parse
from .scaffold import ScaffoldEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="construct", description="Scaffold a basic PHP project")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="generate a basic PHP project")
    generate_parser.add_argument("name", help="The vendor/project name")
    generate_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project folder is created, created if missing (defaults to the current one)",
    )
    generate_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every scaffolding step",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _handle_generate(args: argparse.Namespace) -> int:
    try:
        names = parse(args.name)
    except InvalidNameError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.directory is not None:
        args.directory.mkdir(parents=True, exist_ok=True)
    engine = ScaffoldEngine(args.directory)
    try:
        engine.scaffold(names)
    except ScaffoldError as exc:
        print(f'Could not create project "{names.raw}": {exc}', file=sys.stderr)
        return 1

    print(f'Project "{names.raw}" created.')
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "generate":
        return _handle_generate(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
