"""CLI for swapping images in a LaTeX project for lightweight placeholders and back"""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from loguru import logger

from latexoptimizer.commands import CommandDispatcher
from latexoptimizer.config import settings
from latexoptimizer.domain.errors import LatexOptimizerError


def _version() -> str:
    try:
        return version("latexoptimizer")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="latexoptimizer",
        description="Replace images with a placeholder to speed up document builds",
    )
    parser.add_argument(
        "--root",
        type=Path,
        required=False,
        help="Root of the working tree",
        default=Path("."),
    )
    parser.add_argument("--verbose", action="store_true", help="Log every file operation")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init", help="Archive all images and link them to the placeholder")
    subparsers.add_parser("update", help="Archive and link images added since the last run")
    subparsers.add_parser("switch", help="Toggle between original images and placeholders")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else settings.log_level
    logger.configure(handlers=[{"sink": sys.stderr, "level": level}])

    try:
        dispatcher = CommandDispatcher.for_root(args.root)
        message = getattr(dispatcher, args.command)()
    except (LatexOptimizerError, NotADirectoryError) as e:
        logger.error(str(e))
        return 1

    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
