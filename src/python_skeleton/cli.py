"""Command line interface for python-skeleton."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import ProjectSpec
from .errors import BuildError, NamingError
from .scaffold import ProjectScaffolder

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python-skeleton",
        description="Create the directory skeleton of a data science Python project",
    )
    parser.add_argument(
        "project",
        metavar="PROJECT_NAME",
        help="Name of the root directory of the project. It must be Train-Case.",
    )
    parser.add_argument(
        "package",
        metavar="PKG_NAME",
        help="Name of the package. It must be snake_case.",
    )
    parser.add_argument(
        "--doc",
        action="store_true",
        help="Create a `docs` directory for the documentation of the package",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report every directory and file as it is created",
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=None,
        help="Directory where the project is created (defaults to the current directory)",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    # No-op when the root logger already has handlers.
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger(__package__).setLevel(logging.INFO if verbose else logging.WARNING)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        spec = ProjectSpec.from_names(args.project, args.package, include_docs=args.doc)
    except NamingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    base_dir = args.directory if args.directory is not None else Path.cwd()
    try:
        project_path = ProjectScaffolder().build(spec, base_dir)
    except BuildError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Your project is ready at {project_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
