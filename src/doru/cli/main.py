# src/doru/cli/main.py

"""
CLI entrypoint.

One invocation = one load, at most one mutation, one save:
- parse arguments and settings,
- load the TaskStore from the resolved path,
- run the command and save only if it changed the store,
- print the result (stdout) or the error (stderr) and exit.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ..config import Settings, get_settings
from ..errors import DoruError, StorageError
from ..logging_setup import setup_logging
from .bootstrap import open_store
from .commands import registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_STORAGE = 2


def build_parser(app_name: str = "doru") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=app_name, description="A simple command-line task list.")
    parser.add_argument(
        "-p",
        "--path",
        default=None,
        help="Path to the todos file (overrides DORU_PATH).",
    )
    registry.add_subparsers(parser)
    return parser


def run(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    """Execute one command and return the process exit code."""
    if settings is None:
        settings = get_settings()

    args = build_parser(settings.app_name).parse_args(argv)

    try:
        path, store = open_store(settings, args.path)
        result = registry.handle(store, args)
        if result.mutated:
            store.save(path)
    except StorageError as exc:
        logger.debug("Storage failure", exc_info=True)
        print(exc, file=sys.stderr)
        return EXIT_STORAGE
    except DoruError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE

    if result.text:
        print(result.text)
    return EXIT_OK


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(console_level=console_level, log_dir=log_dir)

    sys.exit(run(settings=settings))


if __name__ == "__main__":
    main()
