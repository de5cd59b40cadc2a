"""CLI entrypoint and read loop for the task tracker."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable
from pathlib import Path

from .dispatcher import Dispatcher
from .errors import StorageError
from .logging_config import configure_logging
from .service import TaskService
from .ui import ConsoleUI

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
DEFAULT_DB_PATH = Path(".taskline") / "tasks.db"
DB_PATH_ENV = "TASKLINE_DB"

logger = logging.getLogger(__name__)


def _default_db_path() -> Path:
    """Database path from the environment, else the local default."""
    override = os.getenv(DB_PATH_ENV, "").strip()
    return Path(override) if override else DEFAULT_DB_PATH


def _service(db_path: Path | str) -> TaskService:
    return TaskService(db_path=db_path)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="taskline", description="Track todos, deadlines and events")
    parser.add_argument("--db", type=Path, default=None, help="task database file (default: .taskline/tasks.db)")
    parser.add_argument("--log-level", default=None, help="logging level, overrides LOG_LEVEL")
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    db_path = args.db if args.db is not None else _default_db_path()
    return shell(db_path=db_path)


def shell(input_fn: InputFn = input, print_fn: PrintFn = print, db_path: Path | str = DEFAULT_DB_PATH) -> int:
    """Read lines and dispatch them until ``bye`` or end of input."""
    try:
        service = _service(db_path)
    except StorageError as exc:
        print_fn(f"Could not open task database: {exc}")
        return 1
    logger.debug("Opened task database %s", db_path)
    try:
        ui = ConsoleUI(service, print_fn)
        dispatcher = Dispatcher(ui, ui)
        ui.greet()
        while True:
            try:
                line = input_fn("")
            except (EOFError, KeyboardInterrupt):
                break
            outcome = dispatcher.process(line)
            if outcome.should_stop:
                break
        return 0
    finally:
        service.close()


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
