# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loads tasks), runs one command and
maps any failure to exit status 1 with a formatted message.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import UnknownCommandError, registry
from ..cli.formatters import format_error
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import StorageError, ValidationError

logger = logging.getLogger(__name__)


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, (ValidationError, UnknownCommandError)):
        return format_error(str(exc))
    if isinstance(exc, StorageError):
        return format_error(f"Storage error: {exc}")
    return format_error(f"Unexpected error: {exc}")


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = getattr(settings, "data_dir", ".local/tasklist")
    log_to_file = bool(getattr(settings, "log_to_file", True))
    try:
        setup_logging(log_dir=log_dir, console_level=console_level, log_to_file=log_to_file)
    except OSError as e:
        # Unwritable log dir: keep running with console logging only.
        setup_logging(log_dir=log_dir, console_level=console_level, log_to_file=False)
        logger.warning("File logging disabled, cannot write to %s: %s", log_dir, e)

    logger.debug("Starting %s argv=%s", getattr(settings, "app_name", "tasklist"), list(argv))

    try:
        state = create_initial_state(settings=settings)
    except Exception as e:
        logger.debug("Startup failed.", exc_info=True)
        print(f"❌ Application failed to start: {e}", file=sys.stderr)
        return 1

    try:
        output = registry.handle(state, argv)
    except (ValidationError, UnknownCommandError, StorageError) as e:
        logger.debug("Command failed: %s", e)
        print(_error_message(e))
        return 1
    except Exception as e:
        logger.exception("Unexpected error while running %s", list(argv))
        print(_error_message(e))
        return 1

    print(output)
    return 0


def run() -> None:
    """Console-script entry: exit with main()'s status."""
    sys.exit(main())


if __name__ == "__main__":
    run()
