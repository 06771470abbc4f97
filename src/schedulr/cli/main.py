# src/schedulr/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (seeded with sample tasks), then runs
the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def resolve_log_level(name: object) -> int:
    """Map a level name ("DEBUG", "info", ...) to its number; unknown names give INFO."""
    return logging.getLevelNamesMapping().get(str(name).strip().upper(), logging.INFO)


def main() -> None:
    settings = get_settings()

    console_level = resolve_log_level(getattr(settings, "log_level", "INFO"))

    setup_logging(
        log_dir=getattr(settings, "data_dir", ".local/schedulr"),
        console_level=console_level,
        to_file=getattr(settings, "log_to_file", True),
    )

    logger.info("Starting %s...", getattr(settings, "app_name", "schedulr"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError):
        # Not in the main thread, or the platform has no SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled. Nothing to run; press Ctrl+C to stop.")
            stop_main.wait()
    except KeyboardInterrupt:
        # Ctrl+C or SIGTERM while a command was running.
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
