# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")


def setup_logging(
    mode: str | None = None,
    console_log_level: int = logging.WARNING,
) -> logging.Handler:
    """
    Configure logging for argslide with either CLI-friendly or structured JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default)
                - "json": machine-readable JSON logs
            If not provided, it will use the `ARGSLIDE_LOG_MODE` environment variable
            or fall back to "cli".
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Returns:
        logging.Handler: The handler installed on the root logger.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARGSLIDE_LOG_MODE") or "cli"

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    argslide_logger = logging.getLogger("argslide")
    argslide_logger.setLevel(logging.DEBUG)
    argslide_logger.propagate = True
    return console_handler
