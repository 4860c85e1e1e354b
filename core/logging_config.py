# core/logging_config.py
"""Configure Loreweb logging sinks and formatting.

This module configures:
- Standard library logging handlers (console and optional rotating file).
- Rich console integration when enabled.

Notes:
    This module performs side-effectful logger configuration and should be called
    once at process startup via [`setup_logging()`](core/logging_config.py:1).
"""

import logging as stdlib_logging
import logging.handlers
import os

import structlog
from rich.console import Console
from rich.logging import RichHandler

import config
from config import rich_formatter, simple_formatter


def setup_logging(console: Console | None = None) -> None:
    """Set up Loreweb logging handlers and formatting.

    This configures:
    - Console logging in simple mode.
    - Rotating file logging when a log file is configured.
    - Rich console output when Rich output is enabled.

    Args:
        console: Optional Rich console shared with table rendering.

    Notes:
        This function replaces the root logger handler list.
    """
    level = str(config.LOG_LEVEL_STR).upper()
    root_logger = stdlib_logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    if config.SIMPLE_LOGGING_MODE:
        stream_handler = stdlib_logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(simple_formatter)
        root_logger.addHandler(stream_handler)
        root_logger.info("Simple logging mode enabled: console only.")
        return

    if config.LOG_FILE:
        try:
            log_path = os.path.join(config.BASE_OUTPUT_DIR, config.LOG_FILE)
            os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
            file_handler = stdlib_logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                mode="a",
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(simple_formatter)
            root_logger.addHandler(file_handler)
            root_logger.info(f"File logging enabled. Log file: {log_path}")
        except OSError as e:
            console_handler_fallback = stdlib_logging.StreamHandler()
            console_handler_fallback.setFormatter(simple_formatter)
            root_logger.addHandler(console_handler_fallback)
            root_logger.error(
                f"Failed to configure file logging: {e}. Logging to console instead.",
                exc_info=True,
            )

    if config.ENABLE_RICH_OUTPUT:
        rich_handler = RichHandler(
            level=level,
            rich_tracebacks=True,
            show_path=False,
            markup=True,
            show_time=False,  # Timestamp already in our formatter
            show_level=False,  # Level already in our formatter
            console=console or Console(stderr=True),
        )
        rich_handler.setFormatter(rich_formatter)
        root_logger.addHandler(rich_handler)
    elif not any(isinstance(h, stdlib_logging.StreamHandler) for h in root_logger.handlers):
        stream_handler = stdlib_logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(simple_formatter)
        root_logger.addHandler(stream_handler)

    structlog.get_logger(__name__).debug("Logging setup complete", level=level)
