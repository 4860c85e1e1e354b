# config/__init__.py
"""Expose Loreweb configuration as stable module-level constants.

This package provides a facade over the Pydantic settings model defined in
[`config.settings`](config/settings.py:1). The primary API is the
[`settings`](config/settings.py:48) singleton plus a set of module-level constants
mirroring its fields.

Configuration precedence and lifecycle:
- On initial import, configuration is loaded by importing [`config.settings`](config/settings.py:1),
  which constructs the `settings` singleton.
- Values come from the process environment and may be sourced from a `.env` file.
- [`reload()`](config/__init__.py:70) re-reads `.env` with override enabled, then
  replaces this module's exported values (see [`config.loader.reload_settings()`](config/loader.py:1)).
"""

from typing import Any

from .settings import (
    LorewebSettings as LorewebSettings,
)
from .settings import (
    rich_formatter as rich_formatter,
)
from .settings import (
    settings as settings,
)
from .settings import (
    simple_formatter as simple_formatter,
)

BASE_OUTPUT_DIR = settings.BASE_OUTPUT_DIR
SNAPSHOT_FILE_PATH = settings.SNAPSHOT_FILE_PATH
GRAPH_EXPAND_BIDIRECTIONAL = settings.GRAPH_EXPAND_BIDIRECTIONAL
GRAPH_FILTER_REDUNDANT_RECIPROCALS = settings.GRAPH_FILTER_REDUNDANT_RECIPROCALS
LOG_LEVEL_STR = settings.LOG_LEVEL_STR
LOG_FORMAT = settings.LOG_FORMAT
LOG_DATE_FORMAT = settings.LOG_DATE_FORMAT
LOG_FILE = settings.LOG_FILE
ENABLE_RICH_OUTPUT = settings.ENABLE_RICH_OUTPUT
SIMPLE_LOGGING_MODE = settings.SIMPLE_LOGGING_MODE


def get(key: str) -> Any:
    """Return the value of a configuration attribute from `settings`.

    Raises:
        AttributeError: If `key` is not a valid attribute on `settings`.
    """
    return getattr(settings, key)


def set(key: str, value: Any) -> None:
    """Set a configuration attribute on `settings` and the matching constant.

    This mutates the in-memory settings instance and does not persist to `.env`.

    Raises:
        AttributeError: If `key` is not a valid attribute on `settings`.
    """
    if key not in LorewebSettings.model_fields:
        raise AttributeError(f"Unknown configuration key: {key}")
    setattr(settings, key, value)
    globals()[key] = value


def reload() -> bool:
    """Reload configuration and refresh this package's exported constants.

    Returns:
        ``True`` when the reload succeeded, ``False`` otherwise.
    """
    from .loader import reload_settings

    return reload_settings()
