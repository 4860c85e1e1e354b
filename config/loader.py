# config/loader.py
"""
Configuration reload utilities for Loreweb.

The main public function is ``reload_settings()`` which:
1. Reloads environment variables from ``.env`` (via ``dotenv.load_dotenv``).
2. Re-creates the ``LorewebSettings`` instance so that any changed values are applied.
3. Updates the symbols exported by the ``config`` package to reflect the new values.
"""

from __future__ import annotations

import importlib

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError

logger = structlog.get_logger(__name__)


def reload_settings() -> bool:
    """
    Reload configuration from the environment and refresh the ``config`` package.

    Returns ``True`` on success, ``False`` when the environment holds values that
    fail settings validation (the previous settings stay in effect).
    """
    import config as config_pkg

    # ``config.settings`` the attribute is the settings instance; fetch the module.
    settings_mod = importlib.import_module("config.settings")

    load_dotenv(override=True)

    try:
        fresh = settings_mod.LorewebSettings()
    except ValidationError as exc:
        logger.error("Configuration reload failed; keeping previous settings", error=str(exc))
        return False

    settings_mod.settings = fresh
    config_pkg.settings = fresh
    for field_name in settings_mod.LorewebSettings.model_fields:
        value = getattr(fresh, field_name)
        setattr(settings_mod, field_name, value)
        setattr(config_pkg, field_name, value)

    logger.debug("Configuration reloaded")
    return True
