# config/settings.py
"""
Configuration settings for the Loreweb relationship-graph engine.
Uses Pydantic BaseSettings for automatic environment variable loading.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import structlog
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class LorewebSettings(BaseSettings):
    """Full configuration for Loreweb."""

    # Output and File Paths
    BASE_OUTPUT_DIR: str = "output"
    SNAPSHOT_FILE_PATH: str = "story_snapshot.yaml"

    # Graph post-processing defaults
    GRAPH_EXPAND_BIDIRECTIONAL: bool = True
    GRAPH_FILTER_REDUNDANT_RECIPROCALS: bool = True

    # Logging & UI
    LOG_LEVEL_STR: str = Field("INFO", alias="LOG_LEVEL")
    LOG_FORMAT: str = (
        "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
    )
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_FILE: str | None = None
    ENABLE_RICH_OUTPUT: bool = True
    # Minimal logging mode: console only, no rotation/Rich
    SIMPLE_LOGGING_MODE: bool = False

    model_config = SettingsConfigDict(
        env_prefix="", env_file=".env", extra="ignore", populate_by_name=True
    )


settings = LorewebSettings()


# Update module level variables for backward compatibility
for _field in LorewebSettings.model_fields:
    globals()[_field] = getattr(settings, _field)


# Configure structlog to integrate with standard logging and output human‑readable messages
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="%m/%d/%Y, %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def filter_internal_keys(
    logger: Any, name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Remove internal structlog fields from event dict."""
    keys_to_remove = [k for k in event_dict.keys() if k.startswith("_")]
    for key in keys_to_remove:
        event_dict.pop(key, None)
    return event_dict


def _format_event(event_dict: MutableMapping[str, Any], rich_markup: bool) -> str:
    event_dict.pop("_record", None)
    event_dict.pop("_from_structlog", None)

    level = str(event_dict.pop("level", "INFO")).upper()
    timestamp = event_dict.pop("timestamp", "")
    logger_name = event_dict.pop("logger", "")
    event = event_dict.pop("event", "")

    parts = []
    if timestamp:
        parts.append(f"{timestamp}")
    if logger_name:
        short_name = logger_name.split(".")[-1]
        parts.append(f"[cyan]{short_name}[/cyan]" if rich_markup else f"[{short_name}]")

    if rich_markup and level in {"ERROR", "CRITICAL"}:
        parts.append(f"[red]{level}[/red]")
    elif rich_markup and level == "WARNING":
        parts.append(f"[yellow]{level}[/yellow]")
    elif rich_markup and level == "INFO":
        parts.append(f"[green]{level}[/green]")
    else:
        parts.append(level)

    if event:
        parts.append(f"[bold]{event}[/bold]" if rich_markup else str(event))

    context_parts = []
    for key, value in event_dict.items():
        if key.startswith("_"):
            continue
        if isinstance(value, str) and len(value) > 50:
            value_str = f"{value[:47]}..."
        else:
            value_str = str(value)
        context_parts.append(f"[dim]{key}[/dim]={value_str}" if rich_markup else f"{key}={value_str}")
    if context_parts:
        parts.append(f"({', '.join(context_parts)})")

    return " ".join(parts)


def simple_log_format_rich(
    logger: Any, name: str, event_dict: MutableMapping[str, Any]
) -> str:
    """Simple human-readable log formatter with Rich markup for console output."""
    return _format_event(event_dict, rich_markup=True)


def simple_log_format_plain(
    logger: Any, name: str, event_dict: MutableMapping[str, Any]
) -> str:
    """Simple human-readable log formatter without markup for file output."""
    return _format_event(event_dict, rich_markup=False)


_FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="%m/%d/%Y, %H:%M:%S"),
    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
]

# Formatter for file output (plain text, no Rich markup)
simple_formatter = structlog.stdlib.ProcessorFormatter(
    foreign_pre_chain=_FOREIGN_PRE_CHAIN,
    processors=[
        filter_internal_keys,
        simple_log_format_plain,
    ],
)

# Formatter for Rich console output (with color markup)
rich_formatter = structlog.stdlib.ProcessorFormatter(
    foreign_pre_chain=_FOREIGN_PRE_CHAIN,
    processors=[
        filter_internal_keys,
        simple_log_format_rich,
    ],
)

