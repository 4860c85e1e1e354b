# config/validator.py
"""
Configuration validation utilities for Loreweb.

This module provides a single public function `validate_all()` that performs
cross-field sanity checks that cannot be expressed purely with Pydantic field
validators and returns a structured health report:

{
    "overall_health": "healthy" | "warning" | "error",
    "issues": {
        "errors":   [{ "field": "<field>", "message": "<msg>" }, ...],
        "warnings": [{ "field": "<field>", "message": "<msg>" }, ...],
        "info":     [{ "field": "<field>", "message": "<msg>" }, ...],
    }
}
"""

from __future__ import annotations

from .settings import LorewebSettings

_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
_SNAPSHOT_EXTENSIONS = (".yaml", ".yml", ".json")


def _add_issue(
    issues: dict[str, list[dict[str, str]]],
    severity: str,
    field: str,
    message: str,
) -> None:
    """Utility to append an issue entry to the report."""
    issues.setdefault(severity, []).append({"field": field, "message": message})


def validate_all(current_settings: LorewebSettings | None = None) -> dict:
    """
    Validate the current configuration state.

    Returns a health-report dict with overall status and detailed issue lists.
    """
    if current_settings is None:
        import config

        current_settings = config.settings

    issues: dict[str, list[dict[str, str]]] = {"errors": [], "warnings": [], "info": []}

    if str(current_settings.LOG_LEVEL_STR).upper() not in _VALID_LOG_LEVELS:
        _add_issue(
            issues,
            "errors",
            "LOG_LEVEL_STR",
            f"LOG_LEVEL '{current_settings.LOG_LEVEL_STR}' is not a valid logging level.",
        )

    if not current_settings.SNAPSHOT_FILE_PATH.lower().endswith(_SNAPSHOT_EXTENSIONS):
        _add_issue(
            issues,
            "warnings",
            "SNAPSHOT_FILE_PATH",
            (
                f"SNAPSHOT_FILE_PATH ({current_settings.SNAPSHOT_FILE_PATH}) has no YAML or JSON "
                "extension; the snapshot loader will reject it."
            ),
        )

    if (
        current_settings.GRAPH_FILTER_REDUNDANT_RECIPROCALS
        and not current_settings.GRAPH_EXPAND_BIDIRECTIONAL
    ):
        _add_issue(
            issues,
            "info",
            "GRAPH_EXPAND_BIDIRECTIONAL",
            "Redundant reciprocal filtering is enabled without bidirectional expansion.",
        )

    overall = "healthy"
    if issues["errors"]:
        overall = "error"
    elif issues["warnings"]:
        overall = "warning"

    return {
        "overall_health": overall,
        "issues": issues,
    }
