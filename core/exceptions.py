# core/exceptions.py
"""Define standardized exception types for Loreweb.

The relationship-graph engine itself never raises: unresolved references and
malformed fields degrade to missing edges. These exceptions belong to the
boundary that turns files into entity snapshots.
"""

from typing import Any


class LorewebError(Exception):
    """Base exception for all Loreweb errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class SnapshotError(LorewebError):
    """Errors related to reading or writing entity snapshots."""


class SnapshotLoadError(SnapshotError):
    """A snapshot file is missing, unreadable, or not a mapping document."""


class SnapshotValidationError(SnapshotError):
    """A snapshot entity could not be validated into its entity model."""


def create_error_context(**kwargs: Any) -> dict[str, Any]:
    """Build a context dictionary for structured errors.

    Args:
        **kwargs: Key-value pairs to include.

    Returns:
        A dictionary containing only keys whose values are not `None`.
    """
    return {k: v for k, v in kwargs.items() if v is not None}
