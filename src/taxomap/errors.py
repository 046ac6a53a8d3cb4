"""Exception hierarchy shared by the mapping pipeline."""

from __future__ import annotations

import time


class TaxomapError(Exception):
    """Base exception for mapping pipeline failures."""

    def __init__(self, message: str, *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable
        self.timestamp_ms = int(time.time() * 1000)


class ConfigurationError(TaxomapError):
    """Raised when settings or wiring options are malformed."""


class TranslationMissing(TaxomapError):
    """Raised when an entry has no counterpart in a remote language."""

    def __init__(self, name: str, language: str) -> None:
        super().__init__(f"No '{language}' translation for '{name}'")
        self.name = name
        self.language = language


class RemoteError(TaxomapError):
    """Base class for remote peer service failures."""

    def __init__(self, message: str, *, source: str, retryable: bool = True) -> None:
        super().__init__(message, retryable=retryable)
        self.source = source


class RemoteTimeout(RemoteError):
    """Raised when a remote task did not finish within the configured timeout."""


class RemoteUnavailable(RemoteError):
    """Raised when a remote task failed with an exception."""


class FilterError(TaxomapError):
    """Raised when a candidate filter cannot produce an honest result."""

    def __init__(self, filter_name: str, message: str) -> None:
        super().__init__(f"{filter_name}: {message}")
        self.filter_name = filter_name


class InvalidTraversalOrder(TaxomapError):
    """Raised when a context distance is requested before its predecessor."""

    def __init__(self, relation: str, distance: int) -> None:
        super().__init__(
            f"Cannot compute {relation}[{distance}] before {relation}[{distance - 1}]"
        )
        self.relation = relation
        self.distance = distance


__all__ = [
    "TaxomapError",
    "ConfigurationError",
    "TranslationMissing",
    "RemoteError",
    "RemoteTimeout",
    "RemoteUnavailable",
    "FilterError",
    "InvalidTraversalOrder",
]
