"""Domain value objects for the mapping pipeline."""

from .core import (
    EntryKind,
    MappingRow,
    RemoteOutcome,
    RemoteStatus,
    Term,
    TermScore,
    Translation,
)

__all__ = [
    "EntryKind",
    "Term",
    "Translation",
    "RemoteStatus",
    "RemoteOutcome",
    "TermScore",
    "MappingRow",
]
