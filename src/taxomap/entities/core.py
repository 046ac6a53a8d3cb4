"""Core value objects used throughout the mapping pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxomap.errors import RemoteError, RemoteTimeout, RemoteUnavailable

T = TypeVar("T")


class EntryKind(str, Enum):
    """Variants of taxonomy entries."""

    CATEGORY = "category"
    ARTICLE = "article"


class Term(BaseModel):
    """Ontology term handle; two terms are equal when their ids are equal."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Opaque ontology identifier")
    label: str = Field(default="", description="Human readable form of the term")

    @field_validator("id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("term id must contain non-whitespace characters")
        return cleaned

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.label or self.id


class Translation(BaseModel):
    """Name of an entry in another language or namespace."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., min_length=2, description="Language code of the translation")
    value: str = Field(..., min_length=1)

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        code = value.strip().lower()
        if len(code) < 2:
            raise ValueError("language must be at least two characters long")
        return code


class RemoteStatus(str, Enum):
    """Outcome classification of a remote task."""

    OK = "ok"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


@dataclass(frozen=True)
class RemoteOutcome(Generic[T]):
    """Explicit result of a remote task instead of a null-collapsed value."""

    source: str
    status: RemoteStatus
    value: T | None = None
    error: RemoteError | None = None

    @classmethod
    def ok(cls, source: str, value: T) -> "RemoteOutcome[T]":
        return cls(source=source, status=RemoteStatus.OK, value=value)

    @classmethod
    def timed_out(cls, source: str, error: RemoteTimeout) -> "RemoteOutcome[T]":
        return cls(source=source, status=RemoteStatus.TIMED_OUT, error=error)

    @classmethod
    def failed(cls, source: str, error: RemoteUnavailable) -> "RemoteOutcome[T]":
        return cls(source=source, status=RemoteStatus.FAILED, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status is RemoteStatus.OK

    @property
    def reason(self) -> str | None:
        return str(self.error) if self.error is not None else None


class TermScore(BaseModel):
    """Contextual support collected for a single candidate term."""

    term_id: str
    term_label: str
    positive: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    breakdown: Dict[str, List[int]] = Field(
        default_factory=dict,
        description="Per-channel [positive, negative] counts keyed by channel label.",
    )

    @property
    def negative(self) -> int:
        return self.total - self.positive

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.positive / self.total


class MappingRow(BaseModel):
    """Scored candidate mappings emitted for one taxonomy entry or pattern."""

    name: str
    full_name: str = ""
    tag: str | None = Field(
        default=None,
        description="Optional marker grouping the scores, e.g. the genus name.",
    )
    support: int | None = Field(default=None, ge=0)
    scores: List[TermScore] = Field(default_factory=list)

    def as_row(self) -> List[Any]:
        """Flatten into the tabular layout consumed by reporting tools."""

        row: List[Any] = [self.name]
        if self.full_name:
            row.append(self.full_name)
        if self.support is not None:
            row.append(self.support)
        if self.tag is not None:
            row.extend(["T", self.tag])
        for score in self.scores:
            row.extend([score.term_id, score.term_label, score.positive, score.total])
        return row


__all__ = [
    "EntryKind",
    "Term",
    "Translation",
    "RemoteStatus",
    "RemoteOutcome",
    "TermScore",
    "MappingRow",
]
