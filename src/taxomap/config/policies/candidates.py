"""Candidate generation and filtering policy models."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

FilterName = Literal[
    "black_list",
    "lower_case",
    "function",
    "rewrite_of",
    "most_specific",
    "type",
    "pos",
]


class CandidatePolicy(BaseModel):
    """Controls for the candidate generator."""

    all_subtrees: bool = Field(
        default=False,
        description="Accumulate candidates from every simplified name instead of stopping at the first hit.",
    )
    category_exact_match: bool = Field(
        default=False,
        description="Return the singularized whole-name lookup for categories even when it is empty.",
    )
    cache_max_entries: int | None = Field(
        default=None,
        description="Per-family LRU capacity; None keeps entries for the lifetime of the generator.",
    )

    @field_validator("cache_max_entries")
    @classmethod
    def _validate_cache_size(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("cache_max_entries must be positive when provided")
        return value


class FilterPolicy(BaseModel):
    """Ordered filter chains applied per candidate family."""

    category: List[FilterName] = Field(
        default_factory=lambda: ["black_list", "function", "lower_case", "rewrite_of"]
    )
    article: List[FilterName] = Field(default_factory=lambda: ["black_list", "lower_case"])
    genus: List[FilterName] = Field(
        default_factory=lambda: ["black_list", "function", "lower_case", "rewrite_of"]
    )
    black_list: List[str] = Field(default_factory=list)
    allowed_kinds: List[str] = Field(default_factory=lambda: ["collection"])
    allowed_pos: List[str] = Field(default_factory=lambda: ["noun"])

    @field_validator("black_list", "allowed_kinds", "allowed_pos", mode="before")
    @classmethod
    def _strip_entries(cls, value: List[str] | None) -> List[str]:
        if value is None:
            return []
        return [item.strip() for item in value if item and item.strip()]
