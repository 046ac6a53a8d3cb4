"""Context traversal and remote fetch policy models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ContextPolicy(BaseModel):
    """Bounds for relative traversal and remote peer fetches."""

    distance: int = Field(default=1, ge=0, description="Default context distance.")
    language: str = Field(default="en", min_length=2, description="Local language code.")
    pool_size: int = Field(default=3, ge=1, le=64, description="Worker pool size for remote fetches.")
    timeout_seconds: float = Field(
        default=15.0,
        gt=0.0,
        description="Join timeout applied to each batch of remote tasks.",
    )
    max_collection_size: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of related proxies read from one remote collection.",
    )

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return value.strip().lower()
