"""Evidence scoring policy models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScoringPolicy(BaseModel):
    """Evidence scoring controls."""

    detailed_logging: bool = Field(
        default=False,
        description="Emit per-channel counts and matched evidence for every scored term.",
    )
    pattern_sample_size: int = Field(
        default=10,
        ge=1,
        description="Number of categories sampled to build the context of a category pattern.",
    )
    random_seed: int = Field(default=20230927)
