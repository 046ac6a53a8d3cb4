"""Configuration utilities for the mapping pipeline."""

from .policies import (
    CandidatePolicy,
    ContextPolicy,
    FilterPolicy,
    Policies,
    ScoringPolicy,
    load_policies,
)
from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "Policies",
    "load_policies",
    "CandidatePolicy",
    "FilterPolicy",
    "ContextPolicy",
    "ScoringPolicy",
]
