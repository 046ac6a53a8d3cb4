"""Candidate term generation for taxonomy entries."""

from .cache import EntityCache
from .candidate_set import CandidateSet
from .filters import (
    BlackListFilter,
    Filter,
    FilterChain,
    FunctionFilter,
    LowerCaseFilter,
    MostSpecificFilter,
    PosFilter,
    RewriteOfFilter,
    TypeFilter,
)
from .generator import CandidateGenerator
from .name_mapper import NameMapper

__all__ = [
    "CandidateGenerator",
    "CandidateSet",
    "EntityCache",
    "NameMapper",
    "Filter",
    "FilterChain",
    "BlackListFilter",
    "LowerCaseFilter",
    "FunctionFilter",
    "RewriteOfFilter",
    "MostSpecificFilter",
    "TypeFilter",
    "PosFilter",
]
