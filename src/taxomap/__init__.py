"""Mapping of collaborative taxonomy entries onto a formal ontology."""

from __future__ import annotations

from importlib.metadata import version

try:
    __version__ = version("taxomap")
except Exception:  # pragma: no cover - fallback during local development
    __version__ = "0.1.0"

from .candidates import CandidateGenerator, CandidateSet
from .config.settings import Settings, get_settings
from .context import Context, ContextProvider
from .entities import EntryKind, MappingRow, Term, TermScore, Translation
from .factory import MappingServices, build_mapping_services
from .mapping import (
    ArticleMappingService,
    CategoryMappingService,
    GenusProximumMappingService,
    PatternMappingService,
)

__all__ = [
    "__version__",
    "Settings",
    "get_settings",
    "EntryKind",
    "Term",
    "Translation",
    "TermScore",
    "MappingRow",
    "CandidateGenerator",
    "CandidateSet",
    "Context",
    "ContextProvider",
    "CategoryMappingService",
    "ArticleMappingService",
    "GenusProximumMappingService",
    "PatternMappingService",
    "MappingServices",
    "build_mapping_services",
]
