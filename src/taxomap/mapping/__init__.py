"""Scoring of candidate ontology terms against taxonomy context."""

from .article import ArticleMappingService
from .category import CategoryMappingService
from .genus import GenusProximumMappingService
from .pattern import PatternMappingService
from .relations import ALL_RELATIONS, RelationKind
from .service import (
    EXTERNAL_TYPE_LABEL,
    INFOBOX_LABEL,
    Channel,
    ChannelCount,
    MappingService,
    Score,
    sum_counts,
)

__all__ = [
    "MappingService",
    "CategoryMappingService",
    "ArticleMappingService",
    "GenusProximumMappingService",
    "PatternMappingService",
    "RelationKind",
    "ALL_RELATIONS",
    "Channel",
    "ChannelCount",
    "Score",
    "sum_counts",
    "EXTERNAL_TYPE_LABEL",
    "INFOBOX_LABEL",
]
