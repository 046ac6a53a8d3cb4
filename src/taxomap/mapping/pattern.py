"""Map classes of categories sharing a naming pattern."""

from __future__ import annotations

import random
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from taxomap.context import ARTICLES, CHILDREN, PARENTS
from taxomap.entities import MappingRow
from taxomap.interfaces import Category, TaxonomyStore
from taxomap.utils.logging import get_logger, log_timing, logging_context

from .relations import ALL_RELATIONS, RelationKind
from .service import EXTERNAL_TYPE_LABEL, Channel, MappingService

_LOGGER = get_logger(component="pattern_mapping")


def _merge_unique(target: Dict[Any, Any], entries: Iterable[Any]) -> None:
    for entry in entries:
        target.setdefault(entry.id, entry)


class PatternMappingService(MappingService):
    """Score one mapping for every category matching a pattern such as ``"X in Poland"``.

    The candidates come from a representative category whose head matches the
    pattern head; the evidence is pooled over a seeded sample of the matching
    categories so repeated runs produce the same scores.
    """

    def __init__(self, *, store: TaxonomyStore, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._store = store

    def candidates_for_pattern(
        self,
        pattern: str | re.Pattern[str],
        head: str,
        category_ids: Sequence[Any],
        support: int,
    ) -> Optional[MappingRow]:
        pattern_text = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        with logging_context(entity=pattern_text), log_timing("map_pattern", logger_=_LOGGER):
            representative = self._representative(head, category_ids)
            if representative is None:
                _LOGGER.debug("No representative category", pattern=pattern_text, head=head)
                return None

            candidate_set = self._candidate_generator.pattern_candidates(pattern, representative)
            row = MappingRow(name=pattern_text, full_name=candidate_set.full_name, support=support)
            terms = self.select_terms(candidate_set)
            if not terms:
                return row

            parents: Dict[Any, Any] = {}
            children: Dict[Any, Any] = {}
            articles: Dict[Any, Any] = {}
            for category in self._sample(category_ids):
                context = self._context_provider.context(category)
                _merge_unique(parents, context.related(PARENTS, min_distance=1))
                _merge_unique(children, context.related(CHILDREN, min_distance=1))
                _merge_unique(articles, context.related(ARTICLES))

            full_name = candidate_set.full_name
            article_list = list(articles.values())
            channels = [
                Channel(
                    "p",
                    self.related_category_candidates(parents.values()),
                    full_name,
                    (RelationKind.GENLS,),
                ),
                Channel(
                    "c",
                    self.related_category_candidates(children.values()),
                    full_name,
                    (RelationKind.SPEC,),
                ),
                Channel("i", self.related_article_candidates(article_list), full_name, (RelationKind.TYPE,)),
                Channel("t", self.related_type_candidates(article_list), EXTERNAL_TYPE_LABEL, ALL_RELATIONS),
            ]
            row.scores.extend(self.score_term(term, channels) for term in terms)
            return row

    def _representative(self, head: str, category_ids: Sequence[Any]) -> Optional[Category]:
        heads = self._candidate_generator.heads
        for category_id in category_ids:
            category = self._store.find_category_by_id(category_id)
            if category is None or not (category.regular and category.plural):
                continue
            if heads.head(category) == head:
                return category
        return None

    def _sample(self, category_ids: Sequence[Any]) -> List[Category]:
        ids = list(category_ids)
        size = min(self._policy.pattern_sample_size, len(ids))
        sample = random.Random(self._policy.random_seed).sample(ids, size)
        categories = [self._store.find_category_by_id(category_id) for category_id in sample]
        return [category for category in categories if category is not None]


__all__ = ["PatternMappingService"]
