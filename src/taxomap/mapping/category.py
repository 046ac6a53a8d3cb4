"""Map categories to ontology collections."""

from __future__ import annotations

from taxomap.context import ARTICLES, CHILDREN, PARENTS
from taxomap.entities import MappingRow
from taxomap.interfaces import Category
from taxomap.utils.logging import get_logger, log_timing, logging_context

from .relations import ALL_RELATIONS, RelationKind
from .service import EXTERNAL_TYPE_LABEL, INFOBOX_LABEL, Channel, MappingService

_LOGGER = get_logger(component="category_mapping")


class CategoryMappingService(MappingService):
    """Score the candidate terms of a category against its neighbourhood.

    A good collection for a category generalizes the collections of its
    parents, specializes those of its children, and is the type of its
    articles and of their declared external types.
    """

    def candidates_for_category(self, category: Category) -> MappingRow:
        with logging_context(entity=category.name), log_timing("map_category", logger_=_LOGGER):
            candidate_set = self._candidate_generator.category_candidates(category)
            row = MappingRow(name=category.name, full_name=candidate_set.full_name)
            terms = self.select_terms(candidate_set)
            if not terms:
                _LOGGER.debug("Category has no candidate terms", category=category.name)
                return row

            context = self._context_provider.context(category)
            articles = context.related(ARTICLES)
            full_name = candidate_set.full_name
            channels = [
                Channel(
                    "p",
                    self.related_category_candidates(context.related(PARENTS)),
                    full_name,
                    (RelationKind.GENLS,),
                ),
                Channel(
                    "c",
                    self.related_category_candidates(context.related(CHILDREN)),
                    full_name,
                    (RelationKind.SPEC,),
                ),
                Channel(
                    "i",
                    self.related_article_candidates(articles),
                    full_name,
                    (RelationKind.TYPE,),
                ),
                Channel("t", self.related_type_candidates(articles), EXTERNAL_TYPE_LABEL, ALL_RELATIONS),
                Channel("x", self.related_infobox_candidates(articles), INFOBOX_LABEL, ALL_RELATIONS),
            ]
            row.scores.extend(self.score_term(term, channels) for term in terms)
            return row


__all__ = ["CategoryMappingService"]
