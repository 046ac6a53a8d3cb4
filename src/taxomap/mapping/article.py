"""Map articles to ontology individuals or collections."""

from __future__ import annotations

from taxomap.context import PARENTS
from taxomap.entities import MappingRow
from taxomap.interfaces import Article
from taxomap.utils.logging import get_logger, log_timing, logging_context

from .relations import RelationKind
from .service import EXTERNAL_TYPE_LABEL, Channel, MappingService

_LOGGER = get_logger(component="article_mapping")

_MEMBERSHIP = (RelationKind.ISA, RelationKind.GENLS)


class ArticleMappingService(MappingService):
    """Score article candidates against parent categories, genus and type hints."""

    def candidates_for_article(self, article: Article) -> MappingRow:
        with logging_context(entity=article.name), log_timing("map_article", logger_=_LOGGER):
            candidate_set = self._candidate_generator.article_candidates(article)
            row = MappingRow(name=article.name)
            if candidate_set.is_empty():
                return row

            context = self._context_provider.context(article)
            parents = context.related(PARENTS, min_distance=1)
            genus = self._non_empty([self._candidate_generator.genus_proximum_candidates(article)])
            parentheses = self._non_empty([self._candidate_generator.parentheses_candidates(article)])
            channels = [
                Channel("p", self.related_category_candidates(parents), article.name, _MEMBERSHIP),
                Channel("g", genus, article.name, _MEMBERSHIP),
                Channel(
                    "t",
                    self.related_type_candidates([article]),
                    EXTERNAL_TYPE_LABEL,
                    (RelationKind.GENLS, RelationKind.SPEC),
                ),
                Channel("r", parentheses, article.name, _MEMBERSHIP),
            ]
            row.scores.extend(self.score_term(term, channels) for term in candidate_set.candidates)
            return row


__all__ = ["ArticleMappingService"]
