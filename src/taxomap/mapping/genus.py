"""Map the genus proximum phrases of article definitions."""

from __future__ import annotations

from typing import List

from taxomap.context import PARENTS
from taxomap.entities import MappingRow
from taxomap.interfaces import Article
from taxomap.naming import normalize_singular
from taxomap.utils.logging import get_logger, logging_context

from .relations import RelationKind
from .service import EXTERNAL_TYPE_LABEL, Channel, MappingService

_LOGGER = get_logger(component="genus_mapping")

_HIERARCHY = (RelationKind.GENLS, RelationKind.SPEC)


class GenusProximumMappingService(MappingService):
    """Score the terms found for each genus phrase of an article.

    One row is emitted per genus phrase, tagged with that phrase.
    """

    def candidates_for_article(self, article: Article) -> List[MappingRow]:
        with logging_context(entity=article.name):
            genus_set = self._candidate_generator.genus_proximum_candidates(article)
            if genus_set.is_empty():
                return []

            context = self._context_provider.context(article)
            parents = self.related_category_candidates(context.related(PARENTS, min_distance=1))
            types = self.related_type_candidates([article])
            parentheses = self._non_empty([self._candidate_generator.parentheses_candidates(article)])

            rows: List[MappingRow] = []
            for genus_name, terms in genus_set:
                entity_name = normalize_singular(genus_name, self._candidate_generator.nouns)
                channels = [
                    Channel("p", parents, entity_name, _HIERARCHY),
                    Channel("t", types, EXTERNAL_TYPE_LABEL, _HIERARCHY),
                    Channel("r", parentheses, entity_name, _HIERARCHY),
                ]
                row = MappingRow(name=article.name, tag=genus_name)
                row.scores.extend(self.score_term(term, channels) for term in terms)
                rows.append(row)
            _LOGGER.debug("Scored genus phrases", article=article.name, genus=genus_set.names)
            return rows


__all__ = ["GenusProximumMappingService"]
