"""Generation of candidate ontology terms for categories and articles."""

from __future__ import annotations

import re
from typing import Iterable, List

from taxomap.config.policies import CandidatePolicy
from taxomap.entities import Term
from taxomap.interfaces import Article, Category, LexicalResource, Parser, Reasoner, SyntaxTree
from taxomap.naming import CategoryHeads, remove_parentheses, singularize_by_head, type_in_parentheses
from taxomap.utils.logging import get_logger

from .cache import EntityCache
from .candidate_set import CandidateSet
from .filters import FilterChain
from .name_mapper import NameMapper

_LOGGER = get_logger(component="candidate_generator")


class CandidateGenerator:
    """Produce :class:`CandidateSet` objects for taxonomy entries.

    Category names are resolved in priority order: the whole name with its
    head noun singularized, then syntactically simplified names built from the
    head parse trees, and finally the raw name. Article names are looked up as
    they are and, failing that, without their parenthetical qualifier. Every
    lookup passes through the filter chain of its family.

    Results are memoized per family by stable handle and frozen before they
    are shared. The caches only save work; a cold generator returns the same
    sets as a warm one.
    """

    def __init__(
        self,
        *,
        reasoner: Reasoner,
        parser: Parser,
        nouns: LexicalResource,
        policy: CandidatePolicy | None = None,
        name_mapper: NameMapper | None = None,
        category_filters: FilterChain | None = None,
        article_filters: FilterChain | None = None,
        genus_filters: FilterChain | None = None,
    ) -> None:
        self._policy = policy or CandidatePolicy()
        self._reasoner = reasoner
        self._parser = parser
        self._nouns = nouns
        self._name_mapper = name_mapper or NameMapper(reasoner)
        self._heads = CategoryHeads(parser)
        self._category_filters = category_filters if category_filters is not None else FilterChain()
        self._article_filters = article_filters if article_filters is not None else FilterChain()
        self._genus_filters = genus_filters if genus_filters is not None else FilterChain()

        max_entries = self._policy.cache_max_entries
        self._category_cache: EntityCache[CandidateSet] = EntityCache("category", max_entries=max_entries)
        self._article_cache: EntityCache[CandidateSet] = EntityCache("article", max_entries=max_entries)
        self._genus_cache: EntityCache[CandidateSet] = EntityCache("genus", max_entries=max_entries)
        self._term_cache: EntityCache[CandidateSet] = EntityCache("term", max_entries=max_entries)
        self._infobox_cache: EntityCache[CandidateSet] = EntityCache("infobox", max_entries=max_entries)

    @property
    def heads(self) -> CategoryHeads:
        return self._heads

    @property
    def nouns(self) -> LexicalResource:
        return self._nouns

    def category_candidates(self, category: Category) -> CandidateSet:
        cached = self._category_cache.get(category.id)
        if cached is not None:
            return cached

        head = self._heads.head(category)
        terms: List[Term] = []
        if head:
            for name in singularize_by_head(category.name, head, self._nouns):
                terms.extend(self._candidates_for_name(name, self._category_filters))
        candidate_set = CandidateSet.single(category.name, terms)
        if not candidate_set.is_empty() or self._policy.category_exact_match:
            return self._category_cache.put(category.id, candidate_set.freeze())

        candidate_set = self._candidate_set_for_syntax_trees(
            self._heads.head_trees(category), self._category_filters
        )
        if not candidate_set.is_empty():
            _LOGGER.debug(
                "Category candidates from simplified names",
                category=category.name,
                names=candidate_set.names,
            )
            return self._category_cache.put(category.id, candidate_set.freeze())

        candidate_set = self._candidate_set_for_name(category.name, self._category_filters)
        if candidate_set.is_empty():
            _LOGGER.debug("No candidates for category", category=category.name)
        return self._category_cache.put(category.id, candidate_set.freeze())

    def pattern_candidates(self, pattern: str | re.Pattern[str], representative: Category) -> CandidateSet:
        """Candidates for a class of categories sharing ``pattern``, exemplified by ``representative``."""

        return self._candidate_set_for_syntax_trees(
            self._heads.head_trees(representative), self._category_filters, pattern
        )

    def article_candidates(self, article: Article) -> CandidateSet:
        cached = self._article_cache.get(article.id)
        if cached is not None:
            return cached
        candidate_set = self._candidate_set_for_name(article.name, self._article_filters)
        if candidate_set.is_empty():
            stripped = remove_parentheses(article.name)
            if stripped != article.name:
                candidate_set = self._candidate_set_for_name(stripped, self._article_filters)
        return self._article_cache.put(article.id, candidate_set.freeze())

    def genus_proximum_candidates(self, article: Article) -> CandidateSet:
        """Candidates for the broader classes named in the article's definition."""

        cached = self._genus_cache.get(article.id)
        if cached is not None:
            return cached
        trees = [self._parser.parse(phrase) for phrase in article.type_phrases or []]
        candidate_set = self._candidate_set_for_syntax_trees(trees, self._genus_filters)
        return self._genus_cache.put(article.id, candidate_set.freeze())

    def parentheses_candidates(self, entry: Article | Category) -> CandidateSet:
        type_name = type_in_parentheses(entry.name)
        if not type_name:
            return CandidateSet()
        return self._candidate_set_for_name(type_name, self._genus_filters)

    def term_candidates(self, term_id: str) -> CandidateSet:
        """Singleton candidate set for an exact ontology identifier."""

        cached = self._term_cache.get(term_id)
        if cached is not None:
            return cached
        term = self._reasoner.find_term_by_id(term_id)
        candidate_set = CandidateSet.single("", [term] if term is not None else [])
        return self._term_cache.put(term_id, candidate_set.freeze())

    def infobox_candidates(self, infobox: str) -> CandidateSet:
        cached = self._infobox_cache.get(infobox)
        if cached is not None:
            return cached
        candidate_set = self._candidate_set_for_name(infobox, self._category_filters)
        return self._infobox_cache.put(infobox, candidate_set.freeze())

    def cache_stats(self) -> dict[str, dict[str, int]]:
        caches = (
            self._category_cache,
            self._article_cache,
            self._genus_cache,
            self._term_cache,
            self._infobox_cache,
        )
        return {cache.name: cache.stats() for cache in caches}

    # -- internals -----------------------------------------------------------------

    def _candidate_set_for_name(self, name: str, filters: FilterChain) -> CandidateSet:
        return CandidateSet.single(name, self._candidates_for_name(name, filters))

    def _candidate_set_for_syntax_trees(
        self,
        trees: Iterable[SyntaxTree],
        filters: FilterChain,
        pattern: str | re.Pattern[str] | None = None,
    ) -> CandidateSet:
        candidate_set = CandidateSet()
        for tree in trees:
            names = list(tree.simplify())
            if pattern is not None:
                # a simplified name too specific for the pattern cannot describe it,
                # e.g. "X alumni" is not part of "University alumni"
                pattern_text = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
                names = [name for name in names if name in pattern_text]
            head_node = tree.find_head_noun()
            if head_node is None:
                continue
            for name in names:
                terms: List[Term] = []
                for singular_name in singularize_by_head(name, head_node.content, self._nouns):
                    terms.extend(self._candidates_for_name(singular_name, filters))
                if terms:
                    candidate_set.add(name, terms)
                    if not self._policy.all_subtrees:
                        break
        return candidate_set

    def _candidates_for_name(self, name: str, filters: FilterChain) -> List[Term]:
        return filters.apply(self._name_mapper.find_terms(name))


__all__ = ["CandidateGenerator"]
