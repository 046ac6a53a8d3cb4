"""Evidence scoring shared by the mapping services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Sequence, Tuple

from taxomap.candidates import CandidateGenerator, CandidateSet
from taxomap.config.policies import ScoringPolicy
from taxomap.entities import Term, TermScore
from taxomap.interfaces import Reasoner, TermMultiplier
from taxomap.naming import normalize_singular
from taxomap.utils.logging import get_logger

from .relations import RelationKind

if TYPE_CHECKING:  # pragma: no cover - typing only
    from taxomap.context import ContextProvider

EXTERNAL_TYPE_LABEL = "EXTERNAL_TYPE"
INFOBOX_LABEL = "INFOBOX"

_LOGGER = get_logger(component="mapping")

Entry = Any


@dataclass(frozen=True)
class ChannelCount:
    """Related entries that did (positive) or did not (negative) support a term."""

    positive: int = 0
    negative: int = 0


@dataclass(frozen=True)
class Score:
    positive: int
    negative: int
    breakdown: Dict[str, Tuple[int, int]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.positive + self.negative


@dataclass(frozen=True)
class Channel:
    """One source of contextual evidence for a candidate term."""

    label: str
    candidate_sets: Sequence[CandidateSet]
    entity_name: str
    relations: Tuple[RelationKind, ...]


def sum_counts(counts: Sequence[ChannelCount], labels: Sequence[str]) -> Score:
    """Sum channel counts into a ``(positive, negative)`` score labelled per channel."""

    if len(counts) != len(labels):
        raise ValueError(f"Expected {len(labels)} channel counts, got {len(counts)}")
    breakdown = {label: (count.positive, count.negative) for label, count in zip(labels, counts)}
    return Score(
        positive=sum(count.positive for count in counts),
        negative=sum(count.negative for count in counts),
        breakdown=breakdown,
    )


class MappingService:
    """Base class computing contextual support for candidate terms."""

    def __init__(
        self,
        *,
        candidate_generator: CandidateGenerator,
        context_provider: "ContextProvider",
        reasoner: Reasoner,
        policy: ScoringPolicy | None = None,
        multiplier: TermMultiplier | None = None,
    ) -> None:
        self._candidate_generator = candidate_generator
        self._context_provider = context_provider
        self._reasoner = reasoner
        self._policy = policy or ScoringPolicy()
        self._multiplier = multiplier

    # -- related candidate sets ----------------------------------------------------

    def related_category_candidates(self, categories: Iterable[Entry]) -> List[CandidateSet]:
        return self._non_empty(
            self._candidate_generator.category_candidates(category)
            for category in categories
            if category.regular and category.plural
        )

    def related_article_candidates(self, articles: Iterable[Entry]) -> List[CandidateSet]:
        return self._non_empty(
            self._candidate_generator.article_candidates(article)
            for article in articles
            if article.regular
        )

    def related_type_candidates(self, articles: Iterable[Entry]) -> List[CandidateSet]:
        """Candidate sets of the external types declared for the articles."""

        return self._non_empty(
            self._candidate_generator.term_candidates(article.external_type)
            for article in articles
            if article.regular and getattr(article, "external_type", None)
        )

    def related_infobox_candidates(self, articles: Iterable[Entry]) -> List[CandidateSet]:
        return self._non_empty(
            self._candidate_generator.infobox_candidates(article.infobox)
            for article in articles
            if article.regular and getattr(article, "infobox", None)
        )

    # -- scoring -------------------------------------------------------------------

    def count_matches(
        self,
        candidate_sets: Sequence[CandidateSet],
        term: Term,
        entity_name: str,
        relations: Sequence[RelationKind],
    ) -> ChannelCount:
        """Count related candidate sets holding any of ``relations`` with ``term``.

        Sets named like the mapped entity and sets without candidates are
        skipped and counted neither way.
        """

        nouns = self._candidate_generator.nouns
        target = normalize_singular(entity_name, nouns)
        positive = negative = 0
        for candidate_set in candidate_sets:
            related_terms = candidate_set.all_candidates()
            if not related_terms:
                continue
            related_name = normalize_singular(candidate_set.full_name, nouns)
            if related_name == target:
                continue
            evidence = next(
                (
                    candidate
                    for candidate in related_terms
                    if any(relation.holds(self._reasoner, term, candidate) for relation in relations)
                ),
                None,
            )
            if evidence is None:
                negative += 1
                continue
            positive += 1
            if self._policy.detailed_logging:
                _LOGGER.info(
                    "Matched evidence",
                    entity=target,
                    related=related_name,
                    term=term.id,
                    evidence=evidence.id,
                )
        return ChannelCount(positive, negative)

    def score_term(self, term: Term, channels: Sequence[Channel]) -> TermScore:
        counts = [
            self.count_matches(channel.candidate_sets, term, channel.entity_name, channel.relations)
            for channel in channels
        ]
        score = sum_counts(counts, [channel.label for channel in channels])
        if self._policy.detailed_logging:
            _LOGGER.info(
                "Scored candidate term",
                term=term.id,
                positive=score.positive,
                total=score.total,
                breakdown=score.breakdown,
            )
        return TermScore(
            term_id=term.id,
            term_label=str(term),
            positive=score.positive,
            total=score.total,
            breakdown={label: list(pair) for label, pair in score.breakdown.items()},
        )

    def select_terms(self, candidate_set: CandidateSet) -> List[Term]:
        """Terms to score for a category-style candidate set.

        Sets produced from several heads are combined by the multiplier when
        one is configured, otherwise all their terms are scored.
        """

        if len(candidate_set) > 1:
            if self._multiplier is not None:
                terms = list(self._multiplier.multiply(candidate_set))
                _LOGGER.debug(
                    "Multiplied compound candidates",
                    names=candidate_set.names,
                    terms=[term.id for term in terms],
                )
                return terms
            return candidate_set.all_candidates()
        return candidate_set.candidates

    @staticmethod
    def _non_empty(candidate_sets: Iterable[CandidateSet]) -> List[CandidateSet]:
        return [candidate_set for candidate_set in candidate_sets if not candidate_set.is_empty()]


__all__ = [
    "MappingService",
    "Channel",
    "ChannelCount",
    "Score",
    "sum_counts",
    "EXTERNAL_TYPE_LABEL",
    "INFOBOX_LABEL",
]
