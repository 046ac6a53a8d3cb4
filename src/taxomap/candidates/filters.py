"""Candidate filters applied to the terms found for a name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Protocol, Sequence

from taxomap.entities import Term
from taxomap.errors import FilterError
from taxomap.interfaces import Reasoner
from taxomap.utils.logging import get_logger

_LOGGER = get_logger(component="filters")


class Filter(Protocol):
    """Common interface for candidate filters."""

    name: str

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        ...


class BlackListFilter:
    """Drop terms whose id is on the deny list."""

    name = "black_list"

    def __init__(self, denied: Iterable[str]) -> None:
        self._denied = frozenset(denied)

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        return [term for term in terms if term.id not in self._denied]


class LowerCaseFilter:
    """Drop terms whose id starts with a lower-case letter (predicates, not collections)."""

    name = "lower_case"

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        return [term for term in terms if not term.id[:1].islower()]


class FunctionFilter:
    """Drop functional terms, conventionally named with an ``Fn`` suffix."""

    name = "function"

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        return [term for term in terms if not term.id.endswith("Fn")]


class RewriteOfFilter:
    """Drop terms that another term in the list is a paraphrase (rewrite) of."""

    name = "rewrite_of"

    def __init__(self, reasoner: Reasoner) -> None:
        self._reasoner = reasoner

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        denied: set[Term] = set()
        for term in terms:
            # a term may be declared a rewrite of itself
            denied.update(rewrite for rewrite in self._reasoner.rewrites_of(term) if rewrite != term)
        return [term for term in terms if term not in denied]


class MostSpecificFilter:
    """Drop terms that generalize another term in the list."""

    name = "most_specific"

    def __init__(self, reasoner: Reasoner) -> None:
        self._reasoner = reasoner

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        return [
            term
            for term in terms
            if not any(
                other != term and self._reasoner.subsumes(term, other) for other in terms
            )
        ]


class TypeFilter:
    """Keep terms of an allowed ontology kind (e.g. ``collection``)."""

    name = "type"

    def __init__(self, reasoner: Reasoner, allowed: Iterable[str]) -> None:
        self._reasoner = reasoner
        self._allowed = frozenset(allowed)

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        return [
            term for term in terms if self._allowed.intersection(self._reasoner.kinds_of(term))
        ]


class PosFilter:
    """Keep terms whose denotation has an allowed part of speech."""

    name = "pos"

    def __init__(self, reasoner: Reasoner, allowed: Iterable[str]) -> None:
        self._reasoner = reasoner
        self._allowed = frozenset(allowed)

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        return [term for term in terms if self._reasoner.part_of_speech(term) in self._allowed]


@dataclass
class FilterChain:
    """Ordered filters folded left to right over a candidate list."""

    filters: List[Filter] = field(default_factory=list)

    def apply(self, terms: Sequence[Term]) -> List[Term]:
        result = list(terms)
        for filter_ in self.filters:
            if not result:
                break
            try:
                result = list(filter_.apply(result))
            except FilterError:
                raise
            except Exception as exc:
                _LOGGER.error("Candidate filter failed", filter=filter_.name, error=str(exc))
                raise FilterError(filter_.name, str(exc)) from exc
        return result

    def __len__(self) -> int:
        return len(self.filters)


__all__ = [
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
