"""Protocols describing the collaborators consumed by the mapping core.

The parser, lexical resource, reasoner, taxonomy store and remote peer
services are owned by surrounding tooling. The core only relies on the
attributes and methods declared here.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable

from .entities import EntryKind, Term, Translation


class SyntaxNode(Protocol):
    """Node of a parsed name fragment."""

    content: str


class SyntaxTree(Protocol):
    """Parsed representation of a name fragment."""

    def find_head_noun(self) -> Optional[SyntaxNode]:
        ...

    def simplify(self) -> Iterable[str]:
        """Return simplified names, most specific first. Restartable."""
        ...


class Parser(Protocol):
    def parse(self, text: str) -> SyntaxTree:
        ...


class LexicalResource(Protocol):
    def singularize(self, word: str) -> Optional[Sequence[str]]:
        ...


@runtime_checkable
class Reasoner(Protocol):
    """Ontology client answering subsumption and type queries."""

    def subsumes(self, general: Term, specific: Term) -> bool:
        ...

    def specializes(self, specific: Term, general: Term) -> bool:
        ...

    def instance_of(self, instance: Term, collection: Term) -> bool:
        ...

    def type_of(self, collection: Term, instance: Term) -> bool:
        ...

    def find_terms_by_name(self, name: str) -> Sequence[Term]:
        ...

    def find_term_by_id(self, term_id: str) -> Optional[Term]:
        ...

    def rewrites_of(self, term: Term) -> Sequence[Term]:
        ...

    def kinds_of(self, term: Term) -> Sequence[str]:
        ...

    def part_of_speech(self, term: Term) -> Optional[str]:
        ...


class TaxonomyEntry(Protocol):
    id: str
    name: str
    kind: EntryKind
    regular: bool
    plural: bool
    translations: Sequence[Translation]


class Category(TaxonomyEntry, Protocol):
    parents: Sequence["Category"]
    children: Sequence["Category"]
    articles: Sequence["Article"]
    eponymous_articles: Sequence["Article"]
    parsed_heads: Sequence[str]


class Article(TaxonomyEntry, Protocol):
    categories: Sequence[Category]
    eponymous_categories: Sequence[Category]
    type_phrases: Sequence[str]
    external_type: Optional[str]
    infobox: Optional[str]


class TaxonomyStore(Protocol):
    def find_category_by_name(self, name: str) -> Optional[Category]:
        ...

    def find_article_by_name(self, name: str) -> Optional[Article]:
        ...

    def find_category_by_id(self, entry_id: str) -> Optional[Category]:
        ...


class RemoteProxy(Protocol):
    """Entry fetched from a remote peer; relations are read by attribute name."""

    translations: Sequence[Translation]


class RemoteService(Protocol):
    def find_category_by_name(self, name: str) -> Optional[RemoteProxy]:
        ...

    def find_article_by_name(self, name: str) -> Optional[RemoteProxy]:
        ...


class TermMultiplier(Protocol):
    """Combines the candidates of a compound-head category into shared terms."""

    def multiply(self, candidate_set: "CandidateSetLike") -> Sequence[Term]:
        ...


class CandidateSetLike(Protocol):
    full_name: str

    def all_candidates(self) -> list[Term]:
        ...


__all__ = [
    "SyntaxNode",
    "SyntaxTree",
    "Parser",
    "LexicalResource",
    "Reasoner",
    "TaxonomyEntry",
    "Category",
    "Article",
    "TaxonomyStore",
    "RemoteProxy",
    "RemoteService",
    "TermMultiplier",
]
