"""Lookup of ontology terms by natural-language name."""

from __future__ import annotations

from typing import List

from taxomap.entities import Term
from taxomap.interfaces import Reasoner
from taxomap.naming import normalize_whitespace, to_term_name


class NameMapper:
    """Find terms denoted by a name, falling back to an identifier-style lookup."""

    def __init__(self, reasoner: Reasoner) -> None:
        self._reasoner = reasoner

    def find_terms(self, name: str) -> List[Term]:
        cleaned = normalize_whitespace(name)
        if not cleaned:
            return []
        terms = list(self._reasoner.find_terms_by_name(cleaned))
        if terms:
            return terms
        term = self._reasoner.find_term_by_id(to_term_name(cleaned))
        return [term] if term is not None else []


__all__ = ["NameMapper"]
