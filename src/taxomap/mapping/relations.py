"""Ontology relations checked between a candidate term and related candidates."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from taxomap.entities import Term
from taxomap.interfaces import Reasoner


class RelationKind(str, Enum):
    """Direction-aware relation between a mapped term and a related term."""

    GENLS = "genls"  # term specializes the related term
    SPEC = "spec"  # term generalizes the related term
    ISA = "isa"  # term is an instance of the related term
    TYPE = "type"  # related term is an instance of the term

    def holds(self, reasoner: Reasoner, term: Term, related: Term) -> bool:
        return _STRATEGIES[self](reasoner, term, related)


_STRATEGIES: Dict[RelationKind, Callable[[Reasoner, Term, Term], bool]] = {
    RelationKind.GENLS: lambda reasoner, term, related: reasoner.specializes(term, related),
    RelationKind.SPEC: lambda reasoner, term, related: reasoner.subsumes(term, related),
    RelationKind.ISA: lambda reasoner, term, related: reasoner.instance_of(term, related),
    RelationKind.TYPE: lambda reasoner, term, related: reasoner.type_of(term, related),
}

ALL_RELATIONS = (RelationKind.GENLS, RelationKind.SPEC, RelationKind.ISA, RelationKind.TYPE)

__all__ = ["RelationKind", "ALL_RELATIONS"]
