"""Container mapping generating names to the ontology terms they produced."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from taxomap.entities import Term

FULL_NAME_SEPARATOR = ", "


class CandidateSet:
    """Ordered ``name -> terms`` entries produced by one generation call.

    Insertion order is significant: the first entry is the one produced by the
    highest priority strategy. Adding an empty term list is a no-op, so an
    empty set never holds entries. Once frozen, a set rejects further entries.
    """

    __slots__ = ("_entries", "_frozen")

    def __init__(self) -> None:
        self._entries: List[Tuple[str, Tuple[Term, ...]]] = []
        self._frozen = False

    @classmethod
    def single(cls, name: str, terms: Sequence[Term]) -> "CandidateSet":
        candidate_set = cls()
        candidate_set.add(name, terms)
        return candidate_set

    def add(self, name: str, terms: Sequence[Term]) -> None:
        if self._frozen:
            raise TypeError("frozen CandidateSet cannot be extended")
        if not terms:
            return
        self._entries.append((name, tuple(terms)))

    def freeze(self) -> "CandidateSet":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def is_empty(self) -> bool:
        return not self._entries

    def all_candidates(self) -> List[Term]:
        return [term for _, terms in self._entries for term in terms]

    @property
    def candidates(self) -> List[Term]:
        """Terms of the first (highest priority) entry."""

        if not self._entries:
            return []
        return list(self._entries[0][1])

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self._entries]

    @property
    def full_name(self) -> str:
        return FULL_NAME_SEPARATOR.join(self.names)

    def __iter__(self) -> Iterator[Tuple[str, List[Term]]]:
        for name, terms in self._entries:
            yield name, list(terms)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        rendered = "; ".join(
            f"{name} -> {', '.join(term.id for term in terms)}" for name, terms in self._entries
        )
        return f"CandidateSet({rendered})"


__all__ = ["CandidateSet", "FULL_NAME_SEPARATOR"]
