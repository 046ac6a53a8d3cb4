"""Conversion of taxonomy names into ontology-style identifiers."""

from __future__ import annotations


def _capitalize_and_squeeze(words: str) -> str:
    segments = words.replace("-", " ").split()
    return "".join(
        segment if any(ch.isupper() for ch in segment) else segment.capitalize()
        for segment in segments
    )


def to_term_name(name: str, *, skip_qualifier: bool = False) -> str:
    """Convert ``"big cats (zoology)"`` into ``"BigCats-Zoology"``.

    Words already containing an upper-case letter keep their casing, so
    acronyms and proper names survive the conversion.
    """

    head, _, qualifier = name.partition("(")
    converted = _capitalize_and_squeeze(head)
    if qualifier and not skip_qualifier:
        return f"{converted}-{_capitalize_and_squeeze(qualifier.replace(')', '', 1))}"
    return converted


__all__ = ["to_term_name"]
