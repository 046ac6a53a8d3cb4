"""String helpers for cleaning taxonomy entry names before term lookup."""

from __future__ import annotations

import re
from typing import List

from taxomap.interfaces import LexicalResource

_PARENTHESES_PATTERN = re.compile(r"\([^)]*\)")
_SCOPE_PATTERN = re.compile(r"^[^:]+:")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace into single spaces."""

    return _WHITESPACE_PATTERN.sub(" ", text.strip())


def remove_parentheses(name: str) -> str:
    """Strip parenthesized qualifiers, e.g. ``"Warsaw (capital)"`` -> ``"Warsaw"``.

    Every qualifier is removed so the result has none left to strip. Names
    without a parenthesis, or starting with one, are returned unchanged.
    """

    if "(" not in name or name.startswith("("):
        return name
    return normalize_whitespace(_PARENTHESES_PATTERN.sub(" ", name))


def type_in_parentheses(name: str) -> str:
    """Return the text of the first parenthesized qualifier or an empty string."""

    match = _PARENTHESES_PATTERN.search(name)
    if match is None:
        return ""
    return match.group(0)[1:-1]


def remove_scope(name: str) -> str:
    """Drop a namespace prefix such as ``"Category:"``."""

    return _SCOPE_PATTERN.sub("", name, count=1)


def singularize_by_head(name: str, head: str, nouns: LexicalResource) -> List[str]:
    """Substitute each singular form of ``head`` for its whole-word occurrence in ``name``.

    The result always contains at least one name: when the lexical resource
    knows no singular form the original name is returned.
    """

    names: List[str] = []
    singular_forms = nouns.singularize(head) or []
    pattern = re.compile(rf"\b{re.escape(head)}\b")
    for singular in singular_forms:
        names.append(pattern.sub(lambda _match, value=singular: value, name, count=1))
    if not names:
        names.append(name)
    return names


def normalize_singular(name: str, nouns: LexicalResource | None = None) -> str:
    """Lower-case ``name`` and singularize its last word.

    Used to detect related entries whose name is the same as the mapped entry.
    """

    normalized = normalize_whitespace(name).lower()
    if not normalized or nouns is None:
        return normalized
    words = normalized.split(" ")
    forms = nouns.singularize(words[-1]) or []
    if forms:
        words[-1] = forms[0].lower()
    return " ".join(words)


__all__ = [
    "normalize_whitespace",
    "remove_parentheses",
    "type_in_parentheses",
    "remove_scope",
    "singularize_by_head",
    "normalize_singular",
]
