"""Name normalization helpers."""

from .converter import to_term_name
from .heads import CategoryHeads
from .normalizer import (
    normalize_singular,
    normalize_whitespace,
    remove_parentheses,
    remove_scope,
    singularize_by_head,
    type_in_parentheses,
)

__all__ = [
    "CategoryHeads",
    "normalize_singular",
    "normalize_whitespace",
    "remove_parentheses",
    "remove_scope",
    "singularize_by_head",
    "to_term_name",
    "type_in_parentheses",
]
