"""Head-noun extraction for category names."""

from __future__ import annotations

from typing import List, Optional

from taxomap.interfaces import Category, Parser, SyntaxTree


class CategoryHeads:
    """Resolve the syntactic head(s) of category names through the parser.

    Categories such as "Cities and villages in Poland" carry one parsed head
    per coordinated noun phrase; every other category has exactly one. When the
    store supplies no pre-parsed heads, the category name itself is parsed.
    """

    def __init__(self, parser: Parser) -> None:
        self._parser = parser

    def head_trees(self, category: Category) -> List[SyntaxTree]:
        heads = list(category.parsed_heads or [])
        if not heads:
            heads = [category.name]
        return [self._parser.parse(head) for head in heads]

    def head_tree(self, category: Category) -> SyntaxTree:
        return self.head_trees(category)[0]

    def head(self, category: Category) -> Optional[str]:
        """Return the head noun of the first head phrase, if the parser finds one."""

        node = self.head_tree(category).find_head_noun()
        return node.content if node is not None else None


__all__ = ["CategoryHeads"]
