"""Bounded-distance neighbourhood of a taxonomy entry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Sequence

from taxomap.entities import EntryKind
from taxomap.errors import InvalidTraversalOrder

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .provider import ContextProvider

Entry = Any
DistanceTable = Dict[int, List[Entry]]

PARENTS = "parents"
CHILDREN = "children"
ARTICLES = "articles"
CATEGORIES = "categories"


def _admissible(entry: Entry) -> bool:
    """Only regular (non-administrative) entries with plural, category-style names."""

    return bool(entry.regular and entry.plural)


def _eponymous_parents(category: Entry) -> List[Entry]:
    """Categories of the articles sharing the category's name."""

    return [
        parent
        for article in getattr(category, "eponymous_articles", None) or ()
        for parent in article.categories or ()
    ]


class Context:
    """Distance-indexed parents, children and articles of one entry.

    ``parents[0]`` and ``children[0]`` hold the entry itself and
    ``articles[d]`` holds the articles of ``children[d - 1]``. Each distance is
    computed once, from the previous one, merging local relations with the
    relatives reported by the remote peers of the provider.
    """

    def __init__(self, entity: Entry, default_distance: int, provider: "ContextProvider") -> None:
        self._entity = entity
        self._default_distance = default_distance
        self._provider = provider
        self._tables: Dict[str, DistanceTable] = {PARENTS: {}, CHILDREN: {}, ARTICLES: {}}

    @property
    def entity(self) -> Entry:
        return self._entity

    def parents(self, max_distance: int | None = None) -> Mapping[int, List[Entry]]:
        """Parent categories up to ``max_distance``.

        Parents of eponymous counterparts are included: a category inherits
        the categories of its same-named article and an article inherits the
        parents of its same-named category.
        """

        self._walk(PARENTS, self._distance(max_distance))
        return dict(self._tables[PARENTS])

    def children(self, max_distance: int | None = None) -> Mapping[int, List[Entry]]:
        self._walk(CHILDREN, self._distance(max_distance))
        return dict(self._tables[CHILDREN])

    def articles(self, max_distance: int | None = None) -> Mapping[int, List[Entry]]:
        self._walk(ARTICLES, self._distance(max_distance))
        return dict(self._tables[ARTICLES])

    def related(
        self,
        relation: str,
        max_distance: int | None = None,
        *,
        min_distance: int = 0,
    ) -> List[Entry]:
        """Relatives in distance order without repeated entries."""

        table = {PARENTS: self.parents, CHILDREN: self.children, ARTICLES: self.articles}
        if relation not in table:
            raise ValueError(f"Unknown context relation '{relation}'")
        seen: set[Any] = set()
        result: List[Entry] = []
        for distance, entries in sorted(table[relation](max_distance).items()):
            if distance < min_distance:
                continue
            for entry in entries:
                if entry.id in seen:
                    continue
                seen.add(entry.id)
                result.append(entry)
        return result

    def extend(self, relation: str, distance: int) -> List[Entry]:
        """Compute ``relation[distance]`` from ``relation[distance - 1]``.

        Raises :class:`InvalidTraversalOrder` when the previous distance has
        not been computed yet.
        """

        if relation not in self._tables:
            raise ValueError(f"Unknown context relation '{relation}'")
        table = self._tables[relation]
        if distance in table:
            return table[distance]
        if distance < 0:
            raise ValueError("distance must be non-negative")

        if relation == ARTICLES:
            if distance == 0:
                raise ValueError("articles are defined from distance 1")
            if distance > 1 and distance - 1 not in table:
                raise InvalidTraversalOrder(relation, distance)
            table[distance] = self._articles_at(distance)
            return table[distance]

        if distance == 0:
            table[0] = [self._entity]
            return table[0]
        if distance - 1 not in table:
            raise InvalidTraversalOrder(relation, distance)

        if relation == PARENTS and self._entity.kind is EntryKind.ARTICLE and distance == 1:
            table[1] = self._article_direct_parents()
        elif relation == PARENTS:
            table[distance] = self._next_level(table[distance - 1], PARENTS, _eponymous_parents)
        else:
            table[distance] = self._next_level(table[distance - 1], CHILDREN)
        return table[distance]

    # -- internals -----------------------------------------------------------------

    def _distance(self, max_distance: int | None) -> int:
        return self._default_distance if max_distance is None else max_distance

    def _walk(self, relation: str, max_distance: int) -> None:
        start = 1 if relation == ARTICLES else 0
        for distance in range(start, max_distance + 1):
            self.extend(relation, distance)

    def _next_level(
        self,
        previous: Sequence[Entry],
        relation: str,
        auxiliary: Callable[[Entry], Iterable[Entry]] | None = None,
    ) -> List[Entry]:
        level: List[Entry] = []
        for relative in previous:
            local = list(getattr(relative, relation, None) or ())
            remote = self._provider.relatives(relative, relation, EntryKind.CATEGORY)
            extra = list(auxiliary(relative)) if auxiliary is not None else []
            level.extend(entry for entry in (*local, *remote, *extra) if _admissible(entry))
        return level

    def _article_direct_parents(self) -> List[Entry]:
        article = self._entity
        local = list(article.categories or ())
        eponymous = [
            parent
            for category in article.eponymous_categories or ()
            for parent in category.parents or ()
        ]
        remote = self._provider.relatives(article, CATEGORIES, EntryKind.CATEGORY)
        return [entry for entry in (*local, *eponymous, *remote) if _admissible(entry)]

    def _articles_at(self, distance: int) -> List[Entry]:
        categories = self.children(distance - 1)[distance - 1]
        level: List[Entry] = []
        for category in categories:
            local = list(getattr(category, ARTICLES, None) or ())
            remote = self._provider.relatives(category, ARTICLES, EntryKind.ARTICLE)
            level.extend(local + remote)
        return level


__all__ = ["Context", "PARENTS", "CHILDREN", "ARTICLES", "CATEGORIES"]
