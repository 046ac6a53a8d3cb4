"""Tests for bounded-distance contexts."""

from __future__ import annotations

import pytest

from taxomap.context import ARTICLES, CHILDREN, PARENTS, ContextProvider
from taxomap.errors import InvalidTraversalOrder

from .fakes import FakeArticle, FakeCategory, FakeStore, attach, link


def make_provider() -> ContextProvider:
    return ContextProvider(store=FakeStore())


def make_tree():
    cities = FakeCategory(id="g1", name="Cities")
    by_country = FakeCategory(id="p1", name="Cities by country")
    places = FakeCategory(id="p2", name="Populated places in Poland")
    root = FakeCategory(id="c1", name="Cities in Poland")
    masovia = FakeCategory(id="k1", name="Cities in Masovia")
    link(cities, by_country)
    link(by_country, root)
    link(places, root)
    link(root, masovia)
    return root, by_country, places, cities, masovia


def test_parents_are_computed_per_distance() -> None:
    root, by_country, places, cities, _ = make_tree()
    context = make_provider().context(root, distance=2)

    parents = context.parents()

    assert parents[0] == [root]
    assert parents[1] == [by_country, places]
    assert parents[2] == [cities]


def test_smaller_distance_is_a_prefix_of_larger_distance() -> None:
    root, *_ = make_tree()
    provider = make_provider()

    near = provider.context(root, distance=1).parents()
    far = provider.context(root, distance=2).parents()

    assert all(far[distance] == entries for distance, entries in near.items())


def test_children_and_articles() -> None:
    root, _, _, _, masovia = make_tree()
    warsaw = FakeArticle(id="a1", name="Warsaw")
    plock = FakeArticle(id="a2", name="Płock")
    attach(root, warsaw)
    attach(masovia, plock)
    context = make_provider().context(root, distance=2)

    assert context.children() == {0: [root], 1: [masovia], 2: []}
    assert context.articles() == {1: [warsaw], 2: [plock]}
    assert context.related(ARTICLES) == [warsaw, plock]


def test_non_regular_or_singular_categories_are_excluded() -> None:
    root = FakeCategory(id="c1", name="Cities in Poland")
    stubs = FakeCategory(id="x1", name="Poland stubs", regular=False)
    capital = FakeCategory(id="x2", name="Capital of Poland", plural=False)
    kept = FakeCategory(id="p1", name="Cities by country")
    link(stubs, root)
    link(capital, root)
    link(kept, root)

    assert make_provider().context(root, distance=1).parents()[1] == [kept]


def test_eponymous_article_categories_become_parents() -> None:
    root = FakeCategory(id="c1", name="Warsaw")
    countries = FakeCategory(id="p1", name="Capitals in Europe")
    article = FakeArticle(id="a1", name="Warsaw", categories=[countries])
    root.eponymous_articles.append(article)

    assert make_provider().context(root, distance=1).parents()[1] == [countries]


def test_article_parents_include_eponymous_category_parents() -> None:
    capitals = FakeCategory(id="p1", name="Capitals in Europe")
    cities = FakeCategory(id="p2", name="Cities in Poland")
    eponymous = FakeCategory(id="c9", name="Warsaw", parents=[cities])
    article = FakeArticle(id="a1", name="Warsaw", categories=[capitals], eponymous_categories=[eponymous])
    context = make_provider().context(article, distance=1)

    parents = context.parents()

    assert parents[0] == [article]
    assert parents[1] == [capitals, cities]
    assert context.related(PARENTS, min_distance=1) == [capitals, cities]


def test_related_drops_repeated_entries() -> None:
    shared = FakeCategory(id="g1", name="Settlements")
    first = FakeCategory(id="p1", name="Cities by country")
    second = FakeCategory(id="p2", name="Populated places in Poland")
    root = FakeCategory(id="c1", name="Cities in Poland")
    link(shared, first, second)
    link(first, root)
    link(second, root)
    context = make_provider().context(root, distance=2)

    assert context.parents()[2] == [shared, shared]
    assert context.related(PARENTS) == [root, first, second, shared]


def test_extend_requires_previous_distance() -> None:
    root, *_ = make_tree()
    context = make_provider().context(root, distance=2)

    with pytest.raises(InvalidTraversalOrder):
        context.extend(PARENTS, 2)
    with pytest.raises(InvalidTraversalOrder):
        context.extend(ARTICLES, 2)

    context.extend(CHILDREN, 0)
    assert context.extend(CHILDREN, 1)


def test_unknown_relation_is_rejected() -> None:
    root, *_ = make_tree()

    with pytest.raises(ValueError):
        make_provider().context(root).related("siblings")
