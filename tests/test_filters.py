"""Tests for candidate filters and the filter factory."""

from __future__ import annotations

import pytest

from taxomap.candidates import (
    BlackListFilter,
    FilterChain,
    FunctionFilter,
    LowerCaseFilter,
    MostSpecificFilter,
    NameMapper,
    PosFilter,
    RewriteOfFilter,
    TypeFilter,
)
from taxomap.config import FilterPolicy
from taxomap.errors import ConfigurationError, FilterError
from taxomap.factory import build_filters

from .fakes import FakeReasoner, term


def test_black_list_filter() -> None:
    result = BlackListFilter(["Thing"]).apply([term("Thing"), term("City")])
    assert result == [term("City")]


def test_lower_case_and_function_filters() -> None:
    terms = [term("City"), term("capitalCity"), term("CityFn")]

    assert LowerCaseFilter().apply(terms) == [term("City"), term("CityFn")]
    assert FunctionFilter().apply(terms) == [term("City"), term("capitalCity")]


def test_rewrite_of_filter_drops_paraphrased_terms() -> None:
    reasoner = FakeReasoner(rewrites={"City": [term("City"), term("CityOld")]})

    result = RewriteOfFilter(reasoner).apply([term("City"), term("CityOld")])

    assert result == [term("City")]


def test_most_specific_filter_drops_generalizations() -> None:
    reasoner = FakeReasoner(genls=[("City", "Settlement")])

    result = MostSpecificFilter(reasoner).apply([term("Settlement"), term("City")])

    assert result == [term("City")]


def test_type_and_pos_filters_keep_allowed_terms() -> None:
    reasoner = FakeReasoner(
        kinds={"City": ["collection"], "Warsaw": ["individual"]},
        pos={"City": "noun", "Big": "adjective"},
    )

    assert TypeFilter(reasoner, ["collection"]).apply([term("City"), term("Warsaw")]) == [term("City")]
    assert PosFilter(reasoner, ["noun"]).apply([term("City"), term("Big")]) == [term("City")]


def test_filter_chain_applies_in_order_and_short_circuits() -> None:
    class Exploding:
        name = "exploding"

        def apply(self, terms):
            raise AssertionError("must not run on an empty list")

    chain = FilterChain([BlackListFilter(["City"]), Exploding()])

    assert chain.apply([term("City")]) == []


def test_filter_chain_wraps_failures_in_filter_error() -> None:
    class Broken:
        name = "broken"

        def apply(self, terms):
            raise RuntimeError("reasoner went away")

    with pytest.raises(FilterError) as excinfo:
        FilterChain([Broken()]).apply([term("City")])

    assert excinfo.value.filter_name == "broken"


def test_build_filters_follows_configured_order() -> None:
    policy = FilterPolicy(black_list=["Thing"])
    chain = build_filters(["black_list", "lower_case", "type"], policy, FakeReasoner())

    assert [filter_.name for filter_ in chain.filters] == ["black_list", "lower_case", "type"]


def test_build_filters_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError):
        build_filters(["black_list", "no_such_filter"], FilterPolicy(), FakeReasoner())


def test_name_mapper_falls_back_to_identifier_lookup() -> None:
    reasoner = FakeReasoner(ids=[term("BigCats")])

    assert NameMapper(reasoner).find_terms("big  cats") == [term("BigCats")]
    assert reasoner.lookups == ["big cats"]
    assert reasoner.id_lookups == ["BigCats"]


def test_name_mapper_prefers_name_lookup() -> None:
    reasoner = FakeReasoner(names={"city": [term("City")]})

    assert NameMapper(reasoner).find_terms("city") == [term("City")]
    assert reasoner.id_lookups == []
