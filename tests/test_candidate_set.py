"""Tests for candidate sets and the entity cache."""

from __future__ import annotations

import threading

import pytest

from taxomap.candidates import CandidateSet, EntityCache

from .fakes import term


def test_empty_terms_are_not_added() -> None:
    candidate_set = CandidateSet()
    candidate_set.add("cities", [])

    assert candidate_set.is_empty()
    assert len(candidate_set) == 0
    assert candidate_set.candidates == []
    assert candidate_set.full_name == ""


def test_first_entry_holds_highest_priority_candidates() -> None:
    candidate_set = CandidateSet()
    candidate_set.add("cities", [term("City")])
    candidate_set.add("villages", [term("Village"), term("Hamlet")])

    assert candidate_set.candidates == [term("City")]
    assert candidate_set.all_candidates() == [term("City"), term("Village"), term("Hamlet")]
    assert candidate_set.names == ["cities", "villages"]
    assert candidate_set.full_name == "cities, villages"
    assert list(candidate_set) == [("cities", [term("City")]), ("villages", [term("Village"), term("Hamlet")])]


def test_single_constructor() -> None:
    assert CandidateSet.single("x", [term("X")]).full_name == "x"
    assert CandidateSet.single("x", []).is_empty()


def test_cache_first_writer_wins() -> None:
    cache: EntityCache[str] = EntityCache("test")

    assert cache.put("a", "first") == "first"
    assert cache.put("a", "second") == "first"
    assert cache.get("a") == "first"


def test_cache_evicts_least_recently_used() -> None:
    cache: EntityCache[int] = EntityCache("test", max_entries=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    stats = cache.stats()
    assert stats["evictions"] == 1
    assert stats["size"] == 2


def test_cache_stats_track_hits_and_misses() -> None:
    cache: EntityCache[int] = EntityCache("test")
    cache.get("missing")
    cache.put("a", 1)
    cache.get("a")

    assert cache.stats() == {"hits": 1, "misses": 1, "evictions": 0, "size": 1}
    cache.clear()
    assert len(cache) == 0


def test_cache_rejects_non_positive_bound() -> None:
    with pytest.raises(ValueError):
        EntityCache("test", max_entries=0)


def test_cache_concurrent_puts_keep_one_value() -> None:
    cache: EntityCache[int] = EntityCache("test")
    results: list[int] = []
    barrier = threading.Barrier(8)

    def worker(value: int) -> None:
        barrier.wait()
        results.append(cache.put("key", value))

    threads = [threading.Thread(target=worker, args=(value,)) for value in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(results)) == 1
    assert cache.get("key") == results[0]
