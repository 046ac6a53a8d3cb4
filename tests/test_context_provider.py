"""Tests for remote relatives gathered by the context provider."""

from __future__ import annotations

import threading
import time

import pytest

from taxomap.config import ContextPolicy
from taxomap.context import PARENTS, ContextProvider
from taxomap.entities import EntryKind, Translation

from .fakes import (
    BlockingRemoteService,
    FakeCategory,
    FakeRemoteProxy,
    FakeRemoteService,
    FakeStore,
    en,
)


def pl(value: str) -> Translation:
    return Translation(language="pl", value=value)


def de(value: str) -> Translation:
    return Translation(language="de", value=value)


@pytest.fixture
def local_parent() -> FakeCategory:
    return FakeCategory(id="p1", name="Cities by country")


@pytest.fixture
def store(local_parent: FakeCategory) -> FakeStore:
    return FakeStore(categories=[local_parent])


@pytest.fixture
def root() -> FakeCategory:
    return FakeCategory(
        id="c1",
        name="Cities in Poland",
        translations=[pl("Kategoria:Miasta w Polsce"), de("Stadt in Polen")],
    )


def polish_service() -> FakeRemoteService:
    parent = FakeRemoteProxy(translations=[en("Category:Cities by country")])
    unknown = FakeRemoteProxy(translations=[en("Category:Nowhere")])
    untranslated = FakeRemoteProxy(translations=[])
    counterpart = FakeRemoteProxy(parents=[parent, unknown, untranslated])
    return FakeRemoteService(categories={"Miasta w Polsce": counterpart})


def test_no_remote_services_yield_no_relatives(store: FakeStore, root: FakeCategory) -> None:
    with ContextProvider(store=store) as provider:
        assert provider.relatives(root, PARENTS, EntryKind.CATEGORY) == []


def test_remote_relatives_are_resolved_locally(
    store: FakeStore, root: FakeCategory, local_parent: FakeCategory
) -> None:
    service = polish_service()
    with ContextProvider(store=store, remote_services={"PL": service}) as provider:
        related = provider.relatives(root, PARENTS, EntryKind.CATEGORY)

    assert related == [local_parent]
    assert service.calls == ["Miasta w Polsce"]


def test_remote_relatives_are_merged_into_context(
    store: FakeStore, root: FakeCategory, local_parent: FakeCategory
) -> None:
    with ContextProvider(store=store, remote_services={"pl": polish_service()}) as provider:
        parents = provider.context(root).parents()

    assert parents[1] == [local_parent]


def test_missing_translation_skips_service(store: FakeStore) -> None:
    service = polish_service()
    entry = FakeCategory(id="c2", name="Towns in Poland", translations=[de("Kleinstadt in Polen")])
    with ContextProvider(store=store, remote_services={"pl": service}) as provider:
        assert provider.relatives(entry, PARENTS, EntryKind.CATEGORY) == []

    assert service.calls == []


def test_failing_service_is_skipped(
    store: FakeStore, root: FakeCategory, local_parent: FakeCategory
) -> None:
    broken = FakeRemoteService(error=RuntimeError("connection reset"))
    services = {"pl": polish_service(), "de": broken}
    with ContextProvider(store=store, remote_services=services) as provider:
        related = provider.relatives(root, PARENTS, EntryKind.CATEGORY)

    assert related == [local_parent]
    assert broken.calls == ["Stadt in Polen"]


def test_slow_service_times_out_without_blocking_others(
    store: FakeStore, root: FakeCategory, local_parent: FakeCategory
) -> None:
    release = threading.Event()
    services = {"pl": polish_service(), "de": BlockingRemoteService(release)}
    policy = ContextPolicy(timeout_seconds=0.2)
    provider = ContextProvider(store=store, remote_services=services, policy=policy)
    try:
        started = time.perf_counter()
        related = provider.relatives(root, PARENTS, EntryKind.CATEGORY)
        elapsed = time.perf_counter() - started
    finally:
        release.set()
        provider.close()

    assert related == [local_parent]
    assert elapsed < 2.0


def test_hung_service_does_not_starve_healthy_ones(
    store: FakeStore, root: FakeCategory, local_parent: FakeCategory
) -> None:
    release = threading.Event()
    blocking = BlockingRemoteService(release)
    services = {"pl": polish_service(), "de": blocking}
    policy = ContextPolicy(timeout_seconds=0.2, pool_size=3)
    provider = ContextProvider(store=store, remote_services=services, policy=policy)
    try:
        results = [provider.relatives(root, PARENTS, EntryKind.CATEGORY) for _ in range(6)]
    finally:
        release.set()
        provider.close()

    assert results == [[local_parent]] * 6
    assert blocking.calls == ["Stadt in Polen"]


def test_remote_collections_are_truncated(store: FakeStore, root: FakeCategory) -> None:
    others = [FakeCategory(id=f"x{index}", name=f"Group {index}") for index in range(5)]
    proxies = [FakeRemoteProxy(translations=[en(category.name)]) for category in others]
    service = FakeRemoteService(categories={"Miasta w Polsce": FakeRemoteProxy(parents=proxies)})
    store = FakeStore(categories=others)
    policy = ContextPolicy(max_collection_size=2)
    with ContextProvider(store=store, remote_services={"pl": service}, policy=policy) as provider:
        related = provider.relatives(root, PARENTS, EntryKind.CATEGORY)

    assert related == others[:2]


def test_unknown_counterpart_yields_nothing(store: FakeStore, root: FakeCategory) -> None:
    service = FakeRemoteService()
    with ContextProvider(store=store, remote_services={"pl": service}) as provider:
        assert provider.relatives(root, PARENTS, EntryKind.CATEGORY) == []
