"""Context construction with relatives gathered from remote peer taxonomies."""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from functools import partial
from itertools import islice
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from taxomap.config.policies import ContextPolicy
from taxomap.entities import EntryKind, RemoteOutcome, Translation
from taxomap.errors import RemoteTimeout, RemoteUnavailable, TranslationMissing
from taxomap.interfaces import RemoteProxy, RemoteService, TaxonomyStore
from taxomap.naming import remove_scope
from taxomap.utils.logging import get_logger

from .context import Context

Entry = Any
ContextFactory = Callable[[Entry, int, "ContextProvider"], Context]


def _find_translation(translations: Sequence[Translation] | None, language: str) -> Optional[str]:
    for translation in translations or ():
        if translation.language == language:
            return translation.value
    return None


class ContextProvider:
    """Build :class:`Context` objects and fetch remote relatives of entries.

    Every configured remote service holds the taxonomy of another language.
    Remote lookups run on a bounded thread pool; each batch is joined with the
    configured timeout and a service that fails, times out or finds nothing is
    left out of the result instead of failing the traversal. Timed-out tasks
    keep running; no new task is sent to a service until its previous one
    has finished, so a hung service holds at most one worker.
    """

    def __init__(
        self,
        *,
        store: TaxonomyStore,
        remote_services: Mapping[str, RemoteService] | None = None,
        policy: ContextPolicy | None = None,
        context_factory: ContextFactory | None = None,
    ) -> None:
        self._policy = policy or ContextPolicy()
        self._store = store
        self._remote_services: Dict[str, RemoteService] = {
            language.strip().lower(): service
            for language, service in (remote_services or {}).items()
        }
        self._context_factory = context_factory or Context
        self._executor = ThreadPoolExecutor(
            max_workers=self._policy.pool_size,
            thread_name_prefix="taxomap-remote",
        )
        self._inflight: Dict[str, Future] = {}
        self._inflight_lock = threading.Lock()
        self._logger = get_logger(component="context_provider", language=self._policy.language)

    @property
    def policy(self) -> ContextPolicy:
        return self._policy

    def context(self, entry: Entry, distance: int | None = None) -> Context:
        return self._context_factory(
            entry,
            self._policy.distance if distance is None else distance,
            self,
        )

    def relatives(self, entry: Entry, relation: str, result_kind: EntryKind) -> List[Entry]:
        """Local entries related to the remote counterparts of ``entry`` by ``relation``.

        The result is an unordered union over the remote services and may
        contain duplicates.
        """

        if not self._remote_services:
            return []
        proxies = self._translated_proxies(entry)
        if not proxies:
            return []
        tasks = {
            source: partial(self._related_entries, proxy, relation, result_kind)
            for source, proxy in proxies
        }
        related: List[Entry] = []
        for outcome in self._run(tasks, f"{relation} of {entry.name}"):
            if outcome.succeeded and outcome.value:
                related.extend(outcome.value)
        return related

    def close(self) -> None:
        """Stop accepting work; tasks already running finish on their own."""

        self._executor.shutdown(wait=False)

    def __enter__(self) -> "ContextProvider":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- internals -----------------------------------------------------------------

    def _translated_proxies(self, entry: Entry) -> List[Tuple[str, RemoteProxy]]:
        tasks: Dict[str, Callable[[], Any]] = {}
        for language, service in self._remote_services.items():
            try:
                translation = self._translation(entry, language)
            except TranslationMissing as exc:
                self._logger.debug("Skipping remote service", source=language, reason=str(exc))
                continue
            tasks[language] = partial(self._finder(service, entry.kind), remove_scope(translation))
        return [
            (outcome.source, outcome.value)
            for outcome in self._run(tasks, f"counterpart of {entry.name}")
            if outcome.succeeded and outcome.value is not None
        ]

    def _run(self, tasks: Mapping[str, Callable[[], Any]], label: str) -> List[RemoteOutcome]:
        """Submit one task per source, skipping sources whose previous task is still running."""

        outcomes: List[RemoteOutcome] = []
        futures: Dict[Future, str] = {}
        with self._inflight_lock:
            for source, task in tasks.items():
                previous = self._inflight.get(source)
                if previous is not None and not previous.done():
                    self._logger.warning("Remote service still busy", source=source, task=label)
                    error = RemoteTimeout(
                        f"Remote task for {label} skipped: previous task still running",
                        source=source,
                    )
                    outcomes.append(RemoteOutcome.timed_out(source, error))
                    continue
                future = self._executor.submit(task)
                self._inflight[source] = future
                futures[future] = source
        outcomes.extend(self._join(futures, label))
        return outcomes

    def _related_entries(self, proxy: RemoteProxy, relation: str, result_kind: EntryKind) -> List[Entry]:
        collection = getattr(proxy, relation, None) or ()
        resolve = (
            self._store.find_category_by_name
            if result_kind is EntryKind.CATEGORY
            else self._store.find_article_by_name
        )
        entries: List[Entry] = []
        for related in islice(collection, self._policy.max_collection_size):
            name = _find_translation(related.translations, self._policy.language)
            if name is None:
                continue
            local = resolve(remove_scope(name))
            if local is not None:
                entries.append(local)
        return entries

    def _join(self, futures: Mapping[Future, str], label: str) -> List[RemoteOutcome]:
        if not futures:
            return []
        _, pending = wait(futures, timeout=self._policy.timeout_seconds)
        outcomes: List[RemoteOutcome] = []
        for future, source in futures.items():
            if future in pending:
                error = RemoteTimeout(
                    f"Remote task for {label} exceeded {self._policy.timeout_seconds}s",
                    source=source,
                )
                self._logger.warning("Remote task timed out", source=source, task=label)
                outcomes.append(RemoteOutcome.timed_out(source, error))
                continue
            exc = future.exception()
            if exc is not None:
                error = RemoteUnavailable(f"Remote task for {label} failed: {exc}", source=source)
                self._logger.warning(
                    "Remote task failed",
                    source=source,
                    task=label,
                    error=str(exc),
                )
                outcomes.append(RemoteOutcome.failed(source, error))
                continue
            outcomes.append(RemoteOutcome.ok(source, future.result()))
        return outcomes

    @staticmethod
    def _translation(entry: Entry, language: str) -> str:
        value = _find_translation(getattr(entry, "translations", None), language)
        if value is None:
            raise TranslationMissing(entry.name, language)
        return value

    @staticmethod
    def _finder(service: RemoteService, kind: EntryKind) -> Callable[[str], Optional[RemoteProxy]]:
        if kind is EntryKind.CATEGORY:
            return service.find_category_by_name
        return service.find_article_by_name


__all__ = ["ContextProvider"]
