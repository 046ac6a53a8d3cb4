"""Wiring of generators, providers and mapping services from settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Sequence

from .candidates import (
    BlackListFilter,
    CandidateGenerator,
    Filter,
    FilterChain,
    FunctionFilter,
    LowerCaseFilter,
    MostSpecificFilter,
    NameMapper,
    PosFilter,
    RewriteOfFilter,
    TypeFilter,
)
from .config import FilterPolicy, Settings, get_settings
from .context import ContextProvider
from .errors import ConfigurationError
from .interfaces import LexicalResource, Parser, Reasoner, RemoteService, TaxonomyStore, TermMultiplier
from .mapping import (
    ArticleMappingService,
    CategoryMappingService,
    GenusProximumMappingService,
    PatternMappingService,
)
from .utils.logging import get_logger

_LOGGER = get_logger(component="factory")

_FILTER_BUILDERS: Dict[str, Callable[[FilterPolicy, Reasoner], Filter]] = {
    "black_list": lambda policy, reasoner: BlackListFilter(policy.black_list),
    "lower_case": lambda policy, reasoner: LowerCaseFilter(),
    "function": lambda policy, reasoner: FunctionFilter(),
    "rewrite_of": lambda policy, reasoner: RewriteOfFilter(reasoner),
    "most_specific": lambda policy, reasoner: MostSpecificFilter(reasoner),
    "type": lambda policy, reasoner: TypeFilter(reasoner, policy.allowed_kinds),
    "pos": lambda policy, reasoner: PosFilter(reasoner, policy.allowed_pos),
}


def build_filters(names: Sequence[str], policy: FilterPolicy, reasoner: Reasoner) -> FilterChain:
    """Instantiate the named filters in order."""

    filters: List[Filter] = []
    for name in names:
        builder = _FILTER_BUILDERS.get(name)
        if builder is None:
            raise ConfigurationError(
                f"Unknown candidate filter '{name}'; expected one of {sorted(_FILTER_BUILDERS)}"
            )
        filters.append(builder(policy, reasoner))
    return FilterChain(filters)


def build_candidate_generator(
    settings: Settings | None = None,
    *,
    reasoner: Reasoner,
    parser: Parser,
    nouns: LexicalResource,
) -> CandidateGenerator:
    cfg = settings or get_settings()
    filter_policy = cfg.policies.filters
    return CandidateGenerator(
        reasoner=reasoner,
        parser=parser,
        nouns=nouns,
        policy=cfg.policies.candidates,
        name_mapper=NameMapper(reasoner),
        category_filters=build_filters(filter_policy.category, filter_policy, reasoner),
        article_filters=build_filters(filter_policy.article, filter_policy, reasoner),
        genus_filters=build_filters(filter_policy.genus, filter_policy, reasoner),
    )


def build_context_provider(
    settings: Settings | None = None,
    *,
    store: TaxonomyStore,
    remote_services: Mapping[str, RemoteService] | None = None,
) -> ContextProvider:
    cfg = settings or get_settings()
    return ContextProvider(
        store=store,
        remote_services=remote_services,
        policy=cfg.policies.context,
    )


@dataclass
class MappingServices:
    """Mapping services sharing one candidate generator and context provider."""

    candidate_generator: CandidateGenerator
    context_provider: ContextProvider
    category: CategoryMappingService
    article: ArticleMappingService
    genus: GenusProximumMappingService
    pattern: PatternMappingService

    def close(self) -> None:
        self.context_provider.close()


def build_mapping_services(
    settings: Settings | None = None,
    *,
    reasoner: Reasoner,
    parser: Parser,
    nouns: LexicalResource,
    store: TaxonomyStore,
    remote_services: Mapping[str, RemoteService] | None = None,
    multiplier: TermMultiplier | None = None,
) -> MappingServices:
    """Construct every mapping service wired according to the active settings."""

    cfg = settings or get_settings()
    generator = build_candidate_generator(cfg, reasoner=reasoner, parser=parser, nouns=nouns)
    provider = build_context_provider(cfg, store=store, remote_services=remote_services)
    common = {
        "candidate_generator": generator,
        "context_provider": provider,
        "reasoner": reasoner,
        "policy": cfg.policies.scoring,
    }
    _LOGGER.info(
        "Built mapping services",
        policy_version=cfg.policy_version,
        remote_services=sorted(remote_services or {}),
        multiplier=multiplier is not None,
    )
    return MappingServices(
        candidate_generator=generator,
        context_provider=provider,
        category=CategoryMappingService(multiplier=multiplier, **common),
        article=ArticleMappingService(**common),
        genus=GenusProximumMappingService(**common),
        pattern=PatternMappingService(store=store, multiplier=multiplier, **common),
    )


__all__ = [
    "MappingServices",
    "build_filters",
    "build_candidate_generator",
    "build_context_provider",
    "build_mapping_services",
]
