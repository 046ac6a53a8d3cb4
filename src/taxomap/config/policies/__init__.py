"""Policy configuration primitives for the mapping pipeline."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from taxomap.errors import ConfigurationError

from .candidates import CandidatePolicy, FilterName, FilterPolicy
from .context import ContextPolicy
from .scoring import ScoringPolicy


class Policies(BaseModel):
    """Root policy container."""

    policy_version: str = Field(default="2026-10-01")
    candidates: CandidatePolicy = Field(default_factory=CandidatePolicy)
    filters: FilterPolicy = Field(default_factory=FilterPolicy)
    context: ContextPolicy = Field(default_factory=ContextPolicy)
    scoring: ScoringPolicy = Field(default_factory=ScoringPolicy)

    @model_validator(mode="after")
    def _validate_policy_version(self) -> "Policies":
        if not self.policy_version:
            raise ValueError("policy_version must be provided")
        return self


def _ensure_nested_mapping(
    cursor: MutableMapping[str, Any], part: str, full_path: Sequence[str]
) -> MutableMapping[str, Any]:
    existing = cursor.get(part)
    if existing is None:
        next_cursor: MutableMapping[str, Any] = {}
        cursor[part] = next_cursor
        return next_cursor
    if not isinstance(existing, MutableMapping):
        raise ValueError(
            "Cannot override policy path '"
            f"{'/'.join(full_path)}"
            "' because segment '"
            f"{part}"
            "' resolves to a non-mapping value"
        )
    return existing


def _resolve_env_overrides(raw: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Apply TAXOMAP_POLICY__ environment variable overrides.

    Variables are split on double underscores into a lowercased traversal
    path. Intermediate dictionaries are created on demand. Values are
    JSON-decoded when possible (``true`` -> ``True``), otherwise kept as raw
    strings.
    """

    prefix = "TAXOMAP_POLICY__"
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        parts = [segment.lower() for segment in key[len(prefix) :].split("__") if segment]
        if not parts:
            continue
        cursor: MutableMapping[str, Any] = raw
        for index, part in enumerate(parts[:-1], start=1):
            cursor = _ensure_nested_mapping(cursor, part, parts[: index + 1])
        try:
            parsed = json.loads(value)
        except (TypeError, json.JSONDecodeError):
            parsed = value
        cursor[parts[-1]] = parsed
    return raw


def load_policies(source: os.PathLike[str] | str | Mapping[str, Any]) -> Policies:
    """Load policies from a mapping or YAML file with environment overrides.

    Raises :class:`ConfigurationError` when the merged values do not validate.
    """

    if isinstance(source, Mapping):
        raw: MutableMapping[str, Any] = copy.deepcopy(dict(source))
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Policy file not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, MutableMapping):
            raise ValueError(
                f"Policy file '{path}' must contain a mapping at the top level"
            )
        raw = dict(loaded)
    hydrated = _resolve_env_overrides(raw)
    try:
        return Policies.model_validate(hydrated)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid policy configuration: {exc}") from exc


__all__ = [
    "Policies",
    "load_policies",
    "CandidatePolicy",
    "FilterPolicy",
    "FilterName",
    "ContextPolicy",
    "ScoringPolicy",
]
