"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from taxomap.config.policies import Policies, load_policies
from taxomap.config.settings import Settings
from taxomap.errors import ConfigurationError


@pytest.fixture
def minimal_policy_dict() -> dict:
    return {
        "policy_version": "test-version",
        "candidates": {"all_subtrees": True, "cache_max_entries": 500},
        "filters": {"category": ["black_list", "most_specific"], "black_list": [" Thing "]},
        "context": {"distance": 2, "language": "PL", "pool_size": 4, "timeout_seconds": 1.5},
        "scoring": {"detailed_logging": True, "pattern_sample_size": 5},
    }


def test_defaults_match_documented_values() -> None:
    policies = Policies()

    assert policies.candidates.all_subtrees is False
    assert policies.candidates.cache_max_entries is None
    assert policies.filters.category == ["black_list", "function", "lower_case", "rewrite_of"]
    assert policies.context.pool_size == 3
    assert policies.context.timeout_seconds == 15.0
    assert policies.context.distance == 1
    assert policies.scoring.detailed_logging is False


def test_load_policies_from_dict(minimal_policy_dict: dict) -> None:
    policies = load_policies(minimal_policy_dict)

    assert policies.policy_version == "test-version"
    assert policies.candidates.all_subtrees is True
    assert policies.filters.category == ["black_list", "most_specific"]
    assert policies.filters.black_list == ["Thing"]
    assert policies.context.language == "pl"
    assert policies.scoring.pattern_sample_size == 5


def test_load_policies_from_yaml(tmp_path: Path, minimal_policy_dict: dict) -> None:
    path = tmp_path / "policies.yaml"
    path.write_text(yaml.safe_dump(minimal_policy_dict), encoding="utf-8")

    policies = load_policies(path)

    assert policies.context.pool_size == 4


def test_policy_env_overrides(monkeypatch: pytest.MonkeyPatch, minimal_policy_dict: dict) -> None:
    monkeypatch.setenv("TAXOMAP_POLICY__CONTEXT__POOL_SIZE", "8")
    monkeypatch.setenv("TAXOMAP_POLICY__CANDIDATES__CATEGORY_EXACT_MATCH", "true")

    policies = load_policies(minimal_policy_dict)

    assert policies.context.pool_size == 8
    assert policies.candidates.category_exact_match is True
    assert minimal_policy_dict["context"]["pool_size"] == 4


@pytest.mark.parametrize(
    "override",
    [
        {"context": {"pool_size": 0}},
        {"context": {"timeout_seconds": 0}},
        {"candidates": {"cache_max_entries": 0}},
        {"filters": {"category": ["no_such_filter"]}},
    ],
)
def test_invalid_policies_raise_configuration_error(override: dict) -> None:
    with pytest.raises(ConfigurationError):
        load_policies({"policy_version": "v", **override})


def test_settings_merge_environment_yaml(tmp_path: Path) -> None:
    (tmp_path / "default.yaml").write_text(
        yaml.safe_dump({"policy_version": "from-default", "context": {"pool_size": 4}}),
        encoding="utf-8",
    )
    (tmp_path / "testing.yaml").write_text(
        yaml.safe_dump({"context": {"timeout_seconds": 2.5}}),
        encoding="utf-8",
    )

    settings = Settings(config_dir=tmp_path, environment="testing")

    assert settings.policy_version == "from-default"
    assert settings.policies.context.pool_size == 4
    assert settings.policies.context.timeout_seconds == 2.5
    assert settings.log_file.name == "taxomap.log"


def test_settings_nested_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAXOMAP_SETTINGS__SCORING__DETAILED_LOGGING", "true")

    settings = Settings(config_dir=tmp_path)

    assert settings.policies.scoring.detailed_logging is True


def test_settings_without_files_use_defaults(tmp_path: Path) -> None:
    settings = Settings(config_dir=tmp_path)

    assert settings.policies == Policies()
