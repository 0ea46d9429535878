"""Tests for JSON/YAML config loading helpers."""

from __future__ import annotations

import json

import pytest

from mlclient.session import load_config_mapping, load_session_config


def test_load_config_mapping_accepts_json(tmp_path) -> None:
    """Loader should parse JSON config objects."""

    path = tmp_path / "config.json"
    path.write_text(json.dumps({"left_ai": "MMAI_USER", "max_battles": 3}), encoding="utf-8")

    loaded = load_config_mapping(path)
    assert loaded == {"left_ai": "MMAI_USER", "max_battles": 3}


def test_load_config_mapping_accepts_yaml(tmp_path) -> None:
    """Loader should parse YAML config objects."""

    path = tmp_path / "config.yaml"
    path.write_text("right_ai: BattleAI\nbenchmark: true\n", encoding="utf-8")

    loaded = load_config_mapping(path)
    assert loaded == {"right_ai": "BattleAI", "benchmark": True}


def test_load_config_mapping_rejects_unsupported_extension(tmp_path) -> None:
    """Loader should fail fast on unknown config file suffix."""

    path = tmp_path / "config.toml"
    path.write_text("a = 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="unsupported config file extension"):
        load_config_mapping(path)


def test_load_config_mapping_requires_mapping_root(tmp_path) -> None:
    """Loader should reject non-mapping top-level config payloads."""

    path = tmp_path / "config.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")

    with pytest.raises(ValueError, match="config root must be a JSON/YAML object"):
        load_config_mapping(path)


def test_load_session_config_validates_fields(tmp_path) -> None:
    """Session configs are validated after loading."""

    good = tmp_path / "good.yml"
    good.write_text("schema_version: 5\nloglevel: debug\n", encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"left_ai": "MMAI_USER", "speed": 2}), encoding="utf-8")

    config = load_session_config(good)

    assert config.schema_version == 5
    assert config.loglevel == "debug"
    with pytest.raises(ValueError, match="speed"):
        load_session_config(bad)
