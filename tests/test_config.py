"""Configuration: tests for YAML loading and merging.

Tests cover:
    - Defaults when no file is present
    - Valid YAML is parsed into FnConfig
    - Missing files, bad YAML and invalid values return Failure
    - merge_config applies nested overrides
"""

import pytest

from zeta_fn import (
    Failure, FnConfig, InvalidArgumentError, Success,
    get_config, load_config, load_yaml, merge_config, parse_config, set_config,
)


def test_defaults():
    config = FnConfig()
    assert config.memoize.key_digest == "sha256"
    assert config.memoize.thread_safe is True
    assert config.trampoline.max_steps is None


def test_config_is_frozen():
    with pytest.raises(Exception):
        FnConfig().memoize.thread_safe = False


def test_load_config_without_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("zeta_fn.config.DEFAULT_PATHS", (tmp_path / "absent.yaml",))
    assert load_config() == Success(FnConfig())


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "zeta-fn.yaml"
    path.write_text("memoize:\n  key_digest: md5\ntrampoline:\n  max_steps: 100\n", encoding="utf-8")
    result = load_config(path)
    assert isinstance(result, Success)
    assert result.value.memoize.key_digest == "md5"
    assert result.value.trampoline.max_steps == 100


def test_load_config_searches_working_directory(tmp_path, monkeypatch):
    (tmp_path / "zeta-fn.yml").write_text("memoize:\n  thread_safe: false\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    result = load_config()
    assert result.value.memoize.thread_safe is False


def test_empty_yaml_is_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Success(FnConfig())


@pytest.mark.parametrize("content", [
    "memoize: [unclosed",
    "- just\n- a list\n",
    "memoize:\n  key_digest: crc32\n",
    "trampoline:\n  max_steps: 0\n",
])
def test_invalid_config_is_failure(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    result = load_config(path)
    assert isinstance(result, Failure)
    assert isinstance(result.error, InvalidArgumentError)


def test_missing_file_is_failure(tmp_path):
    result = load_yaml(tmp_path / "missing.yaml")
    assert isinstance(result, Failure)
    assert result.error.reason == "Config file not found"


def test_parse_config():
    assert parse_config({"trampoline": {"max_steps": 3}}).value.trampoline.max_steps == 3


def test_merge_config_keeps_unrelated_values():
    base = FnConfig.model_validate({"memoize": {"key_digest": "sha1"}})
    merged = merge_config(base, {"memoize": {"thread_safe": False}})
    assert merged.memoize.key_digest == "sha1"
    assert merged.memoize.thread_safe is False


def test_set_config_returns_previous():
    custom = FnConfig.model_validate({"trampoline": {"max_steps": 9}})
    previous = set_config(custom)
    assert get_config() is custom
    assert set_config(previous) is custom


def test_non_string_top_level_key_is_failure(tmp_path):
    path = tmp_path / "numeric.yaml"
    path.write_text("1: x\n", encoding="utf-8")
    result = load_config(path)
    assert isinstance(result, Failure)
    assert isinstance(result.error, InvalidArgumentError)
    assert isinstance(parse_config({1: "x"}), Failure)
