"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from treeops.config.loader import _deep_merge, _load_yaml, load_config
from treeops.config.models import TreeOpsConfig
from treeops.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def _no_global_config(tmp_path: Path):
    """Point the global config at an empty location."""
    with patch("treeops.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml"):
        yield


def _write_project_config(root: Path, text: str) -> None:
    config_dir = root / ".treeops"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(text)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")
        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_empty_dicts(self) -> None:
        assert _deep_merge({}, {}) == {}

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_merge_keeps_siblings(self) -> None:
        base = {"logging": {"level": "INFO", "outputs": []}}
        override = {"logging": {"level": "DEBUG"}}
        assert _deep_merge(base, override) == {"logging": {"level": "DEBUG", "outputs": []}}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert isinstance(config, TreeOpsConfig)
        assert config.logging.level == "WARNING"
        assert config.paths.separator == "auto"

    def test_project_yaml(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "hashing:\n  chunk_size: 4096\n")
        config = load_config(tmp_path)
        assert config.hashing.chunk_size == 4096

    def test_project_overrides_global(self, tmp_path: Path) -> None:
        global_path = tmp_path / "global" / "config.yaml"
        global_path.parent.mkdir(parents=True)
        global_path.write_text("paths:\n  separator: '\\\\'\nhashing:\n  chunk_size: 1\n")
        _write_project_config(tmp_path, "hashing:\n  chunk_size: 2048\n")

        config = load_config(tmp_path)

        assert config.hashing.chunk_size == 2048
        assert config.paths.separator == "\\"

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project_config(tmp_path, "logging:\n  level: INFO\n")
        monkeypatch.setenv("TREEOPS__LOGGING__LEVEL", "ERROR")

        config = load_config(tmp_path)

        assert config.logging.level == "ERROR"

    def test_kwargs_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TREEOPS__PATHS__SEPARATOR", "\\")
        config = load_config(tmp_path, paths={"separator": "/"})
        assert config.paths.separator == "/"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "hashing:\n  chunk_size: -5\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "hashing" in exc_info.value.details["field"]

    def test_uses_cwd_by_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project_config(tmp_path, "hashing:\n  chunk_size: 512\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().hashing.chunk_size == 512
