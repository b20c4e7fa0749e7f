"""Tests for TOML configuration loading (infra/config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from gpm.core.models import GpmConfig
from gpm.exceptions import ConfigError
from gpm.infra.config import config_path, load_config, parse_config


def _write_config(root: Path, text: str) -> Path:
    path = config_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        _write_config(
            tmp_path,
            'title = "gpm"\nversion = "1.0.0"\nusername = "u"\npassword = "p"\n'
            'user_language = "zh-CN"\n',
        )
        assert load_config(tmp_path) == GpmConfig(
            title="gpm", version="1.0.0", username="u", password="p", lang="zh-CN"
        )

    def test_defaults_for_missing_keys(self, tmp_path: Path) -> None:
        _write_config(tmp_path, 'title = "custom"\n')
        config = load_config(tmp_path)
        assert config.title == "custom"
        assert config.lang == "en-US"

    def test_packaged_default(self, package_dir: Path) -> None:
        assert load_config(package_dir).lang == "en-US"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found") as exc_info:
            load_config(tmp_path)
        assert exc_info.value.hint is not None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "title = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)


class TestParseConfig:
    def test_unknown_keys_ignored(self) -> None:
        assert parse_config({"colour": "blue"}) == GpmConfig()

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigError, match="user_language"):
            parse_config({"user_language": 3})

    def test_empty_language(self) -> None:
        with pytest.raises(ConfigError):
            parse_config({"user_language": "  "})
