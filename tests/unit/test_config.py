"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from codeguardian.api.client import DEFAULT_API_URL, DEFAULT_TIMEOUT
from codeguardian.config import CodeGuardianConfig


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("CODEGUARDIAN_API_URL", raising=False)
    monkeypatch.delenv("CODEGUARDIAN_TIMEOUT", raising=False)
    return tmp_path / "codeguardian"


def test_defaults(config_home: Path):
    config = CodeGuardianConfig.load()
    assert config.config_dir == config_home
    assert config.api_url == DEFAULT_API_URL
    assert config.timeout == DEFAULT_TIMEOUT


def test_yaml_file(config_home: Path):
    config_home.mkdir()
    (config_home / "config.yaml").write_text(
        "api_url: https://scanner.example.com/api\ntimeout: 5\n"
    )
    config = CodeGuardianConfig.load()
    assert config.api_url == "https://scanner.example.com/api"
    assert config.timeout == 5.0


def test_env_overrides_file(config_home: Path, monkeypatch: pytest.MonkeyPatch):
    config_home.mkdir()
    (config_home / "config.yaml").write_text("api_url: http://from-file/api\n")
    monkeypatch.setenv("CODEGUARDIAN_API_URL", "http://from-env/api")
    monkeypatch.setenv("CODEGUARDIAN_TIMEOUT", "12.5")

    config = CodeGuardianConfig.load()
    assert config.api_url == "http://from-env/api"
    assert config.timeout == 12.5


def test_non_mapping_file_rejected(config_home: Path):
    config_home.mkdir()
    (config_home / "config.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        CodeGuardianConfig.load()
