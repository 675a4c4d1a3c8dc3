"""Global configuration — XDG paths, config file, env vars, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from codeguardian.api.client import DEFAULT_API_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "codeguardian"
    return Path.home() / ".config" / "codeguardian"


@dataclass
class CodeGuardianConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.yaml"

    @classmethod
    def load(cls) -> CodeGuardianConfig:
        """Load config.yaml (if present), then apply environment overrides."""
        config = cls()

        if config.config_file.is_file():
            config._apply_file(config.config_file)

        env_url = os.environ.get("CODEGUARDIAN_API_URL")
        if env_url:
            config.api_url = env_url

        env_timeout = os.environ.get("CODEGUARDIAN_TIMEOUT")
        if env_timeout:
            config.timeout = float(env_timeout)

        return config

    def _apply_file(self, path: Path) -> None:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must be a YAML mapping")
        if "api_url" in data:
            self.api_url = str(data["api_url"])
        if "timeout" in data:
            self.timeout = float(data["timeout"])
        logger.debug("Loaded config from %s", path)
