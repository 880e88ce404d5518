"""Configuration loading from .env and YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError

from siteify.core.exceptions import ConfigError
from siteify.core.schema import HealthFile, default_health_files

log = logging.getLogger(__name__)

DEFAULT_LINT_COMMAND = "npx eslint --ext=.js,.cjs,.mjs . --fix"


def _find_project_root(start: Path | None = None) -> Path:
    """Find project root by looking for pyproject.toml upward."""
    current = Path(start or Path.cwd()).resolve()
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return Path.cwd().resolve()


class BatchConfigModel(BaseModel):
    """Batch section of config."""

    stop_on_failure: bool = True


class LintConfigModel(BaseModel):
    """Lint section of config."""

    commands: list[str] = Field(default_factory=lambda: [DEFAULT_LINT_COMMAND])
    timeout: int = 600


class AppConfig(BaseModel):
    """Full application configuration."""

    source_dir: Path = Path(".")
    output_dir: Path = Path("collections/_docs")
    permalink_prefix: str = "/docs/"
    health_files: list[HealthFile] = Field(default_factory=default_health_files)
    batch: BatchConfigModel = Field(default_factory=BatchConfigModel)
    lint: LintConfigModel = Field(default_factory=LintConfigModel)


class ConfigManager:
    """Load and merge configuration from .env and YAML."""

    def __init__(
        self,
        project_root: Path | None = None,
        env_path: Path | None = None,
        config_path: Path | None = None,
    ) -> None:
        self._root = Path(project_root or _find_project_root()).resolve()
        self._env_path = Path(env_path) if env_path else self._root / ".env"
        self._config_path = Path(config_path) if config_path else self._root / "config" / "default.yaml"
        self._config: AppConfig | None = None
        self._env: dict[str, str] = {}

    def load_env(self) -> dict[str, str]:
        """Load .env file into a dict (without modifying os.environ)."""
        if not self._env_path.exists():
            self._env = {}
            return self._env
        try:
            self._env = {k: v for k, v in dotenv_values(self._env_path).items() if v is not None}
        except (OSError, PermissionError) as e:
            log.warning("Failed to read .env file %s: %s", self._env_path, e)
            self._env = {}
        return self._env

    def load_yaml(self) -> dict[str, Any]:
        """Load YAML config file if it exists."""
        if not self._config_path.exists():
            return {}
        try:
            with open(self._config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, PermissionError) as e:
            log.warning("Failed to read config file %s: %s", self._config_path, e)
            return {}
        except yaml.YAMLError as e:
            log.warning("Malformed YAML in %s: %s", self._config_path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring config file %s: top level is not a mapping", self._config_path)
            return {}
        return data

    def load(self) -> AppConfig:
        """Load .env and YAML, merge with defaults, return AppConfig."""
        env = self.load_env()
        yaml_data = self.load_yaml()

        config_dict: dict[str, Any] = {
            key: yaml_data[key]
            for key in ("source_dir", "output_dir", "permalink_prefix", "health_files", "batch", "lint")
            if yaml_data.get(key) is not None
        }
        # Environment variables override YAML values
        env_mapping = {
            "SITEIFY_SOURCE_DIR": "source_dir",
            "SITEIFY_OUTPUT_DIR": "output_dir",
            "SITEIFY_PERMALINK_PREFIX": "permalink_prefix",
        }
        for env_key, config_key in env_mapping.items():
            if env.get(env_key):
                config_dict[config_key] = env[env_key]

        try:
            self._config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self._config_path}: {e}") from e
        return self._config

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path relative to the project root."""
        path = Path(path)
        return path if path.is_absolute() else (self._root / path).resolve()

    @property
    def config(self) -> AppConfig:
        """Return loaded config; load if not yet loaded."""
        if self._config is None:
            self.load()
        if self._config is None:
            raise RuntimeError("ConfigManager.load() failed to produce a config")
        return self._config

    @property
    def env(self) -> dict[str, str]:
        """Return loaded env dict."""
        if not self._env and self._env_path.exists():
            self.load_env()
        return self._env

    @property
    def project_root(self) -> Path:
        return self._root

    @property
    def source_dir(self) -> Path:
        return self.resolve(self.config.source_dir)

    @property
    def output_dir(self) -> Path:
        return self.resolve(self.config.output_dir)
