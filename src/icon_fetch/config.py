"""Configuration management for icon-fetch."""

import logging
import os
import shutil
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    API_KEY_ENV_VARS,
    DEFAULT_ANALYSIS_MODEL,
    DEFAULT_ANALYSIS_TEMPERATURE,
    DEFAULT_FAVICON_SERVICE_URL,
    DEFAULT_FAVICON_SIZE,
    DEFAULT_HTTP_TIMEOUT,
    HISTORY_MAX_ENTRIES,
    HISTORY_STORAGE_KEY,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.toml"


class AnalysisConfig(BaseModel):
    """Brand analysis configuration."""

    enabled: bool = Field(default=True, description="Request AI brand analysis")
    model: str = Field(default=DEFAULT_ANALYSIS_MODEL, description="Gemini model name")
    api_key: str | None = Field(
        default=None,
        description="Gemini API key (falls back to GEMINI_API_KEY or API_KEY)",
    )
    temperature: float = Field(
        default=DEFAULT_ANALYSIS_TEMPERATURE,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )


class FaviconConfig(BaseModel):
    """Favicon service configuration."""

    service_url: str = Field(
        default=DEFAULT_FAVICON_SERVICE_URL,
        description="Favicon-by-domain image service",
    )
    size: int = Field(default=DEFAULT_FAVICON_SIZE, gt=0, description="Icon size in pixels")
    timeout: float = Field(
        default=DEFAULT_HTTP_TIMEOUT,
        description="Icon download timeout in seconds",
    )
    user_agent: str | None = Field(default=None, description="Custom user agent string")


class HistoryConfig(BaseModel):
    """Lookup history configuration."""

    max_entries: int = Field(
        default=HISTORY_MAX_ENTRIES,
        ge=1,
        description="Maximum number of lookups kept",
    )
    storage_key: str = Field(
        default=HISTORY_STORAGE_KEY,
        description="Client storage key used by the GUI",
    )
    path: Path | None = Field(
        default=None,
        description="History file used by the CLI (default: ~/.config/icon-fetch/history.json)",
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True, description="Enable colored output")
    verbosity: str = Field(
        default="normal",
        description="Verbosity level: quiet, normal, verbose, debug",
    )
    language: str = Field(default="en", description="Message language: en, zh")


class Config(BaseSettings):
    """
    Main configuration for icon-fetch.

    Environment variables override file values, e.g.
    ICON_FETCH_ANALYSIS__MODEL or ICON_FETCH_OUTPUT__LANGUAGE.
    """

    model_config = SettingsConfigDict(
        env_prefix="ICON_FETCH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    favicon: FaviconConfig = Field(default_factory=FaviconConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # File data arrives as init kwargs; environment wins over it
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @model_validator(mode="after")
    def _api_key_from_environment(self) -> "Config":
        if not self.analysis.api_key:
            for var in API_KEY_ENV_VARS:
                value = os.environ.get(var)
                if value:
                    self.analysis.api_key = value
                    break
        return self

    def _export_data(self) -> dict[str, Any]:
        # Secrets stay in the environment, never in exported files
        return self.model_dump(mode="json", exclude_none=True, exclude={"analysis": {"api_key"}})

    def to_toml(self) -> str:
        """
        Export configuration to TOML string.

        Returns:
            TOML formatted configuration string
        """
        import tomli_w

        return tomli_w.dumps(self._export_data())

    def to_toml_file(self, path: Path) -> None:
        """
        Export configuration to TOML file.

        Args:
            path: Path to save the TOML file
        """
        path.write_text(self.to_toml(), encoding="utf-8")
        logger.info(f"Exported config to: {path}")


def get_config_paths() -> list[Path]:
    """
    Get existing configuration file paths in order of precedence (lowest to highest).

    Returns:
        List of config file paths
    """
    candidates = [
        DEFAULT_CONFIG_PATH,
        Path("/etc/icon-fetch/config.toml"),
        get_user_config_path(),
        Path.cwd() / ".icon-fetch.toml",
    ]
    return [path for path in candidates if path.exists()]


def load_config(extra_paths: list[Path] | None = None) -> Config:
    """
    Load configuration from files and environment.

    Configuration is loaded in this order (later sources override earlier):
    1. Package default config
    2. System-wide config (/etc/icon-fetch/config.toml)
    3. User config (~/.config/icon-fetch/config.toml)
    4. Current directory config (.icon-fetch.toml)
    5. Extra paths (e.g. --config)
    6. ICON_FETCH_* environment variables

    Args:
        extra_paths: Additional config files with highest file precedence

    Returns:
        Merged configuration
    """
    config_paths = get_config_paths() + list(extra_paths or [])
    config_data: dict[str, Any] = {}

    for config_path in config_paths:
        try:
            with open(config_path, "rb") as f:
                config_data = _merge_configs(config_data, tomllib.load(f))
            logger.debug(f"Loaded config from {config_path}")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")

    return Config(**config_data)


def _merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively merge two configuration dictionaries.

    Args:
        base: Base configuration
        override: Configuration to override base with

    Returns:
        Merged configuration
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def get_user_config_path() -> Path:
    """Path of the per-user configuration file."""
    return Path.home() / ".config" / "icon-fetch" / "config.toml"


def write_default_config(path: Path) -> Path:
    """
    Write the packaged default configuration to a file.

    The packaged file is copied as is, so environment overrides and secrets
    never end up in it.

    Args:
        path: Destination file (parent directories are created)

    Returns:
        Path to created config file
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(DEFAULT_CONFIG_PATH, path)
    logger.info(f"Created default config file: {path}")
    return path
