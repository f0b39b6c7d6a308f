"""farce configuration settings.

Values are merged from, in increasing priority: field defaults, a ``.env``
file, ``FARCE_*`` environment variables, config files (YAML, TOML or JSON,
later files winning) and command line flags.
"""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from farce.exceptions import ConfigurationError, check_config_keys

CONFIG_SUFFIXES = (".yml", ".yaml", ".toml", ".json")


class FarceSettings(BaseSettings):
    """Parser policy, output defaults and logging options."""

    model_config = SettingsConfigDict(
        env_prefix="FARCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_parsing: bool = Field(
        default=False,
        description="Fail on input no screenplay element recognizes",
    )
    stats_top_characters: int = Field(
        default=10,
        description="Number of characters listed in screenplay statistics",
        ge=1,
    )
    default_title: str = Field(
        default="Untitled Screenplay",
        description="HTML title page title when the screenplay has none",
    )
    default_credit: str = Field(
        default="written by",
        description="HTML title page credit line shown before the author",
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand ``$VARS`` and ``~`` in the log file path."""
        if v is None:
            return None
        if not isinstance(v, str | Path):
            raise ValueError(f"log_file must be a path, got {type(v).__name__}")
        return Path(os.path.expandvars(str(v))).expanduser().resolve()

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> str:
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string")
        return v.upper() if info.field_name == "log_level" else v.lower()

    @classmethod
    def from_file(cls, config_path: Path | str) -> FarceSettings:
        """Load settings from a YAML, TOML or JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the format is unsupported, the content is
                not a mapping, or a key is a known misspelling.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in CONFIG_SUFFIXES:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint=f"Use one of: {', '.join(CONFIG_SUFFIXES)}",
                details={"file": str(config_path), "detected_format": suffix},
            )

        if suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        else:
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
            data = {} if data is None else data

        if not isinstance(data, dict):
            raise ConfigurationError(
                message=f"Configuration file must contain a mapping: {config_path}",
                hint="Write settings as top-level key/value pairs",
                details={"file": str(config_path), "found": type(data).__name__},
            )

        check_config_keys(data)
        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> FarceSettings:
        """Merge config files, environment and CLI arguments.

        Missing config files are skipped with a warning. CLI arguments that
        are None are ignored.
        """
        data: dict[str, Any] = {}
        for config_file in config_files or []:
            try:
                data.update(cls.from_file(config_file).model_dump(exclude_unset=True))
            except FileNotFoundError:
                # Imported here to avoid a cycle during module initialization
                from farce.config.logging import get_logger

                get_logger(__name__).warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )

        if cli_args:
            data.update({k: v for k, v in cli_args.items() if v is not None})

        if env_file:
            return cls(_env_file=env_file, **data)  # type: ignore[call-arg]
        return cls(**data)


_settings: FarceSettings | None = None
_config_paths_cache: list[Path | str] | None = None


def _get_config_paths() -> list[Path | str]:
    """Existing config files, user config first so project config wins."""
    global _config_paths_cache

    if _config_paths_cache is None:
        user_dir = Path.home() / ".config" / "farce"
        candidates = [user_dir / f"config{s}" for s in (".yaml", ".json", ".toml")]
        candidates += [Path.cwd() / f"farce{s}" for s in (".yaml", ".json", ".toml")]
        _config_paths_cache = [path for path in candidates if path.is_file()]
    return _config_paths_cache


def get_settings() -> FarceSettings:
    """Return the global settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = FarceSettings.from_multiple_sources(
            config_files=_get_config_paths()
        )
    return _settings


def set_settings(settings: FarceSettings) -> None:
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Forget the global settings so the next access reloads them."""
    global _settings, _config_paths_cache
    _settings = None
    _config_paths_cache = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> FarceSettings:
    """Settings for a CLI command.

    Args:
        config_file: File given with ``--config``; replaces the standard
            config locations.
        cli_overrides: Flag values; None means the flag was not given.

    Raises:
        FileNotFoundError: If ``config_file`` does not exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return FarceSettings.from_multiple_sources(
            config_files=[config_file], cli_args=cli_overrides
        )

    settings = get_settings()
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if overrides:
        settings = FarceSettings(**{**settings.model_dump(), **overrides})
    return settings
