"""Settings for FountainKit, read from the environment, config files and flags."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, BinaryIO

import structlog
import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fountainkit.exceptions import ConfigurationError, check_config_keys

logger = structlog.get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json", "structured")

# All loaders read from a binary stream
CONFIG_LOADERS: dict[str, Callable[[BinaryIO], Any]] = {
    ".yml": yaml.safe_load,
    ".yaml": yaml.safe_load,
    ".toml": tomllib.load,
    ".json": json.load,
}


class FountainKitSettings(BaseSettings):
    """Parser, input and logging options.

    Sources, strongest first:

    1. Command line flags (``fountainkit parse --no-merge-actions ...``)
    2. Config files given with ``--config`` or found in the standard
       locations; a later file overrides an earlier one
    3. ``FOUNTAINKIT_*`` environment variables
    4. A ``.env`` file in the working directory
    5. The defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="FOUNTAINKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    merge_actions: bool = Field(
        default=True,
        description="Fold consecutive action lines into one element",
    )
    merge_dialogue: bool = Field(
        default=True,
        description="Fold consecutive dialogue lines under one cue into one element",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read screenplay files",
    )

    debug: bool = Field(
        default=False,
        description="Add call site information to log events",
    )
    log_level: str = Field(
        default="WARNING",
        description="One of " + ", ".join(LOG_LEVELS),
        pattern=f"^({'|'.join(LOG_LEVELS)})$",
    )
    log_format: str = Field(
        default="console",
        description="One of " + ", ".join(LOG_FORMATS),
        pattern=f"^({'|'.join(LOG_FORMATS)})$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Write logs to this rotating file as well as stderr",
    )

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> str:
        """Accept log levels and formats in any case."""
        if not isinstance(v, str):
            raise ValueError(
                f"{info.field_name} must be a string, got {type(v).__name__}"
            )
        return v.upper() if info.field_name == "log_level" else v.lower()

    @field_validator("log_file", mode="before")
    @classmethod
    def resolve_log_file(cls, v: Any) -> Path | None:
        """Expand ``$VARS`` and ``~`` and make the path absolute."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            v = Path(os.path.expandvars(v)).expanduser()
        if isinstance(v, Path):
            return v.resolve()
        raise ValueError(f"log_file must be a path, got {type(v).__name__}: {v!r}")

    @classmethod
    def from_env(cls) -> FountainKitSettings:
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> FountainKitSettings:
        """Load settings from a single YAML, TOML or JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the format is unsupported or the content
                is not a mapping of known keys
        """
        return cls(**read_config_file(config_path))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: Iterable[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> FountainKitSettings:
        """Merge config files, environment and CLI arguments.

        Missing config files are skipped with a warning. ``None`` values in
        ``cli_args`` mean "not given on the command line" and are ignored.
        """
        merged: dict[str, Any] = {}
        for config_file in config_files or ():
            try:
                merged.update(read_config_file(config_file))
            except FileNotFoundError:
                logger.warning(
                    "Configuration file not found, skipping",
                    config_file=str(config_file),
                )

        if env_file:
            settings = cls(_env_file=env_file, **merged)  # type: ignore[call-arg]
        else:
            settings = cls(**merged)
        return apply_overrides(settings, cli_args)


def read_config_file(config_path: Path | str) -> dict[str, Any]:
    """Read a config file into a dictionary of setting values.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported or the content is
            not a mapping of known keys
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    loader = CONFIG_LOADERS.get(suffix)
    if loader is None:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix or path.name}",
            hint="Use a .yml, .yaml, .toml or .json file",
            details={
                "file": str(path),
                "detected_format": suffix,
                "supported_formats": sorted(CONFIG_LOADERS),
            },
        )

    with path.open("rb") as f:
        data = loader(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Configuration file must contain a mapping: {path}",
            hint="Write settings as top-level key/value pairs",
            details={"file": str(path), "found_type": type(data).__name__},
        )

    check_config_keys(data)
    return data


def apply_overrides(
    settings: FountainKitSettings, overrides: dict[str, Any] | None
) -> FountainKitSettings:
    """Return ``settings`` with every non-None override applied."""
    changes = {k: v for k, v in (overrides or {}).items() if v is not None}
    if not changes:
        return settings
    return FountainKitSettings(**{**settings.model_dump(), **changes})


_settings: FountainKitSettings | None = None
_config_paths: list[Path] | None = None


def _standard_config_paths() -> list[Path]:
    """Config locations, weakest first: user config dir, then working dir."""
    suffixes = (".yaml", ".json", ".toml")
    user_dir = Path.home() / ".config" / "fountainkit"
    return [user_dir / f"config{suffix}" for suffix in suffixes] + [
        Path.cwd() / f"fountainkit{suffix}" for suffix in suffixes
    ]


def _existing_config_paths() -> list[Path]:
    global _config_paths
    if _config_paths is None:
        found = []
        for path in _standard_config_paths():
            try:
                if path.is_file():
                    found.append(path)
            except OSError:
                continue
        _config_paths = found
    return _config_paths


def get_settings() -> FountainKitSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = FountainKitSettings.from_multiple_sources(_existing_config_paths())
    return _settings


def set_settings(settings: FountainKitSettings) -> None:
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Forget the global settings and the discovered config file paths."""
    global _settings, _config_paths
    _settings = None
    _config_paths = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> FountainKitSettings:
    """Settings for one CLI invocation.

    Args:
        config_file: Explicit ``--config`` file; replaces the standard
            config locations when given
        cli_overrides: Flag values, ``None`` for flags that were not given

    Raises:
        FileNotFoundError: If ``config_file`` does not exist
    """
    if config_file is None:
        return apply_overrides(get_settings(), cli_overrides)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")
    return FountainKitSettings.from_multiple_sources(
        [config_file], cli_args=cli_overrides
    )
