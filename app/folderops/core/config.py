"""CLI configuration and settings.

This module provides the configuration model and I/O functions for
the folderops command line. Library calls never read it; they take
explicit arguments.

Configuration is stored in ~/.config/folderops/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from folderops.core.paths import get_config_path

logger = logging.getLogger(__name__)

# Keys of folderops.folders.relativize.RELATIVIZERS
RelativizeChoice = Literal["name", "source"]


class CloneSettings(BaseModel):
    """Defaults for the clone command.

    Attributes:
        recursive: Use the recursive walk (USE_RECURSION).
        relativize: Relativization policy name.
        collect_errors: Collect per-entry failures instead of the mode default.
    """

    model_config = ConfigDict(extra="forbid")

    recursive: bool = False
    relativize: Annotated[
        RelativizeChoice,
        Field(description="Relativization policy ('name' or 'source')"),
    ] = "source"
    collect_errors: bool = False


class ClearSettings(BaseModel):
    """Defaults for the clear command.

    Attributes:
        recursive: Descend into subdirectories (USE_RECURSION).
        confirm: Ask before deleting anything.
    """

    model_config = ConfigDict(extra="forbid")

    recursive: bool = False
    confirm: bool = True


class FolderopsConfig(BaseModel):
    """Top-level folderops configuration."""

    model_config = ConfigDict(extra="forbid")

    clone: CloneSettings = Field(default_factory=CloneSettings)
    clear: ClearSettings = Field(default_factory=ClearSettings)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FolderopsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FolderopsConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FolderopsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FolderopsConfig:
    """Load configuration, falling back to defaults when no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded configuration, or defaults if the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return FolderopsConfig()


def save_config(config: FolderopsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FolderopsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
