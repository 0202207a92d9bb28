"""
Configuration management.

Settings are read from an optional namedsql.toml placed next to the query
files. Command line options take precedence over the file.
"""

import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from namedsql.parser.shared.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    SUPPORTED_SQL_EXTENSIONS,
)
from namedsql.parser.shared.exceptions import ConfigError
from namedsql.parser.shared.types import FilePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedSQLConfig:
    """Settings for loading, exporting and checking named queries."""

    dialect: str | None = None
    format: str = DEFAULT_OUTPUT_FORMAT
    extensions: tuple[str, ...] = field(default_factory=lambda: tuple(SUPPORTED_SQL_EXTENSIONS))
    recursive: bool = True

    def merge(self, **overrides: Any) -> "NamedSQLConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return _validate(replace(self, **changes))


def _validate(config: NamedSQLConfig) -> NamedSQLConfig:
    if config.dialect is not None and not isinstance(config.dialect, str):
        raise ConfigError(f"'dialect' must be a string, got {type(config.dialect).__name__}")
    if config.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid format '{config.format}'. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )
    if not isinstance(config.recursive, bool):
        raise ConfigError("'recursive' must be true or false")
    if not config.extensions or not all(
        isinstance(ext, str) and ext.startswith(".") for ext in config.extensions
    ):
        raise ConfigError("'extensions' must be a non-empty list of suffixes like \".sql\"")
    return config


def find_config_file(path: FilePath) -> Path | None:
    """
    Locate namedsql.toml for a query file or folder.

    Args:
        path: A query file or a folder of query files

    Returns:
        Path to the configuration file, or None if there is none
    """
    path = Path(path)
    folder = path if path.is_dir() else path.parent
    candidate = folder / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: FilePath | None = None, config_file: FilePath | None = None) -> NamedSQLConfig:
    """
    Load configuration for a query file or folder.

    Args:
        path: Query file or folder whose namedsql.toml should be used
        config_file: Explicit configuration file, overrides the lookup

    Returns:
        Validated configuration; defaults when no file is found

    Raises:
        ConfigError: If the file cannot be read or holds invalid values
    """
    if config_file is not None:
        toml_path = Path(config_file)
        if not toml_path.is_file():
            raise ConfigError(f"Configuration file not found: {toml_path}")
    elif path is not None:
        toml_path = find_config_file(path)
    else:
        toml_path = None

    if toml_path is None:
        logger.debug("No namedsql.toml found, using defaults")
        return NamedSQLConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read {toml_path}: {e}") from e

    logger.debug(f"Loaded configuration from {toml_path}")
    return config_from_dict(data)


def config_from_dict(data: dict[str, Any]) -> NamedSQLConfig:
    """
    Build a configuration from parsed TOML data.

    Unknown keys are ignored with a warning.
    """
    known = {f.name for f in fields(NamedSQLConfig)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown configuration key '{key}'")
            continue
        values[key] = value

    if "extensions" in values:
        if not isinstance(values["extensions"], list):
            raise ConfigError("'extensions' must be a list of suffixes")
        values["extensions"] = tuple(values["extensions"])

    return _validate(NamedSQLConfig(**values))
