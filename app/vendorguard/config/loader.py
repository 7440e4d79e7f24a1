"""Project configuration file I/O.

This module provides functions for loading and writing the
vendor-hardening.toml project file with validation using Pydantic models.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from vendorguard.config.models import HardeningConfig


class ConfigError(Exception):
    """Base exception for configuration-related errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path) -> HardeningConfig:
    """Load and validate the project configuration.

    A missing file is not an error: the project simply has no overrides.

    Args:
        path: Path to vendor-hardening.toml.

    Returns:
        Validated HardeningConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    if not path.exists():
        return HardeningConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    try:
        return HardeningConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e


def save_config(config: HardeningConfig, path: Path) -> Path:
    """Write the project configuration atomically.

    Args:
        config: Configuration to write.
        path: Destination file.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write {path}: {e}") from e

    return path


def _config_to_dict(config: HardeningConfig) -> dict[str, Any]:
    """Convert a HardeningConfig to a dictionary suitable for TOML serialization."""
    return {
        "use_defaults": config.use_defaults,
        "extend": {name: list(paths) for name, paths in config.extend.items()},
        "ignore": {
            "packages": list(config.ignore.packages),
            "paths": {name: list(paths) for name, paths in config.ignore.paths.items()},
        },
    }
