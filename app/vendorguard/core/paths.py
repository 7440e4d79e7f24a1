"""Path management for vendorguard.

This module resolves the project-level locations (vendor directory,
project configuration file) and the XDG-compliant user configuration
directory.

XDG defaults:
- Config: ~/.config/vendorguard/
"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Application identifier for directory naming
APP_NAME = "vendorguard"

# Project-level configuration file name
PROJECT_CONFIG_NAME = "vendor-hardening.toml"

# Composer default when neither the environment nor composer.json override it
DEFAULT_VENDOR_DIR = "vendor"

VENDOR_DIR_ENV = "COMPOSER_VENDOR_DIR"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the user configuration directory path.

    Returns:
        Path to ~/.config/vendorguard/ (or XDG_CONFIG_HOME/vendorguard/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_project_config_path(project_dir: Path) -> Path:
    """Get the project configuration file path.

    Args:
        project_dir: Project root (the directory holding composer.json).

    Returns:
        Path to <project>/vendor-hardening.toml.
    """
    return project_dir / PROJECT_CONFIG_NAME


def _read_composer_vendor_dir(project_dir: Path) -> str | None:
    """Read ``config.vendor-dir`` from the project's composer.json.

    Args:
        project_dir: Project root.

    Returns:
        The configured vendor directory, or None if not set or unreadable.
    """
    composer_json = project_dir / "composer.json"
    try:
        data = json.loads(composer_json.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.warning("Cannot read %s: %s", composer_json, e)
        return None

    if not isinstance(data, dict):
        return None
    config = data.get("config")
    if isinstance(config, dict):
        vendor_dir = config.get("vendor-dir")
        if isinstance(vendor_dir, str) and vendor_dir.strip():
            return vendor_dir.strip()
    return None


def resolve_vendor_dir(project_dir: Path, override: Path | None = None) -> Path:
    """Resolve the vendor directory of a project.

    Priority:
    1. Explicit override (e.g., --vendor-dir)
    2. COMPOSER_VENDOR_DIR environment variable
    3. ``config.vendor-dir`` in composer.json
    4. <project>/vendor

    Relative values are resolved against the project directory.

    Args:
        project_dir: Project root.
        override: Explicit vendor directory, if any.

    Returns:
        Absolute path to the vendor directory.
    """
    if override is not None:
        candidate = override
    elif os.environ.get(VENDOR_DIR_ENV):
        candidate = Path(os.environ[VENDOR_DIR_ENV])
    else:
        candidate = Path(_read_composer_vendor_dir(project_dir) or DEFAULT_VENDOR_DIR)

    if not candidate.is_absolute():
        candidate = project_dir / candidate
    return candidate.resolve()
