"""Pydantic models for the vendor-hardening.toml project file.

This module defines the schema of the project-level cleanup overrides:
extra paths to remove (``extend``) and paths or whole packages to leave
alone (``ignore``).
"""

import re
from pathlib import PurePosixPath
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

# vendor/name, as accepted by Composer (case-insensitive)
_PACKAGE_NAME_RE = re.compile(r"^[a-z0-9]([_.-]?[a-z0-9]+)*/[a-z0-9](([_.]|-{1,2})?[a-z0-9]+)*$")


def _validate_package_name(name: str) -> str:
    normalized = name.strip().lower()
    if not _PACKAGE_NAME_RE.match(normalized):
        msg = f"Invalid package name '{name}': expected 'vendor/name'"
        raise ValueError(msg)
    return normalized


def _validate_relative_path(path: str) -> str:
    cleaned = path.strip().replace("\\", "/").strip("/")
    if not cleaned:
        msg = "Cleanup path cannot be empty"
        raise ValueError(msg)
    if path.strip().startswith("/") or re.match(r"^[A-Za-z]:", cleaned):
        msg = f"Cleanup path must be relative: '{path}'"
        raise ValueError(msg)
    if ".." in PurePosixPath(cleaned).parts:
        msg = f"Cleanup path cannot leave the package directory: '{path}'"
        raise ValueError(msg)
    return cleaned


def _validate_path_table(value: dict[str, list[str]]) -> dict[str, list[str]]:
    table: dict[str, list[str]] = {}
    for name, paths in value.items():
        key = _validate_package_name(name)
        table.setdefault(key, []).extend(_validate_relative_path(p) for p in paths)
    return table


class IgnoreConfig(BaseModel):
    """Cleanup exclusions.

    Attributes:
        packages: Packages that must never be cleaned.
        paths: Per-package relative paths that must be kept.
    """

    model_config = ConfigDict(extra="forbid")

    packages: Annotated[
        list[str],
        Field(default_factory=list, description="Packages excluded from cleanup"),
    ]
    paths: Annotated[
        dict[str, list[str]],
        Field(default_factory=dict, description="Paths to keep, per package"),
    ]

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, value: list[str]) -> list[str]:
        """Normalize ignored package names."""
        return [_validate_package_name(name) for name in value]

    @field_validator("paths")
    @classmethod
    def validate_paths(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        """Normalize package keys and validate relative paths."""
        return _validate_path_table(value)


class HardeningConfig(BaseModel):
    """Project-level cleanup configuration.

    Attributes:
        use_defaults: Whether the built-in cleanup table is applied.
        extend: Additional paths to remove, per package.
        ignore: Paths or packages excluded from cleanup.
    """

    model_config = ConfigDict(extra="forbid")

    use_defaults: Annotated[bool, Field(description="Apply the built-in cleanup table")] = True
    extend: Annotated[
        dict[str, list[str]],
        Field(default_factory=dict, description="Paths to remove, per package"),
    ]
    ignore: Annotated[
        IgnoreConfig,
        Field(default_factory=IgnoreConfig, description="Cleanup exclusions"),
    ]

    @field_validator("extend")
    @classmethod
    def validate_extend(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        """Normalize package keys and validate relative paths."""
        return _validate_path_table(value)
