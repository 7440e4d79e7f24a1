"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
import json
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console
from vendorguard.core.theme import ThemeColors, build_rich_theme
from vendorguard.utils.status import StatusWriter, Verbosity


@pytest.fixture
def status_buffer() -> io.StringIO:
    """Buffer capturing status stream output."""
    return io.StringIO()


@pytest.fixture
def make_status(status_buffer: io.StringIO) -> Callable[..., StatusWriter]:
    """Factory for StatusWriter instances writing to status_buffer."""

    def _make(verbosity: Verbosity = Verbosity.NORMAL) -> StatusWriter:
        console = Console(
            file=status_buffer,
            theme=build_rich_theme(ThemeColors()),
            width=200,
            color_system=None,
        )
        return StatusWriter(console=console, verbosity=verbosity)

    return _make


@pytest.fixture
def vendor_dir(tmp_path: Path) -> Path:
    """Empty vendor directory inside a temporary project."""
    path = tmp_path / "vendor"
    path.mkdir()
    return path


@pytest.fixture
def make_package(vendor_dir: Path) -> Callable[..., Path]:
    """Factory creating a package directory with the given subdirectories."""

    def _make(name: str, *subdirs: str) -> Path:
        root = vendor_dir / name
        root.mkdir(parents=True, exist_ok=True)
        (root / "composer.json").write_text(json.dumps({"name": name}))
        for sub in subdirs:
            target = root / sub
            target.mkdir(parents=True, exist_ok=True)
            (target / "placeholder.txt").write_text("x")
        return root

    return _make


@pytest.fixture
def write_installed_json(vendor_dir: Path) -> Callable[[list[str]], Path]:
    """Factory writing a Composer 2.x installed.json for the given package names."""

    def _write(names: list[str]) -> Path:
        composer_dir = vendor_dir / "composer"
        composer_dir.mkdir(exist_ok=True)
        data = {
            "packages": [
                {"name": name, "version": "1.0.0", "install-path": f"../{name.lower()}"}
                for name in names
            ],
            "dev": True,
            "dev-package-names": [],
        }
        path = composer_dir / "installed.json"
        path.write_text(json.dumps(data, indent=4))
        return path

    return _write
