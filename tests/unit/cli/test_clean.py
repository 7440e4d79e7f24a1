"""Unit tests for the clean command."""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner
from vendorguard.cli.main import app

runner = CliRunner()

PROJECT_CONFIG = """\
use_defaults = false

[extend]
"acme/lib" = ["tests", "docs"]
"acme/tools" = ["examples"]
"""


@pytest.fixture
def project(tmp_path: Path, vendor_dir: Path) -> list[str]:
    """Global options pointing at a temporary project with a cleanup config."""
    (tmp_path / "vendor-hardening.toml").write_text(PROJECT_CONFIG)
    return ["--project-dir", str(tmp_path), "--vendor-dir", str(vendor_dir)]


class TestCleanAll:
    """Tests for vendorguard clean without package arguments."""

    def test_cleans_installed_packages(
        self,
        project: list[str],
        make_package: Callable[..., Path],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """Configured paths of installed packages are removed."""
        lib = make_package("acme/lib", "tests", "docs", "src")
        tools = make_package("acme/tools", "examples")
        write_installed_json(["acme/lib"])

        result = runner.invoke(app, [*project, "clean"])

        assert result.exit_code == 0
        assert not (lib / "tests").exists()
        assert not (lib / "docs").exists()
        assert (lib / "src").exists()
        # Not installed according to installed.json
        assert (tools / "examples").exists()
        assert "Cleaning vendor directory." in result.output
        assert "Cleaning: acme/lib" in result.output
        assert "Cleaned 1 package(s): 2 path(s) removed, 0 already absent." in result.output

    def test_already_clean(
        self,
        project: list[str],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """Nothing configured and installed reports a clean vendor directory."""
        write_installed_json(["other/pkg"])

        result = runner.invoke(app, [*project, "clean"])

        assert result.exit_code == 0
        assert "Vendor directory already clean." in result.output

    def test_uses_default_table(
        self,
        tmp_path: Path,
        vendor_dir: Path,
        make_package: Callable[..., Path],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """Without a config file the built-in table applies."""
        twig = make_package("twig/twig", "tests", "src")
        write_installed_json(["twig/twig"])

        result = runner.invoke(
            app,
            ["--project-dir", str(tmp_path), "--vendor-dir", str(vendor_dir), "clean"],
        )

        assert result.exit_code == 0
        assert not (twig / "tests").exists()
        assert (twig / "src").exists()

    def test_missing_installed_json(self, project: list[str]) -> None:
        """A vendor directory without installed.json is an error."""
        result = runner.invoke(app, [*project, "clean"])

        assert result.exit_code == 1
        assert "Installed package list not found" in result.output

    def test_invalid_config(self, tmp_path: Path, project: list[str]) -> None:
        """An invalid config file is reported and nothing is cleaned."""
        (tmp_path / "vendor-hardening.toml").write_text('[extend]\n"bad" = ["tests"]\n')

        result = runner.invoke(app, [*project, "clean"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_dry_run(
        self,
        project: list[str],
        make_package: Callable[..., Path],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """Dry-run reports without deleting."""
        lib = make_package("acme/lib", "tests")
        write_installed_json(["acme/lib"])

        result = runner.invoke(app, [*project, "clean", "--dry-run"])

        assert result.exit_code == 0
        assert (lib / "tests").exists()
        assert "Dry-run: 1 path(s) in 1 package(s) would be removed." in result.output

    def test_verbose_shows_table(
        self,
        project: list[str],
        make_package: Callable[..., Path],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """-v adds per-path status lines and a results table."""
        make_package("acme/lib", "tests")
        write_installed_json(["acme/lib"])

        result = runner.invoke(app, [*project, "-v", "clean"])

        assert result.exit_code == 0
        assert "Removing directory 'tests'" in result.output
        assert "Cleanup Results" in result.output

    def test_quiet_hides_status(
        self,
        project: list[str],
        make_package: Callable[..., Path],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """-q hides status lines but keeps the summary."""
        make_package("acme/lib", "tests")
        write_installed_json(["acme/lib"])

        result = runner.invoke(app, [*project, "-q", "clean"])

        assert result.exit_code == 0
        assert "Cleaning vendor directory." not in result.output
        assert "Cleaned 1 package(s)" in result.output

    def test_failures_reported(
        self,
        project: list[str],
        make_package: Callable[..., Path],
        write_installed_json: Callable[[list[str]], Path],
    ) -> None:
        """Removal failures are shown and counted in the summary."""
        lib = make_package("acme/lib", "tests")
        write_installed_json(["acme/lib"])

        with patch(
            "vendorguard.filesystem.remover.shutil.rmtree",
            side_effect=PermissionError("Permission denied"),
        ):
            result = runner.invoke(app, [*project, "clean"])

        assert result.exit_code == 0
        assert (lib / "tests").exists()
        assert "Failure removing directory 'tests' in package acme/lib." in result.output
        assert "1 failed." in result.output


class TestCleanPackages:
    """Tests for vendorguard clean with package arguments."""

    def test_cleans_named_package(
        self,
        project: list[str],
        make_package: Callable[..., Path],
    ) -> None:
        """Named packages are cleaned even when installed.json is missing."""
        lib = make_package("acme/lib", "tests")
        tools = make_package("acme/tools", "examples")

        result = runner.invoke(app, [*project, "clean", "Acme/Lib"])

        assert result.exit_code == 0
        assert not (lib / "tests").exists()
        assert (tools / "examples").exists()
        assert "Cleaned 1 package(s): 1 path(s) removed, 1 already absent." in result.output

    def test_duplicate_names_cleaned_once(
        self,
        project: list[str],
        make_package: Callable[..., Path],
    ) -> None:
        """Repeating a package on the command line cleans it once."""
        make_package("acme/lib", "tests")

        result = runner.invoke(app, [*project, "clean", "acme/lib", "ACME/LIB"])

        assert result.exit_code == 0
        assert result.output.count("Cleaning: acme/lib") == 1

    def test_unconfigured_package(self, project: list[str]) -> None:
        """A package without cleanup paths has nothing to clean."""
        result = runner.invoke(app, [*project, "clean", "other/pkg"])

        assert result.exit_code == 0
        assert "Nothing to clean." in result.output

    def test_blank_package_name(self, project: list[str]) -> None:
        """A blank package argument is a usage error, not a crash."""
        result = runner.invoke(app, [*project, "clean", " "])

        assert result.exit_code == 2
        assert "Package name cannot be empty" in result.output
        assert "Traceback" not in result.output

    def test_custom_install_path(
        self,
        tmp_path: Path,
        vendor_dir: Path,
        project: list[str],
    ) -> None:
        """Packages are cleaned at the install-path recorded in installed.json."""
        root = tmp_path / "web" / "libraries" / "lib"
        (root / "tests").mkdir(parents=True)
        (vendor_dir / "composer").mkdir()
        (vendor_dir / "composer" / "installed.json").write_text(
            json.dumps(
                {"packages": [{"name": "acme/lib", "install-path": "../../web/libraries/lib"}]}
            )
        )

        result = runner.invoke(app, [*project, "clean", "acme/lib"])

        assert result.exit_code == 0
        assert not (root / "tests").exists()
        assert "1 path(s) removed" in result.output
