"""Tests for package and cleanup outcome models."""

from pathlib import Path

import pytest
from vendorguard.models.outcome import CleanupOutcome, PackageCleanupResult, PathCleanupResult
from vendorguard.models.package import InstalledPackage, normalize_package_name


class TestNormalizePackageName:
    """Tests for normalize_package_name function."""

    def test_lower_cases_and_strips(self) -> None:
        """Identifiers are lower-cased and trimmed."""
        assert normalize_package_name("  Vendor/Package ") == "vendor/package"

    def test_empty_name_rejected(self) -> None:
        """Empty identifiers raise ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            normalize_package_name("   ")


class TestInstalledPackage:
    """Tests for InstalledPackage frozen dataclass."""

    def test_creation(self) -> None:
        """A package keeps its reported name and exposes the normalized one."""
        pkg = InstalledPackage(name="Symfony/Yaml", install_path=Path("/v/symfony/yaml"))

        assert pkg.name == "Symfony/Yaml"
        assert pkg.normalized_name == "symfony/yaml"
        assert pkg.version is None

    def test_empty_name_rejected(self) -> None:
        """Empty names are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            InstalledPackage(name="", install_path=Path("/v"))

    def test_frozen(self) -> None:
        """InstalledPackage is immutable."""
        pkg = InstalledPackage(name="a/b", install_path=Path("/v/a/b"))
        with pytest.raises(AttributeError):
            pkg.name = "c/d"  # type: ignore[misc]


class TestCleanupOutcome:
    """Tests for CleanupOutcome enum."""

    def test_values(self) -> None:
        """Verify all 3 outcome values exist with correct string values."""
        assert CleanupOutcome.REMOVED == "removed"
        assert CleanupOutcome.ALREADY_ABSENT == "already_absent"
        assert CleanupOutcome.REMOVAL_FAILED == "removal_failed"
        assert len(CleanupOutcome) == 3


class TestPackageCleanupResult:
    """Tests for PackageCleanupResult counters."""

    def test_counts(self) -> None:
        """Counters reflect the per-path outcomes."""
        result = PackageCleanupResult(
            package="acme/lib",
            install_path="/v/acme/lib",
            paths=(
                PathCleanupResult(path="/v/acme/lib/a", outcome=CleanupOutcome.REMOVED),
                PathCleanupResult(path="/v/acme/lib/b", outcome=CleanupOutcome.ALREADY_ABSENT),
                PathCleanupResult(
                    path="/v/acme/lib/c",
                    outcome=CleanupOutcome.REMOVAL_FAILED,
                    error="Permission denied",
                ),
            ),
        )

        assert result.removed_count == 1
        assert result.absent_count == 1
        assert result.failed_count == 1
        assert result.success is False

    def test_empty_result_is_success(self) -> None:
        """A package without paths counts as successful."""
        result = PackageCleanupResult(package="acme/lib", install_path="/v/acme/lib")

        assert result.paths == ()
        assert result.success is True
