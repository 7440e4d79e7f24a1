"""Unit tests for access restriction file writing."""

import stat
from pathlib import Path
from unittest.mock import patch

import pytest
from vendorguard.filesystem.access import (
    HTACCESS_CONTENT,
    HTACCESS_FILENAME,
    WEB_CONFIG_CONTENT,
    WEB_CONFIG_FILENAME,
    AccessRestrictionError,
    write_access_restriction_files,
)


class TestWriteAccessRestrictionFiles:
    """Tests for write_access_restriction_files function."""

    def test_writes_both_files(self, tmp_path: Path) -> None:
        """Both files are written with their fixed content."""
        written = write_access_restriction_files(tmp_path)

        assert written == [tmp_path / HTACCESS_FILENAME, tmp_path / WEB_CONFIG_FILENAME]
        assert (tmp_path / HTACCESS_FILENAME).read_text() == HTACCESS_CONTENT
        assert (tmp_path / WEB_CONFIG_FILENAME).read_text() == WEB_CONFIG_CONTENT

    def test_content_denies_access(self) -> None:
        """The files deny access on Apache and IIS."""
        assert "Require all denied" in HTACCESS_CONTENT
        assert "Deny from all" in HTACCESS_CONTENT
        assert "php_flag engine off" in HTACCESS_CONTENT
        assert '<deny users="*"/>' in WEB_CONFIG_CONTENT

    def test_rerun_is_byte_identical(self, tmp_path: Path) -> None:
        """Writing twice leaves identical files behind."""
        write_access_restriction_files(tmp_path)
        first = (tmp_path / HTACCESS_FILENAME).read_bytes()

        write_access_restriction_files(tmp_path)

        assert (tmp_path / HTACCESS_FILENAME).read_bytes() == first

    def test_replaces_modified_file(self, tmp_path: Path) -> None:
        """A tampered file is restored."""
        (tmp_path / HTACCESS_FILENAME).write_text("Allow from all\n")

        write_access_restriction_files(tmp_path)

        assert (tmp_path / HTACCESS_FILENAME).read_text() == HTACCESS_CONTENT

    def test_files_are_read_only(self, tmp_path: Path) -> None:
        """Written files carry no write permission bits."""
        write_access_restriction_files(tmp_path)

        mode = stat.S_IMODE((tmp_path / WEB_CONFIG_FILENAME).stat().st_mode)
        assert mode == 0o444

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """Atomic writes leave only the target files."""
        write_access_restriction_files(tmp_path)

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            HTACCESS_FILENAME,
            WEB_CONFIG_FILENAME,
        ]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory raises AccessRestrictionError."""
        with pytest.raises(AccessRestrictionError, match="missing directory"):
            write_access_restriction_files(tmp_path / "vendor")

    def test_write_failure(self, tmp_path: Path) -> None:
        """OS errors are wrapped and temporary files removed."""
        with (
            patch(
                "vendorguard.filesystem.access.os.replace",
                side_effect=OSError("No space left on device"),
            ),
            pytest.raises(AccessRestrictionError, match="No space left"),
        ):
            write_access_restriction_files(tmp_path)

        assert list(tmp_path.iterdir()) == []
