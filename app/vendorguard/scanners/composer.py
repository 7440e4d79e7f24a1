"""Composer installed package registry.

Reads the Composer local repository file (vendor/composer/installed.json)
in both the 2.x object format and the 1.x list format.
"""

import json
import logging
from pathlib import Path
from typing import Any, cast

from vendorguard.models.package import InstalledPackage
from vendorguard.scanners.base import PackageRegistry, RegistryNotFoundError, RegistryReadError

logger = logging.getLogger(__name__)


class ComposerRegistry(PackageRegistry):
    """Registry backed by Composer's installed.json.

    Install paths in installed.json are relative to the vendor/composer
    directory; packages without one are assumed at <vendor>/<name>.
    """

    _INSTALLED_FILE = Path("composer") / "installed.json"

    def __init__(self, vendor_dir: Path) -> None:
        """Initialize the registry.

        Args:
            vendor_dir: Absolute path to the vendor directory.
        """
        self._vendor_dir = vendor_dir

    @property
    def vendor_dir(self) -> Path:
        """Return the vendor directory this registry reads from."""
        return self._vendor_dir

    @property
    def installed_file(self) -> Path:
        """Return the path of installed.json."""
        return self._vendor_dir / self._INSTALLED_FILE

    def is_available(self) -> bool:
        """Check if installed.json exists."""
        return self.installed_file.is_file()

    def list_installed(self) -> list[InstalledPackage]:
        """Read all installed packages from installed.json.

        Returns:
            InstalledPackage for each valid entry, in file order.

        Raises:
            RegistryNotFoundError: If installed.json does not exist.
            RegistryReadError: If installed.json cannot be read or parsed.
        """
        path = self.installed_file
        if not path.exists():
            msg = f"Installed package list not found: {path}"
            raise RegistryNotFoundError(msg)

        try:
            data: object = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in {path}: {e}"
            raise RegistryReadError(msg) from e
        except OSError as e:
            msg = f"Cannot read {path}: {e}"
            raise RegistryReadError(msg) from e

        entries = self._extract_entries(data)

        packages: list[InstalledPackage] = []
        for entry in entries:
            package = self._parse_entry(entry)
            if package is not None:
                packages.append(package)
        return packages

    def _extract_entries(self, data: object) -> list[object]:
        """Return the list of package entries for either file format.

        Raises:
            RegistryReadError: If the top-level structure is not recognized.
        """
        # Composer 1.x: a bare list
        if isinstance(data, list):
            return cast(list[object], data)

        # Composer 2.x: {"packages": [...], "dev": ..., "dev-package-names": [...]}
        if isinstance(data, dict):
            packages = cast(dict[str, Any], data).get("packages")
            if isinstance(packages, list):
                return cast(list[object], packages)

        msg = f"Unexpected structure in {self.installed_file}: expected a package list"
        raise RegistryReadError(msg)

    def _parse_entry(self, entry: object) -> InstalledPackage | None:
        """Parse a single installed.json entry.

        Args:
            entry: Decoded JSON object for one package.

        Returns:
            InstalledPackage if the entry is usable, None otherwise.
        """
        if not isinstance(entry, dict):
            logger.debug("Skipping non-object installed.json entry: %r", entry)
            return None

        fields = cast(dict[str, Any], entry)
        name = fields.get("name")
        if not isinstance(name, str) or not name.strip():
            logger.debug("Skipping installed.json entry without a name: %r", str(entry)[:100])
            return None
        name = name.strip()

        version = fields.get("version")
        install_path_raw = fields.get("install-path")
        if isinstance(install_path_raw, str) and install_path_raw:
            install_path = (self._vendor_dir / "composer" / install_path_raw).resolve()
        else:
            install_path = (self._vendor_dir / name.lower()).resolve()

        return InstalledPackage(
            name=name,
            install_path=install_path,
            version=version if isinstance(version, str) and version else None,
        )
