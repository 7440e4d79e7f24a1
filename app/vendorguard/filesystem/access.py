"""Web-server access restriction files.

Writes the static .htaccess (Apache) and web.config (IIS) files that
deny HTTP access to a directory tree.
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

logger = logging.getLogger(__name__)

HTACCESS_FILENAME = ".htaccess"
WEB_CONFIG_FILENAME = "web.config"

HTACCESS_CONTENT = """\
# Deny all requests from Apache 2.4+.
<IfModule mod_authz_core.c>
  Require all denied
</IfModule>

# Deny all requests from Apache 2.0-2.2.
<IfModule !mod_authz_core.c>
  Deny from all
</IfModule>

# Turn off all options we don't need.
Options -Indexes -ExecCGI -Includes -MultiViews

# Set the catch-all handler to prevent scripts from being executed.
SetHandler Vendor_Security_Do_Not_Remove
<Files *>
  # Override the handler again if we're run later in the evaluation list.
  SetHandler Vendor_Security_Do_Not_Remove
</Files>

# If we know how to do it safely, disable the PHP engine entirely.
<IfModule mod_php.c>
  php_flag engine off
</IfModule>
<IfModule mod_php7.c>
  php_flag engine off
</IfModule>
"""

WEB_CONFIG_CONTENT = """\
<?xml version="1.0" encoding="UTF-8"?>
<configuration>
  <system.webServer>
    <authorization>
      <deny users="*"/>
    </authorization>
  </system.webServer>
</configuration>
"""

ACCESS_RESTRICTION_FILES: dict[str, str] = {
    HTACCESS_FILENAME: HTACCESS_CONTENT,
    WEB_CONFIG_FILENAME: WEB_CONFIG_CONTENT,
}

# Marker files are left read-only after writing
_READ_ONLY = 0o444


class AccessRestrictionError(Exception):
    """Raised when an access restriction file cannot be written."""


def _write_file(path: Path, content: str) -> None:
    """Write a file atomically and make it read-only.

    Raises:
        OSError: If the file cannot be written.
    """
    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            prefix=f"{path.name}.",
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(content.encode("utf-8"))
        os.chmod(tmp_path, _READ_ONLY)
        os.replace(str(tmp_path), str(path))
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def write_access_restriction_files(directory: Path) -> list[Path]:
    """Write .htaccess and web.config into a directory.

    Existing files are replaced with the same fixed content, so repeated
    calls leave byte-identical files behind.

    Args:
        directory: Directory to protect (usually the vendor directory).

    Returns:
        Paths of the written files.

    Raises:
        AccessRestrictionError: If the directory is missing or a file cannot be written.
    """
    if not directory.is_dir():
        msg = f"Cannot protect missing directory: {directory}"
        raise AccessRestrictionError(msg)

    written: list[Path] = []
    for filename, content in ACCESS_RESTRICTION_FILES.items():
        target = directory / filename
        try:
            _write_file(target, content)
        except OSError as e:
            msg = f"Failed to write {target}: {e}"
            raise AccessRestrictionError(msg) from e
        logger.debug("Wrote %s", target)
        written.append(target)
    return written
