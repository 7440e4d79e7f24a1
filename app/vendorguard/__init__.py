"""vendorguard - Vendor directory hardening for Composer projects.

Removes non-runtime directories from installed packages and blocks
web-server access to the vendor directory.
"""

__version__ = "0.1.0"
