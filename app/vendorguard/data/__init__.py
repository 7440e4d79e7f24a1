"""Bundled data files for vendorguard."""
