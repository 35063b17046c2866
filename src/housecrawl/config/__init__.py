"""Packaged default settings (defaults.yaml)."""
