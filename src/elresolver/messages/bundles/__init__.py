"""Bundled message files, one YAML mapping per locale."""
