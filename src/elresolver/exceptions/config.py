"""Configuration-related exceptions."""

from __future__ import annotations

from elresolver.exceptions.base import ElError


class ConfigError(ElError, ValueError):
    """Raised when resolver configuration or a message bundle is invalid."""
