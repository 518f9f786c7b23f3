"""Configuration loading and validation for elresolver.

The package facade re-exports the public names so that
``from elresolver.config import ...`` works for callers.
"""

from __future__ import annotations

from elresolver.config.loader import load_config
from elresolver.config.model import ResolverConfig

__all__ = ["ResolverConfig", "load_config"]
