"""Configuration defaults and filenames."""

from __future__ import annotations

from elresolver.constants.messages import DEFAULT_LOCALE

CONFIG_FILENAME: str = "elresolver.yaml"

DEFAULT_CONFIG_LOCALE: str = DEFAULT_LOCALE
DEFAULT_INCLUDE_CLASSMETHODS: bool = True

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"locale", "include_classmethods", "messages"})
