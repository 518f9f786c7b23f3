"""Config loading and normalization for elresolver."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from elresolver.config.model import ResolverConfig
from elresolver.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CONFIG_LOCALE,
    DEFAULT_INCLUDE_CLASSMETHODS,
)
from elresolver.constants.messages import LOCALE_PATTERN, MESSAGE_IDS
from elresolver.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> ResolverConfig:
    """Load and validate config from ``elresolver.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ResolverConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(set(raw) - ALLOWED_CONFIG_KEYS):
        hint = _suggest_key(str(key), ALLOWED_CONFIG_KEYS)
        raise ConfigError(f"Unknown config key `{key}` in {path}" + (f" ({hint})" if hint else ""))

    locale = raw.get("locale", DEFAULT_CONFIG_LOCALE)
    if not isinstance(locale, str) or not LOCALE_PATTERN.match(locale):
        raise ConfigError(f"locale must be a locale name such as 'en' or 'de_DE', got {locale!r}")

    include_classmethods = raw.get("include_classmethods", DEFAULT_INCLUDE_CLASSMETHODS)
    if not isinstance(include_classmethods, bool):
        raise ConfigError("include_classmethods must be a boolean")

    return ResolverConfig(
        locale=locale,
        include_classmethods=include_classmethods,
        messages=_ensure_messages(raw.get("messages", {})),
    )


def _ensure_messages(value: Any) -> dict[str, str]:
    """Validate the message override mapping."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("messages must be a mapping of message id to template")

    messages: dict[str, str] = {}
    for message_id, template in value.items():
        if message_id not in MESSAGE_IDS:
            hint = _suggest_key(str(message_id), MESSAGE_IDS)
            raise ConfigError(f"messages: unknown message id `{message_id}`" + (f" ({hint})" if hint else ""))
        if not isinstance(template, str):
            raise ConfigError(f"messages.{message_id} must be a string")
        messages[message_id] = template
    return messages


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
