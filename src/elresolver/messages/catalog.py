"""Message catalog backed by YAML bundles shipped with the package.

Templates use positional ``str.format`` placeholders (``{0}``, ``{1}``).
Lookup order for a message id: configured overrides, the requested locale,
its language without region, then the fallback locale.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from typing import TYPE_CHECKING, Any

import yaml

from elresolver.constants.messages import (
    BUNDLE_PACKAGE,
    BUNDLE_SUFFIX,
    DEFAULT_LOCALE,
    LOCALE_PATTERN,
    MISSING_MESSAGE_TEMPLATE,
)
from elresolver.exceptions import ConfigError

if TYPE_CHECKING:
    from elresolver.context import EvaluationContext

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def load_bundle(locale: str) -> Mapping[str, str] | None:
    """Load the bundle for *locale*, or ``None`` when none is shipped."""
    if not LOCALE_PATTERN.match(locale):
        return None

    resource = resources.files(BUNDLE_PACKAGE).joinpath(f"{locale}{BUNDLE_SUFFIX}")
    if not resource.is_file():
        return None

    try:
        raw = yaml.safe_load(resource.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in message bundle '{locale}': {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Message bundle '{locale}' must contain a mapping")
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigError(f"Message bundle '{locale}' must map string ids to string templates, got {key!r}")

    logger.debug("Loaded message bundle %s with %d entries", locale, len(raw))
    return dict(raw)


def _locale_chain(locale: str, fallback: str) -> list[str]:
    chain = [locale]
    language, _, region = locale.partition("_")
    if region:
        chain.append(language)
    if fallback not in chain:
        chain.append(fallback)
    return chain


class MessageCatalog:
    """Formats error text from message ids and positional arguments."""

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        fallback_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._overrides = dict(overrides or {})
        self._fallback_locale = fallback_locale

    def template(self, message_id: str, locale: str | None = None) -> str | None:
        """Return the raw template for *message_id*, or ``None`` if unknown."""
        if message_id in self._overrides:
            return self._overrides[message_id]
        for candidate in _locale_chain(locale or self._fallback_locale, self._fallback_locale):
            bundle = load_bundle(candidate)
            if bundle is not None and message_id in bundle:
                return bundle[message_id]
        return None

    def format(self, message_id: str, *args: Any, locale: str | None = None) -> str:
        """Render *message_id* with *args* in *locale*."""
        effective_locale = locale or self._fallback_locale
        template = self.template(message_id, effective_locale)
        if template is None:
            return MISSING_MESSAGE_TEMPLATE.format(message_id=message_id, locale=effective_locale)
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError) as exc:
            logger.warning("Message '%s' has a malformed template: %s", message_id, exc)
            return f"{template} {list(args)!r}"


@lru_cache(maxsize=1)
def default_catalog() -> MessageCatalog:
    """Shared catalog with no overrides."""
    return MessageCatalog()


def format_message(context: EvaluationContext | None, message_id: str, *args: Any) -> str:
    """Render a message in the context's locale, using its catalog."""
    if context is None:
        return default_catalog().format(message_id, *args)
    return context.catalog.format(message_id, *args, locale=context.locale)
