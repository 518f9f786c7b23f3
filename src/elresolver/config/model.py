"""Config data model for elresolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from elresolver.constants.config import DEFAULT_CONFIG_LOCALE, DEFAULT_INCLUDE_CLASSMETHODS
from elresolver.messages import MessageCatalog


@dataclass(frozen=True)
class ResolverConfig:
    """Resolved resolver settings."""

    locale: str = DEFAULT_CONFIG_LOCALE
    include_classmethods: bool = DEFAULT_INCLUDE_CLASSMETHODS
    messages: dict[str, str] = field(default_factory=dict)

    def catalog(self) -> MessageCatalog:
        """Message catalog with the configured overrides applied."""
        return MessageCatalog(overrides=self.messages)
