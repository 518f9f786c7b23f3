"""Per-evaluation context shared by the resolvers of one pipeline."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from elresolver.constants.messages import DEFAULT_LOCALE
from elresolver.messages import MessageCatalog, default_catalog

logger = logging.getLogger(__name__)


class EvaluationListener(Protocol):
    """Observer notified when a resolver claims a property or method access."""

    def property_resolved(self, context: EvaluationContext, base: Any, name: Any) -> None: ...


class EvaluationContext:
    """Mutable state for a single expression evaluation.

    Holds the ``property_resolved`` flag that tells the pipeline a resolver
    has made a decision for the current access. A context belongs to one
    evaluation and must not be shared between threads.
    """

    def __init__(
        self,
        *,
        locale: str = DEFAULT_LOCALE,
        catalog: MessageCatalog | None = None,
        listeners: list[EvaluationListener] | None = None,
    ) -> None:
        self.locale = locale
        self.catalog = catalog if catalog is not None else default_catalog()
        self._listeners: list[EvaluationListener] = list(listeners or ())
        self._property_resolved = False
        self._resolved_target: tuple[Any, Any] | None = None

    @property
    def property_resolved(self) -> bool:
        """Whether a resolver has handled the current access."""
        return self._property_resolved

    @property
    def resolved_target(self) -> tuple[Any, Any] | None:
        """The last ``(base, name)`` pair passed to ``resolve_property``."""
        return self._resolved_target

    def set_property_resolved(self, resolved: bool) -> None:
        """Set the flag without notifying listeners."""
        self._property_resolved = resolved
        if not resolved:
            self._resolved_target = None

    def resolve_property(self, base: Any, name: Any) -> None:
        """Mark ``(base, name)`` as resolved and notify listeners."""
        self._property_resolved = True
        self._resolved_target = (base, name)
        for listener in self._listeners:
            listener.property_resolved(self, base, name)
        logger.debug("Property resolved: %r.%s", base, name)

    def add_listener(self, listener: EvaluationListener) -> None:
        self._listeners.append(listener)

    @property
    def listeners(self) -> tuple[EvaluationListener, ...]:
        return tuple(self._listeners)
