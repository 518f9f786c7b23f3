"""Ordered chain of resolvers: the first one to mark the context wins."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from elresolver.context import EvaluationContext
from elresolver.model import UNHANDLED, Resolution
from elresolver.resolvers.base import ElResolver, require_context
from elresolver.types.common import ParamTypes, Params

logger = logging.getLogger(__name__)


class CompositeResolver(ElResolver):
    """Asks each resolver in order until one sets the resolved flag.

    The flag is cleared before the chain runs. Errors raised by a resolver
    end the chain and propagate to the caller.
    """

    def __init__(self, resolvers: Sequence[ElResolver] = ()) -> None:
        self._resolvers: list[ElResolver] = list(resolvers)

    def add(self, resolver: ElResolver) -> None:
        self._resolvers.append(resolver)

    @property
    def resolvers(self) -> tuple[ElResolver, ...]:
        return tuple(self._resolvers)

    def get_value(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        require_context(context)
        context.set_property_resolved(False)
        for resolver in self._resolvers:
            resolution = resolver.get_value(context, base, name)
            if context.property_resolved:
                return Resolution(resolution.value, True)
        return UNHANDLED

    def set_value(self, context: EvaluationContext, base: Any, name: Any, value: Any) -> None:
        require_context(context)
        context.set_property_resolved(False)
        for resolver in self._resolvers:
            resolver.set_value(context, base, name, value)
            if context.property_resolved:
                return

    def invoke(
        self,
        context: EvaluationContext,
        base: Any,
        method: Any,
        param_types: ParamTypes,
        params: Params,
    ) -> Resolution:
        require_context(context)
        context.set_property_resolved(False)
        for resolver in self._resolvers:
            resolution = resolver.invoke(context, base, method, param_types, params)
            if context.property_resolved:
                return Resolution(resolution.value, True)
        logger.debug("No resolver handled %r.%s()", base, method)
        return UNHANDLED

    def get_type(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        require_context(context)
        context.set_property_resolved(False)
        for resolver in self._resolvers:
            resolution = resolver.get_type(context, base, name)
            if context.property_resolved:
                return Resolution(resolution.value, True)
        return UNHANDLED

    def is_read_only(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        require_context(context)
        context.set_property_resolved(False)
        for resolver in self._resolvers:
            resolution = resolver.is_read_only(context, base, name)
            if context.property_resolved:
                return Resolution(resolution.value, True)
        return Resolution(True, False)

    def get_feature_descriptors(self, context: EvaluationContext, base: Any) -> Iterator[Any]:
        """Chain the descriptors of every resolver that can enumerate *base*."""
        sources: list[Iterable[Any]] = []
        for resolver in self._resolvers:
            descriptors = resolver.get_feature_descriptors(context, base)
            if descriptors is not None:
                sources.append(descriptors)
        return itertools.chain.from_iterable(sources)

    def get_common_property_type(self, context: EvaluationContext, base: Any) -> type | None:
        for resolver in self._resolvers:
            common = resolver.get_common_property_type(context, base)
            if common is not None:
                return common
        return None
