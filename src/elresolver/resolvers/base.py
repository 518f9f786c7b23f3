"""Abstract resolver contract used by every link of the resolution pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from elresolver.constants.messages import NULL_CONTEXT
from elresolver.context import EvaluationContext
from elresolver.exceptions import InvalidArgumentError
from elresolver.messages import format_message
from elresolver.model import UNHANDLED, Resolution
from elresolver.types.common import ParamTypes, Params


class ElResolver(ABC):
    """Resolves property reads, writes and method calls for some kind of base.

    A resolver that handles an access marks the context as resolved and
    returns a ``Resolution`` with ``resolved=True``. Otherwise it leaves the
    context alone so the pipeline can ask the next resolver.
    """

    @abstractmethod
    def get_value(self, context: EvaluationContext, base: Any, name: Any) -> Resolution: ...

    @abstractmethod
    def set_value(self, context: EvaluationContext, base: Any, name: Any, value: Any) -> None: ...

    @abstractmethod
    def get_type(self, context: EvaluationContext, base: Any, name: Any) -> Resolution: ...

    @abstractmethod
    def is_read_only(self, context: EvaluationContext, base: Any, name: Any) -> Resolution: ...

    def invoke(
        self,
        context: EvaluationContext,
        base: Any,
        method: Any,
        param_types: ParamTypes,
        params: Params,
    ) -> Resolution:
        """Invoke *method* on *base*. Resolvers without method support decline."""
        require_context(context)
        return UNHANDLED

    def get_feature_descriptors(self, context: EvaluationContext, base: Any) -> Iterable[Any] | None:
        """Names this resolver could resolve on *base*; ``None`` when not enumerable."""
        return None

    @abstractmethod
    def get_common_property_type(self, context: EvaluationContext, base: Any) -> type | None: ...


def require_context(context: EvaluationContext | None) -> EvaluationContext:
    """Raise ``InvalidArgumentError`` when no context was supplied."""
    if context is None:
        raise InvalidArgumentError(format_message(None, NULL_CONTEXT))
    return context
