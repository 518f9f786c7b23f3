"""Resolver for static fields, static methods and constructors of a class.

Handles accesses whose base is a ``ClassHandle`` and whose name is a string.
Reads return public class-level values, writes are always rejected, and
calls dispatch to static methods or, for the ``"<init>"`` pseudo-method, the
constructor.

The resolved flag is set before the lookup for reads, type queries and
read-only queries, but only after a successful dispatch for invocations.
A set flag together with an error therefore means "handled here and failed".
"""

from __future__ import annotations

import logging
from typing import Any

from elresolver.config import ResolverConfig
from elresolver.constants.messages import (
    CONSTRUCTOR_NOT_FOUND,
    METHOD_NOT_FOUND,
    STATIC_FIELD_READ_ERROR,
    STATIC_FIELD_WRITE_ERROR,
)
from elresolver.constants.resolver import CONSTRUCTOR_NAME
from elresolver.context import EvaluationContext
from elresolver.exceptions import MethodNotFoundError, PropertyNotFoundError, PropertyNotWritableError
from elresolver.introspection import find_static_field
from elresolver.messages import format_message
from elresolver.model import UNHANDLED, ClassHandle, Resolution, StaticField
from elresolver.resolvers.base import ElResolver, require_context
from elresolver.selector import MemberSelector, SignatureMemberSelector
from elresolver.types.common import ParamTypes, Params

logger = logging.getLogger(__name__)

# Any failure while looking up a field means "no usable field".
_LOOKUP_ERRORS = (Exception,)


class StaticFieldResolver(ElResolver):
    """Resolves static members of the class wrapped by a ``ClassHandle``."""

    def __init__(self, selector: MemberSelector | None = None) -> None:
        self._selector: MemberSelector = selector if selector is not None else SignatureMemberSelector()

    @classmethod
    def from_config(cls, config: ResolverConfig) -> StaticFieldResolver:
        """Build a resolver whose default selector honours *config*."""
        return cls(SignatureMemberSelector(include_classmethods=config.include_classmethods))

    def get_value(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        """Return the value of the public static field *name*."""
        require_context(context)
        if not _applies(base, name):
            return UNHANDLED

        context.resolve_property(base, name)
        field = self._lookup(context, base, name)
        logger.debug("Read static field %s.%s", base.type_name, name)
        return Resolution(field.value, True)

    def set_value(self, context: EvaluationContext, base: Any, name: Any, value: Any) -> None:
        """Reject any write to a static field."""
        require_context(context)
        if not _applies(base, name):
            return
        raise PropertyNotWritableError(
            format_message(context, STATIC_FIELD_WRITE_ERROR, base.type_name, name),
            type_name=base.type_name,
            member_name=name,
        )

    def invoke(
        self,
        context: EvaluationContext,
        base: Any,
        method: Any,
        param_types: ParamTypes,
        params: Params,
    ) -> Resolution:
        """Call a public static method, or the constructor for ``"<init>"``.

        The selected member runs with *params*; an exception it raises comes
        back as ``InvocationError`` carrying the original as ``cause``.
        """
        require_context(context)
        if not _applies(base, method):
            return UNHANDLED

        klass = base.klass
        if method == CONSTRUCTOR_NAME:
            member = self._selector.find_constructor(klass, param_types, params)
            if member is None:
                raise MethodNotFoundError(
                    format_message(context, CONSTRUCTOR_NOT_FOUND, base.type_name, method),
                    type_name=base.type_name,
                    member_name=method,
                )
        else:
            member = self._selector.find_method(klass, method, param_types, params, static_only=True)
            if member is None:
                raise MethodNotFoundError(
                    format_message(context, METHOD_NOT_FOUND, base.type_name, method),
                    type_name=base.type_name,
                    member_name=method,
                )

        result = self._selector.invoke(context, member, None, params)
        context.resolve_property(base, method)
        logger.debug("Invoked %s %s.%s", member.kind, base.type_name, method)
        return Resolution(result, True)

    def get_type(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        """Return the declared type of the public static field *name*."""
        require_context(context)
        if not _applies(base, name):
            return UNHANDLED

        context.set_property_resolved(True)
        field = self._lookup(context, base, name)
        return Resolution(field.declared_type, True)

    def is_read_only(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        """Static fields are always read-only; existence is not checked."""
        require_context(context)
        if _applies(base, name):
            context.set_property_resolved(True)
            return Resolution(True, True)
        return Resolution(True, False)

    def get_feature_descriptors(self, context: EvaluationContext, base: Any) -> None:
        """Static fields are not enumerated."""
        return None

    def get_common_property_type(self, context: EvaluationContext, base: Any) -> type:
        """Field names are always strings."""
        return str

    @staticmethod
    def _lookup(context: EvaluationContext, base: ClassHandle, name: str) -> StaticField:
        """Find a public static field or raise ``PropertyNotFoundError``."""
        try:
            field = find_static_field(base.klass, name)
        except _LOOKUP_ERRORS as exc:
            logger.debug("Static field lookup failed for %s.%s: %s", base.type_name, name, exc)
            raise _read_error(context, base, name) from exc
        if not (field.is_public and field.is_static):
            raise _read_error(context, base, name)
        return field


def _applies(base: Any, name: Any) -> bool:
    return isinstance(base, ClassHandle) and isinstance(name, str)


def _read_error(context: EvaluationContext, base: ClassHandle, name: str) -> PropertyNotFoundError:
    return PropertyNotFoundError(
        format_message(context, STATIC_FIELD_READ_ERROR, base.type_name, name),
        type_name=base.type_name,
        member_name=name,
    )
