"""Member selection and invocation for static methods and constructors.

Resolvers delegate overload matching to a ``MemberSelector``. The default
``SignatureMemberSelector`` matches on the Python call signature: arguments
must bind, and when formal parameter types are supplied they must fit the
positional parameters and their class annotations. It does not coerce
values.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from elresolver.constants.messages import INVOCATION_ERROR
from elresolver.constants.resolver import CONSTRUCTOR_NAME, MEMBER_KIND_CONSTRUCTOR, MEMBER_KIND_METHOD
from elresolver.exceptions import InvocationError
from elresolver.introspection import find_static_method, is_constructible
from elresolver.messages import format_message
from elresolver.model import SelectedMember, qualified_name
from elresolver.types.common import ParamTypes, Params

if TYPE_CHECKING:
    from elresolver.context import EvaluationContext

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class MemberSelector(Protocol):
    """Finds and invokes constructors and static methods of a class."""

    def find_constructor(self, klass: type, param_types: ParamTypes, params: Params) -> SelectedMember | None: ...

    def find_method(
        self,
        klass: type,
        name: str,
        param_types: ParamTypes,
        params: Params,
        *,
        static_only: bool = True,
    ) -> SelectedMember | None: ...

    def invoke(
        self,
        context: EvaluationContext | None,
        member: SelectedMember,
        receiver: Any,
        params: Params,
    ) -> Any: ...


class SignatureMemberSelector:
    """Selects members whose signature accepts the given arguments."""

    def __init__(self, *, include_classmethods: bool = True) -> None:
        self._include_classmethods = include_classmethods

    def find_constructor(self, klass: type, param_types: ParamTypes, params: Params) -> SelectedMember | None:
        if not is_constructible(klass):
            logger.debug("%s is not constructible", qualified_name(klass))
            return None
        signature = _signature_of(klass)
        if not _accepts(signature, param_types, params):
            return None
        return SelectedMember(
            owner=klass,
            name=CONSTRUCTOR_NAME,
            kind=MEMBER_KIND_CONSTRUCTOR,
            target=klass,
            signature=signature,
        )

    def find_method(
        self,
        klass: type,
        name: str,
        param_types: ParamTypes,
        params: Params,
        *,
        static_only: bool = True,
    ) -> SelectedMember | None:
        target = find_static_method(
            klass,
            name,
            include_classmethods=self._include_classmethods,
            static_only=static_only,
        )
        if target is None:
            logger.debug("%s has no public static method %s", qualified_name(klass), name)
            return None
        signature = _signature_of(target)
        if not _accepts(signature, param_types, params):
            return None
        return SelectedMember(
            owner=klass,
            name=name,
            kind=MEMBER_KIND_METHOD,
            target=target,
            signature=signature,
        )

    def invoke(
        self,
        context: EvaluationContext | None,
        member: SelectedMember,
        receiver: Any,
        params: Params,
    ) -> Any:
        """Call *member*; anything it raises is wrapped in ``InvocationError``."""
        args = tuple(params or ())
        if receiver is not None:
            args = (receiver, *args)
        try:
            return member.target(*args)
        except Exception as exc:
            message = format_message(context, INVOCATION_ERROR, qualified_name(member.owner), member.name, exc)
            raise InvocationError(message, cause=exc) from exc


def _signature_of(target: Any) -> inspect.Signature | None:
    """Return the call signature, or ``None`` for uninspectable builtins."""
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return None
    try:
        return inspect.signature(target, eval_str=True)
    except Exception:
        # Annotations that do not evaluate are left as strings and ignored.
        return signature


def _accepts(signature: inspect.Signature | None, param_types: ParamTypes, params: Params) -> bool:
    if signature is None:
        return True
    if param_types is not None and not _hints_fit(signature, param_types):
        return False
    try:
        signature.bind(*(params or ()))
    except TypeError:
        return False
    return True


def _hints_fit(signature: inspect.Signature, param_types: Sequence[type]) -> bool:
    parameters = list(signature.parameters.values())
    positional = [p for p in parameters if p.kind in _POSITIONAL_KINDS]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    has_varargs = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters)

    if len(param_types) < len(required):
        return False
    if len(param_types) > len(positional) and not has_varargs:
        return False

    for hint, parameter in zip(param_types, positional):
        annotation = parameter.annotation
        if annotation is Any or not inspect.isclass(annotation) or not inspect.isclass(hint):
            continue
        if not issubclass(hint, annotation):
            return False
    return True
