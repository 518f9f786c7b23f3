"""Errors raised while resolving properties and methods on a class handle."""

from __future__ import annotations

from elresolver.exceptions.base import ElError


class InvalidArgumentError(ElError, ValueError):
    """Raised when a required argument, such as the evaluation context, is missing."""


class MemberNotFoundError(ElError, LookupError):
    """Raised when a field, method or constructor cannot be found on a type."""

    def __init__(self, message: str, *, type_name: str, member_name: str) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.member_name = member_name


class PropertyNotFoundError(MemberNotFoundError):
    """Raised when a name is not a public static field of the type."""


class MethodNotFoundError(MemberNotFoundError):
    """Raised when no static method or constructor matches the call."""


class PropertyNotWritableError(ElError):
    """Raised on any attempt to assign a static field."""

    def __init__(self, message: str, *, type_name: str, member_name: str) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.member_name = member_name


class InvocationError(ElError):
    """Raised when a selected method or constructor raised while running.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, *, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause


class ClassNotFoundError(ElError, LookupError):
    """Raised when a dotted class name cannot be imported."""
