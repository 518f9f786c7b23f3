"""Shared exception hierarchy for elresolver."""

from __future__ import annotations

from .base import ElError
from .config import ConfigError
from .resolution import (
    ClassNotFoundError,
    InvalidArgumentError,
    InvocationError,
    MemberNotFoundError,
    MethodNotFoundError,
    PropertyNotFoundError,
    PropertyNotWritableError,
)

__all__ = [
    "ClassNotFoundError",
    "ConfigError",
    "ElError",
    "InvalidArgumentError",
    "InvocationError",
    "MemberNotFoundError",
    "MethodNotFoundError",
    "PropertyNotFoundError",
    "PropertyNotWritableError",
]
