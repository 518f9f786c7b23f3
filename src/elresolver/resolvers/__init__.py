"""Resolvers for the expression evaluation pipeline."""

from .base import ElResolver, require_context
from .composite import CompositeResolver
from .static_field import StaticFieldResolver

__all__ = ["CompositeResolver", "ElResolver", "StaticFieldResolver", "require_context"]
