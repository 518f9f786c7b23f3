"""Static member resolution for a pluggable expression evaluation pipeline."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from elresolver.context import EvaluationContext, EvaluationListener
from elresolver.model import UNHANDLED, ClassHandle, Resolution
from elresolver.resolvers import CompositeResolver, ElResolver, StaticFieldResolver

__all__ = [
    "UNHANDLED",
    "ClassHandle",
    "CompositeResolver",
    "ElResolver",
    "EvaluationContext",
    "EvaluationListener",
    "Resolution",
    "StaticFieldResolver",
    "__version__",
]

try:
    __version__ = version("elresolver")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
