"""Shared pytest fixtures for resolver tests."""

from __future__ import annotations

from typing import Any

import pytest

from elresolver.context import EvaluationContext
from elresolver.model import ClassHandle
from elresolver.resolvers import StaticFieldResolver
from tests.sample_types import Geometry


class RecordingListener:
    """Evaluation listener that records every resolved (base, name) pair."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, Any]] = []

    def property_resolved(self, context: EvaluationContext, base: Any, name: Any) -> None:
        self.events.append((base, name))


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def context(listener: RecordingListener) -> EvaluationContext:
    """Return a fresh English context with a recording listener attached."""
    return EvaluationContext(listeners=[listener])


@pytest.fixture
def resolver() -> StaticFieldResolver:
    return StaticFieldResolver()


@pytest.fixture
def geometry() -> ClassHandle:
    return ClassHandle(Geometry)
