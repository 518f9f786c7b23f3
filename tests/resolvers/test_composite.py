"""Tests for the resolver chain and its resolved-flag handshake."""

from __future__ import annotations

import math
from typing import Any

import pytest

from elresolver.context import EvaluationContext
from elresolver.exceptions import PropertyNotFoundError, PropertyNotWritableError
from elresolver.model import UNHANDLED, ClassHandle, Resolution
from elresolver.resolvers import CompositeResolver, ElResolver, StaticFieldResolver
from tests.sample_types import Geometry


class MappingResolver(ElResolver):
    """Resolves keys of plain dict bases; stands in for another pipeline link."""

    def get_value(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        if not isinstance(base, dict):
            return UNHANDLED
        context.resolve_property(base, name)
        return Resolution(base.get(name), True)

    def set_value(self, context: EvaluationContext, base: Any, name: Any, value: Any) -> None:
        if isinstance(base, dict):
            context.resolve_property(base, name)
            base[name] = value

    def get_type(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        if not isinstance(base, dict):
            return UNHANDLED
        context.set_property_resolved(True)
        return Resolution(type(base.get(name)), True)

    def is_read_only(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        if not isinstance(base, dict):
            return Resolution(True, False)
        context.set_property_resolved(True)
        return Resolution(False, True)

    def get_feature_descriptors(self, context: EvaluationContext, base: Any) -> list[Any] | None:
        return list(base) if isinstance(base, dict) else None

    def get_common_property_type(self, context: EvaluationContext, base: Any) -> type | None:
        return object if isinstance(base, dict) else None


class ClaimEverything(MappingResolver):
    """Resolver that would claim any base; used to show the chain stops early."""

    def get_value(self, context: EvaluationContext, base: Any, name: Any) -> Resolution:
        context.resolve_property(base, name)
        return Resolution("claimed", True)


@pytest.fixture
def chain() -> CompositeResolver:
    return CompositeResolver([StaticFieldResolver(), MappingResolver()])


def test_chain_dispatches_by_base(chain: CompositeResolver, context: EvaluationContext) -> None:
    assert chain.get_value(context, ClassHandle(Geometry), "PI") == Resolution(math.pi, True)
    assert chain.get_value(context, {"PI": 3}, "PI") == Resolution(3, True)


def test_chain_stops_at_first_resolver(context: EvaluationContext) -> None:
    chain = CompositeResolver([StaticFieldResolver(), ClaimEverything()])

    assert chain.get_value(context, ClassHandle(Geometry), "PI").value == math.pi


def test_chain_clears_stale_flag(chain: CompositeResolver, context: EvaluationContext) -> None:
    context.set_property_resolved(True)

    assert chain.get_value(context, 42, "real") is UNHANDLED
    assert context.property_resolved is False


def test_chain_propagates_errors_after_claim(chain: CompositeResolver, context: EvaluationContext) -> None:
    with pytest.raises(PropertyNotFoundError):
        chain.get_value(context, ClassHandle(Geometry), "missing")

    assert context.property_resolved is True


def test_chain_set_value(chain: CompositeResolver, context: EvaluationContext) -> None:
    target: dict[str, Any] = {}
    chain.set_value(context, target, "answer", 42)

    assert target == {"answer": 42}
    with pytest.raises(PropertyNotWritableError):
        chain.set_value(context, ClassHandle(Geometry), "PI", 3)


def test_chain_invoke(chain: CompositeResolver, context: EvaluationContext) -> None:
    assert chain.invoke(context, ClassHandle(Geometry), "square", None, [4]) == Resolution(16, True)
    assert chain.invoke(context, {"square": 1}, "square", None, [4]) is UNHANDLED
    assert context.property_resolved is False


def test_chain_type_and_read_only(chain: CompositeResolver, context: EvaluationContext) -> None:
    assert chain.get_type(context, ClassHandle(Geometry), "PI") == Resolution(float, True)
    assert chain.get_type(context, {"k": "v"}, "k") == Resolution(str, True)
    assert chain.is_read_only(context, ClassHandle(Geometry), "PI") == Resolution(True, True)
    assert chain.is_read_only(context, {"k": "v"}, "k") == Resolution(False, True)
    assert chain.is_read_only(context, 42, "k") == Resolution(True, False)


def test_chain_auxiliary_queries(chain: CompositeResolver, context: EvaluationContext) -> None:
    assert list(chain.get_feature_descriptors(context, {"a": 1, "b": 2})) == ["a", "b"]
    assert list(chain.get_feature_descriptors(context, ClassHandle(Geometry))) == []
    assert chain.get_common_property_type(context, ClassHandle(Geometry)) is str
    assert CompositeResolver([MappingResolver()]).get_common_property_type(context, 1) is None


def test_chain_add_appends_resolver(context: EvaluationContext) -> None:
    chain = CompositeResolver()
    assert chain.get_value(context, {"a": 1}, "a") is UNHANDLED

    chain.add(MappingResolver())

    assert len(chain.resolvers) == 1
    assert chain.get_value(context, {"a": 1}, "a") == Resolution(1, True)
