"""Immutable entities shared by resolvers, selectors and the pipeline."""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from elresolver.constants.resolver import BUILTINS_MODULE
from elresolver.exceptions import ClassNotFoundError, InvalidArgumentError
from elresolver.types.common import MemberKind


def qualified_name(klass: type) -> str:
    """Return the dotted name of *klass*, without the builtins prefix."""
    module = klass.__module__
    if module == BUILTINS_MODULE:
        return klass.__qualname__
    return f"{module}.{klass.__qualname__}"


@dataclass(frozen=True)
class ClassHandle:
    """Reference to a class used as the base of a static member access."""

    klass: type

    def __post_init__(self) -> None:
        if not inspect.isclass(self.klass):
            raise InvalidArgumentError(f"ClassHandle requires a class, got {type(self.klass).__name__}")

    @property
    def type_name(self) -> str:
        """Dotted name of the wrapped class."""
        return qualified_name(self.klass)

    @classmethod
    def from_name(cls, name: str) -> ClassHandle:
        """Import ``pkg.mod.Class`` or ``pkg.mod:Class`` and wrap the class.

        Bare names are looked up in builtins. Without a colon, the longest
        importable module prefix wins, so nested classes resolve too.
        """
        stripped = name.strip()
        if not stripped:
            raise ClassNotFoundError("Class name must be a non-empty string")

        target: Any = None
        for module_name, attr_path in _candidate_splits(stripped):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
            target = _walk_attributes(module, attr_path)
            if target is not None:
                break

        if target is None:
            raise ClassNotFoundError(f"Class not found: {name}")
        if not inspect.isclass(target):
            raise ClassNotFoundError(f"'{name}' does not name a class")
        return cls(target)


def _candidate_splits(name: str) -> list[tuple[str, str]]:
    """Return (module, attribute path) pairs to try, most specific module first."""
    if ":" in name:
        module_name, _, attr_path = name.partition(":")
        return [(module_name, attr_path)]
    parts = name.split(".")
    if len(parts) == 1:
        return [(BUILTINS_MODULE, name)]
    return [(".".join(parts[:index]), ".".join(parts[index:])) for index in range(len(parts) - 1, 0, -1)]


def _walk_attributes(root: Any, attr_path: str) -> Any:
    target = root
    for part in attr_path.split("."):
        target = getattr(target, part, None)
        if target is None:
            return None
    return target


@dataclass(frozen=True)
class Resolution:
    """Outcome of one resolver operation.

    ``resolved`` mirrors the context flag: when it is False the caller must
    ignore ``value`` and consult the next resolver.
    """

    value: Any = None
    resolved: bool = False


UNHANDLED = Resolution()


@dataclass(frozen=True)
class StaticField:
    """A class attribute found by introspection."""

    owner: type
    name: str
    value: Any
    declared_type: Any
    is_public: bool
    is_static: bool


@dataclass(frozen=True)
class SelectedMember:
    """A constructor or static method chosen by a member selector."""

    owner: type
    name: str
    kind: MemberKind
    target: Callable[..., Any]
    signature: inspect.Signature | None = None
