"""Lookup of class-level fields, static methods and constructors.

Python has no access modifiers, so a member is public when its name does not
start with an underscore. A field is static when its value lives in the
``__dict__`` of a class in the MRO as plain data; properties, slots,
dataclass and NamedTuple fields, and annotation-only names are instance-level.

Lookups raise ``AttributeError`` for names that are not fields at all. Callers
translate that into the resolver error taxonomy.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import types
import typing
from collections.abc import Callable
from enum import Enum
from typing import Any, ClassVar

from elresolver.constants.resolver import PRIVATE_NAME_PREFIX
from elresolver.model import StaticField

_NO_VALUE = object()


def is_public_name(name: str) -> bool:
    """Return whether *name* is part of a class's public surface."""
    return bool(name) and not name.startswith(PRIVATE_NAME_PREFIX)


def find_static_field(klass: type, name: str) -> StaticField:
    """Find the field *name* on *klass*, static or not.

    Raises ``AttributeError`` if *klass* has no field with that name.
    """
    if issubclass(klass, Enum) and name in klass.__members__:
        return StaticField(
            owner=klass,
            name=name,
            value=klass.__members__[name],
            declared_type=klass,
            is_public=is_public_name(name),
            is_static=True,
        )

    if _is_instance_field_name(klass, name):
        return _instance_field(klass, name)

    for owner in inspect.getmro(klass):
        if name not in vars(owner):
            continue
        raw = vars(owner)[name]
        if _is_instance_descriptor(raw):
            return _instance_field(owner, name)
        if _is_code_member(raw):
            raise AttributeError(f"'{name}' is a method or nested class of {klass.__qualname__}, not a field")
        value = getattr(klass, name)
        return StaticField(
            owner=owner,
            name=name,
            value=value,
            declared_type=_declared_type(owner, name, value),
            is_public=is_public_name(name),
            is_static=True,
        )

    for owner in inspect.getmro(klass):
        annotation = inspect.get_annotations(owner).get(name)
        if annotation is not None and not _is_classvar(annotation):
            return _instance_field(owner, name)

    raise AttributeError(f"{klass.__qualname__} has no field '{name}'")


def find_static_method(
    klass: type,
    name: str,
    *,
    include_classmethods: bool = True,
    static_only: bool = True,
) -> Callable[..., Any] | None:
    """Return the public callable *name* of *klass*, or ``None``.

    With ``static_only`` only static methods (and class methods when
    ``include_classmethods`` is set) qualify. Otherwise plain functions are
    returned unbound and need a receiver as first argument.
    """
    if not is_public_name(name):
        return None
    for owner in inspect.getmro(klass):
        if name not in vars(owner):
            continue
        raw = vars(owner)[name]
        if isinstance(raw, staticmethod):
            return getattr(klass, name)
        if include_classmethods and isinstance(raw, (classmethod, types.ClassMethodDescriptorType)):
            return getattr(klass, name)
        if not static_only and (inspect.isfunction(raw) or inspect.ismethoddescriptor(raw)):
            return raw
        return None
    return None


def is_constructible(klass: type) -> bool:
    """Return whether *klass* can be instantiated directly."""
    if inspect.isabstract(klass):
        return False
    return not getattr(klass, "_is_protocol", False)


def _is_instance_field_name(klass: type, name: str) -> bool:
    if dataclasses.is_dataclass(klass) and name in {field.name for field in dataclasses.fields(klass)}:
        return True
    return issubclass(klass, tuple) and name in getattr(klass, "_fields", ())


def _instance_field(owner: type, name: str) -> StaticField:
    return StaticField(
        owner=owner,
        name=name,
        value=None,
        declared_type=_declared_type(owner, name, _NO_VALUE),
        is_public=is_public_name(name),
        is_static=False,
    )


def _is_instance_descriptor(raw: Any) -> bool:
    if isinstance(raw, (property, functools.cached_property)):
        return True
    return inspect.ismemberdescriptor(raw) or inspect.isgetsetdescriptor(raw)


def _is_code_member(raw: Any) -> bool:
    if isinstance(raw, (staticmethod, classmethod, types.ClassMethodDescriptorType)):
        return True
    return inspect.isfunction(raw) or inspect.ismethoddescriptor(raw) or inspect.isbuiltin(raw) or inspect.isclass(raw)


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _declared_type(owner: type, name: str, value: Any) -> Any:
    """Resolve the annotation for *name*, unwrapping ``ClassVar[T]``."""
    try:
        annotation = typing.get_type_hints(owner).get(name)
    except Exception:
        # Annotations that do not evaluate: keep the raw annotation.
        annotation = inspect.get_annotations(owner).get(name)

    if annotation is None:
        return Any if value is _NO_VALUE else type(value)
    if annotation is ClassVar:
        return type(value)
    if typing.get_origin(annotation) is ClassVar:
        args = typing.get_args(annotation)
        return args[0] if args else type(value)
    return annotation
