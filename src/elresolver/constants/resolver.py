"""Resolver names and member classification constants."""

from __future__ import annotations

CONSTRUCTOR_NAME: str = "<init>"

PRIVATE_NAME_PREFIX: str = "_"

MEMBER_KIND_CONSTRUCTOR: str = "constructor"
MEMBER_KIND_METHOD: str = "method"

BUILTINS_MODULE: str = "builtins"
