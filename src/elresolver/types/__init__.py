"""Shared type aliases for elresolver."""

from .common import MemberKind, ParamTypes, Params

__all__ = ["MemberKind", "ParamTypes", "Params"]
