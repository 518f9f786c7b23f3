"""Core data models for elresolver."""

from .entities import UNHANDLED, ClassHandle, Resolution, SelectedMember, StaticField, qualified_name

__all__ = [
    "UNHANDLED",
    "ClassHandle",
    "Resolution",
    "SelectedMember",
    "StaticField",
    "qualified_name",
]
