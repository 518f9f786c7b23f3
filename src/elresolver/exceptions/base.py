"""Root of the elresolver exception hierarchy."""

from __future__ import annotations


class ElError(Exception):
    """Base class for every error raised by elresolver."""
