"""Localized message text keyed by symbolic message ids."""

from .catalog import MessageCatalog, default_catalog, format_message, load_bundle

__all__ = ["MessageCatalog", "default_catalog", "format_message", "load_bundle"]
