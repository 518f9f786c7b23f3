"""Shared constants for elresolver."""
