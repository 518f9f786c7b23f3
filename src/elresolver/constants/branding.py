"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "elresolver"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: resolve static fields and call static methods of Python classes"
