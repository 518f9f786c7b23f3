"""Message ids and bundle locations for error text."""

from __future__ import annotations

import re

STATIC_FIELD_READ_ERROR: str = "static-field-read-error"
STATIC_FIELD_WRITE_ERROR: str = "static-field-write-error"
CONSTRUCTOR_NOT_FOUND: str = "constructor-not-found"
METHOD_NOT_FOUND: str = "method-not-found"
INVOCATION_ERROR: str = "invocation-error"
NULL_CONTEXT: str = "null-context"

MESSAGE_IDS: frozenset[str] = frozenset(
    {
        STATIC_FIELD_READ_ERROR,
        STATIC_FIELD_WRITE_ERROR,
        CONSTRUCTOR_NOT_FOUND,
        METHOD_NOT_FOUND,
        INVOCATION_ERROR,
        NULL_CONTEXT,
    }
)

DEFAULT_LOCALE: str = "en"
BUNDLE_PACKAGE: str = "elresolver.messages.bundles"
BUNDLE_SUFFIX: str = ".yaml"
MISSING_MESSAGE_TEMPLATE: str = "Missing message '{message_id}' for locale '{locale}'"
LOCALE_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z]{2,3}(?:_[A-Za-z0-9]{2,8})*$")
