"""Shared constants for formlocalizer.

Centralizes the characters and prefixes of the record stream format so the
codec and the store agree on a single source of truth.

Constants are grouped by domain:
- Separator: field delimiter and its escape token
- Record types: prefixes of persisted record keys

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separator
    "SEPARATOR",
    "ESCAPED_SEPARATOR",
    # Record types
    "RECORD_CULTURE",
    "RECORD_VALUE",
    "RECORD_LIST",
    "RECORD_TEMPLATE",
]

# ============================================================================
# SEPARATOR
# ============================================================================

# Delimits fields inside composite keys and encoded lists.
SEPARATOR: str = ";"

# Replaces every literal SEPARATOR inside a single field before joining.
# Plain token substitution: user data containing this token does not
# round-trip. The token is part of the persisted format and must not change.
ESCAPED_SEPARATOR: str = "__semi"

# ============================================================================
# RECORD TYPES
# ============================================================================

RECORD_CULTURE: str = "CULTURE"
RECORD_VALUE: str = "VALUE"
RECORD_LIST: str = "LIST"
RECORD_TEMPLATE: str = "TEMPLATE"
