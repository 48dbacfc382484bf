"""Hypothesis strategies for formlocalizer property-based testing.

Usage:
    from tests.strategies import translation_stores, field_texts
"""

from .store import (
    field_texts,
    list_values,
    locale_codes,
    resx_texts,
    template_entries,
    translation_stores,
)

__all__ = [
    "field_texts",
    "list_values",
    "locale_codes",
    "resx_texts",
    "template_entries",
    "translation_stores",
]
