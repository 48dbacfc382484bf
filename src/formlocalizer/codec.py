"""Composite key and list codec for the record stream format.

A composite key or an encoded list is a sequence of fields joined with
SEPARATOR. Literal separators inside a field are replaced by
ESCAPED_SEPARATOR before joining and restored after splitting.

The escaping is plain token substitution, not a grammar: a field that
already contains ESCAPED_SEPARATOR comes back with a separator in its
place. Likewise an empty sequence encodes to "" which decodes to [""].
Both are properties of the persisted format and are kept as-is.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formlocalizer.constants import ESCAPED_SEPARATOR, SEPARATOR
from formlocalizer.diagnostics import ErrorTemplate, RecordFormatError

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "compose_key",
    "compose_list",
    "escape",
    "split_list",
    "split_record_key",
    "unescape",
]


def escape(field: str) -> str:
    """Replace every separator in a single field with the escape token."""
    return field.replace(SEPARATOR, ESCAPED_SEPARATOR)


def unescape(field: str) -> str:
    """Restore separators in a single field."""
    return field.replace(ESCAPED_SEPARATOR, SEPARATOR)


def compose_list(parts: Iterable[str]) -> str:
    """Join fields with the separator, escaping each field first.

    Args:
        parts: Fields to join, in order

    Returns:
        Encoded list

    Example:
        >>> compose_list(["Name", "a;b"])
        'Name;a__semib'
    """
    return SEPARATOR.join(escape(part) for part in parts)


def split_list(text: str) -> list[str]:
    """Split an encoded list on the raw separator and unescape each field.

    Args:
        text: Encoded list produced by compose_list()

    Returns:
        Decoded fields, in order

    Example:
        >>> split_list("Name;a__semib")
        ['Name', 'a;b']
    """
    return [unescape(part) for part in text.split(SEPARATOR)]


def compose_key(prefix: str, inner: str) -> str:
    """Build the composite key ``prefix;inner`` without escaping.

    Used for prefixed scalar and list entries, whose record keys are only
    ever split on their first separator.
    """
    return prefix + SEPARATOR + inner


def split_record_key(record_key: str) -> tuple[str, str]:
    """Split a record key on its first separator.

    Args:
        record_key: Persisted key such as ``VALUE;greeting``

    Returns:
        (record_type, payload) tuple

    Raises:
        RecordFormatError: If the key contains no separator
    """
    record_type, sep, payload = record_key.partition(SEPARATOR)
    if not sep:
        raise RecordFormatError(
            ErrorTemplate.record_key_missing_separator(record_key),
            record_key=record_key,
        )
    return record_type, payload
