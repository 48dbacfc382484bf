"""Template entries: a usage identifier plus its ordered patterns.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from formlocalizer.diagnostics import ErrorTemplate, RecordFormatError
from formlocalizer.enums import TemplateUsage

__all__ = ["TemplateEntry", "parse_usage"]


@dataclass(slots=True)
class TemplateEntry:
    """Patterns used for one situation of a form field.

    Not frozen: TranslationStore.lookup_templates() replaces the patterns
    of a caller's entry in place.

    Attributes:
        usage: Situation the patterns apply to
        patterns: Ordered translatable phrases
            (an empty tuple is persisted as one empty pattern, so it reloads as
            ("",))

    Example:
        >>> entry = TemplateEntry(TemplateUsage.NOT_UNDERSTOOD, ["Huh?", "Say again?"])
        >>> entry.patterns
        ('Huh?', 'Say again?')
    """

    usage: TemplateUsage
    patterns: tuple[str, ...]

    def __post_init__(self) -> None:
        """Snapshot patterns so later changes to the caller's list are not seen."""
        self.patterns = tuple(self.patterns)


def parse_usage(text: str, *, record_key: str = "") -> TemplateUsage:
    """Parse a persisted usage identifier.

    Args:
        text: Usage name as written by str(TemplateUsage.X)
        record_key: Record the name came from, for diagnostics

    Returns:
        The matching TemplateUsage member

    Raises:
        RecordFormatError: If text names no TemplateUsage member
    """
    try:
        return TemplateUsage(text)
    except ValueError as e:
        raise RecordFormatError(
            ErrorTemplate.unknown_usage(text, record_key),
            record_key=record_key,
        ) from e
