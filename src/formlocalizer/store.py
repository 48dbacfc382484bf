"""TranslationStore - string-keyed translation overlay for form dialogs.

Holds three independent translation tables and persists them to an ordered
record stream:

    scalars:   key -> text
    lists:     key -> (text, text, ...)
    templates: field;usage -> (pattern, pattern, ...)

Record stream layout (one record per line, key -> value):

    CULTURE;                      -> locale identifier
    VALUE;<key>                   -> text
    LIST;<key>                    -> text;text;...
    TEMPLATE;<usage>;<field>;...  -> pattern;pattern;...

Template records are grouped by identical (usage, patterns) so a pattern
list shared by many fields is written once.

Python 3.13+. External dependency: Babel (optional CLDR locale access).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from formlocalizer.codec import compose_key, compose_list, split_list, split_record_key
from formlocalizer.constants import SEPARATOR
from formlocalizer.diagnostics import ErrorTemplate, RecordFormatError
from formlocalizer.enums import RecordType, TemplateUsage
from formlocalizer.locale_utils import get_babel_locale
from formlocalizer.template import TemplateEntry, parse_usage

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, MutableMapping, Sequence

    from babel import Locale

    from formlocalizer.records import RecordSink, RecordSource

__all__ = ["LoadResult", "TranslationStore"]

logger = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    """Outcome of TranslationStore.load().

    Unpacks as ``store, missing, extra``.

    Attributes:
        store: Newly built store holding the loaded records
        missing: Keys of the loading store that the loaded records lack
        extra: Keys of the loaded records that the loading store lacks
    """

    store: TranslationStore
    missing: tuple[str, ...]
    extra: tuple[str, ...]

    @property
    def has_changes(self) -> bool:
        """Check if the key sets of both stores differ."""
        return bool(self.missing or self.extra)


class TranslationStore:
    """Translation tables for one locale.

    The store is an overlay: lookups report misses with a ``False`` flag
    (or leave the caller's value untouched) instead of raising, so callers
    keep their built-in text wherever no translation exists.

    The three tables are separate namespaces. The same key may live in
    all of them at once; remove() deletes it everywhere.

    Thread Safety:
        Not thread-safe. Serialize access externally when sharing a store
        between threads. load() never mutates the store it is called on.

    Example:
        >>> store = TranslationStore(locale="fr-FR")
        >>> store.add("greeting", "Bonjour")
        >>> store.lookup("greeting")
        (True, 'Bonjour')
        >>> store.lookup("farewell")
        (False, None)
    """

    __slots__ = ("_lists", "_locale", "_scalars", "_templates")

    def __init__(self, *, locale: str = "") -> None:
        """Initialize an empty store.

        Args:
            locale: Opaque locale identifier (e.g. "en-US"); not validated
        """
        self._locale = locale
        self._scalars: dict[str, str] = {}
        self._lists: dict[str, tuple[str, ...]] = {}
        self._templates: dict[str, tuple[str, ...]] = {}

    @property
    def locale(self) -> str:
        """Locale identifier written to and read from the CULTURE record."""
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = value

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale for the locale identifier.

        Raises:
            babel.core.UnknownLocaleError: If the identifier is not a known locale
            ValueError: If the identifier is empty or malformed
        """
        return get_babel_locale(self._locale)

    # ------------------------------------------------------------------
    # Adding
    # ------------------------------------------------------------------

    def add(self, key: str, value: str) -> None:
        """Set the scalar translation for key (last write wins)."""
        self._scalars[key] = value

    def add_values(self, key: str, values: Iterable[str]) -> None:
        """Set the list translation for key.

        The values are copied in order; the caller's iterable is not kept.
        An empty list cannot be told apart from [""] once saved: it is
        persisted as an empty record value and reloads as ("",).
        """
        self._lists[key] = tuple(values)

    def add_dictionary(self, prefix: str, mapping: Mapping[object, str]) -> None:
        """Add every scalar of mapping under ``prefix;str(inner_key)``.

        Inner keys are stringified with str(); their string form must be
        stable and distinct per key.
        """
        for inner_key, value in mapping.items():
            self.add(compose_key(prefix, str(inner_key)), value)

    def add_list_dictionary(
        self, prefix: str, mapping: Mapping[object, Sequence[str]]
    ) -> None:
        """Add every list of mapping under ``prefix;str(inner_key)``."""
        for inner_key, values in mapping.items():
            self.add_values(compose_key(prefix, str(inner_key)), values)

    def add_template(self, field: str, entry: TemplateEntry) -> None:
        """Set the patterns of one template for a field.

        Args:
            field: Name of the field the template applies to
            entry: Usage and patterns
        """
        key = compose_list((field, str(entry.usage)))
        self._templates[key] = tuple(entry.patterns)
        logger.debug("Registered template: %s", key)

    def add_templates(
        self, field: str, templates: Mapping[TemplateUsage, TemplateEntry]
    ) -> None:
        """Set the patterns of every template in templates for a field."""
        for entry in templates.values():
            self.add_template(field, entry)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> tuple[bool, str | None]:
        """Look up a scalar translation.

        Returns:
            (True, value) if present, (False, None) otherwise
        """
        value = self._scalars.get(key)
        return (value is not None, value)

    def lookup_values(self, key: str) -> tuple[bool, tuple[str, ...] | None]:
        """Look up a list translation.

        Returns:
            (True, values) if present, (False, None) otherwise
        """
        values = self._lists.get(key)
        return (values is not None, values)

    def lookup_dictionary(self, prefix: str, mapping: MutableMapping[object, str]) -> None:
        """Overwrite each value of mapping with its translation, if any.

        Looks up ``prefix;str(inner_key)`` for every key already in mapping.
        Keys without a translation keep their current value.
        """
        for inner_key in list(mapping):
            found, value = self.lookup(compose_key(prefix, str(inner_key)))
            if found:
                mapping[inner_key] = value  # type: ignore[assignment]

    def lookup_list_dictionary(
        self, prefix: str, mapping: MutableMapping[object, Sequence[str]]
    ) -> None:
        """Overwrite each list of mapping with its translation, if any."""
        for inner_key in list(mapping):
            found, values = self.lookup_values(compose_key(prefix, str(inner_key)))
            if found:
                mapping[inner_key] = values  # type: ignore[assignment]

    def lookup_templates(
        self, field: str, templates: Mapping[TemplateUsage, TemplateEntry]
    ) -> None:
        """Replace the patterns of each entry in templates with its translation.

        Entries are updated in place; entries without a translation keep
        their patterns.
        """
        for entry in templates.values():
            patterns = self._templates.get(compose_list((field, str(entry.usage))))
            if patterns is not None:
                entry.patterns = patterns

    # ------------------------------------------------------------------
    # Removal and introspection
    # ------------------------------------------------------------------

    def remove(self, key: str) -> None:
        """Delete key from all three tables. Absent keys are ignored."""
        self._scalars.pop(key, None)
        self._lists.pop(key, None)
        self._templates.pop(key, None)

    def keys(self) -> tuple[str, ...]:
        """All keys: scalars, then lists, then templates (may repeat)."""
        return (*self._scalars, *self._lists, *self._templates)

    def __contains__(self, key: object) -> bool:
        return key in self._scalars or key in self._lists or key in self._templates

    def __len__(self) -> int:
        return len(self._scalars) + len(self._lists) + len(self._templates)

    def __repr__(self) -> str:
        return (
            f"TranslationStore(locale={self._locale!r}, "
            f"values={len(self._scalars)}, "
            f"lists={len(self._lists)}, "
            f"templates={len(self._templates)})"
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _group_templates(self) -> dict[tuple[str, tuple[str, ...]], list[str]]:
        """Invert field;usage -> patterns into (usage, patterns) -> [field, ...]."""
        by_patterns: dict[tuple[str, tuple[str, ...]], list[str]] = {}
        for key, patterns in self._templates.items():
            field, usage = split_list(key)
            by_patterns.setdefault((usage, patterns), []).append(field)
        return by_patterns

    def save(self, sink: RecordSink) -> None:
        """Write every translation to sink as ordered records.

        The sink is flushed on all exit paths; closing it is up to the caller.

        Args:
            sink: Destination of the records
        """
        try:
            sink.write(RecordType.CULTURE + SEPARATOR, self._locale)
            for key, value in self._scalars.items():
                sink.write(RecordType.VALUE + SEPARATOR + key, value)
            for key, values in self._lists.items():
                sink.write(RecordType.LIST + SEPARATOR + key, compose_list(values))
            groups = self._group_templates()
            for (usage, patterns), fields in groups.items():
                sink.write(
                    RecordType.TEMPLATE + SEPARATOR + usage + SEPARATOR + compose_list(fields),
                    compose_list(patterns),
                )
        finally:
            sink.flush()

        logger.info(
            "Saved store for locale %s (values=%d, lists=%d, templates=%d in %d records)",
            self._locale,
            len(self._scalars),
            len(self._lists),
            len(self._templates),
            len(groups),
        )

    def _add_record(self, record: object) -> None:
        """Apply one persisted record to this store."""
        match record:
            case (str() as record_key, str() as record_value):
                pass
            case _:
                diagnostic = ErrorTemplate.invalid_record_type(record)
                raise RecordFormatError(diagnostic, record_key=diagnostic.record_key or "")
        record_type, payload = split_record_key(record_key)
        match record_type:
            case RecordType.CULTURE:
                self._locale = record_value
            case RecordType.VALUE:
                self.add(payload, record_value)
            case RecordType.LIST:
                self.add_values(payload, split_list(record_value))
            case RecordType.TEMPLATE:
                usage_name, *fields = split_list(payload)
                entry = TemplateEntry(
                    parse_usage(usage_name, record_key=record_key),
                    split_list(record_value),
                )
                for field in fields:
                    self.add_template(field, entry)
            case _:
                logger.debug("Ignoring record of unknown type: %s", record_type)

    def load(self, source: RecordSource) -> LoadResult:
        """Build a new store from records and diff its keys against this one.

        This store is never modified. Unknown record types are skipped.

        Args:
            source: Ordered (record_key, record_value) pairs

        Returns:
            LoadResult with the new store and the missing/extra keys,
            each listed scalars first, then lists, then templates

        Raises:
            RecordFormatError: If a record is malformed; nothing is returned
        """
        loaded = TranslationStore()
        for record in source:
            loaded._add_record(record)

        missing: list[str] = []
        extra: list[str] = []
        for current, other in (
            (self._scalars, loaded._scalars),
            (self._lists, loaded._lists),
            (self._templates, loaded._templates),
        ):
            missing.extend(key for key in current if key not in other)
            extra.extend(key for key in other if key not in current)

        logger.info(
            "Loaded store for locale %s (values=%d, lists=%d, templates=%d)",
            loaded._locale,
            len(loaded._scalars),
            len(loaded._lists),
            len(loaded._templates),
        )
        if missing:
            logger.warning("Loaded store lacks %d keys of the current store", len(missing))

        return LoadResult(store=loaded, missing=tuple(missing), extra=tuple(extra))
