"""Record sinks and sources for persisting a TranslationStore.

A store is persisted as an ordered sequence of (key, value) string pairs.
How those pairs are framed on disk is up to the caller; this module
provides the protocol a sink must satisfy plus two ready-made adapters.

Components:
    RecordSink - Protocol for ordered record writers (structural typing)
    RecordSource - Any iterable of (key, value) pairs
    MemoryRecordStream - In-memory ordered records, usable as sink and source
    ResxRecordWriter - Writes records as a .resx XML resource file
    read_resx_records - Reads records back from a .resx XML resource file

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol, TypeAlias

__all__ = [
    "MemoryRecordStream",
    "RecordSink",
    "RecordSource",
    "ResxRecordWriter",
    "read_resx_records",
]

logger = logging.getLogger(__name__)

RecordSource: TypeAlias = Iterable[tuple[str, str]]
"""Ordered (record_key, record_value) pairs consumed by TranslationStore.load()."""

# xml:space is a namespaced attribute; ElementTree spells it in Clark notation.
_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"

# Characters outside the XML 1.0 Char production cannot appear in a document,
# not even as character references.
_XML_INVALID_CHAR = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class RecordSink(Protocol):
    """Protocol for writing ordered records.

    The sink is opened and closed by the caller. TranslationStore.save()
    writes every record and then calls flush(), also when writing fails.

    Example:
        >>> class PrintSink:
        ...     def write(self, key: str, value: str) -> None:
        ...         print(key, "=", value)
        ...     def flush(self) -> None:
        ...         pass
    """

    def write(self, key: str, value: str) -> None:
        """Append one record."""

    def flush(self) -> None:
        """Push buffered records to the underlying medium."""


class MemoryRecordStream:
    """Ordered in-memory records.

    Satisfies RecordSink and is itself a RecordSource, so the output of
    save() can be fed straight back into load().

    Example:
        >>> stream = MemoryRecordStream()
        >>> store.save(stream)
        >>> result = store.load(stream)
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[tuple[str, str]] = ()) -> None:
        self._records: list[tuple[str, str]] = list(records)

    def write(self, key: str, value: str) -> None:
        self._records.append((key, value))

    def flush(self) -> None:
        """Nothing to flush; records are stored as they are written."""

    @property
    def records(self) -> tuple[tuple[str, str], ...]:
        """Snapshot of all records in write order."""
        return tuple(self._records)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(tuple(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"MemoryRecordStream(records={len(self._records)})"


class ResxRecordWriter:
    """Write records to a .resx XML resource file.

    Records are buffered and written to ``path`` on flush(). Usable as a
    context manager, which flushes on exit.

    Output layout:
        <root>
          <data name="VALUE;greeting" xml:space="preserve">
            <value>Hello</value>
          </data>
        </root>

    Attributes:
        path: Destination file
    """

    __slots__ = ("_records", "path")

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._records: list[tuple[str, str]] = []

    def __enter__(self) -> ResxRecordWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()

    def write(self, key: str, value: str) -> None:
        """Buffer one record.

        Raises:
            ValueError: If key or value holds a character XML 1.0 cannot
                represent (most C0 controls, lone surrogates, U+FFFE, U+FFFF)
        """
        for text in (key, value):
            match = _XML_INVALID_CHAR.search(text)
            if match is not None:
                msg = (
                    f"Record {key!r} contains U+{ord(match.group()):04X}, "
                    f"which cannot be stored in a .resx file"
                )
                raise ValueError(msg)
        self._records.append((key, value))

    def flush(self) -> None:
        """Write all buffered records to disk, replacing the file."""
        root = ET.Element("root")
        for key, value in self._records:
            data = ET.SubElement(root, "data", {"name": key, _XML_SPACE: "preserve"})
            ET.SubElement(data, "value").text = value
        ET.indent(root)
        # Parsers normalize a raw CR to LF; a character reference survives.
        body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
        self.path.write_text(
            '<?xml version="1.0" encoding="utf-8"?>\n' + body + "\n",
            encoding="utf-8",
            newline="\n",
        )
        logger.debug("Wrote %d records to %s", len(self._records), self.path)


def read_resx_records(path: str | Path) -> Iterator[tuple[str, str]]:
    """Read records from a .resx XML resource file in document order.

    Args:
        path: File written by ResxRecordWriter (or any .resx string table)

    Yields:
        (record_key, record_value) pairs

    Raises:
        FileNotFoundError: If the file doesn't exist
        xml.etree.ElementTree.ParseError: If the file is not well-formed XML
    """
    tree = ET.parse(Path(path))
    for data in tree.getroot().iter("data"):
        name = data.get("name")
        if name is None:
            logger.debug("Skipping <data> element without name in %s", path)
            continue
        value = data.find("value")
        yield name, (value.text or "") if value is not None else ""
