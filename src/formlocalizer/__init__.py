"""formlocalizer - translation store for form dialogs with a flat record format.

Holds scalar, list and template translations keyed by strings, overlays
them onto a form's built-in text, and saves/loads them as an ordered
sequence of (key, value) records while reporting keys that appeared or
disappeared across a reload.

Public API:
    TranslationStore - Scalar, list and template translation tables
    LoadResult - New store plus missing/extra keys returned by load()
    TemplateEntry - Usage identifier with its ordered patterns
    TemplateUsage - Closed set of template usage identifiers
    MemoryRecordStream - In-memory record sink/source
    ResxRecordWriter, read_resx_records - .resx XML record adapters

Exceptions:
    LocalizerError - Base exception class
    RecordFormatError - Malformed record during load()

Submodules:
    formlocalizer.codec - Composite key and list encoding
    formlocalizer.records - Record sink protocol and adapters
    formlocalizer.diagnostics - Error types and diagnostic codes
    formlocalizer.locale_utils - Babel locale helpers
"""

from .diagnostics import LocalizerError, RecordFormatError
from .enums import RecordType, TemplateUsage
from .records import (
    MemoryRecordStream,
    RecordSink,
    RecordSource,
    ResxRecordWriter,
    read_resx_records,
)
from .store import LoadResult, TranslationStore
from .template import TemplateEntry

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("formlocalizer")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LoadResult",
    "LocalizerError",
    "MemoryRecordStream",
    "RecordFormatError",
    "RecordSink",
    "RecordSource",
    "RecordType",
    "ResxRecordWriter",
    "TemplateEntry",
    "TemplateUsage",
    "TranslationStore",
    "__version__",
    "read_resx_records",
]
