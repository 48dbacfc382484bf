"""Quickstart example for formlocalizer.

This example demonstrates translating a form's built-in text with a
TranslationStore and persisting the translations to a .resx file.

Note: Examples print results for illustration. In production, check the
missing/extra keys returned by load() and report them to translators.
"""

import tempfile
from enum import StrEnum
from pathlib import Path

from formlocalizer import (
    MemoryRecordStream,
    RecordFormatError,
    ResxRecordWriter,
    TemplateEntry,
    TemplateUsage,
    TranslationStore,
    read_resx_records,
)


class Size(StrEnum):
    SMALL = "Small"
    LARGE = "Large"


# Example 1: Scalars and lists
print("=" * 50)
print("Example 1: Scalars and Lists")
print("=" * 50)

store = TranslationStore(locale="de-DE")
store.add("greeting", "Hallo!")
store.add_values("colors", ["rot", "grün", "blau"])

print(store.lookup("greeting"))
# Output: (True, 'Hallo!')
print(store.lookup("farewell"))
# Output: (False, None)
print(store.lookup_values("colors"))
# Output: (True, ('rot', 'grün', 'blau'))

# Example 2: Overlaying a form's own dictionaries
print("\n" + "=" * 50)
print("Example 2: Dictionary Overlay")
print("=" * 50)

store.add_dictionary("Size", {Size.SMALL: "Klein"})

descriptions: dict[object, str] = {Size.SMALL: "Small", Size.LARGE: "Large"}
store.lookup_dictionary("Size", descriptions)
print(descriptions)
# Output: {<Size.SMALL: 'Small'>: 'Klein', <Size.LARGE: 'Large'>: 'Large'}

# Example 3: Templates shared by several fields
print("\n" + "=" * 50)
print("Example 3: Templates")
print("=" * 50)

not_understood = TemplateEntry(TemplateUsage.NOT_UNDERSTOOD, ["Wie bitte?", "Nochmal?"])
store.add_template("Name", not_understood)
store.add_template("Age", not_understood)

stream = MemoryRecordStream()
store.save(stream)
for key, value in stream:
    print(f"{key} -> {value}")
# Output includes one record for both fields:
# TEMPLATE;NotUnderstood;Name;Age -> Wie bitte?;Nochmal?

# Example 4: Reloading and diffing
print("\n" + "=" * 50)
print("Example 4: Reload with Diff")
print("=" * 50)

edited = [record for record in stream if record[0] != "VALUE;greeting"]
edited.append(("VALUE;farewell", "Tschüss!"))
reloaded, missing, extra = store.load(edited)
print(f"missing={missing} extra={extra}")
# Output: missing=('greeting',) extra=('farewell',)

# Example 5: .resx files
print("\n" + "=" * 50)
print("Example 5: .resx Files")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    path = Path(tmpdir) / "de-DE.resx"
    with ResxRecordWriter(path) as writer:
        store.save(writer)
    from_file = store.load(read_resx_records(path))
    print(from_file.store)
    # Output: TranslationStore(locale='de-DE', values=2, lists=1, templates=2)

# Example 6: Malformed records
print("\n" + "=" * 50)
print("Example 6: Format Errors")
print("=" * 50)

try:
    store.load([("TEMPLATE;Hlep;Name", "x")])
except RecordFormatError as e:
    print(e)
# Output:
# error[RECORD_UNKNOWN_USAGE]: Unknown template usage 'Hlep'
#   --> record 'TEMPLATE;Hlep;Name'
#   = help: Use one of the TemplateUsage names, e.g. 'NotUnderstood'
