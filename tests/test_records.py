"""Tests for record sinks and sources.

Covers MemoryRecordStream and the .resx XML adapters, including a full
store round-trip through a file on disk.
"""

from __future__ import annotations

import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from formlocalizer import (
    MemoryRecordStream,
    ResxRecordWriter,
    TranslationStore,
    read_resx_records,
)

from tests.strategies import resx_texts


class TestMemoryRecordStream:
    """Test in-memory records."""

    def test_write_preserves_order(self) -> None:
        stream = MemoryRecordStream()
        stream.write("b", "2")
        stream.write("a", "1")

        assert stream.records == (("b", "2"), ("a", "1"))
        assert list(stream) == [("b", "2"), ("a", "1")]

    def test_initial_records(self) -> None:
        stream = MemoryRecordStream([("VALUE;x", "y")])

        assert len(stream) == 1

    def test_iteration_is_snapshot(self) -> None:
        stream = MemoryRecordStream([("a", "1")])
        iterator = iter(stream)
        stream.write("b", "2")

        assert list(iterator) == [("a", "1")]

    def test_repr(self) -> None:
        assert repr(MemoryRecordStream([("a", "1")])) == "MemoryRecordStream(records=1)"


class TestResx:
    """Test .resx XML records."""

    def test_writes_data_elements(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.resx"
        with ResxRecordWriter(path) as writer:
            writer.write("VALUE;greeting", "Hello")

        root = ET.parse(path).getroot()
        data = root.find("data")
        assert data is not None
        assert data.get("name") == "VALUE;greeting"
        assert data.findtext("value") == "Hello"

    def test_read_in_document_order(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.resx"
        with ResxRecordWriter(path) as writer:
            writer.write("CULTURE;", "en")
            writer.write("VALUE;b", "2")
            writer.write("VALUE;a", "1")

        assert list(read_resx_records(path)) == [
            ("CULTURE;", "en"),
            ("VALUE;b", "2"),
            ("VALUE;a", "1"),
        ]

    def test_whitespace_and_markup_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.resx"
        with ResxRecordWriter(path) as writer:
            writer.write("VALUE;padded", "  <b>x & y</b>  ")
            writer.write("VALUE;empty", "")

        assert dict(read_resx_records(path)) == {
            "VALUE;padded": "  <b>x & y</b>  ",
            "VALUE;empty": "",
        }

    def test_skips_unnamed_data(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.resx"
        path.write_text(
            "<root><data><value>x</value></data>"
            '<data name="VALUE;a"><value>1</value></data></root>',
            encoding="utf-8",
        )

        assert list(read_resx_records(path)) == [("VALUE;a", "1")]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(read_resx_records(tmp_path / "absent.resx"))

    def test_store_round_trip(self, tmp_path: Path, populated_store: TranslationStore) -> None:
        path = tmp_path / "de-DE.resx"
        with ResxRecordWriter(path) as writer:
            populated_store.save(writer)

        loaded, missing, extra = populated_store.load(read_resx_records(path))

        assert (missing, extra) == ((), ())
        assert loaded.locale == "de-DE"
        assert loaded.lookup("Size;Large") == (True, "Groß")
        assert loaded.lookup_values("colors") == (True, ("rot", "grün", "blau"))

    def test_carriage_returns_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.resx"
        with ResxRecordWriter(path) as writer:
            writer.write("VALUE;line\r\nbreak", "first\r\nsecond\rthird\n")

        assert list(read_resx_records(path)) == [("VALUE;line\r\nbreak", "first\r\nsecond\rthird\n")]

    @pytest.mark.parametrize("char", ["\x00", "\x07", "\x1b", "\ufffe", "\ud800"])
    def test_rejects_characters_xml_cannot_hold(self, tmp_path: Path, char: str) -> None:
        writer = ResxRecordWriter(tmp_path / "strings.resx")

        with pytest.raises(ValueError, match=f"U\\+{ord(char):04X}"):
            writer.write("VALUE;bell", f"ring{char}")

        with pytest.raises(ValueError, match=f"U\\+{ord(char):04X}"):
            writer.write(f"VALUE;{char}", "x")

    def test_rejected_record_is_not_buffered(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.resx"
        with ResxRecordWriter(path) as writer:
            writer.write("VALUE;ok", "1")
            with pytest.raises(ValueError):
                writer.write("VALUE;bad", "\x07")

        assert list(read_resx_records(path)) == [("VALUE;ok", "1")]


@given(st.lists(st.tuples(resx_texts(), resx_texts()), max_size=8))
def test_resx_records_survive_file(records: list[tuple[str, str]]) -> None:
    """Every record a .resx file accepts is read back unchanged and in order."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "strings.resx"
        with ResxRecordWriter(path) as writer:
            for key, value in records:
                writer.write(key, value)

        assert list(read_resx_records(path)) == records
