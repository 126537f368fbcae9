"""Tests for UCD parsing, range tables and snapshot loading."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from palabras.errors import TableError
from palabras.tables import (
    DATA_DIR,
    LINE_BREAK_FILE,
    SCRIPTS_FILE,
    UNICODE_VERSION,
    WORD_BREAK_FILE,
    PropertyTables,
    RangeTable,
    UcdEntry,
    available_versions,
    load_tables,
    parse_ucd,
    write_ucd,
)
from palabras.tables.build import build_snapshot, find_ucd_file, select_entries

# =========================================================================
# UCD line parsing
# =========================================================================


class TestParseUcd:
    def test_single_code_point_and_range(self) -> None:
        lines = [
            "# WordBreakProperty.txt\n",
            "\n",
            "0041..005A    ; ALetter # L&  [26] LATIN CAPITAL LETTER A..Z\n",
            "00AD          ; Format\n",
        ]
        assert list(parse_ucd(lines)) == [
            UcdEntry(0x41, 0x5A, "ALetter"),
            UcdEntry(0xAD, 0xAD, "Format"),
        ]

    def test_extra_fields_ignored(self) -> None:
        assert list(parse_ucd(["0030 ; Numeric ; extra\n"])) == [UcdEntry(0x30, 0x30, "Numeric")]

    def test_supplementary_code_points(self) -> None:
        (entry,) = parse_ucd(["20000..2A6DF  ; Han"])
        assert (entry.start, entry.end, len(entry)) == (0x20000, 0x2A6DF, 0xA6E0)

    @pytest.mark.parametrize(
        ("line", "fragment"),
        [
            ("0041", "expected '<code points> ; <value>'"),
            ("0041 ;", "expected '<code points> ; <value>'"),
            ("XYZ ; ALetter", "invalid code point field"),
            ("005A..0041 ; ALetter", "reversed range"),
            ("110000 ; ALetter", "code point out of range"),
        ],
    )
    def test_malformed_lines(self, line: str, fragment: str) -> None:
        lines = ["# header", line]
        with pytest.raises(TableError, match=fragment) as exc_info:
            list(parse_ucd(lines, "Bad.txt"))

        assert exc_info.value.source_file == "Bad.txt"
        assert exc_info.value.lineno == 2
        assert str(exc_info.value).startswith("Bad.txt:2 ")


class TestWriteUcd:
    def test_round_trip_format(self) -> None:
        stream = io.StringIO()
        count = write_ucd(
            [UcdEntry(0x41, 0x5A, "ALetter"), UcdEntry(0xAD, 0xAD, "Format")],
            stream,
            header="# Test\n",
        )

        assert count == 2
        assert stream.getvalue() == (
            "# Test\n"
            "\n"
            "0041..005A    ; ALetter\n"
            "00AD          ; Format\n"
            "\n"
            "# EOF\n"
        )


# =========================================================================
# Range tables
# =========================================================================


class TestRangeTable:
    def test_lookup(self) -> None:
        table = RangeTable([UcdEntry(0x41, 0x5A, "ALetter"), UcdEntry(0x30, 0x39, "Numeric")])

        assert table.lookup(0x30) == "Numeric"
        assert table.lookup(0x39) == "Numeric"
        assert table.lookup(0x41) == "ALetter"
        assert table.lookup(0x5A) == "ALetter"
        assert table.lookup(0x3A) is None
        assert table.lookup(0x00, "Other") == "Other"
        assert table.lookup(0x10FFFF) is None

    def test_adjacent_equal_ranges_coalesce(self) -> None:
        table = RangeTable(
            [
                UcdEntry(0x41, 0x5A, "ALetter"),
                UcdEntry(0x61, 0x7A, "ALetter"),
                UcdEntry(0x5B, 0x60, "ALetter"),
            ]
        )

        assert len(table) == 1
        assert list(table.entries()) == [UcdEntry(0x41, 0x7A, "ALetter")]

    def test_adjacent_different_ranges_kept(self) -> None:
        table = RangeTable([UcdEntry(0x30, 0x39, "Numeric"), UcdEntry(0x3A, 0x3A, "MidLetter")])
        assert len(table) == 2
        assert table.values() == frozenset({"Numeric", "MidLetter"})

    def test_overlap_rejected(self) -> None:
        with pytest.raises(TableError, match="overlapping ranges at U\\+0045"):
            RangeTable([UcdEntry(0x41, 0x5A, "ALetter"), UcdEntry(0x45, 0x45, "Format")])

    def test_empty(self) -> None:
        table = RangeTable([])
        assert len(table) == 0
        assert table.lookup(0x41) is None
        assert repr(table) == "RangeTable(0 ranges)"


# =========================================================================
# Snapshot loading
# =========================================================================


class TestLoadTables:
    def test_pinned_version_is_shipped(self) -> None:
        assert UNICODE_VERSION in available_versions()

    def test_load_default(self) -> None:
        tables = load_tables()

        assert isinstance(tables, PropertyTables)
        assert tables.version == UNICODE_VERSION
        assert tables.word_break.lookup(0x41) == "ALetter"
        assert tables.line_break.values() == frozenset({"SA"})
        assert tables.script.values() == frozenset({"Han", "Hiragana"})

    def test_snapshot_omits_other(self) -> None:
        assert "Other" not in load_tables().word_break.values()

    def test_cached(self) -> None:
        assert load_tables() is load_tables(UNICODE_VERSION)

    def test_unknown_version(self) -> None:
        with pytest.raises(TableError, match=f"no property snapshot for Unicode 1.0.0.*{UNICODE_VERSION}"):
            load_tables("1.0.0")

    def test_tables_are_immutable(self) -> None:
        tables = load_tables()
        with pytest.raises(AttributeError):
            tables.version = "0.0.0"  # type: ignore[misc]


# =========================================================================
# Snapshot building
# =========================================================================


def _write_ucd_dir(root: Path) -> Path:
    (root / "auxiliary").mkdir(parents=True)
    (root / "auxiliary" / WORD_BREAK_FILE).write_text(
        "# test data\n"
        "0020          ; Other\n"
        "0030..0039    ; Numeric\n"
        "0041..005A    ; ALetter\n"
        "0061..007A    ; ALetter\n",
        encoding="utf-8",
    )
    (root / LINE_BREAK_FILE).write_text(
        "0E01..0E3A    ; SA\n0041..005A    ; AL\n",
        encoding="utf-8",
    )
    (root / SCRIPTS_FILE).write_text(
        "0041..005A    ; Latin\n3041..3096    ; Hiragana\n4E00..9FFF    ; Han\n",
        encoding="utf-8",
    )
    return root


class TestBuildSnapshot:
    def test_select_entries_drops_other_by_default(self) -> None:
        entries = [UcdEntry(0x20, 0x20, "Other"), UcdEntry(0x30, 0x39, "Numeric")]
        assert list(select_entries(entries, None)) == [UcdEntry(0x30, 0x39, "Numeric")]

    def test_select_entries_keeps_listed_values(self) -> None:
        entries = [UcdEntry(0x41, 0x5A, "AL"), UcdEntry(0xE01, 0xE3A, "SA")]
        assert list(select_entries(entries, frozenset({"SA"}))) == [UcdEntry(0xE01, 0xE3A, "SA")]

    def test_find_ucd_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(TableError, match="Scripts.txt not found"):
            find_ucd_file(tmp_path, SCRIPTS_FILE, ("",))

    def test_build_and_reload(self, tmp_path: Path) -> None:
        ucd = _write_ucd_dir(tmp_path / "ucd")
        out = tmp_path / "out"

        written = build_snapshot(ucd, "99.0.0", out)

        assert written == {WORD_BREAK_FILE: 3, LINE_BREAK_FILE: 1, SCRIPTS_FILE: 2}
        text = (out / WORD_BREAK_FILE).read_text(encoding="utf-8")
        assert text.startswith("# WordBreakProperty-99.0.0.txt\n")
        assert "0041..007A" not in text  # 005B..0060 is not ALetter
        assert "0061..007A    ; ALetter" in text
        assert "Other" not in text.split("\n\n", 1)[1]

        with (out / SCRIPTS_FILE).open(encoding="utf-8") as f:
            scripts = RangeTable(parse_ucd(f))
        assert scripts.lookup(0x41) is None
        assert scripts.lookup(0x4E00) == "Han"

    def test_shipped_snapshot_is_in_data_dir(self) -> None:
        directory = DATA_DIR / UNICODE_VERSION
        for name in (WORD_BREAK_FILE, LINE_BREAK_FILE, SCRIPTS_FILE):
            assert (directory / name).is_file()
