"""Build a property snapshot from full Unicode Character Database files.

Upgrading the Unicode version is a deliberate step: download the UCD for
the new version, run scripts/build_tables.py against it, review the diff of
the generated files, then bump UNICODE_VERSION and run the test suite.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from palabras.errors import TableError
from palabras.tables import LINE_BREAK_FILE, SCRIPTS_FILE, WORD_BREAK_FILE
from palabras.tables.ucd import RangeTable, UcdEntry, parse_ucd, write_ucd

# (file name, UCD subdirectories to search, values kept; None keeps all but Other)
SNAPSHOT_FILES: tuple[tuple[str, tuple[str, ...], frozenset[str] | None], ...] = (
    (WORD_BREAK_FILE, ("auxiliary", ""), None),
    (LINE_BREAK_FILE, ("",), frozenset({"SA"})),
    (SCRIPTS_FILE, ("",), frozenset({"Han", "Hiragana"})),
)

_DESCRIPTIONS = {
    WORD_BREAK_FILE: "all Word_Break values except the default (Other).",
    LINE_BREAK_FILE: "Line_Break=SA (Complex_Context) only.",
    SCRIPTS_FILE: "Script=Han and Script=Hiragana only.",
}


def select_entries(entries: Iterable[UcdEntry], keep: frozenset[str] | None) -> Iterator[UcdEntry]:
    """Filter entries to the kept property values.

    Args:
        entries: Parsed UCD entries
        keep: Values to keep; None keeps every value except Other
    """
    for entry in entries:
        if keep is None:
            if entry.value != "Other":
                yield entry
        elif entry.value in keep:
            yield entry


def find_ucd_file(ucd_dir: Path, name: str, subdirs: tuple[str, ...]) -> Path:
    """Locate a UCD file, e.g. auxiliary/WordBreakProperty.txt."""
    for subdir in subdirs:
        path = ucd_dir / subdir / name
        if path.is_file():
            return path
    raise TableError(f"{name} not found under {ucd_dir}")


def build_snapshot(ucd_dir: Path, version: str, out_dir: Path) -> dict[str, int]:
    """Write the filtered snapshot files for one Unicode version.

    Args:
        ucd_dir: Directory holding the full UCD text files
        version: Unicode version label written into the headers
        out_dir: Target directory (usually tables/data/<version>)

    Returns:
        Number of ranges written per file name.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written: dict[str, int] = {}
    for name, subdirs, keep in SNAPSHOT_FILES:
        path = find_ucd_file(ucd_dir, name, subdirs)
        with path.open(encoding="utf-8") as f:
            table = RangeTable(select_entries(parse_ucd(f, str(path)), keep), str(path))

        stem = name.removesuffix(".txt")
        header = (
            f"# {stem}-{version}.txt\n"
            f"# Unicode Character Database, version {version}\n"
            f"# Subset: {_DESCRIPTIONS[name]}\n"
            "#\n"
            "# Format: <code point or range> ; <property value>\n"
        )
        with (out_dir / name).open("w", encoding="utf-8") as f:
            written[name] = write_ucd(table.entries(), f, header)
    return written
