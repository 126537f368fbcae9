"""Pinned Unicode property snapshots for the word-boundary scanner.

Each snapshot is a directory ``data/<unicode version>/`` holding filtered
UCD text files:

    data/14.0.0/
    ├── WordBreakProperty.txt   # Word_Break (all values except Other)
    ├── LineBreak.txt           # Line_Break=SA (Complex_Context) only
    └── Scripts.txt             # Script=Han and Script=Hiragana only

The scanner never reads Python's ``unicodedata``: classification depends only
on the snapshot, so moving to a new Unicode version means adding a data
directory (see scripts/build_tables.py) and bumping UNICODE_VERSION.

Thread Safety:
Loaded tables are immutable and shared process-wide. Loading is guarded by
a lock so each version is parsed at most once.

"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path

from palabras.errors import TableError
from palabras.tables.ucd import RangeTable, UcdEntry, parse_ucd, write_ucd
from palabras.utils.logger import get_logger

logger = get_logger(__name__)

# Snapshot used when no version is requested
UNICODE_VERSION = "14.0.0"

DATA_DIR = Path(__file__).parent / "data"

WORD_BREAK_FILE = "WordBreakProperty.txt"
LINE_BREAK_FILE = "LineBreak.txt"
SCRIPTS_FILE = "Scripts.txt"


@dataclass(frozen=True, slots=True)
class PropertyTables:
    """The three property maps the classifier consults.

    Attributes:
        version: Unicode version of the snapshot (e.g., "14.0.0")
        word_break: Word_Break values (unlisted code points are Other)
        line_break: Line_Break values (only SA is kept)
        script: Script values (only Han and Hiragana are kept)

    """

    version: str
    word_break: RangeTable
    line_break: RangeTable
    script: RangeTable


_loaded: dict[str, PropertyTables] = {}
_load_lock = threading.Lock()


def available_versions() -> list[str]:
    """List the snapshot versions shipped with the package, oldest first."""
    if not DATA_DIR.is_dir():
        return []
    versions = [p.name for p in DATA_DIR.iterdir() if (p / WORD_BREAK_FILE).is_file()]
    return sorted(versions, key=lambda v: tuple(int(part) for part in v.split(".")))


def _read_table(path: Path) -> RangeTable:
    if not path.is_file():
        raise TableError("property table file not found", str(path))
    with path.open(encoding="utf-8") as f:
        return RangeTable(parse_ucd(f, str(path)), str(path))


def load_tables(version: str = UNICODE_VERSION) -> PropertyTables:
    """Load a property snapshot, parsing it on first use only.

    Args:
        version: Unicode version directory under data/

    Returns:
        The shared PropertyTables for that version.

    Raises:
        TableError: If the version is not shipped or a file is malformed.
    """
    tables = _loaded.get(version)
    if tables is not None:
        return tables

    with _load_lock:
        tables = _loaded.get(version)
        if tables is not None:
            return tables

        directory = DATA_DIR / version
        if not directory.is_dir():
            raise TableError(
                f"no property snapshot for Unicode {version}; "
                f"available: {', '.join(available_versions()) or 'none'}"
            )

        tables = PropertyTables(
            version=version,
            word_break=_read_table(directory / WORD_BREAK_FILE),
            line_break=_read_table(directory / LINE_BREAK_FILE),
            script=_read_table(directory / SCRIPTS_FILE),
        )
        logger.debug(
            "Loaded Unicode %s property tables (%d word-break, %d line-break, %d script ranges)",
            version,
            len(tables.word_break),
            len(tables.line_break),
            len(tables.script),
        )
        _loaded[version] = tables
        return tables


__all__ = [
    "DATA_DIR",
    "LINE_BREAK_FILE",
    "PropertyTables",
    "RangeTable",
    "SCRIPTS_FILE",
    "UNICODE_VERSION",
    "UcdEntry",
    "WORD_BREAK_FILE",
    "available_versions",
    "load_tables",
    "parse_ucd",
    "write_ucd",
]
