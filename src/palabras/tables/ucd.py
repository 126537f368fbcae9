"""Reader and writer for Unicode Character Database text files.

Handles the common UCD line syntax shared by WordBreakProperty.txt,
LineBreak.txt, Scripts.txt and friends::

    0041..005A    ; ALetter # L&  [26] LATIN CAPITAL LETTER A..Z
    00AD          ; Format

Everything after ``#`` is a comment. Only the first two fields are read;
additional fields, where a file has them, are ignored.

Thread Safety:
RangeTable is immutable after construction and safe to share across threads.

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import IO

from palabras.errors import TableError

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True, slots=True)
class UcdEntry:
    """A code point range and its property value (inclusive on both ends)."""

    start: int
    end: int
    value: str

    def __len__(self) -> int:
        return self.end - self.start + 1


def _parse_code_points(field: str, source_file: str | None, lineno: int) -> tuple[int, int]:
    first, sep, last = field.partition("..")
    try:
        start = int(first, 16)
        end = int(last, 16) if sep else start
    except ValueError:
        raise TableError(f"invalid code point field {field!r}", source_file, lineno) from None
    if start > end:
        raise TableError(f"reversed range {field!r}", source_file, lineno)
    if end > MAX_CODE_POINT:
        raise TableError(f"code point out of range {field!r}", source_file, lineno)
    return start, end


def parse_ucd(lines: Iterable[str], source_file: str | None = None) -> Iterator[UcdEntry]:
    """Parse UCD property lines into entries.

    Args:
        lines: Lines of a UCD text file
        source_file: File name used in error messages (optional)

    Yields:
        One UcdEntry per data line, in file order.

    Raises:
        TableError: If a data line is malformed.
    """
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = [f.strip() for f in line.split(";")]
        if len(fields) < 2 or not fields[0] or not fields[1]:
            raise TableError(f"expected '<code points> ; <value>', got {line!r}", source_file, lineno)
        start, end = _parse_code_points(fields[0], source_file, lineno)
        yield UcdEntry(start, end, fields[1])


def write_ucd(entries: Iterable[UcdEntry], stream: IO[str], header: str = "") -> int:
    """Write entries in UCD syntax.

    Args:
        entries: Entries to write, already in the desired order
        stream: Text stream to write to
        header: Comment block written first (each line should start with '#')

    Returns:
        Number of data lines written.
    """
    if header:
        stream.write(header.rstrip("\n") + "\n\n")
    count = 0
    for entry in entries:
        if entry.start == entry.end:
            cps = f"{entry.start:04X}"
        else:
            cps = f"{entry.start:04X}..{entry.end:04X}"
        stream.write(f"{cps:<14}; {entry.value}\n")
        count += 1
    stream.write("\n# EOF\n")
    return count


class RangeTable:
    """Sorted, non-overlapping code point ranges mapped to values.

    Adjacent ranges with the same value are coalesced. Lookup is a binary
    search over range starts: O(log n) per code point.

    Example:
        >>> table = RangeTable([UcdEntry(0x41, 0x5A, "ALetter")])
        >>> table.lookup(0x42)
        'ALetter'
        >>> table.lookup(0x20, "Other")
        'Other'
    """

    __slots__ = ("_starts", "_ends", "_values")

    def __init__(self, entries: Iterable[UcdEntry], source_file: str | None = None) -> None:
        starts: list[int] = []
        ends: list[int] = []
        values: list[str] = []
        for entry in sorted(entries, key=lambda e: e.start):
            if ends and entry.start <= ends[-1]:
                raise TableError(
                    f"overlapping ranges at U+{entry.start:04X} ({values[-1]} and {entry.value})",
                    source_file,
                )
            if ends and entry.start == ends[-1] + 1 and values[-1] == entry.value:
                ends[-1] = entry.end
                continue
            starts.append(entry.start)
            ends.append(entry.end)
            values.append(entry.value)
        self._starts = tuple(starts)
        self._ends = tuple(ends)
        self._values = tuple(values)

    def lookup(self, code_point: int, default: str | None = None) -> str | None:
        """Return the value of the range containing code_point, or default."""
        idx = bisect_right(self._starts, code_point) - 1
        if idx >= 0 and code_point <= self._ends[idx]:
            return self._values[idx]
        return default

    def entries(self) -> Iterator[UcdEntry]:
        """Iterate over the coalesced ranges in code point order."""
        for start, end, value in zip(self._starts, self._ends, self._values):
            yield UcdEntry(start, end, value)

    def values(self) -> frozenset[str]:
        """Distinct property values present in the table."""
        return frozenset(self._values)

    def __len__(self) -> int:
        return len(self._starts)

    def __repr__(self) -> str:
        return f"RangeTable({len(self)} ranges)"
