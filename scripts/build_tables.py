#!/usr/bin/env python3
"""Regenerate a Palabras property snapshot from Unicode Character Database files.

Reads WordBreakProperty.txt (from auxiliary/), LineBreak.txt and Scripts.txt
from an unpacked UCD directory and writes the filtered subset files the
tokenizer loads.

Usage:
    python scripts/build_tables.py UCD_DIR VERSION [--out DIR]

Example:
    python scripts/build_tables.py ~/ucd/15.1.0 15.1.0
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from palabras.errors import TableError
from palabras.tables import DATA_DIR
from palabras.tables.build import build_snapshot


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a Palabras Unicode property snapshot")
    parser.add_argument("ucd_dir", type=Path, help="Directory with the full UCD text files")
    parser.add_argument("version", help="Unicode version, e.g. 15.1.0")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory (default: the package data directory for VERSION)",
    )
    args = parser.parse_args()

    out_dir = args.out or DATA_DIR / args.version
    try:
        written = build_snapshot(args.ucd_dir, args.version, out_dir)
    except TableError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    for name, count in written.items():
        print(f"{out_dir / name}: {count} ranges")


if __name__ == "__main__":
    main()
