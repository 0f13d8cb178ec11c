#!/usr/bin/env python3
"""
Check every resource file in a data directory.

Reports the record count per resource, files that cannot be read or parsed,
and identifying keys that appear more than once.

Usage:
  python scripts/check_data.py [--data-dir public]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from storeops.core.config import get_settings
from storeops.domain.records import find_duplicate_keys
from storeops.domain.resources import RESOURCES
from storeops.repositories.json_storage import JsonFileStore, StorageError


def check(data_dir: Path) -> list[str]:
    """Print a line per resource; return the list of problems found."""
    problems: list[str] = []
    for spec in RESOURCES:
        path = data_dir / spec.filename
        try:
            records = JsonFileStore(path).load()
        except StorageError as exc:
            problems.append(f"{spec.name}: {exc.reason}")
            print(f"[ERROR] {spec.name}: {exc.reason}")
            continue
        state = "" if path.exists() else " (missing, treated as empty)"
        print(f"[OK] {spec.name}: {len(records)} records{state}")
        for key in find_duplicate_keys(records, spec.key_field):
            problems.append(f"{spec.name}: duplicate {spec.key_field} {key}")
            print(f"[ERROR] {spec.name}: duplicate {spec.key_field} '{key}'")
    return problems


def main() -> None:
    ap = argparse.ArgumentParser(description="Validate storeops resource files")
    ap.add_argument("--data-dir", help="directory with the JSON files (default: DATA_DIR)")
    args = ap.parse_args()

    data_dir = Path(args.data_dir) if args.data_dir else get_settings().data_dir
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir}")
    problems = check(data_dir)
    if problems:
        print(f"{len(problems)} problem(s) found")
        raise SystemExit(1)
    print("All resource files are valid")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
