"""Check a local copy of docs/employees.json before publishing it.

Usage: python scripts/check_directory.py path/to/employees.json
"""
from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path
from typing import List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.evidence_uploader.evidence_uploader.common.sanitizer import sanitize_segment
from src.evidence_uploader.evidence_uploader.core.exceptions import DirectoryUnavailableError
from src.evidence_uploader.evidence_uploader.directory.github_directory_repository import parse_directory


def check(raw: bytes) -> List[str]:
    """Problems worth fixing before the directory goes live (empty list = OK)."""
    problems: List[str] = []
    entries = parse_directory(raw)
    if not entries:
        problems.append("directory has no usable entries (every upload would be rejected)")

    for employee_id, count in Counter(e.employee_id for e in entries).items():
        if count > 1:
            problems.append(f"id {employee_id!r} appears {count} times (first entry wins)")

    segments = Counter(sanitize_segment(e.employee_id) for e in entries)
    for segment, count in segments.items():
        if count > 1:
            problems.append(f"{count} ids share the evidence folder {segment!r}")
    return problems


def main() -> int:
    if len(sys.argv) != 2:
        print(__doc__.strip())
        return 2

    path = Path(sys.argv[1])
    try:
        problems = check(path.read_bytes())
    except (OSError, DirectoryUnavailableError) as e:
        print(f"ERROR: {e}")
        return 1

    for p in problems:
        print(f"WARN: {p}")
    if not problems:
        print(f"OK: {path} looks good")
    return 1 if problems else 0


if __name__ == "__main__":
    raise SystemExit(main())
