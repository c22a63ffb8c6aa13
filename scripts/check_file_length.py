#!/usr/bin/env python3
"""Fail CI when a keyclaim source module grows past the line ceiling."""

import os
import sys
from pathlib import Path

MAX_LINES = int(os.getenv("MAX_FILE_LINES", "200"))
PACKAGE_DIR = Path("src") / "keyclaim"
IGNORE_PARTS = {"__pycache__", "tests"}


def is_source_module(path: Path, root: Path) -> bool:
    return path.suffix == ".py" and not IGNORE_PARTS.intersection(path.relative_to(root).parts)


def oversized_modules(root: Path, max_lines: int = MAX_LINES) -> list[tuple[Path, int]]:
    found = []
    for py_file in sorted(root.rglob("*.py")):
        if not is_source_module(py_file, root):
            continue
        with open(py_file, encoding="utf-8") as f:
            line_count = sum(1 for _ in f)
        if line_count > max_lines:
            found.append((py_file, line_count))
    return found


def main(root: Path = PACKAGE_DIR) -> int:
    if not root.exists():
        print(f"{root} not found; run from the repository root")
        return 1

    offenders = oversized_modules(root)
    if offenders:
        print("Modules exceeding maximum line count:")
        for path, count in offenders:
            print(f"  {path}: {count} lines (max {MAX_LINES})")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
