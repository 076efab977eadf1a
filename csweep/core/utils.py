"""Utility functions for locating C sources."""

from __future__ import annotations

from pathlib import Path

SOURCE_SUFFIXES = frozenset({".c", ".h"})
IGNORED_DIRS = frozenset({".git", ".hg", ".svn"})


def is_source_or_header_file(path: Path) -> bool:
    """True for files whose extension is exactly ``c`` or ``h``."""
    return path.suffix in SOURCE_SUFFIXES


def iter_source_files(root: Path, recursive: bool = False) -> list[Path]:
    """
    Collect C source and header files under ``root``.

    Args:
        root: A single file, or a directory to list
        recursive: Walk subdirectories too (skipping VCS metadata)

    Raises:
        ValueError: if root is missing, or is a file with the wrong extension
    """
    if root.is_file():
        if not is_source_or_header_file(root):
            raise ValueError(f"The specified file is not a C source or header file: {root}")
        return [root]

    if not root.is_dir():
        raise ValueError(f"The specified path is neither a file nor a directory: {root}")

    if recursive:
        candidates = (
            p
            for p in root.rglob("*")
            if not any(part in IGNORED_DIRS for part in p.relative_to(root).parts)
        )
    else:
        candidates = root.iterdir()

    return sorted(p for p in candidates if p.is_file() and is_source_or_header_file(p))
