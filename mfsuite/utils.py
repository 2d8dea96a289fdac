"""Utility functions for fixture handling."""

from pathlib import Path, PurePath
from typing import Union

from mfsuite.errors import FixtureError

FileOrPath = Union[str, Path]


def read_fixture(path: FileOrPath) -> bytes:
    """
    Read the raw bytes of a fixture file.

    Args:
        path: File path string or Path object

    Returns:
        File content, undecoded

    Raises:
        FixtureError: If the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FixtureError(f"Error reading fixture: {e.strerror or e}", path) from e


def relative_identifier(path: FileOrPath, root: FileOrPath) -> str:
    """Return ``path`` relative to ``root`` with '/' separators."""
    return PurePath(path).relative_to(root).as_posix()
