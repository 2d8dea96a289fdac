"""Custom exceptions for the microformats conformance harness."""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class MfSuiteError(Exception):
    """Base exception for harness errors."""


class FixtureError(MfSuiteError):
    """A fixture file could not be read.

    Raised for environment or corpus defects, never for parser mismatches.
    """

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        self.path = path
        location = ""
        if path is not None:
            location = f" in file '{path}'"
        super().__init__(f"{message}{location}")


class FixtureDecodeError(FixtureError):
    """An expected document is not valid JSON."""

    def __init__(self, message: str, path: Optional[PathLike] = None,
                 line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.line = line
        self.column = column
        error_location = ""
        if line is not None:
            error_location = f" at line {line}"
            if column is not None:
                error_location += f", column {column}"
        super().__init__(f"{message}{error_location}", path)


class DiscoveryError(MfSuiteError):
    """A fixture group could not be walked."""

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        self.path = path
        location = ""
        if path is not None:
            location = f": '{path}'"
        super().__init__(f"{message}{location}")


class SkipListError(MfSuiteError):
    """Error while reading a skip-list file."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        error_location = ""
        if line is not None:
            error_location = f" at line {line}"
        super().__init__(f"{message}{error_location}")
