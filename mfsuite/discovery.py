"""Fixture discovery.

A fixture is a pair of files sharing a stem: an HTML input document and the
JSON document the parser is expected to produce for it. Files without a
partner of the other kind are not runnable tests and are ignored.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, NoReturn, Union

from mfsuite.config import EXPECTED_SUFFIX, INPUT_SUFFIX, TestGroup
from mfsuite.errors import DiscoveryError
from mfsuite.utils import relative_identifier


@dataclass(frozen=True)
class TestCase:
    """One fixture pair within a group."""

    __test__ = False  # not a pytest class

    group: str
    identifier: str
    input_path: Path
    expected_path: Path

    @property
    def qualified_name(self) -> str:
        """The ``<group>/<identifier>`` key used by the skip registry."""
        return f"{self.group}/{self.identifier}"


def _raise_walk_error(error: OSError) -> NoReturn:
    raise DiscoveryError(f"Error reading fixtures ({error.strerror or error})",
                         error.filename) from error


def list_tests(root: Union[str, Path], input_suffix: str = INPUT_SUFFIX,
               expected_suffix: str = EXPECTED_SUFFIX) -> List[str]:
    """
    List the identifiers of all fixture pairs below ``root``.

    Args:
        root: Directory to walk recursively
        input_suffix: Suffix of input documents
        expected_suffix: Suffix of expected documents

    Returns:
        Sorted identifiers: paths relative to root, '/'-separated, suffix removed

    Raises:
        DiscoveryError: If root is not a directory or cannot be walked
    """
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryError("Fixture directory not found", root)

    tests = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in filenames:
            if not filename.endswith(expected_suffix) or filename == expected_suffix:
                continue
            stem = os.path.join(dirpath, filename[:-len(expected_suffix)])
            if not os.path.isfile(stem + input_suffix):
                continue
            tests.append(relative_identifier(stem, root))

    return sorted(tests)


def discover(group: TestGroup, input_suffix: str = INPUT_SUFFIX,
             expected_suffix: str = EXPECTED_SUFFIX) -> List[TestCase]:
    """Build the TestCases of one group, ordered by identifier."""
    root = Path(group.root).resolve()
    cases = []
    for identifier in list_tests(root, input_suffix, expected_suffix):
        stem = root.joinpath(*identifier.split("/"))
        cases.append(TestCase(
            group=group.name,
            identifier=identifier,
            input_path=stem.with_name(stem.name + input_suffix),
            expected_path=stem.with_name(stem.name + expected_suffix),
        ))
    return cases
