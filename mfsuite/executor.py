"""Run a single fixture through the parser and compare the result."""

import json
from dataclasses import dataclass
from typing import Any, Callable, Optional

import mf2py

from mfsuite.compare import Comparison, compare
from mfsuite.config import DEFAULT_BASE_URL
from mfsuite.discovery import TestCase
from mfsuite.errors import FixtureDecodeError
from mfsuite.normalize import normalize_actual, normalize_expected, strip_engine_keys
from mfsuite.skips import SkipRegistry
from mfsuite.utils import read_fixture

# parser(document, base_url) -> JSON-serializable result
Parser = Callable[[bytes, str], Any]

PASS = "pass"
FAIL = "fail"
SKIP = "skip"


def mf2py_parser(document: bytes, base_url: str) -> Any:
    """Parse with mf2py. The document is always given, so nothing is fetched."""
    return mf2py.parse(doc=document, url=base_url)


@dataclass(frozen=True)
class CaseResult:
    case: TestCase
    status: str  # "pass", "fail", "skip"
    message: str = ""
    comparison: Optional[Comparison] = None
    skipped_by_registry: bool = False

    @property
    def label(self) -> str:
        return self.case.qualified_name

    @property
    def unexpected_pass(self) -> bool:
        """Listed as a known failure, yet the output now matches."""
        return self.skipped_by_registry and self.status == PASS

    @property
    def diff(self) -> str:
        return self.comparison.diff if self.comparison is not None else ""


def _decode_expected(data: bytes, case: TestCase) -> Any:
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise FixtureDecodeError(f"Invalid JSON: {e.msg}", case.expected_path,
                                 line=e.lineno, column=e.colno) from e
    except UnicodeDecodeError as e:
        raise FixtureDecodeError(f"Invalid JSON encoding: {e.reason}", case.expected_path) from e


def run_case(case: TestCase, registry: SkipRegistry, parser: Parser = mf2py_parser,
             base_url: str = DEFAULT_BASE_URL) -> CaseResult:
    """
    Execute one fixture.

    The parser runs and its output is compared even when the fixture is in
    the skip registry; registry membership only turns a mismatch into a skip.

    Args:
        case: Fixture to run
        registry: Known-failure registry
        parser: Parser under test
        base_url: Base URL handed to the parser for relative URL resolution

    Returns:
        CaseResult with status "pass", "fail" or "skip"

    Raises:
        FixtureError: If a fixture file cannot be read
        FixtureDecodeError: If the expected document is not valid JSON
    """
    listed = registry.is_skipped(case.group, case.identifier)
    document = read_fixture(case.input_path)

    try:
        data = parser(document, base_url)
    except Exception as e:
        return CaseResult(case, SKIP if listed else FAIL, f"Parser error: {e}",
                          skipped_by_registry=listed)

    expected_json = normalize_expected(read_fixture(case.expected_path))
    expected = _decode_expected(expected_json, case)

    try:
        output_json = json.dumps(data).encode("utf-8")
    except (TypeError, ValueError) as e:
        return CaseResult(case, SKIP if listed else FAIL, f"Parser output is not JSON-serializable: {e}",
                          skipped_by_registry=listed)
    actual = strip_engine_keys(json.loads(normalize_actual(output_json)))

    comparison = compare(expected, actual)
    if comparison.equal:
        return CaseResult(case, PASS, comparison=comparison, skipped_by_registry=listed)
    if listed:
        return CaseResult(case, SKIP, "Known failure", comparison, skipped_by_registry=True)
    return CaseResult(case, FAIL, "Parse value differs", comparison)
