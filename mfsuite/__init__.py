"""Conformance harness for microformats2 parsers.

Runs a parser against the shared test suite from
https://github.com/microformats/tests and compares its output structurally.
"""

__version__ = "0.1.0"

from mfsuite.errors import (
    MfSuiteError,
    FixtureError,
    FixtureDecodeError,
    DiscoveryError,
    SkipListError,
)
from mfsuite.config import SuiteConfig, TestGroup, DEFAULT_BASE_URL, DEFAULT_GROUPS
from mfsuite.discovery import TestCase, list_tests, discover
from mfsuite.skips import SKIP_TESTS, SkipRegistry, parse_skip_list
from mfsuite.normalize import normalize_expected, normalize_actual, strip_engine_keys
from mfsuite.compare import Comparison, Difference, compare, format_diff
from mfsuite.executor import CaseResult, mf2py_parser, run_case
from mfsuite.runner import GroupReport, run_group, run_suite

__all__ = [
    "MfSuiteError",
    "FixtureError",
    "FixtureDecodeError",
    "DiscoveryError",
    "SkipListError",
    "SuiteConfig",
    "TestGroup",
    "DEFAULT_BASE_URL",
    "DEFAULT_GROUPS",
    "TestCase",
    "list_tests",
    "discover",
    "SKIP_TESTS",
    "SkipRegistry",
    "parse_skip_list",
    "normalize_expected",
    "normalize_actual",
    "strip_engine_keys",
    "Comparison",
    "Difference",
    "compare",
    "format_diff",
    "CaseResult",
    "mf2py_parser",
    "run_case",
    "GroupReport",
    "run_group",
    "run_suite",
]
