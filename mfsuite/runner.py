"""Run whole fixture groups and collect per-case results."""

from dataclasses import dataclass, field
from typing import List, Optional

from mfsuite.config import DEFAULT_BASE_URL, EXPECTED_SUFFIX, INPUT_SUFFIX, SuiteConfig, TestGroup
from mfsuite.discovery import discover
from mfsuite.errors import MfSuiteError
from mfsuite.executor import FAIL, PASS, SKIP, CaseResult, Parser, mf2py_parser, run_case
from mfsuite.skips import SkipRegistry


@dataclass
class GroupReport:
    """Results of one group. ``error`` is set when the group was aborted."""

    group: TestGroup
    results: List[CaseResult] = field(default_factory=list)
    error: Optional[MfSuiteError] = None

    def _count(self, status: str) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def passed(self) -> int:
        return self._count(PASS)

    @property
    def failed(self) -> int:
        return self._count(FAIL)

    @property
    def skipped(self) -> int:
        return self._count(SKIP)

    @property
    def unexpected_passes(self) -> List[CaseResult]:
        return [r for r in self.results if r.unexpected_pass]


def run_group(group: TestGroup, registry: SkipRegistry, parser: Parser = mf2py_parser,
              base_url: str = DEFAULT_BASE_URL, select: Optional[str] = None,
              input_suffix: str = INPUT_SUFFIX,
              expected_suffix: str = EXPECTED_SUFFIX) -> GroupReport:
    """
    Run every fixture of a group in identifier order.

    A discovery or fixture error stops the group; results gathered up to that
    point are kept and the error is stored on the report.
    """
    report = GroupReport(group)
    try:
        for case in discover(group, input_suffix, expected_suffix):
            if select and select not in case.identifier:
                continue
            report.results.append(run_case(case, registry, parser, base_url))
    except MfSuiteError as e:
        report.error = e
    return report


def run_suite(config: SuiteConfig, registry: SkipRegistry, parser: Parser = mf2py_parser,
              select: Optional[str] = None) -> List[GroupReport]:
    """Run all configured groups. An aborted group does not stop the others."""
    return [
        run_group(group, registry, parser, config.base_url, select,
                  config.input_suffix, config.expected_suffix)
        for group in config.test_groups()
    ]
