#!/usr/bin/env python3
"""Command line interface for the microformats conformance harness.

Runs the parser against the shared fixture corpus and prints a per-group
report.
"""

import argparse
import sys
from typing import List, Optional

import mfsuite
from mfsuite.config import DEFAULT_BASE_URL, DEFAULT_FIXTURES_ROOT, DEFAULT_GROUPS, SuiteConfig
from mfsuite.discovery import discover
from mfsuite.errors import MfSuiteError
from mfsuite.executor import FAIL, SKIP, Parser, mf2py_parser
from mfsuite.runner import GroupReport, run_suite
from mfsuite.skips import SkipRegistry


class Colors:
    """ANSI color codes for terminal output."""
    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    RESET = "\033[0m"
    BOLD = "\033[1m"

    @classmethod
    def disable(cls):
        cls.GREEN = ""
        cls.RED = ""
        cls.YELLOW = ""
        cls.BLUE = ""
        cls.RESET = ""
        cls.BOLD = ""


def _indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line for line in text.splitlines())


def list_command(config: SuiteConfig) -> int:
    """Print the discovered fixtures of every group."""
    status = 0
    for group in config.test_groups():
        try:
            cases = discover(group, config.input_suffix, config.expected_suffix)
        except MfSuiteError as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 2
            continue
        print(f"{Colors.BOLD}{group.name}{Colors.RESET} ({len(cases)} fixtures)")
        for case in cases:
            print(f"  {case.identifier}")
    return status


def print_report(reports: List[GroupReport], verbose: bool) -> None:
    """Print per-case outcomes, diffs and the summary block."""
    for report in reports:
        print(f"\n{Colors.BOLD}{report.group.name}{Colors.RESET}")
        for result in report.results:
            if result.status == FAIL:
                tag = f"{Colors.RED}FAIL{Colors.RESET}"
            elif result.status == SKIP:
                tag = f"{Colors.YELLOW}SKIP{Colors.RESET}"
            elif result.unexpected_pass:
                tag = f"{Colors.BLUE}PASS{Colors.RESET}"
            else:
                tag = f"{Colors.GREEN}PASS{Colors.RESET}"
            line = f"  {tag}  {result.case.identifier}"
            if result.message:
                line += f"  ({result.message})"
            print(line)
            if result.diff and (result.status == FAIL or verbose):
                print(_indent(result.diff))
        if report.error is not None:
            print(f"  {Colors.RED}ERROR{Colors.RESET} {report.error}")

    total_pass = sum(r.passed for r in reports)
    total_fail = sum(r.failed for r in reports)
    total_skip = sum(r.skipped for r in reports)

    print()
    print(f"{Colors.BOLD}Summary:{Colors.RESET}")
    print(f"  {Colors.GREEN}Passed: {total_pass}{Colors.RESET}")
    print(f"  {Colors.RED}Failed: {total_fail}{Colors.RESET}")
    print(f"  {Colors.YELLOW}Skipped: {total_skip}{Colors.RESET}")
    print(f"  Total:  {total_pass + total_fail + total_skip}")

    unexpected = [r for report in reports for r in report.unexpected_passes]
    if unexpected:
        print(f"\n{Colors.BLUE}Listed as known failures but now passing:{Colors.RESET}")
        for result in unexpected:
            print(f"  {result.label}")

    if total_fail > 0:
        print(f"\n{Colors.BOLD}Failures:{Colors.RESET}")
        for report in reports:
            for result in report.results:
                if result.status == FAIL:
                    print(f"  {result.label}: {result.message}")

    errors = [report for report in reports if report.error is not None]
    if errors:
        print(f"\n{Colors.BOLD}Aborted groups:{Colors.RESET}")
        for report in errors:
            print(f"  {report.group.name}: {report.error}")


def exit_status(reports: List[GroupReport], strict: bool = False) -> int:
    """0 when everything passed or skipped, 1 on failures, 2 on aborted groups."""
    if any(report.error is not None for report in reports):
        return 2
    if any(report.failed for report in reports):
        return 1
    if strict and any(report.unexpected_passes for report in reports):
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mfsuite",
        description="Run a microformats2 parser against the shared microformats test suite"
    )
    parser.add_argument("--version", action="version", version=f"mfsuite {mfsuite.__version__}")
    parser.add_argument("--fixtures", default=str(DEFAULT_FIXTURES_ROOT),
                        help=f"Fixture corpus root (default: {DEFAULT_FIXTURES_ROOT})")
    parser.add_argument("--group", action="append", dest="groups",
                        help=f"Run specific group(s) (default: {', '.join(DEFAULT_GROUPS)})")
    parser.add_argument("--fixture",
                        help="Run only fixtures whose identifier contains this string")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL,
                        help=f"Base URL for relative URL resolution (default: {DEFAULT_BASE_URL})")
    skip_options = parser.add_mutually_exclusive_group()
    skip_options.add_argument("--skip-file",
                              help="Read known failures from this file instead of the built-in list")
    skip_options.add_argument("--no-skips", action="store_true",
                              help="Treat every mismatch as a failure")
    parser.add_argument("--strict", action="store_true",
                        help="Fail when a known failure unexpectedly passes")
    parser.add_argument("--list", action="store_true",
                        help="List discovered fixtures and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Also show diffs for skipped fixtures")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable colored output")
    return parser


def main(argv: Optional[List[str]] = None, parser_under_test: Parser = mf2py_parser) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.no_color or not sys.stdout.isatty():
        Colors.disable()

    try:
        config = SuiteConfig(
            fixtures_root=args.fixtures,
            groups=tuple(args.groups) if args.groups else DEFAULT_GROUPS,
            base_url=args.base_url,
            strict=args.strict,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.list:
        return list_command(config)

    try:
        if args.no_skips:
            registry = SkipRegistry.empty()
        elif args.skip_file:
            registry = SkipRegistry.from_file(args.skip_file)
        else:
            registry = SkipRegistry()
    except MfSuiteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"\n{Colors.BOLD}Microformats Test Suite{Colors.RESET}")
    print(f"Fixtures: {config.fixtures_root}")
    print(f"Groups: {', '.join(config.groups)}")
    print(f"Known failures: {len(registry)}")

    reports = run_suite(config, registry, parser_under_test, select=args.fixture)
    print_report(reports, args.verbose)
    return exit_status(reports, config.strict)


if __name__ == "__main__":
    sys.exit(main())
