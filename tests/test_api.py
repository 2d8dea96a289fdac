"""Group and suite runner tests.

Tests run_group()/run_suite() over small fixture trees and the SuiteConfig
validation rules.
"""

import pytest

import mfsuite
from mfsuite import DiscoveryError, FixtureDecodeError, SkipRegistry, SuiteConfig, TestGroup, run_group, run_suite

EMPTY = {"items": [], "rels": {}, "rel-urls": {}}
OTHER = {"items": [{"type": ["h-card"], "properties": {}}], "rels": {}, "rel-urls": {}}


def test_public_api():
    """Test that the package exposes the harness entry points."""
    for name in ["list_tests", "discover", "SkipRegistry", "compare", "run_case",
                 "run_group", "run_suite", "normalize_expected", "normalize_actual"]:
        assert hasattr(mfsuite, name)
    assert mfsuite.__version__


class TestRunGroup:
    """Test per-group execution."""

    def test_counts(self, tmp_path, write_fixture, static_parser):
        """Test pass/fail/skip tallies for a mixed group."""
        write_fixture("microformats-v2/a/pass", expected=EMPTY)
        write_fixture("microformats-v2/b/fail", expected=OTHER)
        write_fixture("microformats-v2/c/skip", expected=OTHER)
        group = TestGroup("microformats-v2", tmp_path / "microformats-v2")
        registry = SkipRegistry({"microformats-v2/c/skip"})

        report = run_group(group, registry, static_parser(EMPTY))

        assert report.error is None
        assert [r.case.identifier for r in report.results] == ["a/pass", "b/fail", "c/skip"]
        assert [r.status for r in report.results] == ["pass", "fail", "skip"]
        assert (report.passed, report.failed, report.skipped) == (1, 1, 1)

    def test_failure_does_not_stop_group(self, tmp_path, write_fixture, static_parser):
        """Test that mismatches are isolated to their case."""
        write_fixture("microformats-v2/a/fail", expected=OTHER)
        write_fixture("microformats-v2/b/pass", expected=EMPTY)
        group = TestGroup("microformats-v2", tmp_path / "microformats-v2")

        report = run_group(group, SkipRegistry.empty(), static_parser(EMPTY))

        assert [r.status for r in report.results] == ["fail", "pass"]

    def test_select_filters_identifiers(self, tmp_path, write_fixture, static_parser):
        """Test the substring filter."""
        write_fixture("microformats-v2/h-card/one", expected=EMPTY)
        write_fixture("microformats-v2/h-entry/two", expected=EMPTY)
        group = TestGroup("microformats-v2", tmp_path / "microformats-v2")

        report = run_group(group, SkipRegistry.empty(), static_parser(EMPTY), select="h-entry")

        assert [r.case.identifier for r in report.results] == ["h-entry/two"]

    def test_fixture_error_aborts_group(self, tmp_path, write_fixture, static_parser):
        """Test that a broken fixture stops the rest of the group."""
        write_fixture("microformats-v2/a/ok", expected=EMPTY)
        write_fixture("microformats-v2/b/broken", expected_text="{")
        write_fixture("microformats-v2/c/never", expected=EMPTY)
        group = TestGroup("microformats-v2", tmp_path / "microformats-v2")
        parser = static_parser(EMPTY)

        report = run_group(group, SkipRegistry.empty(), parser)

        assert isinstance(report.error, FixtureDecodeError)
        assert [r.case.identifier for r in report.results] == ["a/ok"]
        assert len(parser.calls) == 2

    def test_unexpected_passes(self, tmp_path, write_fixture, static_parser):
        """Test reporting of listed fixtures that now pass."""
        write_fixture("microformats-v2/h-entry/urlincontent", expected=EMPTY)
        group = TestGroup("microformats-v2", tmp_path / "microformats-v2")

        report = run_group(group, SkipRegistry(), static_parser(EMPTY))

        assert [r.label for r in report.unexpected_passes] == ["microformats-v2/h-entry/urlincontent"]


class TestRunSuite:
    """Test multi-group runs."""

    def test_missing_group_does_not_stop_others(self, tmp_path, write_fixture, static_parser):
        """Test that each group is aborted independently."""
        write_fixture("microformats-v2/h-card/one", expected=EMPTY)
        config = SuiteConfig(fixtures_root=tmp_path, groups=("microformats-v1", "microformats-v2"))

        reports = run_suite(config, SkipRegistry.empty(), static_parser(EMPTY))

        assert [r.group.name for r in reports] == ["microformats-v1", "microformats-v2"]
        assert isinstance(reports[0].error, DiscoveryError)
        assert reports[1].error is None
        assert reports[1].passed == 1

    def test_base_url_is_passed_through(self, tmp_path, write_fixture, static_parser):
        """Test that the configured base URL reaches the parser."""
        write_fixture("microformats-v2/h-card/one", expected=EMPTY)
        config = SuiteConfig(fixtures_root=tmp_path, groups=("microformats-v2",),
                             base_url="https://base.example/")
        parser = static_parser(EMPTY)

        run_suite(config, SkipRegistry.empty(), parser)

        assert parser.calls[0][1] == "https://base.example/"


class TestSuiteConfig:
    """Test configuration validation."""

    def test_defaults(self):
        """Test the default corpus layout."""
        config = SuiteConfig()
        assert config.groups == ("microformats-mixed", "microformats-v1", "microformats-v2")
        assert config.base_url == "http://example.com/"
        assert [g.root for g in config.test_groups()] == [
            config.fixtures_root / name for name in config.groups
        ]

    @pytest.mark.parametrize("kwargs", [
        {"groups": ()},
        {"groups": ("v2", "v2")},
        {"groups": ("a/b",)},
        {"input_suffix": "html"},
        {"expected_suffix": "."},
        {"input_suffix": ".json"},
        {"base_url": "/relative"},
        {"base_url": "example.com"},
    ])
    def test_invalid(self, kwargs):
        """Test that invalid settings are rejected."""
        with pytest.raises(ValueError):
            SuiteConfig(**kwargs)
