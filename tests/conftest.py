"""Shared fixtures and options for the mfsuite tests."""

import json
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--mf-fixtures",
        action="store",
        default=str(Path("testdata") / "tests"),
        help="Root of the microformats test corpus for the conformance tests",
    )


@pytest.fixture
def write_fixture(tmp_path):
    """Return a helper that writes one fixture pair below tmp_path.

    ``write(path, html=..., expected=...)`` writes ``<path>.html`` and
    ``<path>.json``. Pass ``expected_text`` to write raw JSON text, or
    ``html=None`` / ``expected=None`` to leave a side out.
    """
    def write(rel_path, html="<p>x</p>", expected=None, expected_text=None):
        stem = tmp_path / rel_path
        stem.parent.mkdir(parents=True, exist_ok=True)
        if html is not None:
            stem.with_name(stem.name + ".html").write_text(html, encoding="utf-8")
        if expected_text is None and expected is not None:
            expected_text = json.dumps(expected)
        if expected_text is not None:
            stem.with_name(stem.name + ".json").write_text(expected_text, encoding="utf-8")
        return stem

    return write


@pytest.fixture
def static_parser():
    """Return a factory for parsers that ignore their input and return a fixed result.

    Each parser records its calls in ``parser.calls``.
    """
    def make(result):
        calls = []

        def parse(document, base_url):
            calls.append((document, base_url))
            return result

        parse.calls = calls
        return parse

    return make

