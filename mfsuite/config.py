"""Configuration classes for running the microformats test suite.

Fixtures come from the shared corpus at https://github.com/microformats/tests,
laid out as <root>/<group>/<relative/path>.{html,json}.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple, Union
from urllib.parse import urlsplit

DEFAULT_FIXTURES_ROOT = Path("testdata") / "tests"
DEFAULT_GROUPS = ("microformats-mixed", "microformats-v1", "microformats-v2")
DEFAULT_BASE_URL = "http://example.com/"
INPUT_SUFFIX = ".html"
EXPECTED_SUFFIX = ".json"


@dataclass(frozen=True)
class TestGroup:
    """One corpus generation, e.g. ``microformats-v2``."""

    __test__ = False  # not a pytest class

    name: str
    root: Path


@dataclass
class SuiteConfig:
    """Configuration for a conformance run."""

    fixtures_root: Union[str, Path] = DEFAULT_FIXTURES_ROOT
    groups: Tuple[str, ...] = DEFAULT_GROUPS
    input_suffix: str = INPUT_SUFFIX
    expected_suffix: str = EXPECTED_SUFFIX
    base_url: str = DEFAULT_BASE_URL
    strict: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.fixtures_root = Path(self.fixtures_root)
        self.groups = tuple(self.groups)

        if not self.groups:
            raise ValueError("At least one test group is required")
        if len(set(self.groups)) != len(self.groups):
            raise ValueError("Test group names must be unique")
        if any(not name or "/" in name for name in self.groups):
            raise ValueError("Test group names must be non-empty and contain no '/'")

        for suffix in (self.input_suffix, self.expected_suffix):
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(f"Fixture suffix must look like '.ext', got {suffix!r}")
        if self.input_suffix == self.expected_suffix:
            raise ValueError("Input and expected suffixes must differ")

        parts = urlsplit(self.base_url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Base URL must be absolute, got {self.base_url!r}")

    def test_groups(self) -> Iterator[TestGroup]:
        """Yield a TestGroup for each configured group name."""
        for name in self.groups:
            yield TestGroup(name=name, root=self.fixtures_root / name)
