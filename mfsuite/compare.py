"""Structural comparison of decoded JSON documents.

Objects compare by key set and per-key value, ignoring key order. Arrays
compare element by element, in order. Scalars compare by value within a type
category (null, boolean, number, string), so ``true`` never equals ``1`` while
``1`` equals ``1.0``.
"""

import json
import math
import re
from dataclasses import dataclass, field
from typing import Any, List

_PLAIN_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

MISSING_KEY = "missing-key"
EXTRA_KEY = "extra-key"
LENGTH = "length"
MISSING_INDEX = "missing-index"
EXTRA_INDEX = "extra-index"
TYPE = "type"
VALUE = "value"


def type_category(value: Any) -> str:
    """Return the JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _child_path(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    if isinstance(key, str) and _PLAIN_KEY.match(key):
        return f"{path}.{key}"
    return f"{path}[{json.dumps(key, ensure_ascii=False)}]"


def _render(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


@dataclass(frozen=True)
class Difference:
    """One divergent location between expected and actual."""

    path: str
    kind: str
    expected: Any = None
    actual: Any = None

    def describe(self) -> str:
        lines = []
        if self.kind == MISSING_KEY:
            lines.append(f"{self.path}: missing key")
            lines.append(f"  Expected: {_render(self.expected)}")
        elif self.kind == EXTRA_KEY:
            lines.append(f"{self.path}: unexpected key")
            lines.append(f"  Actual:   {_render(self.actual)}")
        elif self.kind == LENGTH:
            lines.append(f"{self.path}: length mismatch: expected {self.expected}, got {self.actual}")
        elif self.kind == MISSING_INDEX:
            lines.append(f"{self.path}: missing element")
            lines.append(f"  Expected: {_render(self.expected)}")
        elif self.kind == EXTRA_INDEX:
            lines.append(f"{self.path}: unexpected element")
            lines.append(f"  Actual:   {_render(self.actual)}")
        elif self.kind == TYPE:
            lines.append(f"{self.path}: type mismatch: "
                         f"{type_category(self.expected)} vs {type_category(self.actual)}")
            lines.append(f"  Expected: {_render(self.expected)}")
            lines.append(f"  Actual:   {_render(self.actual)}")
        else:
            lines.append(f"{self.path}: value mismatch")
            lines.append(f"  Expected: {_render(self.expected)}")
            lines.append(f"  Actual:   {_render(self.actual)}")
        return "\n".join(lines)


@dataclass(frozen=True)
class Comparison:
    """Outcome of comparing an expected document with the parser's output."""

    differences: List[Difference] = field(default_factory=list)

    @property
    def equal(self) -> bool:
        return not self.differences

    @property
    def diff(self) -> str:
        return format_diff(self.differences)

    def __bool__(self) -> bool:
        return self.equal


def _scalars_equal(expected: Any, actual: Any) -> bool:
    if expected == actual:
        return True
    # NaN is only reachable through json.loads extensions, keep compare(x, x) true
    return (isinstance(expected, float) and isinstance(actual, float)
            and math.isnan(expected) and math.isnan(actual))


def _compare(expected: Any, actual: Any, path: str, out: List[Difference]) -> None:
    category = type_category(expected)
    if category != type_category(actual):
        out.append(Difference(path, TYPE, expected, actual))
        return

    if category == "object":
        for key in sorted(set(expected) | set(actual), key=str):
            child = _child_path(path, key)
            if key not in actual:
                out.append(Difference(child, MISSING_KEY, expected=expected[key]))
            elif key not in expected:
                out.append(Difference(child, EXTRA_KEY, actual=actual[key]))
            else:
                _compare(expected[key], actual[key], child, out)
    elif category == "array":
        if len(expected) != len(actual):
            out.append(Difference(path, LENGTH, len(expected), len(actual)))
        for i, (e, a) in enumerate(zip(expected, actual)):
            _compare(e, a, _child_path(path, i), out)
        for i in range(len(actual), len(expected)):
            out.append(Difference(_child_path(path, i), MISSING_INDEX, expected=expected[i]))
        for i in range(len(expected), len(actual)):
            out.append(Difference(_child_path(path, i), EXTRA_INDEX, actual=actual[i]))
    elif not _scalars_equal(expected, actual):
        out.append(Difference(path, VALUE, expected, actual))


def compare(expected: Any, actual: Any) -> Comparison:
    """
    Deep-compare two decoded JSON values.

    Args:
        expected: Value decoded from the fixture's expected document
        actual: Value decoded from the parser's serialized output

    Returns:
        Comparison listing every divergent path, empty when equal
    """
    differences: List[Difference] = []
    _compare(expected, actual, "$", differences)
    return Comparison(differences)


def format_diff(differences: List[Difference]) -> str:
    """Render differences as a human-readable report, one block per path."""
    return "\n".join(d.describe() for d in differences)
