"""Normalization applied before structural comparison.

The fixture corpus and the parser serialize some things differently without
any difference in meaning. Each rule below reconciles one such case and
nothing more:

1. self-closing-tag (expected side): the corpus writes embedded markup as
   ``<img src="a.png" />`` while the parser's tokenizer emits
   ``<img src="a.png"/>``.
2. escaped-apostrophe (actual side): an encoder that escapes ``&`` in JSON
   strings emits an apostrophe reference as ``\\u0026#39;``; that exact
   sequence becomes a literal ``'``. A plain ``&#39;`` is real content and
   is left alone.

Rules are byte-level and run before JSON decoding, over the whole document
rather than only inside markup strings; the corpus only has `` />`` in
embedded markup. All of them are idempotent.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Pattern, Sequence, Tuple

ENGINE_ONLY_KEYS = ("debug",)


@dataclass(frozen=True)
class ByteRule:
    """A named regular-expression rewrite over raw bytes."""

    name: str
    pattern: Pattern[bytes]
    replacement: bytes

    def apply(self, data: bytes) -> bytes:
        return self.pattern.sub(self.replacement, data)


# Rewrites the whole expected document, not only markup strings.
SELF_CLOSING_TAG = ByteRule(
    name="self-closing-tag",
    pattern=re.compile(rb" +/>"),
    replacement=b"/>",
)

ESCAPED_APOSTROPHE = ByteRule(
    name="escaped-apostrophe",
    pattern=re.compile(rb"\\u0026#39;"),
    replacement=b"'",
)

EXPECTED_RULES: Tuple[ByteRule, ...] = (SELF_CLOSING_TAG,)
ACTUAL_RULES: Tuple[ByteRule, ...] = (ESCAPED_APOSTROPHE,)


def apply_rules(data: bytes, rules: Iterable[ByteRule]) -> bytes:
    """Apply rules in order."""
    for rule in rules:
        data = rule.apply(data)
    return data


def normalize_expected(data: bytes, rules: Sequence[ByteRule] = EXPECTED_RULES) -> bytes:
    """Normalize the raw bytes of an expected fixture document."""
    return apply_rules(data, rules)


def normalize_actual(data: bytes, rules: Sequence[ByteRule] = ACTUAL_RULES) -> bytes:
    """Normalize the raw bytes of the serialized parser output."""
    return apply_rules(data, rules)


def strip_engine_keys(value: Any, keys: Iterable[str] = ENGINE_ONLY_KEYS) -> Any:
    """
    Drop top-level keys that only the parser emits.

    mf2py can attach a ``debug`` block describing itself; the corpus never
    contains one. Non-dict values are returned unchanged.
    """
    if not isinstance(value, dict):
        return value
    drop = set(keys)
    return {k: v for k, v in value.items() if k not in drop}
