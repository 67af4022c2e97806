"""
Structural match rules for hash families.

A rule only describes the *shape* of a hash string: its length, the
characters it may contain, or the literal prefix and delimited fields of a
self-describing format. Rules are plain immutable records; a single
evaluator per rule kind decides whether a string is accepted.
"""

import re
import string
from dataclasses import dataclass, field
from functools import singledispatch


HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class FixedHex:
    """Exactly ``length`` hexadecimal characters, either case."""

    length: int

    def describe(self) -> str:
        return f"{self.length} hex characters"


@dataclass(frozen=True)
class FixedLength:
    """Exactly ``length`` characters drawn from ``charset`` (case-sensitive)."""

    length: int
    charset: str

    def describe(self) -> str:
        return f"{self.length} characters from a {len(set(self.charset))}-symbol alphabet"


@dataclass(frozen=True)
class SegmentedFormat:
    """
    Self-describing format with a literal prefix and delimited fields.

    The input must start with one of ``prefixes`` (case-sensitive). The
    remainder is split on ``separator`` into exactly ``len(fields)``
    segments, the last segment absorbing any further separators, and each
    segment must fully match the corresponding field pattern.
    """

    prefixes: tuple[str, ...]
    fields: tuple[str, ...]
    separator: str = "$"
    _compiled: tuple[re.Pattern[str], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to cache compiled patterns
        object.__setattr__(
            self, "_compiled", tuple(re.compile(f) for f in self.fields)
        )

    def describe(self) -> str:
        return f"{' / '.join(self.prefixes)} followed by {len(self.fields)} fields"


MatchRule = FixedHex | FixedLength | SegmentedFormat


@singledispatch
def rule_matches(rule: MatchRule, text: str) -> bool:
    """Return True if ``text`` has the structure ``rule`` describes."""
    raise TypeError(f"Unsupported match rule: {type(rule).__name__}")


@rule_matches.register
def _(rule: FixedHex, text: str) -> bool:
    return len(text) == rule.length and all(c in HEX_DIGITS for c in text)


@rule_matches.register
def _(rule: FixedLength, text: str) -> bool:
    return len(text) == rule.length and all(c in rule.charset for c in text)


@rule_matches.register
def _(rule: SegmentedFormat, text: str) -> bool:
    for prefix in rule.prefixes:
        if text.startswith(prefix):
            remainder = text[len(prefix):]
            break
    else:
        return False

    segments = remainder.split(rule.separator, len(rule.fields) - 1)
    if len(segments) != len(rule.fields):
        return False

    return all(
        pattern.fullmatch(segment) is not None
        for pattern, segment in zip(rule._compiled, segments)
    )
