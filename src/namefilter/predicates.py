"""Name predicates: pattern parsing and boolean combinators.

A pattern is a ``|``-separated list of alternatives. Within an alternative
``*`` matches any run of characters and every other character is literal.
Leading whitespace is ignored; trailing whitespace anchors the alternative to
the end of the candidate. Without an anchor an alternative may match anywhere.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable

__all__ = [
    "Predicate",
    "PatternAlternative",
    "parse_pattern",
    "string_contains",
    "negate",
    "conjunction",
    "disjunction",
    "not_",
    "and_",
    "or_",
]

Predicate = Callable[[str], bool]

_ALTERNATIVE_SEPARATOR = "|"
_WILDCARD = "*"


@dataclass(frozen=True)
class PatternAlternative:
    """One ``|``-separated alternative of a pattern.

    ``segments`` are the literal pieces between wildcards. ``anchored`` is
    set when the alternative ended in whitespace.
    """

    segments: tuple[str, ...]
    anchored: bool

    @classmethod
    def parse(cls, alternative: str) -> PatternAlternative:
        anchored = alternative[-1:].isspace()
        return cls(tuple(alternative.strip().split(_WILDCARD)), anchored)

    def matches(self, candidate: str) -> bool:
        """Check the alternative against ``candidate``.

        Each segment is located at its leftmost position after the previous
        one, so the scan never backtracks.
        """
        *leading, last = self.segments
        pos = 0
        for segment in leading:
            idx = candidate.find(segment, pos)
            if idx == -1:
                return False
            pos = idx + len(segment)

        if self.anchored:
            return len(candidate) - len(last) >= pos and candidate.endswith(last)
        return candidate.find(last, pos) != -1


@functools.lru_cache(maxsize=256)
def parse_pattern(pattern: str) -> tuple[PatternAlternative, ...]:
    """Split a name pattern into its alternatives.

    Args:
        pattern: The user supplied pattern. Any string is accepted.

    Returns:
        The alternatives in pattern order. A name matches the pattern when
        any of them matches.
    """
    return tuple(
        PatternAlternative.parse(alt) for alt in pattern.split(_ALTERNATIVE_SEPARATOR)
    )


def string_contains(pattern: str) -> Predicate:
    """Return a predicate that is True for names matching ``pattern``.

    Examples:
        >>> string_contains("f*ar")("foobar")
        True
        >>> string_contains("foo ")("foobar")
        False
        >>> string_contains("foo |bar ")("bar")
        True
    """
    alternatives = parse_pattern(pattern)

    def matches(candidate: str) -> bool:
        return any(alt.matches(candidate) for alt in alternatives)

    return matches


def negate(predicate: Predicate) -> Predicate:
    """Return the logical complement of ``predicate``."""

    def negated(candidate: str) -> bool:
        return not predicate(candidate)

    return negated


def conjunction(*predicates: Predicate) -> Predicate:
    """AND the given predicates together.

    Evaluation stops at the first predicate returning False. With no
    predicates the result accepts every candidate.
    """
    chain = tuple(predicates)

    def all_match(candidate: str) -> bool:
        return all(p(candidate) for p in chain)

    return all_match


def disjunction(*predicates: Predicate) -> Predicate:
    """OR the given predicates together.

    Evaluation stops at the first predicate returning True. With no
    predicates the result rejects every candidate.
    """
    chain = tuple(predicates)

    def any_match(candidate: str) -> bool:
        return any(p(candidate) for p in chain)

    return any_match


not_ = negate
and_ = conjunction
or_ = disjunction
