"""Primitive parsers.

These are the only parsers that read raw input. Everything else in
combiparse is built by combining them.

Each factory returns a ``Parser[T]``: a closure ``Cursor -> Outcome[T]``
that reports failures at the ORIGINAL cursor (no partial consumption).
"""

import re

from combiparse.constants import END_OF_INPUT_LABEL
from combiparse.syntax.cursor import Cursor, Outcome, Parser, match, no_match

__all__ = ["end_of_input", "literal", "regex"]


def literal(expected: str) -> Parser[str]:
    """Match a fixed string exactly at the cursor.

    Comparison is case-sensitive and character exact: no trimming, no
    normalization.

    Examples:
        literal("(") on "(1)" at 0 → Match("(", offset 1)
        literal("foo") on "Foo" at 0 → NoMatch("foo", offset 0)

    Args:
        expected: Text to match; also the failure label

    Returns:
        Parser producing ``expected`` itself

    Raises:
        ValueError: If ``expected`` is empty
    """
    if not expected:
        msg = "literal() requires a non-empty string"
        raise ValueError(msg)

    length = len(expected)

    def parse_literal(cursor: Cursor) -> Outcome[str]:
        if cursor.startswith(expected):
            return match(cursor.advance(length), expected)
        return no_match(cursor, expected)

    return parse_literal


def regex(pattern: str | re.Pattern[str], label: str) -> Parser[str]:
    """Match a regular expression anchored at the cursor.

    ``Pattern.match(text, pos)`` only succeeds when the match begins exactly
    at ``pos``; a match found further along the text does not count. Python
    patterns carry no scan position between calls, so one compiled pattern
    is shared by every invocation without any reset.

    Examples:
        regex(r"[0-9]+", "number") on "12ab" at 0 → Match("12", offset 2)
        regex(r"[0-9]+", "number") on "ab12" at 0 → NoMatch("number", offset 0)

    Args:
        pattern: Pattern source or compiled pattern
        label: Human-readable name reported on failure

    Returns:
        Parser producing the matched substring
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def parse_regex(cursor: Cursor) -> Outcome[str]:
        found = compiled.match(cursor.text, cursor.offset)
        if found is None:
            return no_match(cursor, label)
        return match(cursor.advance(found.end() - cursor.offset), found.group(0))

    return parse_regex


def end_of_input() -> Parser[None]:
    """Succeed, consuming nothing, only at end of input."""

    def parse_end(cursor: Cursor) -> Outcome[None]:
        if cursor.is_eof:
            return match(cursor, None)
        return no_match(cursor, END_OF_INPUT_LABEL)

    return parse_end
