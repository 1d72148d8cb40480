"""Immutable cursor and parse outcome types.

Every parser in combiparse is a pure function ``Cursor -> Outcome[T]``.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every successful match returns a NEW cursor; the input cursor is
      never touched, so there is nothing to roll back on failure
    - Outcome is a tagged union of two frozen dataclasses, Match and
      NoMatch, inspected with isinstance or structural pattern matching
    - Line:column computed on-demand (only for error reporting)

Pattern Reference:
    - Haskell Parsec
    - Rust nom parser combinator library
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from combiparse.constants import END_OF_INPUT_LABEL, NO_ALTERNATIVE_LABEL
from combiparse.diagnostics import Diagnostic, ErrorTemplate, SourceSpan

__all__ = [
    "Cursor",
    "Match",
    "NoMatch",
    "Outcome",
    "Parser",
    "match",
    "no_match",
]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable (text, offset) parse position.

    Invariant:
        0 <= offset <= len(text)

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance(2).current
        'l'
        >>> cursor.offset  # Original unchanged
        0
        >>> Cursor("hi", 2).is_eof
        True
    """

    text: str
    offset: int

    def __post_init__(self) -> None:
        """Validate offset bounds."""
        if not 0 <= self.offset <= len(self.text):
            msg = f"Cursor offset {self.offset} out of range 0..{len(self.text)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when no input remains."""
        return self.offset >= len(self.text)

    @property
    def current(self) -> str:
        """Character at the cursor.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.offset)
            raise EOFError(diagnostic.message)
        return self.text[self.offset]

    @property
    def remaining(self) -> str:
        """Unconsumed input from the cursor to the end of text."""
        return self.text[self.offset :]

    def startswith(self, prefix: str) -> bool:
        """Whether the input at the cursor begins with ``prefix``.

        Compares in place, without slicing the text.
        """
        return self.text.startswith(prefix, self.offset)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(3).offset
            3
            >>> cursor.advance(99).offset
            5
        """
        return Cursor(self.text, min(self.offset + count, len(self.text)))

    def slice_to(self, end: int) -> str:
        """Text between the cursor and ``end`` (exclusive)."""
        return self.text[self.offset : end]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for the cursor position.

        Returns:
            (line, column) tuple, 1-indexed like text editors

        Performance:
            O(n) where n = offset. Only call for error reporting.

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.text.count("\n", 0, self.offset) + 1
        last_newline = self.text.rfind("\n", 0, self.offset)
        col = self.offset - last_newline if last_newline >= 0 else self.offset + 1
        return (line, col)

    def to_span(self) -> SourceSpan:
        """Zero-width SourceSpan at the cursor, for diagnostics."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.offset, end=self.offset, line=line, column=col)


@dataclass(frozen=True, slots=True)
class Match[T]:
    """Successful outcome: the produced value and the cursor past the input.

    Match is truthy, so ``if outcome:`` distinguishes it from NoMatch.

    Example:
        >>> outcome = Match("h", Cursor("hello", 1))
        >>> outcome.value
        'h'
        >>> outcome.cursor.offset
        1
    """

    value: T
    cursor: Cursor

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Failed outcome: what was expected, and where.

    The cursor is for diagnostics and furthest-failure comparison only;
    parsing never resumes from it. NoMatch is falsy.

    Example:
        >>> failure = NoMatch(")", Cursor("Foo(", 4))
        >>> failure.offset
        4
        >>> failure.format_error()
        '1:5: expected )'
    """

    expected: str
    cursor: Cursor

    def __bool__(self) -> Literal[False]:
        return False

    @property
    def offset(self) -> int:
        """Character offset of the failure."""
        return self.cursor.offset

    def format_error(self) -> str:
        """Format failure with line:column."""
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: expected {self.expected}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format failure with source context and a caret pointer.

        Args:
            context_lines: Number of lines to show before/after the failure

        Returns:
            Multi-line formatted error

        Example:
            >>> print(NoMatch(")", Cursor("Foo(1,2", 7)).format_with_context())
            1:8: expected )
            <BLANKLINE>
               1 | Foo(1,2
                 |        ^
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.text.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            gutter = f"{i:4} | "
            result_lines.append(gutter + lines[i - 1])
            if i == line:
                result_lines.append(" " * (len(gutter) - 2) + "| " + " " * (col - 1) + "^")

        return "\n".join(result_lines)

    def to_diagnostic(self) -> Diagnostic:
        """Structured diagnostic for this failure."""
        span = self.cursor.to_span()
        if self.expected == NO_ALTERNATIVE_LABEL:
            return ErrorTemplate.no_alternative(span)
        if self.expected == END_OF_INPUT_LABEL:
            return ErrorTemplate.trailing_input(span)
        return ErrorTemplate.expected_token(self.expected, span)


type Outcome[T] = Match[T] | NoMatch

type Parser[T] = Callable[[Cursor], Outcome[T]]


def match[T](cursor: Cursor, value: T) -> Match[T]:
    """Build a Match carrying ``value`` positioned at ``cursor``."""
    return Match(value, cursor)


def no_match(cursor: Cursor, expected: str) -> NoMatch:
    """Build a NoMatch reporting ``expected`` at ``cursor``."""
    return NoMatch(expected, cursor)
