"""Tests for syntax.cursor: Cursor, Match, NoMatch.

Validates the immutable cursor pattern, line/column computation, the truthiness
of outcomes and the conversion of failures to diagnostics.
"""

from __future__ import annotations

import pytest

from combiparse.diagnostics import DiagnosticCode
from combiparse.syntax.cursor import Cursor, Match, NoMatch, match, no_match

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at offset 0."""
        cursor = Cursor("hello", 0)

        assert cursor.text == "hello"
        assert cursor.offset == 0
        assert not cursor.is_eof

    def test_create_cursor_at_end(self) -> None:
        """Offset equal to the text length is valid and at EOF."""
        cursor = Cursor("hello", 5)

        assert cursor.is_eof

    @pytest.mark.parametrize("offset", [-1, 6, 100])
    def test_offset_out_of_range_rejected(self, offset: int) -> None:
        """Offsets outside 0..len(text) are a construction error."""
        with pytest.raises(ValueError, match="out of range"):
            Cursor("hello", offset)

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.offset = 5  # type: ignore[misc]

    def test_empty_text(self) -> None:
        """Empty text has exactly one valid cursor, at EOF."""
        cursor = Cursor("", 0)

        assert cursor.is_eof
        assert cursor.remaining == ""

    def test_structural_equality(self) -> None:
        """Cursors compare by text and offset."""
        assert Cursor("abc", 1) == Cursor("abc", 1)
        assert Cursor("abc", 1) != Cursor("abc", 2)


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test current, advance, remaining and slicing."""

    def test_current_character(self) -> None:
        """current returns the character at the offset."""
        assert Cursor("hello", 1).current == "e"

    def test_current_at_eof_raises(self) -> None:
        """current at EOF raises EOFError with the offset in the message."""
        with pytest.raises(EOFError, match="position 5"):
            _ = Cursor("hello", 5).current

    def test_advance_returns_new_cursor(self) -> None:
        """advance leaves the original untouched."""
        cursor = Cursor("hello", 0)
        moved = cursor.advance(2)

        assert moved.offset == 2
        assert cursor.offset == 0

    def test_advance_default_is_one(self) -> None:
        """advance() moves one character."""
        assert Cursor("hello", 0).advance().offset == 1

    def test_advance_clamps_at_eof(self) -> None:
        """advance never moves past the end of text."""
        assert Cursor("hello", 3).advance(99).offset == 5

    def test_remaining(self) -> None:
        """remaining is the unconsumed suffix."""
        assert Cursor("Foo(1)", 3).remaining == "(1)"

    def test_startswith(self) -> None:
        """startswith compares at the offset, not at the start of text."""
        cursor = Cursor("Foo(1)", 3)

        assert cursor.startswith("(")
        assert cursor.startswith("(1)")
        assert not cursor.startswith("Foo")
        assert not cursor.startswith("(1)x")

    def test_slice_to(self) -> None:
        """slice_to returns text between the offset and end."""
        assert Cursor("Foo(1)", 0).slice_to(3) == "Foo"


# ============================================================================
# LINE:COLUMN
# ============================================================================


class TestCursorLineCol:
    """Test 1-based line and column computation."""

    def test_first_character(self) -> None:
        """Offset 0 is line 1, column 1."""
        assert Cursor("abc", 0).compute_line_col() == (1, 1)

    def test_same_line(self) -> None:
        """Columns count from 1 on the first line."""
        assert Cursor("abc", 2).compute_line_col() == (1, 3)

    def test_after_newline(self) -> None:
        """Columns restart after each newline."""
        assert Cursor("ab\ncd", 4).compute_line_col() == (2, 2)

    def test_at_newline(self) -> None:
        """The newline character belongs to the line it ends."""
        assert Cursor("ab\ncd", 2).compute_line_col() == (1, 3)

    def test_to_span(self) -> None:
        """to_span is a zero-width span at the cursor."""
        span = Cursor("ab\ncd", 4).to_span()

        assert (span.start, span.end, span.line, span.column) == (4, 4, 2, 2)


# ============================================================================
# OUTCOMES
# ============================================================================


class TestOutcomes:
    """Test Match and NoMatch."""

    def test_match_is_truthy(self) -> None:
        """Match is truthy regardless of its value."""
        assert Match(None, Cursor("", 0))
        assert Match(0, Cursor("", 0))
        assert Match("", Cursor("", 0))

    def test_no_match_is_falsy(self) -> None:
        """NoMatch is falsy."""
        assert not NoMatch("x", Cursor("", 0))

    def test_constructors(self) -> None:
        """match() and no_match() build the outcome types."""
        cursor = Cursor("abc", 1)

        assert match(cursor, "v") == Match("v", cursor)
        assert no_match(cursor, "digit") == NoMatch("digit", cursor)

    def test_pattern_matching(self) -> None:
        """Outcomes work with structural pattern matching."""
        outcome = match(Cursor("abc", 1), "a")

        match outcome:
            case Match(value=value, cursor=cursor):
                assert value == "a"
                assert cursor.offset == 1
            case NoMatch():
                pytest.fail("expected a Match")

    def test_no_match_offset(self) -> None:
        """NoMatch.offset is the failure cursor's offset."""
        assert NoMatch(")", Cursor("Foo(", 4)).offset == 4

    def test_format_error(self) -> None:
        """format_error renders line:column and the label."""
        assert NoMatch(")", Cursor("Foo(", 4)).format_error() == "1:5: expected )"

    def test_format_with_context(self) -> None:
        """format_with_context adds the source line and a caret."""
        rendered = NoMatch(")", Cursor("Foo(1,2", 7)).format_with_context()
        lines = rendered.split("\n")

        assert lines[0] == "1:8: expected )"
        assert lines[2] == "   1 | Foo(1,2"
        assert lines[3] == "     |        ^"

    def test_format_with_context_limits_lines(self) -> None:
        """Only context_lines lines around the failure are shown."""
        text = "a\nb\nc\nd\ne\nf\ng"
        rendered = NoMatch("x", Cursor(text, text.index("d"))).format_with_context(
            context_lines=1
        )

        assert "   3 | c" in rendered
        assert "   5 | e" in rendered
        assert "   2 | b" not in rendered
        assert "   6 | f" not in rendered


# ============================================================================
# DIAGNOSTICS
# ============================================================================


class TestNoMatchDiagnostic:
    """Test NoMatch.to_diagnostic."""

    def test_expected_token(self) -> None:
        """Ordinary labels produce PARSE_EXPECTED."""
        diagnostic = NoMatch(")", Cursor("Foo(", 4)).to_diagnostic()

        assert diagnostic.code is DiagnosticCode.PARSE_EXPECTED
        assert diagnostic.message == "Parse error, expected ) at char 4"
        assert diagnostic.expected == ")"
        assert diagnostic.span is not None
        assert diagnostic.span.start == 4

    def test_end_of_input(self) -> None:
        """The end-of-input label produces PARSE_TRAILING_INPUT."""
        diagnostic = NoMatch("end of input", Cursor("1)", 1)).to_diagnostic()

        assert diagnostic.code is DiagnosticCode.PARSE_TRAILING_INPUT
        assert diagnostic.message == "Parse error, expected end of input at char 1"

    def test_no_alternative(self) -> None:
        """The empty-choice label produces PARSE_NO_ALTERNATIVE."""
        diagnostic = NoMatch("no alternative matched", Cursor("x", 0)).to_diagnostic()

        assert diagnostic.code is DiagnosticCode.PARSE_NO_ALTERNATIVE
