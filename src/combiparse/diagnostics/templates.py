"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Hints keyed by the grammar's expected-labels. Labels not listed get the
# generic hint of the owning template.
_EXPECTED_HINTS: dict[str, str] = {
    ")": "Close the argument list of the call",
    "(": "Open an argument list after the call target",
    "identifier": "Call targets start with an ASCII letter",
    "number": "Numbers look like 1, -2 or 3.25",
    "end of input": "Remove the text after the expression",
}


class ErrorTemplate:
    """Centralized error message templates.

    All user-facing error messages are created here, so that they are
    testable in one place and exception constructors never build f-strings.
    """

    @staticmethod
    def expected_token(expected: str, span: SourceSpan) -> Diagnostic:
        """Parser expected something else at a position.

        The message keeps the ``Parse error, expected X at char N`` shape that
        front ends display verbatim.

        Args:
            expected: The expected-label reported by the failing parser
            span: Location of the failure

        Returns:
            Diagnostic for PARSE_EXPECTED
        """
        msg = f"Parse error, expected {expected} at char {span.start}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_EXPECTED,
            message=msg,
            span=span,
            hint=_EXPECTED_HINTS.get(expected),
            expected=expected,
        )

    @staticmethod
    def no_alternative(span: SourceSpan) -> Diagnostic:
        """A choice over zero alternatives was attempted.

        Args:
            span: Location of the attempt

        Returns:
            Diagnostic for PARSE_NO_ALTERNATIVE
        """
        msg = f"Parse error, no alternative matched at char {span.start}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NO_ALTERNATIVE,
            message=msg,
            span=span,
            hint="The grammar offers an empty choice here",
        )

    @staticmethod
    def trailing_input(span: SourceSpan) -> Diagnostic:
        """Strict parse left unconsumed text after the expression.

        Args:
            span: Location of the first unconsumed character

        Returns:
            Diagnostic for PARSE_TRAILING_INPUT
        """
        msg = f"Parse error, expected end of input at char {span.start}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_INPUT,
            message=msg,
            span=span,
            hint=_EXPECTED_HINTS["end of input"],
            expected="end of input",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character access past the end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def nesting_depth_exceeded(depth: int, max_depth: int) -> Diagnostic:
        """Source nests calls deeper than the parser accepts.

        Args:
            depth: Nesting depth found in the source
            max_depth: Configured maximum

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        msg = f"Call nesting depth {depth} exceeds maximum ({max_depth})"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Flatten the expression or raise max_nesting_depth",
        )

    @staticmethod
    def expression_depth_exceeded(max_depth: int) -> Diagnostic:
        """AST walked deeper than the depth guard allows.

        Args:
            max_depth: Maximum depth of the guard

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum expression depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="The expression tree is nested too deeply",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Length of the source in characters
            max_size: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({max_size:,} characters)"
        )
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in CallExprParser to increase the limit",
        )

    @staticmethod
    def serialization_invalid(reason: str) -> Diagnostic:
        """AST cannot be rendered as call-expression source.

        Args:
            reason: What makes the node unrepresentable

        Returns:
            Diagnostic for SERIALIZATION_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.SERIALIZATION_INVALID,
            message=f"Cannot serialize expression: {reason}",
            span=None,
        )
