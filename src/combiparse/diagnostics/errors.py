"""Exception hierarchy with structured diagnostics.

Parsers below the entry point never raise for syntax errors: they return
NoMatch values. The exceptions here are raised at the boundary, by the
entry point, the depth guard and the AST tooling.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from combiparse.syntax.cursor import NoMatch


class CombiparseError(Exception):
    """Base exception for all combiparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombiparseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    def format_error(self) -> str:
        """Rich multi-line rendering, falling back to the plain message."""
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.format_error()


class ParseError(CombiparseError):
    """Input did not match the grammar.

    The only syntax error kind: a labelled expectation mismatch at an offset.
    ``str(error)`` reads ``Parse error, expected <label> at char <offset>``.

    Attributes:
        expected: Expected-label reported by the furthest failing parser
        offset: Character offset of the failure
        source: The text that was parsed
        failure: Underlying NoMatch (None when raised without one)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        expected: str,
        offset: int,
        source: str = "",
        failure: "NoMatch | None" = None,
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            expected: Expected-label of the failure
            offset: Character offset of the failure
            source: The text that was parsed
            failure: The NoMatch the entry point received, when available
        """
        super().__init__(message)
        self.expected = expected
        self.offset = offset
        self.source = source
        self.failure = failure


class DepthLimitExceededError(CombiparseError):
    """Maximum nesting depth exceeded.

    Raised by the entry point for sources nested deeper than
    ``max_nesting_depth`` and by DepthGuard while walking an AST.
    """
