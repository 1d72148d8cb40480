"""Call-expression parser entry point.

This module turns source text into an :data:`~combiparse.calls.ast.Expr`
and converts grammar failures into :class:`~combiparse.diagnostics.ParseError`.
It is the only place in the call-expression pipeline that raises for
syntax errors; the grammar below it returns NoMatch values.

Security:
    Input is bounded twice before the grammar runs. Sources longer than
    ``max_source_size`` are rejected with ValueError, and sources nested
    deeper than ``max_nesting_depth`` are rejected with
    DepthLimitExceededError. The nesting check is a linear walk over the
    tokens the grammar would reach, so recursion in the combinators is
    never entered for input that could exhaust the interpreter stack.

See Also:
    - :mod:`combiparse.calls.grammar` - The grammar rules
    - :mod:`combiparse.calls.ast` - Call and Expr
"""

import logging

from combiparse.constants import FRAMES_PER_NESTING_LEVEL, MAX_DEPTH, MAX_SOURCE_SIZE
from combiparse.core.depth_guard import depth_clamp
from combiparse.diagnostics import DepthLimitExceededError, ErrorTemplate, ParseError
from combiparse.syntax.cursor import Cursor, Match, Outcome, Parser
from combiparse.syntax.parser import end_of_input, sequence, transform

from . import grammar
from .ast import Expr

__all__ = ["CallExprParser", "parse"]

logger = logging.getLogger(__name__)


def _nesting_depth(source: str) -> int:
    """Deepest call nesting the grammar would enter on ``source``.

    Walks the tokens the grammar accepts without recursing. Only an
    identifier directly followed by ``(`` opens a level; numbers, ``,`` and
    ``)`` stay inside the enclosing call. The walk stops at the first token
    the grammar would reject or once the outermost expression is complete,
    so ignored trailing text and stray parentheses never count.
    """
    depth = 0
    deepest = 0
    pos = 0
    end = len(source)
    while True:
        # Expecting an expression at pos
        if (ident := grammar.IDENTIFIER_PATTERN.match(source, pos)) is not None:
            if ident.end() >= end or source[ident.end()] != "(":
                return deepest
            depth += 1
            deepest = max(deepest, depth)
            pos = ident.end() + 1
            if pos >= end or source[pos] != ")":
                continue
            # Empty argument list: the call ends at the ")" below
        elif (number := grammar.NUMBER_PATTERN.match(source, pos)) is not None:
            if depth == 0:
                return deepest
            pos = number.end()
        else:
            return deepest

        # An expression just ended at pos; close calls until an argument follows
        while pos < end and source[pos] == ")":
            depth -= 1
            pos += 1
            if depth == 0:
                return deepest
        if pos >= end or source[pos] != ",":
            return deepest
        pos += 1


_strict_expr: Parser[Expr] = transform(
    sequence([grammar.expr, end_of_input()]),
    lambda parts: parts[0],
)


class CallExprParser:
    """Configurable parser for call expressions.

    Instances hold only configuration and can be shared between threads;
    the grammar they run is module-level and immutable.

    Attributes:
        strict: Require the expression to span the whole source
        max_source_size: Maximum source length in characters (0 disables)
        max_nesting_depth: Maximum call nesting accepted

    Example:
        >>> CallExprParser().parse("Foo(1,Bar())")
        Call(target='Foo', args=(1.0, Call(target='Bar', args=())))
        >>> CallExprParser(strict=True).parse("1)")
        Traceback (most recent call last):
        ...
        combiparse.diagnostics.errors.ParseError: Parse error, expected end of input at char 1
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size", "_strict")

    def __init__(
        self,
        *,
        strict: bool = False,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional strictness and input limits.

        Args:
            strict: When True, text after the expression is a parse error.
                    When False (default), trailing text is ignored.
            max_source_size: Maximum source length in characters
                            (default: 1 MiB). Set to 0 to disable the check.
            max_nesting_depth: Maximum call nesting depth (default: 64).
                              Clamped so parsing stays within the
                              interpreter recursion limit.
        """
        self._strict = strict
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        requested_depth = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        self._max_nesting_depth = depth_clamp(
            requested_depth, frames_per_level=FRAMES_PER_NESTING_LEVEL
        )

    def __repr__(self) -> str:
        return (
            f"CallExprParser(strict={self._strict}, "
            f"max_source_size={self._max_source_size}, "
            f"max_nesting_depth={self._max_nesting_depth})"
        )

    @property
    def strict(self) -> bool:
        """Whether trailing text after the expression is rejected."""
        return self._strict

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source length in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed call nesting depth."""
        return self._max_nesting_depth

    def _check_limits(self, source: str) -> None:
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        depth = _nesting_depth(source)
        if depth > self._max_nesting_depth:
            logger.debug(
                "Rejecting source nested %d deep (max %d)", depth, self._max_nesting_depth
            )
            raise DepthLimitExceededError(
                ErrorTemplate.nesting_depth_exceeded(depth, self._max_nesting_depth)
            )

    def parse_outcome(self, source: str) -> Outcome[Expr]:
        """Run the grammar and return its raw outcome without raising.

        Limits are still enforced.

        Raises:
            ValueError: If source exceeds max_source_size
            DepthLimitExceededError: If source nests deeper than max_nesting_depth
        """
        self._check_limits(source)
        parser = _strict_expr if self._strict else grammar.expr
        return parser(Cursor(source, 0))

    def parse(self, source: str) -> Expr:
        """Parse ``source`` into an expression.

        Args:
            source: Call-expression text, e.g. ``Foo(Bar(1,2.5))``

        Returns:
            A float for number literals, otherwise a Call

        Raises:
            ParseError: If the source does not match the grammar. The message
                reads ``Parse error, expected <label> at char <offset>``.
            ValueError: If source exceeds max_source_size
            DepthLimitExceededError: If source nests deeper than max_nesting_depth
        """
        logger.debug("Parsing %d characters (strict=%s)", len(source), self._strict)
        outcome = self.parse_outcome(source)
        if isinstance(outcome, Match):
            return outcome.value

        logger.debug("Parse failed at %d, expected %s", outcome.offset, outcome.expected)
        raise ParseError(
            outcome.to_diagnostic(),
            expected=outcome.expected,
            offset=outcome.offset,
            source=source,
            failure=outcome,
        )


_default_parser = CallExprParser()


def parse(text: str) -> Expr:
    """Parse a call expression with the default configuration.

    Trailing text after a complete expression is ignored:
    ``parse("1abc")`` returns ``1.0``.

    Example:
        >>> parse("Foo(Bar(1,2,3))")
        Call(target='Foo', args=(Call(target='Bar', args=(1.0, 2.0, 3.0)),))
        >>> parse("Foo(")
        Traceback (most recent call last):
        ...
        combiparse.diagnostics.errors.ParseError: Parse error, expected ) at char 4

    Raises:
        ParseError: If the text does not start with a valid expression
    """
    return _default_parser.parse(text)
