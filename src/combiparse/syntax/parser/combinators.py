"""Parser combinators.

Higher-order functions that take parsers and return a new parser. None of
them reads raw text: all input access goes through the wrapped primitives.

Failure propagation:
    Combinators pass on the failures they observe and never invent new
    ones, with one exception: any_of() over an empty list of alternatives.
    When every alternative of a choice fails, the failure that got furthest
    into the input is kept, because it says the most about where the input
    broke.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from combiparse.constants import NO_ALTERNATIVE_LABEL
from combiparse.syntax.cursor import (
    Cursor,
    Match,
    NoMatch,
    Outcome,
    Parser,
    match,
    no_match,
)

__all__ = ["any_of", "lazy", "many", "optional", "sequence", "traced", "transform"]

logger = logging.getLogger(__name__)


def any_of[T](parsers: Sequence[Parser[T]]) -> Parser[T]:
    """Ordered choice: the first alternative that matches wins.

    Every alternative starts from the same cursor. If none matches, the
    result is the failure with the greatest offset; on equal offsets the
    earliest alternative's failure is kept.

    Args:
        parsers: Alternatives, in priority order

    Returns:
        Parser producing the winning alternative's value
    """
    alternatives = tuple(parsers)

    def parse_any(cursor: Cursor) -> Outcome[T]:
        furthest: NoMatch | None = None
        for parser in alternatives:
            outcome = parser(cursor)
            if isinstance(outcome, Match):
                return outcome
            if furthest is None or outcome.offset > furthest.offset:
                furthest = outcome
        if furthest is None:
            return no_match(cursor, NO_ALTERNATIVE_LABEL)
        return furthest

    return parse_any


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """Zero or one: never fails.

    On failure the result is ``Match(None, cursor)`` at the ORIGINAL cursor,
    so nothing is consumed.
    """

    def parse_optional(cursor: Cursor) -> Outcome[T | None]:
        outcome = parser(cursor)
        if isinstance(outcome, Match):
            return outcome
        return match(cursor, None)

    return parse_optional


def many[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Zero or more: apply ``parser`` until it fails. Never fails.

    The resulting cursor is the one just before the failing attempt. A match
    that consumes nothing ends the loop after its value is recorded, since
    applying the same parser at the same cursor would match forever.

    Returns:
        Parser producing the collected values (possibly empty)
    """

    def parse_many(cursor: Cursor) -> Outcome[tuple[T, ...]]:
        values: list[T] = []
        while True:
            outcome = parser(cursor)
            if isinstance(outcome, NoMatch):
                break
            values.append(outcome.value)
            if outcome.cursor.offset == cursor.offset:
                break
            cursor = outcome.cursor
        return match(cursor, tuple(values))

    return parse_many


def sequence(parsers: Sequence[Parser[Any]]) -> Parser[tuple[Any, ...]]:
    """Concatenation: apply parsers one after another.

    Each parser starts where the previous one stopped. The first failure is
    returned exactly as produced (same label, same cursor) and the remaining
    parsers are not tried.

    Returns:
        Parser producing one value per parser, in order
    """
    steps = tuple(parsers)

    def parse_sequence(cursor: Cursor) -> Outcome[tuple[Any, ...]]:
        values: list[Any] = []
        for parser in steps:
            outcome = parser(cursor)
            if isinstance(outcome, NoMatch):
                return outcome
            values.append(outcome.value)
            cursor = outcome.cursor
        return match(cursor, tuple(values))

    return parse_sequence


def transform[A, B](parser: Parser[A], fn: Callable[[A], B]) -> Parser[B]:
    """Map the value of a successful match through ``fn``.

    The cursor of the match is kept as is and failures pass through
    untouched. ``fn`` must be total: there is no way for it to turn a match
    into a failure. Validate by composing narrower parsers upstream instead.
    """

    def parse_transform(cursor: Cursor) -> Outcome[B]:
        outcome = parser(cursor)
        if isinstance(outcome, NoMatch):
            return outcome
        return match(outcome.cursor, fn(outcome.value))

    return parse_transform


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Build the wrapped parser on first use.

    Lets a rule refer to a parser that is assigned later in the module:

        expr = lazy(lambda: any_of([call, number]))
    """
    built: list[Parser[T]] = []

    def parse_lazy(cursor: Cursor) -> Outcome[T]:
        if not built:
            built.append(factory())
        return built[0](cursor)

    return parse_lazy


def traced[T](parser: Parser[T], name: str) -> Parser[T]:
    """Log each attempt of ``parser`` at DEBUG level under ``name``.

    The outcome is returned unchanged.
    """

    def parse_traced(cursor: Cursor) -> Outcome[T]:
        if not logger.isEnabledFor(logging.DEBUG):
            return parser(cursor)
        logger.debug("trying %s at %d", name, cursor.offset)
        outcome = parser(cursor)
        if isinstance(outcome, Match):
            logger.debug("%s matched %d..%d", name, cursor.offset, outcome.cursor.offset)
        else:
            logger.debug("%s failed at %d, expected %s", name, outcome.offset, outcome.expected)
        return outcome

    return parse_traced
