"""Call-expression grammar.

    identifier     := [A-Za-z][A-Za-z0-9]*
    number_literal := [+-]?[0-9]+(\\.[0-9]*)?
    trailing_arg   := "," expr
    argument_list  := expr trailing_arg*
    call           := identifier "(" argument_list? ")"
    expr           := call | number_literal

No whitespace is allowed anywhere. ``expr`` and ``call`` refer to each other,
so both go through the module's RuleSet. The rules are built once at import
time and shared read-only afterwards.
"""

import re

from combiparse.syntax.parser import (
    RuleSet,
    any_of,
    literal,
    many,
    optional,
    regex,
    sequence,
    transform,
)

from .ast import Call, Expr

__all__ = [
    "argument_list",
    "call",
    "expr",
    "grammar",
    "identifier",
    "number_literal",
    "trailing_arg",
]

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]*)?")

grammar = RuleSet("calls")


def _build_call(parts: tuple[str, str, tuple[Expr, ...] | None, str]) -> Call:
    target, _open, args, _close = parts
    return Call(target=target, args=args if args is not None else ())


identifier = grammar.define("identifier", regex(IDENTIFIER_PATTERN, "identifier"))

number_literal = grammar.define(
    "number_literal",
    transform(regex(NUMBER_PATTERN, "number"), float),
)

trailing_arg = grammar.define(
    "trailing_arg",
    transform(sequence([literal(","), grammar.ref("expr")]), lambda parts: parts[1]),
)

argument_list = grammar.define(
    "argument_list",
    transform(
        sequence([grammar.ref("expr"), many(trailing_arg)]),
        lambda parts: (parts[0], *parts[1]),
    ),
)

call = grammar.define(
    "call",
    transform(
        sequence([identifier, literal("("), optional(argument_list), literal(")")]),
        _build_call,
    ),
)

expr = grammar.define("expr", any_of([call, number_literal]))

grammar.check_complete()
