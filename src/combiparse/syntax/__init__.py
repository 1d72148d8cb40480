"""Generic parsing layer: cursor model, primitives and combinators.

Separate from the call-expression grammar so other grammars can be built on
the same toolkit.

Python 3.13+.
"""

from .cursor import Cursor, Match, NoMatch, Outcome, Parser, match, no_match
from .parser import (
    RuleSet,
    UndefinedRuleError,
    any_of,
    end_of_input,
    lazy,
    literal,
    many,
    optional,
    regex,
    sequence,
    traced,
    transform,
)

__all__ = [
    "Cursor",
    "Match",
    "NoMatch",
    "Outcome",
    "Parser",
    "RuleSet",
    "UndefinedRuleError",
    "any_of",
    "end_of_input",
    "lazy",
    "literal",
    "many",
    "match",
    "no_match",
    "optional",
    "regex",
    "sequence",
    "traced",
    "transform",
]
