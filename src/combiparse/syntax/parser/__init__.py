"""Parser construction toolkit.

Module Organization:
- primitives.py: The only parsers that read raw input (literal, regex, end_of_input)
- combinators.py: Choice, optional, repetition, concatenation, transform
- rules.py: RuleSet for named, mutually recursive rules

Public API:
    literal, regex, end_of_input: Primitive parser factories
    any_of, optional, many, sequence, transform: Core combinators
    lazy, traced: Deferred construction and DEBUG tracing
    RuleSet, UndefinedRuleError: Named rule registry
"""

from combiparse.syntax.parser.combinators import (
    any_of,
    lazy,
    many,
    optional,
    sequence,
    traced,
    transform,
)
from combiparse.syntax.parser.primitives import end_of_input, literal, regex
from combiparse.syntax.parser.rules import RuleSet, UndefinedRuleError

__all__ = [
    "RuleSet",
    "UndefinedRuleError",
    "any_of",
    "end_of_input",
    "lazy",
    "literal",
    "many",
    "optional",
    "regex",
    "sequence",
    "traced",
    "transform",
]
