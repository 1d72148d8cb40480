"""combiparse - Parser combinators with a call-expression language.

Parsers are plain functions from an immutable Cursor to an Outcome, either
a Match carrying a value and the cursor after it, or a NoMatch carrying an
expected-label and the cursor where matching failed. Grammars are built by
combining a handful of primitives.

Public API:
    parse - Parse call-expression text to an AST (raises ParseError)
    CallExprParser - Configurable call-expression parser (strict mode, limits)
    Cursor, Match, NoMatch - Parse position and outcomes
    literal, regex, end_of_input - Primitive parsers
    any_of, optional, many, sequence, transform, lazy, traced - Combinators
    RuleSet - Named rules for mutually recursive grammars
    Call, Expr, ExprVisitor - Call-expression AST and visitor
    serialize, to_dict, to_json - AST renderings

Exceptions:
    CombiparseError - Base exception class
    ParseError - Input did not match the grammar
    DepthLimitExceededError - Nesting limit exceeded
    UndefinedRuleError - Grammar referenced a rule it never defined
    SerializationValidationError - AST has no source form

Submodules:
    combiparse.syntax - Generic parsing toolkit
    combiparse.calls - Call-expression grammar, AST and serializers
    combiparse.diagnostics - Diagnostic codes, templates and formatting
"""

from .calls import (
    Call,
    CallExprParser,
    Expr,
    ExprVisitor,
    SerializationValidationError,
    parse,
    serialize,
    to_dict,
    to_json,
)
from .diagnostics import CombiparseError, DepthLimitExceededError, ParseError
from .syntax import (
    Cursor,
    Match,
    NoMatch,
    Outcome,
    Parser,
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

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combiparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Call",
    "CallExprParser",
    "CombiparseError",
    "Cursor",
    "DepthLimitExceededError",
    "Expr",
    "ExprVisitor",
    "Match",
    "NoMatch",
    "Outcome",
    "ParseError",
    "Parser",
    "RuleSet",
    "SerializationValidationError",
    "UndefinedRuleError",
    "__version__",
    "any_of",
    "end_of_input",
    "lazy",
    "literal",
    "many",
    "optional",
    "parse",
    "regex",
    "sequence",
    "serialize",
    "to_dict",
    "to_json",
    "traced",
    "transform",
]
