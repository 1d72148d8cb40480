"""Call-expression language built on the combinator toolkit.

Expressions are numbers (``1``, ``-2``, ``3.25``) and calls of named
targets with comma separated arguments (``Foo(1,Bar())``).

Public API:
    parse: Parse text into an Expr (raises ParseError)
    CallExprParser: Parser with strictness and input limits
    Call, Expr: AST types
    ExprVisitor: Visitor base class
    serialize, to_dict, to_json: AST renderings

Python 3.13+.
"""

from .ast import Call, Expr, is_number
from .parser import CallExprParser, parse
from .serializer import (
    CallSerializer,
    SerializationValidationError,
    serialize,
    to_dict,
    to_json,
)
from .visitor import ExprVisitor

__all__ = [
    "Call",
    "CallExprParser",
    "CallSerializer",
    "Expr",
    "ExprVisitor",
    "SerializationValidationError",
    "is_number",
    "parse",
    "serialize",
    "to_dict",
    "to_json",
]
