"""Serialize call-expression ASTs.

Three renderings:
- ``serialize``: call-expression source text that parses back to an equal AST
- ``to_dict``: plain dicts and lists, for JSON and other data formats
- ``to_json``: ``to_dict`` dumped with the stdlib json module

Python 3.13+.
"""

import json
import math
from decimal import Decimal
from typing import Any

from combiparse.diagnostics import Diagnostic, ErrorTemplate

from .ast import Call, Expr
from .grammar import IDENTIFIER_PATTERN
from .visitor import ExprVisitor

__all__ = [
    "CallSerializer",
    "SerializationValidationError",
    "serialize",
    "to_dict",
    "to_json",
]


class SerializationValidationError(ValueError):
    """Raised when an AST cannot be rendered as call-expression source.

    Common causes:
    - NaN or infinite numbers (no literal form exists)
    - Call targets that are not identifiers, e.g. ``"1abc"`` or ``"a b"``

    Attributes:
        diagnostic: Structured diagnostic for the failure
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


def _format_number(value: float) -> str:
    """Render a finite float as a number literal the grammar accepts.

    Integral values drop the fraction (``1.0`` -> ``1``). Everything else is
    the shortest round-tripping repr with any exponent expanded, since the
    grammar has no exponent syntax (``1e-07`` -> ``0.0000001``).
    """
    if not math.isfinite(value):
        raise SerializationValidationError(
            ErrorTemplate.serialization_invalid(f"number {value!r} has no literal form")
        )
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        # Decimal keeps repr's digits exactly; "f" expands the exponent.
        text = format(Decimal(text), "f")
    return text


class CallSerializer(ExprVisitor[str]):
    """Converts an Expr back to call-expression source.

    No whitespace is emitted, matching the grammar.

    Usage:
        >>> CallSerializer().serialize(Call("Foo", (Call("Bar", (1.0, 2.5)),)))
        'Foo(Bar(1,2.5))'
    """

    def serialize(self, expr: Expr) -> str:
        """Render ``expr`` as source text.

        Raises:
            SerializationValidationError: If a number is not finite or a
                target is not an identifier
            DepthLimitExceededError: If the tree is nested deeper than max_depth
        """
        return self.visit(expr)

    def visit_Call(self, node: Call) -> str:  # noqa: N802 - stdlib ast naming
        if IDENTIFIER_PATTERN.fullmatch(node.target) is None:
            raise SerializationValidationError(
                ErrorTemplate.serialization_invalid(
                    f"call target {node.target!r} is not an identifier"
                )
            )
        args = ",".join(self.visit(arg) for arg in node.args)
        return f"{node.target}({args})"

    def visit_number(self, value: float) -> str:
        return _format_number(value)


class _DictBuilder(ExprVisitor[Any]):
    """Builds the JSON-ready shape of an Expr."""

    def visit_Call(self, node: Call) -> dict[str, Any]:  # noqa: N802 - stdlib ast naming
        return {"target": node.target, "args": [self.visit(arg) for arg in node.args]}

    def visit_number(self, value: float) -> float:
        return value


def serialize(expr: Expr) -> str:
    """Render ``expr`` as call-expression source.

    Convenience function for CallSerializer.serialize().

    Example:
        >>> serialize(Call("Foo", (1.0, -2.5)))
        'Foo(1,-2.5)'

    Raises:
        SerializationValidationError: If the AST has no source form
    """
    return CallSerializer().serialize(expr)


def to_dict(expr: Expr) -> Any:
    """Convert ``expr`` to plain data.

    Numbers stay floats; calls become ``{"target": str, "args": [...]}``.

    Example:
        >>> to_dict(Call("Foo", (1.0,)))
        {'target': 'Foo', 'args': [1.0]}
    """
    return _DictBuilder().visit(expr)


def to_json(expr: Expr, indent: int | None = 2) -> str:
    """Dump ``to_dict(expr)`` as JSON text.

    Args:
        expr: Expression to dump
        indent: json.dumps indentation (None for a single line)

    Raises:
        SerializationValidationError: If a number is infinite or NaN, which
            strict JSON cannot represent
    """
    try:
        return json.dumps(to_dict(expr), indent=indent, allow_nan=False)
    except ValueError as e:
        raise SerializationValidationError(
            ErrorTemplate.serialization_invalid(f"{e} in JSON output")
        ) from e
