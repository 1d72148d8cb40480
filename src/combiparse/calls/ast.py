"""Call-expression AST.

An expression is either a number (a plain Python float) or a call of a
named target with zero or more argument expressions.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

__all__ = ["Call", "Expr", "is_number"]


@dataclass(frozen=True, slots=True)
class Call:
    """Function call: ``Foo(1, Bar())``.

    Structural equality: two calls are equal when their targets are equal
    and their argument tuples are equal element-wise.

    Attributes:
        target: Identifier matching [A-Za-z][A-Za-z0-9]*
        args: Argument expressions, in source order
    """

    target: str
    args: tuple["Expr", ...] = ()

    @staticmethod
    def guard(node: object) -> TypeIs["Call"]:
        """Type guard for Call."""
        return isinstance(node, Call)


type Expr = Call | float


def is_number(node: object) -> TypeIs[float]:
    """Type guard for number expressions.

    bool is an int subclass; it is not a number expression.
    """
    return isinstance(node, float | int) and not isinstance(node, bool)
