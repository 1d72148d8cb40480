"""Visitor pattern for call-expression traversal.

Follows the stdlib ast.NodeVisitor naming convention: the method for Call
nodes is ``visit_Call``. Numbers are plain floats rather than node classes,
so they dispatch to ``visit_number``.

Python 3.13+.
"""

from combiparse.constants import MAX_DEPTH, VISITOR_FRAMES_PER_LEVEL
from combiparse.core.depth_guard import DepthGuard, depth_clamp

from .ast import Call, Expr, is_number

__all__ = ["ExprVisitor"]


class ExprVisitor[T = Expr]:
    """Base visitor for call-expression trees.

    ``generic_visit`` visits every argument of a call and returns the call
    unchanged. Override ``visit_Call`` or ``visit_number`` to compute
    something else.

    Example:
        >>> class CallCounter(ExprVisitor[int]):
        ...     def visit_Call(self, node: Call) -> int:
        ...         return 1 + sum(self.visit(arg) for arg in node.args)
        ...     def visit_number(self, value: float) -> int:
        ...         return 0
        >>> CallCounter().visit(Call("Foo", (Call("Bar"), 1.0)))
        2
    """

    __slots__ = ("_depth_guard",)

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH from constants).
                      Clamped so traversal stays within the interpreter
                      recursion limit.
        """
        requested_depth = max_depth if max_depth is not None else MAX_DEPTH
        effective_max_depth = depth_clamp(
            requested_depth, frames_per_level=VISITOR_FRAMES_PER_LEVEL
        )
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)

    @property
    def max_depth(self) -> int:
        """Maximum traversal depth after clamping."""
        return self._depth_guard.max_depth

    def visit(self, node: Expr) -> T:
        """Dispatch ``node`` to visit_Call or visit_number.

        Raises:
            DepthLimitExceededError: If the tree is nested deeper than max_depth
            TypeError: If node is neither a Call nor a number
        """
        if isinstance(node, Call):
            # Only calls nest; one guard level per call matches one level of
            # parenthesis nesting in the source.
            with self._depth_guard:
                return self.visit_Call(node)
        if is_number(node):
            return self.visit_number(float(node))
        msg = f"Not a call expression node: {type(node).__name__}"
        raise TypeError(msg)

    def visit_Call(self, node: Call) -> T:  # noqa: N802 - stdlib ast naming
        return self.generic_visit(node)

    def visit_number(self, value: float) -> T:
        return value  # type: ignore[return-value]  # T defaults to Expr

    def generic_visit(self, node: Call) -> T:
        """Visit each argument, then return the node itself."""
        for arg in node.args:
            self.visit(arg)
        return node  # type: ignore[return-value]  # T defaults to Expr
