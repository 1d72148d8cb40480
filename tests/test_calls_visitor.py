"""Tests for calls.visitor and calls.ast."""

from __future__ import annotations

import sys

import pytest
from hypothesis import event, given

from combiparse.calls import Call, Expr, ExprVisitor, is_number, parse
from combiparse.constants import VISITOR_FRAMES_PER_LEVEL
from combiparse.diagnostics import DepthLimitExceededError

from tests.strategies import expressions


class CallCounter(ExprVisitor[int]):
    """Counts Call nodes."""

    def visit_Call(self, node: Call) -> int:  # noqa: N802
        return 1 + sum(self.visit(arg) for arg in node.args)

    def visit_number(self, value: float) -> int:
        return 0


class TargetCollector(ExprVisitor):
    """Collects targets in pre-order using generic_visit for traversal."""

    def __init__(self) -> None:
        super().__init__()
        self.targets: list[str] = []

    def visit_Call(self, node: Call) -> Expr:  # noqa: N802
        self.targets.append(node.target)
        return self.generic_visit(node)


def _depth(expr: Expr) -> int:
    if isinstance(expr, Call):
        return 1 + max((_depth(arg) for arg in expr.args), default=0)
    return 0


class TestAst:
    """Test Call and the type guards."""

    def test_structural_equality(self) -> None:
        """Calls are equal when targets and arguments are equal."""
        assert Call("Foo", (1.0, Call("Bar"))) == Call("Foo", (1.0, Call("Bar", ())))
        assert Call("Foo", (1.0,)) != Call("Foo", (2.0,))
        assert Call("Foo") != Call("Bar")

    def test_immutable(self) -> None:
        """Call is frozen."""
        with pytest.raises(AttributeError):
            Call("Foo").target = "Bar"  # type: ignore[misc]

    def test_guards(self) -> None:
        """Call.guard and is_number distinguish node kinds."""
        assert Call.guard(Call("Foo"))
        assert not Call.guard(1.0)
        assert is_number(1.0)
        assert is_number(1)
        assert not is_number(True)
        assert not is_number(Call("Foo"))


class TestExprVisitor:
    """Test dispatch and traversal."""

    def test_default_visit_returns_node(self) -> None:
        """The base visitor returns nodes unchanged."""
        tree = parse("Foo(1,Bar(2))")

        assert ExprVisitor().visit(tree) == tree
        assert ExprVisitor().visit(3.0) == 3.0

    def test_dispatch(self) -> None:
        """visit_Call and visit_number are dispatched by node kind."""
        assert CallCounter().visit(parse("Foo(1,Bar(2),Baz())")) == 3
        assert CallCounter().visit(1.0) == 0

    def test_generic_visit_traverses(self) -> None:
        """generic_visit visits arguments in order."""
        collector = TargetCollector()
        collector.visit(parse("A(B(C()),D())"))

        assert collector.targets == ["A", "B", "C", "D"]

    def test_rejects_foreign_nodes(self) -> None:
        """Values that are not expressions raise TypeError."""
        with pytest.raises(TypeError, match="str"):
            ExprVisitor().visit("Foo")  # type: ignore[arg-type]

    def test_depth_guard(self) -> None:
        """Deep trees raise DepthLimitExceededError."""
        tree: Expr = 1.0
        for _ in range(10):
            tree = Call("F", (tree,))

        assert CallCounter(max_depth=10).visit(tree) == 10
        with pytest.raises(DepthLimitExceededError):
            CallCounter(max_depth=9).visit(tree)

    def test_guard_released_after_error(self) -> None:
        """A visitor stays usable after a depth error."""
        counter = CallCounter(max_depth=2)
        with pytest.raises(DepthLimitExceededError):
            counter.visit(Call("A", (Call("B", (Call("C"),)),)))

        assert counter.visit(Call("A", (Call("B"),))) == 2

    def test_parsed_tree_at_nesting_limit(self) -> None:
        """Trees at the parser's nesting limit stay within the visitor's."""
        source = "F(" * 64 + "1" + ")" * 64

        assert CallCounter().visit(parse(source)) == 64

    def test_max_depth_clamped_to_recursion_budget(self) -> None:
        """Requested depths are clamped by the frames one visit level uses."""
        limit = sys.getrecursionlimit()

        assert CallCounter().max_depth == 64
        assert CallCounter(max_depth=limit).max_depth == (limit - 50) // VISITOR_FRAMES_PER_LEVEL

    def test_clamped_limit_raises_before_recursion_error(self) -> None:
        """A tree as deep as the recursion limit fails with a typed error."""
        limit = sys.getrecursionlimit()
        tree: Expr = 1.0
        for _ in range(limit):
            tree = Call("F", (tree,))

        with pytest.raises(DepthLimitExceededError):
            CallCounter(max_depth=limit).visit(tree)

    @given(expr=expressions())
    def test_counts_match_structure(self, expr: Expr) -> None:
        """Property: the counter agrees with a direct recursive count."""

        def count(node: Expr) -> int:
            if isinstance(node, Call):
                return 1 + sum(count(arg) for arg in node.args)
            return 0

        event(f"depth={_depth(expr)}")
        assert CallCounter().visit(expr) == count(expr)
