"""Quickstart - Parsing Call Expressions.

Demonstrates the call-expression entry points:

1. Parse text to an AST
2. Handle parse errors with positions and context
3. Strict mode and input limits
4. Serialize the AST back to source or JSON
5. Write a visitor over the AST

Python 3.13+.
"""

from __future__ import annotations

from combiparse import (
    Call,
    CallExprParser,
    DepthLimitExceededError,
    ExprVisitor,
    ParseError,
    parse,
    serialize,
    to_json,
)


def example_1_parsing() -> None:
    """Parse text and inspect the AST."""
    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    for source in ["1", "Foo()", "Foo(Bar())", "Foo(Bar(1,2,3))"]:
        print(f"{source!r:20} -> {parse(source)!r}")


def example_2_errors() -> None:
    """Show how failures are reported."""
    print("\n" + "=" * 60)
    print("Example 2: Parse errors")
    print("=" * 60)

    try:
        parse("Foo(1,2")
    except ParseError as e:
        print(f"[ERROR] {e}")
        print(f"        expected={e.expected!r} offset={e.offset}")
        print(e.format_error())
        if e.failure is not None:
            print(e.failure.format_with_context())


def example_3_strict_and_limits() -> None:
    """Strict mode rejects trailing input; limits reject hostile input."""
    print("\n" + "=" * 60)
    print("Example 3: Strict mode and limits")
    print("=" * 60)

    print(f"permissive: {parse('Foo())')!r}")
    try:
        CallExprParser(strict=True).parse("Foo())")
    except ParseError as e:
        print(f"strict:     {e}")

    try:
        parse("F(" * 1000)
    except DepthLimitExceededError as e:
        print(f"nesting:    {e}")


def example_4_serialization() -> None:
    """Render the AST as canonical source and as JSON."""
    print("\n" + "=" * 60)
    print("Example 4: Serialization")
    print("=" * 60)

    expr = parse("Add(+1.50,Mul(2.,3))")
    print(f"source: {serialize(expr)}")
    print(f"json:\n{to_json(expr)}")


class Evaluator(ExprVisitor[float]):
    """Evaluates Add/Mul/Neg calls."""

    def visit_Call(self, node: Call) -> float:  # noqa: N802
        args = [self.visit(arg) for arg in node.args]
        match node.target:
            case "Add":
                return sum(args)
            case "Mul":
                result = 1.0
                for arg in args:
                    result *= arg
                return result
            case "Neg" if len(args) == 1:
                return -args[0]
        msg = f"Unknown function {node.target}/{len(args)}"
        raise ValueError(msg)

    def visit_number(self, value: float) -> float:
        return value


def example_5_visitor() -> None:
    """Evaluate an expression with a visitor."""
    print("\n" + "=" * 60)
    print("Example 5: Visitor")
    print("=" * 60)

    source = "Add(1,Mul(2,3),Neg(4))"
    print(f"{source} = {Evaluator().visit(parse(source))}")


def main() -> None:
    """Run all examples."""
    example_1_parsing()
    example_2_errors()
    example_3_strict_and_limits()
    example_4_serialization()
    example_5_visitor()


if __name__ == "__main__":
    main()
