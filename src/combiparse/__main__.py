"""Parse call expressions from the command line.

Each positional argument is parsed as one expression. Without positional
arguments, expressions are read from stdin one per line until EOF, so the
tool can sit behind a prompt and parse every line typed into it.

Usage:
    combiparse "Foo(Bar(1,2.5))"
    combiparse --format source "Foo(1.0,+2)"
    echo "Foo(" | combiparse --context
    combiparse --error-format json "Foo(1,2"
    python -m combiparse --strict "1)"

Exit Codes:
    0   Every input parsed
    1   At least one input failed to parse

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence

from combiparse.calls import CallExprParser, serialize, to_json
from combiparse.diagnostics import (
    DepthLimitExceededError,
    DiagnosticFormatter,
    OutputFormat,
    ParseError,
)

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combiparse",
        description="Parse call expressions and print their AST.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the JSON AST of an expression:
  combiparse "Foo(Bar(1,2,3))"

  # Normalize expressions read from stdin:
  printf 'Foo(1.0)\\nBar(+2)\\n' | combiparse --format source
""",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        metavar="EXPR",
        help="Expressions to parse (default: read lines from stdin)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject text after the expression",
    )
    parser.add_argument(
        "--format",
        choices=("json", "source"),
        default="json",
        help="Output JSON AST (default) or canonical source",
    )
    parser.add_argument(
        "--context",
        action="store_true",
        help="Show the failing line with a caret under the error position",
    )
    parser.add_argument(
        "--error-format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Render errors as structured diagnostics (default: plain message)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log parser activity at DEBUG level to stderr",
    )
    return parser


def _report(error: Exception, formatter: DiagnosticFormatter | None) -> None:
    diagnostic = getattr(error, "diagnostic", None)
    if formatter is None or diagnostic is None:
        print(str(error), file=sys.stderr)
    else:
        print(formatter.format(diagnostic), file=sys.stderr)


def _parse_one(
    parser: CallExprParser,
    text: str,
    *,
    output_format: str,
    context: bool,
    formatter: DiagnosticFormatter | None = None,
) -> bool:
    """Parse and print one expression. Returns True on success."""
    try:
        expr = parser.parse(text)
        rendered = serialize(expr) if output_format == "source" else to_json(expr)
    except ParseError as e:
        _report(e, formatter)
        if context and e.failure is not None:
            print(e.failure.format_with_context(), file=sys.stderr)
        return False
    # ValueError covers oversized sources and numbers with no literal form
    except (DepthLimitExceededError, ValueError) as e:
        _report(e, formatter)
        return False

    print(rendered)
    return True


def _stdin_lines() -> Iterable[str]:
    for line in sys.stdin:
        yield line.rstrip("\r\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )

    parser = CallExprParser(strict=args.strict)
    formatter = None
    if args.error_format is not None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat(args.error_format),
            color=sys.stderr.isatty(),
        )
    inputs: Iterable[str] = args.expressions if args.expressions else _stdin_lines()

    failures = 0
    for text in inputs:
        ok = _parse_one(
            parser, text, output_format=args.format, context=args.context, formatter=formatter
        )
        if not ok:
            failures += 1

    logger.debug("Finished with %d failure(s)", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
