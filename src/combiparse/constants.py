"""Shared constants for combiparse.

Centralized configuration used by the parser layer, the call-expression
grammar and the AST tooling. Placing constants here avoids circular imports
between ``syntax``, ``calls`` and ``diagnostics``.

Constants are grouped by domain:
- Depth limits: recursion protection for parsing and AST traversal
- Input limits: size bound for sources handed to the entry point
- Failure labels: expected-labels synthesized by the library itself

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    "VISITOR_FRAMES_PER_LEVEL",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Failure labels
    "NO_ALTERNATIVE_LABEL",
    "END_OF_INPUT_LABEL",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# One limit is shared by:
#
# 1. PARSER (calls/parser.py):
#    Maximum call nesting accepted by the entry point. Checked by a linear
#    pre-scan so deeply nested input fails with DepthLimitExceededError
#    instead of RecursionError half way through the combinator stack.
#
# 2. VISITOR / SERIALIZER (calls/visitor.py, calls/serializer.py):
#    Maximum AST depth walked, for trees built programmatically.
#
# ============================================================================

# Unified maximum nesting depth.
MAX_DEPTH: int = 64

# Interpreter frames consumed by one level of call nesting in the grammar
# (rule references, choice, transform, sequence, optional, repetition of
# trailing arguments).
# Used to clamp the nesting limit against sys.getrecursionlimit().
FRAMES_PER_NESTING_LEVEL: int = 14

# Interpreter frames consumed by one level of ExprVisitor recursion
# (visit and visit_Call plus a generator over the arguments).
VISITOR_FRAMES_PER_LEVEL: int = 3

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (1 MiB).
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# FAILURE LABELS
# ============================================================================

# Reported by any_of() over an empty alternative list.
NO_ALTERNATIVE_LABEL: str = "no alternative matched"

# Reported by end_of_input() when text remains after the cursor.
END_OF_INPUT_LABEL: str = "end of input"
