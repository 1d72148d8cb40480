#!/usr/bin/env python3
"""Call-Expression Parser Fuzzer (Atheris).

Targets: combiparse.calls.parser.CallExprParser,
         combiparse.calls.serializer.serialize

Invariants:
- Parsing never raises anything but ParseError, DepthLimitExceededError
  or ValueError (size limit)
- ParseError offsets lie within the source
- A successful strict parse of finite numbers serializes to source that
  parses back to an equal AST

Usage:
    python fuzz_atheris/fuzz_calls.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import math
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("combiparse").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["combiparse"]):
    from combiparse.calls import Call, CallExprParser, Expr, parse, serialize
    from combiparse.diagnostics import DepthLimitExceededError, ParseError

# Bias generated text towards the grammar's own characters
_ALPHABET = "FooBar0123456789(),+-. x"

_PERMISSIVE = CallExprParser()
_STRICT = CallExprParser(strict=True)


def _all_finite(expr: Expr) -> bool:
    if isinstance(expr, Call):
        return all(_all_finite(arg) for arg in expr.args)
    return math.isfinite(expr)


def _finding(msg: str) -> None:
    _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse arbitrary text and check round-trips."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    if fdp.ConsumeBool():
        length = fdp.ConsumeIntInRange(0, 256)
        source = "".join(
            _ALPHABET[fdp.ConsumeIntInRange(0, len(_ALPHABET) - 1)] for _ in range(length)
        )
    else:
        source = fdp.ConsumeUnicodeNoSurrogates(512)

    parser = _STRICT if fdp.ConsumeBool() else _PERMISSIVE

    try:
        expr = parser.parse(source)
    except ParseError as e:
        if not 0 <= e.offset <= len(source):
            _finding(f"ParseError offset {e.offset} outside source of length {len(source)}")
        return
    except (DepthLimitExceededError, ValueError):
        return
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

    if parser is _STRICT and _all_finite(expr):
        reparsed = parse(serialize(expr))
        if reparsed != expr:
            _finding(f"Round-trip mismatch for {source!r}: {expr!r} != {reparsed!r}")


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
