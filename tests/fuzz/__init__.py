"""Fuzz testing for combiparse.

This package contains intensive Hypothesis properties for the call-expression
parser and serializer, skipped in normal runs (see tests/conftest.py).

Python 3.13+.
"""
