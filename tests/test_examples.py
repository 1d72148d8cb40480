"""Smoke tests for the scripts under examples/."""

from __future__ import annotations

import pytest

from combiparse import Cursor

from examples import quickstart, sentence_grammar


class TestSentenceGrammar:
    """Test examples/sentence_grammar.py."""

    def test_run_reports_match_and_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """run() prints the consumed length or the furthest failure."""
        sentence_grammar.run("s", sentence_grammar.cow_sentence, "cow says moo")
        sentence_grammar.run("s", sentence_grammar.cow_sentence, "cow says woof")

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("[OK]   s('cow says moo')")
        assert lines[0].endswith("(consumed 12)")
        assert lines[1].startswith("[FAIL] s('cow says woof')")

    def test_chorus_stops_at_first_bad_sentence(self) -> None:
        """many() keeps the sentences before the one that fails."""
        outcome = sentence_grammar.chorus(Cursor("cow says moo. cat says meow. dog barks", 0))

        assert outcome
        assert outcome.value == (("cow", "moo"), ("cat", "meow"))

    def test_main(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The script runs end to end."""
        sentence_grammar.main()

        assert "[FAIL]" in capsys.readouterr().out


class TestQuickstart:
    """Test examples/quickstart.py."""

    def test_evaluator(self) -> None:
        """The visitor example evaluates arithmetic calls."""
        assert quickstart.Evaluator().visit(quickstart.parse("Add(1,Mul(2,3),Neg(4))")) == 3.0

    def test_main(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The script runs end to end."""
        quickstart.main()

        out = capsys.readouterr().out
        assert "Parse error, expected ) at char 7" in out
        assert "Add(1,Mul(2,3),Neg(4)) = 3.0" in out
