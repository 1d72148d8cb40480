"""Sentence Grammar Example - Building a Grammar From Primitives.

A three-word sentence grammar ("cow says moo") built with literal() and
sequence() only, then extended with choice and repetition to show how
failures report the furthest position reached.

Python 3.13+.
"""

from __future__ import annotations

from combiparse import Cursor, Match, Parser, any_of, literal, many, sequence, transform

SPACE = literal(" ")

cow_sentence = sequence([literal("cow"), SPACE, literal("says"), SPACE, literal("moo")])

animal = any_of([literal("cow"), literal("dog"), literal("cat")])
sound = any_of([literal("moo"), literal("woof"), literal("meow")])
sentence = transform(
    sequence([animal, SPACE, literal("says"), SPACE, sound]),
    lambda parts: (parts[0], parts[4]),
)
chorus = many(transform(sequence([sentence, literal(". ")]), lambda parts: parts[0]))


def run(name: str, parser: Parser[object], text: str) -> None:
    """Run a parser on text and print the outcome."""
    match parser(Cursor(text, 0)):
        case Match(value=value, cursor=cursor):
            print(f"[OK]   {name}({text!r}) -> {value!r} (consumed {cursor.offset})")
        case failure:
            print(f"[FAIL] {name}({text!r}) -> {failure.format_error()}")


def main() -> None:
    """Run the sentence examples."""
    print("=" * 60)
    print("Fixed sentence")
    print("=" * 60)
    run("cow_sentence", cow_sentence, "cow says moo")
    run("cow_sentence", cow_sentence, "cow says woof")

    print()
    print("=" * 60)
    print("Choice and repetition")
    print("=" * 60)
    run("sentence", sentence, "dog says woof")
    run("sentence", sentence, "cat says")
    run("chorus", chorus, "cow says moo. cat says meow. dog barks")


if __name__ == "__main__":
    main()
