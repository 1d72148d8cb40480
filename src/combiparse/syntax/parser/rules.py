"""Named grammar rules with deferred references.

Recursive grammars need a rule to mention another rule that does not exist
yet (``expr`` uses ``call``, ``call`` uses ``expr``). A RuleSet hands out
references by name; a reference looks the rule up when it is CALLED, not
when it is created, so definition order does not matter.

A list rule can use ``item`` before ``item`` is defined:

    rules = RuleSet("lists")
    item = rules.ref("item")
    rules.define("list", sequence([literal("["), optional(item), literal("]")]))
    rules.define("item", any_of([rules.ref("list"), regex(r"[0-9]+", "digit")]))
"""

import logging

from combiparse.syntax.cursor import Cursor, Outcome, Parser
from combiparse.syntax.parser.combinators import traced

__all__ = ["RuleSet", "UndefinedRuleError"]

logger = logging.getLogger(__name__)


class UndefinedRuleError(LookupError):
    """A rule was referenced but never defined.

    This is a grammar construction mistake, never a parse failure.
    """


class RuleSet:
    """Registry of named, mutually referential parsers.

    Rules are meant to be defined once, at import time, and shared read-only
    afterwards. References resolve on every call through a dict lookup.

    Attributes:
        name: Grammar name, used in log and error messages
        trace: Wrap every reference with traced() for DEBUG logging
    """

    __slots__ = ("_referenced", "_rules", "name", "trace")

    def __init__(self, name: str, *, trace: bool = False) -> None:
        self.name = name
        self.trace = trace
        self._rules: dict[str, Parser[object]] = {}
        self._referenced: set[str] = set()

    def __contains__(self, rule_name: object) -> bool:
        return rule_name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.name!r}, rules={sorted(self._rules)!r})"

    def names(self) -> tuple[str, ...]:
        """Defined rule names, in definition order."""
        return tuple(self._rules)

    def ref[T](self, rule_name: str) -> Parser[T]:
        """Reference to the rule installed under ``rule_name``.

        The lookup happens at call time.

        Raises:
            UndefinedRuleError: When the reference is called and no rule
                named ``rule_name`` has been defined
        """
        self._referenced.add(rule_name)
        rules = self._rules

        def parse_rule(cursor: Cursor) -> Outcome[T]:
            try:
                parser = rules[rule_name]
            except KeyError:
                msg = f"Rule '{rule_name}' is not defined in grammar '{self.name}'"
                raise UndefinedRuleError(msg) from None
            return parser(cursor)  # type: ignore[return-value]

        if self.trace:
            return traced(parse_rule, f"{self.name}.{rule_name}")
        return parse_rule

    def define[T](self, rule_name: str, parser: Parser[T]) -> Parser[T]:
        """Install ``parser`` as rule ``rule_name``.

        Returns:
            A reference to the new rule

        Raises:
            ValueError: If the rule is already defined
        """
        if rule_name in self._rules:
            msg = f"Rule '{rule_name}' is already defined in grammar '{self.name}'"
            raise ValueError(msg)
        self._rules[rule_name] = parser  # type: ignore[assignment]
        logger.debug("Defined rule %s.%s", self.name, rule_name)
        return self.ref(rule_name)

    def check_complete(self) -> None:
        """Verify every referenced rule has been defined.

        Raises:
            UndefinedRuleError: Listing the missing rule names
        """
        missing = sorted(self._referenced - self._rules.keys())
        if missing:
            msg = f"Grammar '{self.name}' references undefined rules: {', '.join(missing)}"
            raise UndefinedRuleError(msg)
