import re
import threading
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from inflector.Logging import get_logger

logger = get_logger(__name__)

Matcher = Union[str, re.Pattern]

SCOPES = ("plurals", "singulars", "uncountables")


class Rule(NamedTuple):
    """
    A single inflection rule.

    A ``str`` matcher is a literal, case-sensitive suffix that is replaced as a
    whole. A compiled pattern is substituted once with ``replacement`` as the
    template, so ``\\1`` style group references work.
    """

    matcher: Matcher
    replacement: str

    def apply(self, word: str) -> Tuple[str, bool]:
        """Return ``(result, matched)`` for this rule against ``word``."""
        if isinstance(self.matcher, str):
            if word.endswith(self.matcher):
                return word[: len(word) - len(self.matcher)] + self.replacement, True
            return word, False

        result, count = self.matcher.subn(self.replacement, word, count=1)
        return result, count > 0


def apply_inflections(
    word: str, rules: Sequence[Rule], uncountables: Iterable[str] = ()
) -> str:
    """
    Apply the first matching rule of ``rules`` to ``word``.

    Empty and uncountable words are returned untouched, as is any word no rule
    matches.
    """
    if not word or word.lower() in uncountables:
        return word

    for rule in rules:
        result, matched = rule.apply(word)
        if matched:
            return result

    return word


def irregular_rules(
    singular: str, plural: str
) -> Tuple[List[Rule], List[Rule]]:
    """
    Derive the rules for an irregular singular/plural pair.

    Args:
        singular: Singular form, e.g. "person"
        plural: Plural form, e.g. "people"

    Returns:
        tuple: (plural_rules, singular_rules)
            - one case-insensitive rule each when both forms start with the same
              letter; the first letter is captured so the input's case survives
            - otherwise two rules each, for an upper- and a lower-case first
              letter, with the rest of the word matched case-insensitively
    """
    if not singular or not plural:
        raise ValueError("Irregular inflections need a non-empty singular and plural")

    s_head, s_tail = singular[0], singular[1:]
    p_head, p_tail = plural[0], plural[1:]

    if s_head.casefold() == p_head.casefold():
        plural_rules = [
            Rule(
                re.compile(
                    "(%s)%s$" % (re.escape(s_head), re.escape(s_tail)), re.IGNORECASE
                ),
                r"\g<1>" + p_tail.replace("\\", r"\\"),
            )
        ]
        singular_rules = [
            Rule(
                re.compile(
                    "(%s)%s$" % (re.escape(p_head), re.escape(p_tail)), re.IGNORECASE
                ),
                r"\g<1>" + s_tail.replace("\\", r"\\"),
            )
        ]
        return plural_rules, singular_rules

    plural_rules = []
    singular_rules = []
    for case in (str.upper, str.lower):
        plural_rules.append(
            Rule(
                re.compile(
                    "%s(?i:%s)$" % (re.escape(case(s_head)), re.escape(s_tail))
                ),
                (case(p_head) + p_tail).replace("\\", r"\\"),
            )
        )
        singular_rules.append(
            Rule(
                re.compile(
                    "%s(?i:%s)$" % (re.escape(case(p_head)), re.escape(p_tail))
                ),
                (case(s_head) + s_tail).replace("\\", r"\\"),
            )
        )
    return plural_rules, singular_rules


class Inflections:
    """
    Registry of pluralization and singularization rules.

    New rules are added at the front of their list, so the most recently
    registered rule is the first one tried. This lets callers layer their own
    vocabulary over the defaults:

        >>> with inflections:
        ...     inflections.add_irregular("octopus", "octopodes")
        ...     inflections.add_uncountable("equipment")

    Mutations replace the underlying list or set instead of editing it, so a
    reader that already took a snapshot is never affected by a concurrent
    writer.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._plurals: List[Rule] = []
        self._singulars: List[Rule] = []
        self._uncountables: frozenset = frozenset()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, *args):
        self._lock.release()

    def __repr__(self):
        return "<Inflections plurals=%d singulars=%d uncountables=%d>" % (
            len(self._plurals),
            len(self._singulars),
            len(self._uncountables),
        )

    @property
    def plurals(self) -> Tuple[Rule, ...]:
        return tuple(self._plurals)

    @property
    def singulars(self) -> Tuple[Rule, ...]:
        return tuple(self._singulars)

    @property
    def uncountables(self) -> frozenset:
        return self._uncountables

    def add_plural_rule(self, matcher: Matcher, replacement: str) -> Rule:
        rule = Rule(matcher, replacement)
        with self._lock:
            self._make_countable(matcher, replacement)
            self._plurals = [rule] + self._plurals
        return rule

    def add_singular_rule(self, matcher: Matcher, replacement: str) -> Rule:
        rule = Rule(matcher, replacement)
        with self._lock:
            self._make_countable(matcher, replacement)
            self._singulars = [rule] + self._singulars
        return rule

    def add_irregular(self, singular: str, plural: str) -> None:
        plural_rules, singular_rules = irregular_rules(singular, plural)
        with self._lock:
            self._make_countable(singular, plural)
            self._plurals = plural_rules + self._plurals
            self._singulars = singular_rules + self._singulars
        logger.debug(f"Registered irregular inflection {singular} -> {plural}")

    def add_uncountable(self, *words: Union[str, Iterable[str]]) -> None:
        """
        Mark words as uncountable.

        Accepts single words, sequences of words, or a mix of both. Words are
        stored lowercased.
        """
        flattened = set()
        for item in words:
            if isinstance(item, str):
                flattened.add(item.lower())
            else:
                flattened.update(word.lower() for word in item)

        with self._lock:
            self._uncountables = self._uncountables | flattened

    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self._uncountables

    def clear(self, scope: str = "all") -> None:
        """
        Empty one rule list or all of them.

        Args:
            scope: "all", "plurals", "singulars" or "uncountables"
        """
        if scope != "all" and scope not in SCOPES:
            raise ValueError(
                f"Invalid inflection scope {scope!r}, expected one of: all, {', '.join(SCOPES)}"
            )

        with self._lock:
            if scope in ("all", "plurals"):
                self._plurals = []
            if scope in ("all", "singulars"):
                self._singulars = []
            if scope in ("all", "uncountables"):
                self._uncountables = frozenset()
        logger.debug(f"Cleared inflection scope: {scope}")

    def apply(self, word: str, rules: Sequence[Rule]) -> str:
        return apply_inflections(word, rules, self._uncountables)

    def pluralize(self, word: str) -> str:
        return apply_inflections(word, self._plurals, self._uncountables)

    def singularize(self, word: str) -> str:
        return apply_inflections(word, self._singulars, self._uncountables)

    def _make_countable(self, *words: Matcher) -> None:
        literal = {word.lower() for word in words if isinstance(word, str)}
        if literal & self._uncountables:
            self._uncountables = self._uncountables - literal


_instance: Optional[Inflections] = None
_instance_lock = threading.Lock()


def get_inflections() -> Inflections:
    """
    Return the process-wide registry, creating it on first use.

    The registry is loaded with the default English rules unless
    INFLECTOR_LOAD_DEFAULTS is switched off.
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                from inflector.DefaultInflections import load_defaults
                from inflector.Environment import env_flag

                inflections = Inflections()
                if env_flag("INFLECTOR_LOAD_DEFAULTS"):
                    load_defaults(inflections)
                _instance = inflections
    return _instance
