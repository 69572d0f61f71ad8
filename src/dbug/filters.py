"""
Filter rules that decide which labels get to print.

A filter spec is the raw value of the DEBUG environment variable:

    DEBUG=app              # only the 'app' label
    DEBUG=app:*            # everything under app:
    DEBUG="* -app:db"      # everything except app:db
    DEBUG=*,-secret*       # everything except labels starting with 'secret'

Tokens are separated by spaces, or by commas when the spec has no
spaces. A leading '-' negates a token; a trailing '*' turns it into a
prefix match; '*' on its own matches every label.

Evaluation order:
    1. Negations are checked first. Any hit rejects the label, even if
       a positive rule names it explicitly.
    2. Positive rules are checked next. The first hit accepts the label.
    3. Nothing matched: the label stays quiet.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


NEGATION = '-'
WILDCARD = '*'


@dataclass(frozen=True)
class FilterRule:
    """One token of a filter spec.

    Attributes:
        pattern: The token with any leading '-' removed. May end in '*'.
        negated: True when the token started with '-'.
    """
    pattern: str
    negated: bool = False

    @classmethod
    def from_token(cls, token: str) -> 'FilterRule':
        """Build a rule from a single, already trimmed token."""
        if token.startswith(NEGATION):
            return cls(pattern=token[1:], negated=True)
        return cls(pattern=token)

    @property
    def wildcard(self) -> bool:
        return self.pattern.endswith(WILDCARD)

    @property
    def prefix(self) -> str:
        """The pattern with its trailing wildcard stripped."""
        return self.pattern[:-1] if self.wildcard else self.pattern

    def hits(self, label: str) -> bool:
        """True if this rule's pattern covers label.

        Without a trailing '*' only an exact match counts.
        """
        if self.wildcard:
            return label.startswith(self.prefix)
        return label == self.pattern


def split_spec(spec: Optional[str]) -> list:
    """Split a raw filter spec into trimmed, non-empty tokens.

    Spaces take precedence over commas: 'a,b c' splits into 'a,b'
    and 'c'.
    """
    if not spec:
        return []
    if ' ' in spec:
        parts = spec.split(' ')
    elif ',' in spec:
        parts = spec.split(',')
    else:
        parts = [spec]
    return [p.strip() for p in parts if p.strip()]


def parse(spec: Optional[str]) -> Tuple[FilterRule, ...]:
    """Parse a filter spec into an ordered tuple of FilterRule.

    An absent or blank spec gives no rules, which silences every label.

    Args:
        spec: Raw spec string, e.g. "app:* -app:db", or None

    Returns:
        Rules in the order they appear in the spec
    """
    return tuple(FilterRule.from_token(tok) for tok in split_spec(spec))


def matches(rules: Iterable[FilterRule], label: str) -> bool:
    """Decide whether label is enabled by rules.

    Negations win over positive matches, and the default is to stay
    quiet.
    """
    rules = tuple(rules)

    for rule in rules:
        if rule.negated and rule.hits(label):
            return False

    for rule in rules:
        if rule.negated:
            continue
        if rule.pattern == WILDCARD or rule.hits(label):
            return True

    return False
