"""
Answer matching rules used to grade what the player typed against stored card text.
"""

from dataclasses import dataclass, asdict

from .config import DEFAULT_IGNORE_CAPS


@dataclass(frozen=True)
class MatchingRules:
    """Rules for deciding whether an answer matches a piece of card text"""
    ignore_caps: bool = DEFAULT_IGNORE_CAPS

    def test_match(self, stored: str, given: str) -> bool:
        return test_match(self, stored, given)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'MatchingRules':
        return cls(**data)


def test_match(rules: MatchingRules, stored: str, given: str) -> bool:
    """
    Compare stored card text with an answer.

    Leading and trailing whitespace never matters. When ``rules.ignore_caps`` is
    set the comparison uses Unicode case folding, so e.g. 'Straße' matches
    'STRASSE' and Greek final sigma matches its capital.
    """
    a = stored.strip()
    b = given.strip()
    if rules.ignore_caps:
        return a.casefold() == b.casefold()
    return a == b


# Keep pytest from collecting the helper when imported into test modules
test_match.__test__ = False
