from typing import Dict, Union
import dataclasses
from dataclasses import dataclass, asdict
from enum import Enum


# How many random flashcards to draw before giving up on finding enough decoys
FIND_DECOY_ATTEMPTS = 24

# Answers are graded without regard to capitalization unless a set says otherwise
DEFAULT_IGNORE_CAPS = True


class RecallType(Enum):
    """How much of a side of a card does the player need to recall?"""
    NONE = 'never'
    MC = 'multiple choice'
    TEXT = 'text'

    @classmethod
    def from_str(cls, value: str) -> 'RecallType':
        """Parse either the stored value ('never', 'text', ...) or the member name"""
        cleaned = value.strip()
        for member in cls:
            if cleaned.lower() in (member.value, member.name.lower()):
                return member
        expected = ' | '.join(member.value for member in cls)
        raise ValueError(f"Unknown recall type: {value!r} (expected {{ {expected} }})")

    @property
    def asks(self) -> bool:
        return self is not RecallType.NONE


DEFAULT_RECALL = RecallType.MC


@dataclass(frozen=True)
class Conditions:
    """Which categories of question a caller wants generated"""
    include_card_front: bool = True  # show the back, recall the front
    include_card_back: bool = True   # show the front, recall the back
    include_mc: bool = True

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'Conditions':
        return cls(**data)

    def replace(self, **changes) -> 'Conditions':
        return dataclasses.replace(self, **changes)


INCLUDE_ALL = Conditions(include_card_front=True, include_card_back=True, include_mc=True)
INCLUDE_NONE = Conditions(include_card_front=False, include_card_back=False, include_mc=False)

# Presets are also reachable from the class, e.g. Conditions.INCLUDE_ALL
Conditions.INCLUDE_ALL = INCLUDE_ALL
Conditions.INCLUDE_NONE = INCLUDE_NONE

PRESETS: Dict[str, Conditions] = {
    'all': INCLUDE_ALL,
    'none': INCLUDE_NONE,
    'card_back': INCLUDE_NONE.replace(include_card_back=True),
    'card_front': INCLUDE_NONE.replace(include_card_front=True),
    'mc': INCLUDE_NONE.replace(include_mc=True),
}


def resolve_conditions(conditions: Union[None, str, Conditions] = None) -> Conditions:
    """Accept None (everything), a preset name or a Conditions instance"""
    if conditions is None:
        return INCLUDE_ALL
    if isinstance(conditions, str):
        if conditions not in PRESETS:
            raise ValueError(f"Unknown conditions preset: {conditions}")
        return PRESETS[conditions]
    if not isinstance(conditions, Conditions):
        raise TypeError(f"Expected Conditions, got {type(conditions).__name__}")
    return conditions
