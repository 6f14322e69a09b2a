import logging
import random
from typing import Dict, Iterable, Iterator, List, Optional, Union
from enum import Enum

from .config import (Conditions, RecallType, DEFAULT_RECALL, INCLUDE_ALL, INCLUDE_NONE,
                     FIND_DECOY_ATTEMPTS)
from .matching import MatchingRules, test_match
from .errors import FlashquizError, BuildError, InvalidQuestionError

logging.getLogger(__name__).addHandler(logging.NullHandler())


class Side(Enum):
    """A side of a flashcard"""
    FRONT = 'front'
    BACK = 'back'

    @property
    def opposite(self) -> 'Side':
        return Side.BACK if self is Side.FRONT else Side.FRONT

    def __invert__(self) -> 'Side':
        return self.opposite


class CardSide:
    """
    Text on one side of a Flashcard, or the question or answer of an McCard.

    Holds several interchangeable variants so a card can be shown in more than
    one way and accept more than one answer. A side with no variants is allowed
    but nothing can be asked from it.
    """

    def __init__(self, text: Optional[str] = None):
        self.text: List[str] = [] if text is None else [text]

    @classmethod
    def empty(cls) -> 'CardSide':
        return cls()

    @classmethod
    def new(cls, text: str) -> 'CardSide':
        return cls(text)

    @classmethod
    def new_multi(cls, texts: Iterable[str]) -> 'CardSide':
        side = cls()
        side.text = [str(t) for t in texts]
        return side

    def push_text(self, text: str):
        """Add another variant"""
        self.text.append(text)

    def remove_text(self, index: int) -> str:
        """Remove and return the variant at index; raises IndexError if out of range"""
        return self.text.pop(index)

    def get_text(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.text):
            return self.text[index]
        return None

    def any_text(self, rng: random.Random) -> Optional[str]:
        """A random variant to use as a question or answer, or None if there is none"""
        if not self.text:
            return None
        return rng.choice(self.text)

    def matches_text(self, rules: MatchingRules, text: str) -> bool:
        """True if text matches any variant under the given rules"""
        return any(test_match(rules, template, text) for template in self.text)

    def to_list(self) -> List[str]:
        return list(self.text)

    def __len__(self):
        return len(self.text)

    def __iter__(self) -> Iterator[str]:
        return iter(self.text)

    def __eq__(self, other):
        if not isinstance(other, CardSide):
            return NotImplemented
        return self.text == other.text

    def __repr__(self):
        return f'CardSide({self.text!r})'

    def __str__(self):
        return '; '.join(self.text)


class Decoys:
    """Wrong answers offered alongside the answer of a multiple choice card"""

    def __init__(self, texts: Optional[Iterable[str]] = None):
        self.text: List[str] = [str(t) for t in texts] if texts is not None else []

    @classmethod
    def empty(cls) -> 'Decoys':
        return cls()

    def push_text(self, text: str):
        self.text.append(text)

    def choose_text(self, rng: random.Random, count: int) -> List[str]:
        """
        Pick count decoys at random, never picking the same entry twice.

        Entries are distinct by position, so a decoy stored twice can come back
        twice.
        """
        count = min(count, len(self.text))
        return rng.sample(self.text, count)

    def excluding(self, side: 'CardSide', rules: MatchingRules) -> 'Decoys':
        """A copy without the decoys that would count as a correct answer for side"""
        return Decoys(t for t in self.text if not side.matches_text(rules, t))

    def text_count(self) -> int:
        return len(self.text)

    def __len__(self):
        return len(self.text)

    def __iter__(self) -> Iterator[str]:
        return iter(self.text)

    def __eq__(self, other):
        if not isinstance(other, Decoys):
            return NotImplemented
        return self.text == other.text

    def __repr__(self):
        return f'Decoys({self.text!r})'


def _as_side(value: Union[None, str, Iterable[str], CardSide]) -> CardSide:
    if isinstance(value, CardSide):
        return value
    if value is None:
        return CardSide.empty()
    if isinstance(value, str):
        return CardSide(value)
    return CardSide.new_multi(value)


class Flashcard:
    """A flashcard with text on the front and back"""

    def __init__(self, front: Optional[CardSide] = None, back: Optional[CardSide] = None):
        self.front = front if front is not None else CardSide.empty()
        self.back = back if back is not None else CardSide.empty()

    @classmethod
    def blank(cls) -> 'Flashcard':
        return cls()

    @classmethod
    def new(cls, front, back) -> 'Flashcard':
        return cls(_as_side(front), _as_side(back))

    def __getitem__(self, side: Side) -> CardSide:
        if side is Side.FRONT:
            return self.front
        if side is Side.BACK:
            return self.back
        raise KeyError(side)

    def __setitem__(self, side: Side, value: CardSide):
        if side is Side.FRONT:
            self.front = value
        elif side is Side.BACK:
            self.back = value
        else:
            raise KeyError(side)

    def __eq__(self, other):
        if not isinstance(other, Flashcard):
            return NotImplemented
        return self.front == other.front and self.back == other.back

    def to_dict(self) -> dict:
        return {
            'front': self.front.to_list(),
            'back': self.back.to_list()
        }

    def __repr__(self):
        return f'Flashcard(front={self.front!r}, back={self.back!r})'

    def __str__(self):
        return f'Front: {self.front}\n\tBack: {self.back}'


class McCard:
    """A multiple choice question"""

    def __init__(self, question: Optional[CardSide] = None, answer: Optional[CardSide] = None,
                 decoys: Optional[Decoys] = None):
        self.question = question if question is not None else CardSide.empty()
        self.answer = answer if answer is not None else CardSide.empty()
        self.decoys = decoys if decoys is not None else Decoys.empty()

    @classmethod
    def blank(cls) -> 'McCard':
        return cls()

    @classmethod
    def new(cls, question, answer, decoys: Iterable[str] = ()) -> 'McCard':
        if not isinstance(decoys, Decoys):
            decoys = Decoys(decoys)
        return cls(_as_side(question), _as_side(answer), decoys)

    def __eq__(self, other):
        if not isinstance(other, McCard):
            return NotImplemented
        return (self.question == other.question and self.answer == other.answer
                and self.decoys == other.decoys)

    def to_dict(self) -> dict:
        return {
            'question': self.question.to_list(),
            'answer': self.answer.to_list(),
            'decoys': list(self.decoys)
        }

    def __repr__(self):
        return f'McCard(question={self.question!r}, answer={self.answer!r}, decoys={self.decoys!r})'

    def __str__(self):
        outstrs = [f'Question: {self.question}', f'Answer: {self.answer}']
        if len(self.decoys) > 0:
            outstrs.append(f"Decoys: {'; '.join(self.decoys)}")
        return '\n\t'.join(outstrs)


class StudySet:
    """
    A set of Flashcards and McCards, with rules for how the player is asked to
    recall each kind of card.

    Questions produced from a set refer to cards by position, so the card lists
    must not have cards inserted or removed while those questions are in use.
    """

    def __init__(self, flashcards: Optional[List[Flashcard]] = None,
                 mc_cards: Optional[List[McCard]] = None,
                 recall_front: RecallType = DEFAULT_RECALL,
                 recall_back: RecallType = DEFAULT_RECALL,
                 recall_mc: RecallType = DEFAULT_RECALL,
                 matching_rules: Optional[MatchingRules] = None):
        self.flashcards: List[Flashcard] = list(flashcards) if flashcards else []
        self.mc_cards: List[McCard] = list(mc_cards) if mc_cards else []
        # Show the back, player recalls the front
        self.recall_front = recall_front
        # Show the front, player recalls the back
        self.recall_back = recall_back
        self.recall_mc = recall_mc
        self.matching_rules = matching_rules if matching_rules is not None else MatchingRules()

    def flashcard_recall(self, side: Side) -> RecallType:
        """Recall type for questions that ask the player to recall the given side"""
        return self.recall_front if side is Side.FRONT else self.recall_back

    def add_flashcard(self, card: Flashcard) -> Flashcard:
        self.flashcards.append(card)
        return card

    def add_mc_card(self, card: McCard) -> McCard:
        self.mc_cards.append(card)
        return card

    def create_flashcard(self, front, back) -> Flashcard:
        """Create a new flashcard from text (or lists of variants) and add it"""
        return self.add_flashcard(Flashcard.new(front, back))

    def create_mc_card(self, question, answer, decoys: Iterable[str] = ()) -> McCard:
        """Create a new multiple choice card and add it"""
        return self.add_mc_card(McCard.new(question, answer, decoys))

    def questions(self, conditions: Union[None, str, Conditions] = None) -> 'Questions':
        """
        All the questions that could be asked to prove knowledge of this set.

        Args:
            conditions: Which kinds of question to include (default: all of them).
                A preset name from config.PRESETS is accepted too.
        """
        from .quiz import build_questions
        return build_questions(self, conditions)

    def get_recall_settings(self) -> Dict[str, str]:
        return {
            'card front': self.recall_front.value,
            'card back': self.recall_back.value,
            'mc': self.recall_mc.value
        }

    def to_dict(self) -> dict:
        return {
            'recall': self.get_recall_settings(),
            'matching_rules': self.matching_rules.to_dict(),
            'flashcards': [card.to_dict() for card in self.flashcards],
            'mc_cards': [card.to_dict() for card in self.mc_cards]
        }

    def __repr__(self):
        return (f'StudySet({len(self.flashcards)} flashcards, {len(self.mc_cards)} mc cards, '
                f'recall={self.get_recall_settings()})')

    @classmethod
    def example(cls, recall_front: RecallType = DEFAULT_RECALL,
                recall_back: RecallType = DEFAULT_RECALL,
                recall_mc: RecallType = DEFAULT_RECALL,
                matching_rules: Optional[MatchingRules] = None) -> 'StudySet':
        """Six flashcards a..f / 0..5 and four multiple choice cards"""
        study_set = cls(recall_front=recall_front, recall_back=recall_back,
                        recall_mc=recall_mc, matching_rules=matching_rules)
        for i, front in enumerate('abcdef'):
            study_set.create_flashcard(front, str(i))
        for i in range(4):
            study_set.create_mc_card(f'{i}mc', f'{i}answer', [f'{i}decoy{d}' for d in range(3)])
        return study_set


from .quiz import Question, McList, Questions, build_questions  # noqa: E402

__all__ = [
    'Side', 'CardSide', 'Decoys', 'Flashcard', 'McCard', 'StudySet',
    'Conditions', 'RecallType', 'MatchingRules', 'test_match',
    'INCLUDE_ALL', 'INCLUDE_NONE', 'FIND_DECOY_ATTEMPTS',
    'Question', 'McList', 'Questions', 'build_questions',
    'FlashquizError', 'BuildError', 'InvalidQuestionError',
]
