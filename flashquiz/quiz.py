"""
Question generation for study sets: which questions a set can produce, what to
show the player, how to grade an answer and how to build a multiple choice list.
"""

import logging
import random
from typing import Callable, Iterator, List, Optional, TypeVar, Union

from . import StudySet, Flashcard, McCard, Side
from .config import Conditions, RecallType, FIND_DECOY_ATTEMPTS, resolve_conditions
from .errors import InvalidQuestionError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class McList:
    """A multiple choice answer list holding exactly one correct answer"""

    def __init__(self, answers: List[str], correct_index: int):
        if not 0 <= correct_index < len(answers):
            raise IndexError(f"correct_index {correct_index} outside list of {len(answers)}")
        self._answers = tuple(answers)
        self._correct_index = correct_index

    @property
    def correct_index(self) -> int:
        """Position of the correct answer in this list"""
        return self._correct_index

    def correct(self) -> str:
        return self._answers[self._correct_index]

    def decoys(self) -> List[str]:
        return [a for i, a in enumerate(self._answers) if i != self._correct_index]

    def to_dict(self) -> dict:
        return {
            'answers': list(self._answers),
            'correct_index': self._correct_index
        }

    def __getitem__(self, index):
        return self._answers[index]

    def __len__(self):
        return len(self._answers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __contains__(self, text):
        return text in self._answers

    def __eq__(self, other):
        if not isinstance(other, McList):
            return NotImplemented
        return self._answers == other._answers and self._correct_index == other._correct_index

    def __repr__(self):
        return f'McList({list(self._answers)!r}, correct_index={self._correct_index})'


class Question:
    """
    A question and its answer, created by StudySet.questions().

    This is not a card: a flashcard can produce two questions (one per side) or
    none, depending on the set's recall settings and the conditions asked for.
    The question names its card by position in the owning set.
    """

    def __init__(self, study_set: StudySet, index: int, side: Optional[Side] = None):
        self.study_set = study_set
        self.index = index
        # Side the player must recall; None for multiple choice cards
        self.side = side

    @classmethod
    def from_flashcard(cls, study_set: StudySet, index: int, side: Side) -> 'Question':
        return cls(study_set, index, side)

    @classmethod
    def from_mc_card(cls, study_set: StudySet, index: int) -> 'Question':
        return cls(study_set, index, None)

    @property
    def is_flashcard(self) -> bool:
        return self.side is not None

    @property
    def is_mc(self) -> bool:
        return self.side is None

    @property
    def card(self) -> Union[Flashcard, McCard]:
        cards = self.study_set.flashcards if self.is_flashcard else self.study_set.mc_cards
        if not 0 <= self.index < len(cards):
            kind = 'flashcard' if self.is_flashcard else 'mc'
            raise InvalidQuestionError(kind, self.index, len(cards))
        return cards[self.index]

    @property
    def recall_type(self) -> RecallType:
        """How the player is expected to answer, for whoever presents the question"""
        if self.is_flashcard:
            return self.study_set.flashcard_recall(self.side)
        return self.study_set.recall_mc

    def question(self, rng: random.Random) -> Optional[str]:
        """
        Text to show the player.

        For flashcards this is a variant of the side the player is not asked to
        recall; for multiple choice cards it is a variant of the question.
        """
        card = self.card
        if self.is_flashcard:
            return card[~self.side].any_text(rng)
        return card.question.any_text(rng)

    def answers(self) -> List[str]:
        """Every stored variant that counts as a correct answer"""
        card = self.card
        if self.is_flashcard:
            return card[self.side].to_list()
        return card.answer.to_list()

    def is_correct_answer(self, answer: str) -> bool:
        """Whether the text is a correct answer; some questions accept several"""
        card = self.card
        rules = self.study_set.matching_rules
        if self.is_flashcard:
            return card[self.side].matches_text(rules, answer)
        return card.answer.matches_text(rules, answer)

    def mc_answers(self, count: int, rng: random.Random) -> Optional[McList]:
        """
        A shuffled list with the correct answer and up to count - 1 decoys.

        Flashcard decoys come from the same side of other flashcards in the set;
        multiple choice decoys come from the card's own decoys. The list can be
        shorter than count when the set cannot supply enough distinct decoys.

        Returns None when there is no answer text or no decoy at all.
        """
        if self.is_flashcard:
            return self._flashcard_mc_answers(count, rng)
        return self._mc_card_mc_answers(count, rng)

    def _flashcard_mc_answers(self, count: int, rng: random.Random) -> Optional[McList]:
        card = self.card
        answer_side = card[self.side]
        correct_text = answer_side.any_text(rng)
        if correct_text is None:
            return None

        flashcards = self.study_set.flashcards
        rules = self.study_set.matching_rules
        count = min(count, len(flashcards))
        if count < 2:
            return None

        decoys: List[str] = []
        for _ in range(FIND_DECOY_ATTEMPTS):
            other = rng.randrange(len(flashcards))
            if other == self.index:
                continue
            text = flashcards[other][self.side].any_text(rng)
            if text is None:
                continue
            if answer_side.matches_text(rules, text) or text in decoys:
                continue
            decoys.append(text)
            if len(decoys) == count - 1:
                break
        else:
            logger.debug("Found %d of %d decoys for flashcard %d (%s) after %d attempts",
                         len(decoys), count - 1, self.index, self.side.value, FIND_DECOY_ATTEMPTS)

        if not decoys:
            return None

        correct_index = rng.randrange(len(decoys) + 1)
        decoys.insert(correct_index, correct_text)
        return McList(decoys, correct_index)

    def _mc_card_mc_answers(self, count: int, rng: random.Random) -> Optional[McList]:
        card = self.card
        correct_text = card.answer.any_text(rng)
        if correct_text is None:
            return None

        pool = card.decoys.excluding(card.answer, self.study_set.matching_rules)
        if pool.text_count() < card.decoys.text_count():
            logger.debug("mc card %d: ignoring %d decoys that match its answer",
                         self.index, card.decoys.text_count() - pool.text_count())

        count = min(count, pool.text_count() + 1)
        # No decoys means the card was probably written by mistake
        if count < 2:
            return None

        chosen = pool.choose_text(rng, count - 1)
        correct_index = rng.randrange(count)
        answers = chosen[:correct_index] + [correct_text] + chosen[correct_index:]
        return McList(answers, correct_index)

    def __eq__(self, other):
        if not isinstance(other, Question):
            return NotImplemented
        return (self.study_set is other.study_set and self.index == other.index
                and self.side == other.side)

    def __hash__(self):
        return hash((id(self.study_set), self.index, self.side))

    def __repr__(self):
        if self.is_flashcard:
            return f'Question(flashcard={self.index}, recall={self.side.value})'
        return f'Question(mc={self.index})'


class Questions:
    """
    The questions a set produces, in a fixed order: every back-recall flashcard
    question, then every front-recall flashcard question, then every multiple
    choice question, each group in card order.

    len() is always the exact number of questions left. copy() gives an
    independent sequence positioned at the same place.
    """

    def __init__(self, study_set: StudySet, flashcards_back: range,
                 flashcards_front: range, mc_cards: range):
        self.study_set = study_set
        self._flashcards_back = flashcards_back
        self._flashcards_front = flashcards_front
        self._mc_cards = mc_cards

    def __len__(self):
        return len(self._flashcards_back) + len(self._flashcards_front) + len(self._mc_cards)

    def __iter__(self) -> 'Questions':
        return self

    def __next__(self) -> Question:
        if self._flashcards_back:
            index = self._flashcards_back[0]
            self._flashcards_back = self._flashcards_back[1:]
            return Question.from_flashcard(self.study_set, index, Side.BACK)
        if self._flashcards_front:
            index = self._flashcards_front[0]
            self._flashcards_front = self._flashcards_front[1:]
            return Question.from_flashcard(self.study_set, index, Side.FRONT)
        if self._mc_cards:
            index = self._mc_cards[0]
            self._mc_cards = self._mc_cards[1:]
            return Question.from_mc_card(self.study_set, index)
        raise StopIteration

    def copy(self) -> 'Questions':
        return Questions(self.study_set, self._flashcards_back,
                         self._flashcards_front, self._mc_cards)

    __copy__ = copy

    def _drain(self) -> Iterator[Question]:
        """Yield the remaining questions group by group, leaving this sequence empty"""
        back, front, mc = self._flashcards_back, self._flashcards_front, self._mc_cards
        self._flashcards_back = self._flashcards_front = self._mc_cards = range(0)
        for index in back:
            yield Question.from_flashcard(self.study_set, index, Side.BACK)
        for index in front:
            yield Question.from_flashcard(self.study_set, index, Side.FRONT)
        for index in mc:
            yield Question.from_mc_card(self.study_set, index)

    def for_each(self, fn: Callable[[Question], None]):
        """Call fn with every remaining question"""
        for question in self._drain():
            fn(question)

    def fold(self, init: T, fn: Callable[[T, Question], T]) -> T:
        """Combine the remaining questions into one value, left to right"""
        acc = init
        for question in self._drain():
            acc = fn(acc, question)
        return acc

    def count(self) -> int:
        """Number of remaining questions; consumes the sequence"""
        remaining = len(self)
        self._flashcards_back = self._flashcards_front = self._mc_cards = range(0)
        return remaining

    def last(self) -> Optional[Question]:
        """The final question, or None if nothing is left; consumes the sequence"""
        if self._mc_cards:
            question = Question.from_mc_card(self.study_set, self._mc_cards[-1])
        elif self._flashcards_front:
            question = Question.from_flashcard(self.study_set, self._flashcards_front[-1], Side.FRONT)
        elif self._flashcards_back:
            question = Question.from_flashcard(self.study_set, self._flashcards_back[-1], Side.BACK)
        else:
            question = None
        self.count()
        return question

    def __repr__(self):
        return (f'Questions(back={len(self._flashcards_back)}, front={len(self._flashcards_front)}, '
                f'mc={len(self._mc_cards)})')


def build_questions(study_set: StudySet, conditions: Union[None, str, Conditions] = None) -> Questions:
    """
    Build the sequence of questions a set produces under the given conditions.

    A category is included only when the caller asks for it and the set's
    recall type for it is not RecallType.NONE.
    """
    conditions = resolve_conditions(conditions)
    flashcard_count = len(study_set.flashcards)
    empty = range(0)

    include_back = conditions.include_card_back and study_set.recall_back.asks
    include_front = conditions.include_card_front and study_set.recall_front.asks
    include_mc = conditions.include_mc and study_set.recall_mc.asks

    questions = Questions(
        study_set,
        flashcards_back=range(flashcard_count) if include_back else empty,
        flashcards_front=range(flashcard_count) if include_front else empty,
        mc_cards=range(len(study_set.mc_cards)) if include_mc else empty,
    )
    logger.debug("Built %r from %r", questions, study_set)
    return questions
