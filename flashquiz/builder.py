"""
Build study sets from tabular data.

Reading files is left to the caller; these helpers take pandas DataFrames (for
example from pd.read_excel or pd.read_csv) or plain lists of dicts.
"""

import logging
from typing import Iterable, List, Optional

import pandas as pd

from . import StudySet, Flashcard, McCard, CardSide, Decoys
from .config import RecallType, DEFAULT_RECALL
from .matching import MatchingRules
from .errors import BuildError

logger = logging.getLogger(__name__)

FLASHCARD_COLUMNS = ('front', 'back')
MC_COLUMNS = ('question', 'answer', 'decoys')


def split_variants(values, separator: str = ';') -> List[str]:
    """Split a cell into its text variants, dropping blanks"""
    if values is None:
        return []
    if isinstance(values, (list, tuple)):
        return [str(v).strip() for v in values if not _is_blank(v)]
    if _is_blank(values):
        return []
    return [v.strip() for v in str(values).split(separator) if v.strip()]


def _is_blank(value) -> bool:
    if isinstance(value, str):
        return value.strip() == ''
    return bool(pd.isna(value))


def _check_columns(df: pd.DataFrame, required: Iterable[str], what: str):
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise BuildError(f"{what} table is missing column(s): {', '.join(missing)}")


def flashcards_from_frame(df: pd.DataFrame, separator: str = ';') -> List[Flashcard]:
    """Turn a table with 'front' and 'back' columns into flashcards"""
    _check_columns(df, FLASHCARD_COLUMNS, 'Flashcard')

    cards = []
    for row_num, (_, row) in enumerate(df.iterrows()):
        front = split_variants(row['front'], separator)
        back = split_variants(row['back'], separator)
        if not front and not back:
            logger.warning("Skipping flashcard row %d: both sides are empty", row_num)
            continue
        cards.append(Flashcard(CardSide.new_multi(front), CardSide.new_multi(back)))
    return cards


def mc_cards_from_frame(df: pd.DataFrame, separator: str = ';') -> List[McCard]:
    """Turn a table with 'question', 'answer' and 'decoys' columns into multiple choice cards"""
    # Decoys are optional; a card without any is kept but never produces a list
    _check_columns(df, MC_COLUMNS[:2], 'Multiple choice')

    cards = []
    for row_num, (_, row) in enumerate(df.iterrows()):
        question = split_variants(row['question'], separator)
        answer = split_variants(row['answer'], separator)
        if not question and not answer:
            logger.warning("Skipping mc row %d: question and answer are empty", row_num)
            continue
        decoys = split_variants(row['decoys'], separator) if 'decoys' in df.columns else []
        cards.append(McCard(CardSide.new_multi(question), CardSide.new_multi(answer), Decoys(decoys)))
    return cards


def build_set_from_frames(flashcards_df: Optional[pd.DataFrame] = None,
                          mc_df: Optional[pd.DataFrame] = None, *,
                          recall_front: RecallType = DEFAULT_RECALL,
                          recall_back: RecallType = DEFAULT_RECALL,
                          recall_mc: RecallType = DEFAULT_RECALL,
                          matching_rules: Optional[MatchingRules] = None,
                          separator: str = ';') -> StudySet:
    """
    Build a StudySet from DataFrames.

    Args:
        flashcards_df: Table with 'front' and 'back' columns
        mc_df: Table with 'question', 'answer' and optionally 'decoys' columns
        recall_front, recall_back, recall_mc: Recall types for the three kinds of question
        matching_rules: How typed answers are graded
        separator: Separates text variants inside a cell

    Raises:
        BuildError: a table is missing a required column
    """
    if isinstance(recall_front, str):
        recall_front = RecallType.from_str(recall_front)
    if isinstance(recall_back, str):
        recall_back = RecallType.from_str(recall_back)
    if isinstance(recall_mc, str):
        recall_mc = RecallType.from_str(recall_mc)

    flashcards = flashcards_from_frame(flashcards_df, separator) if flashcards_df is not None else []
    mc_cards = mc_cards_from_frame(mc_df, separator) if mc_df is not None else []

    study_set = StudySet(flashcards, mc_cards, recall_front=recall_front, recall_back=recall_back,
                         recall_mc=recall_mc, matching_rules=matching_rules)
    logger.info("Built set with %d flashcards and %d mc cards", len(flashcards), len(mc_cards))
    return study_set


def build_set_from_records(flashcards: Iterable[dict] = (), mc_cards: Iterable[dict] = (),
                           **kwargs) -> StudySet:
    """Same as build_set_from_frames, from lists of dicts"""
    flashcard_records = list(flashcards)
    mc_records = list(mc_cards)
    flashcards_df = pd.DataFrame(flashcard_records) if flashcard_records else None
    mc_df = pd.DataFrame(mc_records) if mc_records else None
    return build_set_from_frames(flashcards_df, mc_df, **kwargs)
