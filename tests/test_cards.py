"""
Unit tests for the card data model.
Run: python -m pytest tests/test_cards.py -v
"""

import random

import pytest

from flashquiz import (Side, CardSide, Decoys, Flashcard, McCard, StudySet, RecallType,
                       MatchingRules)


class TestSide:

    def test_invert(self):
        assert ~Side.FRONT is Side.BACK
        assert ~Side.BACK is Side.FRONT
        assert Side.FRONT.opposite is Side.BACK


class TestCardSide:

    def test_new_and_empty(self):
        assert len(CardSide.empty()) == 0
        assert CardSide.new("a").to_list() == ["a"]
        assert CardSide.new_multi(["a", "b"]).to_list() == ["a", "b"]

    def test_push_get_remove(self):
        side = CardSide("first")
        side.push_text("second")
        assert side.get_text(1) == "second"
        assert side.get_text(2) is None
        assert side.remove_text(0) == "first"
        assert side.to_list() == ["second"]

    def test_remove_out_of_range(self):
        with pytest.raises(IndexError):
            CardSide.empty().remove_text(0)

    def test_any_text_empty_is_none(self):
        assert CardSide.empty().any_text(random.Random(0)) is None

    def test_any_text_picks_every_variant(self):
        side = CardSide.new_multi(["x", "y", "z"])
        rng = random.Random(7)
        seen = {side.any_text(rng) for _ in range(200)}
        assert seen == {"x", "y", "z"}

    def test_any_text_reproducible_with_seed(self):
        side = CardSide.new_multi(["x", "y", "z", "w"])
        first = [side.any_text(random.Random(3)) for _ in range(5)]
        second = [side.any_text(random.Random(3)) for _ in range(5)]
        assert first == second


class TestDecoys:

    def test_choose_text_without_replacement(self):
        decoys = Decoys(["a", "b", "c", "d"])
        chosen = decoys.choose_text(random.Random(1), 3)
        assert len(chosen) == 3
        assert len(set(chosen)) == 3
        assert set(chosen) <= {"a", "b", "c", "d"}

    def test_choose_text_capped(self):
        decoys = Decoys(["a", "b"])
        assert sorted(decoys.choose_text(random.Random(1), 10)) == ["a", "b"]

    def test_duplicate_entries_can_both_be_chosen(self):
        decoys = Decoys(["same", "same"])
        assert decoys.choose_text(random.Random(1), 2) == ["same", "same"]

    def test_excluding_drops_correct_answers(self):
        decoys = Decoys(["Paris", "Lyon", " paris"])
        kept = decoys.excluding(CardSide("paris"), MatchingRules(ignore_caps=True))
        assert list(kept) == ["Lyon"]

    def test_push_and_count(self):
        decoys = Decoys.empty()
        decoys.push_text("one")
        assert decoys.text_count() == 1


class TestFlashcard:

    def test_index_by_side(self):
        card = Flashcard.new("front text", "back text")
        assert card[Side.FRONT].to_list() == ["front text"]
        assert card[Side.BACK].to_list() == ["back text"]

    def test_set_by_side(self):
        card = Flashcard.blank()
        card[Side.BACK] = CardSide.new_multi(["1", "one"])
        assert card.back.to_list() == ["1", "one"]
        assert len(card.front) == 0

    def test_new_with_variants(self):
        card = Flashcard.new(["dog", "hound"], "Hund")
        assert card.to_dict() == {'front': ["dog", "hound"], 'back': ["Hund"]}

    def test_str(self):
        assert str(Flashcard.new("a", "0")) == "Front: a\n\tBack: 0"


class TestMcCard:

    def test_blank(self):
        card = McCard.blank()
        assert len(card.question) == 0
        assert len(card.answer) == 0
        assert card.decoys.text_count() == 0

    def test_new(self):
        card = McCard.new("2 + 2", "4", ["3", "5"])
        assert card.to_dict() == {'question': ["2 + 2"], 'answer': ["4"], 'decoys': ["3", "5"]}


class TestStudySet:

    def test_defaults(self):
        study_set = StudySet()
        assert study_set.recall_front is RecallType.MC
        assert study_set.recall_back is RecallType.MC
        assert study_set.recall_mc is RecallType.MC
        assert study_set.matching_rules == MatchingRules(ignore_caps=True)

    def test_example_contents(self, example_set):
        assert len(example_set.flashcards) == 6
        assert len(example_set.mc_cards) == 4
        assert example_set.flashcards[0] == Flashcard.new("a", "0")
        assert example_set.mc_cards[3] == McCard.new("3mc", "3answer", ["3decoy0", "3decoy1", "3decoy2"])

    def test_flashcard_recall(self):
        study_set = StudySet(recall_front=RecallType.TEXT, recall_back=RecallType.NONE)
        assert study_set.flashcard_recall(Side.FRONT) is RecallType.TEXT
        assert study_set.flashcard_recall(Side.BACK) is RecallType.NONE

    def test_sets_compare_by_identity(self):
        a = StudySet.example()
        b = StudySet.example()
        assert a.to_dict() == b.to_dict()
        assert a != b
        assert a == a
        assert a in {a}
        assert b not in {a}

    def test_create_cards(self):
        study_set = StudySet()
        study_set.create_flashcard("a", "b")
        study_set.create_mc_card("q", "a", ["d"])
        assert study_set.to_dict()['flashcards'] == [{'front': ["a"], 'back': ["b"]}]
        assert study_set.to_dict()['mc_cards'][0]['decoys'] == ["d"]
