"""
Unit tests for answer matching rules.
Run: python -m pytest tests/test_matching.py -v
"""

from flashquiz import CardSide
from flashquiz.matching import MatchingRules, test_match


class TestMatchingRules:

    def test_ignore_caps_matches_any_case(self):
        rules = MatchingRules(ignore_caps=True)
        assert test_match(rules, "a", "A ")
        assert test_match(rules, "a", " a")
        assert test_match(rules, "Paris", "pARIS")

    def test_check_caps_is_exact(self):
        rules = MatchingRules(ignore_caps=False)
        assert not test_match(rules, "a", "A")
        assert test_match(rules, "a", "a")

    def test_whitespace_is_always_trimmed(self):
        for rules in (MatchingRules(ignore_caps=True), MatchingRules(ignore_caps=False)):
            assert test_match(rules, "  word\t", "word\n")

    def test_inner_whitespace_still_counts(self):
        rules = MatchingRules()
        assert not test_match(rules, "ice cream", "icecream")

    def test_unicode_case_folding(self):
        """Case folding handles scripts where lower() alone is not enough."""
        rules = MatchingRules(ignore_caps=True)
        assert test_match(rules, "Straße", "STRASSE")
        assert test_match(rules, "ΣΊΣΥΦΟΣ", "σίσυφος")
        assert test_match(rules, "ПРИВЕТ", "привет")

    def test_unicode_exact_when_checking_caps(self):
        rules = MatchingRules(ignore_caps=False)
        assert not test_match(rules, "Straße", "STRASSE")

    def test_method_matches_function(self):
        rules = MatchingRules(ignore_caps=True)
        assert rules.test_match("Answer", " answer ")

    def test_default_ignores_caps(self):
        assert MatchingRules().ignore_caps is True

    def test_dict_roundtrip(self):
        rules = MatchingRules(ignore_caps=False)
        assert MatchingRules.from_dict(rules.to_dict()) == rules


class TestCardSideMatching:

    def test_any_variant_matches(self):
        side = CardSide.new_multi(["colour", "color"])
        rules = MatchingRules()
        assert side.matches_text(rules, "Color")
        assert side.matches_text(rules, "COLOUR ")
        assert not side.matches_text(rules, "colr")

    def test_empty_side_matches_nothing(self):
        assert not CardSide.empty().matches_text(MatchingRules(), "")
