"""Tests for subsequence fuzzy matching."""

import pytest

from todo_analytics.search.fuzzy import fuzzy_matches, fuzzy_score


def test_subsequence_match_is_case_insensitive():
    assert fuzzy_score("tda", "Todo Analysis") > 0
    assert fuzzy_matches("TDA", "todo analysis")


def test_missing_characters_score_zero():
    assert fuzzy_score("xyz", "Todo Analysis") == 0
    assert not fuzzy_matches("xyz", "Todo Analysis")


def test_exact_and_substring_scores():
    assert fuzzy_score("todo", "TODO") == 1000
    assert fuzzy_score("do an", "Todo Analysis") == 500


def test_subsequence_points_and_run_bonus():
    assert fuzzy_score("tda", "Todo Analysis") == 30
    # a, b form a run of two (+10 bonus); d follows a gap
    assert fuzzy_score("abd", "abcd") == 40


def test_order_matters():
    assert fuzzy_score("adt", "Todo Analysis") == 0


@pytest.mark.parametrize("query, text", [("", "text"), ("q", ""), ("", "")])
def test_empty_inputs(query, text):
    assert fuzzy_score(query, text) == 0
    assert not fuzzy_matches(query, text)


def test_ranking_prefers_tighter_matches():
    assert fuzzy_score("rep", "Write report") > fuzzy_score("rep", "Read the paper")
