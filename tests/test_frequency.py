import pytest

from text_analyzer.frequency import analyze_word_frequency


def test_word_frequency():
    text = "the the the quick brown fox jumps over the lazy dog"
    result = analyze_word_frequency(text, 2, 5)
    assert result == [("the", 4), ("quick", 1), ("brown", 1), ("fox", 1), ("jumps", 1)]


def test_respects_minimum_word_length():
    result = analyze_word_frequency("a an the quick brown fox", 3, 10)
    assert all(len(word) > 3 for word, _ in result)
    assert [word for word, _ in result] == ["quick", "brown"]


def test_respects_maximum_words_limit():
    result = analyze_word_frequency("word1 word2 word3 word4 word5 word6", 2, 3)
    assert result == [("word1", 1), ("word2", 1), ("word3", 1)]


def test_ties_keep_first_seen_order():
    result = analyze_word_frequency("beta alpha beta alpha gamma")
    assert result == [("beta", 2), ("alpha", 2), ("gamma", 1)]


def test_words_are_lower_cased():
    assert analyze_word_frequency("Apple apple APPLE.") == [("apple", 3)]


def test_empty_text():
    assert analyze_word_frequency("") == []


def test_zero_max_words():
    assert analyze_word_frequency("some words here", 2, 0) == []


@pytest.mark.parametrize("min_length, max_words", [(0, 1), (2, 10), (4, 3), (10, 5)])
def test_output_bounds(min_length, max_words):
    text = "It was the best of times, it was the worst of times, it was the age of wisdom"
    result = analyze_word_frequency(text, min_length, max_words)
    assert len(result) <= max_words
    assert all(len(word) > min_length for word, _ in result)
    counts = [count for _, count in result]
    assert counts == sorted(counts, reverse=True)
