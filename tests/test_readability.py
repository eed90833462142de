import pytest

from text_analyzer.readability import (analyze_readability, coleman_liau_index, count_syllables,
                                       count_syllables_in_word, flesch_kincaid_grade,
                                       flesch_reading_ease, grade_level,
                                       readability_interpretation)


@pytest.mark.parametrize("word, expected", [
    ("hello", 2),
    ("world", 1),
    ("beautiful", 4),
    ("extraordinary", 5),
    ("table", 1),    # consonant + silent e
    ("jumped", 1),   # -ed
    ("boxes", 1),    # consonant + es
    ("yellow", 2),   # leading y is dropped
    ("rhythm", 1),
    ("the", 1),
    ("crwth", 1),    # no vowels left still counts as one
])
def test_count_syllables_in_word(word, expected):
    assert count_syllables_in_word(word) == expected


@pytest.mark.parametrize("word", ["a", "strengths", "eye", "queue", "syzygy", "bcdfg"])
def test_every_word_has_a_syllable(word):
    assert count_syllables_in_word(word) >= 1


def test_count_syllables_text():
    assert count_syllables("hello, world!") == 3
    assert count_syllables("HELLO") == 2


def test_count_syllables_empty():
    assert count_syllables("") == 0


def test_count_syllables_skips_words_with_digits():
    assert count_syllables("abc123 test") == 1


def test_flesch_reading_ease():
    assert flesch_reading_ease(10, 2, 15) == pytest.approx(74.86)


def test_flesch_kincaid_grade():
    assert flesch_kincaid_grade(10, 2, 15) == pytest.approx(4.06)


def test_coleman_liau_index():
    assert coleman_liau_index(100, 20, 5) == pytest.approx(6.2)


@pytest.mark.parametrize("words, sentences", [(0, 0), (0, 3), (12, 0)])
def test_formulas_return_zero_for_degenerate_input(words, sentences):
    assert flesch_reading_ease(words, sentences, 40) == 0
    assert flesch_kincaid_grade(words, sentences, 40) == 0
    assert coleman_liau_index(200, words, sentences) == 0


@pytest.mark.parametrize("fk, cl, expected", [
    (1, 1, "1st grade"),
    (2, 2, "2nd grade"),
    (3, 3, "3rd grade"),
    (4, 4, "4th grade"),
    (11, 11, "11th grade"),
    (12, 12, "12th grade"),
    (2.4, 2.6, "3rd grade"),   # mean 2.5 rounds up
    (0, 0, "Kindergarten"),
    (-3, -5, "Kindergarten"),
    (13, 13, "College level"),
    (20, 9, "College level"),
])
def test_grade_level(fk, cl, expected):
    assert grade_level(fk, cl) == expected


@pytest.mark.parametrize("score, expected_start", [
    (95, "Very easy to read"),
    (90, "Very easy to read"),
    (85, "Easy to read"),
    (75, "Fairly easy to read"),
    (65, "Plain English"),
    (55, "Fairly difficult to read"),
    (35, "Difficult to read"),
    (30, "Difficult to read"),
    (25, "Very difficult to read"),
    (-40, "Very difficult to read"),
])
def test_readability_interpretation(score, expected_start):
    assert readability_interpretation(score).startswith(expected_start)


def test_analyze_readability_simple_text():
    metrics = analyze_readability("The cat sat on the mat. The dog ran.")
    # nine one-syllable words in two sentences
    assert metrics.syllable_count == 9
    assert metrics.flesch_score == pytest.approx(206.835 - 1.015 * 4.5 - 84.6)
    assert metrics.flesch_kincaid_grade == pytest.approx(0.39 * 4.5 + 11.8 - 15.59)
    assert metrics.grade_level == "Kindergarten"
    assert metrics.interpretation.startswith("Very easy to read")


def test_analyze_readability_empty_text():
    metrics = analyze_readability("")
    assert metrics.flesch_score == 0
    assert metrics.flesch_kincaid_grade == 0
    assert metrics.coleman_liau_index == 0
    assert metrics.grade_level == "Kindergarten"
    assert metrics.interpretation.startswith("Very difficult to read")
