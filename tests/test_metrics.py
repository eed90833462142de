import pytest

from text_analyzer.metrics import analyze_basic_metrics


def test_simple_text():
    # 28 characters, 5 of them spaces
    metrics = analyze_basic_metrics("Hello world. This is a test.")
    assert metrics.char_count == 28
    assert metrics.char_no_spaces_count == 23
    assert metrics.word_count == 6
    assert metrics.sentence_count == 2
    assert metrics.paragraph_count == 1
    assert metrics.avg_word_length == "3.83"


def test_empty_text():
    metrics = analyze_basic_metrics("")
    assert metrics.char_count == 0
    assert metrics.char_no_spaces_count == 0
    assert metrics.word_count == 0
    assert metrics.sentence_count == 0
    assert metrics.paragraph_count == 0
    assert metrics.avg_word_length == 0


def test_multiple_paragraphs():
    metrics = analyze_basic_metrics("First paragraph.\n\nSecond paragraph.\n\nThird paragraph.")
    assert metrics.paragraph_count == 3
    assert metrics.sentence_count == 3


def test_punctuation_only_text_has_no_words():
    metrics = analyze_basic_metrics("... !!! ???")
    assert metrics.word_count == 0
    assert metrics.avg_word_length == 0


def test_avg_word_length_is_two_decimal_string():
    metrics = analyze_basic_metrics("abcd efgh")
    assert metrics.avg_word_length == "4.00"


@pytest.mark.parametrize("text", [
    "", " ", "a b c", "Tabs\tand\nnewlines\r\n", "no-spaces-here", "  padded  ",
])
def test_char_count_not_less_than_no_spaces(text):
    metrics = analyze_basic_metrics(text)
    assert metrics.char_count >= metrics.char_no_spaces_count >= 0


def test_as_dict():
    assert analyze_basic_metrics("One two.").as_dict() == {
        'char_count': 8,
        'char_no_spaces_count': 7,
        'word_count': 2,
        'sentence_count': 1,
        'paragraph_count': 1,
        'avg_word_length': '3.50',
    }
