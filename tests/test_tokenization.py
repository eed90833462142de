from text_analyzer.tokenization import extract_words, normalize, split_paragraphs, split_sentences


def test_normalize_lowercases_and_collapses():
    assert normalize("  Wow!!  Great,   RIGHT?  ") == "wow. great. right."


def test_normalize_collapses_mixed_punctuation_runs():
    assert normalize("Wait...?! What") == "wait. what"


def test_extract_words_handles_unicode_and_digits():
    assert extract_words("café au lait costs 3 euros_each") == ["café", "au", "lait", "costs", "3", "euros_each"]


def test_extract_words_empty():
    assert extract_words("") == []


def test_split_sentences():
    assert split_sentences("Hello world. This is a test!  Really?") == [
        "Hello world", "This is a test", "Really"
    ]


def test_split_sentences_empty_input_has_none():
    assert split_sentences("") == []


def test_split_paragraphs():
    text = "First paragraph.\n\nSecond paragraph.\n  \nThird paragraph."
    assert split_paragraphs(text) == ["First paragraph.", "Second paragraph.", "Third paragraph."]


def test_split_paragraphs_empty_input_has_none():
    assert split_paragraphs("") == []
