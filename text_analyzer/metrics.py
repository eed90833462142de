"""Basic text counts: characters, words, sentences, paragraphs."""

import re
from dataclasses import asdict, dataclass
from typing import Dict, Union

from text_analyzer.tokenization import extract_words, split_paragraphs, split_sentences

_RE_WHITESPACE = re.compile(r'\s')


@dataclass(frozen=True)
class BasicMetrics:
    char_count: int
    char_no_spaces_count: int
    word_count: int
    sentence_count: int
    paragraph_count: int
    # "4.25"-style string, or the number 0 when there are no words
    avg_word_length: Union[str, int]

    def as_dict(self) -> Dict:
        return asdict(self)


def analyze_basic_metrics(text: str) -> BasicMetrics:
    """
    Count characters, words, sentences and paragraphs in raw text.

    Args:
        text: Text to measure (not normalized)

    Returns:
        BasicMetrics. ``avg_word_length`` is non-space characters per word,
        rounded to two places as a string, or 0 when there are no words.

    Example:
        "Hello world. This is a test." -> 28 chars, 23 without spaces,
        6 words, 2 sentences, 1 paragraph, avg_word_length "3.83"
    """
    char_no_spaces = len(_RE_WHITESPACE.sub('', text))
    word_count = len(extract_words(text))

    avg_word_length: Union[str, int] = 0
    if word_count > 0:
        avg_word_length = f'{char_no_spaces / word_count:.2f}'

    return BasicMetrics(
        char_count=len(text),
        char_no_spaces_count=char_no_spaces,
        word_count=word_count,
        sentence_count=len(split_sentences(text)),
        paragraph_count=len(split_paragraphs(text)),
        avg_word_length=avg_word_length
    )
