"""Word-frequency ranking."""

from collections import Counter
from typing import List, Tuple

from text_analyzer.tokenization import extract_words, normalize

DEFAULT_MIN_WORD_LENGTH = 2
DEFAULT_MAX_WORDS = 10


def analyze_word_frequency(text: str,
                           min_length: int = DEFAULT_MIN_WORD_LENGTH,
                           max_words: int = DEFAULT_MAX_WORDS) -> List[Tuple[str, int]]:
    """
    Rank the most frequent words of a text.

    Words are taken from the normalized (lower-cased) text and kept only
    when longer than ``min_length``. Ties keep the order in which words
    were first seen.

    Args:
        text: Text to analyze
        min_length: Words must be strictly longer than this
        max_words: Maximum number of entries returned

    Returns:
        List of (word, count) pairs, most frequent first

    Example:
        "the the the quick brown fox jumps over the lazy dog", 2, 5
        -> [('the', 4), ('quick', 1), ('brown', 1), ('fox', 1), ('jumps', 1)]
    """
    # Counter preserves first-seen order, and sorted() is stable
    word_freq = Counter(w for w in extract_words(normalize(text)) if len(w) > min_length)
    ranked = sorted(word_freq.items(), key=lambda item: item[1], reverse=True)
    return ranked[:max(0, max_words)]
