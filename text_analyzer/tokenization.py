"""
Normalization and regex segmentation of text into words, sentences and
paragraphs.

Segmentation rules:
- word: a run of Unicode word characters (letters, digits, underscore)
  between word boundaries
- sentence: the raw text split on runs of ``.``, ``!`` or ``?`` followed by
  optional whitespace
- paragraph: the raw text split on blank lines (newline, optional
  whitespace, newline)

Empty fragments are dropped, so empty input has zero sentences and zero
paragraphs.
"""

import re
from typing import List

_RE_WORDS = re.compile(r'\b\w+\b')
_RE_WHITESPACE = re.compile(r'\s+')
_RE_PUNCT_RUN = re.compile(r'[.,!?]+')
_RE_SENTENCE_SPLIT = re.compile(r'[.!?]+\s*')
_RE_PARAGRAPH_SPLIT = re.compile(r'\n\s*\n')


def normalize(text: str) -> str:
    """
    Canonical form used for word extraction.

    Lower-cases, collapses whitespace, collapses runs of ``.,!?`` into a
    single ``.`` and trims.

    Example:
        "Wow!!  Great,  right?" -> "wow. great. right."
    """
    text = _RE_WHITESPACE.sub(' ', text.lower())
    text = _RE_PUNCT_RUN.sub('.', text)
    return text.strip()


def extract_words(text: str) -> List[str]:
    return _RE_WORDS.findall(text)


def split_sentences(text: str) -> List[str]:
    return [s for s in _RE_SENTENCE_SPLIT.split(text) if s]


def split_paragraphs(text: str) -> List[str]:
    return [p for p in _RE_PARAGRAPH_SPLIT.split(text) if p]
