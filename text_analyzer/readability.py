"""
Syllable estimation and readability formulas.
==============================================
Flesch Reading Ease, Flesch-Kincaid Grade and the Coleman-Liau Index, plus
the grade-level label and the textual interpretation of a Flesch score.

All three formulas return 0 when there are no words or no sentences.
"""

import math
import re
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple

from text_analyzer.metrics import BasicMetrics, analyze_basic_metrics

# ============================================================================
# CONSTANTS
# ============================================================================

# Silent-e and inflectional endings stripped before counting nuclei.
# Consonant here means anything other than a, e, i, o, u, y.
_RE_SILENT_ENDING = re.compile(r'(?:[^aeiouy]es|ed|[^aeiouy]e)$')
_RE_LEADING_Y = re.compile(r'^y')
_RE_SYLLABLE_NUCLEUS = re.compile(r'[aeiouy]{1,2}')
# Words containing digits are left out of syllable counting on purpose
_RE_ALPHA_WORDS = re.compile(r'\b[a-z]+\b')

# (inclusive lower bound, interpretation), highest band first
READABILITY_BANDS: Tuple[Tuple[float, str], ...] = (
    (90, 'Very easy to read. Easily understood by an average 11-year-old student.'),
    (80, 'Easy to read. Conversational English for consumers.'),
    (70, 'Fairly easy to read.'),
    (60, 'Plain English. Easily understood by 13- to 15-year-old students.'),
    (50, 'Fairly difficult to read.'),
    (30, 'Difficult to read. Best understood by college graduates.'),
)
HARDEST_INTERPRETATION = 'Very difficult to read. Best understood by university graduates.'

KINDERGARTEN = 'Kindergarten'
COLLEGE_LEVEL = 'College level'
COLLEGE_GRADE = 13

# ============================================================================
# SYLLABLES
# ============================================================================


def count_syllables_in_word(word: str) -> int:
    """
    Estimate syllables in a single word.

    Heuristic:
    - words of three letters or fewer count as one syllable
    - strip one trailing consonant+"es", "ed" or consonant+"e"
    - strip a leading "y"
    - count runs of one or two vowels (a, e, i, o, u, y)
    - every word has at least one syllable

    Args:
        word: Alphabetic word

    Returns:
        Estimated syllable count (>= 1)
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    word = _RE_SILENT_ENDING.sub('', word, count=1)
    word = _RE_LEADING_Y.sub('', word, count=1)

    nuclei = _RE_SYLLABLE_NUCLEUS.findall(word)
    return len(nuclei) if nuclei else 1


def count_syllables(text: str) -> int:
    """Total syllables over all purely alphabetic words in the text."""
    words = _RE_ALPHA_WORDS.findall(text.lower())
    return sum(count_syllables_in_word(w) for w in words)

# ============================================================================
# FORMULAS
# ============================================================================


def flesch_reading_ease(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """
    Flesch Reading Ease. Higher is easier.

    206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    """
    if word_count == 0 or sentence_count == 0:
        return 0
    return (206.835
            - 1.015 * (word_count / sentence_count)
            - 84.6 * (syllable_count / word_count))


def flesch_kincaid_grade(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """
    Flesch-Kincaid Grade Level (US school grade).

    0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59
    """
    if word_count == 0 or sentence_count == 0:
        return 0
    return (0.39 * (word_count / sentence_count)
            + 11.8 * (syllable_count / word_count)
            - 15.59)


def coleman_liau_index(char_count: int, word_count: int, sentence_count: int) -> float:
    """
    Coleman-Liau Index.

    L = letters per 100 words, S = sentences per 100 words;
    index = 0.0588 * L - 0.296 * S - 15.8
    """
    if word_count == 0 or sentence_count == 0:
        return 0
    letters_per_100 = (char_count / word_count) * 100
    sentences_per_100 = (sentence_count / word_count) * 100
    return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8

# ============================================================================
# LABELS
# ============================================================================


def _ordinal_suffix(num: int) -> str:
    last_digit = num % 10
    last_two = num % 100
    if last_digit == 1 and last_two != 11:
        return 'st'
    if last_digit == 2 and last_two != 12:
        return 'nd'
    if last_digit == 3 and last_two != 13:
        return 'rd'
    return 'th'


def grade_level(flesch_kincaid: float, coleman_liau: float) -> str:
    """
    Label the average of two grade indices.

    The mean is rounded half-up; 0 or below is "Kindergarten", 13 or
    above is "College level", anything else is e.g. "3rd grade".
    """
    grade = math.floor((flesch_kincaid + coleman_liau) / 2 + 0.5)
    if grade <= 0:
        return KINDERGARTEN
    if grade >= COLLEGE_GRADE:
        return COLLEGE_LEVEL
    return f'{grade}{_ordinal_suffix(grade)} grade'


def readability_interpretation(score: float) -> str:
    for lower_bound, interpretation in READABILITY_BANDS:
        if score >= lower_bound:
            return interpretation
    return HARDEST_INTERPRETATION

# ============================================================================
# COMBINED
# ============================================================================


@dataclass(frozen=True)
class ReadabilityMetrics:
    syllable_count: int
    flesch_score: float
    flesch_kincaid_grade: float
    coleman_liau_index: float
    grade_level: str
    interpretation: str

    def as_dict(self) -> Dict:
        return asdict(self)


def analyze_readability(text: str, basic: Optional[BasicMetrics] = None) -> ReadabilityMetrics:
    """
    Run the syllable counter and every readability formula over a text.

    Args:
        text: Text to score
        basic: Counts already computed for the same text, if any

    Returns:
        ReadabilityMetrics
    """
    if basic is None:
        basic = analyze_basic_metrics(text)

    syllables = count_syllables(text)
    fre = flesch_reading_ease(basic.word_count, basic.sentence_count, syllables)
    fk = flesch_kincaid_grade(basic.word_count, basic.sentence_count, syllables)
    cl = coleman_liau_index(basic.char_count, basic.word_count, basic.sentence_count)

    return ReadabilityMetrics(
        syllable_count=syllables,
        flesch_score=fre,
        flesch_kincaid_grade=fk,
        coleman_liau_index=cl,
        grade_level=grade_level(fk, cl),
        interpretation=readability_interpretation(fre)
    )
