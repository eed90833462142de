"""
Analysis pipeline
=================
Validates, safety-checks and sanitizes a text, then runs every metric over
it and merges the outputs into one AnalysisResult.

The pipeline is synchronous. A caller that wants to report progress (for
example a UI progress bar) passes ``on_progress``, which is called between
stages with a percentage and the stage name.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from text_analyzer.frequency import (DEFAULT_MAX_WORDS, DEFAULT_MIN_WORD_LENGTH,
                                     analyze_word_frequency)
from text_analyzer.metrics import BasicMetrics, analyze_basic_metrics
from text_analyzer.readability import ReadabilityMetrics, analyze_readability
from text_analyzer.sentiment import (DEFAULT_LEXICON, SentimentEngine,
                                     SentimentLexicon, SentimentResult)
from text_analyzer.validation import (MAX_TEXT_LENGTH, MIN_TEXT_LENGTH,
                                      SafetyResult, ValidationResult,
                                      check_safety, sanitize, validate)

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURATION
# ============================================================================

PROGRESS_STEPS = {
    'validation': 10,
    'basic_metrics': 30,
    'readability': 50,
    'sentiment': 70,
    'word_frequency': 90,
    'complete': 100
}

ProgressCallback = Callable[[int, str], None]


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Thresholds for one analysis run.

    Attributes:
        min_text_length: Shortest accepted input, in characters
        max_text_length: Longest accepted input, in characters
        min_word_length: Frequency list keeps words longer than this
        max_frequency_words: Length of the frequency list
        lexicon: Word lists used for sentiment scoring
    """
    min_text_length: int = MIN_TEXT_LENGTH
    max_text_length: int = MAX_TEXT_LENGTH
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    max_frequency_words: int = DEFAULT_MAX_WORDS
    lexicon: SentimentLexicon = DEFAULT_LEXICON


DEFAULT_CONFIG = AnalyzerConfig()

# ============================================================================
# RESULT
# ============================================================================


@dataclass(frozen=True)
class AnalysisResult:
    """
    Everything computed for one text.

    When the input is rejected (invalid length or unsafe content) only
    ``validation`` and, if it ran, ``safety`` are set.
    """
    validation: ValidationResult
    safety: Optional[SafetyResult] = None
    text: str = ''
    basic: Optional[BasicMetrics] = None
    readability: Optional[ReadabilityMetrics] = None
    sentiment: Optional[SentimentResult] = None
    word_frequency: List[Tuple[str, int]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return (self.validation.is_valid
                and self.safety is not None
                and self.safety.is_safe)

    @property
    def error_message(self) -> str:
        if not self.validation.is_valid:
            return self.validation.message
        if self.safety is not None and not self.safety.is_safe:
            return self.safety.message
        return ''

    def as_dict(self) -> Dict:
        return {
            'ok': self.ok,
            'validation': self.validation.as_dict(),
            'safety': self.safety.as_dict() if self.safety else None,
            'text': self.text,
            'basic': self.basic.as_dict() if self.basic else None,
            'readability': self.readability.as_dict() if self.readability else None,
            'sentiment': self.sentiment.as_dict() if self.sentiment else None,
            'word_frequency': [list(entry) for entry in self.word_frequency],
            'warnings': list(self.warnings)
        }

# ============================================================================
# PIPELINE
# ============================================================================


def _report(on_progress: Optional[ProgressCallback], stage: str) -> None:
    if on_progress is not None:
        on_progress(PROGRESS_STEPS[stage], stage)


def analyze_text(text: str,
                 config: Optional[AnalyzerConfig] = None,
                 on_progress: Optional[ProgressCallback] = None) -> AnalysisResult:
    """
    Run the full analysis over a text.

    Steps:
    1. Trim and validate length; stop if invalid
    2. Safety-check the trimmed text; stop if unsafe, keep advisories
    3. Sanitize, then compute basic metrics, readability, sentiment and
       word frequency on the sanitized text

    Args:
        text: Raw user input
        config: Thresholds; defaults to DEFAULT_CONFIG
        on_progress: Optional ``callback(percent, stage)``

    Returns:
        AnalysisResult

    Raises:
        TypeError: if ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f'text must be str, not {type(text).__name__}')
    config = config or DEFAULT_CONFIG
    t_start = time.time()

    text = text.strip()
    validation = validate(text, config.min_text_length, config.max_text_length)
    if not validation.is_valid:
        logger.info("Rejected input (%s): %d characters", validation.code, len(text))
        return AnalysisResult(validation=validation)

    safety = check_safety(text)
    if not safety.is_safe:
        logger.info("Blocked input (%s)", safety.code)
        return AnalysisResult(validation=validation, safety=safety)

    warnings = [safety.message] if safety.is_advisory else []
    sanitized = sanitize(text)
    _report(on_progress, 'validation')

    basic = analyze_basic_metrics(sanitized)
    _report(on_progress, 'basic_metrics')

    readability = analyze_readability(sanitized, basic)
    _report(on_progress, 'readability')

    sentiment = SentimentEngine(config.lexicon).analyze(sanitized)
    _report(on_progress, 'sentiment')

    word_frequency = analyze_word_frequency(
        sanitized, config.min_word_length, config.max_frequency_words
    )
    _report(on_progress, 'word_frequency')

    result = AnalysisResult(
        validation=validation,
        safety=safety,
        text=sanitized,
        basic=basic,
        readability=readability,
        sentiment=sentiment,
        word_frequency=word_frequency,
        warnings=warnings
    )
    _report(on_progress, 'complete')

    logger.debug("Analyzed %d words in %.1f ms", basic.word_count,
                 (time.time() - t_start) * 1000)
    return result
