"""
Text Analyzer - descriptive statistics, readability and sentiment for text
==========================================================================
A small deterministic analysis core. Every function is a pure function of
its input and fixed constants; ``analyze_text`` runs the whole pipeline.

Modules:
- validation: length checks, sanitization, safety checks
- tokenization: normalization and word/sentence/paragraph segmentation
- metrics: character, word, sentence and paragraph counts
- readability: syllable estimation and readability formulas
- sentiment: lexicon-based sentiment scoring
- frequency: word-frequency ranking
- analyzer: the combined pipeline
"""

from text_analyzer.analyzer import (DEFAULT_CONFIG, PROGRESS_STEPS, AnalysisResult,
                                    AnalyzerConfig, analyze_text)
from text_analyzer.frequency import analyze_word_frequency
from text_analyzer.metrics import BasicMetrics, analyze_basic_metrics
from text_analyzer.readability import (ReadabilityMetrics, analyze_readability,
                                       coleman_liau_index, count_syllables,
                                       count_syllables_in_word, flesch_kincaid_grade,
                                       flesch_reading_ease, grade_level,
                                       readability_interpretation)
from text_analyzer.sentiment import (DEFAULT_LEXICON, SentimentEngine, SentimentLexicon,
                                     SentimentResult, analyze_sentiment)
from text_analyzer.tokenization import normalize
from text_analyzer.validation import (MAX_TEXT_LENGTH, MIN_TEXT_LENGTH, SafetyResult,
                                      ValidationResult, check_safety, sanitize,
                                      truncate_text, validate)

__version__ = '1.0.0'

__all__ = [
    'AnalysisResult', 'AnalyzerConfig', 'BasicMetrics', 'DEFAULT_CONFIG',
    'DEFAULT_LEXICON', 'MAX_TEXT_LENGTH', 'MIN_TEXT_LENGTH', 'PROGRESS_STEPS',
    'ReadabilityMetrics', 'SafetyResult', 'SentimentEngine', 'SentimentLexicon',
    'SentimentResult', 'ValidationResult', 'analyze_basic_metrics',
    'analyze_readability', 'analyze_sentiment', 'analyze_text',
    'analyze_word_frequency', 'check_safety', 'coleman_liau_index',
    'count_syllables', 'count_syllables_in_word', 'flesch_kincaid_grade',
    'flesch_reading_ease', 'grade_level', 'normalize', 'readability_interpretation',
    'sanitize', 'truncate_text', 'validate',
]
