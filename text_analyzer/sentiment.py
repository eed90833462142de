"""
Lexicon-based sentiment scoring.
================================
Words of the normalized text are looked up in a fixed positive and a fixed
negative word list. No weighting, negation handling or stemming.
"""

from dataclasses import asdict, dataclass
from typing import Dict, FrozenSet, Optional

from text_analyzer.tokenization import extract_words, normalize

# ============================================================================
# LEXICON
# ============================================================================

POSITIVE = 'positive'
NEGATIVE = 'negative'
NEUTRAL = 'neutral'

POSITIVE_WORDS = frozenset([
    'good', 'great', 'excellent', 'amazing', 'wonderful', 'fantastic', 'terrific',
    'outstanding', 'superb', 'brilliant', 'awesome', 'fabulous', 'spectacular',
    'perfect', 'delightful', 'pleasant', 'happy', 'joyful', 'love', 'like', 'beautiful',
    'best', 'better', 'impressive', 'positive', 'recommended', 'worth', 'helpful',
    'success', 'successful', 'succeed', 'pleased', 'enjoy', 'enjoyed', 'glad', 'thrilled'
])

NEGATIVE_WORDS = frozenset([
    'bad', 'terrible', 'awful', 'horrible', 'poor', 'disappointing', 'disappointed',
    'worst', 'waste', 'useless', 'difficult', 'hard', 'ugly', 'boring', 'annoying',
    'hate', 'dislike', 'negative', 'problem', 'issue', 'fail', 'failed', 'failure',
    'wrong', 'error', 'mistake', 'concern', 'worried', 'worry', 'sad', 'unhappy',
    'unfortunate', 'trouble', 'unreliable', 'frustrating', 'frustration', 'frustrate'
])


@dataclass(frozen=True)
class SentimentLexicon:
    """Immutable pair of word sets. Words are expected in lower case."""
    positive: FrozenSet[str]
    negative: FrozenSet[str]


DEFAULT_LEXICON = SentimentLexicon(positive=POSITIVE_WORDS, negative=NEGATIVE_WORDS)

# ============================================================================
# SCORING
# ============================================================================


@dataclass(frozen=True)
class SentimentResult:
    sentiment: str
    positive_count: int
    negative_count: int
    score: int

    def as_dict(self) -> Dict:
        return asdict(self)


class SentimentEngine:
    """
    Scores text against a sentiment lexicon.

    The lexicon is fixed at construction; the engine keeps no other state,
    so one instance can be shared between callers.
    """

    def __init__(self, lexicon: SentimentLexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def analyze(self, text: str) -> SentimentResult:
        """
        Count positive and negative words and classify the text.

        A word is checked against both lists independently. The text is
        "positive" or "negative" when that side has strictly more hits,
        otherwise "neutral" (including when neither list matches).

        Args:
            text: Text to score

        Returns:
            SentimentResult with score = positive_count - negative_count
        """
        positive_count = 0
        negative_count = 0
        for word in extract_words(normalize(text)):
            if word in self.lexicon.positive:
                positive_count += 1
            if word in self.lexicon.negative:
                negative_count += 1

        if positive_count > negative_count:
            sentiment = POSITIVE
        elif negative_count > positive_count:
            sentiment = NEGATIVE
        else:
            sentiment = NEUTRAL

        return SentimentResult(
            sentiment=sentiment,
            positive_count=positive_count,
            negative_count=negative_count,
            score=positive_count - negative_count
        )


_default_engine = SentimentEngine()


def analyze_sentiment(text: str, lexicon: Optional[SentimentLexicon] = None) -> SentimentResult:
    if lexicon is None:
        return _default_engine.analyze(text)
    return SentimentEngine(lexicon).analyze(text)
