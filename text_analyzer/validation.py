"""
Input validation, sanitization and safety checks.
==================================================
Every check returns a result value carrying a short ``code`` and a
human-readable ``message``; nothing here raises on bad input.
"""

import re
from dataclasses import asdict, dataclass
from typing import Dict, Optional

# ============================================================================
# CONSTANTS
# ============================================================================

MIN_TEXT_LENGTH = 10
MAX_TEXT_LENGTH = 100000

# Validation / safety codes
CODE_EMPTY = 'EMPTY'
CODE_TOO_SHORT = 'TOO_SHORT'
CODE_TOO_LONG = 'TOO_LONG'
CODE_UNSAFE_CONTENT = 'UNSAFE_CONTENT'
CODE_SPECIAL_CHARACTERS = 'SPECIAL_CHARACTERS'

_RE_URL = re.compile(r'https?://\S+')
_RE_HTML_TAG = re.compile(r'<[^>]*>')
_RE_SPECIAL_CHARS = re.compile(r'[^\w\s.,!?-]')
_RE_WHITESPACE = re.compile(r'\s+')

# ============================================================================
# RESULT TYPES
# ============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a length check."""
    is_valid: bool
    message: str = ''
    code: Optional[str] = None

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class SafetyResult:
    """
    Outcome of a safety check.

    ``is_safe=False`` blocks analysis. ``is_safe=True`` with a message is an
    advisory: analysis may go ahead but the caller should show the warning.
    """
    is_safe: bool
    message: str = ''
    code: Optional[str] = None

    @property
    def is_advisory(self) -> bool:
        return self.is_safe and bool(self.message)

    def as_dict(self) -> Dict:
        return asdict(self)

# ============================================================================
# CHECKS
# ============================================================================


def validate(text: str,
             min_length: int = MIN_TEXT_LENGTH,
             max_length: int = MAX_TEXT_LENGTH) -> ValidationResult:
    """
    Check that text is within the accepted length bounds.

    Args:
        text: Raw input text
        min_length: Smallest accepted length, in characters
        max_length: Largest accepted length, in characters

    Returns:
        ValidationResult; ``code`` is EMPTY, TOO_SHORT or TOO_LONG on failure
    """
    too_short = f'Text is too short. Minimum length is {min_length} characters.'
    if not text:
        return ValidationResult(False, too_short, CODE_EMPTY)
    if len(text) < min_length:
        return ValidationResult(False, too_short, CODE_TOO_SHORT)
    if len(text) > max_length:
        return ValidationResult(
            False,
            f'Text is too long. Maximum length is {max_length} characters.',
            CODE_TOO_LONG
        )
    return ValidationResult(True)


def sanitize(text: str) -> str:
    """
    Strip HTML tags and URLs, then collapse whitespace.

    Tags and URLs are removed before whitespace is collapsed so the gaps
    they leave end up as single spaces.

    Example:
        "<p>Hello <b>world</b>!</p>" -> "Hello world!"
    """
    if not text:
        return ''
    text = _RE_HTML_TAG.sub('', text)
    text = _RE_URL.sub('', text)
    return _RE_WHITESPACE.sub(' ', text).strip()


def check_safety(text: str) -> SafetyResult:
    """Flag HTML tags or URLs (blocking) and unusual characters (advisory)."""
    if _RE_URL.search(text) or _RE_HTML_TAG.search(text):
        return SafetyResult(
            False,
            'Text contains potentially unsafe content (URLs or HTML tags).',
            CODE_UNSAFE_CONTENT
        )
    if _RE_SPECIAL_CHARS.search(text):
        return SafetyResult(
            True,
            'Text contains special characters that may affect analysis accuracy.',
            CODE_SPECIAL_CHARACTERS
        )
    return SafetyResult(True)


def truncate_text(text: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + '...'
