"""Low-level character classification.

Whitespace, digit and letter predicates used when deciding how tokens of a
checked text are treated. Categories follow the Unicode general category
database via ``unicodedata``.
"""

import sys
import unicodedata
from typing import FrozenSet, Optional

from ..shared.validation import TRIMMED_CHARS

# Field markers inserted by office suites (breakable and unbreakable field,
# e.g. a footnote number); they occupy a token but are never blank.
FIELD_MARKERS: FrozenSet[str] = frozenset({"\u0001", "\u0002"})

ZERO_WIDTH_SPACE = "\u200b"
NO_BREAK_SPACE = "\u00a0"

# Space separators that must not be treated as breaking whitespace
NON_BREAKING_SPACES: FrozenSet[str] = frozenset({"\u00a0", "\u2007", "\u202f"})

SEPARATOR_CATEGORIES: FrozenSet[str] = frozenset({"Zs", "Zl", "Zp"})

# Characters removed by trim_whitespace()
TOKEN_WHITESPACE = "\n \t\r"

ALPHABETIC_CATEGORIES: FrozenSet[str] = frozenset(
    {"Lu", "Ll", "Lt", "Lm", "Lo", "Nl"}
)


def is_empty(s: Optional[str]) -> bool:
    """Return True if ``s`` is None or the empty string."""
    return s is None or len(s) == 0


def is_whitespace(s: str) -> bool:
    """Check if a string consists of whitespace only.

    All Unicode separators count as whitespace except the non-breaking
    spaces. The zero width space counts as whitespace, as Khmer text uses it
    between words.

    Args:
        s: String to check

    Returns:
        True if the string is whitespace-only
    """
    if s in FIELD_MARKERS:
        return False
    trimmed = s.strip(TRIMMED_CHARS)
    if not trimmed:
        return True
    if len(trimmed) == 1:
        if trimmed == ZERO_WIDTH_SPACE:
            return True
        return _is_separator(trimmed)
    return False


def _is_separator(ch: str) -> bool:
    if ch in NON_BREAKING_SPACES:
        return False
    return unicodedata.category(ch) in SEPARATOR_CATEGORIES


def is_non_breaking_whitespace(s: str) -> bool:
    """Check if a string is the non-breaking space (U+00A0)."""
    return s == NO_BREAK_SPACE


def is_positive_number(ch: str) -> bool:
    """Return True if ``ch`` is a decimal digit from 1 to 9."""
    return len(ch) == 1 and "1" <= ch <= "9"


def is_alphabetic(codepoint: int) -> bool:
    """Return True if the code point is a Unicode alphabetic character.

    Letters of every kind and letter numbers (such as Roman numerals) are
    alphabetic; digits, marks and punctuation are not. Values outside
    the Unicode code space are not alphabetic either.
    """
    if not 0 <= codepoint <= sys.maxunicode:
        return False
    return unicodedata.category(chr(codepoint)) in ALPHABETIC_CATEGORIES


def is_letter_or_digit(ch: str) -> bool:
    """Return True if ``ch`` is a letter or a decimal digit."""
    return ch.isalpha() or ch.isdecimal()


def trim_whitespace(s: str) -> str:
    """Remove every space, tab, carriage return and newline from ``s``.

    Useful for cleaning the content of token elements that cannot possibly
    contain any spaces.
    """
    return s.translate({ord(ch): None for ch in TOKEN_WHITESPACE})
