"""Casing pattern classification for words and tokens.

The predicates answer membership questions about a string's casing
(all-uppercase, capitalized, mixed case, ...) rather than returning a single
tag. Characters without a case distinction, such as digits, punctuation or
letters of unicameral scripts, are ignored where noted.

All functions expect a ``str``; passing ``None`` is a caller error.
"""

from .predicates import is_letter_or_digit


def is_all_uppercase(s: str) -> bool:
    """Return True if no letter in ``s`` is lowercase.

    The empty string is vacuously all-uppercase.
    """
    return not any(ch.isalpha() and ch.islower() for ch in s)


def is_not_all_lowercase(s: str) -> bool:
    """Return True if at least one letter in ``s`` is not lowercase."""
    return any(ch.isalpha() and not ch.islower() for ch in s)


def is_capitalized_word(s: str) -> bool:
    """Return True if ``s`` starts uppercase and all other letters are lowercase."""
    if not s or not s[0].isupper():
        return False
    return not is_not_all_lowercase(s[1:])


def is_mixed_case(s: str) -> bool:
    """Return True for irregular casing like ``MixedCase`` or ``iPhone``.

    Neither all-uppercase, all-lowercase nor capitalized words (``Mixedcase``)
    are mixed case.
    """
    return (
        not is_all_uppercase(s)
        and not is_capitalized_word(s)
        and is_not_all_lowercase(s)
    )


def starts_with_uppercase(s: str) -> bool:
    """Return True if the first character of ``s`` is uppercase."""
    return bool(s) and s[0].isupper()


def uppercase_first_char(s: str) -> str:
    """Return ``s`` with its first letter or digit uppercased.

    Leading quotes, brackets and other punctuation are skipped, so
    ``"(hello)"`` becomes ``"(Hello)"``.
    """
    return change_first_char_case(s, to_upper=True)


def lowercase_first_char(s: str) -> str:
    """Return ``s`` with its first letter or digit lowercased."""
    return change_first_char_case(s, to_upper=False)


def change_first_char_case(s: str, to_upper: bool) -> str:
    """Change the case of the first letter or digit of ``s``.

    Args:
        s: String to modify
        to_upper: True to uppercase, False to lowercase

    Returns:
        The string with only that one character changed. If ``s`` holds no
        letter or digit, the last character is changed instead.
        A character whose case mapping spans several characters, such as
        ``"\u00df"``, is left as it is so the length never changes.
    """
    if not s:
        return s
    pos = 0
    last = len(s) - 1
    while pos < last and not is_letter_or_digit(s[pos]):
        pos += 1

    first = s[pos]
    changed = first.upper() if to_upper else first.lower()
    if len(changed) != 1:
        changed = first
    return s[:pos] + changed + s[pos + 1:]
