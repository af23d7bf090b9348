"""Character processing layer for textcheck_tools.

This package provides casing classification, character predicates and the
decoding of text streams handed to the checking engine.
"""

from .casing import (
    change_first_char_case,
    is_all_uppercase,
    is_capitalized_word,
    is_mixed_case,
    is_not_all_lowercase,
    lowercase_first_char,
    starts_with_uppercase,
    uppercase_first_char,
)
from .ingestion import (
    read_stream,
    reader_to_string,
    stream_to_string,
)
from .predicates import (
    is_alphabetic,
    is_empty,
    is_letter_or_digit,
    is_non_breaking_whitespace,
    is_positive_number,
    is_whitespace,
    trim_whitespace,
)

__all__ = [
    # Modules
    "casing",
    "ingestion",
    "predicates",
    # Casing classification
    "change_first_char_case",
    "is_all_uppercase",
    "is_capitalized_word",
    "is_mixed_case",
    "is_not_all_lowercase",
    "lowercase_first_char",
    "starts_with_uppercase",
    "uppercase_first_char",
    # Stream decoding
    "read_stream",
    "reader_to_string",
    "stream_to_string",
    # Character predicates
    "is_alphabetic",
    "is_empty",
    "is_letter_or_digit",
    "is_non_breaking_whitespace",
    "is_positive_number",
    "is_whitespace",
    "trim_whitespace",
]
