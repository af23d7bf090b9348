"""Text classification and report serialization utilities.

Stateless helpers used around a grammar and style checker:

- Casing classification of words and tokens
- Character predicates (whitespace, digits, alphabetic code points)
- Decoding of text streams into ``\\n``-separated strings
- XML escaping and best-effort tag stripping
- Assembly of detected issues into a streamable XML report
- Typographic spacing rules
"""

__version__ = "0.1.0"
__author__ = "Textcheck Tools Team"

from .character import (
    is_all_uppercase,
    is_alphabetic,
    is_capitalized_word,
    is_mixed_case,
    is_non_breaking_whitespace,
    is_not_all_lowercase,
    is_positive_number,
    is_whitespace,
    lowercase_first_char,
    read_stream,
    reader_to_string,
    starts_with_uppercase,
    uppercase_first_char,
)
from .markup import ReportSerializer, assemble_report, escape_xml_text, filter_tags
from .shared import (
    FramingMode,
    InvalidArgumentError,
    IOFailureError,
    ReportOptions,
    TextToolsError,
    UnsupportedEncodingError,
    assure_set,
)
from .text import space_before

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Casing and character predicates
    "is_all_uppercase",
    "is_alphabetic",
    "is_capitalized_word",
    "is_mixed_case",
    "is_non_breaking_whitespace",
    "is_not_all_lowercase",
    "is_positive_number",
    "is_whitespace",
    "lowercase_first_char",
    "starts_with_uppercase",
    "uppercase_first_char",

    # Stream decoding
    "read_stream",
    "reader_to_string",

    # XML text handling and reports
    "escape_xml_text",
    "filter_tags",
    "ReportSerializer",
    "assemble_report",
    "FramingMode",
    "ReportOptions",

    # Typography and validation
    "space_before",
    "assure_set",

    # Errors
    "TextToolsError",
    "InvalidArgumentError",
    "UnsupportedEncodingError",
    "IOFailureError",
]
