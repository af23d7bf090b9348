"""Text assembly helpers for textcheck_tools."""

from .typography import (
    DEFAULT_TIGHT_PUNCTUATION,
    TIGHT_PUNCTUATION_BY_LANGUAGE,
    join_strings,
    space_before,
)

__all__ = [
    "DEFAULT_TIGHT_PUNCTUATION",
    "TIGHT_PUNCTUATION_BY_LANGUAGE",
    "join_strings",
    "space_before",
]
