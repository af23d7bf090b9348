"""Interfaces of the collaborators that live outside this library.

The checking engine produces issues, an excerpt extractor cuts a context
window around an issue, and an element renderer turns issues into XML. Only
the shapes consumed here are described.
"""

from typing import Optional, Protocol


class LanguageDescriptor(Protocol):
    """Language selected by the caller, identified by a short code like ``fr``."""

    short_code: str


class DetectedIssue(Protocol):
    """One flagged span ``[from_pos, to_pos)`` of the checked text."""

    from_pos: int
    to_pos: int
    message: str
    rule_id: str


class ExcerptExtractor(Protocol):
    """Produces a bounded context window around an offset range."""

    def excerpt(self, text: str, from_pos: int, to_pos: int, width: int) -> str: ...


class ElementRenderer(Protocol):
    """Formats the report prologue, single issues and the closing tag."""

    def render_start(
        self,
        language: Optional[LanguageDescriptor],
        secondary_language: Optional[LanguageDescriptor],
    ) -> str: ...

    def render_issue(self, issue: DetectedIssue, excerpt: str, text: str) -> str: ...

    def render_end(self) -> str: ...
