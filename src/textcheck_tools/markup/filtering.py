"""Escaping and tag stripping for text embedded in or extracted from XML."""

import re
from types import MappingProxyType
from typing import Mapping

XML_ESCAPES: Mapping[int, str] = MappingProxyType({
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord("&"): "&amp;",
    ord('"'): "&quot;",
})

XML_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
# A '<' not preceded by another '<', up to the next '>' with no '<' or '>' between
XML_TAG_PATTERN = re.compile(r"(?<!<)<[^<>]+>", re.DOTALL)


def escape_xml_text(s: str) -> str:
    """Escape ``<``, ``>``, ``&`` and ``"`` for use in XML text or attributes.

    All other characters, including non-ASCII ones, are copied unchanged.
    """
    return s.translate(XML_ESCAPES)


def filter_tags(s: str) -> str:
    """Strip comments and tags from XML, keeping the text content.

    Comments are replaced by a single space before tags are removed, so that
    tag-like text inside a comment disappears together with the comment.

    This is a best-effort extraction, not a parser: a ``>`` inside a quoted
    attribute value ends the tag early, and ``<<b>`` is left untouched.

    Args:
        s: XML string to be filtered

    Returns:
        The string without XML comments and tags
    """
    s = XML_COMMENT_PATTERN.sub(" ", s)
    return XML_TAG_PATTERN.sub("", s)
