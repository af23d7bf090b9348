"""XML handling for textcheck_tools.

This package provides escaping and tag stripping for plain text, and the
assembly of detected issues into a document or fragment XML report.
"""

from .filtering import (
    XML_COMMENT_PATTERN,
    XML_TAG_PATTERN,
    escape_xml_text,
    filter_tags,
)
from .report import (
    ReportSerializer,
    assemble_report,
)

__all__ = [
    "XML_COMMENT_PATTERN",
    "XML_TAG_PATTERN",
    "escape_xml_text",
    "filter_tags",
    "ReportSerializer",
    "assemble_report",
]
