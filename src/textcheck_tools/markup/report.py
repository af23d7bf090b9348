"""Assembly of detected issues into an XML report.

A report can be written in one call (``FramingMode.FULL``) or streamed over
several calls: the first batch uses ``OPEN``, intermediate batches
``CONTINUE`` and the last one ``CLOSE``. No state is kept between calls, so
the caller decides which mode each batch gets.

Formatting of the prologue, of each issue element and of the closing tag is
delegated to an ``ElementRenderer``; the context shown for each issue comes
from an ``ExcerptExtractor``. Escaping is the renderer's job.
"""

from typing import List, Optional, Sequence

from ..shared.config import DEFAULT_CONTEXT_SIZE, ReportOptions
from ..shared.interfaces import DetectedIssue, ElementRenderer, ExcerptExtractor
from ..shared.logging import get_logger

logger = get_logger(__name__, component="report")


class ReportSerializer:
    """Serializes issue lists through a renderer and an excerpt extractor."""

    def __init__(
        self,
        renderer: ElementRenderer,
        extractor: ExcerptExtractor,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the serializer.

        Args:
            renderer: Formats the prologue, the issue elements and the end tag
            extractor: Produces the context excerpt for each issue
            correlation_id: Optional ID attached to log records
        """
        self.renderer = renderer
        self.extractor = extractor
        self.logger = logger.with_correlation(correlation_id)

    def assemble(
        self,
        issues: Sequence[DetectedIssue],
        text: str,
        options: Optional[ReportOptions] = None,
    ) -> str:
        """Build the XML for one batch of issues.

        Args:
            issues: Issues in the order they should appear
            text: The checked text the issue offsets refer to
            options: Context width, framing mode and languages

        Returns:
            The body, preceded by the prologue and root start tag when the mode
            opens the document and followed by the root end tag when it closes it
        """
        options = options or ReportOptions()
        parts: List[str] = []
        if options.mode.emits_start:
            parts.append(
                self.renderer.render_start(
                    options.language, options.secondary_language
                )
            )
        parts.append(self.render_issues(issues, text, options.context_width))
        if options.mode.emits_end:
            parts.append(self.renderer.render_end())

        self.logger.debug(
            "Assembled report batch",
            extra={"mode": options.mode.value, "issue_count": len(issues)},
        )
        return "".join(parts)

    def render_issues(
        self,
        issues: Sequence[DetectedIssue],
        text: str,
        context_width: int = DEFAULT_CONTEXT_SIZE,
    ) -> str:
        """Render the issue elements only, without any document framing."""
        elements = []
        for issue in issues:
            excerpt = self.extractor.excerpt(
                text, issue.from_pos, issue.to_pos, context_width
            )
            elements.append(self.renderer.render_issue(issue, excerpt, text))
        return "".join(elements)


def assemble_report(
    issues: Sequence[DetectedIssue],
    text: str,
    options: Optional[ReportOptions] = None,
    *,
    renderer: ElementRenderer,
    extractor: ExcerptExtractor,
) -> str:
    """Build the XML for one batch of issues.

    Convenience wrapper around ``ReportSerializer.assemble``.
    """
    return ReportSerializer(renderer, extractor).assemble(issues, text, options)
