"""Shared utilities for textcheck_tools.

This module provides the configuration objects, error types, collaborator
interfaces, validation helpers and logging used across all components.
"""

from .config import (
    DEFAULT_CONTEXT_SIZE,
    READ_BUFFER_SIZE,
    FramingMode,
    IngestionConfig,
    ReportOptions,
)
from .errors import (
    InvalidArgumentError,
    IOFailureError,
    TextToolsError,
    UnsupportedEncodingError,
)
from .interfaces import (
    DetectedIssue,
    ElementRenderer,
    ExcerptExtractor,
    LanguageDescriptor,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .validation import assure_set

__all__ = [
    "DEFAULT_CONTEXT_SIZE",
    "READ_BUFFER_SIZE",
    "FramingMode",
    "IngestionConfig",
    "ReportOptions",
    "InvalidArgumentError",
    "IOFailureError",
    "TextToolsError",
    "UnsupportedEncodingError",
    "DetectedIssue",
    "ElementRenderer",
    "ExcerptExtractor",
    "LanguageDescriptor",
    "CorrelationLogger",
    "get_logger",
    "assure_set",
]
