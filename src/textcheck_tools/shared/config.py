"""Configuration objects for textcheck_tools.

Configurations are frozen dataclasses validated on construction, so a single
instance can be shared freely between threads.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .interfaces import LanguageDescriptor

DEFAULT_CONTEXT_SIZE = 25
READ_BUFFER_SIZE = 4000


class FramingMode(Enum):
    """Which structural brackets accompany one serialized batch of issues."""

    FULL = "full"          # prologue + root open, body, root close
    OPEN = "open"          # prologue + root open, body
    CLOSE = "close"        # body, root close
    CONTINUE = "continue"  # body only

    @property
    def emits_start(self) -> bool:
        """Whether the prologue and the opening root element are written."""
        return self in (FramingMode.FULL, FramingMode.OPEN)

    @property
    def emits_end(self) -> bool:
        """Whether the closing root element is written."""
        return self in (FramingMode.FULL, FramingMode.CLOSE)


@dataclass(frozen=True)
class ReportOptions:
    """Options for assembling an XML issue report.

    Attributes:
        context_width: Characters of context requested around each issue
        mode: Framing of the emitted batch
        language: Language of the checked text, passed to the renderer
        secondary_language: Optional second language (e.g. the user's mother
            tongue), passed to the renderer
    """

    context_width: int = DEFAULT_CONTEXT_SIZE
    mode: FramingMode = FramingMode.FULL
    language: Optional[LanguageDescriptor] = None
    secondary_language: Optional[LanguageDescriptor] = None

    def __post_init__(self) -> None:
        """Validate report options."""
        if self.context_width < 0:
            raise ValueError("context_width must be >= 0")
        if not isinstance(self.mode, FramingMode):
            raise ValueError(f"mode must be a FramingMode, got {self.mode!r}")

    @classmethod
    def fragment(cls, context_width: int = DEFAULT_CONTEXT_SIZE) -> "ReportOptions":
        """Create options for a batch in the middle of a streamed report."""
        return cls(context_width=context_width, mode=FramingMode.CONTINUE)

    def with_mode(self, mode: FramingMode) -> "ReportOptions":
        """Return a copy of these options using another framing mode."""
        return replace(self, mode=mode)


@dataclass(frozen=True)
class IngestionConfig:
    """Configuration for decoding text streams.

    Attributes:
        buffer_size: Characters requested per read when draining a reader
        decode_errors: Codec error handler for malformed input
        default_encoding: Encoding used when the caller passes none,
            ``None`` meaning the platform default
    """

    buffer_size: int = READ_BUFFER_SIZE
    decode_errors: str = "replace"
    default_encoding: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate ingestion configuration."""
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be > 0")
        valid_handlers = ["strict", "replace", "ignore", "backslashreplace"]
        if self.decode_errors not in valid_handlers:
            raise ValueError(f"decode_errors must be one of {valid_handlers}")
