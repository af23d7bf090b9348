"""Decoding of byte and character streams into strings.

``read_stream`` normalizes line endings so the checking engine always sees
``\\n``-separated lines, ``reader_to_string`` drains any character source
without altering its content.

Both the decoding layer and the byte source are closed on every exit path,
innermost first. Closing the decoding layer also closes the byte source the
caller handed in.
"""

import codecs
import io
import locale
from typing import BinaryIO, List, Optional, TextIO

from ..shared.config import READ_BUFFER_SIZE, IngestionConfig
from ..shared.errors import IOFailureError, UnsupportedEncodingError
from ..shared.logging import get_logger

logger = get_logger(__name__, component="ingestion")


def read_stream(
    byte_source: BinaryIO,
    encoding: Optional[str] = None,
    config: Optional[IngestionConfig] = None,
) -> str:
    """Read a byte stream line by line using the given encoding.

    Args:
        byte_source: Open binary stream, consumed and closed by this call
        encoding: Character encoding such as ``utf-8``; None selects
            ``config.default_encoding`` or, failing that, the platform default
        config: Ingestion configuration

    Returns:
        The stream's content with lines separated by ``\\n``. A ``\\n`` is added
        to the last line even if the stream does not end with one.

    Raises:
        UnsupportedEncodingError: If the encoding name is unknown
        IOFailureError: If reading the underlying stream fails
    """
    config = config or IngestionConfig()
    resolved = _resolve_encoding(
        encoding if encoding is not None else config.default_encoding
    )
    lines: List[str] = []
    try:
        with byte_source:
            with _open_reader(byte_source, resolved, config.decode_errors) as reader:
                for line in reader:
                    lines.append(line if line.endswith("\n") else line + "\n")
    except OSError as e:
        logger.error(
            "Reading stream failed", extra={"encoding": resolved}, exc_info=False
        )
        raise IOFailureError(f"Failed to read stream: {e}", cause=e) from e

    text = "".join(lines)
    logger.debug(
        "Decoded stream",
        extra={"encoding": resolved, "lines": len(lines), "characters": len(text)},
    )
    return text


def reader_to_string(
    char_source: TextIO, buffer_size: int = READ_BUFFER_SIZE
) -> str:
    """Read everything from a character source into one string.

    A read returning fewer characters than requested is not taken as end of
    input; only an empty read ends the loop. The source is left open.

    Raises:
        IOFailureError: If reading the source fails
    """
    try:
        return _drain(char_source, buffer_size)
    except OSError as e:
        logger.error("Reading characters failed", exc_info=False)
        raise IOFailureError(f"Failed to read characters: {e}", cause=e) from e


def stream_to_string(
    byte_source: BinaryIO,
    encoding: Optional[str] = None,
    config: Optional[IngestionConfig] = None,
) -> str:
    """Decode a whole byte stream into a string, keeping line endings as they are.

    Raises:
        UnsupportedEncodingError: If the encoding name is unknown
        IOFailureError: If reading the underlying stream fails
    """
    config = config or IngestionConfig()
    resolved = _resolve_encoding(
        encoding if encoding is not None else config.default_encoding
    )
    try:
        with byte_source:
            with _open_reader(
                byte_source, resolved, config.decode_errors, newline=""
            ) as reader:
                text = _drain(reader, config.buffer_size)
    except OSError as e:
        logger.error(
            "Reading stream failed", extra={"encoding": resolved}, exc_info=False
        )
        raise IOFailureError(f"Failed to read stream: {e}", cause=e) from e

    logger.debug(
        "Decoded stream", extra={"encoding": resolved, "characters": len(text)}
    )
    return text


def _resolve_encoding(encoding: Optional[str]) -> str:
    """Return the codec name to decode with, validating caller supplied names."""
    if encoding is None:
        return locale.getpreferredencoding(False)
    try:
        return codecs.lookup(encoding).name
    except LookupError as e:
        logger.error(
            "Unsupported encoding", extra={"encoding": encoding}, exc_info=False
        )
        raise UnsupportedEncodingError(encoding) from e


def _open_reader(
    byte_source: BinaryIO,
    encoding: str,
    errors: str,
    newline: Optional[str] = None,
) -> io.TextIOWrapper:
    return io.TextIOWrapper(
        byte_source, encoding=encoding, errors=errors, newline=newline
    )


def _drain(char_source: TextIO, buffer_size: int) -> str:
    chunks: List[str] = []
    while True:
        chunk = char_source.read(buffer_size)
        if not chunk:
            break
        chunks.append(chunk)
    return "".join(chunks)
