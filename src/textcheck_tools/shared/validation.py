"""Argument validation helpers."""

from typing import Optional

from .errors import InvalidArgumentError

# Characters removed from both ends before a blank check: every control
# character up to and including the ASCII space.
TRIMMED_CHARS = "".join(chr(code) for code in range(0x21))


def assure_set(value: Optional[str], name: str) -> None:
    """Raise if ``value`` is missing, empty or whitespace only.

    Only characters up to U+0020 count as blank here, so a value holding a
    no-break space or another Unicode space separator is accepted.

    Args:
        value: String to check
        name: Name of the argument, used in the error message

    Raises:
        InvalidArgumentError: If value is None, empty or blank
        TypeError: If name is None
    """
    if name is None:
        raise TypeError("name must not be None")
    if value is None or not value.strip(TRIMMED_CHARS):
        raise InvalidArgumentError(
            f"{name} cannot be empty or whitespace only", field_name=name
        )
