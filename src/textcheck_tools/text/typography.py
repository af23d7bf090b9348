"""Typographic conventions for re-assembling tokens into text."""

from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping

from ..shared.interfaces import LanguageDescriptor

DEFAULT_TIGHT_PUNCTUATION: FrozenSet[str] = frozenset(".,;:?!")

# Languages that keep a space before some punctuation. French writes a
# (narrow) space before ; : ? and !
TIGHT_PUNCTUATION_BY_LANGUAGE: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "fr": frozenset(".,"),
})


def space_before(token: str, language: LanguageDescriptor) -> str:
    """Return the space to put before ``token`` in ``language``.

    Args:
        token: The token about to be appended
        language: Language of the text

    Returns:
        An empty string if the token is a punctuation mark that attaches to
        the previous word, otherwise a single space
    """
    if len(token) == 1:
        tight = TIGHT_PUNCTUATION_BY_LANGUAGE.get(
            language.short_code, DEFAULT_TIGHT_PUNCTUATION
        )
        if token in tight:
            return ""
    return " "


def join_strings(items: Iterable[str], delimiter: str) -> str:
    """Join ``items`` with ``delimiter`` between them."""
    return delimiter.join(items)
