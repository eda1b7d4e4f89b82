"""Character <-> cluster index mapping for the 29-symbol alphabet."""

from __future__ import annotations

import string
from collections.abc import Iterable

from stringtrie.constants import CHAR_COUNT, DELIMITERS, SYMBOLS, WORD_MAX_LENGTH
from stringtrie.errors import InvalidIndex, InvalidSymbol, WordTooLong

_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(SYMBOLS)}


def fold(c: str) -> str:
    """Lowercase ASCII letters; everything else passes through unchanged."""
    return c.translate(_FOLD)


def is_valid(c: str) -> bool:
    """True if *c* can be stored. Letters must already be lowercase."""
    return c in _INDEX


def is_delimiter(c: str) -> bool:
    """True if *c* ends a word in a bulk-load stream."""
    return c in DELIMITERS


def map_symbol(c: str) -> int:
    """Cluster index for *c*, folding uppercase letters first."""
    try:
        return _INDEX[fold(c)]
    except KeyError:
        raise InvalidSymbol(c) from None


def unmap_index(i: int) -> str:
    """Character stored at cluster index *i*."""
    if not 0 <= i < CHAR_COUNT:
        raise InvalidIndex(i)
    return SYMBOLS[i]


def encode(word: str) -> list[int]:
    """Map every character of *word* to its cluster index.

    Raises
    ------
    InvalidSymbol
        If any character is outside the alphabet.
    WordTooLong
        If *word* has more than ``WORD_MAX_LENGTH`` characters.
    """
    if len(word) > WORD_MAX_LENGTH:
        raise WordTooLong(len(word), WORD_MAX_LENGTH)
    return [map_symbol(c) for c in word]


def decode(indices: Iterable[int]) -> str:
    """Inverse of :func:`encode`."""
    return "".join(unmap_index(i) for i in indices)
