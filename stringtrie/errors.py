"""Exceptions raised by the trie engine.

Every error derives from :class:`TrieError` and also from the built-in
exception a caller would naturally catch for that condition, so
``except OSError`` still sees load and write failures.
"""

from __future__ import annotations


class TrieError(Exception):
    """Base class for all trie errors."""


class InvalidSymbol(TrieError, ValueError):
    """A character outside the 29-symbol alphabet."""

    def __init__(self, char: str):
        super().__init__(f"Cannot index character {char!r}")
        self.char = char


class InvalidIndex(TrieError, IndexError):
    """A cluster index outside ``[0, CHAR_COUNT)``."""

    def __init__(self, index: int):
        super().__init__(f"Cluster index {index} is invalid")
        self.index = index


class WordTooLong(TrieError, ValueError):
    """A candidate word longer than ``WORD_MAX_LENGTH`` symbols."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"Word has {length} symbols, limit is {limit}")
        self.length = length
        self.limit = limit


class StreamUnavailable(TrieError, OSError):
    """A bulk-load source could not be opened or read."""


class SinkWriteFailure(TrieError, OSError):
    """Enumerated words could not be written to the output sink."""


class TrieIntegrityError(TrieError, AssertionError):
    """The consistency check found a broken structural invariant."""
