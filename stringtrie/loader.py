"""Streaming bulk loader for newline-delimited word lists.

The stream is read in fixed-size chunks and fed one character at a time
through a :class:`LoadCursor`, which walks the trie exactly as
:meth:`StringTrie.add` would, without buffering whole lines.

Malformed lines are dropped rather than failing the load:

* a line with any character outside the alphabet is skipped up to the
  next delimiter;
* a line longer than ``WORD_MAX_LENGTH`` symbols is skipped likewise;
* a final word with no trailing delimiter is ignored.

Nodes allocated for a dropped word are pruned again before moving on, so a
bad line never leaves dead branches behind.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from stringtrie.alphabet import fold, is_delimiter, is_valid, map_symbol
from stringtrie.constants import READ_CHUNK_SIZE, WORD_MAX_LENGTH
from stringtrie.errors import StreamUnavailable
from stringtrie.node import TrieNode, next_cluster, node_at

if TYPE_CHECKING:
    from stringtrie.trie import StringTrie

log = logging.getLogger("stringtrie.loader")


class LoadCursor:
    """Per-word parser state while loading a stream into a trie."""

    __slots__ = ("trie", "path", "skipping", "inserted", "duplicates", "discarded")

    def __init__(self, trie: "StringTrie"):
        self.trie = trie
        # (cluster, index) for each symbol of the in-progress word
        self.path: list[tuple[list[TrieNode | None], int]] = []
        self.skipping = False
        self.inserted = 0
        self.duplicates = 0
        self.discarded = 0

    def feed(self, chunk: str) -> None:
        for c in chunk:
            self.push(c)

    def push(self, c: str) -> None:
        """Advance the parser by one character."""
        if is_delimiter(c):
            if self.path:
                self._commit()
            self.skipping = False
            return
        if self.skipping:
            return

        c = fold(c)
        if not is_valid(c):
            log.debug("Unexpected character %r, skipping line", c)
            self._discard()
        elif len(self.path) >= WORD_MAX_LENGTH:
            log.debug("Word exceeds %d symbols, skipping line", WORD_MAX_LENGTH)
            self._discard()
        else:
            self._extend(map_symbol(c))

    def finish(self) -> None:
        """End of stream: drop any word still waiting for its delimiter."""
        if self.path:
            log.debug("Dropping final word with no trailing delimiter")
            self._discard()
        self.skipping = False

    def _extend(self, ci: int) -> None:
        if self.path:
            cluster, prev = self.path[-1]
            cluster = next_cluster(cluster[prev])
        else:
            cluster = self.trie._ensure_root()
        node_at(cluster, ci)
        self.path.append((cluster, ci))

    def _commit(self) -> None:
        cluster, ci = self.path[-1]
        if self.trie._mark_word(cluster[ci]):
            self.inserted += 1
        else:
            self.duplicates += 1
        self.path = []

    def _discard(self) -> None:
        if self.path:
            self.trie._prune(self.path)
            self.path = []
        self.discarded += 1
        self.skipping = True


def load_stream(trie: "StringTrie", stream: IO, chunk_size: int = READ_CHUNK_SIZE) -> int:
    """Load words from a readable text or binary stream into *trie*.

    Binary chunks are decoded as Latin-1, one character per byte.

    Returns
    -------
    int
        Number of words that were not already in the trie.

    Raises
    ------
    StreamUnavailable
        If reading from *stream* fails. Words committed before the failure
        stay loaded; the word in progress is rolled back.
    """
    cursor = LoadCursor(trie)
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            if isinstance(chunk, bytes):
                chunk = chunk.decode("latin-1")
            cursor.feed(chunk)
    except (OSError, ValueError) as exc:
        cursor.finish()
        log.error("Failed to read from stream after %d words: %s", cursor.inserted, exc)
        raise StreamUnavailable(f"Failed to read from stream: {exc}") from exc

    cursor.finish()
    log.debug(
        "Stream load: %d new, %d duplicate, %d discarded",
        cursor.inserted, cursor.duplicates, cursor.discarded,
    )
    return cursor.inserted


def load_path(trie: "StringTrie", path: str) -> int:
    """Open *path* as UTF-8 text and load it into *trie*."""
    try:
        f = open(path, "r", encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        log.error("Cannot read file: %s", path)
        raise StreamUnavailable(f"Cannot read file: {path}") from exc

    with f:
        added = load_stream(trie, f)
    log.info("Loaded %s words from %s", f"{added:,}", path)
    return added
