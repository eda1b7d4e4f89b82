"""Case-insensitive string trie over a fixed 29-symbol alphabet.

Words are stored in a branching chain of node clusters, one slot per
supported symbol. Words sharing a prefix share the nodes for it, so
insertion, lookup and removal cost time proportional to word length
regardless of how many words are loaded.

Words may contain letters (A-Z, folded to lowercase), apostrophes,
hyphens and spaces, up to ``WORD_MAX_LENGTH`` symbols. All public methods
are safe to call whether or not any words are loaded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO

from stringtrie import loader, writer
from stringtrie.alphabet import encode
from stringtrie.constants import SYMBOLS, WORD_MAX_LENGTH
from stringtrie.errors import InvalidSymbol, TrieIntegrityError, WordTooLong
from stringtrie.node import TrieNode, alloc_cluster, next_cluster, node_at, prune_path

log = logging.getLogger("stringtrie")


def _encode_or_none(word: str) -> list[int] | None:
    try:
        return encode(word)
    except (InvalidSymbol, WordTooLong) as exc:
        log.debug("Rejected %r: %s", word, exc)
        return None


def _walk_words(cluster: list[TrieNode | None], buffer: list[str]) -> Iterator[str]:
    """Yield every word below *cluster*, each prefixed by *buffer*."""
    for ci, node in enumerate(cluster):
        if node is None:
            continue
        buffer.append(SYMBOLS[ci])
        if node.is_word:
            yield "".join(buffer)
        if node.next is not None:
            yield from _walk_words(node.next, buffer)
        buffer.pop()


class StringTrie:
    """Trie-backed word set with prefix enumeration and bulk loading."""

    def __init__(self):
        self._root: list[TrieNode | None] | None = None
        self._word_count = 0

    @property
    def word_count(self) -> int:
        """Number of words currently loaded."""
        return self._word_count

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __iter__(self) -> Iterator[str]:
        return self.iter_prefix("")

    def __repr__(self) -> str:
        return f"StringTrie(word_count={self._word_count})"

    # single words

    def add(self, word: str) -> bool:
        """Insert *word*. False if it is empty, too long or has invalid symbols."""
        indices = _encode_or_none(word)
        if not indices:
            return False

        cluster = self._ensure_root()
        node = None
        for ci in indices:
            if node is not None:
                cluster = next_cluster(node)
            node = node_at(cluster, ci)
        self._mark_word(node)
        return True

    def remove(self, word: str) -> None:
        """Remove *word* if present; anything else is a no-op."""
        if self._root is None:
            return
        indices = _encode_or_none(word)
        if not indices:
            return

        path = self._path(indices)
        if path is None:
            return
        cluster, ci = path[-1]
        node = cluster[ci]
        if not node.is_word:
            return
        node.is_word = False
        self._word_count = max(0, self._word_count - 1)
        self._prune(path)

    def search(self, word: str) -> bool:
        """True if *word* is stored (case-insensitive)."""
        indices = _encode_or_none(word)
        if not indices:
            return False
        node = self._find(indices)
        return node is not None and node.is_word

    # enumeration

    def iter_prefix(self, prefix: str = "") -> Iterator[str]:
        """Lazily yield stored words starting with *prefix*, in sorted order.

        The prefix itself is included when it is a stored word. An empty
        prefix yields every word. The trie must not be modified while the
        iterator is in use.
        """
        if self._root is None:
            return
        indices = _encode_or_none(prefix)
        if indices is None:
            return

        buffer = [SYMBOLS[ci] for ci in indices]
        if not indices:
            yield from _walk_words(self._root, buffer)
            return

        node = self._find(indices)
        if node is None:
            return
        if node.is_word:
            yield "".join(buffer)
        if node.next is not None:
            yield from _walk_words(node.next, buffer)

    def search_prefix(self, prefix: str) -> list[str]:
        """Sorted list of stored words starting with *prefix* (inclusive)."""
        return list(self.iter_prefix(prefix))

    def enumerate_all(self, sink: IO[str]) -> None:
        """Write every word, one per line, to *sink*."""
        count = writer.write_words(self.iter_prefix(""), sink)
        log.debug("Enumerated %d words", count)

    def write_file(self, path: str) -> int:
        """Write every word to the file at *path*, replacing its contents."""
        return writer.write_path(self.iter_prefix(""), path)

    # bulk loading

    def load(self, stream: IO) -> int:
        """Insert newline-delimited words from *stream*; returns new words added."""
        return loader.load_stream(self, stream)

    def load_file(self, path: str) -> int:
        """Insert newline-delimited words from the file at *path*."""
        return loader.load_path(self, path)

    def unload(self) -> None:
        """Drop every word."""
        self._root = None
        self._word_count = 0
        log.debug("Trie unloaded")

    # diagnostics

    def node_count(self) -> int:
        """Number of allocated nodes across all clusters."""
        if self._root is None:
            return 0
        count = 0
        stack = [self._root]
        while stack:
            for node in stack.pop():
                if node is None:
                    continue
                count += 1
                if node.next is not None:
                    stack.append(node.next)
        return count

    def check(self) -> None:
        """Recount words and verify the cluster structure.

        Raises
        ------
        TrieIntegrityError
            On a dead node or empty cluster, a path deeper than
            ``WORD_MAX_LENGTH``, or a word count that does not match.
        """
        if self._root is None:
            if self._word_count:
                raise TrieIntegrityError(
                    f"Empty trie reports {self._word_count} words"
                )
            return

        words = 0
        stack = [(self._root, 1)]
        while stack:
            cluster, depth = stack.pop()
            if not any(cluster):
                raise TrieIntegrityError(f"Empty cluster at depth {depth}")
            if depth > WORD_MAX_LENGTH:
                raise TrieIntegrityError(f"Path exceeds {WORD_MAX_LENGTH} symbols")
            for ci, node in enumerate(cluster):
                if node is None:
                    continue
                if not node.is_word and node.next is None:
                    raise TrieIntegrityError(
                        f"Dead node {SYMBOLS[ci]!r} at depth {depth}"
                    )
                if node.is_word:
                    words += 1
                if node.next is not None:
                    stack.append((node.next, depth + 1))

        if words != self._word_count:
            raise TrieIntegrityError(
                f"Counted {words} words, but word_count is {self._word_count}"
            )

    # internals shared with the loader

    def _ensure_root(self) -> list[TrieNode | None]:
        if self._root is None:
            self._root = alloc_cluster()
        return self._root

    def _mark_word(self, node: TrieNode) -> bool:
        """Flag *node* as a word end; True if it was not one already."""
        if node.is_word:
            return False
        node.is_word = True
        self._word_count += 1
        return True

    def _prune(self, path: list[tuple[list[TrieNode | None], int]]) -> None:
        prune_path(path)
        if self._root is not None and not any(self._root):
            self._root = None

    def _find(self, indices: list[int]) -> TrieNode | None:
        cluster = self._root
        node = None
        for ci in indices:
            if node is not None:
                cluster = node.next
            if cluster is None:
                return None
            node = cluster[ci]
            if node is None:
                return None
        return node

    def _path(self, indices: list[int]) -> list[tuple[list[TrieNode | None], int]] | None:
        path = []
        cluster = self._root
        for ci in indices:
            if cluster is None or cluster[ci] is None:
                return None
            path.append((cluster, ci))
            cluster = cluster[ci].next
        return path
