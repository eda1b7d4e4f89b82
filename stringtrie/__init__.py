"""String trie -- case-insensitive word list over a 29-symbol alphabet."""

from stringtrie.constants import ALPHA_COUNT, CHAR_COUNT, SYMBOLS, WORD_MAX_LENGTH
from stringtrie.alphabet import is_delimiter, is_valid, map_symbol, unmap_index
from stringtrie.errors import (
    InvalidIndex,
    InvalidSymbol,
    SinkWriteFailure,
    StreamUnavailable,
    TrieError,
    TrieIntegrityError,
    WordTooLong,
)
from stringtrie.node import TrieNode
from stringtrie.trie import StringTrie

__all__ = [
    "ALPHA_COUNT",
    "CHAR_COUNT",
    "SYMBOLS",
    "WORD_MAX_LENGTH",
    "InvalidIndex",
    "InvalidSymbol",
    "SinkWriteFailure",
    "StreamUnavailable",
    "StringTrie",
    "TrieError",
    "TrieIntegrityError",
    "TrieNode",
    "WordTooLong",
    "is_delimiter",
    "is_valid",
    "map_symbol",
    "unmap_index",
]
