"""Alphabet and size limits shared across the trie engine."""

import string

# Valid characters, in cluster index order: 'a'...'z', '\'', '-', ' '
SYMBOLS = string.ascii_lowercase + "'- "

CHAR_COUNT = len(SYMBOLS)  # 29
ALPHA_COUNT = len(string.ascii_lowercase)  # 26

# Maximum number of symbols in a stored word
WORD_MAX_LENGTH = 128

# Characters ending a word in a bulk-load stream (never stored)
DELIMITERS = frozenset("\r\n")

# Characters pulled from a load stream per read() call
READ_CHUNK_SIZE = 8192
