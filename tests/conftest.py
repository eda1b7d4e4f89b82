import io

import pytest

from stringtrie import StringTrie

WORDS = ["cat", "cathode", "cats", "dog", "o'clock", "x-ray", "ice cream"]


@pytest.fixture
def trie():
    return StringTrie()


@pytest.fixture
def loaded():
    t = StringTrie()
    t.load(io.StringIO("".join(w + "\n" for w in WORDS)))
    return t
