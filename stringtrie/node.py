"""Trie nodes and the fixed-size clusters that hold them."""

from __future__ import annotations

from stringtrie.constants import CHAR_COUNT


class TrieNode:
    """One symbol slot in a cluster."""

    __slots__ = ("next", "is_word")

    def __init__(self):
        self.next: list[TrieNode | None] | None = None
        self.is_word: bool = False


# A cluster is a list of CHAR_COUNT optional nodes; a path is the list of
# (cluster, index) pairs visited while walking a word.


def alloc_cluster() -> list[TrieNode | None]:
    """Fresh cluster with every slot empty."""
    return [None] * CHAR_COUNT


def node_at(cluster: list[TrieNode | None], ci: int) -> TrieNode:
    """Node in slot *ci*, allocating it if the slot is empty."""
    node = cluster[ci]
    if node is None:
        node = cluster[ci] = TrieNode()
    return node


def next_cluster(node: TrieNode) -> list[TrieNode | None]:
    """Continuation cluster of *node*, allocating it if absent."""
    if node.next is None:
        node.next = alloc_cluster()
    return node.next


def prune_path(path: list[tuple[list[TrieNode | None], int]]) -> None:
    """Free dead nodes at the end of *path*, walking back toward the root.

    A node is dead when it is not a word and has no continuation; a
    continuation cluster is dead when every slot is empty. Stops at the
    first live node, so anything shared with another word survives.
    """
    for cluster, ci in reversed(path):
        node = cluster[ci]
        if node.next is not None and not any(node.next):
            node.next = None
        if node.is_word or node.next is not None:
            return
        cluster[ci] = None
