"""A prefix trie and a binary min-heap of scored items."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    count: float = 0
    is_end: bool = False
    word: str = ""


class Trie:
    """Stores words; each stored word's node carries a mutable count."""

    def __init__(self) -> None:
        self.root = _TrieNode()

    def insert(self, word: str) -> _TrieNode:
        """Store a word and return its node."""
        node = self.root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True
        node.word = word
        return node

    def search(self, word: str) -> _TrieNode | None:
        """Return the node of a stored word, or None if it is not stored."""
        node = self.root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node if node.is_end else None

    def words(self) -> list[str]:
        """Return every stored word, depth first with children in character order."""
        return [node.word for node in self._walk(self.root)]

    def _walk(self, node: _TrieNode) -> Iterator[_TrieNode]:
        if node.is_end:
            yield node
        for char in sorted(node.children):
            yield from self._walk(node.children[char])


@dataclass(order=True)
class ScoredItem:
    """A value with a score; items compare by score alone."""

    score: float
    value: Any = field(compare=False)


class MinHeap:
    """Binary min-heap of scored items."""

    def __init__(self) -> None:
        self._heap: list[ScoredItem] = []

    def insert(self, score: float, value: Any) -> ScoredItem:
        item = ScoredItem(score, value)
        heapq.heappush(self._heap, item)
        return item

    def min(self) -> ScoredItem:
        """Return the lowest-scored item; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("min of an empty heap")
        return self._heap[0]

    def delete_min(self) -> ScoredItem:
        """Remove and return the lowest-scored item; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("delete_min from an empty heap")
        return heapq.heappop(self._heap)

    def build(self, items: Iterable[ScoredItem]) -> None:
        """Add many items at once and restore the heap order."""
        self._heap.extend(items)
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)