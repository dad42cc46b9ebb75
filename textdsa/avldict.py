"""Word-frequency dictionary of stemmed words kept in an AVL tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .stemmer import PorterStemmer

SEPARATORS = frozenset(".,-:!\"'()?\u2014[]\u02d9;@ ")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _char_sum(word: str) -> int:
    return sum(ord(char) for char in word)


@dataclass
class WordEntry:
    """A word and the number of times it has been inserted."""

    word: str
    count: int = 0


@dataclass(eq=False)
class _AVLNode:
    key: int
    entries: list[WordEntry] = field(default_factory=list)
    height: int = 1
    left: _AVLNode | None = None
    right: _AVLNode | None = None

    def refresh(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))


def _height(node: _AVLNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.right) - _height(node.left)


def _rotate_left(node: _AVLNode) -> _AVLNode:
    new_root = node.right
    node.right = new_root.left
    new_root.left = node
    node.refresh()
    new_root.refresh()
    return new_root


def _rotate_right(node: _AVLNode) -> _AVLNode:
    new_root = node.left
    node.left = new_root.right
    new_root.right = node
    node.refresh()
    new_root.refresh()
    return new_root


def _rebalance(node: _AVLNode) -> _AVLNode:
    node.refresh()
    balance = _balance(node)
    if balance > 1:
        if _balance(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if balance < -1:
        if _balance(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: _AVLNode | None, key: int, entry: WordEntry) -> _AVLNode:
    if node is None:
        return _AVLNode(key, [entry])
    if key < node.key:
        node.left = _insert(node.left, key, entry)
    elif key > node.key:
        node.right = _insert(node.right, key, entry)
    else:
        node.entries.append(entry)
        return node
    return _rebalance(node)


class AVLTree:
    """Balanced tree of words keyed by the sum of their character codes.

    Words sharing a key live in one node, in the order they were first inserted.
    """

    def __init__(self) -> None:
        self._root: _AVLNode | None = None
        self._size = 0

    def _lookup(self, word: str) -> WordEntry | None:
        key = _char_sum(word)
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return next((e for e in node.entries if e.word == word), None)
        return None

    def insert(self, word: str) -> WordEntry:
        """Count one more occurrence of a word and return its entry."""
        entry = self._lookup(word)
        if entry is not None:
            entry.count += 1
            return entry
        entry = WordEntry(word, 1)
        self._root = _insert(self._root, _char_sum(word), entry)
        self._size += 1
        return entry

    def find(self, word: str) -> WordEntry:
        """Return the entry of a word; raise KeyError if it was never inserted."""
        entry = self._lookup(word)
        if entry is None:
            raise KeyError(word)
        return entry

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._lookup(word) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[WordEntry]:
        stack: list[_AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield from node.entries
            node = node.right


def _split_words(sentence: str) -> Iterator[str]:
    current: list[str] = []
    for char in sentence:
        if char in SEPARATORS:
            if current:
                yield "".join(current)
                current.clear()
        else:
            current.append(char.translate(_ASCII_LOWER))
    if current:
        yield "".join(current)


class StemmedDict:
    """Counts stemmed, lower-cased words of the inserted sentences."""

    def __init__(self) -> None:
        self.tree = AVLTree()
        self._stemmer = PorterStemmer()

    def insert_sentence(
        self,
        book_code: int,
        page: int,
        paragraph: int,
        sentence_no: int,
        sentence: str,
    ) -> None:
        """Add the stem of every word of the sentence to the counts."""
        for word in _split_words(sentence):
            self.tree.insert(self._stemmer.stem(word))

    def get_word_count(self, word: str) -> int:
        """Return the count of the word's stem, or 0 if it was never seen."""
        try:
            return self.tree.find(self._stemmer.stem(word)).count
        except KeyError:
            return 0

    def dump_dictionary(self, filename: str) -> None:
        """Write `word, count` lines in tree order."""
        with open(filename, "w", encoding="utf-8") as handle:
            for entry in self.tree:
                handle.write(f"{entry.word}, {entry.count}\n")