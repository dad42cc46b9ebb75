"""Word-frequency dictionary backed by a bucketed hash of words."""

from __future__ import annotations

from collections.abc import Iterator

SEPARATORS = frozenset(" .,-:!\"'()?[];@")

_HASH_WEIGHTS = (1, 41, 1681, 68921, 2825761, 5856201, 104241, 4273881, 5229121, 4393961)
_HASH_MODULUS = 10_000_000

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def word_hash(word: str) -> int:
    """Return the bucket index of a word, in the range [0, 10_000_000)."""
    total = sum(
        (ord(char) % 10) * _HASH_WEIGHTS[position % 10]
        for position, char in enumerate(word)
    )
    return total % _HASH_MODULUS


def split_words(sentence: str) -> Iterator[str]:
    """Yield the non-empty, lower-cased words of a sentence, split on separators."""
    current: list[str] = []
    for char in sentence:
        if char in SEPARATORS:
            if current:
                yield "".join(current).translate(_ASCII_LOWER)
                current.clear()
        else:
            current.append(char)
    if current:
        yield "".join(current).translate(_ASCII_LOWER)


class WordDict:
    """Counts how often each word occurs across inserted sentences."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def insert_sentence(
        self,
        book_code: int,
        page: int,
        paragraph: int,
        sentence_no: int,
        sentence: str,
    ) -> None:
        """Add every word of the sentence to the counts."""
        for word in split_words(sentence):
            self._counts[word] = self._counts.get(word, 0) + 1

    def get_word_count(self, word: str) -> int:
        """Return how often the word was seen; the lookup is exact, 0 if unseen."""
        return self._counts.get(word, 0)

    def dump_dictionary(self, filename: str) -> None:
        """Write `word, count` lines ordered by bucket, then by first appearance."""
        ordered = sorted(self._counts.items(), key=lambda item: word_hash(item[0]))
        with open(filename, "w", encoding="utf-8") as handle:
            for word, count in ordered:
                handle.write(f"{word}, {count}\n")

    def __len__(self) -> int:
        return len(self._counts)