"""Case-insensitive substring search over stored sentences."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """Where a pattern occurs: the sentence's location and the character offset."""

    book_code: int
    page: int
    paragraph: int
    sentence_no: int
    offset: int


@dataclass(frozen=True)
class _Sentence:
    book_code: int
    page: int
    paragraph: int
    sentence_no: int
    text: str


class SearchEngine:
    """Stores sentences and finds every occurrence of a pattern in them."""

    def __init__(self) -> None:
        self._sentences: list[_Sentence] = []

    def insert_sentence(
        self,
        book_code: int,
        page: int,
        paragraph: int,
        sentence_no: int,
        sentence: str,
    ) -> None:
        self._sentences.append(
            _Sentence(book_code, page, paragraph, sentence_no, sentence)
        )

    def search(self, pattern: str) -> list[Match]:
        """Return all matches, the most recently found first.

        Sentences are lower-cased before comparison; the pattern is not, so it
        should be given in lower case. Overlapping occurrences are all reported.
        """
        found: list[Match] = []
        for sentence in self._sentences:
            text = sentence.text.lower()
            offset = text.find(pattern)
            while offset != -1:
                found.append(
                    Match(
                        sentence.book_code,
                        sentence.page,
                        sentence.paragraph,
                        sentence.sentence_no,
                        offset,
                    )
                )
                offset = text.find(pattern, offset + 1)
        found.reverse()
        return found