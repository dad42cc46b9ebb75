"""Porter-style suffix stripping stemmer for English words."""

from __future__ import annotations

_VOWELS = frozenset("aeiou")


class _Stemming:
    """Working state for stemming a single word.

    ``end`` normally indexes the last character of ``word``; the ``-ness``
    rule deliberately moves it one further back, and later steps keep using
    that position.
    """

    def __init__(self, word: str) -> None:
        self.word = word
        self.end = len(word) - 1

    def char(self, index: int) -> str:
        if 0 <= index < len(self.word):
            return self.word[index]
        return ""

    def ends_with(self, suffix: str) -> bool:
        return self.word.endswith(suffix)

    def cut(self, count: int, shift: int | None = None) -> None:
        self.word = self.word[:-count] if count else self.word
        self.end -= count if shift is None else shift

    def append(self, text: str, shift: int | None = None) -> None:
        self.word += text
        self.end += len(text) if shift is None else shift

    def is_consonant(self, index: int) -> bool:
        while True:
            char = self.char(index)
            if char in _VOWELS and char:
                return False
            if char != "y" or index == 0:
                return True
            index -= 1

    def vc_count(self, n: int = 0) -> int:
        limit = self.end - n
        index = 0
        while index <= limit and self.is_consonant(index):
            index += 1
        if index > limit:
            return 0
        index += 1
        count = 0
        while True:
            while index <= limit and not self.is_consonant(index):
                index += 1
            index += 1
            count += 1
            while index <= limit and self.is_consonant(index):
                index += 1
            if index > limit:
                return count

    def contains_vowels(self, n: int = 0) -> bool:
        return any(not self.is_consonant(i) for i in range(self.end - n + 1))

    def cvc_end(self, index: int) -> bool:
        if (
            index < 2
            or not self.is_consonant(index)
            or self.is_consonant(index - 1)
            or not self.is_consonant(index - 2)
        ):
            return False
        return self.char(self.end) not in ("w", "x", "y")

    def _tidy_after_strip(self, n: int) -> None:
        if self.ends_with("at") or self.ends_with("bl") or self.ends_with("iz"):
            self.append("e")
        elif (
            self.end > 0
            and self.char(self.end) == self.char(self.end - 1)
            and self.is_consonant(self.end)
        ):
            if self.char(self.end) not in ("l", "s", "z"):
                self.cut(1)
        elif self.vc_count(n) == 1 and self.cvc_end(self.end):
            self.append("e")

    def remove_plurals(self) -> None:
        if self.ends_with("s"):
            if self.ends_with("sses") or self.ends_with("ies"):
                self.cut(2)
            elif not self.ends_with("ss"):
                self.cut(1)

        if self.ends_with("eed"):
            if self.vc_count(3) > 0:
                self.cut(1)
        elif self.ends_with("ed") and self.contains_vowels(2):
            self.cut(2)
            self._tidy_after_strip(2)
        elif self.ends_with("ing") and self.contains_vowels(3):
            self.cut(3)
            self._tidy_after_strip(3)

        if self.ends_with("y") and self.contains_vowels(1):
            self.word = self.word[:-1] + "i"

    def remove_double_suffixes(self) -> None:
        ends = self.ends_with
        vc = self.vc_count
        if (ends("ational") or ends("ization")) and vc(7) > 0:
            self.cut(5, 5)
            self.append("e", 1)
        elif (ends("enci") or ends("anci") or ends("abli")) and vc(4) > 0:
            self.word = self.word[:-1] + "e"
        elif ends("izer") and vc(4) > 0:
            self.cut(1)
        elif (
            (ends("tional") and vc(6) > 0)
            or ((ends("alli") or ends("ulli")) and vc(4) > 0)
            or ((ends("entli") or ends("ousli")) and vc(5) > 0)
            or ((ends("eli") or ends("ili")) and vc(3) > 0)
        ):
            self.cut(2)
        elif (ends("ation") or ends("iviti")) and vc(5) > 0:
            self.cut(3)
            self.append("e")
        elif ends("ator") and vc(4) > 0:
            self.cut(2)
            self.append("e")
        elif (ends("alism") or ends("aliti")) and vc(5) > 0:
            self.cut(3)
        elif (ends("iveness") or ends("fulness") or ends("ousness")) and vc(6) > 0:
            self.cut(4)
        elif ends("biliti") and vc(6) > 0:
            self.cut(5)
            self.append("le")

    def simple_ends(self) -> None:
        ends = self.ends_with
        if self.vc_count(5) > 0:
            last = self.char(self.end)
            if last == "e":
                if ends("icate"):
                    self.cut(3)
                elif ends("ative"):
                    self.cut(5)
                elif ends("alize"):
                    self.cut(3)
            elif last == "i" and ends("iciti"):
                self.cut(3)

        last = self.char(self.end)
        if last == "l":
            if ends("ical") and self.vc_count(4) > 0:
                self.cut(2)
            elif ends("ful") and self.vc_count(3) > 0:
                self.cut(3)
        elif last == "s":
            if ends("ness") and self.vc_count(4) > 0:
                # Three characters go, but the end marker moves back by four.
                self.cut(3, 4)

    def simple_ends2(self) -> None:
        ends = self.ends_with
        if self.vc_count(2) > 1:
            marker = self.char(self.end - 1)
            for letter, suffix in (("a", "al"), ("e", "er"), ("i", "ic")):
                if marker == letter:
                    if ends(suffix):
                        self.cut(2)
                    break

        if self.vc_count(3) > 1:
            marker = self.char(self.end - 1)
            if marker == "t":
                if ends("ate") or ends("iti"):
                    self.cut(3)
            else:
                chain = (("u", "ous"), ("v", "ive"), ("z", "ize"), ("s", "ism"))
                letters = [letter for letter, _ in chain]
                if marker in letters:
                    # Each case falls through to the ones after it.
                    for _, suffix in chain[letters.index(marker):]:
                        if ends(suffix):
                            self.cut(3)

        if self.vc_count(4) > 0:
            marker = self.char(self.end - 1)
            if marker == "c":
                if ends("ance") or ends("ence"):
                    self.cut(4)
            elif marker == "l":
                if ends("able") or ends("ible"):
                    self.cut(4)

        marker = self.char(self.end - 1)
        if marker == "n":
            if self.vc_count(3) > 0:
                if ends("ant") or ends("ent"):
                    self.cut(3)
            elif ends("ement") and self.vc_count(5) > 0:
                self.cut(5)
            elif ends("ment") and self.vc_count(4) > 0:
                self.cut(4)
        elif marker == "o":
            if (ends("sion") or ends("tion")) and self.vc_count(4) > 0:
                self.cut(4)
            elif ends("ou") and self.vc_count(2) > 0:
                self.cut(2)

    def tidy_up(self) -> None:
        if self.vc_count(1) > 1 and self.char(self.end) == "e":
            self.cut(1)
        elif (
            not self.cvc_end(self.end)
            and self.vc_count(1) == 1
            and self.char(self.end) == "e"
        ):
            self.cut(1)

        if (
            self.vc_count(1) > 1
            and self.char(self.end) == "l"
            and self.char(self.end - 1) == "l"
        ):
            self.cut(1)

    def run(self) -> str:
        self.remove_plurals()
        self.remove_double_suffixes()
        self.simple_ends()
        self.simple_ends2()
        self.tidy_up()
        return self.word


class PorterStemmer:
    """Reduces words of three or more letters to their stems."""

    def stem(self, word: str) -> str:
        """Return the stem of a word; words shorter than three letters are unchanged."""
        if len(word) < 3:
            return word
        return _Stemming(word).run()


_DEFAULT = PorterStemmer()


def stem(word: str) -> str:
    """Return the stem of a word using a shared stemmer."""
    return _DEFAULT.stem(word)