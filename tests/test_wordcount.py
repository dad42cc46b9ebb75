import pytest

from textdsa.wordcount import SEPARATORS, WordDict, split_words, word_hash


def _read_dump(path):
    entries = []
    for line in path.read_text(encoding="utf-8").splitlines():
        word, count = line.rsplit(", ", 1)
        entries.append((word, int(count)))
    return entries


def test_split_words_lowercases_and_drops_punctuation():
    assert list(split_words("Hello, World!")) == ["hello", "world"]


@pytest.mark.parametrize("separator", sorted(SEPARATORS))
def test_every_separator_splits(separator):
    assert list(split_words(f"ab{separator}cd")) == ["ab", "cd"]


def test_split_words_skips_empty_runs():
    assert list(split_words("  ...  ,, ")) == []


def test_word_hash_of_empty_word_is_zero():
    assert word_hash("") == 0


@pytest.mark.parametrize("word", ["a", "zebra", "x" * 50, "Mahatma", "1234567890abc"])
def test_word_hash_in_range(word):
    assert 0 <= word_hash(word) < 10_000_000


def test_count_grows_with_each_insertion():
    d = WordDict()
    for times in range(1, 5):
        d.insert_sentence(1, 1, 1, times, "truth")
        assert d.get_word_count("truth") == times


def test_unknown_word_counts_zero():
    d = WordDict()
    d.insert_sentence(1, 1, 1, 1, "non violence")
    assert d.get_word_count("peace") == 0


def test_lookup_is_exact_while_insertion_lowercases():
    d = WordDict()
    d.insert_sentence(1, 1, 1, 1, "Satya SATYA satya")
    assert d.get_word_count("satya") == 3
    assert d.get_word_count("Satya") == 0


def test_len_counts_distinct_words():
    d = WordDict()
    d.insert_sentence(1, 1, 1, 1, "one two two three three three")
    assert len(d) == len(set(split_words("one two two three three three")))


def test_dump_round_trips_counts(tmp_path):
    d = WordDict()
    d.insert_sentence(1, 2, 3, 4, "The quick (brown) fox; the lazy dog - the end.")
    d.insert_sentence(1, 2, 3, 5, "Quick thinking: the fox ran!")
    out = tmp_path / "dump.txt"
    d.dump_dictionary(str(out))
    entries = _read_dump(out)
    assert len(entries) == len(d)
    for word, count in entries:
        assert d.get_word_count(word) == count


def test_dump_is_ordered_by_bucket(tmp_path):
    d = WordDict()
    d.insert_sentence(1, 1, 1, 1, "alpha beta gamma delta epsilon zeta eta theta iota kappa")
    out = tmp_path / "dump.txt"
    d.dump_dictionary(str(out))
    hashes = [word_hash(word) for word, _ in _read_dump(out)]
    assert hashes == sorted(hashes)


def test_dump_of_empty_dictionary_is_empty(tmp_path):
    out = tmp_path / "dump.txt"
    WordDict().dump_dictionary(str(out))
    assert out.read_text(encoding="utf-8") == ""