from textdsa.search import Match, SearchEngine


def _engine(*sentences):
    engine = SearchEngine()
    for number, text in enumerate(sentences, start=1):
        engine.insert_sentence(7, 11, 13, number, text)
    return engine


def test_every_match_points_at_the_pattern():
    text = "The truth is the truth, and Truth remains."
    engine = _engine(text)
    matches = engine.search("truth")
    assert len(matches) == text.lower().count("truth")
    for match in matches:
        assert text[match.offset:match.offset + len("truth")].lower() == "truth"


def test_matches_are_reported_latest_first():
    engine = _engine("abcabc")
    offsets = [m.offset for m in engine.search("abc")]
    assert offsets == sorted(offsets, reverse=True)
    assert set(offsets) == {0, 3}


def test_overlapping_occurrences_found():
    engine = _engine("aaaa")
    assert [m.offset for m in engine.search("aa")] == [2, 1, 0]


def test_later_sentences_come_first():
    engine = _engine("peace here", "peace there")
    sentence_numbers = [m.sentence_no for m in engine.search("peace")]
    assert sentence_numbers == [2, 1]


def test_metadata_is_carried_into_match():
    engine = SearchEngine()
    engine.insert_sentence(3, 5, 8, 2, "Ahimsa")
    assert engine.search("ahimsa") == [Match(3, 5, 8, 2, 0)]


def test_uppercase_pattern_does_not_match():
    engine = _engine("Ahimsa is the way")
    assert engine.search("Ahimsa") == []


def test_pattern_longer_than_sentence():
    engine = _engine("hi")
    assert engine.search("hello") == []


def test_no_sentences_no_matches():
    assert SearchEngine().search("anything") == []


def test_empty_pattern_matches_every_position():
    text = "swaraj"
    engine = _engine(text)
    matches = engine.search("")
    assert len(matches) == len(text) + 1
    assert {m.offset for m in matches} == set(range(len(text) + 1))