import pytest

from rhyme_lexicon.core import PatternSearchEngine, PronunciationStore, RhymeResolver, parse_lexicon


def test_rhymes_cat(lexicon):
    assert lexicon.rhymes("cat") == ["hat", "scat"]


def test_rhymes_tail_must_match_at_end(lexicon):
    assert "cat's" not in lexicon.rhymes("cat")


def test_rhymes_merge_every_pronunciation(lexicon):
    # Only the second pronunciation of "project" ends in "EH1 K T".
    assert lexicon.rhymes("project") == ["object", "reject"]


def test_rhymes_from_secondary_stress(lexicon):
    assert lexicon.rhymes("tomato") == ["potato"]


def test_rhymes_unstressed_pronunciation_uses_whole_transcription(lexicon):
    assert lexicon.rhymes("a") == ["the"]
    assert lexicon.rhymes("the") == []


def test_rhymes_never_include_the_word_itself(lexicon):
    for word in lexicon.store.words():
        assert word not in lexicon.rhymes(word)


def test_rhymes_for_unknown_word_is_empty(lexicon):
    assert lexicon.rhymes("nonexistentword") == []


def test_rhymes_for_phones_includes_source_word(lexicon):
    assert lexicon.resolver.rhymes_for_phones("AH0 B AH1 V") == ["above", "love", "glove"]


def test_rhymes_are_deduplicated_across_pronunciations():
    store = PronunciationStore(
        parse_lexicon("LIVE  L IH1 V\nLIVE(1)  L AY1 V\nGIVE  G IH1 V\nDIVE  D AY1 V\n")
    )
    resolver = RhymeResolver(store, PatternSearchEngine(store))

    assert resolver.rhymes("live") == ["give", "dive"]


@pytest.mark.parametrize("word", ["cat", "hat"])
def test_concrete_cat_hat_pair(word):
    store = PronunciationStore(parse_lexicon("CAT  K AE1 T\nHAT  HH AE1 T\n"))
    resolver = RhymeResolver(store, PatternSearchEngine(store))

    other = "hat" if word == "cat" else "cat"
    assert resolver.rhymes(word) == [other]


def test_rhymes_list_each_word_once():
    store = PronunciationStore(
        parse_lexicon("BEE  B IY1\nSEE  S IY1\nSEA  S IY1\nSEE(1)  S IY1\n")
    )
    resolver = RhymeResolver(store, PatternSearchEngine(store))

    assert resolver.search_engine.search("IY1$") == ["bee", "see", "sea", "see"]
    assert resolver.rhymes("bee") == ["see", "sea"]
