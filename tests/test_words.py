import pytest

from puzzlekit.words import (
    T9_LETTERS,
    SuffixTrie,
    build_frequency_table,
    int_to_english,
    lookup_frequency,
    t9_words,
    true_frequencies,
    word_frequency,
)

BOOK = ["Convert", "to", "Lower", "TO"]


def test_word_frequency_ignores_case_of_book():
    assert word_frequency("to", BOOK) == 2


def test_word_frequency_absent_word():
    assert word_frequency("missing", BOOK) == 0


def test_build_frequency_table_matches_word_frequency():
    table = build_frequency_table(BOOK)
    for word in ("convert", "to", "lower"):
        assert table[word] == word_frequency(word, BOOK)
    assert sum(table.values()) == len(BOOK)


def test_lookup_frequency_is_case_insensitive():
    table = build_frequency_table(BOOK)
    assert lookup_frequency(table, "TO") == lookup_frequency(table, "to")
    assert lookup_frequency(table, "absent") == 0


def test_lookup_frequency_rejects_empty_word():
    with pytest.raises(ValueError):
        lookup_frequency({}, "")


def test_t9_contains_dictionary_words():
    words = t9_words("8733")
    assert "tree" in words
    assert "used" in words


def test_t9_every_letter_belongs_to_its_key():
    digits = "8733"
    words = t9_words(digits)
    assert len(words) == len(set(words))
    for word in words:
        assert len(word) == len(digits)
        assert all(letter in T9_LETTERS[int(d)] for letter, d in zip(word, digits))


def test_t9_empty_key_gives_no_words():
    assert t9_words("21") == []


def test_t9_custom_map():
    assert t9_words("01", ["x", "ab"]) == ["xa", "xb"]


def test_t9_rejects_non_digit():
    with pytest.raises(ValueError):
        t9_words("8a")


def test_int_to_english_example():
    assert int_to_english(764542) == "seven hundred sixty four thousand five hundred forty two"


def test_int_to_english_zero():
    assert int_to_english(0) == "zero"


@pytest.mark.parametrize("number", [7, 542, 134765542, 1000])
def test_int_to_english_negative_prefix(number):
    assert int_to_english(-number) == "negative " + int_to_english(number)


def test_int_to_english_scales_combine():
    assert int_to_english(542000) == int_to_english(542) + " thousand"
    assert int_to_english(3000542) == "three million " + int_to_english(542)


def test_int_to_english_too_large():
    with pytest.raises(ValueError):
        int_to_english(10**12)


@pytest.mark.parametrize("pattern, count", [("is", 2), ("ppi", 1), ("hi", 0)])
def test_suffix_trie_counts(pattern, count):
    trie = SuffixTrie("mississippi")
    positions = trie.search(pattern)
    assert len(positions) == count
    assert all("mississippi".startswith(pattern, p) for p in positions)


def test_suffix_trie_insert_records_position():
    trie = SuffixTrie()
    trie.insert("abc", 5)
    assert trie.search("ab") == [5]
    assert trie.search("b") == []


def test_true_frequencies_example():
    frequencies = {"John": 15, "Jon": 12, "Chris": 13, "Kris": 4, "Christopher": 19}
    synonyms = [("Jon", "John"), ("John", "Johnny"), ("Chris", "Kris"), ("Chris", "Christopher")]
    result = true_frequencies(frequencies, synonyms)
    assert result == {"John": 27, "Chris": 36}


def test_true_frequencies_preserves_total():
    frequencies = {"john": 10, "jon": 3, "davis": 2, "kari": 3, "johnny": 11,
                   "carlton": 8, "carleton": 2, "jonathan": 9, "carrie": 5}
    synonyms = [("jonathan", "john"), ("jon", "johnny"), ("johnny", "john"),
                ("kari", "carrie"), ("carleton", "carlton")]
    result = true_frequencies(frequencies, synonyms)
    assert sum(result.values()) == sum(frequencies.values())
    assert set(result) == {"john", "davis", "kari", "carlton"}
    assert result["davis"] == frequencies["davis"]