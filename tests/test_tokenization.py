from text_comparator.textutils import flatten_lines, normalize_text
from text_comparator.tokenization import tokenize_words


def test_normalize_text_blanks_punctuation_and_drops_digits():
    text = "Hello, World! 123 word1word café"
    assert normalize_text(text) == "hello  world!  wordword caf"


def test_normalize_text_keeps_terminators_and_whitespace():
    assert normalize_text("Why?\tNo.\nYes!") == "why?\tno.\nyes!"


def test_tokenize_words_returns_lowercase_alphabetic_tokens():
    text = "Hello, World! It's 3 o'clock."
    tokens = tokenize_words(text)

    assert tokens == ["hello", "world", "it", "s", "o", "clock"]
    assert all(token.isalpha() and token.islower() for token in tokens)


def test_tokenize_words_splits_on_sentence_terminators():
    assert tokenize_words("The cat sat.The dog!") == ["the", "cat", "sat", "the", "dog"]
    assert tokenize_words("e.g. this") == ["e", "g", "this"]


def test_tokenize_words_handles_degenerate_input():
    assert tokenize_words("") == []
    assert tokenize_words("123 456 ... !!!") == []


def test_flatten_lines_joins_with_single_spaces():
    assert flatten_lines("one\ntwo\nthree\n") == "one two three"
    assert flatten_lines("") == ""


def test_flatten_lines_only_breaks_on_newlines():
    flattened = flatten_lines("ab cd\x1cef gh\nij")

    assert flattened == "ab cd\x1cef gh ij"
    assert tokenize_words(flattened) == ["ab", "cdef", "gh", "ij"]
