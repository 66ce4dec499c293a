from text_comparator.frequency import (
    average_word_length,
    count_paragraphs,
    lexical_diversity,
    top_words,
    word_frequency,
    word_length_distribution,
)
from text_comparator.tokenization import tokenize_words


def test_word_frequency_totals_match_token_count():
    tokens = tokenize_words("The cat sat. The dog ran fast!")
    frequency = word_frequency(tokens)

    assert frequency == {"cat": 1, "dog": 1, "fast": 1, "ran": 1, "sat": 1, "the": 2}
    assert list(frequency) == sorted(frequency)
    assert sum(frequency.values()) == len(tokens)


def test_top_words_breaks_ties_lexicographically():
    frequency = {"zeta": 2, "the": 3, "alpha": 2, "beta": 1, "cat": 1, "dog": 1}
    assert top_words(frequency) == [
        ("the", 3),
        ("alpha", 2),
        ("zeta", 2),
        ("beta", 1),
        ("cat", 1),
    ]


def test_top_words_respects_limits():
    frequency = {"a": 1, "b": 1}
    assert top_words(frequency, n=5) == [("a", 1), ("b", 1)]
    assert top_words(frequency, n=0) == []


def test_word_length_distribution_counts_duplicates():
    assert word_length_distribution(["the", "cat", "the", "a", "horse"]) == {
        1: 1,
        3: 3,
        5: 1,
    }


def test_lexical_diversity_handles_empty_documents():
    assert lexical_diversity(6, 7) == 6 / 7 * 100
    assert lexical_diversity(0, 0) == 0.0


def test_average_word_length_weights_by_frequency():
    assert average_word_length({"a": 2, "abcd": 1}) == 2.0
    assert average_word_length({}) == 0.0


def test_count_paragraphs_counts_double_newlines():
    assert count_paragraphs("single paragraph") == 1
    assert count_paragraphs("first\n\nsecond\n\nthird") == 3


def test_count_paragraphs_overlapping_newlines_count_twice():
    assert count_paragraphs("first\n\n\nsecond") == 3
    assert count_paragraphs("") == 1
