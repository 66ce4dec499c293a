from pathlib import Path

import pytest

from text_comparator.replacement import (
    count_word_occurrences,
    find_whole_word_matches,
    replace_word_in_text,
    updated_filename,
)


def test_replace_word_in_text_matches_whole_words_only():
    updated, count = replace_word_in_text("concatenate cats cat.", "cat", "dog")

    assert updated == "concatenate cats dog."
    assert count == 1


def test_replace_word_in_text_is_case_insensitive_and_verbatim():
    updated, count = replace_word_in_text("Cat CAT cat", "cAt", "Dog")

    assert updated == "Dog Dog Dog"
    assert count == 3


def test_replace_word_in_text_preserves_surrounding_text():
    text = "The dog.\nThe Dog ran, dogged by a dog-like hound.\n"
    updated, count = replace_word_in_text(text, "dog", "wolf")

    assert updated == "The wolf.\nThe wolf ran, dogged by a wolf-like hound.\n"
    assert count == 3


def test_replacement_containing_old_word_is_not_rematched():
    updated, count = replace_word_in_text("cat and cat", "cat", "cat cat")

    assert updated == "cat cat and cat cat"
    assert count == 2


def test_word_boundaries_use_ascii_alphanumerics():
    assert count_word_occurrences("cat_food", "cat") == 1
    assert count_word_occurrences("cat9 9cat", "cat") == 0
    assert find_whole_word_matches("aaaa", "aa") == []


def test_count_matches_replacement_count():
    text = "A dog, another Dog; dogs and hotdog. DOG!"
    for word in ("dog", "and", "a", "missing"):
        assert count_word_occurrences(text, word) == replace_word_in_text(
            text, word, "x"
        )[1]


def test_replace_word_in_text_without_matches_returns_original():
    assert replace_word_in_text("nothing here", "cat", "dog") == ("nothing here", 0)


def test_empty_search_word_is_rejected():
    with pytest.raises(ValueError):
        count_word_occurrences("text", "")


def test_updated_filename():
    assert updated_filename("docs/a.txt") == Path("docs/a_updated.txt")
    assert updated_filename("notes") == Path("notes_updated.txt")
    assert updated_filename("archive.tar.gz") == Path("archive.tar_updated.gz")
