from __future__ import annotations

from typing import Mapping

VOWELS = frozenset("aeiouy")
NEUTRAL_READABILITY = 50.0

# (minimum score, label), checked top-down.
READABILITY_LEVELS = [
    (90.0, "Very Easy (5th grade)"),
    (80.0, "Easy (6th grade)"),
    (70.0, "Fairly Easy (7th grade)"),
    (60.0, "Standard (8th-9th grade)"),
    (50.0, "Fairly Difficult (10th-12th grade)"),
    (30.0, "Difficult (College level)"),
]
HARDEST_LEVEL = "Very Difficult (Graduate level)"


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups, with a silent-e adjustment."""
    syllables = 0
    previous_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            syllables += 1
        previous_was_vowel = is_vowel

    if len(word) > 2 and word.endswith("e") and syllables > 1:
        syllables -= 1
    return max(1, syllables)


def flesch_reading_ease(
    word_count: int, sentence_count: int, frequency: Mapping[str, int]
) -> float:
    """
    Flesch Reading Ease clamped to [0, 100].
    Syllables are counted once per distinct word and weighted by frequency.
    """
    if sentence_count == 0 or word_count == 0:
        return NEUTRAL_READABILITY

    avg_words_per_sentence = word_count / sentence_count
    total_syllables = sum(
        count_syllables(word) * count for word, count in frequency.items()
    )
    avg_syllables_per_word = total_syllables / word_count

    score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    return max(0.0, min(100.0, score))


def readability_level(score: float) -> str:
    """Map a Flesch score onto its conventional grade band."""
    for threshold, label in READABILITY_LEVELS:
        if score >= threshold:
            return label
    return HARDEST_LEVEL


def sentence_complexity(avg_sentence_length: float) -> str:
    if avg_sentence_length > 20:
        return "High"
    if avg_sentence_length > 15:
        return "Medium"
    return "Low"
