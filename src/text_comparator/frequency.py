from __future__ import annotations

from collections import Counter
from typing import Dict, List, Mapping, Sequence, Tuple


def word_frequency(tokens: Sequence[str]) -> Dict[str, int]:
    """Tally tokens by exact string equality, keyed in lexicographic order."""
    counts = Counter(tokens)
    return {word: counts[word] for word in sorted(counts)}


def top_words(frequency: Mapping[str, int], n: int = 5) -> List[Tuple[str, int]]:
    """
    Return the ``n`` most frequent words.
    Ties are broken by the word itself, ascending.
    """
    ranked = sorted(frequency.items(), key=lambda item: (-item[1], item[0]))
    return ranked[: max(0, n)]


def word_length_distribution(tokens: Sequence[str]) -> Dict[int, int]:
    """Tally token lengths across all tokens, duplicates included."""
    counts = Counter(len(token) for token in tokens)
    return {length: counts[length] for length in sorted(counts)}


def lexical_diversity(unique_count: int, word_count: int) -> float:
    """Type-token ratio as a percentage."""
    if word_count == 0:
        return 0.0
    return unique_count / word_count * 100.0


def average_word_length(frequency: Mapping[str, int]) -> float:
    total_words = sum(frequency.values())
    if total_words == 0:
        return 0.0
    total_chars = sum(len(word) * count for word, count in frequency.items())
    return total_chars / total_words


def count_paragraphs(text: str) -> int:
    """Count paragraphs as one plus every adjacent pair of newlines.

    Pairs overlap, so a run of three newlines adds two paragraphs.
    """
    count = 1
    for idx in range(len(text) - 1):
        if text[idx] == "\n" and text[idx + 1] == "\n":
            count += 1
    return count
