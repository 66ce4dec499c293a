from __future__ import annotations

from typing import List, Tuple

from .textutils import SENTENCE_TERMINATORS
from .tokenization import tokenize_words


def split_sentences(text: str) -> List[str]:
    """Split raw text into sentences ending at ``.``, ``!`` or ``?``.

    Sentences are returned verbatim: each keeps its terminator and any
    whitespace picked up since the previous one. Text after the last
    terminator becomes a final sentence.
    """
    sentences: list[str] = []
    current_chars: list[str] = []
    for ch in text:
        current_chars.append(ch)
        if ch in SENTENCE_TERMINATORS:
            sentences.append("".join(current_chars))
            current_chars = []

    if current_chars:
        sentences.append("".join(current_chars))
    return sentences


def count_sentences(text: str) -> int:
    """Count sentence terminators; non-empty text without any counts as one."""
    if not text:
        return 0
    count = sum(1 for ch in text if ch in SENTENCE_TERMINATORS)
    return count if count > 0 else 1


def find_longest_sentence(text: str) -> Tuple[str, int]:
    """Return the sentence with the most tokens and its token count."""
    longest = ""
    max_words = 0
    for sentence in split_sentences(text):
        num_words = len(tokenize_words(sentence))
        # Strict comparison keeps the first sentence on ties.
        if num_words > max_words:
            longest = sentence
            max_words = num_words
    return longest, max_words
