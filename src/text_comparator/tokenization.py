from __future__ import annotations

from typing import List

from .textutils import SENTENCE_TERMINATORS, normalize_text

_TERMINATOR_TABLE = str.maketrans({ch: " " for ch in SENTENCE_TERMINATORS})


def tokenize_words(text: str) -> List[str]:
    """Tokenize text into lowercase alphabetic words in document order."""
    normalized = normalize_text(text).translate(_TERMINATOR_TABLE)
    tokens: List[str] = []
    for word in normalized.split():
        if word and word[0].isalpha():
            tokens.append(word)
    return tokens
