from __future__ import annotations

import string

SENTENCE_TERMINATORS = frozenset(".!?")

# Undecodable bytes survive a read/write round trip; the normalizer drops them.
FILE_ERRORS = "surrogateescape"

_ASCII_LETTERS = frozenset(string.ascii_letters)
_WHITESPACE = frozenset(string.whitespace)
_PUNCTUATION = frozenset(string.punctuation)


def normalize_text(value: object) -> str:
    """Lowercase letters, keep whitespace and terminators, blank out other punctuation.

    Any other character (digits, symbols, non-ASCII) is dropped without
    leaving a separator, so ``"word1word"`` becomes ``"wordword"``.
    """
    if not isinstance(value, str):
        value = str(value)
    chars: list[str] = []
    for ch in value:
        if ch in _ASCII_LETTERS or ch in _WHITESPACE or ch in SENTENCE_TERMINATORS:
            chars.append(ch.lower())
        elif ch in _PUNCTUATION:
            chars.append(" ")
    return "".join(chars)


def flatten_lines(text: str) -> str:
    """Join the newline-separated lines of a file with single spaces."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return " ".join(lines)
