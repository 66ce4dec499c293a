from __future__ import annotations

import string
from pathlib import Path
from typing import List, Tuple

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORD_CHARS = frozenset(string.ascii_letters + string.digits)

UPDATED_SUFFIX = "_updated"


def find_whole_word_matches(text: str, word: str) -> List[Tuple[int, int]]:
    """
    Locate case-insensitive whole-word occurrences of ``word`` in ``text``.

    A candidate is accepted when the characters on either side of it, where
    present, are not ASCII letters or digits. The search resumes after every
    candidate, accepted or not, so matches never overlap.
    """
    if not word:
        raise ValueError("Search word must not be empty.")

    haystack = text.translate(_ASCII_LOWER)
    needle = word.translate(_ASCII_LOWER)
    spans: List[Tuple[int, int]] = []
    pos = haystack.find(needle)
    while pos != -1:
        end = pos + len(needle)
        before_ok = pos == 0 or haystack[pos - 1] not in _WORD_CHARS
        after_ok = end == len(haystack) or haystack[end] not in _WORD_CHARS
        if before_ok and after_ok:
            spans.append((pos, end))
        pos = haystack.find(needle, end)
    return spans


def count_word_occurrences(text: str, word: str) -> int:
    return len(find_whole_word_matches(text, word))


def replace_word_in_text(text: str, old_word: str, new_word: str) -> Tuple[str, int]:
    """Replace whole-word matches of ``old_word`` with ``new_word`` verbatim.

    Returns the updated text and the number of replacements.
    """
    spans = find_whole_word_matches(text, old_word)
    if not spans:
        return text, 0

    parts: List[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(text[cursor:start])
        parts.append(new_word)
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts), len(spans)


def updated_filename(path: str | Path) -> Path:
    """Insert ``_updated`` before the extension, or append ``_updated.txt``."""
    source = Path(path)
    if source.suffix:
        return source.with_name(f"{source.stem}{UPDATED_SUFFIX}{source.suffix}")
    return source.with_name(f"{source.name}{UPDATED_SUFFIX}.txt")
