from __future__ import annotations

from pathlib import Path

DOC_A_TEXT = "The cat sat. The dog ran fast!"
DOC_B_TEXT = "The cat slept. A dog ran."


def write_sample_documents(
    root: Path,
    text_a: str = DOC_A_TEXT,
    text_b: str = DOC_B_TEXT,
    names: tuple[str, str] = ("doc_a.txt", "doc_b.txt"),
) -> tuple[Path, Path]:
    """Write a pair of documents under root and return their paths."""
    root.mkdir(parents=True, exist_ok=True)
    path_a = root / names[0]
    path_b = root / names[1]
    path_a.write_text(text_a, encoding="utf-8")
    path_b.write_text(text_b, encoding="utf-8")
    return path_a, path_b
