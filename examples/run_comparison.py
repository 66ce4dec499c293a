"""Minimal example showing how to compare two texts and replace a word as a library."""

from __future__ import annotations

from text_comparator import analyze_text, replace_word_in_text
from text_comparator.config import load_config
from text_comparator.reporting import render_comparison_table
from text_comparator.similarity import compare_documents


def main() -> None:
    config = load_config()
    first = "The cat sat. The dog ran fast!"
    second = "The cat slept. A dog ran."

    comparison = compare_documents(
        analyze_text("first", first, config), analyze_text("second", second, config)
    )
    print(render_comparison_table(comparison, config))

    updated, count = replace_word_in_text(first, "dog", "wolf")
    print(f"Replaced {count} occurrence(s):\n", updated)


if __name__ == "__main__":
    main()
