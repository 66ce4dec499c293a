"""
Plain-text renderers for comparison results.

Every renderer returns a string; ``write_report`` persists one and reports
failure instead of raising so the remaining output can still be produced.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Sequence, Tuple

from .config import ComparatorConfig
from .frequency import average_word_length, top_words
from .models import ComparisonResult, DocumentStats, ReplacementOutcome
from .readability import readability_level, sentence_complexity
from .similarity import document_insights
from .textutils import FILE_ERRORS

LOGGER = logging.getLogger(__name__)

REPORT_FILENAME = "result.txt"
UPDATED_REPORT_FILENAME = "result_updated.txt"
WORD_CLOUD_FILENAMES = ("doc1_wordcloud.txt", "doc2_wordcloud.txt")
COMPARISON_CHART_FILENAME = "comparison_chart.txt"

SEPARATOR_WIDTH = 80


def separator(char: str = "=", length: int = SEPARATOR_WIDTH) -> str:
    return char * length


def format_top_words(words: Sequence[Tuple[str, int]]) -> str:
    return ", ".join(f"{word}({count})" for word, count in words)


def _document_section(label: str, doc: DocumentStats) -> List[str]:
    return [
        f"Document {label}: {doc.filename}",
        f"- Word Count: {doc.word_count}",
        f"- Sentence Count: {doc.sentence_count}",
        f"- Unique Words: {len(doc.unique_words)}",
        f"- Average Sentence Length: {doc.avg_sentence_length:.2f} words",
        f"- Longest Sentence: {doc.longest_sentence_word_count} words",
        f"- Top {len(doc.top_words)} Words: {format_top_words(doc.top_words)}",
        "",
    ]


def _common_words_line(comparison: ComparisonResult, limit: int) -> str:
    words = sorted(comparison.common_words)
    line = "Common Words: " + ", ".join(words[:limit])
    if len(words) > limit:
        line += f"... (and {len(words) - limit} more)"
    return line


def _longest_sentences(comparison: ComparisonResult, suffix: str = "") -> List[str]:
    title = f"LONGEST SENTENCES{suffix}"
    lines = [title, "-" * len(title), ""]
    for label, doc in (("A", comparison.doc_a), ("B", comparison.doc_b)):
        lines.append(
            f"Document {label} longest sentence "
            f"({doc.longest_sentence_word_count} words):"
        )
        lines.append(doc.longest_sentence.strip())
        lines.append("")
    return lines


def render_detailed_report(
    comparison: ComparisonResult, config: ComparatorConfig | None = None
) -> str:
    """Render the primary report written to ``result.txt``."""
    config = config or ComparatorConfig()
    lines = [
        "TEXT COMPARATOR - DETAILED ANALYSIS REPORT",
        "==========================================",
        "",
        "DOCUMENT ANALYSIS",
        "-----------------",
        "",
    ]
    lines += _document_section("A", comparison.doc_a)
    lines += _document_section("B", comparison.doc_b)
    lines += [
        "COMPARISON ANALYSIS",
        "-------------------",
        "",
        f"Jaccard Similarity: {comparison.similarity:.2f}%",
        f"Common Words Count: {len(comparison.common_words)}",
        f"Vocabulary Overlap: {comparison.vocabulary_overlap:.1f}%",
        "",
        _common_words_line(comparison, config.report_common_words_limit),
        "",
        f"Words exclusive to Document A: {len(comparison.exclusive_to_a)}",
        f"Words exclusive to Document B: {len(comparison.exclusive_to_b)}",
        "",
    ]
    if config.include_readability:
        lines += [
            "READABILITY",
            "-----------",
            "",
        ]
        for label, doc in (("A", comparison.doc_a), ("B", comparison.doc_b)):
            lines.append(
                f"Document {label}: {doc.readability_score:.1f}/100 "
                f"({readability_level(doc.readability_score)}), "
                f"lexical diversity {doc.lexical_diversity:.1f}%, "
                f"{doc.paragraph_count} paragraph(s)"
            )
        lines.append("")
    lines += _longest_sentences(comparison)
    lines.append("End of Report")
    return "\n".join(lines) + "\n"


def render_updated_report(
    comparison: ComparisonResult,
    old_word: str,
    new_word: str,
    config: ComparatorConfig | None = None,
) -> str:
    """Render ``result_updated.txt`` after a replacement round."""
    config = config or ComparatorConfig()
    doc_a, doc_b = comparison.doc_a, comparison.doc_b
    lines = [
        "TEXT COMPARATOR - UPDATED ANALYSIS REPORT",
        "==========================================",
        "",
        "WORD REPLACEMENT SUMMARY",
        "------------------------",
        f"Replaced word: '{old_word}' -> '{new_word}'",
        f"Documents analyzed: {doc_a.filename} and {doc_b.filename}",
        "",
        "DOCUMENT ANALYSIS (AFTER REPLACEMENT)",
        "-------------------------------------",
        "",
    ]
    lines += _document_section("A", doc_a)
    lines += _document_section("B", doc_b)
    lines += [
        "COMPARISON ANALYSIS (AFTER REPLACEMENT)",
        "---------------------------------------",
        "",
        f"Jaccard Similarity: {comparison.similarity:.2f}%",
        f"Common Words Count: {len(comparison.common_words)}",
        "",
        _common_words_line(comparison, config.report_common_words_limit),
        "",
    ]
    lines += _longest_sentences(comparison, " (AFTER REPLACEMENT)")

    verification = replacement_verification(comparison, new_word)
    if verification:
        lines += ["REPLACEMENT WORD ANALYSIS", "-------------------------"]
        lines += verification
        lines.append("")
    lines.append("End of Updated Report")
    return "\n".join(lines) + "\n"


def replacement_verification(comparison: ComparisonResult, new_word: str) -> List[str]:
    """Report how often the replacement word now appears in each document."""
    # Frequency keys are normalized tokens, so look the word up the same way.
    key = new_word.lower()
    lines: List[str] = []
    for label, doc in (("A", comparison.doc_a), ("B", comparison.doc_b)):
        count = doc.word_frequency.get(key)
        if count:
            lines.append(f"'{new_word}' appears {count} times in Document {label}")
    return lines


def render_word_cloud(frequency: Mapping[str, int], limit: int = 20) -> str:
    """ASCII word cloud: loud words are upper-cased, stars track frequency."""
    lines = ["=== WORD CLOUD VISUALIZATION ===", ""]
    for word, count in top_words(frequency, limit):
        shown = word.upper() if count >= 5 else word
        lines.append(f"{shown}{'*' * min(count, 10)} ({count})")
    return "\n".join(lines) + "\n"


def render_comparison_chart(
    comparison: ComparisonResult, config: ComparatorConfig | None = None
) -> str:
    config = config or ComparatorConfig()
    doc_a, doc_b = comparison.doc_a, comparison.doc_b
    lines = [
        "=== VISUAL COMPARISON CHART ===",
        "",
        "Word Count Comparison:",
        f"Document A: {'#' * min(doc_a.word_count // 5, 50)} ({doc_a.word_count})",
        f"Document B: {'#' * min(doc_b.word_count // 5, 50)} ({doc_b.word_count})",
    ]
    if not config.include_readability:
        return "\n".join(lines) + "\n"
    lines += [
        "",
        "Readability Score Comparison:",
        f"Document A: {'=' * int(doc_a.readability_score / 2)} "
        f"({doc_a.readability_score:.1f})",
        f"Document B: {'=' * int(doc_b.readability_score / 2)} "
        f"({doc_b.readability_score:.1f})",
    ]
    return "\n".join(lines) + "\n"


def _row(label: str, value_a: object, value_b: object, width: int = 25) -> str:
    return f"{label:<{width}}{str(value_a):<{width}}{str(value_b):<{width}}".rstrip()


def render_comparison_table(
    comparison: ComparisonResult, config: ComparatorConfig | None = None
) -> str:
    """Console tables: core metrics, similarity and top words."""
    config = config or ComparatorConfig()
    doc_a, doc_b = comparison.doc_a, comparison.doc_b
    lines = [
        "COMPARISON RESULTS",
        separator("-"),
        _row("Metric", "Document A", "Document B"),
        separator("-", 75),
        _row("Filename:", doc_a.filename[:22], doc_b.filename[:22]),
        _row("Word Count:", doc_a.word_count, doc_b.word_count),
        _row("Sentence Count:", doc_a.sentence_count, doc_b.sentence_count),
        _row("Unique Words:", len(doc_a.unique_words), len(doc_b.unique_words)),
        _row(
            "Avg Sentence Length:",
            f"{doc_a.avg_sentence_length:.2f}",
            f"{doc_b.avg_sentence_length:.2f}",
        ),
        _row(
            "Longest Sentence:",
            f"{doc_a.longest_sentence_word_count} words",
            f"{doc_b.longest_sentence_word_count} words",
        ),
        separator("-", 75),
        "",
        "SIMILARITY ANALYSIS",
        separator("-", 30),
        f"Jaccard Similarity: {comparison.similarity:.2f}%",
        f"Common Words: {len(comparison.common_words)}",
        "",
        f"TOP {config.top_word_count} FREQUENT WORDS",
        separator("-", 50),
        _row("Document A", "Document B", "", width=15),
        separator("-", 30),
    ]
    for idx in range(config.top_word_count):
        cells = []
        for doc in (doc_a, doc_b):
            if idx < len(doc.top_words):
                word, count = doc.top_words[idx]
                cells.append(f"{word}({count})")
            else:
                cells.append("-")
        lines.append(_row(cells[0], cells[1], "", width=15))
    return "\n".join(lines) + "\n"


def render_common_words_table(
    comparison: ComparisonResult, config: ComparatorConfig | None = None
) -> str:
    config = config or ComparatorConfig()
    lines = ["COMMON WORDS DETAILED ANALYSIS", separator("=", 70)]
    shared = comparison.common_word_counts
    if not shared:
        lines.append("No common words found between the documents.")
        return "\n".join(lines) + "\n"

    lines.append(
        f"{'Word':<15}{'Doc A Count':<12}{'Doc B Count':<12}"
        f"{'Total Uses':<15}{'Frequency %':<15}".rstrip()
    )
    lines.append(separator("-", 70))
    words_a = comparison.doc_a.word_count
    words_b = comparison.doc_b.word_count
    for item in shared[: config.common_words_display_limit]:
        freq_a = item.count_a / words_a * 100 if words_a else 0.0
        freq_b = item.count_b / words_b * 100 if words_b else 0.0
        avg_freq = (freq_a + freq_b) / 2
        lines.append(
            f"{item.word:<15}{item.count_a:<12}{item.count_b:<12}"
            f"{item.total:<15}{avg_freq:.2f}%"
        )

    top = shared[0]
    lines += [
        "",
        "Common Words Statistics:",
        f"- Total common words: {len(shared)}",
        f"- Most shared word: '{top.word}' (used {top.total} times total)",
        f"- Vocabulary overlap: {comparison.vocabulary_overlap:.1f}%",
    ]
    return "\n".join(lines) + "\n"


def render_advanced_analysis(comparison: ComparisonResult) -> str:
    """Readability, diversity and sentence-shape metrics plus insights."""
    doc_a, doc_b = comparison.doc_a, comparison.doc_b
    lines = [
        "ADVANCED LINGUISTIC ANALYSIS",
        separator("="),
        _row("Metric", "Document A", "Document B", width=35),
        separator("-"),
        _row(
            "Readability Score:",
            f"{int(doc_a.readability_score)}/100",
            f"{int(doc_b.readability_score)}/100",
            width=35,
        ),
        _row(
            "Reading Level:",
            readability_level(doc_a.readability_score),
            readability_level(doc_b.readability_score),
            width=35,
        ),
        _row(
            "Lexical Diversity (TTR):",
            f"{int(doc_a.lexical_diversity)}%",
            f"{int(doc_b.lexical_diversity)}%",
            width=35,
        ),
        _row(
            "Paragraph Count:",
            doc_a.paragraph_count,
            doc_b.paragraph_count,
            width=35,
        ),
        _row(
            "Average Word Length:",
            f"{average_word_length(doc_a.word_frequency):.2f} letters",
            f"{average_word_length(doc_b.word_frequency):.2f} letters",
            width=35,
        ),
        _row(
            "Sentence Complexity:",
            sentence_complexity(doc_a.avg_sentence_length),
            sentence_complexity(doc_b.avg_sentence_length),
            width=35,
        ),
        separator("-"),
        "",
        "DOCUMENT INSIGHTS",
        separator("-", 50),
    ]
    lines += [f"- {insight}" for insight in document_insights(comparison)]
    return "\n".join(lines) + "\n"


def render_replacement_summary(
    outcomes: Sequence[ReplacementOutcome], old_word: str, new_word: str
) -> str:
    lines: List[str] = []
    for outcome in outcomes:
        if outcome.output_path is None:
            lines.append(f"{outcome.source_path}: {outcome.skipped_reason}")
            continue
        lines += [
            f"Original file: {outcome.source_path}",
            f"Updated file: {outcome.output_path}",
            f"Replaced {outcome.occurrences} occurrence(s) of '{old_word}' "
            f"with '{new_word}'",
        ]
    return "\n".join(lines) + "\n"


def write_report(path: str | Path, contents: str) -> bool:
    """Write a report file; returns False (after logging) when it cannot be written."""
    dest = Path(path)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(contents, encoding="utf-8", errors=FILE_ERRORS)
    except OSError as exc:
        LOGGER.error("Cannot create %s: %s", dest, exc)
        return False
    LOGGER.info("Wrote %s", dest)
    return True


def write_visualizations(
    comparison: ComparisonResult,
    output_dir: str | Path,
    config: ComparatorConfig | None = None,
) -> List[Path]:
    """Write both word clouds and the comparison chart; return the files written."""
    config = config or ComparatorConfig()
    root = Path(output_dir)
    artifacts = [
        (
            root / WORD_CLOUD_FILENAMES[0],
            render_word_cloud(comparison.doc_a.word_frequency, config.word_cloud_limit),
        ),
        (
            root / WORD_CLOUD_FILENAMES[1],
            render_word_cloud(comparison.doc_b.word_frequency, config.word_cloud_limit),
        ),
        (
            root / COMPARISON_CHART_FILENAME,
            render_comparison_chart(comparison, config),
        ),
    ]
    return [path for path, contents in artifacts if write_report(path, contents)]
