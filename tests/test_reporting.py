from pathlib import Path

from text_comparator.config import ComparatorConfig
from text_comparator.pipeline import analyze_text
from text_comparator.reporting import (
    render_comparison_chart,
    render_common_words_table,
    render_comparison_table,
    render_detailed_report,
    render_updated_report,
    render_word_cloud,
    write_report,
    write_visualizations,
)
from text_comparator.similarity import compare_documents
from tests.utils import DOC_A_TEXT, DOC_B_TEXT


def _comparison():
    return compare_documents(
        analyze_text("a.txt", DOC_A_TEXT), analyze_text("b.txt", DOC_B_TEXT)
    )


def test_render_detailed_report_sections():
    report = render_detailed_report(_comparison())

    assert report.startswith("TEXT COMPARATOR - DETAILED ANALYSIS REPORT")
    assert "Document A: a.txt" in report
    assert "- Word Count: 7" in report
    assert "- Top 5 Words: the(2), cat(1), dog(1), fast(1), ran(1)" in report
    assert "Jaccard Similarity: 50.00%" in report
    assert "Common Words: cat, dog, ran, the" in report
    assert "Words exclusive to Document A: 2" in report
    assert "Words exclusive to Document B: 2" in report
    assert "The dog ran fast!" in report
    assert report.rstrip().endswith("End of Report")


def test_render_detailed_report_truncates_common_words():
    config = ComparatorConfig(report_common_words_limit=2, include_readability=False)
    report = render_detailed_report(_comparison(), config)

    assert "Common Words: cat, dog... (and 2 more)" in report
    assert "READABILITY" not in report


def test_render_updated_report_verifies_replacement_word():
    comparison = compare_documents(
        analyze_text("a_updated.txt", "The cat sat. The wolf ran fast!"),
        analyze_text("b.txt", DOC_B_TEXT),
    )
    report = render_updated_report(comparison, "dog", "Wolf")

    assert "Replaced word: 'dog' -> 'Wolf'" in report
    assert "'Wolf' appears 1 times in Document A" in report
    assert "in Document B" not in report
    assert report.rstrip().endswith("End of Updated Report")


def test_render_word_cloud_emphasizes_frequent_words():
    cloud = render_word_cloud({"the": 12, "cat": 1}, limit=20)
    lines = cloud.splitlines()

    assert lines[0] == "=== WORD CLOUD VISUALIZATION ==="
    assert lines[2] == "THE********** (12)"
    assert lines[3] == "cat* (1)"


def test_render_comparison_chart_bars():
    chart = render_comparison_chart(_comparison())

    assert "Document A: # (7)" in chart
    assert "Document B: # (6)" in chart
    assert "(100.0)" in chart


def test_render_comparison_chart_without_readability():
    config = ComparatorConfig(include_readability=False)
    chart = render_comparison_chart(_comparison(), config)

    assert "Word Count Comparison:" in chart
    assert "Readability Score Comparison:" not in chart


def test_console_tables():
    comparison = _comparison()
    table = render_comparison_table(comparison)
    common = render_common_words_table(comparison)

    assert "Jaccard Similarity: 50.00%" in table
    assert "the(2)" in table
    assert "Most shared word: 'the' (used 3 times total)" in common
    assert "Vocabulary overlap: 66.7%" in common


def test_write_report_reports_failure(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    assert write_report(tmp_path / "ok.txt", "hello\n")
    assert not write_report(blocker / "result.txt", "hello\n")


def test_write_visualizations(tmp_path: Path):
    written = write_visualizations(_comparison(), tmp_path)

    assert [path.name for path in written] == [
        "doc1_wordcloud.txt",
        "doc2_wordcloud.txt",
        "comparison_chart.txt",
    ]
