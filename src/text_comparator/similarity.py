from __future__ import annotations

from typing import AbstractSet, FrozenSet, List

from .models import CommonWordCount, ComparisonResult, DocumentStats


def jaccard_similarity(words_a: AbstractSet[str], words_b: AbstractSet[str]) -> float:
    """Intersection over union of two word sets, as a percentage."""
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union) * 100.0


def find_common_words(
    words_a: AbstractSet[str], words_b: AbstractSet[str]
) -> FrozenSet[str]:
    return frozenset(words_a & words_b)


def find_exclusive_words(
    words_a: AbstractSet[str], words_b: AbstractSet[str]
) -> FrozenSet[str]:
    """Words present in ``words_a`` but not in ``words_b``."""
    return frozenset(words_a - words_b)


def common_words_with_counts(
    doc_a: DocumentStats, doc_b: DocumentStats
) -> List[CommonWordCount]:
    """Pair the counts of every shared word, most used overall first."""
    shared = [
        CommonWordCount(word=word, count_a=count, count_b=doc_b.word_frequency[word])
        for word, count in doc_a.word_frequency.items()
        if word in doc_b.word_frequency
    ]
    shared.sort(key=lambda item: (-item.total, item.word))
    return shared


def vocabulary_overlap(doc_a: DocumentStats, doc_b: DocumentStats) -> float:
    """Shared vocabulary relative to the larger of the two vocabularies."""
    largest = max(len(doc_a.unique_words), len(doc_b.unique_words))
    if largest == 0:
        return 0.0
    common = find_common_words(doc_a.unique_words, doc_b.unique_words)
    return len(common) / largest * 100.0


def compare_documents(doc_a: DocumentStats, doc_b: DocumentStats) -> ComparisonResult:
    """Combine two independent analyses into a comparison."""
    return ComparisonResult(
        doc_a=doc_a,
        doc_b=doc_b,
        similarity=jaccard_similarity(doc_a.unique_words, doc_b.unique_words),
        common_words=find_common_words(doc_a.unique_words, doc_b.unique_words),
        exclusive_to_a=find_exclusive_words(doc_a.unique_words, doc_b.unique_words),
        exclusive_to_b=find_exclusive_words(doc_b.unique_words, doc_a.unique_words),
        common_word_counts=common_words_with_counts(doc_a, doc_b),
        vocabulary_overlap=vocabulary_overlap(doc_a, doc_b),
    )


def document_insights(comparison: ComparisonResult) -> List[str]:
    """Summarize which document reads easier, varies more, and runs longer."""
    doc_a, doc_b = comparison.doc_a, comparison.doc_b
    return [
        _contrast(
            doc_a.readability_score,
            doc_b.readability_score,
            5.0,
            "is significantly easier to read",
            "Both documents have similar reading difficulty",
        ),
        _contrast(
            doc_a.lexical_diversity,
            doc_b.lexical_diversity,
            5.0,
            "has richer vocabulary diversity",
            "Both documents have similar vocabulary richness",
        ),
        _contrast(
            doc_a.avg_sentence_length,
            doc_b.avg_sentence_length,
            3.0,
            "uses more complex sentence structures",
            "Both documents have similar sentence complexity",
        ),
    ]


def _contrast(
    value_a: float, value_b: float, margin: float, verdict: str, tie: str
) -> str:
    if value_a > value_b + margin:
        return f"Document A {verdict}"
    if value_b > value_a + margin:
        return f"Document B {verdict}"
    return tie
