from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Statistics computed for a single document in one analysis pass."""

    filename: str
    word_count: int = 0
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    longest_sentence: str = ""
    longest_sentence_word_count: int = 0
    unique_words: FrozenSet[str] = frozenset()
    word_frequency: Dict[str, int] = field(default_factory=dict)
    top_words: List[Tuple[str, int]] = field(default_factory=list)
    readability_score: float = 50.0
    lexical_diversity: float = 0.0
    paragraph_count: int = 0
    word_length_distribution: Dict[int, int] = field(default_factory=dict)
    sentences: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CommonWordCount:
    """A word shared by both documents with its count in each."""

    word: str
    count_a: int
    count_b: int

    @property
    def total(self) -> int:
        return self.count_a + self.count_b


@dataclass(slots=True)
class ComparisonResult:
    """Side-by-side comparison of two analyzed documents."""

    doc_a: DocumentStats
    doc_b: DocumentStats
    similarity: float
    common_words: FrozenSet[str]
    exclusive_to_a: FrozenSet[str]
    exclusive_to_b: FrozenSet[str]
    common_word_counts: List[CommonWordCount]
    vocabulary_overlap: float


@dataclass(slots=True)
class ReplacementOutcome:
    """Result of replacing a word in one source file."""

    source_path: Path
    occurrences: int = 0
    output_path: Path | None = None
    updated_text: str | None = None
    skipped_reason: str | None = None

    @property
    def updated(self) -> bool:
        return self.output_path is not None
