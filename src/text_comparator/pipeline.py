from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .config import ComparatorConfig
from .frequency import (
    count_paragraphs,
    lexical_diversity,
    top_words,
    word_frequency,
    word_length_distribution,
)
from .models import ComparisonResult, Document, DocumentStats, ReplacementOutcome
from .readability import NEUTRAL_READABILITY, flesch_reading_ease
from .replacement import replace_word_in_text, updated_filename
from .sentences import count_sentences, find_longest_sentence, split_sentences
from .similarity import compare_documents
from .textutils import FILE_ERRORS, flatten_lines
from .tokenization import tokenize_words

LOGGER = logging.getLogger(__name__)

# Replacement targets keyed by their menu number and name.
TARGET_CHOICES = {
    "1": "both",
    "2": "first",
    "3": "second",
    "both": "both",
    "first": "first",
    "second": "second",
}


class TextComparatorError(RuntimeError):
    """Base class for analysis failures surfaced to the user."""


class DocumentLoadError(TextComparatorError):
    """Raised when an input document cannot be read."""


class ComparisonError(TextComparatorError):
    """Raised when two documents cannot be compared."""


def load_document(path: str | Path) -> Document:
    """Read a text file as UTF-8 and wrap it in a Document."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8", errors=FILE_ERRORS)
    except OSError as exc:
        raise DocumentLoadError(f"Cannot open file '{source}': {exc}") from exc
    LOGGER.info("Loaded %s (%d characters)", source, len(text))
    return Document(doc_id=str(path), text=text)


def analyze_text(
    doc_id: str, text: str, config: ComparatorConfig | None = None
) -> DocumentStats:
    """Compute every per-document statistic for ``text`` in a single pass."""
    config = config or ComparatorConfig()
    # Paragraph breaks only exist before the lines are joined.
    paragraph_count = count_paragraphs(text) if text else 0
    content = flatten_lines(text)

    tokens = tokenize_words(content)
    word_count = len(tokens)
    sentence_count = count_sentences(content)
    frequency = word_frequency(tokens)
    unique_words = frozenset(frequency)
    longest_sentence, longest_count = find_longest_sentence(content)

    if config.include_readability:
        readability = flesch_reading_ease(word_count, sentence_count, frequency)
    else:
        readability = NEUTRAL_READABILITY

    return DocumentStats(
        filename=doc_id,
        word_count=word_count,
        sentence_count=sentence_count,
        avg_sentence_length=word_count / sentence_count if sentence_count else 0.0,
        longest_sentence=longest_sentence,
        longest_sentence_word_count=longest_count,
        unique_words=unique_words,
        word_frequency=frequency,
        top_words=top_words(frequency, config.top_word_count),
        readability_score=readability,
        lexical_diversity=lexical_diversity(len(unique_words), word_count),
        paragraph_count=paragraph_count,
        word_length_distribution=word_length_distribution(tokens),
        sentences=split_sentences(content),
    )


def analyze_document(
    path: str | Path, config: ComparatorConfig | None = None
) -> DocumentStats:
    """Load a file from disk and analyze it."""
    doc = load_document(path)
    return analyze_text(doc.doc_id, doc.text, config)


def compare_files(
    path_a: str | Path,
    path_b: str | Path,
    config: ComparatorConfig | None = None,
) -> ComparisonResult:
    """Analyze two files independently and compare them."""
    config = config or ComparatorConfig()
    stats: List[DocumentStats] = []
    for path in (path_a, path_b):
        try:
            doc_stats = analyze_document(path, config)
        except DocumentLoadError as exc:
            raise ComparisonError(str(exc)) from exc
        if doc_stats.word_count == 0:
            raise ComparisonError(f"Document '{path}' contains no words.")
        stats.append(doc_stats)
    return compare_documents(stats[0], stats[1])


def resolve_targets(
    target: str, path_a: str | Path, path_b: str | Path
) -> List[Path]:
    """Translate a replacement target selection into the files to rewrite."""
    choice = TARGET_CHOICES.get(str(target).strip().lower())
    if choice is None:
        raise ValueError(f"Invalid replacement target '{target}'.")
    if choice == "first":
        return [Path(path_a)]
    if choice == "second":
        return [Path(path_b)]
    return [Path(path_a), Path(path_b)]


def replace_in_file(
    path: str | Path,
    old_word: str,
    new_word: str,
    output_dir: str | Path | None = None,
) -> ReplacementOutcome:
    """Write an ``_updated`` copy of ``path`` with ``old_word`` replaced.

    Files that cannot be read, hold no match or cannot be written are
    reported through ``skipped_reason`` rather than raising.
    """
    source = Path(path)
    try:
        doc = load_document(source)
    except DocumentLoadError as exc:
        LOGGER.warning("Skipping %s: %s", source, exc)
        return ReplacementOutcome(source_path=source, skipped_reason=str(exc))

    updated_text, occurrences = replace_word_in_text(doc.text, old_word, new_word)
    if occurrences == 0:
        reason = f"Word '{old_word}' not found in {source}."
        LOGGER.info("%s", reason)
        return ReplacementOutcome(source_path=source, skipped_reason=reason)

    dest = updated_filename(source)
    if output_dir is not None:
        dest = Path(output_dir) / dest.name
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(updated_text, encoding="utf-8", errors=FILE_ERRORS)
    except OSError as exc:
        reason = f"Could not create output file {dest}: {exc}"
        LOGGER.warning("%s", reason)
        return ReplacementOutcome(
            source_path=source, occurrences=occurrences, skipped_reason=reason
        )

    LOGGER.info(
        "Replaced %d occurrence(s) of '%s' with '%s' in %s -> %s",
        occurrences,
        old_word,
        new_word,
        source,
        dest,
    )
    return ReplacementOutcome(
        source_path=source,
        occurrences=occurrences,
        output_path=dest,
        updated_text=updated_text,
    )


def replace_in_files(
    paths: Iterable[str | Path],
    old_word: str,
    new_word: str,
    output_dir: str | Path | None = None,
) -> List[ReplacementOutcome]:
    """Run ``replace_in_file`` for every path, in order."""
    return [replace_in_file(path, old_word, new_word, output_dir) for path in paths]


def updated_pair(
    path_a: str | Path,
    path_b: str | Path,
    outcomes: Sequence[ReplacementOutcome],
) -> Tuple[Path, Path]:
    """Swap each original path for its updated copy where one was written."""
    written = {
        outcome.source_path: outcome.output_path
        for outcome in outcomes
        if outcome.output_path is not None
    }
    first = Path(path_a)
    second = Path(path_b)
    return written.get(first, first), written.get(second, second)


def replace_targets(
    path_a: str | Path,
    path_b: str | Path,
    target: str,
    old_word: str,
    new_word: str,
    output_dir: str | Path | None = None,
) -> List[ReplacementOutcome]:
    """Validate a replacement request and rewrite the selected documents."""
    if not old_word:
        raise ValueError("The word to replace must not be empty.")
    targets = resolve_targets(target, path_a, path_b)
    return replace_in_files(targets, old_word, new_word, output_dir)


def compare_updated(
    path_a: str | Path,
    path_b: str | Path,
    outcomes: Sequence[ReplacementOutcome],
    config: ComparatorConfig | None = None,
) -> ComparisonResult | None:
    """Compare the updated pair, or return None when no file was updated."""
    if not any(outcome.updated for outcome in outcomes):
        return None
    file_a, file_b = updated_pair(path_a, path_b, outcomes)
    return compare_files(file_a, file_b, config)


def run_replacement_round(
    path_a: str | Path,
    path_b: str | Path,
    target: str,
    old_word: str,
    new_word: str,
    config: ComparatorConfig | None = None,
) -> Tuple[List[ReplacementOutcome], ComparisonResult | None]:
    """
    Replace a word in the selected documents and re-run the comparison.

    The comparison is only rebuilt when at least one file was updated; it
    pairs each updated file with the untouched original of the other.
    Callers that must report the outcomes even when the re-comparison
    fails should call ``replace_targets`` and ``compare_updated`` in turn.
    """
    config = config or ComparatorConfig()
    outcomes = replace_targets(
        path_a, path_b, target, old_word, new_word, config.output_dir
    )
    return outcomes, compare_updated(path_a, path_b, outcomes, config)
