"""
text_comparator package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ComparatorConfig, config_from_dict, config_from_yaml, load_config
from .pipeline import (
    ComparisonError,
    DocumentLoadError,
    TextComparatorError,
    analyze_document,
    analyze_text,
    compare_files,
    compare_updated,
    replace_targets,
    run_replacement_round,
)
from .replacement import count_word_occurrences, replace_word_in_text

__all__ = [
    "ComparatorConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "TextComparatorError",
    "DocumentLoadError",
    "ComparisonError",
    "analyze_text",
    "analyze_document",
    "compare_files",
    "replace_targets",
    "compare_updated",
    "run_replacement_round",
    "count_word_occurrences",
    "replace_word_in_text",
]

__version__ = "0.1.0"
