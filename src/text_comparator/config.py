from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ComparatorConfig:
    """Configuration options for document analysis and reporting."""

    include_readability: bool = True
    include_visualization: bool = True
    top_word_count: int = 5
    common_words_display_limit: int = 15
    report_common_words_limit: int = 20
    word_cloud_limit: int = 20
    output_dir: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


_FLAG_FIELDS = ("include_readability", "include_visualization")
_COUNT_FIELDS = (
    "top_word_count",
    "common_words_display_limit",
    "report_common_words_limit",
    "word_cloud_limit",
)


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ComparatorConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> ComparatorConfig:
    """Build a ComparatorConfig from a dictionary-like input."""
    if data is None:
        return ComparatorConfig()
    config = ComparatorConfig(**_build_kwargs(data))
    _validate(config)
    return config


def _validate(config: ComparatorConfig) -> None:
    for name in _FLAG_FIELDS:
        if not isinstance(getattr(config, name), bool):
            raise ValueError(f"{name} must be true or false.")
    for name in _COUNT_FIELDS:
        value = getattr(config, name)
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{name} must be an integer, zero or greater.")
    if config.output_dir is not None and not isinstance(config.output_dir, str):
        raise ValueError("output_dir must be a string path.")


def config_from_yaml(path: str | Path) -> ComparatorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ComparatorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ComparatorConfig()
    return config_from_yaml(path)
