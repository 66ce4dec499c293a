from pathlib import Path

import pytest

from text_comparator.config import (
    ComparatorConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    config = load_config(None)
    assert config == ComparatorConfig()
    assert config.top_word_count == 5
    assert config.include_readability and config.include_visualization


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"top_word_count": 3, "unknown": "value"})
    assert config.top_word_count == 3
    assert "unknown" not in config.to_dict()


def test_config_from_dict_rejects_negative_top_word_count():
    with pytest.raises(ValueError):
        config_from_dict({"top_word_count": -1})


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "include_visualization: false\noutput_dir: reports\n", encoding="utf-8"
    )
    config = config_from_yaml(path)

    assert config.include_visualization is False
    assert config.output_dir == "reports"


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


@pytest.mark.parametrize(
    "data",
    [
        {"include_readability": "yes"},
        {"word_cloud_limit": "20"},
        {"common_words_display_limit": True},
        {"report_common_words_limit": -3},
        {"output_dir": 5},
    ],
)
def test_config_from_dict_rejects_invalid_field_types(data):
    with pytest.raises(ValueError):
        config_from_dict(data)


def test_config_from_yaml_rejects_invalid_flag(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("include_visualization: sometimes\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)
