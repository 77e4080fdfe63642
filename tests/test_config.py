from pathlib import Path

import pytest

from tag_cloud.config import (
    DEFAULT_SEPARATORS,
    TagCloudConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    """No path yields the built-in defaults."""
    cfg = load_config()

    assert cfg.min_font_size == 11
    assert cfg.max_font_size == 48
    assert cfg.separator_set() == frozenset(DEFAULT_SEPARATORS)
    assert cfg.stylesheets == ["tagcloud.css"]


def test_config_from_yaml_overrides_and_ignores_unknown_keys(tmp_path: Path):
    """YAML values override defaults and unknown keys are dropped."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "min_font_size: 8\nmax_font_size: 30\nstylesheets: custom.css\nunused: 1\n",
        encoding="utf-8",
    )

    cfg = config_from_yaml(path)

    assert (cfg.min_font_size, cfg.max_font_size) == (8, 30)
    assert cfg.stylesheets == ["custom.css"]


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    """A YAML list is rejected."""
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_config_rejects_inverted_font_bounds():
    with pytest.raises(ValueError):
        config_from_dict({"min_font_size": 50, "max_font_size": 10})
    with pytest.raises(ValueError):
        TagCloudConfig(min_font_size=0)


@pytest.mark.parametrize(
    "data",
    [
        {"min_font_size": "11"},
        {"max_font_size": True},
        {"separators": [" ", ","]},
        {"stylesheets": [1, 2]},
    ],
)
def test_config_from_dict_rejects_wrongly_typed_values(data: dict[str, object]):
    """Values of the wrong type are reported as ValueError."""
    with pytest.raises(ValueError):
        config_from_dict(data)
