from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .models import SeparatorSet

DEFAULT_SEPARATORS = " `*\t\n\r,-.!?[];:'/()\""
DEFAULT_STYLESHEETS = ["tagcloud.css"]


@dataclass(slots=True)
class TagCloudConfig:
    """Presentation and scanning options for tag cloud generation."""

    min_font_size: int = 11
    max_font_size: int = 48
    separators: str = DEFAULT_SEPARATORS
    stylesheets: List[str] = field(default_factory=lambda: list(DEFAULT_STYLESHEETS))

    def __post_init__(self) -> None:
        if self.min_font_size <= 0 or self.max_font_size <= 0:
            raise ValueError("Font sizes must be positive.")
        if self.min_font_size > self.max_font_size:
            raise ValueError(
                f"min_font_size {self.min_font_size} exceeds "
                f"max_font_size {self.max_font_size}."
            )

    def separator_set(self) -> SeparatorSet:
        return frozenset(self.separators)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(TagCloudConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in ("min_font_size", "max_font_size"):
        if key in kwargs and (
            isinstance(kwargs[key], bool) or not isinstance(kwargs[key], int)
        ):
            raise ValueError(f"{key} must be an integer, got {kwargs[key]!r}.")
    if "separators" in kwargs and not isinstance(kwargs["separators"], str):
        raise ValueError("separators must be a string of separator characters.")
    if "stylesheets" in kwargs:
        value = kwargs["stylesheets"]
        stylesheets = [value] if isinstance(value, str) else value
        if not isinstance(stylesheets, list) or not all(
            isinstance(item, str) for item in stylesheets
        ):
            raise ValueError("stylesheets must be a string or a list of strings.")
        kwargs["stylesheets"] = list(stylesheets)
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> TagCloudConfig:
    """Build a TagCloudConfig from a mapping, ignoring keys it does not know."""
    if data is None:
        return TagCloudConfig()
    return TagCloudConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TagCloudConfig:
    """Read font bounds, separators and stylesheet links from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError(f"Configuration YAML {path} must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TagCloudConfig:
    """Return the YAML configuration at ``path``, or the built-in defaults."""
    if path is None:
        return TagCloudConfig()
    return config_from_yaml(path)
