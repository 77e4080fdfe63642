"""
tag_cloud package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import TagCloudConfig, config_from_dict, config_from_yaml, load_config
from .frequencies import count_file, count_stream, count_words
from .pipeline import build_tag_cloud, generate_tag_cloud
from .ranking import select
from .rendering import render_html
from .scaling import font_size
from .tokenization import next_token

__all__ = [
    "TagCloudConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "count_file",
    "count_stream",
    "count_words",
    "build_tag_cloud",
    "generate_tag_cloud",
    "select",
    "render_html",
    "font_size",
    "next_token",
]

__version__ = "0.1.0"
