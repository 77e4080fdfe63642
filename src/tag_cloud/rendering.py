from __future__ import annotations

from html import escape
from typing import List

from .config import TagCloudConfig
from .models import RankedEntry, TagCloud


def render_html(cloud: TagCloud, source_name: str, config: TagCloudConfig) -> str:
    """Render a tag cloud as a standalone HTML document."""
    heading = escape(f"Top {cloud.num_words} words in {source_name}")
    lines: List[str] = ["<html>", "<head>", f"<title>{heading}</title>"]
    for stylesheet in config.stylesheets:
        lines.append(
            f'<link href="{escape(stylesheet)}" rel="stylesheet" type="text/css">'
        )
    lines.extend(_style_block(config))
    lines.extend(
        [
            "</head>",
            "<body>",
            f"<h2>{heading}</h2>",
            "<hr>",
            '<div class="cdiv">',
            '<p class="cbox">',
        ]
    )
    lines.extend(render_entry(entry) for entry in cloud.entries)
    lines.extend(["</p>", "</div>", "</body>", "</html>"])
    return "\n".join(lines) + "\n"


def render_entry(entry: RankedEntry) -> str:
    """Render one word as an inline span sized by its font class."""
    return (
        f'<span style="cursor:default" class="f{entry.font_size}" '
        f'title="count: {entry.count}">{escape(entry.word)}</span>'
    )


def _style_block(config: TagCloudConfig) -> List[str]:
    # One class per size so documents render without the external stylesheet.
    rules = [
        "<style>",
        ".cdiv { margin: 0 auto; width: 80%; }",
        ".cbox { border: 1px solid #ccc; padding: 1em; line-height: 1.4; }",
        ".cbox span { margin-right: 0.4em; }",
    ]
    for size in range(config.min_font_size, config.max_font_size + 1):
        rules.append(f".f{size} {{ font-size: {size}px; }}")
    rules.append("</style>")
    return rules
