"""
Tiny helper script that prints the tag cloud entries for a sample passage.
"""

from __future__ import annotations

from tag_cloud.config import TagCloudConfig
from tag_cloud.frequencies import count_words
from tag_cloud.pipeline import build_tag_cloud


def main() -> None:
    config = TagCloudConfig()
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "The rain fell on the roof, and the cat slept through the rain.",
    ]

    table = count_words(samples, config.separator_set())
    cloud = build_tag_cloud(table, 8, config)

    for entry in cloud.entries:
        print(f"{entry.word:<12} count={entry.count:<3} font=f{entry.font_size}")


if __name__ == "__main__":
    main()
