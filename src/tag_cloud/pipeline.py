from __future__ import annotations

import logging
from pathlib import Path

from .config import TagCloudConfig
from .errors import OutputFileError
from .frequencies import count_file
from .models import CountResult, FrequencyTable, TagCloud
from .ranking import rank_entries, select
from .rendering import render_html

LOGGER = logging.getLogger(__name__)


def build_tag_cloud(
    table: FrequencyTable, num_words: int, config: TagCloudConfig
) -> TagCloud:
    """Select the top words from ``table`` and size them for display."""
    words, bounds = select(table, num_words)
    entries = rank_entries(words, bounds, config)
    return TagCloud(num_words=num_words, entries=entries, bounds=bounds)


def generate_tag_cloud(
    input_path: Path,
    output_path: Path,
    num_words: int,
    config: TagCloudConfig,
) -> tuple[TagCloud, CountResult]:
    """
    Read ``input_path``, build the tag cloud and write it to ``output_path``.

    The input is fully counted and closed before the output is opened, so a
    missing input never creates an output file. Writing over the input file
    is refused. A mid-stream read failure is reported on the returned
    CountResult and the cloud is built from the lines read before it.
    """
    result = count_file(input_path, config.separator_set())
    if output_path.resolve() == input_path.resolve():
        raise OutputFileError(output_path, "output would overwrite the input file")

    cloud = build_tag_cloud(result.table, num_words, config)
    document = render_html(cloud, str(input_path), config)
    try:
        writer = output_path.open("w", encoding="utf-8")
    except OSError as exc:
        raise OutputFileError(output_path, exc) from exc
    try:
        with writer:
            writer.write(document)
    except OSError as exc:
        output_path.unlink(missing_ok=True)
        raise OutputFileError(output_path, exc) from exc

    LOGGER.info(
        "Wrote %d words from %s to %s", len(cloud.entries), input_path, output_path
    )
    return cloud, result
