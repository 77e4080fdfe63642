from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from .config import TagCloudConfig, load_config
from .errors import TagCloudError
from .pipeline import generate_tag_cloud

app = typer.Typer(help="Tag Cloud Generator CLI.", no_args_is_help=True)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Generate HTML tag clouds from word frequencies in a text file."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    logging.basicConfig(
        level=level, format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
    )


@app.command()
def generate(
    input_path: Path = typer.Option(
        ..., "--input-path", "-i", prompt="Enter name of input file"
    ),
    output_path: Path = typer.Option(
        ..., "--output-path", "-o", prompt="Enter name of output file"
    ),
    num_words: int = typer.Option(
        ...,
        "--num-words",
        "-n",
        min=0,
        prompt="Enter a positive number of words to include",
        help="How many of the most frequent words to include.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Write an HTML tag cloud of the most frequent words in a text file."""
    try:
        cfg = load_config(config)
    except (OSError, yaml.YAMLError, ValueError) as exc:
        typer.echo(f"Error: could not load config {config}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    try:
        cloud, result = generate_tag_cloud(input_path, output_path, num_words, cfg)
    except TagCloudError as exc:
        # Nothing was written; report and exit non-zero.
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not result.complete:
        typer.echo(
            f"Warning: stopped reading {input_path} after {result.lines_read} "
            f"lines ({result.error}); tag cloud uses partial counts.",
            err=True,
        )
    typer.echo(
        f"Wrote top {len(cloud.entries)} words from {input_path} to {output_path}"
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TagCloudConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
