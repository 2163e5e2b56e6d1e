from __future__ import annotations

import json
from pathlib import Path
from typing import TypedDict

import typer
import yaml

from .config import TagCloudConfig, load_config
from .models import CloudWord
from .pipeline import TagCloudError, generate_tag_cloud, read_frequencies
from .rendering import build_cloud_words
from .selection import clamp_word_count, select_top_words

app = typer.Typer(help="Tag Cloud Generator CLI.", no_args_is_help=True)


class WordPayload(TypedDict):
    word: str
    count: int
    font_size: int


@app.command()
def generate(
    input_file: Path = typer.Option(
        ..., "--input-file", "-i", prompt="Enter input file name"
    ),
    output_file: Path = typer.Option(
        ..., "--output-file", "-o", prompt="Enter output file name"
    ),
    num_words: int = typer.Option(
        ..., "--num-words", "-n", prompt="Enter how many words to be in tag cloud"
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Write an HTML tag cloud of the most frequent words in a text file."""
    cfg = _load_config_or_exit(config)
    try:
        selection = generate_tag_cloud(input_file, output_file, num_words, cfg)
    except TagCloudError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote tag cloud of {len(selection)} words to {output_file}")


@app.command("top-words")
def top_words(
    input_file: Path = typer.Option(..., "--input-file", "-i"),
    num_words: int = typer.Option(..., "--num-words", "-n"),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the selected words, their counts and font sizes as JSON."""
    cfg = _load_config_or_exit(config)
    try:
        counts = read_frequencies(input_file, cfg)
    except TagCloudError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    selection = select_top_words(counts, clamp_word_count(num_words, len(counts)))
    words = [_word_dict(word) for word in build_cloud_words(selection, cfg)]
    typer.echo(json.dumps({"input": str(input_file), "words": words}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TagCloudConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config_or_exit(path: Path | None) -> TagCloudConfig:
    """Load the YAML config, turning unreadable or invalid files into exit code 1."""
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Invalid configuration {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _word_dict(word: CloudWord) -> WordPayload:
    return {"word": word.word, "count": word.count, "font_size": word.font_size}


if __name__ == "__main__":
    main()
