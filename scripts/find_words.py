#!/usr/bin/env python3
"""
List the distinct words of a file that start with a prefix.

Usage:
    python scripts/find_words.py notes.txt fol
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from skillbench.contexts.streams.logger import setup_streams_logger
from skillbench.contexts.streams.word_finder import WordFinder

load_dotenv()

app = typer.Typer(help="Find words by prefix.")


@app.command()
def main(
    file: Path = typer.Argument(..., help="Text file to search"),
    prefix: str = typer.Argument("", help="Word prefix (case-insensitive); empty lists every word"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for the session log"),
):
    """Print matching words, sorted and space-separated, on one line."""
    setup_streams_logger(log_dir, source=str(file))

    finder = WordFinder()
    try:
        finder.set_file_path(file)
    except OSError as e:
        typer.echo(f"ERROR: Cannot read {file}: {e}", err=True)
        raise typer.Exit(1)

    finder.find_words_start_with(prefix)
    finder.write_words(sys.stdout)
    typer.echo()


if __name__ == "__main__":
    app()
