#!/usr/bin/env python3
"""
Count word frequencies in a text file.

Words are lowercased and stripped of punctuation; tokens wrapped in <...>
are skipped unless --keep-bracketed is given.

Usage:
    python scripts/count_words.py notes.txt
    python scripts/count_words.py notes.txt --top 10 --keep-bracketed
"""

from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from skillbench.contexts.text.logger import _log_info, _log_warning, setup_text_logger
from skillbench.contexts.text.word_counter import WordCounter

load_dotenv()

app = typer.Typer(
    add_completion=False,
)


@app.command()
def main(
    file: Annotated[
        Path,
        typer.Argument(
            help="Text file to analyze",
            exists=True,
            dir_okay=False,
        ),
    ],
    top: Annotated[
        Optional[int],
        typer.Option(
            "--top",
            "-n",
            min=1,
            help="Only show the N most frequent words",
        ),
    ] = None,
    keep_bracketed: Annotated[
        bool,
        typer.Option(
            "--keep-bracketed",
            help="Count tokens wrapped in <...> as words",
        ),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (default: logging.log_dir)",
        ),
    ] = None,
):
    """Print 'word count' lines, most frequent first."""
    setup_text_logger(log_dir, phase="count")

    counter = WordCounter(exclude_bracketed=False if keep_bracketed else None)
    counter.set_text(file.read_text(encoding="utf-8"))

    entries = counter.get_word_counts_sorted()
    if entries:
        _log_info(f"{len(entries)} distinct word(s) in {file.name}")
    else:
        _log_warning(f"No words found in {file.name}")
    if top is not None:
        entries = entries[:top]

    for word, count in entries:
        typer.echo(f"{word} {count}")


if __name__ == "__main__":
    app()
