#!/usr/bin/env python3
"""
Check that an XML file is well-formed and print its root element name.

Usage:
    python scripts/sniff_xml.py data/emp.xml
"""

import xml.sax
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from skillbench.contexts.markup.logger import setup_markup_logger
from skillbench.contexts.markup.simple_xml import parse_root_element

load_dotenv()

app = typer.Typer(help="Sniff the root element of an XML file.")


@app.command()
def main(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="XML file"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for the session log"),
):
    """Print the root element's qualified name."""
    setup_markup_logger(log_dir)

    try:
        with open(file, "rb") as stream:
            root = parse_root_element(stream)
    except xml.sax.SAXParseException as e:
        typer.echo(f"ERROR: {file} is not well-formed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(root)


if __name__ == "__main__":
    app()
