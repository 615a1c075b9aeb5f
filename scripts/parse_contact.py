#!/usr/bin/env python3
"""
Parse a vCard-style contact file and display its fields.

Usage:
    python scripts/parse_contact.py contact.vcf
    python scripts/parse_contact.py contact.vcf --vcard
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from skillbench.contexts.text.contact_card import ContactCard
from skillbench.contexts.text.logger import _log_error, _log_success, setup_text_logger
from skillbench.exceptions import FormatMismatchError, MissingElementError

load_dotenv()

app = typer.Typer(help="Parse a contact card.")


@app.command()
def main(
    file: Path = typer.Argument(..., help="Contact card file (BEGIN:VCARD ... END:VCARD)"),
    vcard: bool = typer.Option(False, "--vcard", help="Print the card re-rendered as vCard text"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for the session log"),
):
    """Validate a contact card and display the extracted fields."""
    setup_text_logger(log_dir, phase="parse")

    try:
        card = ContactCard.from_file(file)
    except (MissingElementError, FormatMismatchError) as e:
        _log_error(f"{file.name}: {e.message}")
        typer.echo(f"ERROR: Invalid contact card {file}:\n{e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"ERROR: Cannot read {file}: {e}", err=True)
        raise typer.Exit(1)

    _log_success(f"Parsed {file.name}")

    if vcard:
        typer.echo(card.to_vcard())
        return

    typer.echo("\n=== Contact ===")
    typer.echo(f"  Name: {card.full_name}")
    typer.echo(f"  Organization: {card.organization}")
    typer.echo(f"  Gender: {card.gender or '(none)'}")
    if card.birthday is not None:
        age = card.get_age()
        typer.echo(f"  Birthday: {card.birthday.isoformat()} (age {age.years})")

    typer.echo(f"\n=== Phones ({len(card.phones)}) ===")
    for label in card.phones:
        typer.echo(f"  {label}: {card.get_phone(label)}")


if __name__ == "__main__":
    app()
