"""Person full-name parsing."""

from typing import Optional

from skillbench.contexts.text.patterns import PersonPatterns
from skillbench.exceptions import FormatMismatchError


class Person:
    """
    Last, first and middle names of a person.

    The full name is "Last[ First[ Middle]]": only the last name may be
    given, or the last name followed by first and middle names. Each word
    starts with an uppercase Latin letter, contains lowercase Latin letters
    and ends with a lowercase letter or '.'.
    """

    def __init__(self, full_name: str):
        self.last_name: Optional[str] = None
        self.first_name: Optional[str] = None
        self.middle_name: Optional[str] = None
        self.set_full_name(full_name)

    def set_full_name(self, full_name: str) -> None:
        """
        Split full_name into its parts.

        Raises:
            FormatMismatchError: If full_name is not a valid name; the
                previous names are kept
        """
        match = PersonPatterns.NAME.fullmatch(full_name)
        if match is None:
            raise FormatMismatchError("Not a valid full name", element="full name", snippet=full_name)
        self.last_name, self.first_name, self.middle_name = match.groups()

    @property
    def full_name(self) -> str:
        """Present name parts joined by single spaces."""
        parts = (self.last_name, self.first_name, self.middle_name)
        return " ".join(part for part in parts if part is not None)

    def __repr__(self) -> str:
        return f"Person({self.full_name!r})"
