"""
vCard-like contact card parser for the text context.

A card lists its fields one per line (CRLF or LF separated), in this order:

    BEGIN:VCARD
    FN:Forrest Gump                    (required)
    ORG:Bubba Gump Shrimp Co.          (required)
    GENDER:M                           (optional, F or M)
    BDAY:06-06-1944                    (optional, DD-MM-YYYY)
    TEL;TYPE=WORK,VOICE:4951234567     (zero or more, exactly 10 digits)
    END:VCARD

Missing required lines raise MissingElementError; present but malformed
lines raise FormatMismatchError.
"""

import calendar
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Optional

from skillbench.contexts.text.logger import log_parse_result
from skillbench.contexts.text.patterns import BIRTHDAY_FORMAT, VCardPatterns
from skillbench.contexts.text.registries import get_registry
from skillbench.exceptions import FormatMismatchError, MissingElementError
from skillbench.utils.text_processing import format_phone


class Age(NamedTuple):
    """Elapsed calendar time between a birthday and a reference date."""

    years: int
    months: int
    days: int


def _add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the month length."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def period_between(start: date, end: date) -> Age:
    """
    Whole years, months and days from start to end.

    Example:
        >>> period_between(date(1944, 6, 6), date(2018, 6, 5))
        Age(years=73, months=11, days=30)
    """
    months = (end.year - start.year) * 12 + end.month - start.month
    if end.day < start.day:
        months -= 1
    days = (end - _add_months(start, months)).days
    return Age(months // 12, months % 12, days)


class _LineReader:
    """Sequential reader over card lines that reports exhausted input as missing."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)

    def next_line(self, expected: str) -> str:
        try:
            return next(self._lines).strip()
        except StopIteration:
            raise MissingElementError("Card ended before a required line", element=expected)


def _match_field(
    line: str, field_pattern: re.Pattern, value_pattern: re.Pattern, element: str
) -> Optional[re.Match]:
    """
    Match a field line.

    Returns None when the line is not this field at all; raises
    FormatMismatchError when it is the field but the value is malformed.
    """
    if not field_pattern.match(line):
        return None
    match = value_pattern.fullmatch(line)
    if match is None:
        raise FormatMismatchError("Malformed field", element=element, snippet=line)
    return match


def _require_field(
    line: str, field_pattern: re.Pattern, value_pattern: re.Pattern, element: str
) -> re.Match:
    match = _match_field(line, field_pattern, value_pattern, element)
    if match is None:
        raise MissingElementError("Required field is missing", element=element, snippet=line)
    return match


@dataclass
class ContactCard:
    """
    Parsed contact card.

    Factory methods:
        from_text(data) - Parse card text (CRLF or LF line endings)
        from_lines(lines) - Parse an iterable of lines
        from_file(path) - Load card text from a file
    """

    full_name: str
    organization: str
    gender: Optional[str] = None
    birthday: Optional[date] = None
    phones: dict[str, str] = field(default_factory=dict)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, data: str) -> "ContactCard":
        """Parse a card from its text form."""
        return cls.from_lines(data.splitlines())

    @classmethod
    def from_file(cls, file_path: Path) -> "ContactCard":
        """Parse a card stored in a text file."""
        return cls.from_text(Path(file_path).read_text(encoding="utf-8"))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ContactCard":
        """
        Parse a card from a sequence of lines.

        Raises:
            MissingElementError: BEGIN:VCARD, FN, ORG or END:VCARD is absent
            FormatMismatchError: A field is present but malformed (no colon,
                bad gender, bad or impossible date, wrong phone digit count)
        """
        patterns = VCardPatterns()
        reader = _LineReader(lines)

        line = reader.next_line("BEGIN:VCARD")
        if not patterns.BEGIN.fullmatch(line):
            raise MissingElementError("Card must start with BEGIN:VCARD", "BEGIN:VCARD", line)

        line = reader.next_line("FN")
        full_name = _require_field(line, patterns.FULL_NAME_FIELD, patterns.FULL_NAME, "FN")
        full_name = full_name.group(1).strip()

        line = reader.next_line("ORG")
        organization = _require_field(
            line, patterns.ORGANIZATION_FIELD, patterns.ORGANIZATION, "ORG"
        )
        organization = organization.group(1).strip()

        line = reader.next_line("END:VCARD")
        gender = None
        match = _match_field(line, patterns.GENDER_FIELD, patterns.GENDER, "GENDER")
        if match:
            gender = match.group(1)
            line = reader.next_line("END:VCARD")

        birthday = None
        match = _match_field(line, patterns.BIRTHDAY_FIELD, patterns.BIRTHDAY, "BDAY")
        if match:
            try:
                birthday = datetime.strptime(match.group(1), BIRTHDAY_FORMAT).date()
            except ValueError:
                raise FormatMismatchError("Not a calendar date", element="BDAY", snippet=line)
            line = reader.next_line("END:VCARD")

        phones = {}
        match = _match_field(line, patterns.PHONE_FIELD, patterns.PHONE, "TEL")
        while match:
            phones[match.group(1)] = match.group(2)
            line = reader.next_line("END:VCARD")
            match = _match_field(line, patterns.PHONE_FIELD, patterns.PHONE, "TEL")

        if not patterns.END.fullmatch(line):
            raise MissingElementError("Card must end with END:VCARD", "END:VCARD", line)

        card = cls(
            full_name=full_name,
            organization=organization,
            gender=gender,
            birthday=birthday,
            phones=phones,
        )
        log_parse_result(
            "contact card",
            {"FN": full_name, "ORG": organization, "BDAY": birthday, "TEL": len(phones)},
        )
        return card

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def is_woman(self) -> bool:
        """True only for GENDER:F; absent gender counts as not a woman."""
        return self.gender == "F"

    def get_birthday(self) -> date:
        """
        Raises:
            MissingElementError: If the card has no BDAY field
        """
        if self.birthday is None:
            raise MissingElementError("Card has no birthday", element="BDAY")
        return self.birthday

    def get_age(self, today: Optional[date] = None) -> Age:
        """
        Age as years, months and days.

        Args:
            today: Reference date (defaults to the current date)

        Raises:
            MissingElementError: If the card has no BDAY field
        """
        return period_between(self.get_birthday(), today or date.today())

    def get_age_years(self, today: Optional[date] = None) -> int:
        """Age in whole years, e.g. 74."""
        return self.get_age(today).years

    def get_phone(self, phone_type: str) -> str:
        """
        Phone number of the given type in "(123) 456-7890" form.

        Args:
            phone_type: Label between "TEL;TYPE=" and ":" (e.g., "WORK,VOICE")

        Raises:
            MissingElementError: If no phone of that type exists
        """
        if phone_type not in self.phones:
            raise MissingElementError("No phone of this type", element=f"TEL;TYPE={phone_type}")
        return format_phone(self.phones[phone_type])

    def to_vcard(self) -> str:
        """
        Render the card back to CRLF-separated vCard text.

        The result parses back to an equal card via from_text().
        """
        rendered = get_registry().render(
            "vcard",
            full_name=self.full_name,
            organization=self.organization,
            gender=self.gender,
            birthday=self.birthday,
            birthday_format=BIRTHDAY_FORMAT,
            phones=self.phones,
        )
        return "\r\n".join(rendered.splitlines())
