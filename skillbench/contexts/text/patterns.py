"""
Reusable regex patterns for the text context.

Pattern classes follow one convention:
- Dataclasses with frozen=True for immutability
- Class-level compiled constants, built once at import
- Helper modules (pattern_library, contact_card, ...) use these patterns
"""

import re
from dataclasses import dataclass

# One name word: uppercase Latin letter, lowercase letters, ends in lowercase or '.'
_NAME_WORD = r"[A-Z][a-z]*[a-z.]"

# Top-level domains accepted by the e-mail pattern
EMAIL_TOP_LEVEL_DOMAINS = ("ru", "com", "net", "org")


# =============================================================================
# PATTERN LIBRARY
# =============================================================================


@dataclass(frozen=True)
class IdentifierPatterns:
    """
    Standard SQL identifiers (table names, column names, ...).

    Starts with a Latin letter, continues with letters, digits or '_',
    1 to 30 characters in total.
    """

    SQL_IDENTIFIER: re.Pattern = re.compile(r"\b[a-zA-Z]\w{0,29}", re.ASCII)


@dataclass(frozen=True)
class EmailPatterns:
    """
    E-mail addresses of the form account@domain.tld.

    - account: up to 22 letters, digits, '_', '.', '-'; never starts or ends with '_', '.', '-'
    - domain: one or more labels of 2+ chars, alphanumeric at both ends, '-' inside
    - tld: one of EMAIL_TOP_LEVEL_DOMAINS
    """

    EMAIL: re.Pattern = re.compile(
        r"\b(?:[\dA-Za-z][\dA-Za-z._-]{0,20}[\dA-Za-z]|[\dA-Za-z])"
        r"@(?:[\dA-Za-z][\dA-Za-z-]*[\dA-Za-z]\.)+"
        rf"(?:{'|'.join(EMAIL_TOP_LEVEL_DOMAINS)})\b"
    )


@dataclass(frozen=True)
class HyperlinkPatterns:
    """
    HTML hyperlink tags: an open or self-closed A tag with a mandatory HREF.

    Tag and attribute names are case-insensitive. Whitespace (space, tab,
    CR, LF, FF) may surround '=' and the tag brackets. A double-quoted value
    may contain whitespace; an unquoted one may not.
    """

    HREF_TAG: re.Pattern = re.compile(
        r"<\s*(?i:a)\s+(?i:href)\s*=\s*(?:\"([^\"]*)\"|([^\s>]+))\s*(?:/?>)?"
    )


# =============================================================================
# RESUME PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ResumePatterns:
    """
    Patterns used by CurriculumVitae.

    PHONE groups:
        1: area code block including brackets/separators (optional)
        2: area code digits
        3-5: local number parts
        6: extension block (optional)
        7: extension digits
    """

    PHONE: re.Pattern = re.compile(
        r"(\(?([1-9][0-9]{2})\)?[-. ]*)?([1-9][0-9]{2})[-. ]*(\d{2})[-. ]*(\d{2})"
        r"(\s*ext\.?\s*([0-9]+))?"
    )

    # First 2- or 3-word full name anywhere in the text
    FULL_NAME: re.Pattern = re.compile(rf"{_NAME_WORD} {_NAME_WORD}(?: {_NAME_WORD})?")


# =============================================================================
# PERSON / PHONE NUMBER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class PersonPatterns:
    """Whole-string "Last[ First[ Middle]]" name."""

    NAME: re.Pattern = re.compile(rf"({_NAME_WORD})(?: ({_NAME_WORD}))?(?: ({_NAME_WORD}))?")


@dataclass(frozen=True)
class PhoneNumberPatterns:
    """
    International phone numbers.

    INTERNATIONAL: +<country code, 1-4 digits><3><3><4>
    RUSSIAN_TRUNK: 8<3><3><4> (country code 7 implied)
    """

    INTERNATIONAL: re.Pattern = re.compile(r"\+(\d{1,4})(\d{3})(\d{3})(\d{4})")
    RUSSIAN_TRUNK: re.Pattern = re.compile(r"8(\d{3})(\d{3})(\d{4})")


# =============================================================================
# VCARD PATTERNS
# =============================================================================


@dataclass(frozen=True)
class VCardPatterns:
    """
    Line patterns for the vCard-like contact card.

    *_FIELD patterns only detect that a line carries the field (used to tell
    a malformed field apart from a missing one); the other patterns validate
    the whole line.
    """

    BEGIN: re.Pattern = re.compile(r"BEGIN:VCARD")
    END: re.Pattern = re.compile(r"END:VCARD")

    FULL_NAME_FIELD: re.Pattern = re.compile(r"FN\b")
    FULL_NAME: re.Pattern = re.compile(r"FN:(.+)")

    ORGANIZATION_FIELD: re.Pattern = re.compile(r"ORG\b")
    ORGANIZATION: re.Pattern = re.compile(r"ORG:(.*)")

    GENDER_FIELD: re.Pattern = re.compile(r"GENDER\b")
    GENDER: re.Pattern = re.compile(r"GENDER:([FM])")

    BIRTHDAY_FIELD: re.Pattern = re.compile(r"BDAY\b")
    BIRTHDAY: re.Pattern = re.compile(r"BDAY:(\d{2}-\d{2}-\d{4})")

    PHONE_FIELD: re.Pattern = re.compile(r"TEL\b")
    PHONE: re.Pattern = re.compile(r"TEL;TYPE=([^:]+):(\d{10})")


BIRTHDAY_FORMAT = "%d-%m-%Y"
