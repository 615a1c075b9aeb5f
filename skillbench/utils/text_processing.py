"""
Text processing utilities for formatting and display.

Small string helpers shared by the text, structures and streams contexts.
"""

import re
from typing import Iterable, List

PHONE_DIGITS = 10


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def format_phone(digits: str) -> str:
    """
    Group a 10-digit phone number as "(ddd) ddd-dddd".

    Args:
        digits: Exactly ten digits, no separators

    Returns:
        Display form of the number

    Raises:
        ValueError: If digits is not exactly ten digits

    Example:
        >>> format_phone("4991112233")
        '(499) 111-2233'
    """
    if len(digits) != PHONE_DIGITS or not digits.isdigit():
        raise ValueError(f"Expected {PHONE_DIGITS} digits, got {digits!r}")
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def extract_digits(text: str) -> str:
    """
    Keep only the decimal digits of text.

    Example:
        >>> extract_digits("(499) 111-2233")
        '4991112233'
    """
    return re.sub(r"\D", "", text)


def mask_characters(text: str, keep: str, placeholder: str = "X") -> str:
    """
    Replace every character not listed in keep with placeholder.

    Args:
        text: Text to mask
        keep: Characters left untouched (separators)
        placeholder: Replacement character

    Example:
        >>> mask_characters("john@hp.com", keep=" .@")
        'XXXX@XX.XXX'
    """
    return "".join(char if char in keep else placeholder for char in text)


def mask_digits(text: str, placeholder: str = "X") -> str:
    """
    Replace every decimal digit of text with placeholder.

    Example:
        >>> mask_digits("(123)456 7890")
        '(XXX)XXX XXXX'
    """
    return re.sub(r"\d", placeholder, text)


def wildcard_to_regex(pattern: str) -> str:
    """
    Translate a '*' wildcard pattern into an unanchored regex.

    Only '*' is special (any run of characters, possibly empty); every other
    character matches literally. Use with re.fullmatch.

    Example:
        >>> wildcard_to_regex("di*bute*")
        'di.*bute.*'
    """
    return ".*".join(re.escape(part) for part in pattern.split("*"))


def split_words(text: str) -> List[str]:
    """Split text on any run of whitespace, dropping empty tokens."""
    return text.split()


def strip_characters(word: str, chars: Iterable[str]) -> str:
    """
    Remove every occurrence of the given characters from word.

    Example:
        >>> strip_characters("dog!", "!.,")
        'dog'
    """
    return word.translate({ord(char): None for char in chars})
