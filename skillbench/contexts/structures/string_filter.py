"""
Case-insensitive string set with search filters.

Strings are stored lowercased; None may be stored but never matches a filter.
An empty or None filter condition selects every stored string.
"""

import re
from typing import Callable, Iterator, Optional, Set

from skillbench.utils.text_processing import wildcard_to_regex

DIGIT_PLACEHOLDER = "#"


def matches_number_format(value: str, number_format: str) -> bool:
    """
    Check value against a number format.

    '#' stands for exactly one digit 0-9; every other character must match
    literally, and value must have exactly as many characters as the format.

    Example:
        >>> matches_number_format("(765)884-3311", "(###)###-####")
        True
        >>> matches_number_format("-1.5", "-#.##")
        False
    """
    if len(value) != len(number_format):
        return False
    for char, expected in zip(value, number_format):
        if expected == DIGIT_PLACEHOLDER:
            if char not in "0123456789":
                return False
        elif char != expected:
            return False
    return True


class StringFilter:
    """Set of lowercase strings queried by substring, prefix, number format or wildcard."""

    def __init__(self):
        self._strings: Set[Optional[str]] = set()

    @staticmethod
    def _normalize(value: Optional[str]) -> Optional[str]:
        return value.lower() if value is not None else None

    def add(self, value: Optional[str]) -> None:
        """Add value lowercased; adding an existing string does nothing."""
        self._strings.add(self._normalize(value))

    def remove(self, value: Optional[str]) -> bool:
        """
        Remove value (compared lowercased).

        Returns:
            True if it was present, False otherwise
        """
        value = self._normalize(value)
        if value not in self._strings:
            return False
        self._strings.remove(value)
        return True

    def remove_all(self) -> None:
        self._strings.clear()

    @property
    def collection(self) -> Set[Optional[str]]:
        """Snapshot of the stored strings (may include None)."""
        return set(self._strings)

    def _filter(self, condition: Optional[str], predicate: Callable[[str, str], bool]) -> Iterator[str]:
        strings = [value for value in self._strings if value is not None]
        if not condition:
            return iter(strings)
        condition = condition.lower()
        return iter([value for value in strings if predicate(value, condition)])

    def get_strings_containing(self, chars: Optional[str]) -> Iterator[str]:
        """Strings that contain chars."""
        return self._filter(chars, lambda value, chars: chars in value)

    def get_strings_starting_with(self, begin: Optional[str]) -> Iterator[str]:
        """Strings that start with begin, ignoring case."""
        return self._filter(begin, lambda value, begin: value.startswith(begin))

    def get_strings_by_number_format(self, number_format: Optional[str]) -> Iterator[str]:
        """Strings that fit number_format, e.g. "(###)###-####" or "-#.##"."""
        return self._filter(number_format, matches_number_format)

    def get_strings_by_pattern(self, pattern: Optional[str]) -> Iterator[str]:
        """
        Strings matching a '*' wildcard pattern.

        '*' matches any run of characters (possibly empty), so "distr*",
        "*str*" and "di*bute*" all match "distribute".
        """
        return self._filter(
            pattern, lambda value, pattern: re.fullmatch(wildcard_to_regex(pattern), value, re.DOTALL) is not None
        )
