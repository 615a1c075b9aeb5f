"""
Named pattern library and generic match utilities.

Examples:
    >>> find_all("SELECT name FROM users", get_pattern("sql_identifier"))
    ['SELECT', 'name', 'FROM', 'users']

    >>> count_matches('<A HREF="x"><a href=y>', "href")
    2
"""

import re
from types import MappingProxyType
from typing import List, Union

from skillbench.contexts.text.patterns import (
    EmailPatterns,
    HyperlinkPatterns,
    IdentifierPatterns,
)

NAMED_PATTERNS = MappingProxyType(
    {
        "sql_identifier": IdentifierPatterns.SQL_IDENTIFIER,
        "email": EmailPatterns.EMAIL,
        "href_tag": HyperlinkPatterns.HREF_TAG,
    }
)


def get_pattern(name: str) -> re.Pattern:
    """
    Look up a library pattern by name.

    Raises:
        ValueError: If no pattern has that name
    """
    if name not in NAMED_PATTERNS:
        raise ValueError(f"Pattern '{name}' not found. Available patterns: {list(NAMED_PATTERNS)}")
    return NAMED_PATTERNS[name]


def find_all(text: str, pattern: Union[re.Pattern, str]) -> List[str]:
    """
    Return every non-overlapping match of pattern in text, left to right.

    Args:
        text: Text to search
        pattern: Compiled pattern (or pattern string)

    Returns:
        Matched substrings; empty list if there are no matches
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return [match.group(0) for match in pattern.finditer(text)]


def count_matches(text: str, regex: str) -> int:
    """
    Count matches of a textual regex in text, ignoring letter case.

    Letters written in a fixed case inside regex still match the other case.
    """
    return sum(1 for _ in re.finditer(regex, text, flags=re.IGNORECASE))
