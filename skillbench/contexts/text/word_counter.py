"""
Word-frequency counter for the text context.

Counts are rebuilt lazily: set_text() only stores the text, and the next
get_word_counts() call re-tokenises it.

Example:
    >>> counter = WordCounter()
    >>> counter.set_text("The cat. The dog! <tag> the CAT")
    >>> counter.get_word_counts()
    {'the': 3, 'cat': 2, 'dog': 1}
"""

import sys
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TextIO, Tuple

from skillbench.contexts.text.logger import _log_debug
from skillbench.exceptions import NotConfiguredError
from skillbench.utils.settings import get_settings
from skillbench.utils.text_processing import split_words, strip_characters

Entry = Tuple[Any, Any]


def default_order(entry: Tuple[str, int]) -> Tuple[int, str]:
    """Sort key: descending count, then case-insensitive alphabetical word."""
    word, count = entry
    return -count, word.lower()


def is_bracketed(token: str) -> bool:
    """True for tokens wrapped in angle brackets, such as '<tag>' or '<https://fsf.org/>'."""
    return len(token) >= 2 and token.startswith("<") and token.endswith(">")


class WordCounter:
    """Counts lowercase word occurrences in a text."""

    def __init__(self, strip_chars: Optional[str] = None, exclude_bracketed: Optional[bool] = None):
        """
        Args:
            strip_chars: Punctuation removed from every token (word_counter.strip_chars)
            exclude_bracketed: Skip <...> tokens (word_counter.exclude_bracketed)
        """
        settings = get_settings().word_counter
        self.strip_chars = strip_chars if strip_chars is not None else settings.strip_chars
        self.exclude_bracketed = (
            exclude_bracketed if exclude_bracketed is not None else settings.exclude_bracketed
        )
        self._text: Optional[str] = None
        self._counts: Dict[str, int] = {}
        self._stale = True

    def set_text(self, text: Optional[str]) -> None:
        """Set the text to analyse; None un-configures the counter."""
        self._text = text
        self._stale = True

    @property
    def text(self) -> Optional[str]:
        """Text from the last set_text() call, or None."""
        return self._text

    def _normalize(self, token: str) -> Optional[str]:
        if self.exclude_bracketed and is_bracketed(token):
            return None
        word = strip_characters(token, self.strip_chars).lower()
        return word or None

    def get_word_counts(self) -> Dict[str, int]:
        """
        Map each lowercase word to its number of occurrences.

        Words keep the order of their first appearance.

        Raises:
            NotConfiguredError: If no text is set
        """
        if self._text is None:
            raise NotConfiguredError("No text to analyse; call set_text() first")

        if self._stale:
            counts: Dict[str, int] = {}
            for token in split_words(self._text):
                word = self._normalize(token)
                if word is not None:
                    counts[word] = counts.get(word, 0) + 1
            self._counts = counts
            self._stale = False
            _log_debug(f"Counted {len(counts)} distinct words")

        return dict(self._counts)

    def get_word_counts_sorted(self) -> List[Tuple[str, int]]:
        """
        Word counts ordered by descending count, ties alphabetical (case-insensitive).

        Raises:
            NotConfiguredError: If no text is set
        """
        return self.sort(self.get_word_counts())

    @staticmethod
    def sort(mapping: Mapping, key: Callable[[Entry], Any] = default_order) -> List[Entry]:
        """
        Stable sort of mapping items.

        Works only on its arguments, never on the counter's own state.

        Args:
            mapping: e.g. an unordered word -> count result
            key: Sort key applied to (word, count) items; wrap a comparator
                 with functools.cmp_to_key to use one

        Returns:
            The items of mapping as a sorted list of pairs
        """
        return sorted(mapping.items(), key=key)

    @staticmethod
    def print(entries: Iterable[Entry], stream: TextIO = None) -> None:
        """
        Write one "word count" line per entry, words lowercased.

        Args:
            entries: (word, count) pairs, e.g. from get_word_counts_sorted()
            stream: Text stream to write to (defaults to sys.stdout)
        """
        stream = stream if stream is not None else sys.stdout
        for word, count in entries:
            stream.write(f"{str(word).lower()} {count}\n")
