"""
Prefix search over the words of a text read from a string, stream, file or
packaged resource.
"""

import io
from importlib.resources import files
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, TextIO, Union

from skillbench.contexts.streams.logger import _log_debug, _log_error
from skillbench.exceptions import NotConfiguredError

ENCODING = "utf-8"


class WordFinder:
    """
    Finds the distinct words of a text that start with a given prefix.

    Words are maximal runs of non-whitespace characters, compared lowercased.
    Any setter replaces the text and discards the previous search result.
    """

    def __init__(self):
        self._text: Optional[str] = None
        self._found: Optional[List[str]] = None

    def _reset(self, text: Optional[str]) -> None:
        self._text = text
        self._found = None

    # =========================================================================
    # TEXT SOURCES
    # =========================================================================

    @property
    def text(self) -> Optional[str]:
        return self._text

    def set_text(self, text: str) -> None:
        """
        Raises:
            ValueError: If text is None
        """
        if text is None:
            raise ValueError("text must not be None")
        self._reset(text)

    def set_input_stream(self, stream: Union[BinaryIO, TextIO]) -> None:
        """
        Read the whole stream as the new text; bytes are decoded as UTF-8.

        If reading fails the finder is left without text and the error
        propagates.

        Raises:
            ValueError: If stream is None
        """
        if stream is None:
            raise ValueError("stream must not be None")
        try:
            data = stream.read()
            text = data.decode(ENCODING) if isinstance(data, bytes) else data
        except (OSError, UnicodeDecodeError) as e:
            self._reset(None)
            _log_error(f"Failed to read input stream: {e}")
            raise
        self._reset(text)
        _log_debug(f"Read {len(text)} characters")

    def set_file_path(self, path: Union[str, Path]) -> None:
        """
        Raises:
            ValueError: If path is None
            OSError: If the file cannot be opened or read
        """
        if path is None:
            raise ValueError("path must not be None")
        with open(path, "rb") as stream:
            self.set_input_stream(stream)

    def set_resource(self, name: str, package: str = "skillbench") -> None:
        """
        Read a data file shipped inside package (e.g. "resources/text.txt").

        Raises:
            ValueError: If name is None
            FileNotFoundError: If the package has no such resource
        """
        if name is None:
            raise ValueError("resource name must not be None")
        with files(package).joinpath(name).open("rb") as stream:
            self.set_input_stream(stream)

    # =========================================================================
    # SEARCH
    # =========================================================================

    def find_words_start_with(self, begin: Optional[str]) -> Iterator[str]:
        """
        Distinct lowercase words starting with begin (case-insensitive), sorted.

        None or "" selects every word.

        Raises:
            NotConfiguredError: If no text has been set
        """
        if self._text is None:
            raise NotConfiguredError("No text to search; set a text, stream, file or resource first")
        prefix = (begin or "").lower()
        words = {word.lower() for word in self._text.split()}
        self._found = sorted(word for word in words if word.startswith(prefix))
        _log_debug(f"{len(self._found)} of {len(words)} word(s) start with {prefix!r}")
        return iter(self._found)

    def write_words(self, stream: Union[BinaryIO, TextIO]) -> None:
        """
        Write the last search result as one line of space-separated words.

        Text streams receive str, any other stream UTF-8 bytes. An empty
        result writes nothing.

        Raises:
            NotConfiguredError: If no search ran since the text was set
        """
        if self._found is None:
            raise NotConfiguredError("No search result; call find_words_start_with() first")
        line = " ".join(self._found)
        if isinstance(stream, io.TextIOBase):
            stream.write(line)
        else:
            stream.write(line.encode(ENCODING))
