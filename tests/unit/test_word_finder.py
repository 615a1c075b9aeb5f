"""Unit tests for WordFinder."""

import io

import pytest

from skillbench.contexts.streams.word_finder import WordFinder
from skillbench.exceptions import NotConfiguredError


class BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device not ready")


@pytest.fixture
def finder():
    finder = WordFinder()
    finder.set_text("Follow the FOLDER, follow folk tales. The end")
    return finder


@pytest.mark.unit
def test_find_words_sorted_distinct_lowercase(finder):
    """Test case-insensitive prefix search."""
    assert list(finder.find_words_start_with("FOL")) == ["folder,", "folk", "follow"]


@pytest.mark.unit
@pytest.mark.parametrize("begin", [None, ""])
def test_empty_prefix_returns_all_words(finder, begin):
    """Test that no prefix selects every distinct word."""
    assert list(finder.find_words_start_with(begin)) == [
        "end",
        "folder,",
        "folk",
        "follow",
        "tales.",
        "the",
    ]


@pytest.mark.unit
def test_find_requires_text():
    """Test NotConfiguredError before any text is set."""
    with pytest.raises(NotConfiguredError):
        WordFinder().find_words_start_with("a")


@pytest.mark.unit
def test_set_text_none():
    """Test that None is not a text."""
    with pytest.raises(ValueError):
        WordFinder().set_text(None)


@pytest.mark.unit
def test_write_words_binary_and_text(finder):
    """Test writing the last result to binary and text streams."""
    finder.find_words_start_with("the")

    binary = io.BytesIO()
    finder.write_words(binary)
    assert binary.getvalue() == b"the"

    finder.find_words_start_with("f")
    text = io.StringIO()
    finder.write_words(text)
    assert text.getvalue() == "folder, folk follow"


@pytest.mark.unit
def test_write_words_empty_result(finder):
    """Test that an empty result writes nothing."""
    finder.find_words_start_with("zzz")
    stream = io.BytesIO()
    finder.write_words(stream)
    assert stream.getvalue() == b""


@pytest.mark.unit
def test_write_words_requires_search(finder):
    """Test NotConfiguredError before a search and after a new text."""
    with pytest.raises(NotConfiguredError):
        finder.write_words(io.BytesIO())

    finder.find_words_start_with("f")
    finder.set_text("new text")
    with pytest.raises(NotConfiguredError):
        finder.write_words(io.BytesIO())


@pytest.mark.unit
def test_set_input_stream_decodes_utf8():
    """Test reading UTF-8 bytes and text streams."""
    finder = WordFinder()

    finder.set_input_stream(io.BytesIO("Привет мир".encode("utf-8")))
    assert finder.text == "Привет мир"

    finder.set_input_stream(io.StringIO("plain text"))
    assert finder.text == "plain text"


@pytest.mark.unit
def test_set_input_stream_failure_clears_state(finder):
    """Test that a read error clears the text and propagates."""
    with pytest.raises(OSError):
        finder.set_input_stream(BrokenStream())
    assert finder.text is None
    with pytest.raises(NotConfiguredError):
        finder.find_words_start_with("f")


@pytest.mark.unit
def test_set_input_stream_none():
    """Test that None is not a stream."""
    with pytest.raises(ValueError):
        WordFinder().set_input_stream(None)


@pytest.mark.unit
def test_set_file_path(tmp_path):
    """Test reading a file."""
    path = tmp_path / "words.txt"
    path.write_text("Alpha beta\nalphabet", encoding="utf-8")

    finder = WordFinder()
    finder.set_file_path(path)

    assert list(finder.find_words_start_with("alpha")) == ["alpha", "alphabet"]


@pytest.mark.unit
def test_set_file_path_missing(tmp_path):
    """Test error handling for a missing file."""
    with pytest.raises(FileNotFoundError):
        WordFinder().set_file_path(tmp_path / "absent.txt")


@pytest.mark.unit
def test_set_resource():
    """Test reading the packaged sample text."""
    finder = WordFinder()
    finder.set_resource("resources/text.txt")

    assert list(finder.find_words_start_with("fol")) == [
        "folder",
        "folding",
        "folio",
        "folks",
        "follow",
        "follow-up",
    ]


@pytest.mark.unit
def test_set_resource_missing():
    """Test error handling for an unknown resource."""
    with pytest.raises(FileNotFoundError):
        WordFinder().set_resource("resources/absent.txt")
