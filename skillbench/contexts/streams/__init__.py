"""
Streams Context

Responsibilities:
- Reads text from strings, binary streams, files and package resources
- Finds words by prefix and writes the results to streams

Owns: WordFinder
Never: Keeps files open after a setter returns
"""

from skillbench.contexts.streams.word_finder import WordFinder

__all__ = ["WordFinder"]
