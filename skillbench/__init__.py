"""
SkillBench - standalone exercise solutions for text, collections and XML work

A collection of small, independent components, each graded against a fixed
interface contract.

Architecture:
- Text Context: Field extractors, regex pattern library, word counting
- Structures Context: Tree nodes and case-insensitive string filters
- Numeric Context: Complex number value type
- Introspection Context: Reflection-based object inspection
- Markup Context: DOM construction, SAX sniffing, XPath queries
- Streams Context: Word lookup over text, files, streams and resources
"""

__version__ = "0.1.0"
