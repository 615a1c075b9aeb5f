"""
Numeric Context

Responsibilities:
- Represents complex numbers with in-place arithmetic
- Parses and renders the "re+imi" string form

Owns: ComplexNumber value type
Never: Touches files, templates or logging sinks
"""

from skillbench.contexts.numeric.complex_number import ComplexNumber, parse_complex

__all__ = ["ComplexNumber", "parse_complex"]
