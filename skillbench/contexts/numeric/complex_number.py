"""
Mutable complex number with a parseable "re+imi" string form.

str(x) always parses back to a number equal to x, so
ComplexNumber.from_string(str(x)) == x for every finite x.
"""

import re
from functools import cmp_to_key
from typing import List, Tuple

from skillbench.exceptions import FormatMismatchError

# =============================================================================
# STRING FORM
# =============================================================================

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

# "-5+2i", "1+i", "+4-i": both parts, imaginary coefficient may be a bare sign
_FULL_FORM = re.compile(rf"(?P<re>[+-]?{_NUMBER})(?P<im>[+-](?:{_NUMBER})?)i")

# "i", "-3i", "2.5e-3i": imaginary part only
_IMAGINARY_FORM = re.compile(rf"(?P<im>[+-]?(?:{_NUMBER})?)i")

# "3", "-0.5", "1e+16": real part only
_REAL_FORM = re.compile(rf"[+-]?{_NUMBER}")


def _coefficient(text: str) -> float:
    """Imaginary coefficient, where "", "+" and "-" stand for 1 and -1."""
    if text in ("", "+"):
        return 1.0
    if text == "-":
        return -1.0
    return float(text)


def parse_complex(value: str) -> Tuple[float, float]:
    """
    Parse "re+imi" into (re, im).

    Raises:
        FormatMismatchError: For anything else, e.g. "1+2*i", "2+2", "j"
    """
    match = _FULL_FORM.fullmatch(value)
    if match:
        return float(match.group("re")), _coefficient(match.group("im"))
    match = _IMAGINARY_FORM.fullmatch(value)
    if match:
        return 0.0, _coefficient(match.group("im"))
    if _REAL_FORM.fullmatch(value):
        return float(value), 0.0
    raise FormatMismatchError("Not a complex number in re+imi form", element="complex", snippet=value)


class ComplexNumber:
    """
    Complex number re + im*i.

    negate(), add() and multiply() change the number in place and return it,
    so calls chain: x.copy().add(y).multiply(z).
    """

    def __init__(self, re: float = 0.0, im: float = 0.0):
        self.set(re, im)

    @classmethod
    def from_string(cls, value: str) -> "ComplexNumber":
        number = cls()
        number.set_from_string(value)
        return number

    @property
    def re(self) -> float:
        return self._re

    @property
    def im(self) -> float:
        return self._im

    def is_real(self) -> bool:
        return self._im == 0.0

    def set(self, re: float, im: float) -> None:
        self._re = float(re)
        self._im = float(im)

    def set_from_string(self, value: str) -> None:
        """
        Set both parts from "re+imi"; the number is unchanged if parsing fails.

        Raises:
            FormatMismatchError: If value is not in re+imi form
        """
        self.set(*parse_complex(value))

    def copy(self) -> "ComplexNumber":
        return ComplexNumber(self._re, self._im)

    __copy__ = copy

    def __str__(self) -> str:
        if self._im == 0.0:
            return repr(self._re)
        if self._re == 0.0:
            return f"{self._im!r}i"
        sign = "+" if self._im > 0 else ""
        return f"{self._re!r}{sign}{self._im!r}i"

    def __repr__(self) -> str:
        return f"ComplexNumber({self._re!r}, {self._im!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self._re == other._re and self._im == other._im

    # =========================================================================
    # ORDERING
    # =========================================================================

    def squared_modulus(self) -> float:
        return self._re * self._re + self._im * self._im

    def compare_to(self, other: "ComplexNumber") -> int:
        """
        Compare by modulus: -1, 0 or 1 as |self| is less than, equal to or
        greater than |other|.
        """
        difference = self.squared_modulus() - other.squared_modulus()
        if difference > 0:
            return 1
        if difference < 0:
            return -1
        return 0

    @staticmethod
    def sort(numbers: List["ComplexNumber"]) -> None:
        """Sort numbers in place by ascending modulus; equal moduli keep their order."""
        numbers.sort(key=cmp_to_key(ComplexNumber.compare_to))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def negate(self) -> "ComplexNumber":
        self.set(-self._re, -self._im)
        return self

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        self.set(self._re + other.re, self._im + other.im)
        return self

    def multiply(self, other: "ComplexNumber") -> "ComplexNumber":
        """
        Multiply in place: (a+bi)(c+di) = (ac-bd) + (bc+ad)i.

        Works for x.multiply(x): both operands are read before assignment.
        """
        a, b = self._re, self._im
        c, d = other.re, other.im
        self.set(a * c - b * d, b * c + a * d)
        return self
