"""
International phone-number formatting.

Accepted input shapes:
- +<country code, 1-4 digits><10 digits>, e.g. "+79175655655" or "+104289652211"
- 8<10 digits> for Russian numbers, e.g. "89175655655"

Output shape: +<country code><3 digits>-<3 digits>-<4 digits>
"""

from typing import Optional

from skillbench.contexts.text.patterns import PhoneNumberPatterns
from skillbench.exceptions import FormatMismatchError, NotConfiguredError

RUSSIAN_COUNTRY_CODE = "7"


class PhoneNumber:
    """Raw phone string, analysed only when get_phone() is called."""

    def __init__(self, phone: Optional[str] = None):
        self.phone = phone

    def set_phone(self, phone: Optional[str]) -> None:
        """Store the phone without analysing it."""
        self.phone = phone

    def get_phone(self) -> str:
        """
        Phone in +<cc><ddd>-<ddd>-<dddd> form.

        Example:
            >>> PhoneNumber("+79175655655").get_phone()
            '+7917-565-5655'

        Raises:
            NotConfiguredError: If no phone was set
            FormatMismatchError: If the phone has neither accepted shape
        """
        if self.phone is None:
            raise NotConfiguredError("Phone has not been set")

        match = PhoneNumberPatterns.INTERNATIONAL.fullmatch(self.phone)
        if match:
            country, area, exchange, line = match.groups()
            return f"+{country}{area}-{exchange}-{line}"

        match = PhoneNumberPatterns.RUSSIAN_TRUNK.fullmatch(self.phone)
        if match:
            area, exchange, line = match.groups()
            return f"+{RUSSIAN_COUNTRY_CODE}{area}-{exchange}-{line}"

        raise FormatMismatchError("Unsupported phone format", element="phone", snippet=self.phone)
