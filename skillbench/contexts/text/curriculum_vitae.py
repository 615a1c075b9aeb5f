"""
Resume text editor for the text context.

Holds the text of a resume and offers field extraction (phones, names),
literal substring edits, and reversible redaction of sensitive pieces.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from skillbench.contexts.text.logger import _log_debug, log_text_edit
from skillbench.contexts.text.patterns import ResumePatterns
from skillbench.exceptions import ArgumentNotFoundError, MissingElementError, NotConfiguredError
from skillbench.utils.settings import get_settings
from skillbench.utils.text_processing import mask_characters, mask_digits

# Stored for phone parts absent from the matched number
NO_VALUE = -1


def _occurrences(text: str, piece: str) -> Iterator[int]:
    """Start offsets of the non-overlapping occurrences str.replace() would substitute."""
    start = text.find(piece)
    while start != -1:
        yield start
        start = text.find(piece, start + len(piece))


@dataclass(frozen=True)
class Phone:
    """
    A phone number exactly as written in the resume.

    area_code and extension are NO_VALUE (-1) when absent.
    """

    number: str
    area_code: int = NO_VALUE
    extension: int = NO_VALUE


class CurriculumVitae:
    """
    Editable resume text.

    Every method except set_text() raises NotConfiguredError until a text
    has been set.
    """

    def __init__(self, placeholder: Optional[str] = None, separators: Optional[str] = None):
        """
        Args:
            placeholder: Character replacing hidden characters (text.hide_placeholder)
            separators: Characters hide() leaves visible (text.hide_separators)
        """
        settings = get_settings().text
        self.placeholder = placeholder if placeholder is not None else settings.hide_placeholder
        self.separators = separators if separators is not None else settings.hide_separators
        self._text: Optional[str] = None
        # (start offsets, hidden piece, original piece), in hiding order
        self._hidden: List[Tuple[List[int], str, str]] = []

    # =========================================================================
    # TEXT ACCESS
    # =========================================================================

    def set_text(self, text: str) -> None:
        """Store resume text without analysing it; forgets earlier hidden pieces."""
        self._text = text
        self._hidden.clear()

    @property
    def text(self) -> str:
        """
        Current text, including edits made by update_* and hide* methods.

        Raises:
            NotConfiguredError: If no text has been set
        """
        if self._text is None:
            raise NotConfiguredError("Resume text has not been set; call set_text() first")
        return self._text

    # =========================================================================
    # FIELD EXTRACTION
    # =========================================================================

    def get_phones(self) -> List[Phone]:
        """
        Phones in the order they appear in the text.

        Returns:
            Possibly empty list of Phone records
        """
        phones = []
        for match in ResumePatterns.PHONE.finditer(self.text):
            area_code = int(match.group(2)) if match.group(1) is not None else NO_VALUE
            extension = int(match.group(7)) if match.group(6) is not None else NO_VALUE
            phones.append(Phone(match.group(0), area_code, extension))
        return phones

    def get_full_name(self) -> str:
        """
        First 2- or 3-word full name in the text, exactly as written.

        Each word has two or more characters, starts with an uppercase Latin
        letter, ends with a lowercase Latin letter or '.', and has only
        lowercase Latin letters in between.

        Raises:
            MissingElementError: If the text contains no such name
        """
        match = ResumePatterns.FULL_NAME.search(self.text)
        if match is None:
            raise MissingElementError("Resume contains no full name", element="full name")
        return match.group(0)

    def get_first_name(self) -> str:
        return self.get_full_name().split(" ")[0]

    def get_middle_name(self) -> Optional[str]:
        """Second word of a three-word full name, None for two-word names."""
        words = self.get_full_name().split(" ")
        return words[1] if len(words) == 3 else None

    def get_last_name(self) -> str:
        return self.get_full_name().split(" ")[-1]

    # =========================================================================
    # EDITING
    # =========================================================================

    def _replace(self, operation: str, old: str, new: str) -> None:
        text = self.text
        shift = len(new) - len(old)
        if shift and self._hidden:
            starts = list(_occurrences(text, old))
            self._hidden = [
                ([pos + shift * sum(1 for s in starts if s < pos) for pos in positions], hidden, original)
                for positions, hidden, original in self._hidden
            ]
        self._text = text.replace(old, new)
        log_text_edit(operation, old, new)

    def update_last_name(self, new_last_name: str) -> None:
        """Replace every occurrence of the current last name with new_last_name."""
        self._replace("update_last_name", self.get_last_name(), new_last_name)

    def update_phone(self, old_phone: Phone, new_phone: Phone) -> None:
        """
        Replace old_phone.number with new_phone.number throughout the text.

        Raises:
            ArgumentNotFoundError: If old_phone.number does not occur in the text
        """
        if old_phone.number not in self.text:
            raise ArgumentNotFoundError(old_phone.number)
        self._replace("update_phone", old_phone.number, new_phone.number)

    # =========================================================================
    # REDACTION
    # =========================================================================

    def _hide(self, piece: str, hidden: str) -> None:
        positions = list(_occurrences(self.text, piece)) if piece else []
        if not positions:
            raise ArgumentNotFoundError(piece)
        self._replace("hide", piece, hidden)
        self._hidden.append((positions, hidden, piece))

    def hide(self, piece: str) -> None:
        """
        Mask piece in the text, keeping separators (' ', '.', '@') visible.

        "John A. Smith" becomes "XXXX X. XXXXX"; "john@hp.com" becomes
        "XXXX@XX.XXX". Undone by unhide_all().

        Raises:
            ArgumentNotFoundError: If piece is empty or does not occur in the text
        """
        self._hide(piece, mask_characters(piece, keep=self.separators, placeholder=self.placeholder))

    def hide_phone(self, phone: str) -> None:
        """
        Mask every digit of phone in the text: "(123)456 7890" -> "(XXX)XXX XXXX".

        Raises:
            ArgumentNotFoundError: If phone does not occur in the text
        """
        self._hide(phone, mask_digits(phone, placeholder=self.placeholder))

    def unhide_all(self) -> int:
        """
        Restore every piece hidden since the last set_text() or unhide_all().

        Returns:
            Number of pieces restored (0 when nothing is hidden)
        """
        text = self.text
        restored = len(self._hidden)
        for positions, hidden, original in reversed(self._hidden):
            for start in reversed(positions):
                end = start + len(hidden)
                if text[start:end] == hidden:
                    text = text[:start] + original + text[end:]
        self._text = text
        self._hidden.clear()
        _log_debug(f"unhide_all restored {restored} piece(s)")
        return restored
