"""
Error taxonomy shared by every context.

Four kinds of failure, all raised synchronously at the offending call:
- NotConfiguredError: an operation was invoked before required setup
- MissingElementError: a required element is absent from the input
- FormatMismatchError: an element is present but has the wrong syntax
- ArgumentNotFoundError: a caller-supplied value is absent from current state
"""

from typing import Optional

from skillbench.utils.text_processing import truncate_display

SNIPPET_MAX_LEN = 80


def _build_message(message: str, element: Optional[str], snippet: Optional[str]) -> str:
    parts = [message]
    if element:
        parts.append(f"Element: {element}")
    if snippet is not None:
        parts.append(f"Actual text: {truncate_display(snippet, SNIPPET_MAX_LEN)!r}")
    return "\n".join(parts)


class NotConfiguredError(RuntimeError):
    """Raised when an operation runs before its input has been configured."""

    pass


class MissingElementError(LookupError):
    """
    Raised when a required structural element is absent from the input.

    Attributes:
        message: Error description
        element: Name of the missing element (e.g., 'ORG')
        snippet: The text found where the element was expected, if any
    """

    def __init__(self, message: str, element: Optional[str] = None, snippet: Optional[str] = None):
        self.message = message
        self.element = element
        self.snippet = snippet
        super().__init__(_build_message(message, element, snippet))


class FormatMismatchError(ValueError):
    """
    Raised when an element is present but does not match its required syntax.

    Attributes:
        message: Error description
        element: Name of the malformed element (e.g., 'BDAY')
        snippet: The offending text
    """

    def __init__(self, message: str, element: Optional[str] = None, snippet: Optional[str] = None):
        self.message = message
        self.element = element
        self.snippet = snippet
        super().__init__(_build_message(message, element, snippet))


class ArgumentNotFoundError(ValueError):
    """
    Raised when a caller-supplied value does not occur in the current state.

    Attributes:
        value: The value that was looked up
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Value not found in current text: {truncate_display(value, SNIPPET_MAX_LEN)!r}"
        )
