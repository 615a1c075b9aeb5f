"""Shirt catalogue record parsed from one comma-separated line."""

from dataclasses import dataclass

from skillbench.contexts.text.registries import get_registry
from skillbench.exceptions import MissingElementError

SHIRT_FIELDS = ("id", "description", "color", "size")


@dataclass
class Shirt:
    """
    Shirt properties.

    Example:
        >>> Shirt.from_text("S001,Black Polo Shirt,Black,XL").color
        'Black'
    """

    id: str
    description: str
    color: str
    size: str

    @classmethod
    def from_text(cls, line: str) -> "Shirt":
        """
        Parse "id,description,color,size"; the size keeps any further commas.

        Raises:
            MissingElementError: If the line has fewer than four fields
        """
        values = [value.strip() for value in line.split(",", len(SHIRT_FIELDS) - 1)]
        if len(values) < len(SHIRT_FIELDS):
            missing = SHIRT_FIELDS[len(values)]
            raise MissingElementError("Shirt line is missing a field", element=missing, snippet=line)
        return cls(*values)

    def __str__(self) -> str:
        return get_registry().render(
            "shirt", id=self.id, description=self.description, color=self.color, size=self.size
        )
