"""Category domain entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Category:
    """Book category, unique by name.

    Attributes:
        id: Unique category identifier.
        name: Display name (e.g., "Sci-Fi").
    """

    id: UUID
    name: str
