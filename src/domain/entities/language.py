"""Language reference entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Language:
    """Language reference record.

    Attributes:
        id: Unique language identifier.
        name: English language name (e.g., "French").
        code: ISO 639-1 code (e.g., "fr").
        sort_rank: Display ordering; lower sorts first.
    """

    id: UUID
    name: str
    code: str
    sort_rank: int = 1

    def __post_init__(self) -> None:
        """Validate language fields.

        Raises:
            ValueError: If name is empty or code is not 2 letters.
        """
        if not self.name:
            raise ValueError("Language name cannot be empty")

        if len(self.code) != 2 or not self.code.isalpha():
            raise ValueError("Language code must be an ISO 639-1 code")

        self.code = self.code.lower()
