"""Currency reference entity.

Currencies are seeded once into an empty store and then only read.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Currency:
    """Currency reference record.

    Attributes:
        id: Unique currency identifier.
        code: ISO 4217 code (e.g., "EUR").
        name: Currency name (e.g., "Euro").
        symbol: Display symbol (e.g., "€").
        culture_code: Culture used for formatting (e.g., "fr-FR").

    Example:
        >>> currency = Currency(
        ...     id=uuid7(), code="eur", name="Euro", symbol="€", culture_code="fr-FR"
        ... )
        >>> currency.code
        'EUR'
    """

    id: UUID
    code: str
    name: str
    symbol: str = ""
    culture_code: str = ""

    def __post_init__(self) -> None:
        """Validate currency fields.

        Raises:
            ValueError: If name is empty or code is not 3 letters.
        """
        if not self.name:
            raise ValueError("Currency name cannot be empty")

        if len(self.code) != 3 or not self.code.isalpha():
            raise ValueError("Currency code must be an ISO 4217 code")

        self.code = self.code.upper()
