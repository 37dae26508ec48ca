"""Country reference entity.

Countries are static reference data seeded once into an empty store.
They are not owned by any tenant.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class GeoCountry:
    """Country reference record.

    Attributes:
        id: Unique country identifier.
        name: English short name (e.g., "Canada").
        iso_code2: ISO 3166-1 alpha-2 code (e.g., "CA").
        iso_code3: ISO 3166-1 alpha-3 code (e.g., "CAN").

    Example:
        >>> country = GeoCountry(
        ...     id=uuid7(), name="Canada", iso_code2="CA", iso_code3="CAN"
        ... )
        >>> country.iso_code2
        'CA'
    """

    id: UUID
    name: str
    iso_code2: str
    iso_code3: str

    def __post_init__(self) -> None:
        """Validate country codes after initialization.

        Raises:
            ValueError: If name is empty or ISO codes have the wrong length.
        """
        if not self.name:
            raise ValueError("Country name cannot be empty")

        if len(self.iso_code2) != 2 or not self.iso_code2.isalpha():
            raise ValueError("Country iso_code2 must be 2 letters")

        if len(self.iso_code3) != 3 or not self.iso_code3.isalpha():
            raise ValueError("Country iso_code3 must be 3 letters")

        self.iso_code2 = self.iso_code2.upper()
        self.iso_code3 = self.iso_code3.upper()
