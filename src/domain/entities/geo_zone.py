"""Zone (state/province) reference entity.

A zone belongs to a country by ISO code only. No foreign key is enforced at
this layer, matching how the zone list is seeded straight after countries.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class GeoZone:
    """State or province reference record.

    Attributes:
        id: Unique zone identifier.
        country_code: ISO 3166-1 alpha-2 code of the owning country.
        name: Zone name (e.g., "Ontario").
        code: Postal abbreviation (e.g., "ON").
    """

    id: UUID
    country_code: str
    name: str
    code: str

    def __post_init__(self) -> None:
        """Validate zone fields.

        Raises:
            ValueError: If name or code is empty, or country_code is not 2 letters.
        """
        if not self.name:
            raise ValueError("Zone name cannot be empty")

        if not self.code:
            raise ValueError("Zone code cannot be empty")

        if len(self.country_code) != 2:
            raise ValueError("Zone country_code must be an ISO alpha-2 code")

        self.country_code = self.country_code.upper()
