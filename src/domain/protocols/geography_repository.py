"""Geography repository protocol.

Defines the interface for reference geography persistence: countries, zones
(states/provinces), languages and currencies. These records are seeded once
into an empty store and then only read.
"""

from typing import Protocol

from src.domain.entities.currency import Currency
from src.domain.entities.geo_country import GeoCountry
from src.domain.entities.geo_zone import GeoZone
from src.domain.entities.language import Language


class GeographyRepository(Protocol):
    """Protocol for reference geography persistence.

    Infrastructure provides concrete implementations (SQLAlchemy, Redis).

    **Design Principles**:
    - Counts are the existence guards used by seeding
    - ``add_*`` methods insert exactly one record and never upsert
    - Records are not tenant-scoped
    """

    async def count_countries(self) -> int:
        """Count stored countries.

        Returns:
            Number of country records.
        """
        ...

    async def count_zones(self) -> int:
        """Count stored zones (states/provinces).

        Returns:
            Number of zone records.
        """
        ...

    async def count_languages(self) -> int:
        """Count stored languages.

        Returns:
            Number of language records.
        """
        ...

    async def count_currencies(self) -> int:
        """Count stored currencies.

        Returns:
            Number of currency records.
        """
        ...

    async def list_currencies(self) -> list[Currency]:
        """List every stored currency.

        Returns:
            All currencies ordered by code.
        """
        ...

    async def add_country(self, country: GeoCountry) -> None:
        """Insert a country.

        Args:
            country: Country to insert.
        """
        ...

    async def add_zone(self, zone: GeoZone) -> None:
        """Insert a zone.

        Args:
            zone: Zone to insert.
        """
        ...

    async def add_language(self, language: Language) -> None:
        """Insert a language.

        Args:
            language: Language to insert.
        """
        ...

    async def add_currency(self, currency: Currency) -> None:
        """Insert a currency.

        Args:
            currency: Currency to insert.
        """
        ...
