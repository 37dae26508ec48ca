"""Geography repository implementation.

SQLAlchemy implementation of the GeographyRepository protocol.
Maps between geography domain entities and reference-data database models.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.currency import Currency
from src.domain.entities.geo_country import GeoCountry
from src.domain.entities.geo_zone import GeoZone
from src.domain.entities.language import Language
from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.currency import Currency as CurrencyModel
from src.infrastructure.persistence.models.geo_country import (
    GeoCountry as GeoCountryModel,
)
from src.infrastructure.persistence.models.geo_zone import GeoZone as GeoZoneModel
from src.infrastructure.persistence.models.language import Language as LanguageModel


class GeographyRepository:
    """SQLAlchemy implementation of GeographyRepository protocol.

    **Implementation Notes**:
    - Each ``add_*`` call adds one row and flushes, so constraint violations
      surface on the call that caused them
    - Commit is owned by the session scope, not the repository
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def count_countries(self) -> int:
        """Count stored countries."""
        return await self._count(GeoCountryModel)

    async def count_zones(self) -> int:
        """Count stored zones."""
        return await self._count(GeoZoneModel)

    async def count_languages(self) -> int:
        """Count stored languages."""
        return await self._count(LanguageModel)

    async def count_currencies(self) -> int:
        """Count stored currencies."""
        return await self._count(CurrencyModel)

    async def list_currencies(self) -> list[Currency]:
        """List every stored currency.

        Returns:
            Currencies ordered by code.
        """
        stmt = select(CurrencyModel).order_by(CurrencyModel.code)
        result = await self._session.execute(stmt)
        return [
            Currency(
                id=model.id,
                code=model.code,
                name=model.name,
                symbol=model.symbol,
                culture_code=model.culture_code,
            )
            for model in result.scalars().all()
        ]

    async def add_country(self, country: GeoCountry) -> None:
        """Insert a country.

        Args:
            country: Country to insert.
        """
        await self._add(
            GeoCountryModel(
                id=country.id,
                name=country.name,
                iso_code2=country.iso_code2,
                iso_code3=country.iso_code3,
            )
        )

    async def add_zone(self, zone: GeoZone) -> None:
        """Insert a zone.

        Args:
            zone: Zone to insert.
        """
        await self._add(
            GeoZoneModel(
                id=zone.id,
                country_code=zone.country_code,
                name=zone.name,
                code=zone.code,
            )
        )

    async def add_language(self, language: Language) -> None:
        """Insert a language.

        Args:
            language: Language to insert.
        """
        await self._add(
            LanguageModel(
                id=language.id,
                name=language.name,
                code=language.code,
                sort_rank=language.sort_rank,
            )
        )

    async def add_currency(self, currency: Currency) -> None:
        """Insert a currency.

        Args:
            currency: Currency to insert.
        """
        await self._add(
            CurrencyModel(
                id=currency.id,
                code=currency.code,
                name=currency.name,
                symbol=currency.symbol,
                culture_code=currency.culture_code,
            )
        )

    async def _count(self, model: type[BaseModel]) -> int:
        stmt = select(func.count()).select_from(model)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _add(self, model: BaseModel) -> None:
        self._session.add(model)
        await self._session.flush()
