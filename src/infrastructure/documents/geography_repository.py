"""Geography repository on the Redis document store.

Each reference collection is a Redis hash of id -> JSON document. Counts are
HLEN on the collection hash.
"""

import json
from typing import Any
from uuid import UUID

from redis.asyncio import Redis

from src.domain.entities.currency import Currency
from src.domain.entities.geo_country import GeoCountry
from src.domain.entities.geo_zone import GeoZone
from src.domain.entities.language import Language
from src.infrastructure.documents.document_keys import DocumentKeys


class RedisGeographyRepository:
    """Redis implementation of GeographyRepository protocol.

    Note: Does NOT inherit from GeographyRepository (structural typing).
    Redis errors propagate to the caller.
    """

    def __init__(self, redis_client: Redis, keys: DocumentKeys) -> None:
        """Initialize repository.

        Args:
            redis_client: Async Redis client.
            keys: Key builder.
        """
        self._redis = redis_client
        self._keys = keys

    async def count_countries(self) -> int:
        """Count stored countries."""
        return await self._redis.hlen(self._keys.countries())

    async def count_zones(self) -> int:
        """Count stored zones."""
        return await self._redis.hlen(self._keys.zones())

    async def count_languages(self) -> int:
        """Count stored languages."""
        return await self._redis.hlen(self._keys.languages())

    async def count_currencies(self) -> int:
        """Count stored currencies."""
        return await self._redis.hlen(self._keys.currencies())

    async def list_currencies(self) -> list[Currency]:
        """List every stored currency.

        Returns:
            Currencies ordered by code.
        """
        documents = await self._redis.hvals(self._keys.currencies())
        currencies = []
        for raw in documents:
            data = json.loads(raw)
            currencies.append(
                Currency(
                    id=UUID(data["id"]),
                    code=data["code"],
                    name=data["name"],
                    symbol=data.get("symbol", ""),
                    culture_code=data.get("culture_code", ""),
                )
            )
        return sorted(currencies, key=lambda currency: currency.code)

    async def add_country(self, country: GeoCountry) -> None:
        """Insert a country."""
        await self._put(
            self._keys.countries(),
            country.id,
            {
                "name": country.name,
                "iso_code2": country.iso_code2,
                "iso_code3": country.iso_code3,
            },
        )

    async def add_zone(self, zone: GeoZone) -> None:
        """Insert a zone."""
        await self._put(
            self._keys.zones(),
            zone.id,
            {
                "country_code": zone.country_code,
                "name": zone.name,
                "code": zone.code,
            },
        )

    async def add_language(self, language: Language) -> None:
        """Insert a language."""
        await self._put(
            self._keys.languages(),
            language.id,
            {
                "name": language.name,
                "code": language.code,
                "sort_rank": language.sort_rank,
            },
        )

    async def add_currency(self, currency: Currency) -> None:
        """Insert a currency."""
        await self._put(
            self._keys.currencies(),
            currency.id,
            {
                "code": currency.code,
                "name": currency.name,
                "symbol": currency.symbol,
                "culture_code": currency.culture_code,
            },
        )

    async def _put(self, key: str, record_id: UUID, fields: dict[str, Any]) -> None:
        document = {"id": str(record_id), **fields}
        await self._redis.hset(key, str(record_id), json.dumps(document))
