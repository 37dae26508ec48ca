"""Site repository on the Redis document store.

Sites live in a single hash of id -> JSON document.
"""

import json
from datetime import datetime
from uuid import UUID

from redis.asyncio import Redis

from src.domain.entities.site import Site
from src.infrastructure.documents.document_keys import DocumentKeys


class RedisSiteRepository:
    """Redis implementation of SiteRepository protocol."""

    def __init__(self, redis_client: Redis, keys: DocumentKeys) -> None:
        """Initialize repository.

        Args:
            redis_client: Async Redis client.
            keys: Key builder.
        """
        self._redis = redis_client
        self._keys = keys

    async def count(self) -> int:
        """Count stored sites."""
        return await self._redis.hlen(self._keys.sites())

    async def create(self, site: Site) -> None:
        """Insert a new site, keeping its id.

        Args:
            site: Site to insert.
        """
        await self._redis.hset(
            self._keys.sites(), str(site.id), json.dumps(self._to_document(site))
        )

    async def find_by_id(self, site_id: UUID) -> Site | None:
        """Find site by ID.

        Args:
            site_id: Site identifier.

        Returns:
            Site if found, None otherwise.
        """
        raw = await self._redis.hget(self._keys.sites(), str(site_id))
        if raw is None:
            return None
        return self._to_entity(json.loads(raw))

    async def find_server_admin_site(self) -> Site | None:
        """Find the oldest server admin site."""
        sites = [site for site in await self._all_sites() if site.is_server_admin_site]
        return sites[0] if sites else None

    async def find_first(self) -> Site | None:
        """Find the oldest site."""
        sites = await self._all_sites()
        return sites[0] if sites else None

    async def _all_sites(self) -> list[Site]:
        """Load every site, oldest first."""
        documents = await self._redis.hvals(self._keys.sites())
        sites = [self._to_entity(json.loads(raw)) for raw in documents]
        return sorted(sites, key=lambda site: (site.created_at, str(site.id)))

    def _to_document(self, site: Site) -> dict[str, object]:
        return {
            "id": str(site.id),
            "alias_id": site.alias_id,
            "site_name": site.site_name,
            "is_server_admin_site": site.is_server_admin_site,
            "theme": site.theme,
            "created_at": site.created_at.isoformat(),
        }

    def _to_entity(self, data: dict[str, object]) -> Site:
        return Site(
            id=UUID(str(data["id"])),
            alias_id=str(data["alias_id"]),
            site_name=str(data["site_name"]),
            is_server_admin_site=bool(data.get("is_server_admin_site", False)),
            theme=data.get("theme"),  # type: ignore[arg-type]
            created_at=datetime.fromisoformat(str(data["created_at"])),
        )
