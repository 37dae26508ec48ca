"""Role repository on the Redis document store (tenant counts)."""

from redis.asyncio import Redis

from src.infrastructure.documents.document_keys import DocumentKeys


class RedisRoleRepository:
    """Redis implementation of RoleRepository protocol."""

    def __init__(self, redis_client: Redis, keys: DocumentKeys) -> None:
        """Initialize repository.

        Args:
            redis_client: Async Redis client.
            keys: Key builder.
        """
        self._redis = redis_client
        self._keys = keys

    async def count_by_tenant(self, tenant_id: str) -> int:
        """Count roles of a tenant.

        Args:
            tenant_id: Tenant identifier (site id string).

        Returns:
            Number of roles; 0 for unknown tenants.
        """
        return await self._redis.hlen(self._keys.site_roles(tenant_id))
