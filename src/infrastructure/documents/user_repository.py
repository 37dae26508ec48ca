"""User repository on the Redis document store.

Users and roles are stored per site. Membership is a set of role ids per
user, and a role index maps each role id back to its site so members can be
resolved to role documents.
"""

import json
from uuid import UUID

from redis.asyncio import Redis

from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.infrastructure.documents.document_keys import DocumentKeys


class RedisUserRepository:
    """Redis implementation of UserRepository protocol.

    **Implementation Notes**:
    - Role creation writes the role document and the role index in one
      MULTI/EXEC pipeline
    - Membership uses SADD, so repeated adds are no-ops
    """

    def __init__(self, redis_client: Redis, keys: DocumentKeys) -> None:
        """Initialize repository.

        Args:
            redis_client: Async Redis client.
            keys: Key builder.
        """
        self._redis = redis_client
        self._keys = keys

    async def count_by_tenant(self, tenant_id: str) -> int:
        """Count users of a tenant.

        Args:
            tenant_id: Tenant identifier (site id string).

        Returns:
            Number of users; 0 for unknown tenants.
        """
        return await self._redis.hlen(self._keys.site_users(tenant_id))

    async def create(self, user: User) -> None:
        """Insert a new user.

        Args:
            user: User with site_id set.

        Raises:
            ValueError: If the user has no site.
        """
        if user.site_id is None:
            raise ValueError("User must belong to a site before it is created")

        document = {
            "id": str(user.id),
            "site_id": str(user.site_id),
            "email": user.email,
            "normalized_email": user.normalized_email,
            "user_name": user.user_name,
            "normalized_user_name": user.normalized_user_name,
            "display_name": user.display_name,
            "password_hash": user.password_hash,
            "email_confirmed": user.email_confirmed,
            "must_change_password": user.must_change_password,
            "account_approved": user.account_approved,
            "created_at": user.created_at.isoformat(),
        }
        await self._redis.hset(
            self._keys.site_users(user.site_id), str(user.id), json.dumps(document)
        )

    async def create_role(self, role: Role) -> None:
        """Insert a new role.

        Args:
            role: Role with site_id set.

        Raises:
            ValueError: If the role has no site.
        """
        if role.site_id is None:
            raise ValueError("Role must belong to a site before it is created")

        document = {
            "id": str(role.id),
            "site_id": str(role.site_id),
            "role_name": role.role_name,
            "normalized_role_name": role.normalized_role_name,
        }
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.hset(self._keys.site_roles(role.site_id), str(role.id), json.dumps(document))
            pipe.hset(self._keys.role_sites(), str(role.id), str(role.site_id))
            await pipe.execute()

    async def fetch_role(self, site_id: UUID, role_name: str) -> Role | None:
        """Find a site role by name (case-insensitive).

        Args:
            site_id: Owning site.
            role_name: Role name.

        Returns:
            Role if found, None otherwise.
        """
        normalized = role_name.upper()
        for raw in await self._redis.hvals(self._keys.site_roles(site_id)):
            data = json.loads(raw)
            if data["normalized_role_name"] == normalized:
                return self._to_role(data)
        return None

    async def add_user_to_role(self, role_id: UUID, user_id: UUID) -> None:
        """Add a user to a role (no-op if already a member).

        Args:
            role_id: Role identifier.
            user_id: User identifier.
        """
        await self._redis.sadd(self._keys.user_roles(user_id), str(role_id))

    async def list_roles_for_user(self, user_id: UUID) -> list[Role]:
        """List roles a user belongs to.

        Args:
            user_id: User identifier.

        Returns:
            Roles ordered by name. Role ids missing from the index are ignored.
        """
        roles = []
        for member in await self._redis.smembers(self._keys.user_roles(user_id)):
            role_id = member.decode("utf-8") if isinstance(member, bytes) else member
            site_id = await self._redis.hget(self._keys.role_sites(), role_id)
            if site_id is None:
                continue
            if isinstance(site_id, bytes):
                site_id = site_id.decode("utf-8")
            raw = await self._redis.hget(self._keys.site_roles(site_id), role_id)
            if raw is not None:
                roles.append(self._to_role(json.loads(raw)))
        return sorted(roles, key=lambda role: role.role_name)

    def _to_role(self, data: dict[str, str]) -> Role:
        return Role(
            id=UUID(data["id"]),
            site_id=UUID(data["site_id"]),
            role_name=data["role_name"],
            normalized_role_name=data["normalized_role_name"],
        )
